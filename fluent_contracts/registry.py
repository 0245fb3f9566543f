"""
registry.py - hand-maintained list of every supported check.

``SUPPORTED_CHECKS`` is the source for the generated "supported checks"
document.  Keep it in step with the contract classes; the test-suite compares
the two.
"""

from __future__ import annotations

from typing import Dict, Tuple, Type

from .collection import ArrayContract, DictionaryContract, ListContract
from .contract import Contract, ObjectContract
from .files import DirectoryContract, FileContract
from .frame import DataFrameContract
from .primitives import BoolContract, EnumContract, GuidContract, IntegerContract, NumberContract
from .streams import StreamContract
from .strings import StringContract
from .temporal import DateTimeContract, DurationContract

__all__ = ["SUPPORTED_CHECKS", "CONTRACT_TYPES"]

_BASE = (
    "not_be_null", "be_null",
    "be", "not_be",
    "be_any_of", "not_be_any_of",
    "satisfy",
)
_COMPARABLE = _BASE + (
    "be_between",
    "be_greater_than", "be_greater_or_equal_to",
    "be_less_than", "be_less_or_equal_to",
)
_NUMBER = _COMPARABLE + (
    "be_positive", "not_be_positive",
    "be_negative", "not_be_negative",
    "be_zero", "not_be_zero",
)
_COLLECTION = _BASE + (
    "be_empty", "not_be_empty",
    "have_count_equal_to", "not_have_count_equal_to",
    "have_count_greater_than", "have_count_greater_or_equal_to",
    "have_count_less_than", "have_count_less_or_equal_to",
    "have_count_between",
)
_SEQUENCE = _COLLECTION + ("contain", "not_contain", "have_elements_of_type")
_PATH = _BASE + (
    "exist", "not_exist",
    "be_read_only", "not_be_read_only",
    "be_hidden", "not_be_hidden",
    "be_empty", "not_be_empty",
)

SUPPORTED_CHECKS: Dict[str, Tuple[str, ...]] = {
    "Object": _BASE + ("be_of_type", "not_be_of_type", "be_assignable_to", "not_be_assignable_to"),
    "Bool": _COMPARABLE + ("be_true", "be_false"),
    "Number": _NUMBER,
    "Integer": _NUMBER + ("be_odd", "not_be_odd", "be_even", "not_be_even"),
    "Guid": _COMPARABLE + ("be_empty", "not_be_empty"),
    "Enum": _BASE + ("have_flag", "not_have_flag"),
    "String": _COMPARABLE + (
        "be_empty", "not_be_empty",
        "be_null_or_empty", "not_be_null_or_empty",
        "be_white_space", "not_be_white_space",
        "be_null_or_white_space", "not_be_null_or_white_space",
        "be_uppercase", "not_be_uppercase",
        "be_lowercase", "not_be_lowercase",
        "contain", "not_contain",
        "be_palindrome", "not_be_palindrome",
        "be_alphanumeric", "not_be_alphanumeric",
        "be_parsable_as", "not_be_parsable_as",
        "be_credit_card_number", "not_be_credit_card_number",
    ),
    "List": _SEQUENCE,
    "Array": _SEQUENCE,
    "Dictionary": _COLLECTION + (
        "contain_key", "not_contain_key",
        "contain_value", "not_contain_value",
        "contain_key_value_pair", "not_contain_key_value_pair",
    ),
    "DataFrame": _COLLECTION + ("have_columns", "not_have_columns", "have_no_missing_values"),
    "File": _PATH + (
        "have_extension", "not_have_extension",
        "have_size_equal_to", "not_have_size_equal_to",
        "have_size_greater_than", "have_size_greater_or_equal_to",
        "have_size_less_than", "have_size_less_or_equal_to",
    ),
    "Directory": _PATH,
    "Stream": _BASE + (
        "be_seekable", "not_be_seekable",
        "be_readable", "not_be_readable",
        "be_writable", "not_be_writable",
        "be_able_to_timeout", "not_be_able_to_timeout",
        "be_at_position", "not_be_at_position",
        "be_with_length", "not_be_with_length",
    ),
    "DateTime": _COMPARABLE + (
        "be_in_the_past", "not_be_in_the_past",
        "be_in_the_future", "not_be_in_the_future",
        "be_today", "not_be_today",
        "be_tomorrow", "not_be_tomorrow",
        "be_yesterday", "not_be_yesterday",
        "be_on_date", "not_be_on_date",
        "be_in_year", "not_be_in_year",
        "be_in_month", "not_be_in_month",
        "be_on_day", "not_be_on_day",
        "be_on_day_of_year", "not_be_on_day_of_year",
        "be_on_weekday",
        "be_weekend", "not_be_weekend",
        "be_weekday", "not_be_weekday",
        "be_leap_year", "not_be_leap_year",
        "be_utc", "not_be_utc",
        "be_local", "not_be_local",
        "be_in_daylight_saving", "not_be_in_daylight_saving",
    ),
    "Duration": _COMPARABLE + (
        "be_shorter_than", "not_be_shorter_than",
        "be_longer_than", "not_be_longer_than",
    ),
}

CONTRACT_TYPES: Dict[str, Type[Contract]] = {
    "Object": ObjectContract,
    "Bool": BoolContract,
    "Number": NumberContract,
    "Integer": IntegerContract,
    "Guid": GuidContract,
    "Enum": EnumContract,
    "String": StringContract,
    "List": ListContract,
    "Array": ArrayContract,
    "Dictionary": DictionaryContract,
    "DataFrame": DataFrameContract,
    "File": FileContract,
    "Directory": DirectoryContract,
    "Stream": StreamContract,
    "DateTime": DateTimeContract,
    "Duration": DurationContract,
}
