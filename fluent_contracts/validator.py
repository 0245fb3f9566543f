"""
validator.py - the single place where "does this satisfy the rule" is decided
===============================================================================

Every ``check_*`` function evaluates one predicate.  On success it returns
``None``; on failure it hands the argument name and optional message to
:pymod:`fluent_contracts.errors`, which raises.  Nothing here mutates state,
retries or logs.

The ``*_or_raise`` variants raise a caller-supplied exception instead of one
of the built-in kinds.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Mapping, Optional

from . import comparison, errors, utils
from .errors import ErrorFactory

__all__ = [
    "check_not_null",
    "check_null",
    "check_specific_value",
    "check_not_specific_value",
    "check_any_of",
    "check_not_any_of",
    "check_between",
    "check_greater_than",
    "check_greater_or_equal",
    "check_less_than",
    "check_less_or_equal",
    "check_generic_condition",
    "check_custom_condition",
    "check_containing",
    "check_not_containing",
    "check_type",
    "check_containing_key",
    "check_not_containing_key",
    "check_containing_value",
    "check_not_containing_value",
    "check_containing_key_value_pair",
    "check_not_containing_key_value_pair",
    "check_parsed",
    "check_not_parsed",
    "check_palindrome",
    "check_not_palindrome",
    "check_alphanumeric",
    "check_not_alphanumeric",
    "check_credit_card_number",
    "check_not_credit_card_number",
    "check_not_null_or_raise",
    "check_specific_value_or_raise",
    "check_condition_or_raise",
]

Message = Optional[str]

# --------------------------------------------------------------------------- #
# Null / equality / membership                                                #
# --------------------------------------------------------------------------- #

def check_not_null(value: Any, argument_name: str, message: Message = None) -> None:
    if value is not None:
        return
    errors.raise_argument_null(argument_name, message)


def check_null(value: Any, argument_name: str, message: Message = None) -> None:
    if value is None:
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_specific_value(expected: Any, actual: Any, argument_name: str, message: Message = None) -> None:
    if comparison.equal(expected, actual):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_not_specific_value(expected: Any, actual: Any, argument_name: str, message: Message = None) -> None:
    if comparison.not_equal(expected, actual):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_any_of(candidates: Iterable[Any], actual: Any, argument_name: str, message: Message = None) -> None:
    if any(comparison.equal(c, actual) for c in candidates):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_not_any_of(candidates: Iterable[Any], actual: Any, argument_name: str, message: Message = None) -> None:
    if all(comparison.not_equal(c, actual) for c in candidates):
        return
    errors.raise_argument_out_of_range(argument_name, message)


# --------------------------------------------------------------------------- #
# Ordering                                                                    #
# --------------------------------------------------------------------------- #

def check_between(low: Any, high: Any, actual: Any, argument_name: str, message: Message = None) -> None:
    """Inclusive on both ends."""
    if comparison.greater_or_equal(actual, low) and comparison.less_or_equal(actual, high):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_greater_than(bound: Any, actual: Any, argument_name: str, message: Message = None) -> None:
    if comparison.greater_than(actual, bound):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_greater_or_equal(bound: Any, actual: Any, argument_name: str, message: Message = None) -> None:
    if comparison.greater_or_equal(actual, bound):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_less_than(bound: Any, actual: Any, argument_name: str, message: Message = None) -> None:
    if comparison.less_than(actual, bound):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_less_or_equal(bound: Any, actual: Any, argument_name: str, message: Message = None) -> None:
    if comparison.less_or_equal(actual, bound):
        return
    errors.raise_argument_out_of_range(argument_name, message)


# --------------------------------------------------------------------------- #
# Conditions                                                                  #
# --------------------------------------------------------------------------- #

def check_generic_condition(
    predicate: Callable[[Any], bool], actual: Any, argument_name: str, message: Message = None
) -> None:
    """Range violation unless ``predicate(actual)``; used by typed contracts."""
    if predicate(actual):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_custom_condition(
    predicate: Callable[[Any], bool], actual: Any, argument_name: str, message: Message = None
) -> None:
    """Condition violation unless ``predicate(actual)``; backs ``satisfy``."""
    if predicate(actual):
        return
    errors.raise_condition_not_satisfied(argument_name, message)


# --------------------------------------------------------------------------- #
# Collections                                                                 #
# --------------------------------------------------------------------------- #

def _contains_all(collection: Iterable[Any], required: Iterable[Any]) -> bool:
    """Superset test; duplicates in *required* collapse and order is ignored."""
    wanted = list(required)
    if len(wanted) == 1:
        return wanted[0] in collection
    try:
        return set(collection).issuperset(wanted)
    except TypeError:  # unhashable elements
        items = list(collection)
        return all(w in items for w in wanted)


def check_containing(required: Iterable[Any], collection: Iterable[Any], argument_name: str, message: Message = None) -> None:
    if _contains_all(collection, required):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_not_containing(required: Iterable[Any], collection: Iterable[Any], argument_name: str, message: Message = None) -> None:
    if not _contains_all(collection, required):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_type(collection: Iterable[Any], element_type: type, argument_name: str, message: Message = None) -> None:
    if all(isinstance(e, element_type) for e in collection):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_containing_key(key: Hashable, mapping: Mapping, argument_name: str, message: Message = None) -> None:
    if key in mapping:
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_not_containing_key(key: Hashable, mapping: Mapping, argument_name: str, message: Message = None) -> None:
    if key not in mapping:
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_containing_value(value: Any, mapping: Mapping, argument_name: str, message: Message = None) -> None:
    if _contains_all(mapping.values(), [value]):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_not_containing_value(value: Any, mapping: Mapping, argument_name: str, message: Message = None) -> None:
    if not _contains_all(mapping.values(), [value]):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def _contains_pair(key: Hashable, value: Any, mapping: Mapping) -> bool:
    return key in mapping and comparison.equal(mapping[key], value)


def check_containing_key_value_pair(
    key: Hashable, value: Any, mapping: Mapping, argument_name: str, message: Message = None
) -> None:
    if _contains_pair(key, value, mapping):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_not_containing_key_value_pair(
    key: Hashable, value: Any, mapping: Mapping, argument_name: str, message: Message = None
) -> None:
    if not _contains_pair(key, value, mapping):
        return
    errors.raise_argument_out_of_range(argument_name, message)


# --------------------------------------------------------------------------- #
# Text                                                                        #
# --------------------------------------------------------------------------- #

def check_parsed(option: utils.ParseOption, value: str, argument_name: str, message: Message = None) -> None:
    if utils._try_parse(option, value):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_not_parsed(option: utils.ParseOption, value: str, argument_name: str, message: Message = None) -> None:
    if not utils._try_parse(option, value):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_palindrome(value: str, argument_name: str, message: Message = None) -> None:
    if utils._is_palindrome(value):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_not_palindrome(value: str, argument_name: str, message: Message = None) -> None:
    if not utils._is_palindrome(value):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_alphanumeric(value: str, argument_name: str, message: Message = None) -> None:
    if utils._is_alphanumeric(value):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_not_alphanumeric(value: str, argument_name: str, message: Message = None) -> None:
    if not utils._is_alphanumeric(value):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_credit_card_number(value: str, argument_name: str, message: Message = None) -> None:
    if utils._is_luhn_valid(value):
        return
    errors.raise_argument_out_of_range(argument_name, message)


def check_not_credit_card_number(value: str, argument_name: str, message: Message = None) -> None:
    if not utils._is_luhn_valid(value):
        return
    errors.raise_argument_out_of_range(argument_name, message)


# --------------------------------------------------------------------------- #
# User-defined exceptions                                                     #
# --------------------------------------------------------------------------- #

def check_not_null_or_raise(value: Any, error: ErrorFactory, message: Message = None) -> None:
    if value is not None:
        return
    errors.raise_user_defined(error, message)


def check_specific_value_or_raise(expected: Any, actual: Any, error: ErrorFactory, message: Message = None) -> None:
    if comparison.equal(expected, actual):
        return
    errors.raise_user_defined(error, message)


def check_condition_or_raise(
    predicate: Callable[[Any], bool], actual: Any, error: ErrorFactory, message: Message = None
) -> None:
    check_not_null_or_raise(actual, error, message)
    if predicate(actual):
        return
    errors.raise_user_defined(error, message)
