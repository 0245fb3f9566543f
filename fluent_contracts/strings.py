"""
strings.py - the ``str`` contract.

Besides emptiness, casing and substring checks it carries the text
classifiers: palindrome, alphanumeric, parse formats (see
:class:`~fluent_contracts.utils.ParseOption`) and Luhn card numbers.
"""

from __future__ import annotations

from typing import Optional

from . import validator
from .contract import ComparableContract
from .linker import Linker
from .utils import ParseOption

__all__ = ["StringContract"]


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


class StringContract(ComparableContract):

    # ----------------------------- emptiness ------------------------------ #

    def be_empty(self, message: Optional[str] = None) -> Linker:
        validator.check_specific_value("", self._value, self._name, message)
        return self.linker

    def not_be_empty(self, message: Optional[str] = None) -> Linker:
        validator.check_not_specific_value("", self._value, self._name, message)
        return self.linker

    def be_null_or_empty(self, message: Optional[str] = None) -> Linker:
        validator.check_generic_condition(lambda v: not v, self._value, self._name, message)
        return self.linker

    def not_be_null_or_empty(self, message: Optional[str] = None) -> Linker:
        validator.check_generic_condition(lambda v: bool(v), self._value, self._name, message)
        return self.linker

    def be_white_space(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(_is_blank, self._value, self._name, message)
        return self.linker

    def not_be_white_space(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda v: not _is_blank(v), self._value, self._name, message)
        return self.linker

    def be_null_or_white_space(self, message: Optional[str] = None) -> Linker:
        validator.check_generic_condition(_is_blank, self._value, self._name, message)
        return self.linker

    def not_be_null_or_white_space(self, message: Optional[str] = None) -> Linker:
        validator.check_generic_condition(lambda v: not _is_blank(v), self._value, self._name, message)
        return self.linker

    # ------------------------------- casing ------------------------------- #

    def be_uppercase(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_specific_value(self._value.upper(), self._value, self._name, message)
        return self.linker

    def not_be_uppercase(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_specific_value(self._value.upper(), self._value, self._name, message)
        return self.linker

    def be_lowercase(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_specific_value(self._value.lower(), self._value, self._name, message)
        return self.linker

    def not_be_lowercase(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_specific_value(self._value.lower(), self._value, self._name, message)
        return self.linker

    # ----------------------------- substrings ----------------------------- #

    def contain(self, substring: str, message: Optional[str] = None) -> Linker:
        """Case-insensitive substring test."""
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(
            lambda v: substring.casefold() in v.casefold(), self._value, self._name, message
        )
        return self.linker

    def not_contain(self, substring: str, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(
            lambda v: substring.casefold() not in v.casefold(), self._value, self._name, message
        )
        return self.linker

    # ---------------------------- classifiers ----------------------------- #

    def be_palindrome(self, message: Optional[str] = None) -> Linker:
        """Case-insensitive; whitespace and punctuation are compared as-is."""
        validator.check_not_null(self._value, self._name, message)
        validator.check_palindrome(self._value, self._name, message)
        return self.linker

    def not_be_palindrome(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_palindrome(self._value, self._name, message)
        return self.linker

    def be_alphanumeric(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_alphanumeric(self._value, self._name, message)
        return self.linker

    def not_be_alphanumeric(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_alphanumeric(self._value, self._name, message)
        return self.linker

    def be_parsable_as(self, option: ParseOption, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_parsed(option, self._value, self._name, message)
        return self.linker

    def not_be_parsable_as(self, option: ParseOption, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_parsed(option, self._value, self._name, message)
        return self.linker

    def be_credit_card_number(self, message: Optional[str] = None) -> Linker:
        """Luhn checksum; hyphens and spaces between digit groups are allowed."""
        validator.check_not_null(self._value, self._name, message)
        validator.check_credit_card_number(self._value, self._name, message)
        return self.linker

    def not_be_credit_card_number(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_credit_card_number(self._value, self._name, message)
        return self.linker
