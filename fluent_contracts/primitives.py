"""
primitives.py - contracts for scalar values: booleans, numbers, UUIDs, enums.
"""

from __future__ import annotations

import uuid
from typing import Any, Optional

from . import validator
from .contract import ComparableContract, Contract
from .linker import Linker

__all__ = ["BoolContract", "NumberContract", "IntegerContract", "GuidContract", "EnumContract"]

NIL_UUID = uuid.UUID(int=0)


class BoolContract(ComparableContract):

    def be_true(self, message: Optional[str] = None) -> Linker:
        validator.check_specific_value(True, self._value, self._name, message)
        return self.linker

    def be_false(self, message: Optional[str] = None) -> Linker:
        validator.check_specific_value(False, self._value, self._name, message)
        return self.linker


class NumberContract(ComparableContract):
    """Real numbers: ``float``, ``Decimal``, ``Fraction`` and friends."""

    zero: Any = 0

    def be_positive(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_greater_than(self.zero, self._value, self._name, message)
        return self.linker

    def not_be_positive(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_less_or_equal(self.zero, self._value, self._name, message)
        return self.linker

    def be_negative(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_less_than(self.zero, self._value, self._name, message)
        return self.linker

    def not_be_negative(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_greater_or_equal(self.zero, self._value, self._name, message)
        return self.linker

    def be_zero(self, message: Optional[str] = None) -> Linker:
        validator.check_specific_value(self.zero, self._value, self._name, message)
        return self.linker

    def not_be_zero(self, message: Optional[str] = None) -> Linker:
        validator.check_not_specific_value(self.zero, self._value, self._name, message)
        return self.linker


class IntegerContract(NumberContract):

    def be_odd(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda v: v % 2 != 0, self._value, self._name, message)
        return self.linker

    def not_be_odd(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda v: v % 2 == 0, self._value, self._name, message)
        return self.linker

    def be_even(self, message: Optional[str] = None) -> Linker:
        return self.not_be_odd(message)

    def not_be_even(self, message: Optional[str] = None) -> Linker:
        return self.be_odd(message)


class GuidContract(ComparableContract):
    """``uuid.UUID`` values; "empty" is the nil UUID."""

    def be_empty(self, message: Optional[str] = None) -> Linker:
        validator.check_specific_value(NIL_UUID, self._value, self._name, message)
        return self.linker

    def not_be_empty(self, message: Optional[str] = None) -> Linker:
        validator.check_not_specific_value(NIL_UUID, self._value, self._name, message)
        return self.linker


class EnumContract(Contract):
    """``enum.Enum`` members; flag checks need an ``enum.Flag``."""

    def have_flag(self, flag: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda v: (v & flag) == flag, self._value, self._name, message)
        return self.linker

    def not_have_flag(self, flag: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda v: (v & flag) != flag, self._value, self._name, message)
        return self.linker
