"""
contract.py - the contract every fluent chain starts from.

Key classes
-----------
Contract
    Wraps a value and its argument name; carries the checks that apply to
    any type (null, equality, membership, custom condition).

ComparableContract
    Adds inclusive range and ordering checks.

ObjectContract
    Fallback for values with no dedicated contract; adds type checks.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from . import validator
from .errors import ErrorFactory
from .linker import Linker

__all__ = ["DEFAULT_ARGUMENT_NAME", "Contract", "ComparableContract", "ObjectContract"]

DEFAULT_ARGUMENT_NAME = "argument"


class Contract:
    """Baseline checks shared by every contract."""

    def __init__(self, value: Any, name: str = DEFAULT_ARGUMENT_NAME):
        self._value = value
        self._name = name
        self._linker: Optional[Linker] = None

    @property
    def value(self) -> Any:
        return self._value

    @property
    def name(self) -> str:
        return self._name

    @property
    def linker(self) -> Linker:
        """The chain continuation, created once and reused for every check."""
        if self._linker is None:
            self._linker = Linker(self)
        return self._linker

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r}, name={self._name!r})"

    # ------------------------------ null ---------------------------------- #

    def not_be_null(self, message: Optional[str] = None, *, error: Optional[ErrorFactory] = None) -> Linker:
        if error is not None:
            validator.check_not_null_or_raise(self._value, error, message)
        else:
            validator.check_not_null(self._value, self._name, message)
        return self.linker

    def be_null(self, message: Optional[str] = None) -> Linker:
        validator.check_null(self._value, self._name, message)
        return self.linker

    # ---------------------------- equality -------------------------------- #

    def be(self, expected: Any, message: Optional[str] = None, *, error: Optional[ErrorFactory] = None) -> Linker:
        if error is not None:
            validator.check_specific_value_or_raise(expected, self._value, error, message)
        else:
            validator.check_specific_value(expected, self._value, self._name, message)
        return self.linker

    def not_be(self, expected: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_specific_value(expected, self._value, self._name, message)
        return self.linker

    def be_any_of(self, *values: Any, message: Optional[str] = None) -> Linker:
        validator.check_any_of(values, self._value, self._name, message)
        return self.linker

    def not_be_any_of(self, *values: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_any_of(values, self._value, self._name, message)
        return self.linker

    # ---------------------------- terminal -------------------------------- #

    def satisfy(
        self,
        predicate: Callable[[Any], bool],
        message: Optional[str] = None,
        *,
        error: Optional[ErrorFactory] = None,
    ) -> None:
        """Run a caller-supplied condition; ends the chain.

        Raises :class:`~fluent_contracts.errors.ArgumentConditionError`, or
        the exception built from *error* when one is given (a ``None`` value
        raises that exception too, before *predicate* runs).
        """
        if error is not None:
            validator.check_condition_or_raise(predicate, self._value, error, message)
        else:
            validator.check_custom_condition(predicate, self._value, self._name, message)


class ComparableContract(Contract):
    """Contract for values with a total order."""

    def be_between(self, low: Any, high: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_between(low, high, self._value, self._name, message)
        return self.linker

    def be_greater_than(self, bound: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_greater_than(bound, self._value, self._name, message)
        return self.linker

    def be_greater_or_equal_to(self, bound: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_greater_or_equal(bound, self._value, self._name, message)
        return self.linker

    def be_less_than(self, bound: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_less_than(bound, self._value, self._name, message)
        return self.linker

    def be_less_or_equal_to(self, bound: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_less_or_equal(bound, self._value, self._name, message)
        return self.linker


class ObjectContract(Contract):
    """Any value without a dedicated contract."""

    def be_of_type(self, expected_type: type, message: Optional[str] = None) -> Linker:
        """Exact type match; subclasses do not count."""
        validator.check_generic_condition(lambda v: type(v) is expected_type, self._value, self._name, message)
        return self.linker

    def not_be_of_type(self, expected_type: type, message: Optional[str] = None) -> Linker:
        validator.check_generic_condition(lambda v: type(v) is not expected_type, self._value, self._name, message)
        return self.linker

    def be_assignable_to(self, target_type: type, message: Optional[str] = None) -> Linker:
        validator.check_generic_condition(lambda v: isinstance(v, target_type), self._value, self._name, message)
        return self.linker

    def not_be_assignable_to(self, target_type: type, message: Optional[str] = None) -> Linker:
        validator.check_generic_condition(lambda v: not isinstance(v, target_type), self._value, self._name, message)
        return self.linker
