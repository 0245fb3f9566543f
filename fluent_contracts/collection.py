"""
collection.py - contracts for sized containers.

Key classes
-----------
CollectionContract
    Emptiness and count comparisons (all bounds inclusive where a range is
    involved).

ListContract, ArrayContract
    ``list`` and fixed sequences (``tuple``, ``array.array``); add element
    containment and a uniform-element-type check.

DictionaryContract
    Mappings; add key, value and key/value-pair containment.
"""

from __future__ import annotations

from typing import Any, Hashable, Optional

from . import validator
from .contract import Contract
from .linker import Linker

__all__ = ["CollectionContract", "ListContract", "ArrayContract", "DictionaryContract"]


class CollectionContract(Contract):
    """Checks over ``len(value)``; ``None`` raises a null violation first."""

    def _count(self, message: Optional[str]) -> int:
        validator.check_not_null(self._value, self._name, message)
        return len(self._value)

    def be_empty(self, message: Optional[str] = None) -> Linker:
        validator.check_specific_value(0, self._count(message), self._name, message)
        return self.linker

    def not_be_empty(self, message: Optional[str] = None) -> Linker:
        validator.check_not_specific_value(0, self._count(message), self._name, message)
        return self.linker

    def have_count_equal_to(self, count: int, message: Optional[str] = None) -> Linker:
        validator.check_specific_value(count, self._count(message), self._name, message)
        return self.linker

    def not_have_count_equal_to(self, count: int, message: Optional[str] = None) -> Linker:
        validator.check_not_specific_value(count, self._count(message), self._name, message)
        return self.linker

    def have_count_greater_than(self, count: int, message: Optional[str] = None) -> Linker:
        validator.check_greater_than(count, self._count(message), self._name, message)
        return self.linker

    def have_count_greater_or_equal_to(self, count: int, message: Optional[str] = None) -> Linker:
        validator.check_greater_or_equal(count, self._count(message), self._name, message)
        return self.linker

    def have_count_less_than(self, count: int, message: Optional[str] = None) -> Linker:
        validator.check_less_than(count, self._count(message), self._name, message)
        return self.linker

    def have_count_less_or_equal_to(self, count: int, message: Optional[str] = None) -> Linker:
        validator.check_less_or_equal(count, self._count(message), self._name, message)
        return self.linker

    def have_count_between(self, low: int, high: int, message: Optional[str] = None) -> Linker:
        validator.check_between(low, high, self._count(message), self._name, message)
        return self.linker


class _SequenceContract(CollectionContract):

    def contain(self, *elements: Any, message: Optional[str] = None) -> Linker:
        """Every element must be present; order and duplicates are ignored."""
        validator.check_not_null(self._value, self._name, message)
        validator.check_containing(elements, self._value, self._name, message)
        return self.linker

    def not_contain(self, *elements: Any, message: Optional[str] = None) -> Linker:
        """Fails only when *all* of the elements are present."""
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_containing(elements, self._value, self._name, message)
        return self.linker

    def have_elements_of_type(self, element_type: type, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_type(self._value, element_type, self._name, message)
        return self.linker


class ListContract(_SequenceContract):
    pass


class ArrayContract(_SequenceContract):
    pass


class DictionaryContract(CollectionContract):

    def contain_key(self, key: Hashable, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_containing_key(key, self._value, self._name, message)
        return self.linker

    def not_contain_key(self, key: Hashable, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_containing_key(key, self._value, self._name, message)
        return self.linker

    def contain_value(self, value: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_containing_value(value, self._value, self._name, message)
        return self.linker

    def not_contain_value(self, value: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_containing_value(value, self._value, self._name, message)
        return self.linker

    def contain_key_value_pair(self, key: Hashable, value: Any, message: Optional[str] = None) -> Linker:
        """*key* is present and maps to a value equal to *value*."""
        validator.check_not_null(self._value, self._name, message)
        validator.check_containing_key_value_pair(key, value, self._value, self._name, message)
        return self.linker

    def not_contain_key_value_pair(self, key: Hashable, value: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_containing_key_value_pair(key, value, self._value, self._name, message)
        return self.linker
