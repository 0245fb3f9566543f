"""
linker.py - the continuation returned by every successful check.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from . import validator

if TYPE_CHECKING:
    from .contract import Contract

C = TypeVar("C", bound="Contract")


class Linker(Generic[C]):
    """Points back at the contract that produced it.

    ``must(x).not_be_null().and_.be(y)`` - ``and_`` is the same contract
    object, so its value and argument name carry through the whole chain.
    """

    __slots__ = ("_linked",)

    def __init__(self, linked: C):
        validator.check_not_null(linked, "linked", "Argument linked cannot be null")
        self._linked = linked

    @property
    def and_(self) -> C:
        return self._linked

    def __repr__(self) -> str:
        return f"Linker(and_={self._linked!r})"
