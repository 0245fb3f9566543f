"""
comparison.py - equality and ordering primitives shared by every validator.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "equal",
    "not_equal",
    "greater_than",
    "less_than",
    "greater_or_equal",
    "less_or_equal",
]


def equal(a: Any, b: Any) -> bool:
    return bool(a == b)


def not_equal(a: Any, b: Any) -> bool:
    return not equal(a, b)


def greater_than(a: Any, b: Any) -> bool:
    """Return True iff *a* sorts strictly after *b*."""
    return bool(a > b)


def less_than(a: Any, b: Any) -> bool:
    """Return True iff *a* sorts strictly before *b*."""
    return bool(a < b)


def greater_or_equal(a: Any, b: Any) -> bool:
    return bool(a >= b)


def less_or_equal(a: Any, b: Any) -> bool:
    return bool(a <= b)
