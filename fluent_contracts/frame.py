"""
frame.py - the ``pandas.DataFrame`` contract.

Counts are row counts.  Equality uses :meth:`pandas.DataFrame.equals`
because ``==`` on frames is element-wise.
"""

from __future__ import annotations

from typing import Any, Optional

import pandas as pd

from . import errors, validator
from .collection import CollectionContract
from .errors import ErrorFactory
from .linker import Linker

__all__ = ["DataFrameContract"]


def _frames_equal(a: Any, b: Any) -> bool:
    if a is None or b is None:
        return a is b
    return isinstance(a, pd.DataFrame) and isinstance(b, pd.DataFrame) and a.equals(b)


class DataFrameContract(CollectionContract):

    def be(self, expected: Any, message: Optional[str] = None, *, error: Optional[ErrorFactory] = None) -> Linker:
        if error is not None:
            if not _frames_equal(self._value, expected):
                errors.raise_user_defined(error, message)
        else:
            validator.check_generic_condition(lambda v: _frames_equal(v, expected), self._value, self._name, message)
        return self.linker

    def not_be(self, expected: Any, message: Optional[str] = None) -> Linker:
        validator.check_generic_condition(lambda v: not _frames_equal(v, expected), self._value, self._name, message)
        return self.linker

    def be_any_of(self, *values: Any, message: Optional[str] = None) -> Linker:
        validator.check_generic_condition(
            lambda v: any(_frames_equal(v, c) for c in values), self._value, self._name, message
        )
        return self.linker

    def not_be_any_of(self, *values: Any, message: Optional[str] = None) -> Linker:
        validator.check_generic_condition(
            lambda v: not any(_frames_equal(v, c) for c in values), self._value, self._name, message
        )
        return self.linker

    def have_columns(self, *columns: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_containing(columns, list(self._value.columns), self._name, message)
        return self.linker

    def not_have_columns(self, *columns: Any, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_containing(columns, list(self._value.columns), self._name, message)
        return self.linker

    def have_no_missing_values(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(
            lambda v: not v.isna().to_numpy().any(), self._value, self._name, message
        )
        return self.linker
