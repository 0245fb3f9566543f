"""
api.py - entry points that wrap a value in the matching contract.

Public API
----------
must(value, name=None)
    Pick a contract by the value's type (see ``_CONTRACT_MAP``) and wrap it.
must_file(path, name=None) / must_directory(path, name=None)
    Paths are ambiguous, so the IO contracts have their own entry points.

When *name* is omitted it is read from the call site; ``"argument"`` is used
when that fails.
"""

from __future__ import annotations

import array
import datetime as _dt
import enum
import io
import numbers
import pathlib
import uuid
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Optional, Tuple, Type, Union

import pandas as pd

from .collection import ArrayContract, DictionaryContract, ListContract
from .contract import DEFAULT_ARGUMENT_NAME, Contract, ObjectContract
from .files import DirectoryContract, FileContract
from .frame import DataFrameContract
from .locator import caller_argument_name
from .primitives import BoolContract, EnumContract, GuidContract, IntegerContract, NumberContract
from .streams import StreamContract
from .strings import StringContract
from .temporal import DateTimeContract, DurationContract

__all__ = ["must", "must_file", "must_directory", "contract_for"]

# Order matters: bool and IntFlag are ints, str is a sequence.
_CONTRACT_MAP: Tuple[Tuple[Union[type, Tuple[type, ...]], Type[Contract]], ...] = (
    (bool, BoolContract),
    (enum.Enum, EnumContract),
    (numbers.Integral, IntegerContract),
    ((numbers.Real, Decimal), NumberContract),
    (str, StringContract),
    (uuid.UUID, GuidContract),
    (_dt.datetime, DateTimeContract),
    (_dt.timedelta, DurationContract),
    (pd.DataFrame, DataFrameContract),
    (Mapping, DictionaryContract),
    (list, ListContract),
    ((tuple, array.array), ArrayContract),
    (pathlib.PurePath, FileContract),
    (io.IOBase, StreamContract),
)


def contract_for(value: Any) -> Type[Contract]:
    """Return the contract class ``must`` would use for *value*."""
    for types, contract in _CONTRACT_MAP:
        if isinstance(value, types):
            return contract
    return ObjectContract


def _resolve(name: Optional[str], entry_point: str) -> str:
    if name is not None:
        return name
    # frames: _resolve -> entry point -> caller
    return caller_argument_name(entry_point, DEFAULT_ARGUMENT_NAME, depth=3)


def must(value: Any, name: Optional[str] = None) -> Any:
    """Wrap *value* in the contract matching its type."""
    return contract_for(value)(value, _resolve(name, "must"))


def must_file(path: Any, name: Optional[str] = None) -> FileContract:
    return FileContract(path, _resolve(name, "must_file"))


def must_directory(path: Any, name: Optional[str] = None) -> DirectoryContract:
    return DirectoryContract(path, _resolve(name, "must_directory"))
