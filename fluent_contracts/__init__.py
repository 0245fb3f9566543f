"""
fluent_contracts – fluent argument validation.

    must(order_id).not_be_null().and_.be_greater_than(0)

Every check returns a :class:`Linker`; ``.and_`` hands back the same contract
so checks read left to right and stop at the first failure.
"""
from .api import contract_for, must, must_directory, must_file
from .collection import ArrayContract, CollectionContract, DictionaryContract, ListContract
from .contract import DEFAULT_ARGUMENT_NAME, ComparableContract, Contract, ObjectContract
from .errors import (
    ArgumentConditionError,
    ArgumentNullError,
    ArgumentOutOfRangeError,
    ContractError,
)
from .files import DirectoryContract, FileContract
from .frame import DataFrameContract
from .linker import Linker
from .primitives import BoolContract, EnumContract, GuidContract, IntegerContract, NumberContract
from .streams import StreamContract
from .strings import StringContract
from .temporal import DateTimeContract, DateTimeProvider, DurationContract, SystemDateTimeProvider
from .utils import ParseOption

__all__ = [
    "must",
    "must_file",
    "must_directory",
    "contract_for",
    "DEFAULT_ARGUMENT_NAME",
    "Contract",
    "ComparableContract",
    "ObjectContract",
    "BoolContract",
    "NumberContract",
    "IntegerContract",
    "GuidContract",
    "EnumContract",
    "StringContract",
    "CollectionContract",
    "ListContract",
    "ArrayContract",
    "DictionaryContract",
    "DataFrameContract",
    "FileContract",
    "DirectoryContract",
    "StreamContract",
    "DateTimeContract",
    "DurationContract",
    "DateTimeProvider",
    "SystemDateTimeProvider",
    "Linker",
    "ContractError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "ArgumentConditionError",
    "ParseOption",
]
