"""
files.py - contracts for filesystem paths.

Key classes
-----------
FileContract
    A path expected to name a regular file: existence, extension, size and
    attribute checks.

DirectoryContract
    A path expected to name a directory: existence, attribute and emptiness
    checks.

Both accept ``str`` or any ``os.PathLike``.  Every check re-validates that the
path is not ``None`` before touching the filesystem, and ``os.stat`` errors
(e.g. a missing file asked for its size) propagate unchanged.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from . import utils, validator
from .contract import Contract
from .linker import Linker

__all__ = ["FileContract", "DirectoryContract"]


class _PathContract(Contract):
    """Checks shared by files and directories."""

    def _exists(self, path) -> bool:
        raise NotImplementedError

    def exist(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(self._exists, self._value, self._name, message)
        return self.linker

    def not_exist(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda p: not self._exists(p), self._value, self._name, message)
        return self.linker

    def be_read_only(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(utils._is_read_only, self._value, self._name, message)
        return self.linker

    def not_be_read_only(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda p: not utils._is_read_only(p), self._value, self._name, message)
        return self.linker

    def be_hidden(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(utils._is_hidden, self._value, self._name, message)
        return self.linker

    def not_be_hidden(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda p: not utils._is_hidden(p), self._value, self._name, message)
        return self.linker


class FileContract(_PathContract):

    def _exists(self, path) -> bool:
        return Path(path).is_file()

    def _size(self, message: Optional[str]) -> int:
        validator.check_not_null(self._value, self._name, message)
        return os.stat(self._value).st_size

    def have_extension(self, extension: str, message: Optional[str] = None) -> Linker:
        """Case-insensitive; ``"txt"`` and ``".txt"`` are the same extension."""
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(
            lambda p: utils._has_extension(p, extension), self._value, self._name, message
        )
        return self.linker

    def not_have_extension(self, extension: str, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(
            lambda p: not utils._has_extension(p, extension), self._value, self._name, message
        )
        return self.linker

    def be_empty(self, message: Optional[str] = None) -> Linker:
        validator.check_specific_value(0, self._size(message), self._name, message)
        return self.linker

    def not_be_empty(self, message: Optional[str] = None) -> Linker:
        validator.check_not_specific_value(0, self._size(message), self._name, message)
        return self.linker

    def have_size_equal_to(self, byte_size: int, message: Optional[str] = None) -> Linker:
        validator.check_specific_value(byte_size, self._size(message), self._name, message)
        return self.linker

    def not_have_size_equal_to(self, byte_size: int, message: Optional[str] = None) -> Linker:
        validator.check_not_specific_value(byte_size, self._size(message), self._name, message)
        return self.linker

    def have_size_greater_than(self, byte_size: int, message: Optional[str] = None) -> Linker:
        validator.check_greater_than(byte_size, self._size(message), self._name, message)
        return self.linker

    def have_size_greater_or_equal_to(self, byte_size: int, message: Optional[str] = None) -> Linker:
        validator.check_greater_or_equal(byte_size, self._size(message), self._name, message)
        return self.linker

    def have_size_less_than(self, byte_size: int, message: Optional[str] = None) -> Linker:
        validator.check_less_than(byte_size, self._size(message), self._name, message)
        return self.linker

    def have_size_less_or_equal_to(self, byte_size: int, message: Optional[str] = None) -> Linker:
        validator.check_less_or_equal(byte_size, self._size(message), self._name, message)
        return self.linker


class DirectoryContract(_PathContract):

    def _exists(self, path) -> bool:
        return Path(path).is_dir()

    def be_empty(self, message: Optional[str] = None) -> Linker:
        """No files and no subdirectories."""
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(utils._directory_is_empty, self._value, self._name, message)
        return self.linker

    def not_be_empty(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(
            lambda p: not utils._directory_is_empty(p), self._value, self._name, message
        )
        return self.linker
