"""
streams.py - the ``io.IOBase`` contract.

Length checks seek to the end and back; the stream's position is the same
after the check as before it.
"""

from __future__ import annotations

from typing import Optional

from . import utils, validator
from .contract import Contract
from .linker import Linker

__all__ = ["StreamContract"]


class StreamContract(Contract):

    def be_seekable(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda s: s.seekable(), self._value, self._name, message)
        return self.linker

    def not_be_seekable(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda s: not s.seekable(), self._value, self._name, message)
        return self.linker

    def be_readable(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda s: s.readable(), self._value, self._name, message)
        return self.linker

    def not_be_readable(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda s: not s.readable(), self._value, self._name, message)
        return self.linker

    def be_writable(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda s: s.writable(), self._value, self._name, message)
        return self.linker

    def not_be_writable(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda s: not s.writable(), self._value, self._name, message)
        return self.linker

    def be_able_to_timeout(self, message: Optional[str] = None) -> Linker:
        """Socket-backed streams can time out; files and buffers cannot."""
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(utils._can_timeout, self._value, self._name, message)
        return self.linker

    def not_be_able_to_timeout(self, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_generic_condition(lambda s: not utils._can_timeout(s), self._value, self._name, message)
        return self.linker

    def be_at_position(self, position: int, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_specific_value(position, self._value.tell(), self._name, message)
        return self.linker

    def not_be_at_position(self, position: int, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_specific_value(position, self._value.tell(), self._name, message)
        return self.linker

    def be_with_length(self, length: int, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_specific_value(length, utils._stream_length(self._value), self._name, message)
        return self.linker

    def not_be_with_length(self, length: int, message: Optional[str] = None) -> Linker:
        validator.check_not_null(self._value, self._name, message)
        validator.check_not_specific_value(length, utils._stream_length(self._value), self._name, message)
        return self.linker
