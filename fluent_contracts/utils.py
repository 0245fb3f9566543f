"""
utils.py – shared, low-level predicates for the fluent-contracts package.

This module consolidates the helpers that typed contracts delegate to:
- Text classification (palindrome, alphanumeric, Luhn checksum)
- Format parsing (email, URL, IP address, GUID, Base64, hexadecimal)
- Filesystem attributes (hidden / read-only flags, extension matching)
- Stream capabilities (length, timeout support)

Every function here is a pure predicate; none of them raise on bad input.
"""

from __future__ import annotations

import base64
import binascii
import enum
import io
import ipaddress
import os
import socket
import stat
import string
import uuid
from email.utils import parseaddr
from pathlib import Path
from typing import Any, Union
from urllib.parse import urlsplit

__all__ = ["ParseOption"]

# --------------------------------------------------------------------------- #
# Text helpers                                                                #
# --------------------------------------------------------------------------- #

def _is_palindrome(value: str) -> bool:
    """Case-insensitive, whitespace-sensitive palindrome test."""
    lower = value.lower()
    start, end = 0, len(lower) - 1
    while start < end:
        if lower[start] != lower[end]:
            return False
        start += 1
        end -= 1
    return True


def _is_alphanumeric(value: str) -> bool:
    return all(ch.isalnum() for ch in value)


_CARD_SEPARATORS = frozenset("- ")

def _is_luhn_valid(value: str) -> bool:
    """Return True iff *value* is a Luhn-valid card number.

    Hyphens and spaces are skipped; any other non-digit fails immediately.
    """
    total = 0
    digits = 0
    for ch in reversed(value):
        if ch in _CARD_SEPARATORS:
            continue
        if ch not in string.digits:
            return False
        d = int(ch)
        if digits % 2 == 1:
            d *= 2
            if d > 9:
                d -= 9
        total += d
        digits += 1
    return digits > 0 and total % 10 == 0


# --------------------------------------------------------------------------- #
# Format parsing                                                              #
# --------------------------------------------------------------------------- #

class ParseOption(enum.Enum):
    EMAIL_ADDRESS = "email"
    URL = "url"
    IP_ADDRESS = "ip"
    GUID = "guid"
    BASE64 = "base64"
    HEXADECIMAL = "hex"


def _is_email(value: str) -> bool:
    _, addr = parseaddr(value)
    if not addr or any(ch.isspace() for ch in addr):
        return False
    local, at, domain = addr.rpartition("@")
    return bool(at and local and domain)


def _is_url(value: str) -> bool:
    """Absolute URI test: a scheme plus an authority or a path."""
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc or parts.path)


def _is_ip_address(value: str) -> bool:
    try:
        ipaddress.ip_address(value)
    except ValueError:
        return False
    return True


def _is_guid(value: str) -> bool:
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def _is_base64(value: str) -> bool:
    try:
        base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


def _is_hexadecimal(value: str) -> bool:
    if value[:2] in ("0x", "0X"):
        value = value[2:]
    return bool(value) and all(ch in string.hexdigits for ch in value)


_PARSERS = {
    ParseOption.EMAIL_ADDRESS: _is_email,
    ParseOption.URL: _is_url,
    ParseOption.IP_ADDRESS: _is_ip_address,
    ParseOption.GUID: _is_guid,
    ParseOption.BASE64: _is_base64,
    ParseOption.HEXADECIMAL: _is_hexadecimal,
}

def _try_parse(option: ParseOption, value: str) -> bool:
    """Return True iff *value* parses as *option*.

    An unknown *option* raises :class:`ValueError` (caller misuse, not a
    contract violation).
    """
    try:
        parser = _PARSERS[ParseOption(option)]
    except (KeyError, ValueError) as exc:
        raise ValueError(f"Unsupported parse option: {option!r}") from exc
    return parser(value)


# --------------------------------------------------------------------------- #
# Filesystem helpers                                                          #
# --------------------------------------------------------------------------- #

PathLike = Union[str, "os.PathLike[str]"]

def _normalise_extension(extension: str) -> str:
    """``"txt"`` and ``".txt"`` both become ``".txt"``."""
    return extension if extension.startswith(".") else "." + extension


def _has_extension(path: PathLike, extension: str) -> bool:
    return Path(path).suffix.lower() == _normalise_extension(extension).lower()


def _is_hidden(path: PathLike) -> bool:
    """Hidden attribute on Windows, leading dot elsewhere."""
    p = Path(path)
    attrs = getattr(p.stat(), "st_file_attributes", None)
    if attrs is not None:
        return bool(attrs & stat.FILE_ATTRIBUTE_HIDDEN)
    return p.name.startswith(".")


def _is_read_only(path: PathLike) -> bool:
    """Read-only attribute on Windows, no owner write bit elsewhere."""
    st = Path(path).stat()
    attrs = getattr(st, "st_file_attributes", None)
    if attrs is not None:
        return bool(attrs & stat.FILE_ATTRIBUTE_READONLY)
    return not st.st_mode & stat.S_IWUSR


def _directory_is_empty(path: PathLike) -> bool:
    with os.scandir(path) as it:
        return next(it, None) is None


# --------------------------------------------------------------------------- #
# Stream helpers                                                              #
# --------------------------------------------------------------------------- #

def _stream_length(stream: io.IOBase) -> int:
    """Total length of a seekable stream; the current position is restored."""
    position = stream.tell()
    try:
        return stream.seek(0, io.SEEK_END)
    finally:
        stream.seek(position)


def _can_timeout(stream: Any) -> bool:
    """True when *stream* (or a layer it wraps) is backed by a socket."""
    seen = set()
    layer = stream
    while layer is not None and id(layer) not in seen:
        seen.add(id(layer))
        if isinstance(layer, (socket.socket, socket.SocketIO)):
            return True
        if callable(getattr(layer, "gettimeout", None)):
            return True
        layer = getattr(layer, "raw", None) or getattr(layer, "buffer", None) or getattr(layer, "_sock", None)
    return False
