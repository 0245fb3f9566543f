"""Shared helpers for the fluent-contracts test-suite (std-lib only)."""
from __future__ import annotations

import contextlib
import datetime as _dt
import os
import stat
import tempfile
from pathlib import Path
from typing import Optional

from fluent_contracts import DateTimeProvider

# ------------------------------------------------------------------ #
# Filesystem helpers                                                 #
# ------------------------------------------------------------------ #
@contextlib.contextmanager
def tmp_dir():
    """Yield a temporary directory Path that auto-cleans on exit."""
    td = tempfile.TemporaryDirectory()
    try:
        yield Path(td.name)
    finally:
        # read-only children would block cleanup
        for root, dirs, files in os.walk(td.name):
            for name in dirs + files:
                os.chmod(os.path.join(root, name), stat.S_IRWXU)
        td.cleanup()

def tmp_bytes_file(data: bytes = b"demo", suffix: str = "") -> Path:
    """Write *data* to a temp file and return its Path (caller must unlink)."""
    fh = tempfile.NamedTemporaryFile(delete=False, suffix=suffix)
    fh.close()
    Path(fh.name).write_bytes(data)
    return Path(fh.name)

# ------------------------------------------------------------------ #
# Clock                                                              #
# ------------------------------------------------------------------ #
class FixedDateTimeProvider(DateTimeProvider):
    """Always answers *moment*, converted to the requested timezone."""

    def __init__(self, moment: _dt.datetime):
        self.moment = moment

    def now(self, tz: Optional[_dt.tzinfo] = None) -> _dt.datetime:
        if tz is None:
            return self.moment.replace(tzinfo=None)
        return self.moment.astimezone(tz)
