# fluent_contracts/docs.py
from __future__ import annotations

import logging
from typing import Iterable, Mapping, Optional, Sequence

from .registry import SUPPORTED_CHECKS

__all__ = ["to_markdown"]

log = logging.getLogger(__name__)


def _format_list(v: Sequence[str]) -> str:
    """Return a bulleted Markdown list (no surrounding blank lines)."""
    return "\n".join(f"- `{item}`" for item in v)


def to_markdown(
    registry: Mapping[str, Sequence[str]] = SUPPORTED_CHECKS,
    *,
    heading_level: int = 2,
    contracts: Optional[Iterable[str]] = None,
) -> str:
    """
    Render *registry* as a "supported checks" Markdown document.

    Parameters
    ----------
    registry : Mapping[str, Sequence[str]]
        Contract display name -> method names, in the order to print them.
    heading_level : int, default 2
        Markdown heading level for each contract (##, ###, …).
    contracts : Iterable[str], optional
        Restrict the output to these contract names.  Unknown names raise
        :class:`KeyError`.

    Returns
    -------
    str
        Markdown document.
    """
    if heading_level < 1:
        raise ValueError(f"heading_level must be >= 1, got {heading_level}")

    names = list(registry) if contracts is None else list(contracts)
    unknown = [n for n in names if n not in registry]
    if unknown:
        raise KeyError(f"Unknown contract(s): {unknown}")

    h = "#" * heading_level
    parts: list[str] = []
    for name in names:
        log.debug("Rendering %s (%d checks)", name, len(registry[name]))
        parts.append(f"{h} {name}")
        parts.append("")
        parts.append(_format_list(registry[name]))
        parts.append("")             # blank line after each section
    return "\n".join(parts).rstrip() + "\n"
