"""
cli.py - ``fluent-contracts-docs`` / ``python -m fluent_contracts``
===================================================================

Writes the "supported checks" Markdown document built from
:data:`fluent_contracts.registry.SUPPORTED_CHECKS`.

Public API
----------
`build_arg_parser() -> argparse.ArgumentParser`
    Flags: ``--output``, ``--heading-level``, ``--contracts``,
    ``--verbosity`` and ``--config``.

`parse_options(argv=None) -> dict`
    Parse *argv* into a plain ``dict`` of options.  ``--config FILE`` (a JSON
    object) overrides every other flag.

`main(argv=None) -> int`
    Entry point for the console script.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from .docs import to_markdown
from .registry import SUPPORTED_CHECKS

__all__ = ["build_arg_parser", "parse_options", "main"]

log = logging.getLogger(__name__)

_DEFAULTS: dict[str, Any] = {
    "output": None,
    "heading_level": 2,
    "contracts": None,
    "verbosity": "WARNING",
}
_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# --------------------------------------------------------------------------- #
# Parser builder                                                              #
# --------------------------------------------------------------------------- #

def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fluent-contracts-docs",
        description="Render the list of supported contract checks as Markdown.",
        fromfile_prefix_chars="@",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="JSON file containing all options; overrides all other flags.",
    )
    p.add_argument(
        "--output", "-o",
        metavar="PATH",
        default=argparse.SUPPRESS,
        help="Write the document here ('-' or absent: stdout).",
    )
    p.add_argument(
        "--heading-level",
        dest="heading_level",
        type=int,
        default=argparse.SUPPRESS,
        help="Markdown heading level for each contract (default 2).",
    )
    p.add_argument(
        "--contracts",
        nargs="+",
        metavar="NAME",
        choices=list(SUPPORTED_CHECKS),
        default=argparse.SUPPRESS,
        help="Only document these contracts.",
    )
    p.add_argument(
        "--verbosity",
        choices=_LEVELS,
        default=argparse.SUPPRESS,
        help="Log level threshold (default WARNING).",
    )
    return p

# --------------------------------------------------------------------------- #
# Option parsing                                                              #
# --------------------------------------------------------------------------- #

def parse_options(argv: Sequence[str] | None = None) -> dict[str, Any]:
    """Return the effective options for *argv* (defaults filled in).

    Raises
    ------
    FileNotFoundError
        ``--config`` names a missing file.
    ValueError
        The config file is not a JSON object or holds unknown keys.
    """
    parser = build_arg_parser()
    ns_dict = vars(parser.parse_args(sys.argv[1:] if argv is None else list(argv)))

    # --config overrides everything else -----------------------------------
    if config_file := ns_dict.pop("config", None):
        cfg_path = Path(config_file)
        if not cfg_path.is_file():
            raise FileNotFoundError(cfg_path)
        cfg = json.loads(cfg_path.read_text(encoding="utf-8"))
        if not isinstance(cfg, dict):
            raise ValueError(f"{cfg_path} must contain a JSON object")
        unknown = sorted(set(cfg) - set(_DEFAULTS))
        if unknown:
            raise ValueError(f"Unknown option(s) in {cfg_path}: {unknown}")
        ns_dict = cfg

    return {**_DEFAULTS, **ns_dict}

# --------------------------------------------------------------------------- #
# Entry point                                                                 #
# --------------------------------------------------------------------------- #

def main(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    try:
        opts = parse_options(argv)
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    verbosity = str(opts["verbosity"]).upper()
    if verbosity not in _LEVELS:
        parser.error(f"invalid verbosity: {opts['verbosity']!r}")
    logging.basicConfig(
        level=getattr(logging, verbosity),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        text = to_markdown(
            SUPPORTED_CHECKS,
            heading_level=int(opts["heading_level"]),
            contracts=opts["contracts"],
        )
    except (KeyError, ValueError) as exc:
        parser.error(str(exc))

    if opts["output"] and opts["output"] != "-":
        out = Path(opts["output"])
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        log.info("Wrote %s", out)
    else:
        sys.stdout.write(text)
    return 0
