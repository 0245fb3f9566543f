#!/usr/bin/env python
"""
example_usage.py
================
Guarding a small scoring function with **fluent_contracts**.

This example demonstrates:
--------------------------
1. **Inferred names**: ``must(batch)`` reports ``batch`` in its errors
2. **Chaining**: ``.and_`` continues on the same contract
3. **Custom conditions**: ``satisfy`` with a user-defined exception
4. **Typed contracts**: DataFrame, string, path and datetime checks
"""
from __future__ import annotations

import datetime as dt
import logging
import tempfile
from pathlib import Path

import pandas as pd

from fluent_contracts import ContractError, ParseOption, must, must_directory

# --------------------------------------------------------------------------- #
# Logging Configuration                                                       #
# --------------------------------------------------------------------------- #
logging.basicConfig(
    level="INFO",
    format="%(asctime)s %(levelname)s %(message)s",
)
log = logging.getLogger("fluent_contracts.examples")


class ScoringError(Exception):
    pass


def score(batch: pd.DataFrame, owner: str, as_of: dt.datetime, out_dir: Path) -> float:
    must(batch).not_be_empty().and_.have_columns("id", "value").and_.have_no_missing_values()
    must(owner).not_be_null_or_white_space().and_.be_parsable_as(ParseOption.EMAIL_ADDRESS)
    must(as_of).be_in_the_past("Scores cannot be dated in the future").and_.be_weekday("Scores are only produced on weekdays")
    must_directory(out_dir).exist().and_.not_be_read_only()

    total = float(batch["value"].sum())
    must(total).satisfy(lambda t: t >= 0, "Negative batch total", error=ScoringError)
    return total


# --------------------------------------------------------------------------- #
# Run                                                                         #
# --------------------------------------------------------------------------- #
batch = pd.DataFrame({"id": [1, 2, 3], "value": [0.2, 0.5, 0.3]})
last_monday = dt.datetime.now() - dt.timedelta(days=dt.datetime.now().weekday() + 7)

with tempfile.TemporaryDirectory() as td:
    log.info("Total: %.2f", score(batch, "ops@example.com", last_monday, Path(td)))

    try:
        score(batch.iloc[0:0], "ops@example.com", last_monday, Path(td))
    except ContractError as exc:
        log.warning("Rejected (%s): %s", type(exc).__name__, exc)

    try:
        score(batch.assign(value=[-1.0, 0.0, 0.0]), "ops@example.com", last_monday, Path(td))
    except ScoringError as exc:
        log.warning("Rejected by scoring rule: %s", exc)
