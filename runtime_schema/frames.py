"""
frames.py - validate tabular data held in a pandas DataFrame.

Each row is turned into a plain ``dict`` (column name -> cell) and checked
against the schema, typically an ``object`` or ``record`` schema.  Issue paths
start with the row's 0-based position, so ``/3/price`` is the ``price`` cell
of the fourth row regardless of the frame's index labels.
"""

from __future__ import annotations

import logging
from typing import Any, List

import pandas as pd

from .model import Schema, ValidationIssue
from .validator import validate

__all__ = ["validate_frame"]

logger = logging.getLogger(__name__)


def validate_frame(schema: Schema, frame: Any) -> List[ValidationIssue]:
    """Validate every row of *frame* against *schema*.

    Missing cells are passed through as pandas reports them: ``NaN`` in
    numeric columns (accepted by ``number()``) and ``None`` in object columns
    (accepted only by ``null()`` or ``any()``).
    """
    if not isinstance(frame, pd.DataFrame):
        raise TypeError(f"expected a pandas DataFrame, got {type(frame).__name__}")

    issues: List[ValidationIssue] = []
    for position, row in enumerate(frame.to_dict(orient="records")):
        issues.extend(validate(schema, row, path=f"/{position}"))
    logger.debug("validated %d row(s), %d issue(s)", len(frame), len(issues))
    return issues
