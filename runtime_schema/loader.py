"""
loader.py - read and write schemas as JSON documents.

Schemas are plain JSON-compatible data, so a schema built in code can be
saved with :func:`dump_schema` and restored later with :func:`load_schema`.

Public API
----------
load_schema(path)   : read a JSON file and return a checked, fresh schema
loads_schema(text)  : same, from a JSON string
dump_schema(schema, path) : check *schema* and write it to disk
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any

from .model import Schema
from .predicates import check_schema

__all__ = ["load_schema", "loads_schema", "dump_schema"]

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------------- #
# Helpers                                                                     #
# --------------------------------------------------------------------------- #

def _read(path: Path) -> Any:
    """Read & parse a JSON file, raising crisp errors on failure."""
    try:
        with path.open(encoding="utf-8") as fd:
            return json.load(fd)
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Schema not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc

# --------------------------------------------------------------------------- #
# Public utilities                                                            #
# --------------------------------------------------------------------------- #

def loads_schema(text: str) -> dict:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON schema text: {exc}") from exc
    check_schema(data)
    return data


def load_schema(path: str | Path) -> dict:
    """Load the schema stored at *path*.

    Raises ``FileNotFoundError`` for a missing file, ``ValueError`` for
    malformed JSON and :class:`~runtime_schema.exceptions.SchemaError` when the
    JSON does not describe a schema.
    """
    p = Path(path)
    data = _read(p)
    check_schema(data)
    logger.debug("loaded schema from %s", p)
    return copy.deepcopy(data)


def dump_schema(schema: Schema, path: str | Path, *, indent: int = 2) -> None:
    """Write *schema* to *path* as UTF-8 JSON, creating parent directories."""
    check_schema(schema)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(schema, indent=indent, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.debug("wrote schema to %s", path)
