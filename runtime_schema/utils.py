"""
utils.py – low-level helpers for classifying untyped Python values.

This module consolidates the "what kind of value is this?" tests used by the
validation engine, plus the short value descriptions embedded in issue
messages.
"""

from __future__ import annotations

import numbers
import reprlib
from collections.abc import Mapping
from typing import Any

from .model import UNDEFINED

# --------------------------------------------------------------------------- #
# Value classification                                                        #
# --------------------------------------------------------------------------- #

def _is_number(value: Any) -> bool:
    """Real numbers, excluding ``bool`` (which subclasses ``int``)."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_sequence(value: Any) -> bool:
    """True for ``list``/``tuple`` values; strings never count."""
    return isinstance(value, (list, tuple))


def _is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def _is_key_list(value: Any) -> bool:
    """True for a list/tuple of ``str`` keys, e.g. an object's ``required``."""
    return _is_sequence(value) and all(isinstance(k, str) for k in value)

# --------------------------------------------------------------------------- #
# Display helpers                                                             #
# --------------------------------------------------------------------------- #

_repr = reprlib.Repr()
_repr.maxstring = 60
_repr.maxother = 60


def _describe(value: Any) -> str:
    """Short ``"<type> <repr>"`` description used in issue messages."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "None"
    return f"{type(value).__name__} {_repr.repr(value)}"


def _format_number(value: Any) -> str:
    """Render a number without a spurious ``.0`` for integral floats."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
