"""
model.py - the plain-data schema model shared by every other module.
====================================================================

A schema is an ordinary ``dict`` with a discriminant ``"type"`` key, so it can
be printed, compared, deep-copied and written to JSON without any special
support.  This module only holds the vocabulary (tag names, option keys) and
the two record types produced by validation.

Public API
----------
UNDEFINED
    Sentinel standing in for an absent value; the only value accepted by an
    ``undefined`` schema.

IssueKind
    The three kinds of validation issue.

ValidationIssue
    One reported failure: kind, message and path.
"""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping

__all__ = [
    "Schema",
    "UNDEFINED",
    "IssueKind",
    "ValidationIssue",
]

Schema = Mapping[str, Any]

# --------------------------------------------------------------------------- #
# Tags & keys                                                                 #
# --------------------------------------------------------------------------- #

ANY           = "any"
BOOLEAN       = "boolean"
NULL          = "null"
NUMBER        = "number"
STRING        = "string"
UNDEFINED_TAG = "undefined"
ARRAY         = "array"
OBJECT        = "object"
MODIFIED      = "modified"

KNOWN_TAGS = frozenset(
    {ANY, BOOLEAN, NULL, NUMBER, STRING, UNDEFINED_TAG, ARRAY, OBJECT, MODIFIED}
)

TYPE_KEY        = "type"
ITEMS_KEY       = "items"
PROPERTIES_KEY  = "properties"
REQUIRED_KEY    = "required"
ADDITIONAL_KEY  = "additionalProperties"
ITEM_KEY        = "item"        # payload of a modified wrapper
OPTIONAL_FLAG   = "optional"
READONLY_FLAG   = "readonly"

# builder keyword -> stored key
NUMBER_OPTIONS: Dict[str, str] = {
    "multiple_of":       "multipleOf",
    "maximum":           "maximum",
    "exclusive_maximum": "exclusiveMaximum",
    "minimum":           "minimum",
    "exclusive_minimum": "exclusiveMinimum",
}

STRING_OPTIONS: Dict[str, str] = {
    "max_length": "maxLength",
    "min_length": "minLength",
    "pattern":    "pattern",
}

# --------------------------------------------------------------------------- #
# The absent value                                                            #
# --------------------------------------------------------------------------- #

class _Undefined:
    """Singleton type of :data:`UNDEFINED`."""

    _instance: "_Undefined | None" = None
    __slots__ = ()

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()

# --------------------------------------------------------------------------- #
# Validation issues                                                           #
# --------------------------------------------------------------------------- #

class IssueKind(str, enum.Enum):
    INVALID_SCHEMA = "INVALID_SCHEMA"
    INVALID_TYPE   = "INVALID_TYPE"
    INVALID_VALUE  = "INVALID_VALUE"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation failure.

    ``path`` is the raw slash-delimited location of the offending value,
    empty for the root.
    """

    kind: IssueKind
    message: str
    path: str

    def as_dict(self) -> dict[str, str]:
        """JSON-friendly view of the issue."""
        out = asdict(self)
        out["kind"] = self.kind.value
        return out
