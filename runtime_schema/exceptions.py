"""Exceptions raised by runtime_schema."""

from __future__ import annotations

from typing import Sequence

from .model import ValidationIssue


class SchemaError(ValueError):
    """Raised when a schema itself is malformed or unrecognised."""


class ValidationError(TypeError):
    """Raised by :func:`runtime_schema.validate_or_throw` for an invalid value.

    The message lists every issue; the issues themselves are kept on
    :attr:`issues`.
    """

    def __init__(self, message: str, issues: Sequence[ValidationIssue] = ()):
        super().__init__(message)
        self.issues = list(issues)
