"""
validator.py - the recursive validation engine
==============================================

Walks a schema and a value in lock-step and collects every problem it finds
as a :class:`~runtime_schema.model.ValidationIssue`.  Nothing in here raises
for a bad *value*: issues are returned as data, and :func:`validate_or_throw`
is the single place where they are turned into an exception.

Public API
----------
validate(schema, value, *, path="") -> list[ValidationIssue]
    Every issue, in traversal order.  Empty when *value* conforms.

validate_or_throw(schema, value) -> None
    Raise :class:`ValidationError` listing every issue, if there are any.

is_valid(schema, value) -> bool
    ``True`` iff :func:`validate` finds nothing.

format_issues(issues) -> str
    One ``"<message> (at <path>)"`` line per issue.

Paths are slash-delimited: ``""`` is the root, ``/0`` the first element,
``/user/name`` the ``name`` key of the ``user`` key.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, List, Mapping

from .exceptions import ValidationError
from .model import (
    ADDITIONAL_KEY,
    ITEMS_KEY,
    PROPERTIES_KEY,
    REQUIRED_KEY,
    UNDEFINED,
    IssueKind,
    Schema,
    ValidationIssue,
)
from .predicates import (
    is_any_type,
    is_array_type,
    is_boolean_type,
    is_null_type,
    is_number_type,
    is_object_type,
    is_record_type,
    is_schema_type,
    is_string_type,
    is_tuple_type,
    is_undefined_type,
    unwrap,
)
from .utils import (
    _describe,
    _format_number,
    _is_key_list,
    _is_mapping,
    _is_number,
    _is_sequence,
)

__all__ = [
    "validate",
    "validate_or_throw",
    "is_valid",
    "format_issues",
]

logger = logging.getLogger(__name__)

Issues = List[ValidationIssue]

# --------------------------------------------------------------------------- #
# Issue factories                                                             #
# --------------------------------------------------------------------------- #

def _invalid_type(expected: str, value: Any, path: str) -> ValidationIssue:
    return ValidationIssue(
        IssueKind.INVALID_TYPE,
        f"Invalid type, expected {expected}, got {_describe(value)}",
        path,
    )


def _invalid_value(message: str, path: str) -> ValidationIssue:
    return ValidationIssue(IssueKind.INVALID_VALUE, message, path)

# --------------------------------------------------------------------------- #
# Constraint checks                                                           #
# --------------------------------------------------------------------------- #

def _option(schema: Schema, key: str, path: str, issues: Issues) -> Any:
    """Return the numeric option *key*, or None when absent or unusable."""
    option = schema.get(key)
    if option is None:
        return None
    if not _is_number(option):
        issues.append(ValidationIssue(
            IssueKind.INVALID_SCHEMA, f"Invalid {key} option {option!r}", path))
        return None
    return option


def _is_multiple(value: Any, factor: Any) -> bool:
    if factor == 0:
        return False
    try:
        return value % factor == 0
    except ArithmeticError:
        return False


def _number_issues(schema: Schema, value: Any, path: str) -> Issues:
    issues: Issues = []
    shown = _format_number(value)

    factor = _option(schema, "multipleOf", path, issues)
    if factor is not None and not _is_multiple(value, factor):
        issues.append(_invalid_value(
            f"Value must be a multiple of {_format_number(factor)}", path))

    limit = _option(schema, "maximum", path, issues)
    if limit is not None and value > limit:
        issues.append(_invalid_value(
            f"Value must be less than or equal to {_format_number(limit)}, instead was {shown}", path))

    limit = _option(schema, "exclusiveMaximum", path, issues)
    if limit is not None and value >= limit:
        issues.append(_invalid_value(
            f"Value must be strictly less than {_format_number(limit)}, instead was {shown}", path))

    limit = _option(schema, "minimum", path, issues)
    if limit is not None and value < limit:
        issues.append(_invalid_value(
            f"Value must be greater than or equal to {_format_number(limit)}, instead was {shown}", path))

    limit = _option(schema, "exclusiveMinimum", path, issues)
    if limit is not None and value <= limit:
        issues.append(_invalid_value(
            f"Value must be strictly greater than {_format_number(limit)}, instead was {shown}", path))

    return issues


def _string_issues(schema: Schema, value: str, path: str) -> Issues:
    issues: Issues = []
    length = len(value)

    limit = _option(schema, "maxLength", path, issues)
    if limit is not None and length > limit:
        issues.append(_invalid_value(
            f"String value must have a length no greater than {_format_number(limit)}, instead was {length}", path))

    limit = _option(schema, "minLength", path, issues)
    if limit is not None and length < limit:
        issues.append(_invalid_value(
            f"String value must have a length no less than {_format_number(limit)}, instead was {length}", path))

    pattern = schema.get("pattern")
    if pattern is not None and not isinstance(pattern, str):
        issues.append(ValidationIssue(
            IssueKind.INVALID_SCHEMA, f"Invalid pattern {pattern!r}: expected a string", path))
    elif pattern is not None:
        try:
            regexp = re.compile(pattern)
        except re.error as exc:
            issues.append(ValidationIssue(
                IssueKind.INVALID_SCHEMA, f"Invalid pattern {pattern!r}: {exc}", path))
        else:
            if regexp.search(value) is None:
                issues.append(_invalid_value(
                    f"String value must match pattern: {pattern}", path))

    return issues

# --------------------------------------------------------------------------- #
# Containers                                                                  #
# --------------------------------------------------------------------------- #

def _object_issues(schema: Schema, value: Mapping[Any, Any], path: str) -> Issues:
    properties = schema[PROPERTIES_KEY]
    required = schema.get(REQUIRED_KEY)
    if required is None:
        required = ()
    if not _is_key_list(required):
        return [ValidationIssue(
            IssueKind.INVALID_SCHEMA, f"Invalid required option {required!r}", path)]

    issues: Issues = []

    value_keys = list(value)
    extra = [str(k) for k in value_keys if k not in properties]
    missing = [str(k) for k in required if k not in value]

    if extra:
        issues.append(ValidationIssue(
            IssueKind.INVALID_TYPE, f"Unexpected keys: {', '.join(extra)}", path))
    if missing:
        issues.append(ValidationIssue(
            IssueKind.INVALID_TYPE, f"Missing required keys: {', '.join(missing)}", path))

    for key in value_keys:
        if key in properties:
            issues.extend(_validate_at(f"{path}/{key}", properties[key], value[key]))
    return issues

# --------------------------------------------------------------------------- #
# Core recursive validator                                                    #
# --------------------------------------------------------------------------- #

def _validate_at(path: str, schema: Any, value: Any) -> Issues:
    """Validate *value* against *schema*, reporting issues under *path*."""

    # 1) is this a schema at all? ------------------------------------------
    if not is_schema_type(schema):
        return [ValidationIssue(IssueKind.INVALID_SCHEMA, "Invalid schema", path)]

    # modifier flags never affect matching
    schema = unwrap(schema)

    if is_any_type(schema):
        return []

    # 2) primitives --------------------------------------------------------
    if is_boolean_type(schema):
        return [] if isinstance(value, bool) else [_invalid_type("boolean", value, path)]

    if is_null_type(schema):
        return [] if value is None else [_invalid_type("null", value, path)]

    if is_number_type(schema):
        if not _is_number(value):
            return [_invalid_type("number", value, path)]
        return _number_issues(schema, value, path)

    if is_string_type(schema):
        if not isinstance(value, str):
            return [_invalid_type("string", value, path)]
        return _string_issues(schema, value, path)

    if is_undefined_type(schema):
        return [] if value is UNDEFINED else [_invalid_type("undefined", value, path)]

    # 3) array / tuple -----------------------------------------------------
    if is_array_type(schema):
        if not _is_sequence(value):
            return [_invalid_type("array", value, path)]
        issues: Issues = []
        for idx, item in enumerate(value):
            issues.extend(_validate_at(f"{path}/{idx}", schema[ITEMS_KEY], item))
        return issues

    if is_tuple_type(schema):
        if not _is_sequence(value):
            return [_invalid_type("tuple", value, path)]
        items = schema[ITEMS_KEY]
        if len(value) != len(items):
            return [ValidationIssue(
                IssueKind.INVALID_TYPE,
                f"Expected {len(items)} elements, got {len(value)} elements instead",
                path,
            )]
        issues = []
        for idx, (item_schema, item) in enumerate(zip(items, value)):
            issues.extend(_validate_at(f"{path}/{idx}", item_schema, item))
        return issues

    # 4) record / object ---------------------------------------------------
    if is_record_type(schema):
        if not _is_mapping(value):
            return [_invalid_type("object", value, path)]
        issues = []
        for key, item in value.items():
            issues.extend(_validate_at(f"{path}/{key}", schema[ADDITIONAL_KEY], item))
        return issues

    if is_object_type(schema):
        if not _is_mapping(value):
            return [_invalid_type("object", value, path)]
        return _object_issues(schema, value, path)

    return [ValidationIssue(IssueKind.INVALID_SCHEMA, "Unable to validate type", path)]

# --------------------------------------------------------------------------- #
# Public entry points                                                         #
# --------------------------------------------------------------------------- #

def validate(schema: Schema, value: Any, *, path: str = "") -> Issues:
    """Return every issue found while checking *value* against *schema*.

    *path* prefixes every reported path; leave it empty when *value* is the
    root of the document.
    """
    return _validate_at(path, schema, value)


def format_issues(issues: Iterable[ValidationIssue]) -> str:
    return "\n".join(f"{issue.message} (at {issue.path or '/'})" for issue in issues)


def validate_or_throw(schema: Schema, value: Any) -> None:
    """Raise :class:`ValidationError` if *value* does not satisfy *schema*.

    The whole value is checked first; the error message then lists every
    issue, one per line.
    """
    issues = validate(schema, value)
    if issues:
        logger.debug("validation failed with %d issue(s)", len(issues))
        raise ValidationError(format_issues(issues), issues)


def is_valid(schema: Schema, value: Any) -> bool:
    """``True`` iff *value* satisfies *schema*."""
    return not validate(schema, value)
