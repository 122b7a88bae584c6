"""
runtime_schema – describe the shape of data as plain values and validate
untyped input against it.
"""
import logging

from . import builders
from . import builders as T
from .exceptions import SchemaError, ValidationError
from .frames import validate_frame
from .loader import dump_schema, load_schema, loads_schema
from .model import UNDEFINED, IssueKind, ValidationIssue
from .predicates import (
    check_schema,
    is_any_type,
    is_array_type,
    is_boolean_type,
    is_null_type,
    is_number_type,
    is_object_type,
    is_optional,
    is_readonly,
    is_record_type,
    is_schema_type,
    is_string_type,
    is_tuple_type,
    is_undefined_type,
)
from .render import as_code
from .validator import format_issues, is_valid, validate, validate_or_throw

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "T",
    "builders",
    "UNDEFINED",
    "IssueKind",
    "ValidationIssue",
    "SchemaError",
    "ValidationError",
    "validate",
    "validate_or_throw",
    "is_valid",
    "format_issues",
    "as_code",
    "check_schema",
    "is_schema_type",
    "is_optional",
    "is_readonly",
    "is_any_type",
    "is_boolean_type",
    "is_null_type",
    "is_number_type",
    "is_string_type",
    "is_undefined_type",
    "is_array_type",
    "is_tuple_type",
    "is_record_type",
    "is_object_type",
    "load_schema",
    "loads_schema",
    "dump_schema",
    "validate_frame",
]
