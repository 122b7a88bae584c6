# runtime_schema/render.py
from __future__ import annotations
from typing import Any, Mapping

from .exceptions import SchemaError
from .model import ADDITIONAL_KEY, ITEMS_KEY, PROPERTIES_KEY, REQUIRED_KEY
from .predicates import (
    is_any_type,
    is_array_type,
    is_boolean_type,
    is_null_type,
    is_number_type,
    is_object_type,
    is_readonly,
    is_record_type,
    is_schema_type,
    is_string_type,
    is_tuple_type,
    is_undefined_type,
    unwrap,
)
from .utils import _is_key_list

__all__ = ["as_code"]

_NAMES = (
    (is_any_type,       "any"),
    (is_boolean_type,   "boolean"),
    (is_null_type,      "null"),
    (is_number_type,    "number"),
    (is_string_type,    "string"),
    (is_undefined_type, "undefined"),
)

def _format_property(key: str, prop: Any, required: set) -> str:
    """Return ``readonly key?: type`` for one object property."""
    prefix = "readonly " if is_readonly(prop) else ""
    marker = "" if key in required else "?"
    return f"{prefix}{key}{marker}: {as_code(prop)}"

def _format_object(properties: Mapping[str, Any], required: set) -> str:
    parts = [_format_property(key, prop, required) for key, prop in properties.items()]
    return "{" + "; ".join(parts) + "}"

def as_code(schema: Any) -> str:
    """
    Render *schema* as a TypeScript-style type expression.

    Parameters
    ----------
    schema : Mapping[str, Any]
        Any schema produced by :mod:`runtime_schema.builders` (or loaded from
        JSON).

    Returns
    -------
    str
        e.g. ``{id: number; readonly tags?: Array<string>}``.

    Raises
    ------
    SchemaError
        If *schema* (or any nested schema) is not a recognisable schema.
    """
    if not is_schema_type(schema):
        raise SchemaError("Invalid schema")
    node = unwrap(schema)

    for matches, name in _NAMES:
        if matches(node):
            return name

    if is_array_type(node):
        return f"Array<{as_code(node[ITEMS_KEY])}>"
    if is_tuple_type(node):
        return "[" + ", ".join(as_code(item) for item in node[ITEMS_KEY]) + "]"
    if is_record_type(node):
        return f"Record<string, {as_code(node[ADDITIONAL_KEY])}>"
    if is_object_type(node):
        required = node.get(REQUIRED_KEY)
        if required is None:
            required = ()
        if not _is_key_list(required):
            raise SchemaError(f"Invalid required option {required!r}")
        return _format_object(node[PROPERTIES_KEY], set(required))

    raise SchemaError("Not implemented")
