"""
predicates.py - classify a schema value into its variant.
=========================================================

Every schema is a ``dict`` tagged by ``"type"``.  Two tags are shared by two
variants each and are told apart by their payload:

* ``"array"``  - a *tuple* when ``items`` is a list/tuple, otherwise an array.
* ``"object"`` - a *record* when ``additionalProperties`` is present and not
  ``None``, otherwise an object with declared ``properties``.

Optional/readonly markers live on a ``"modified"`` wrapper around the schema.
All variant predicates look through that wrapper, so ``optional(number())``
is still a number type.

Public API
----------
is_schema_type(value)            shallow "is this a schema at all" test
check_schema(schema)             deep structural check, raises SchemaError
unwrap(schema)                   strip the modifier wrapper
is_optional / is_readonly        modifier flags
is_<variant>_type(schema)        one predicate per variant
"""

from __future__ import annotations

from typing import Any

from .exceptions import SchemaError
from .model import (
    ADDITIONAL_KEY,
    ANY,
    ARRAY,
    BOOLEAN,
    ITEM_KEY,
    ITEMS_KEY,
    KNOWN_TAGS,
    MODIFIED,
    NULL,
    NUMBER,
    OBJECT,
    OPTIONAL_FLAG,
    PROPERTIES_KEY,
    READONLY_FLAG,
    REQUIRED_KEY,
    STRING,
    TYPE_KEY,
    UNDEFINED_TAG,
    Schema,
)
from .utils import _is_key_list, _is_mapping, _is_sequence

__all__ = [
    "is_schema_type",
    "check_schema",
    "unwrap",
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
]

# --------------------------------------------------------------------------- #
# Schema-ness                                                                 #
# --------------------------------------------------------------------------- #

def _tag(schema: Any) -> Any:
    return schema.get(TYPE_KEY) if _is_mapping(schema) else None


def _has_additional(schema: Schema) -> bool:
    return schema.get(ADDITIONAL_KEY) is not None


def is_schema_type(value: Any) -> bool:
    """Return True iff *value* is a recognisable schema node.

    Only the node itself is inspected; children are checked lazily by the
    validation engine (or eagerly by :func:`check_schema`).
    """
    tag = _tag(value)
    if not isinstance(tag, str) or tag not in KNOWN_TAGS:
        return False

    if tag == MODIFIED:
        item = value.get(ITEM_KEY)
        return _tag(item) != MODIFIED and is_schema_type(item)
    if tag == ARRAY:
        return ITEMS_KEY in value
    if tag == OBJECT:
        return _has_additional(value) or _is_mapping(value.get(PROPERTIES_KEY))
    return True


def check_schema(schema: Any, path: str = "") -> None:
    """Recursively assert that every node under *schema* is well formed.

    Raises :class:`SchemaError` naming the first malformed node.
    """
    where = path or "/"
    if not is_schema_type(schema):
        raise SchemaError(f"{where}: invalid schema node {schema!r}")

    node = unwrap(schema)
    if is_tuple_type(node):
        for idx, item in enumerate(node[ITEMS_KEY]):
            check_schema(item, f"{path}/{idx}")
    elif is_array_type(node):
        check_schema(node[ITEMS_KEY], f"{path}/items")
    elif is_record_type(node):
        check_schema(node[ADDITIONAL_KEY], f"{path}/*")
    elif is_object_type(node):
        props = node[PROPERTIES_KEY]
        required = node.get(REQUIRED_KEY)
        if required is None:
            required = ()
        if not _is_key_list(required) or any(k not in props for k in required):
            raise SchemaError(f"{where}: 'required' must list declared properties")
        for key, prop in props.items():
            check_schema(prop, f"{path}/{key}")

# --------------------------------------------------------------------------- #
# Modifiers                                                                   #
# --------------------------------------------------------------------------- #

def unwrap(schema: Schema) -> Schema:
    """Return the schema inside a modifier wrapper (or *schema* itself)."""
    if _tag(schema) == MODIFIED:
        return schema[ITEM_KEY]
    return schema


def is_optional(schema: Schema) -> bool:
    return _tag(schema) == MODIFIED and schema.get(OPTIONAL_FLAG) is True


def is_readonly(schema: Schema) -> bool:
    return _tag(schema) == MODIFIED and schema.get(READONLY_FLAG) is True

# --------------------------------------------------------------------------- #
# Variants                                                                    #
# --------------------------------------------------------------------------- #

def is_any_type(schema: Schema) -> bool:
    return _tag(unwrap(schema)) == ANY


def is_boolean_type(schema: Schema) -> bool:
    return _tag(unwrap(schema)) == BOOLEAN


def is_null_type(schema: Schema) -> bool:
    return _tag(unwrap(schema)) == NULL


def is_number_type(schema: Schema) -> bool:
    return _tag(unwrap(schema)) == NUMBER


def is_string_type(schema: Schema) -> bool:
    return _tag(unwrap(schema)) == STRING


def is_undefined_type(schema: Schema) -> bool:
    return _tag(unwrap(schema)) == UNDEFINED_TAG


def is_array_type(schema: Schema) -> bool:
    """Homogeneous array: ``items`` is a single schema."""
    node = unwrap(schema)
    return _tag(node) == ARRAY and not _is_sequence(node.get(ITEMS_KEY))


def is_tuple_type(schema: Schema) -> bool:
    """Positional tuple: ``items`` is a sequence of schemas."""
    node = unwrap(schema)
    return _tag(node) == ARRAY and _is_sequence(node.get(ITEMS_KEY))


def is_record_type(schema: Schema) -> bool:
    node = unwrap(schema)
    return _tag(node) == OBJECT and _has_additional(node)


def is_object_type(schema: Schema) -> bool:
    """Object with declared properties (records excluded)."""
    node = unwrap(schema)
    return _tag(node) == OBJECT and not _has_additional(node)
