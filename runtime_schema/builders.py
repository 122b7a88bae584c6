"""
builders.py - functions that construct schema values.
=====================================================

Meant to be used as a namespace, since several names (``object``, ``tuple``,
``any``) deliberately mirror the type they describe::

    from runtime_schema import T

    user = T.object({
        "id":    T.number(minimum=1),
        "name":  T.string(min_length=1),
        "tags":  T.optional(T.array(T.string())),
        "point": T.readonly(T.tuple(T.number(), T.number())),
    })

Every builder returns a fresh ``dict``; inputs are never mutated.  Options are
stored as given and are not checked here: ``string(min_length=-1)`` is a
legal schema that simply accepts every string.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from . import model
from .model import Schema
from .predicates import is_optional, is_readonly

__all__ = [
    "any",
    "boolean",
    "null",
    "number",
    "string",
    "undefined",
    "array",
    "tuple",
    "record",
    "object",
    "optional",
    "readonly",
]

# --------------------------------------------------------------------------- #
# Primitives                                                                  #
# --------------------------------------------------------------------------- #

def any() -> dict:  # noqa: A001
    """Schema that accepts every value."""
    return {model.TYPE_KEY: model.ANY}


def boolean() -> dict:
    return {model.TYPE_KEY: model.BOOLEAN}


def null() -> dict:
    return {model.TYPE_KEY: model.NULL}


def undefined() -> dict:
    return {model.TYPE_KEY: model.UNDEFINED_TAG}


def _with_options(tag: str, names: Mapping[str, str], given: Mapping[str, Any]) -> dict:
    schema = {model.TYPE_KEY: tag}
    for kwarg, key in names.items():
        if given[kwarg] is not None:
            schema[key] = given[kwarg]
    return schema


def number(
    *,
    multiple_of: Optional[float] = None,
    maximum: Optional[float] = None,
    exclusive_maximum: Optional[float] = None,
    minimum: Optional[float] = None,
    exclusive_minimum: Optional[float] = None,
) -> dict:
    """Number schema; only the constraints actually passed are stored."""
    return _with_options(model.NUMBER, model.NUMBER_OPTIONS, locals())


def string(
    *,
    max_length: Optional[int] = None,
    min_length: Optional[int] = None,
    pattern: Optional[str] = None,
) -> dict:
    """String schema; *pattern* is a regular-expression source string."""
    return _with_options(model.STRING, model.STRING_OPTIONS, locals())

# --------------------------------------------------------------------------- #
# Containers                                                                  #
# --------------------------------------------------------------------------- #

def array(items: Schema) -> dict:
    """Homogeneous array: every element must match *items*."""
    return {model.TYPE_KEY: model.ARRAY, model.ITEMS_KEY: items}


def tuple(*items: Schema) -> dict:  # noqa: A001
    """Fixed-length array matched position by position."""
    return {model.TYPE_KEY: model.ARRAY, model.ITEMS_KEY: list(items)}


def record(items: Schema) -> dict:
    """Mapping with arbitrary keys whose values all match *items*."""
    return {model.TYPE_KEY: model.OBJECT, model.ADDITIONAL_KEY: items}


def object(properties: Mapping[str, Schema]) -> dict:  # noqa: A001
    """Mapping with a fixed set of keys.

    Every property not wrapped in :func:`optional` is required.  The
    ``required`` key is left out entirely when nothing is required.
    """
    props = dict(properties)
    required = [key for key, prop in props.items() if not is_optional(prop)]
    schema = {model.TYPE_KEY: model.OBJECT, model.PROPERTIES_KEY: props}
    if required:
        schema[model.REQUIRED_KEY] = required
    return schema

# --------------------------------------------------------------------------- #
# Modifiers                                                                   #
# --------------------------------------------------------------------------- #

def _modify(item: Schema, flag: str) -> dict:
    if item.get(model.TYPE_KEY) == model.MODIFIED:
        # keep a single wrapper and add the flag to it
        return {**item, flag: True}
    return {model.TYPE_KEY: model.MODIFIED, model.ITEM_KEY: item, flag: True}


def optional(item: Schema) -> Schema:
    """Mark *item* as optional when used as an object property."""
    if is_optional(item):
        return item
    return _modify(item, model.OPTIONAL_FLAG)


def readonly(item: Schema) -> Schema:
    """Mark *item* as readonly when used as an object property."""
    if is_readonly(item):
        return item
    return _modify(item, model.READONLY_FLAG)
