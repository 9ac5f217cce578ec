"""
Tag Classifier - canonical category labels for arbitrary values.

``get_tag(value)`` answers "what kind of builtin is this, really?" with a short
label such as ``"String"``, ``"Number"``, ``"Date"`` or ``"Null"``. Predicates
that must accept both a primitive and its boxed form (``is_string_like``,
``is_number_like``, ``is_boolean_like``) compare against these labels instead
of the value's exact type.

Manifesto:
    A ``str`` subclass instance is not a ``str`` in the strict sense (its type
    is the subclass) but it is still string-like. Deciding this requires
    looking past the surface type at the builtin the class derives from. This
    module centralizes that inspection so the predicates stay declarative.

    - **Reported class:** Labels follow ``value.__class__``, the same attribute
      ``isinstance`` consults, so a value that re-reports its class is tagged
      as what it claims to be
    - **MRO walk:** The first class in the MRO with a known label wins
    - **Total:** Never raises; ``None`` and ``UNDEFINED`` get their own labels

Architecture:
    ::

        get_tag(value)
          │
          ├─ None        → "Null"
          ├─ UNDEFINED   → "Undefined"
          └─ reported class ──► walk __mro__ ──► _TAGS lookup
                                                     │
                                        "Function" ──► inspect refinement
                                                     │   (GeneratorFunction,
                                                     │    AsyncFunction,
                                                     │    AsyncGeneratorFunction)
                                        no match ──► "Object"

Examples:
    >>> get_tag(None)
    'Null'
    >>> get_tag("abc")
    'String'
    >>> class Name(str): ...
    >>> get_tag(Name("x"))
    'String'
    >>> def numbers():
    ...     yield 1
    >>> get_tag(numbers)
    'GeneratorFunction'

Tags:
    tag, classification, mro, boxed-primitive, typepred

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import collections.abc
import datetime
import functools
import inspect
import re
import types
from typing import Any

from typepred.core.logging import get_logger
from typepred.core.sentinels import UNDEFINED, Symbol

logger = get_logger(__name__)

NULL_TAG = "Null"
UNDEFINED_TAG = "Undefined"
OBJECT_TAG = "Object"
FUNCTION_TAG = "Function"

# Ordered only for readability; lookup follows the MRO of the value's class
_TAGS: dict[type, str] = {
    bool: "Boolean",
    int: "Number",
    float: "Number",
    complex: "Complex",
    str: "String",
    Symbol: "Symbol",
    list: "Array",
    tuple: "Tuple",
    dict: OBJECT_TAG,
    types.SimpleNamespace: OBJECT_TAG,
    set: "Set",
    frozenset: "Set",
    collections.abc.Set: "Set",
    collections.abc.Mapping: "Map",
    datetime.date: "Date",
    re.Pattern: "RegExp",
    BaseException: "Error",
    bytes: "Bytes",
    bytearray: "Bytes",
    memoryview: "Bytes",
    type: FUNCTION_TAG,
    types.FunctionType: FUNCTION_TAG,
    types.BuiltinFunctionType: FUNCTION_TAG,
    types.MethodType: FUNCTION_TAG,
    types.MethodWrapperType: FUNCTION_TAG,
    types.WrapperDescriptorType: FUNCTION_TAG,
    types.MethodDescriptorType: FUNCTION_TAG,
    functools.partial: FUNCTION_TAG,
}


def _reported_class(value: Any) -> type:
    """Class the value reports through ``__class__``, or its real type."""
    try:
        cls = value.__class__
    except Exception as exc:
        logger.debug("tag_class_fallback", reason="raised", error=type(exc).__name__)
        return type(value)
    if not isinstance(cls, type):
        logger.debug("tag_class_fallback", reason="not_a_type", reported=type(cls).__name__)
        return type(value)
    return cls


def _function_tag(value: Any) -> str:
    if inspect.isasyncgenfunction(value):
        return "AsyncGeneratorFunction"
    if inspect.iscoroutinefunction(value):
        return "AsyncFunction"
    if inspect.isgeneratorfunction(value):
        return "GeneratorFunction"
    return FUNCTION_TAG


def get_tag(value: Any) -> str:
    """
    Return the canonical category label for ``value``.

    Args:
        value: Anything, including ``None`` and ``UNDEFINED``

    Returns:
        A label such as ``"Null"``, ``"String"``, ``"Array"`` or ``"Object"``
    """
    if value is None:
        return NULL_TAG
    if value is UNDEFINED:
        return UNDEFINED_TAG

    for klass in _reported_class(value).__mro__:
        tag = _TAGS.get(klass)
        if tag is None:
            continue
        if tag == FUNCTION_TAG:
            try:
                return _function_tag(value)
            except Exception as exc:
                logger.debug("tag_function_fallback", error=type(exc).__name__)
                return FUNCTION_TAG
        return tag
    return OBJECT_TAG


__all__ = [
    "get_tag",
    "NULL_TAG",
    "UNDEFINED_TAG",
    "OBJECT_TAG",
    "FUNCTION_TAG",
]
