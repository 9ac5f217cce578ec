"""Typepred Core -- runtime type predicates and their supporting primitives.

Manifesto:
    "Is this a number?" has a different answer in every codebase that asks
    it: is ``True`` a number, is ``5.0`` an integer, is a ``str`` subclass a
    string?  ``typepred.core`` answers each such question once, with a pure,
    total predicate whose edge cases are pinned by tests.

Architecture::

    Layer 1 -- Values & Errors
        sentinels.py       UNDEFINED (not-provided) + Symbol tokens
        errors.py          TypepredError hierarchy (registry surface only)

    Layer 2 -- Classification
        tags.py            Tag Classifier: get_tag(value) -> "String", "Date", ...
        registry.py        @predicate guard + name -> predicate lookup, classify()

    Layer 3 -- Predicates
        predicates.py      is_* functions with TypeGuard narrowing

    Layer 4 -- Cross-Cutting Concerns
        logging.py         Structured logging (structlog)
        settings.py        TypepredSettings (pydantic-settings)

Tags:
    typepred, type-guard, predicates, runtime-types

Doc-Types:
    package-overview, module-index
"""

from typepred.core.errors import (
    DuplicatePredicateError,
    ErrorCategory,
    PredicateNotFoundError,
    TypepredError,
)
from typepred.core.logging import configure_logging, get_logger
from typepred.core.predicates import (
    MAX_SAFE_INTEGER,
    Falsy,
    Primitive,
    Truthy,
    UnknownFunction,
    is_array,
    is_big_int,
    is_bit_safe_integer,
    is_boolean,
    is_boolean_like,
    is_date,
    is_error,
    is_falsy,
    is_finite_number,
    is_float,
    is_function,
    is_generator_function,
    is_integer,
    is_iterable,
    is_map,
    is_null,
    is_nullish,
    is_number,
    is_number_like,
    is_object,
    is_object_like,
    is_plain_object,
    is_pojo,
    is_primitive,
    is_reg_exp,
    is_safe_integer,
    is_set,
    is_string,
    is_string_like,
    is_symbol,
    is_truthy,
    is_undefined,
    is_valid_date,
)
from typepred.core.registry import (
    classify,
    get_predicate,
    is_alias,
    list_predicates,
    predicate,
    register_alias,
    unregister_predicate,
)
from typepred.core.sentinels import UNDEFINED, Symbol, UndefinedType
from typepred.core.tags import get_tag

__all__ = [
    # sentinels
    "UNDEFINED",
    "UndefinedType",
    "Symbol",
    # tag classifier
    "get_tag",
    # predicates
    "Primitive",
    "UnknownFunction",
    "Falsy",
    "Truthy",
    "MAX_SAFE_INTEGER",
    "is_function",
    "is_generator_function",
    "is_date",
    "is_valid_date",
    "is_iterable",
    "is_number",
    "is_finite_number",
    "is_integer",
    "is_safe_integer",
    "is_bit_safe_integer",
    "is_float",
    "is_big_int",
    "is_set",
    "is_map",
    "is_array",
    "is_primitive",
    "is_object_like",
    "is_object",
    "is_plain_object",
    "is_pojo",
    "is_null",
    "is_undefined",
    "is_nullish",
    "is_truthy",
    "is_falsy",
    "is_symbol",
    "is_string",
    "is_string_like",
    "is_number_like",
    "is_boolean_like",
    "is_boolean",
    "is_reg_exp",
    "is_error",
    # registry
    "predicate",
    "register_alias",
    "get_predicate",
    "list_predicates",
    "is_alias",
    "classify",
    "unregister_predicate",
    # errors
    "ErrorCategory",
    "TypepredError",
    "PredicateNotFoundError",
    "DuplicatePredicateError",
    # logging
    "configure_logging",
    "get_logger",
    # ---------- optional (available via explicit import, not ``import *``) ----------
    # "TypepredSettings", "configure_logging_from_settings",  # pydantic-settings
]
