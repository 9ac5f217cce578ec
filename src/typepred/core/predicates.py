"""
Runtime type predicates.

Every function here takes one value of any type and returns ``bool``. When the
answer is ``True`` the ``TypeGuard`` annotation narrows the value's static type
for the caller. No predicate raises, whatever it is given: ``None``,
``UNDEFINED``, cyclic containers, or objects whose dunder methods raise (see
``typepred.core.registry.predicate``).

Manifesto:
    - **Pure:** Same input, same output, nothing retained or mutated
    - **Total:** Defined for every input, failure is just ``False``
    - **Strict vs like:** ``is_string`` checks for an exact ``str``;
      ``is_string_like`` also accepts ``str`` subclasses (the boxed form)
      through the tag classifier. Same for numbers and booleans.

Features:
    - **Callables:** is_function, is_generator_function
    - **Numbers:** is_number, is_finite_number, is_integer, is_safe_integer,
      is_bit_safe_integer, is_float, is_big_int, is_number_like
    - **Text/flags:** is_string, is_string_like, is_boolean, is_boolean_like,
      is_symbol
    - **Containers:** is_array, is_set, is_map, is_iterable, is_plain_object
      (alias is_pojo)
    - **Objects:** is_object, is_object_like, is_primitive, is_date,
      is_valid_date, is_reg_exp, is_error
    - **Absence/truthiness:** is_null, is_undefined, is_nullish, is_truthy,
      is_falsy

Examples:
    >>> is_float(5.5), is_float(5), is_float(-0.0)
    (True, False, False)
    >>> is_bit_safe_integer(2**31 - 1), is_bit_safe_integer(2**31)
    (True, False)
    >>> is_plain_object({}), is_plain_object([])
    (True, False)
    >>> is_pojo is is_plain_object
    True

Tags:
    predicates, type-guard, runtime-types, typepred

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import collections.abc
import datetime
import math
import re
import types
from collections.abc import Callable
from typing import Any, Literal, TypeAlias, TypeGuard

from typepred.core.registry import predicate, register_alias
from typepred.core.sentinels import UNDEFINED, Symbol, UndefinedType
from typepred.core.tags import OBJECT_TAG, get_tag

Primitive: TypeAlias = str | int | float | bool | Symbol | UndefinedType | None
UnknownFunction: TypeAlias = Callable[..., object]
# Falsy values with a literal type; empty containers, 0.0 and 0j are falsy too
Falsy: TypeAlias = Literal[False, 0, "", b""] | UndefinedType | None
Truthy: TypeAlias = object

# Largest integer a binary64 float represents exactly (2**53 - 1)
MAX_SAFE_INTEGER = 2**53 - 1

_INT32_RANGE = 2**32
_INT32_SIGN = 2**31


def _to_int32(number: int | float) -> int:
    """Signed 32-bit conversion, as ``number | 0`` performs it."""
    if isinstance(number, float) and not math.isfinite(number):
        return 0
    wrapped = int(number) % _INT32_RANGE
    return wrapped - _INT32_RANGE if wrapped >= _INT32_SIGN else wrapped


# ---------------------------------------------------------------------------
# Callables
# ---------------------------------------------------------------------------


@predicate()
def is_function(value: Any) -> TypeGuard[UnknownFunction]:
    return callable(value)


@predicate()
def is_generator_function(value: Any) -> TypeGuard[UnknownFunction]:
    """Callable whose tag marks it as producing a generator when called."""
    return callable(value) and get_tag(value) == "GeneratorFunction"


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


@predicate()
def is_date(value: Any) -> TypeGuard[datetime.date]:
    """``date`` or ``datetime`` instance, valid or not."""
    return isinstance(value, datetime.date)


@predicate()
def is_valid_date(value: Any) -> TypeGuard[datetime.date]:
    """
    Date that represents an actual point in time.

    A not-a-time value (such as ``pandas.NaT``, which subclasses ``datetime``)
    compares unequal to itself, exactly like a float NaN, and is rejected.
    """
    return is_date(value) and bool(value == value)


# ---------------------------------------------------------------------------
# Iteration
# ---------------------------------------------------------------------------


@predicate()
def is_iterable(value: Any) -> TypeGuard[collections.abc.Iterable[Any]]:
    """
    Object or string whose type implements the ``__iter__`` protocol.

    N.B. Strings are iterable (characters) but plain objects are not, even a
    ``dict``: it is a record here, not a collection. Callables are never
    iterable, so Enum classes and callable instances with ``__iter__`` are
    rejected.
    """
    if not (is_object_like(value) or is_string_like(value)):
        return False
    if is_plain_object(value):
        return False
    # Protocol lookup skips the instance and the metaclass (EnumMeta.__iter__)
    for klass in type(value).__mro__:
        if "__iter__" in vars(klass):
            return callable(vars(klass)["__iter__"])
    return False


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


@predicate()
def is_number(value: Any) -> TypeGuard[int | float]:
    """Exact ``int`` or ``float``, including NaN and infinities; ``bool`` excluded."""
    return type(value) is int or type(value) is float


@predicate()
def is_finite_number(value: Any) -> TypeGuard[int | float]:
    if not is_number(value):
        return False
    # math.isfinite would overflow on ints beyond the float range
    return type(value) is int or math.isfinite(value)


@predicate()
def is_integer(value: Any) -> TypeGuard[int | float]:
    """Number with no fractional part, so ``5.0`` counts."""
    if not is_number(value):
        return False
    return type(value) is int or value.is_integer()


@predicate()
def is_safe_integer(value: Any) -> TypeGuard[int | float]:
    """Integer within ``±MAX_SAFE_INTEGER``, where floats are still exact."""
    return is_integer(value) and abs(value) <= MAX_SAFE_INTEGER


@predicate()
def is_bit_safe_integer(value: Any) -> TypeGuard[int | float]:
    """Number that survives conversion to a signed 32-bit integer unchanged."""
    return is_number(value) and _to_int32(value) == value


@predicate()
def is_float(value: Any) -> TypeGuard[float]:
    """Finite number with a non-zero fractional part."""
    return is_finite_number(value) and math.trunc(value) != value


@predicate()
def is_big_int(value: Any) -> TypeGuard[int]:
    """Exact ``int``; Python integers are arbitrary precision."""
    return type(value) is int


# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------


@predicate()
def is_set(value: Any) -> TypeGuard[collections.abc.Set[Any]]:
    return isinstance(value, collections.abc.Set)


@predicate()
def is_map(value: Any) -> TypeGuard[collections.abc.Mapping[Any, Any]]:
    return isinstance(value, collections.abc.Mapping)


@predicate()
def is_array(value: Any) -> TypeGuard[list[Any]]:
    return isinstance(value, list)


# ---------------------------------------------------------------------------
# Primitives & objects
# ---------------------------------------------------------------------------


@predicate()
def is_primitive(value: Any) -> TypeGuard[Primitive]:
    return (
        is_nullish(value)
        or is_string(value)
        or is_number(value)
        or is_big_int(value)
        or is_boolean(value)
        or type(value) is Symbol
    )


@predicate()
def is_object_like(value: Any) -> TypeGuard[object]:
    """Non-primitive, non-callable value."""
    return not is_primitive(value) and not callable(value)


@predicate()
def is_object(value: Any) -> TypeGuard[object]:
    """Non-primitive value, callables included."""
    return not is_primitive(value)


@predicate()
def is_plain_object(value: Any) -> TypeGuard[dict[Any, Any] | types.SimpleNamespace]:
    """
    Data object with no specialized behavior.

    The value must be tagged ``"Object"`` *and* its real type must be exactly
    ``dict`` or exactly ``SimpleNamespace``. Subclasses (``OrderedDict``,
    ``defaultdict``, user classes) and objects whose ``__class__`` reports a
    different type than they really have are rejected.
    """
    if get_tag(value) != OBJECT_TAG:
        return False
    return type(value) is dict or type(value) is types.SimpleNamespace


is_pojo = register_alias("is_pojo", is_plain_object)


# ---------------------------------------------------------------------------
# Absence & truthiness
# ---------------------------------------------------------------------------


@predicate()
def is_null(value: Any) -> TypeGuard[None]:
    return value is None


@predicate()
def is_undefined(value: Any) -> TypeGuard[UndefinedType]:
    return value is UNDEFINED


@predicate()
def is_nullish(value: Any) -> TypeGuard[UndefinedType | None]:
    return value is None or value is UNDEFINED


@predicate(default=True)
def is_truthy(value: Any) -> TypeGuard[Truthy]:
    """
    ``bool(value)`` is True.

    Objects whose ``__bool__`` or ``__len__`` raises are present, so they count
    as truthy.
    """
    return bool(value)


@predicate()
def is_falsy(value: Any) -> TypeGuard[Falsy]:
    return not is_truthy(value)


# ---------------------------------------------------------------------------
# Strings, symbols, booleans
# ---------------------------------------------------------------------------


@predicate()
def is_symbol(value: Any) -> TypeGuard[Symbol]:
    """Primitive or boxed (subclass instance) symbol."""
    return isinstance(value, Symbol)


@predicate()
def is_string(value: Any) -> TypeGuard[str]:
    return type(value) is str


@predicate()
def is_string_like(value: Any) -> TypeGuard[str]:
    return get_tag(value) == "String"


@predicate()
def is_number_like(value: Any) -> TypeGuard[int | float]:
    return get_tag(value) == "Number"


@predicate()
def is_boolean_like(value: Any) -> TypeGuard[bool]:
    # bool cannot be subclassed, so this agrees with is_boolean
    return get_tag(value) == "Boolean"


@predicate()
def is_boolean(value: Any) -> TypeGuard[bool]:
    return value is True or value is False


# ---------------------------------------------------------------------------
# Patterns & errors
# ---------------------------------------------------------------------------


@predicate()
def is_reg_exp(value: Any) -> TypeGuard[re.Pattern[Any]]:
    return isinstance(value, re.Pattern)


@predicate()
def is_error(value: Any) -> TypeGuard[BaseException]:
    return isinstance(value, BaseException)


__all__ = [
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
]
