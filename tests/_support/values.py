"""Exotic values and hypothesis strategies shared by the predicate tests."""

from __future__ import annotations

import datetime
import enum
import re
from collections import OrderedDict, defaultdict
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

from hypothesis import strategies as st

from typepred import UNDEFINED, Symbol


class ExplodingProxy:
    """Object whose every introspection hook raises."""

    @property
    def __class__(self):  # type: ignore[override]
        raise RuntimeError("__class__ is not available")

    def __getattr__(self, name: str) -> Any:
        raise RuntimeError(f"attribute {name} is not available")

    def __bool__(self) -> bool:
        raise RuntimeError("truthiness is not available")

    def __eq__(self, other: object) -> bool:
        raise RuntimeError("equality is not available")

    __hash__ = object.__hash__

    def __repr__(self) -> str:
        return "ExplodingProxy()"


class SpoofedDict:
    """Reports ``dict`` through ``__class__`` while being something else."""

    @property
    def __class__(self):  # type: ignore[override]
        return dict

    def __repr__(self) -> str:
        return "SpoofedDict()"


class NonTypeClass:
    """Reports a non-type object as its class."""

    @property
    def __class__(self):  # type: ignore[override]
        return "not a class"

    def __repr__(self) -> str:
        return "NonTypeClass()"


class NotATime(datetime.datetime):
    """Not-a-time datetime: unequal to everything, itself included."""

    def __eq__(self, other: object) -> bool:
        return False

    __hash__ = datetime.datetime.__hash__


class Name(str):
    """Boxed string."""


class Count(int):
    """Boxed integer."""


class Ratio(float):
    """Boxed float."""


class BoxedSymbol(Symbol):
    """Boxed symbol."""


class Color(enum.IntEnum):
    RED = 1


class Plain:
    """User class with no special behavior."""


class CallableInstance:
    def __call__(self) -> None:
        return None


class Shade(enum.Enum):
    """Plain enum; the class itself is callable and iterates its members."""

    DARK = 1
    LIGHT = 2


class CallableCollection:
    """Callable instance that also iterates."""

    def __call__(self) -> None:
        return None

    def __iter__(self):
        return iter((1, 2))


def plain_function() -> None:
    return None


def generator_function():
    yield 1


async def async_function() -> None:
    return None


def cyclic_list() -> list[Any]:
    items: list[Any] = []
    items.append(items)
    return items


def cyclic_dict() -> dict[str, Any]:
    mapping: dict[str, Any] = {}
    mapping["self"] = mapping
    return mapping


EXOTIC_FACTORIES: tuple[Callable[[], Any], ...] = (
    ExplodingProxy,
    SpoofedDict,
    NonTypeClass,
    lambda: NotATime(2000, 1, 1),
    lambda: Name("x"),
    lambda: Count(3),
    lambda: Ratio(1.5),
    lambda: BoxedSymbol("boxed"),
    lambda: Color.RED,
    lambda: Shade,
    Plain,
    CallableInstance,
    CallableCollection,
    lambda: plain_function,
    lambda: generator_function,
    lambda: async_function,
    lambda: Plain,
    cyclic_list,
    cyclic_dict,
    lambda: OrderedDict(a=1),
    lambda: defaultdict(list),
    lambda: SimpleNamespace(a=1),
    lambda: re.compile("a+"),
    lambda: ValueError("boom"),
    lambda: frozenset({1}),
    lambda: b"bytes",
    lambda: (1, 2),
    lambda: 1j,
    object,
    lambda: Symbol("token"),
    lambda: UNDEFINED,
    lambda: None,
)


# Hypothesis inspects sampled elements, which ExplodingProxy does not survive,
# so it samples factories and builds the value after the draw
exotic_values = st.sampled_from(EXOTIC_FACTORIES).map(lambda make: make())

scalars = st.one_of(
    st.none(),
    st.just(UNDEFINED),
    st.booleans(),
    st.integers(),
    st.integers(min_value=2**64),
    st.floats(allow_nan=True, allow_infinity=True),
    st.text(),
    st.binary(),
    st.builds(Symbol, st.none() | st.text()),
    st.dates(),
    st.datetimes(),
)

mixed_values = st.one_of(
    scalars,
    st.lists(scalars, max_size=5),
    st.tuples(scalars, scalars),
    st.dictionaries(st.text(), scalars, max_size=5),
    st.sets(st.integers(), max_size=5),
    exotic_values,
)
