"""Tests for typepred.core.tags: the Tag Classifier."""

from __future__ import annotations

import collections
import datetime
import functools
import re
from collections.abc import Mapping, Set
from types import SimpleNamespace

import pytest
from structlog.testing import capture_logs

from tests._support.values import (
    BoxedSymbol,
    Color,
    Count,
    ExplodingProxy,
    Name,
    NonTypeClass,
    NotATime,
    Plain,
    Ratio,
    SpoofedDict,
    async_function,
    generator_function,
    plain_function,
)
from typepred.core.logging import configure_logging
from typepred.core.sentinels import UNDEFINED, Symbol
from typepred.core.tags import get_tag


class FrozenMap(Mapping):
    def __init__(self, **items):
        self._items = dict(items)

    def __getitem__(self, key):
        return self._items[key]

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)


class Bag(Set):
    def __contains__(self, item):
        return False

    def __iter__(self):
        return iter(())

    def __len__(self):
        return 0


async def async_generator_function():
    yield 1


class TestAbsenceTags:
    """The two absence sentinels get distinct labels."""

    def test_none_is_null(self):
        assert get_tag(None) == "Null"

    def test_undefined_is_undefined(self):
        assert get_tag(UNDEFINED) == "Undefined"


class TestBuiltinTags:
    """Labels for builtin values."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "Boolean"),
            (False, "Boolean"),
            (0, "Number"),
            (2**100, "Number"),
            (1.5, "Number"),
            (float("nan"), "Number"),
            (1j, "Complex"),
            ("abc", "String"),
            (Symbol("s"), "Symbol"),
            ([], "Array"),
            ((), "Tuple"),
            ({}, "Object"),
            (SimpleNamespace(), "Object"),
            (set(), "Set"),
            (frozenset(), "Set"),
            (datetime.date(2025, 1, 1), "Date"),
            (datetime.datetime(2025, 1, 1), "Date"),
            (re.compile("x"), "RegExp"),
            (ValueError("x"), "Error"),
            (KeyboardInterrupt(), "Error"),
            (b"x", "Bytes"),
            (bytearray(b"x"), "Bytes"),
            (memoryview(b"x"), "Bytes"),
            (object(), "Object"),
        ],
    )
    def test_label(self, value, expected):
        assert get_tag(value) == expected


class TestBoxedTags:
    """Subclass instances keep the tag of the builtin they derive from."""

    def test_boxed_string(self):
        assert get_tag(Name("x")) == "String"

    def test_boxed_numbers(self):
        assert get_tag(Count(1)) == "Number"
        assert get_tag(Ratio(1.5)) == "Number"
        assert get_tag(Color.RED) == "Number"

    def test_boxed_symbol(self):
        assert get_tag(BoxedSymbol("x")) == "Symbol"

    def test_dict_subclasses_are_objects(self):
        assert get_tag(collections.OrderedDict()) == "Object"
        assert get_tag(collections.defaultdict(list)) == "Object"

    def test_abc_mapping_is_map(self):
        assert get_tag(FrozenMap(a=1)) == "Map"

    def test_abc_set_is_set(self):
        assert get_tag(Bag()) == "Set"

    def test_user_class_is_object(self):
        assert get_tag(Plain()) == "Object"


class TestFunctionTags:
    """Callables are refined by what calling them produces."""

    def test_plain_function(self):
        assert get_tag(plain_function) == "Function"

    def test_lambda(self):
        assert get_tag(lambda: None) == "Function"

    def test_builtin(self):
        assert get_tag(len) == "Function"

    def test_class_is_function(self):
        assert get_tag(Plain) == "Function"
        assert get_tag(dict) == "Function"

    def test_bound_method(self):
        assert get_tag("abc".upper) == "Function"

    def test_generator_function(self):
        assert get_tag(generator_function) == "GeneratorFunction"

    def test_partial_of_generator_function(self):
        assert get_tag(functools.partial(generator_function)) == "GeneratorFunction"

    def test_async_function(self):
        assert get_tag(async_function) == "AsyncFunction"

    def test_async_generator_function(self):
        assert get_tag(async_generator_function) == "AsyncGeneratorFunction"

    def test_generator_object_is_not_a_function(self):
        assert get_tag(generator_function()) == "Object"


class TestReportedClass:
    """Labels follow ``__class__`` and fall back to the real type."""

    def test_spoofed_class_is_reported(self):
        assert get_tag(SpoofedDict()) == "Object"

    def test_not_a_time_is_still_a_date(self):
        assert get_tag(NotATime(2000, 1, 1)) == "Date"

    def test_raising_class_falls_back_to_real_type(self):
        assert get_tag(ExplodingProxy()) == "Object"

    def test_non_type_class_falls_back_to_real_type(self):
        assert get_tag(NonTypeClass()) == "Object"

    def test_fallback_is_logged(self):
        configure_logging(level="DEBUG", json_format=True)
        with capture_logs() as logs:
            get_tag(ExplodingProxy())

        events = [entry for entry in logs if entry["event"] == "tag_class_fallback"]
        assert events
        assert events[0]["reason"] == "raised"
        assert events[0]["error"] == "RuntimeError"
