"""
Sentinel values: the "not provided" marker and unique symbol tokens.

Python has a single native absence value (``None``). Callers that need to
tell "explicitly empty" apart from "never supplied" use ``UNDEFINED`` as the
second sentinel, typically as a keyword default.

Manifesto:
    Two absence values, never confused:

    - **None:** the caller said "nothing"
    - **UNDEFINED:** the caller said nothing at all

    ``Symbol`` fills the other gap: an opaque, identity-compared token with a
    human-readable description, useful as a dictionary key that can never
    collide with user data.

Examples:
    >>> from typepred.core.sentinels import UNDEFINED
    >>> def fetch(key, default=UNDEFINED):
    ...     if default is UNDEFINED:
    ...         ...  # raise, nothing to fall back to
    >>> bool(UNDEFINED)
    False

    >>> token = Symbol("cursor")
    >>> token == Symbol("cursor")
    False

Tags:
    sentinel, undefined, symbol, typepred

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from typing import Any, Final


class UndefinedType:
    """Type of the ``UNDEFINED`` singleton."""

    _instance: UndefinedType | None = None

    __slots__ = ()

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> UndefinedType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> UndefinedType:
        return self

    def __reduce__(self) -> str:
        # Pickle by reference to the module-level name
        return "UNDEFINED"


UNDEFINED: Final = UndefinedType()


class Symbol:
    """
    Unique, immutable token with an optional description.

    Every call to ``Symbol()`` returns a new token that compares equal only to
    itself. Instances of ``Symbol`` subclasses are the boxed form: they are
    still symbols, but not primitive ones.
    """

    __slots__ = ("_description",)

    def __init__(self, description: str | None = None):
        object.__setattr__(self, "_description", description)

    @property
    def description(self) -> str | None:
        return self._description

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        if self._description is None:
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._description!r})"

    def __copy__(self) -> Symbol:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Symbol:
        return self


__all__ = [
    "UNDEFINED",
    "UndefinedType",
    "Symbol",
]
