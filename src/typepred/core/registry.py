"""Predicate registry: category name → predicate function.

Manifesto:
    A central registry lets code look predicates up by name at runtime (for
    example from a config file or a rule table) without import-time coupling,
    and lets ``classify()`` report every category a value belongs to.

    The ``@predicate`` decorator does two jobs at the single place every
    predicate passes through: it registers the function, and it makes the
    function total. If evaluation raises, the failure is logged at debug level
    and the predicate's declared default is returned instead.

Tags:
    typepred, registry, predicate-lookup, classification

Doc-Types:
    api-reference
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from typepred.core.errors import DuplicatePredicateError, PredicateNotFoundError
from typepred.core.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[[Any], bool])

# Global predicate registry
_registry: dict[str, Callable[[Any], bool]] = {}
_aliases: dict[str, str] = {}
_loaded: bool = False


def predicate(name: str | None = None, *, default: bool = False) -> Callable[[F], F]:
    """Decorator that guards a predicate against exceptions and registers it.

    Args:
        name: Registry name (defaults to the function's ``__name__``)
        default: Result returned when evaluating the predicate raises
    """

    def decorator(func: F) -> F:
        key = name or func.__name__

        @functools.wraps(func)
        def guarded(value: Any) -> bool:
            try:
                return func(value)
            except Exception as exc:
                logger.debug(
                    "predicate_guarded",
                    predicate=key,
                    error=type(exc).__name__,
                    default=default,
                )
                return default

        _register(key, guarded)
        return guarded  # type: ignore[return-value]

    return decorator


def register_alias(alias: str, func: F) -> F:
    """Register ``alias`` as another name for an already registered predicate.

    The alias resolves to the identical function object, so the two names
    agree on every input by construction.
    """
    target = _name_of(func)
    if alias in _registry or alias in _aliases:
        raise DuplicatePredicateError(alias)
    _aliases[alias] = target
    logger.debug("predicate_alias_registered", alias=alias, target=target)
    return func


def _register(key: str, func: Callable[[Any], bool]) -> None:
    if key in _registry or key in _aliases:
        raise DuplicatePredicateError(key)
    _registry[key] = func
    logger.debug("predicate_registered", name=key)


def _name_of(func: Callable[[Any], bool]) -> str:
    for key, registered in _registry.items():
        if registered is func:
            return key
    raise PredicateNotFoundError(getattr(func, "__name__", repr(func)), list_predicates())


def _ensure_loaded() -> None:
    """Import the builtin predicates so they register themselves."""
    global _loaded
    if not _loaded:
        import typepred.core.predicates  # noqa: F401

        _loaded = True


def get_predicate(name: str) -> Callable[[Any], bool]:
    """Get a predicate by name (aliases resolve to their target)."""
    _ensure_loaded()
    key = _aliases.get(name, name)
    if key not in _registry:
        raise PredicateNotFoundError(name, list_predicates())
    return _registry[key]


def list_predicates() -> list[str]:
    """List all registered predicate names, aliases included."""
    _ensure_loaded()
    return sorted([*_registry, *_aliases])


def is_alias(name: str) -> bool:
    """Whether ``name`` is registered as an alias rather than a predicate."""
    _ensure_loaded()
    return name in _aliases


def classify(value: Any) -> list[str]:
    """Names of every registered predicate (aliases excluded) that holds for ``value``."""
    _ensure_loaded()
    return sorted(key for key, func in _registry.items() if func(value))


def unregister_predicate(name: str) -> None:
    """Remove a predicate and any aliases pointing at it (for testing)."""
    if name in _aliases:
        del _aliases[name]
        return
    if name not in _registry:
        raise PredicateNotFoundError(name, list_predicates())
    del _registry[name]
    for alias in [a for a, target in _aliases.items() if target == name]:
        del _aliases[alias]


__all__ = [
    "predicate",
    "register_alias",
    "get_predicate",
    "list_predicates",
    "is_alias",
    "classify",
    "unregister_predicate",
]
