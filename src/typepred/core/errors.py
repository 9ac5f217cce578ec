"""
Structured error types for typepred.

Predicates never raise. Errors exist only on the registry surface, where a
caller asks for a predicate by name or registers a new one.

Manifesto:
    - **Typed hierarchy:** One base class, one subclass per failure kind
    - **Builtin compatibility:** Lookup failures are also ``KeyError``, duplicate
      registrations are also ``ValueError``, so generic handlers keep working
    - **Serialization-ready:** ``to_dict()`` for structured logging

Architecture:
    ::

        ┌─────────────────────────────────────────────────────┐
        │                   TypepredError                      │
        │                (category, context)                   │
        ├─────────────────────────────────────────────────────┤
        │  PredicateNotFoundError     DuplicatePredicateError │
        │  (LOOKUP, KeyError)         (REGISTRY, ValueError)  │
        └─────────────────────────────────────────────────────┘

Examples:
    >>> from typepred.core.registry import get_predicate
    >>> get_predicate("is_unicorn")
    Traceback (most recent call last):
    ...
    PredicateNotFoundError: Predicate 'is_unicorn' not found. Available: ...

Tags:
    error-handling, exception-hierarchy, typepred

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error categories for classification and routing."""

    LOOKUP = "LOOKUP"  # Unknown predicate name
    REGISTRY = "REGISTRY"  # Conflicting registration
    INTERNAL = "INTERNAL"  # Bugs, unexpected state


class TypepredError(Exception):
    """
    Base exception for all typepred errors.

    Subclasses set ``default_category``; instances carry a free-form
    ``context`` dict that ``to_dict()`` folds into the log record.
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = dict(context or {})

    def with_context(self, **kwargs: Any) -> TypepredError:
        """Add context to this error (fluent API)."""
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        return result

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


class PredicateNotFoundError(TypepredError, KeyError):
    """No predicate is registered under the requested name."""

    default_category = ErrorCategory.LOOKUP

    def __init__(self, name: str, available: list[str]):
        super().__init__(
            f"Predicate '{name}' not found. Available: {', '.join(available)}",
            context={"name": name},
        )
        self.name = name
        self.available = available


class DuplicatePredicateError(TypepredError, ValueError):
    """A predicate is already registered under this name."""

    default_category = ErrorCategory.REGISTRY

    def __init__(self, name: str):
        super().__init__(
            f"Predicate '{name}' is already registered",
            context={"name": name},
        )
        self.name = name


__all__ = [
    "ErrorCategory",
    "TypepredError",
    "PredicateNotFoundError",
    "DuplicatePredicateError",
]
