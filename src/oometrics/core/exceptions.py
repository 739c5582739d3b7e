"""Typed exception hierarchy for oometrics.

Hierarchy
---------
OOMetricsError (base)
├── NotFoundError          – referenced type or method is not in the universe
│   ├── TypeNotFoundError
│   └── MethodNotFoundError
├── SourceUnavailableError – declaring file missing or unreadable
├── TokenizerError         – no usable tokenizer for a language
└── ConfigError            – configuration / validation errors

Every error is terminal for the query that raised it. Caches owned by
``FileTypeIndex`` and ``OOMetricsCalculator`` are only swapped in after a
complete rebuild, so a failure never leaves them half populated.
"""

from typing import Any


class OOMetricsError(Exception):
    """Base exception for oometrics."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context = context or {}


# ── Lookup failures ─────────────────────────────────────────────────────


class NotFoundError(OOMetricsError):
    """A type or member is absent from the introspection universe."""

    pass


class TypeNotFoundError(NotFoundError):
    """Type name does not exist in the introspection universe."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"Type not found: {type_name}", {"type": type_name})
        self.type_name = type_name


class MethodNotFoundError(NotFoundError):
    """Method does not exist on the given type."""

    def __init__(self, type_name: str, method_name: str) -> None:
        super().__init__(
            f"Method not found: {type_name}::{method_name}",
            {"type": type_name, "method": method_name},
        )
        self.type_name = type_name
        self.method_name = method_name


# ── Source access ───────────────────────────────────────────────────────


class SourceUnavailableError(OOMetricsError):
    """Source file cannot be read, or the requested lines are not in it."""

    pass


# ── Tokenization ────────────────────────────────────────────────────────


class TokenizerError(OOMetricsError):
    """Tokenizer could not be created or used for a language."""

    pass


# ── Configuration ───────────────────────────────────────────────────────


class ConfigError(OOMetricsError):
    """Configuration / validation errors."""

    pass
