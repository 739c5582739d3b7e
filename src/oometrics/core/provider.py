"""Interfaces the metric engine consumes.

The engine never enumerates types or reads files itself. It asks a
``TypeIntrospectionProvider`` for structural facts and a ``SourceReader``
for method text, so the same calculators run against a live interpreter
(``PythonRuntimeProvider``) or a prebuilt index (``StaticTypeUniverse``).
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from loguru import logger

from .exceptions import SourceUnavailableError
from .models import TypeInfo


@runtime_checkable
class TypeIntrospectionProvider(Protocol):
    """Answers structural queries about the current type universe."""

    def declared_type_names(self) -> Sequence[str]:
        """Names of all declared classes (built-in and user-defined)."""
        ...

    def declared_interface_names(self) -> Sequence[str]:
        """Names of all declared interfaces."""
        ...

    def lookup_type(self, name: str) -> TypeInfo:
        """Return the type called ``name``.

        Raises:
            TypeNotFoundError: If no such type is declared
        """
        ...


@runtime_checkable
class SourceReader(Protocol):
    """Reads source files for method text reconstruction."""

    def read_lines(self, path: str) -> list[str]:
        """Return the file's lines with line endings kept.

        Raises:
            SourceUnavailableError: If the file cannot be read
        """
        ...

    def exists(self, path: str) -> bool: ...


class FileSystemSourceReader:
    """``SourceReader`` backed by the local filesystem."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read_lines(self, path: str) -> list[str]:
        try:
            with open(path, encoding=self.encoding, errors="replace") as f:
                return f.readlines()
        except OSError as e:
            logger.debug(f"Cannot read source file {path}: {e}")
            raise SourceUnavailableError(
                f"Cannot read source file: {path}", {"path": path, "reason": str(e)}
            ) from e

    def exists(self, path: str) -> bool:
        return Path(path).is_file()
