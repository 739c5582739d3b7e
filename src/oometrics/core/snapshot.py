"""Detect types declared between two points in time."""

from __future__ import annotations

from loguru import logger

from .provider import FileSystemSourceReader, SourceReader, TypeIntrospectionProvider


class TypeSnapshotDiff:
    """Records the declared type names and reports what appeared since.

    Example:
        >>> diff = TypeSnapshotDiff(provider)
        >>> diff.start()
        >>> import some_module_under_test
        >>> diff.end()
        ['some_module_under_test.Widget', ...]
    """

    def __init__(
        self,
        provider: TypeIntrospectionProvider,
        reader: SourceReader | None = None,
    ) -> None:
        self.provider = provider
        self.reader = reader or FileSystemSourceReader()
        self._baseline: set[str] = set()

    def start(self) -> None:
        """Record the current universe, discarding any previous snapshot."""
        self._baseline = set(self.provider.declared_type_names())
        logger.debug(f"Type snapshot started with {len(self._baseline)} types")

    def end(self) -> list[str]:
        """Return names declared since the last ``start()`` or ``end()``.

        Order follows the provider's enumeration order with duplicates
        removed. The current universe becomes the new baseline, so a second
        call on an unchanged universe returns an empty list.
        """
        current = list(dict.fromkeys(self.provider.declared_type_names()))
        new_names = [name for name in current if name not in self._baseline]
        self._baseline = set(current)
        logger.debug(f"Type snapshot found {len(new_names)} new types")
        return new_names

    def end_as_files(self) -> list[str]:
        """Return the source files declaring the types found by ``end()``.

        Built-in types have no file and are skipped. Files that no longer
        exist are dropped silently; each path is reported once.
        """
        files: list[str] = []
        for name in self.end():
            info = self.provider.lookup_type(name)
            if not info.is_user_defined or not info.source_file:
                continue
            if not self.reader.exists(info.source_file):
                logger.warning(
                    f"Dropping {name}: source file {info.source_file} no longer exists"
                )
                continue
            if info.source_file not in files:
                files.append(info.source_file)
        return files
