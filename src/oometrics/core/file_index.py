"""Cached mapping from source file to the types it declares."""

from __future__ import annotations

from loguru import logger

from .models import TypeInfo
from .provider import TypeIntrospectionProvider


def strip_common_prefix(path: str, common_path_prefix: str) -> str:
    """Remove every occurrence of ``common_path_prefix`` from ``path``.

    Plain substring removal, not path-aware.
    """
    if common_path_prefix:
        return path.replace(common_path_prefix, "")
    return path


class FileTypeIndex:
    """Groups user-defined types and interfaces by declaring file.

    The index is built in one pass over the universe on first use and reused
    for later lookups. Types loaded after the build are invisible until the
    index is cleared (``clear()`` or ``clear_cache=True``).

    The prefix used to normalize paths is the one passed on the call that
    triggers the build; later calls should use the same prefix.
    """

    def __init__(
        self, provider: TypeIntrospectionProvider, common_path_prefix: str = ""
    ) -> None:
        self.provider = provider
        self.common_path_prefix = common_path_prefix
        self._file_types: dict[str, list[TypeInfo]] = {}

    def clear(self) -> None:
        """Discard the cached file→types mapping."""
        if self._file_types:
            logger.debug(f"Clearing file index ({len(self._file_types)} files)")
        self._file_types = {}

    def _build(self, common_path_prefix: str) -> dict[str, list[TypeInfo]]:
        names = list(self.provider.declared_type_names())
        names.extend(self.provider.declared_interface_names())

        file_types: dict[str, list[TypeInfo]] = {}
        for name in names:
            info = self.provider.lookup_type(name)
            if not info.is_user_defined or not info.source_file:
                continue
            key = strip_common_prefix(info.source_file, common_path_prefix)
            file_types.setdefault(key, []).append(info)

        logger.debug(
            f"Built file index: {len(file_types)} files from {len(names)} types"
        )
        return file_types

    def classes_in_file(
        self,
        path: str,
        common_path_prefix: str | None = None,
        clear_cache: bool = False,
    ) -> list[TypeInfo]:
        """Return the types declared in ``path``, in discovery order.

        Args:
            path: Source file path, normalized with the same prefix rule
            common_path_prefix: Prefix stripped from indexed and queried paths;
                defaults to the prefix given at construction
            clear_cache: Rebuild the index before the lookup

        Returns:
            Types declared in the file, or an empty list
        """
        prefix = common_path_prefix
        if prefix is None:
            prefix = self.common_path_prefix
        if clear_cache:
            self.clear()
        if not self._file_types:
            self._file_types = self._build(prefix)

        return list(self._file_types.get(strip_common_prefix(path, prefix), []))
