"""Inheritance chain resolution."""

from __future__ import annotations

from ..core.provider import TypeIntrospectionProvider


class HierarchyResolver:
    """Walks parent links from a type up to its root ancestor."""

    def __init__(self, provider: TypeIntrospectionProvider) -> None:
        self.provider = provider

    def hierarchy(self, type_name: str) -> list[str]:
        """Return ``[type_name, parent, grandparent, ..., root]``.

        Raises:
            TypeNotFoundError: If ``type_name`` (or an ancestor) is not declared
        """
        chain = [type_name]
        info = self.provider.lookup_type(type_name)
        while info.parent is not None:
            chain.append(info.parent)
            info = self.provider.lookup_type(info.parent)
        return chain

    def depth_of_inheritance_tree(self, type_name: str) -> int:
        """DIT: length of the chain including the type itself (roots are 1)."""
        return len(self.hierarchy(type_name))
