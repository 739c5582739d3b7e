"""In-memory type universe built ahead of time.

``StaticTypeUniverse`` is a ``TypeIntrospectionProvider`` for callers that
index a program up front (from a symbol table, a parsed AST, or by hand in
tests) instead of reflecting over a live runtime. Types are declared with
their *own* members only; inherited members are resolved on lookup.

Example:
    >>> universe = StaticTypeUniverse()
    >>> universe.declare("Base", methods=[make_method("run")])
    >>> universe.declare("Child", parent="Base", methods=[make_method("run")])
    >>> [m.declaring_type for m in universe.lookup_type("Child").methods]
    ['Child']
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

from loguru import logger

from .exceptions import TypeNotFoundError
from .models import MemberInfo, MemberKind, TypeInfo, Visibility


def make_field(name: str, visibility: Visibility = Visibility.PUBLIC) -> MemberInfo:
    """Build an own field; the declaring type is filled in by ``declare``."""
    return MemberInfo(
        name=name, kind=MemberKind.FIELD, declaring_type="", visibility=visibility
    )


def make_method(
    name: str,
    visibility: Visibility = Visibility.PUBLIC,
    *,
    is_final: bool = False,
    is_abstract: bool = False,
    source_file: str | None = None,
    start_line: int = 0,
    end_line: int = 0,
) -> MemberInfo:
    """Build an own method; the declaring type is filled in by ``declare``."""
    return MemberInfo(
        name=name,
        kind=MemberKind.METHOD,
        declaring_type="",
        visibility=visibility,
        is_final=is_final,
        is_abstract=is_abstract,
        source_file=source_file,
        start_line=start_line,
        end_line=end_line,
    )


@dataclass
class _Declaration:
    name: str
    parent: str | None
    fields: tuple[MemberInfo, ...]
    methods: tuple[MemberInfo, ...]
    source_file: str | None
    is_user_defined: bool
    is_interface: bool


class StaticTypeUniverse:
    """Mutable registry of declared types answering provider queries."""

    def __init__(self) -> None:
        self._declarations: dict[str, _Declaration] = {}
        self._resolved: dict[str, TypeInfo] = {}

    def declare(
        self,
        name: str,
        *,
        parent: str | None = None,
        fields: Iterable[MemberInfo] = (),
        methods: Iterable[MemberInfo] = (),
        source_file: str | None = None,
        is_user_defined: bool = True,
        is_interface: bool = False,
    ) -> None:
        """Declare a type with its own members.

        The parent must already be declared, which keeps every parent chain
        finite and acyclic.

        Raises:
            TypeNotFoundError: If ``parent`` is not declared
            ValueError: If ``name`` is already an ancestor of ``parent``, or
                two own fields or two own methods share a name
        """
        if parent is not None and parent not in self._declarations:
            raise TypeNotFoundError(parent)
        ancestor = parent
        while ancestor is not None:
            if ancestor == name:
                raise ValueError(f"Declaring {name} under {parent} creates a cycle")
            decl = self._declarations.get(ancestor)
            ancestor = decl.parent if decl else None

        fields = tuple(fields)
        methods = tuple(methods)
        for kind, members in (("field", fields), ("method", methods)):
            names = [m.name for m in members]
            duplicates = sorted({n for n in names if names.count(n) > 1})
            if duplicates:
                raise ValueError(f"{name} declares duplicate {kind}s: {duplicates}")

        self._declarations[name] = _Declaration(
            name=name,
            parent=parent,
            fields=tuple(replace(f, declaring_type=name) for f in fields),
            methods=tuple(replace(m, declaring_type=name) for m in methods),
            source_file=source_file,
            is_user_defined=is_user_defined,
            is_interface=is_interface,
        )
        # Redeclaring a type changes what its descendants inherit
        self._resolved.clear()
        logger.debug(f"Declared type {name} (parent={parent})")

    def remove(self, name: str) -> None:
        """Remove a type; descendants keep a dangling parent name."""
        self._declarations.pop(name, None)
        self._resolved.clear()

    def declared_type_names(self) -> list[str]:
        return [n for n, d in self._declarations.items() if not d.is_interface]

    def declared_interface_names(self) -> list[str]:
        return [n for n, d in self._declarations.items() if d.is_interface]

    def lookup_type(self, name: str) -> TypeInfo:
        if name in self._resolved:
            return self._resolved[name]

        decl = self._declarations.get(name)
        if decl is None:
            raise TypeNotFoundError(name)

        fields = list(decl.fields)
        methods = list(decl.methods)

        if decl.parent is not None:
            parent_info = self.lookup_type(decl.parent)
            field_names = {f.name for f in fields}
            method_names = {m.name for m in methods}
            # Private fields stay with their declaring type; private
            # methods are still reported as inherited members.
            fields.extend(
                f
                for f in parent_info.fields
                if f.name not in field_names and not f.is_private
            )
            methods.extend(m for m in parent_info.methods if m.name not in method_names)

        info = TypeInfo(
            name=name,
            is_user_defined=decl.is_user_defined,
            source_file=decl.source_file,
            parent=decl.parent,
            fields=tuple(fields),
            methods=tuple(methods),
            is_interface=decl.is_interface,
        )
        self._resolved[name] = info
        return info
