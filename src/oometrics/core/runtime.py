"""Introspection provider over the running Python interpreter.

The universe is every class reachable as a module-level (or nested) attribute
of a module in ``sys.modules``. Python has no access modifiers or single
inheritance, so the provider maps Python conventions onto the metric model:

- parent: the first base class; ``object`` is never reported as a parent
- visibility: ``__name`` (mangled) is private, ``_name`` is protected,
  dunder and plain names are public
- final: ``@typing.final``; abstract: ``@abc.abstractmethod``
- interfaces: ``typing.Protocol`` subclasses
- user-defined: the class was defined in Python source

Fields are non-callable class attributes, properties and annotated names.
"""

from __future__ import annotations

import inspect
import os
import sys
import types
from collections.abc import Iterator

from loguru import logger

from .exceptions import TypeNotFoundError
from .models import MemberInfo, MemberKind, TypeInfo, Visibility


def qualified_name(cls: type) -> str:
    """Universe name of a class: ``module.QualName``."""
    return f"{cls.__module__}.{cls.__qualname__}"


# Class attributes created by the interpreter, typing or abc rather than
# written by the class author
_SYNTHETIC_MEMBERS = frozenset(
    {
        "__abstractmethods__",
        "__annotate__",
        "__annotate_func__",
        "__annotations__",
        "__annotations_cache__",
        "__classcell__",
        "__dict__",
        "__doc__",
        "__firstlineno__",
        "__module__",
        "__non_callable_proto_members__",
        "__orig_bases__",
        "__parameters__",
        "__protocol_attrs__",
        "__qualname__",
        "__slots__",
        "__static_attributes__",
        "__weakref__",
        "_abc_impl",
        "_is_protocol",
        "_is_runtime_protocol",
    }
)


def _is_dunder(name: str) -> bool:
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


def _member_visibility(raw_name: str, owner: type) -> tuple[str, Visibility]:
    """Return the demangled member name and its visibility."""
    mangle_prefix = f"_{owner.__name__.lstrip('_')}__"
    if raw_name.startswith(mangle_prefix):
        return "__" + raw_name[len(mangle_prefix) :], Visibility.PRIVATE
    if _is_dunder(raw_name):
        return raw_name, Visibility.PUBLIC
    if raw_name.startswith("_"):
        return raw_name, Visibility.PROTECTED
    return raw_name, Visibility.PUBLIC


def _source_file(obj: object) -> str | None:
    try:
        path = inspect.getsourcefile(obj)  # type: ignore[arg-type]
    except (TypeError, OSError):
        return None
    return os.path.abspath(path) if path else None


class PythonRuntimeProvider:
    """``TypeIntrospectionProvider`` backed by live reflection.

    The class index is rebuilt on every ``declared_*`` call, so newly
    imported modules show up immediately. ``lookup_type`` uses the last
    index and rebuilds once on a miss.
    """

    def __init__(self) -> None:
        self._classes: dict[str, type] = {}
        # Bases seen during lookups that no module exposes by name
        self._bases: dict[str, type] = {}

    # ── universe enumeration ────────────────────────────────────────────

    def _iter_module_classes(self) -> Iterator[type]:
        seen: set[int] = set()
        for module_name, module in list(sys.modules.items()):
            if module is None:
                continue
            try:
                values = list(vars(module).values())
            except TypeError:
                continue
            stack = [
                v
                for v in values
                if isinstance(v, type) and getattr(v, "__module__", None) == module_name
            ]
            while stack:
                cls = stack.pop()
                if id(cls) in seen:
                    continue
                seen.add(id(cls))
                yield cls
                # Nested classes
                prefix = cls.__qualname__ + "."
                stack.extend(
                    v
                    for v in vars(cls).values()
                    if isinstance(v, type)
                    and v.__module__ == module_name
                    and v.__qualname__.startswith(prefix)
                )

    def _rebuild_index(self) -> None:
        self._classes = {
            qualified_name(cls): cls for cls in self._iter_module_classes()
        }
        logger.debug(f"Indexed {len(self._classes)} runtime classes")

    def declared_type_names(self) -> list[str]:
        self._rebuild_index()
        return [n for n, c in self._classes.items() if not _is_interface(c)]

    def declared_interface_names(self) -> list[str]:
        self._rebuild_index()
        return [n for n, c in self._classes.items() if _is_interface(c)]

    # ── type lookup ─────────────────────────────────────────────────────

    def resolve_class(self, name: str) -> type:
        """Return the live class object for a universe name."""
        cls = self._classes.get(name) or self._bases.get(name)
        if cls is None:
            self._rebuild_index()
            cls = self._classes.get(name)
        if cls is None:
            raise TypeNotFoundError(name)
        return cls

    def lookup_type(self, name: str) -> TypeInfo:
        cls = self.resolve_class(name)

        parent = _parent_class(cls)
        parent_name = None
        if parent is not None:
            parent_name = qualified_name(parent)
            if parent_name not in self._classes:
                self._bases[parent_name] = parent

        source_file = _source_file(cls)
        return TypeInfo(
            name=name,
            is_user_defined=source_file is not None,
            source_file=source_file,
            parent=parent_name,
            fields=tuple(self._collect_members(cls, MemberKind.FIELD)),
            methods=tuple(self._collect_members(cls, MemberKind.METHOD)),
            is_interface=_is_interface(cls),
        )

    def _collect_members(self, cls: type, kind: MemberKind) -> list[MemberInfo]:
        members: list[MemberInfo] = []
        seen: set[str] = set()

        for klass in cls.__mro__:
            if klass is object:
                continue
            inherited = klass is not cls
            declaring = qualified_name(klass)
            annotations = _annotations(klass) if kind is MemberKind.FIELD else {}

            candidates = dict(vars(klass))
            for annotated in annotations:
                candidates.setdefault(annotated, None)

            for raw_name, value in candidates.items():
                if raw_name in _SYNTHETIC_MEMBERS:
                    continue
                name, visibility = _member_visibility(raw_name, klass)
                if name in seen:
                    continue
                if kind is MemberKind.METHOD:
                    if not _is_method(value):
                        continue
                    member = _method_info(name, value, declaring, visibility)
                else:
                    if _is_dunder(raw_name) or _is_method(value):
                        continue
                    if isinstance(value, type):
                        continue
                    if inherited and visibility is Visibility.PRIVATE:
                        continue
                    member = MemberInfo(
                        name=name,
                        kind=MemberKind.FIELD,
                        declaring_type=declaring,
                        visibility=visibility,
                    )
                seen.add(name)
                members.append(member)

        return members


def _is_interface(cls: type) -> bool:
    return bool(getattr(cls, "_is_protocol", False))


def _parent_class(cls: type) -> type | None:
    for base in cls.__bases__:
        if base is not object:
            return base
    return None


def _annotations(klass: type) -> dict[str, object]:
    try:
        return dict(inspect.get_annotations(klass))
    except Exception as e:
        logger.debug(f"Cannot read annotations of {qualified_name(klass)}: {e}")
        return {}


def _is_method(value: object) -> bool:
    if isinstance(value, (staticmethod, classmethod)):
        return True
    return inspect.isroutine(value)


def _last_line(code: types.CodeType) -> int:
    """Highest source line covered by a code object and its nested code."""
    last = code.co_firstlineno
    for _, end_line, _, _ in code.co_positions():
        if end_line is not None and end_line > last:
            last = end_line
    for const in code.co_consts:
        if isinstance(const, types.CodeType):
            last = max(last, _last_line(const))
    return last


def _method_info(
    name: str, value: object, declaring: str, visibility: Visibility
) -> MemberInfo:
    func = value.__func__ if isinstance(value, (staticmethod, classmethod)) else value

    source_file = None
    start_line = end_line = 0
    # Line ranges come from the code object, which starts at the first
    # decorator; builtins and C methods have none
    code = getattr(inspect.unwrap(func), "__code__", None)  # type: ignore[arg-type]
    if isinstance(code, types.CodeType):
        source_file = os.path.abspath(code.co_filename)
        start_line = code.co_firstlineno
        end_line = _last_line(code)

    return MemberInfo(
        name=name,
        kind=MemberKind.METHOD,
        declaring_type=declaring,
        visibility=visibility,
        is_final=bool(getattr(func, "__final__", False)),
        is_abstract=bool(getattr(value, "__isabstractmethod__", False)),
        source_file=source_file,
        start_line=start_line,
        end_line=end_line,
    )
