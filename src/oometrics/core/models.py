"""Read-only views of types, members and tokens.

These are the values an introspection provider hands to the metric
calculators. Nothing in oometrics mutates them after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Visibility(str, Enum):
    """Member visibility."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


class MemberKind(str, Enum):
    """Whether a member is a field (attribute) or a method."""

    FIELD = "field"
    METHOD = "method"


class TokenKind(str, Enum):
    """Lexical categories relevant to cyclomatic complexity.

    Everything that does not introduce a decision point is ``OTHER``.
    """

    IF = "if"
    FOR = "for"
    FOREACH = "foreach"
    WHILE = "while"
    CASE = "case"
    CATCH = "catch"
    LOGICAL_AND = "logical-and"
    LOGICAL_OR = "logical-or"
    OTHER = "other"


@dataclass(frozen=True)
class Token:
    """A lexical unit of method source.

    Attributes:
        kind: Category of the token
        value: Literal text of the token
        line: 1-based line within the tokenized text (0 if unknown)
    """

    kind: TokenKind
    value: str
    line: int = 0


@dataclass(frozen=True)
class MemberInfo:
    """A field or method as seen from a particular type.

    ``declaring_type`` names the type in the hierarchy that introduced the
    member, which differs from the queried type when the member is inherited.
    Line numbers are 1-based and inclusive; they are only meaningful for
    methods with a ``source_file``.
    """

    name: str
    kind: MemberKind
    declaring_type: str
    visibility: Visibility = Visibility.PUBLIC
    is_final: bool = False
    is_abstract: bool = False
    source_file: str | None = None
    start_line: int = 0
    end_line: int = 0

    @property
    def is_public(self) -> bool:
        return self.visibility is Visibility.PUBLIC

    @property
    def is_private(self) -> bool:
        return self.visibility is Visibility.PRIVATE

    @property
    def is_overridable(self) -> bool:
        """Non-private, non-final, non-abstract."""
        return not (self.is_private or self.is_final or self.is_abstract)


@dataclass(frozen=True)
class TypeInfo:
    """A class or interface in the introspection universe.

    Attributes:
        name: Unique name within the universe
        is_user_defined: False for built-in types provided by the runtime
        source_file: Declaring file, None for built-ins
        parent: Name of the immediate parent type, None for roots
        fields: Visible fields (own and inherited)
        methods: Visible methods (own and inherited)
        is_interface: True for interfaces / protocols
    """

    name: str
    is_user_defined: bool = True
    source_file: str | None = None
    parent: str | None = None
    fields: tuple[MemberInfo, ...] = field(default_factory=tuple)
    methods: tuple[MemberInfo, ...] = field(default_factory=tuple)
    is_interface: bool = False

    def get_method(self, name: str) -> MemberInfo | None:
        """Return the visible method called ``name``, if any."""
        for method in self.methods:
            if method.name == name:
                return method
        return None

    def own_methods(self) -> list[MemberInfo]:
        """Methods declared (or overridden) on this type itself."""
        return [m for m in self.methods if m.declaring_type == self.name]
