"""Type universe access: data model, providers, snapshots and file index."""

from .exceptions import (
    ConfigError,
    MethodNotFoundError,
    NotFoundError,
    OOMetricsError,
    SourceUnavailableError,
    TokenizerError,
    TypeNotFoundError,
)
from .file_index import FileTypeIndex
from .models import MemberInfo, MemberKind, Token, TokenKind, TypeInfo, Visibility
from .provider import FileSystemSourceReader, SourceReader, TypeIntrospectionProvider
from .runtime import PythonRuntimeProvider
from .snapshot import TypeSnapshotDiff
from .universe import StaticTypeUniverse, make_field, make_method

__all__ = [
    "ConfigError",
    "FileSystemSourceReader",
    "FileTypeIndex",
    "MemberInfo",
    "MemberKind",
    "MethodNotFoundError",
    "NotFoundError",
    "OOMetricsError",
    "PythonRuntimeProvider",
    "SourceReader",
    "SourceUnavailableError",
    "StaticTypeUniverse",
    "Token",
    "TokenKind",
    "TokenizerError",
    "TypeInfo",
    "TypeIntrospectionProvider",
    "TypeNotFoundError",
    "TypeSnapshotDiff",
    "Visibility",
    "make_field",
    "make_method",
]
