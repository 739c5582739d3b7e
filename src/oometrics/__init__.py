"""oometrics - object-oriented design and complexity metrics for typed code."""

__version__ = "0.1.0"

from .analysis import ComplexityAnalyzer, HierarchyResolver, OOMetricsCalculator
from .core.exceptions import (
    NotFoundError,
    OOMetricsError,
    SourceUnavailableError,
)
from .core.file_index import FileTypeIndex
from .core.runtime import PythonRuntimeProvider
from .core.snapshot import TypeSnapshotDiff
from .core.universe import StaticTypeUniverse

__all__ = [
    "ComplexityAnalyzer",
    "FileTypeIndex",
    "HierarchyResolver",
    "NotFoundError",
    "OOMetricsCalculator",
    "OOMetricsError",
    "PythonRuntimeProvider",
    "SourceUnavailableError",
    "StaticTypeUniverse",
    "TypeSnapshotDiff",
    "__version__",
]
