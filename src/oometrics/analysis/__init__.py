"""Metric calculators.

Key Components:
    - HierarchyResolver: ancestor chains and DIT
    - ComplexityAnalyzer: cyclomatic complexity per method
    - OOMetricsCalculator: AIF, AHF, MIF, MHF, PF, NOC, DIT per type

Example:
    universe = StaticTypeUniverse()
    universe.declare(
        "Base",
        methods=[make_method("run"), make_method("helper", Visibility.PRIVATE)],
    )
    universe.declare("Child", parent="Base", methods=[make_method("run")])

    calculator = OOMetricsCalculator(universe)
    assert calculator.pf("Child") == 100.0
    assert calculator.mif("Child") == 50.0
"""

from .complexity import ComplexityAnalyzer
from .hierarchy import HierarchyResolver
from .metrics import MethodComplexity, TypeMetrics
from .oo_metrics import OOMetricsCalculator

__all__ = [
    "ComplexityAnalyzer",
    "HierarchyResolver",
    "MethodComplexity",
    "OOMetricsCalculator",
    "TypeMetrics",
]
