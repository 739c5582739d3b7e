"""Metric result dataclasses."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass
class MethodComplexity:
    """Cyclomatic complexity of one method.

    Attributes:
        type_name: Type declaring the method
        method_name: Method name
        ccn: Cyclomatic complexity number (>= 1)
        rating: "low", "moderate", "high" or "very_high"
    """

    type_name: str
    method_name: str
    ccn: int = 1
    rating: str = "low"


@dataclass
class TypeMetrics:
    """Object-oriented design metrics for one type.

    Percentages are in the range [0, 100].
    """

    type_name: str
    aif: float = 0.0  # Attribute Inheritance Factor
    ahf: float = 0.0  # Attribute Hiding Factor
    mif: float = 0.0  # Method Inheritance Factor
    mhf: float = 0.0  # Method Hiding Factor
    pf: float = 0.0  # Polymorphism Factor
    noc: int = 0  # Number of Children
    dit: int = 1  # Depth of Inheritance Tree

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
