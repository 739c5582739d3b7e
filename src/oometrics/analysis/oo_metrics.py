"""Object-oriented design metrics (MOOD and CK subsets).

All percentage metrics are computed from the members visible on a single
type, own and inherited, and return 0 when the relevant member collection
is empty.

- AIF / MIF: share of fields / methods inherited from an ancestor
- AHF / MHF: share of fields / methods that are not public
- PF: share of the parent's overridable methods the type redeclares
- NOC: number of immediate children
- DIT: depth of the inheritance chain including the type itself
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from loguru import logger

from ..core.models import MemberInfo
from ..core.provider import TypeIntrospectionProvider
from .hierarchy import HierarchyResolver
from .metrics import TypeMetrics


def _percentage(part: int, total: int) -> float:
    if total == 0:
        return 0.0
    return 100 * part / total


def _inherited_share(members: Sequence[MemberInfo], type_name: str) -> float:
    inherited = sum(1 for m in members if m.declaring_type != type_name)
    return _percentage(inherited, len(members))


def _hidden_share(members: Sequence[MemberInfo]) -> float:
    hidden = sum(1 for m in members if not m.is_public)
    return _percentage(hidden, len(members))


class OOMetricsCalculator:
    """Computes design metrics for named types.

    Owns the parent→child-count table used by NOC. The table is built on the
    first NOC query and kept until ``clear_cache()``; types declared after
    the build are not counted until then.
    """

    def __init__(
        self,
        provider: TypeIntrospectionProvider,
        hierarchy: HierarchyResolver | None = None,
    ) -> None:
        self.provider = provider
        self.hierarchy = hierarchy or HierarchyResolver(provider)
        self._child_counts: Counter[str] | None = None

    # ── attributes ──────────────────────────────────────────────────────

    def attribute_inheritance_factor(self, type_name: str) -> float:
        """AIF: percentage of visible fields declared by an ancestor."""
        info = self.provider.lookup_type(type_name)
        return _inherited_share(info.fields, type_name)

    def attribute_hiding_factor(self, type_name: str) -> float:
        """AHF: percentage of visible fields that are protected or private."""
        info = self.provider.lookup_type(type_name)
        return _hidden_share(info.fields)

    # ── methods ─────────────────────────────────────────────────────────

    def method_inheritance_factor(self, type_name: str) -> float:
        """MIF: percentage of visible methods not declared on the type itself."""
        info = self.provider.lookup_type(type_name)
        return _inherited_share(info.methods, type_name)

    def method_hiding_factor(self, type_name: str) -> float:
        """MHF: percentage of visible methods that are protected or private."""
        info = self.provider.lookup_type(type_name)
        return _hidden_share(info.methods)

    def polymorphism_factor(self, type_name: str) -> float:
        """PF: percentage of the parent's overridable methods redeclared here.

        Overridable means non-private, non-final and non-abstract. Overrides
        are matched by name only; parameter lists are not compared.
        """
        info = self.provider.lookup_type(type_name)
        if info.parent is None:
            return 0.0

        parent = self.provider.lookup_type(info.parent)
        overridable = {m.name for m in parent.methods if m.is_overridable}
        if not overridable:
            return 0.0

        overridden = len({m.name for m in info.own_methods()} & overridable)
        return _percentage(overridden, len(overridable))

    # ── inheritance tree ────────────────────────────────────────────────

    def clear_cache(self) -> None:
        """Drop the child-count table; the next NOC query rebuilds it."""
        self._child_counts = None

    def _build_child_counts(self) -> Counter[str]:
        counts: Counter[str] = Counter()
        for name in self.provider.declared_type_names():
            parent = self.provider.lookup_type(name).parent
            if parent is not None:
                counts[parent] += 1
        logger.debug(f"Built child-count table for {len(counts)} parent types")
        return counts

    def number_of_children(self, type_name: str, clear_cache: bool = False) -> int:
        """NOC: number of declared types whose immediate parent is ``type_name``."""
        if clear_cache:
            self.clear_cache()
        if self._child_counts is None:
            self._child_counts = self._build_child_counts()
        return self._child_counts.get(type_name, 0)

    def depth_of_inheritance_tree(self, type_name: str) -> int:
        return self.hierarchy.depth_of_inheritance_tree(type_name)

    # ── aggregate ───────────────────────────────────────────────────────

    def type_metrics(self, type_name: str) -> TypeMetrics:
        """Compute every design metric for one type."""
        return TypeMetrics(
            type_name=type_name,
            aif=self.attribute_inheritance_factor(type_name),
            ahf=self.attribute_hiding_factor(type_name),
            mif=self.method_inheritance_factor(type_name),
            mhf=self.method_hiding_factor(type_name),
            pf=self.polymorphism_factor(type_name),
            noc=self.number_of_children(type_name),
            dit=self.depth_of_inheritance_tree(type_name),
        )

    # Short names matching the metric acronyms
    aif = attribute_inheritance_factor
    ahf = attribute_hiding_factor
    mif = method_inheritance_factor
    mhf = method_hiding_factor
    pf = polymorphism_factor
    noc = number_of_children
    dit = depth_of_inheritance_tree
