"""Tests for object-oriented design metrics."""

from __future__ import annotations

from dataclasses import replace

import pytest

from oometrics.analysis.oo_metrics import OOMetricsCalculator
from oometrics.core.exceptions import TypeNotFoundError
from oometrics.core.models import TypeInfo, Visibility
from oometrics.core.universe import StaticTypeUniverse, make_field, make_method

PRIVATE = Visibility.PRIVATE
PROTECTED = Visibility.PROTECTED


class _StubProvider:
    """Serves fixed TypeInfo records without validating them."""

    def __init__(self, *types):
        self.types = {t.name: t for t in types}

    def declared_type_names(self):
        return list(self.types)

    def declared_interface_names(self):
        return [n for n, t in self.types.items() if t.is_interface]

    def lookup_type(self, name):
        if name not in self.types:
            raise TypeNotFoundError(name)
        return self.types[name]


@pytest.fixture
def universe():
    u = StaticTypeUniverse()
    u.declare(
        "Base",
        fields=[make_field("id"), make_field("_state", PROTECTED), make_field("secret", PRIVATE)],
        methods=[make_method("run"), make_method("helper", PRIVATE)],
    )
    u.declare("Child", parent="Base", methods=[make_method("run")])
    return u


@pytest.fixture
def calculator(universe):
    return OOMetricsCalculator(universe)


class TestAttributeFactors:
    """AIF and AHF."""

    def test_aif_counts_inherited_fields(self, universe, calculator):
        universe.declare("Account", parent="Base", fields=[make_field("balance")])
        # balance (own), id and _state (inherited); secret stays private to Base
        assert calculator.aif("Account") == pytest.approx(200 / 3)

    def test_aif_of_root_is_zero(self, calculator):
        assert calculator.aif("Base") == 0

    def test_ahf_counts_non_public_fields(self, calculator):
        assert calculator.ahf("Base") == pytest.approx(200 / 3)

    def test_no_fields_is_zero(self, universe, calculator):
        universe.declare("Empty")
        assert calculator.aif("Empty") == 0
        assert calculator.ahf("Empty") == 0


class TestMethodFactors:
    """MIF and MHF."""

    def test_mif_counts_inherited_private_methods(self, calculator):
        # run is redeclared, helper is inherited
        assert calculator.mif("Child") == 50

    def test_mhf(self, calculator):
        assert calculator.mhf("Base") == 50
        assert calculator.mhf("Child") == 50

    def test_no_methods_is_zero(self, universe, calculator):
        universe.declare("Empty")
        assert calculator.mif("Empty") == 0
        assert calculator.mhf("Empty") == 0


class TestPolymorphismFactor:
    """PF over the parent's overridable methods."""

    def test_full_override(self, calculator):
        assert calculator.pf("Child") == 100

    def test_root_type_is_zero(self, calculator):
        assert calculator.pf("Base") == 0

    def test_final_abstract_and_private_are_not_overridable(self, universe, calculator):
        universe.declare(
            "Shape",
            methods=[
                make_method("area", is_abstract=True),
                make_method("name", is_final=True),
                make_method("_cache", PRIVATE),
                make_method("draw"),
                make_method("resize", PROTECTED),
            ],
        )
        universe.declare("Circle", parent="Shape", methods=[make_method("area"), make_method("draw")])
        # overridable: draw, resize; overridden: draw
        assert calculator.pf("Circle") == 50

    def test_parent_without_overridable_methods(self, universe, calculator):
        universe.declare("Sealed", methods=[make_method("only", is_final=True)])
        universe.declare("Leaf", parent="Sealed", methods=[make_method("only")])
        assert calculator.pf("Leaf") == 0

    def test_name_match_ignores_signature(self, universe, calculator):
        universe.declare("Grandchild", parent="Child", methods=[make_method("run")])
        assert calculator.pf("Grandchild") == 100

    def test_overrides_counted_by_distinct_name(self, universe, calculator):
        universe.declare(
            "Worker",
            methods=[make_method("run"), make_method("stop"), make_method("pause")],
        )
        universe.declare(
            "Robot", parent="Worker", methods=[make_method("run"), make_method("stop")]
        )
        assert calculator.pf("Robot") == pytest.approx(200 / 3)

    def test_inherited_method_is_not_an_override(self, universe, calculator):
        universe.declare("Grandchild", parent="Child", methods=[make_method("walk")])
        assert calculator.pf("Grandchild") == 0


class TestDuplicateMembers:
    """Own members must have distinct names, keeping PF within [0, 100]."""

    def test_duplicate_method_rejected(self, universe, calculator):
        with pytest.raises(ValueError):
            universe.declare(
                "Twice", parent="Base", methods=[make_method("run"), make_method("run")]
            )
        with pytest.raises(TypeNotFoundError):
            calculator.pf("Twice")

    def test_duplicate_field_rejected(self, universe):
        with pytest.raises(ValueError):
            universe.declare("Twice", fields=[make_field("x"), make_field("x")])

    def test_field_and_method_may_share_a_name(self, universe, calculator):
        universe.declare(
            "Mixed",
            parent="Base",
            fields=[make_field("run")],
            methods=[make_method("run")],
        )
        assert calculator.pf("Mixed") == 100

    def test_pf_bounded_for_provider_reporting_duplicates(self):
        run = make_method("run")
        parent = TypeInfo("Base", methods=(replace(run, declaring_type="Base"),))
        child = TypeInfo(
            "Child",
            parent="Base",
            methods=(
                replace(run, declaring_type="Child"),
                replace(run, declaring_type="Child"),
            ),
        )
        calculator = OOMetricsCalculator(_StubProvider(parent, child))
        assert calculator.pf("Child") == 100


class TestNumberOfChildren:
    """NOC and its child-count cache."""

    @pytest.fixture
    def tree(self):
        u = StaticTypeUniverse()
        u.declare("A")
        u.declare("B", parent="A")
        u.declare("C", parent="A")
        u.declare("D", parent="B")
        return u

    def test_counts_immediate_children(self, tree):
        calculator = OOMetricsCalculator(tree)
        assert calculator.noc("A") == 2
        assert calculator.noc("B") == 1
        assert calculator.noc("C") == 0
        assert calculator.noc("D") == 0

    def test_unknown_type_has_no_children(self, tree):
        assert OOMetricsCalculator(tree).noc("Z") == 0

    def test_cache_is_stale_until_cleared(self, tree):
        calculator = OOMetricsCalculator(tree)
        assert calculator.noc("C") == 0

        tree.declare("E", parent="C")
        assert calculator.noc("C") == 0
        assert calculator.noc("C", clear_cache=True) == 1

    def test_clear_cache_method(self, tree):
        calculator = OOMetricsCalculator(tree)
        calculator.noc("A")
        tree.declare("F", parent="A")
        calculator.clear_cache()
        assert calculator.noc("A") == 3

    def test_separate_instances_do_not_share_cache(self, tree):
        first = OOMetricsCalculator(tree)
        first.noc("A")
        tree.declare("G", parent="A")
        assert OOMetricsCalculator(tree).noc("A") == 3


class TestDepthAndAggregate:
    def test_dit(self, calculator):
        assert calculator.dit("Base") == 1
        assert calculator.dit("Child") == 2

    def test_type_metrics(self, calculator):
        metrics = calculator.type_metrics("Child")
        assert metrics.to_dict() == {
            "type_name": "Child",
            "aif": 100.0,
            "ahf": 50.0,
            "mif": 50.0,
            "mhf": 50.0,
            "pf": 100.0,
            "noc": 0,
            "dit": 2,
        }


class TestNotFound:
    @pytest.mark.parametrize("metric", ["aif", "ahf", "mif", "mhf", "pf", "dit", "type_metrics"])
    def test_unknown_type_raises(self, calculator, metric):
        with pytest.raises(TypeNotFoundError):
            getattr(calculator, metric)("Missing")


class TestRanges:
    def test_percentages_are_bounded(self, universe, calculator):
        universe.declare("Account", parent="Child", fields=[make_field("x", PRIVATE)])
        for name in universe.declared_type_names():
            for metric in (calculator.aif, calculator.ahf, calculator.mif, calculator.mhf, calculator.pf):
                assert 0 <= metric(name) <= 100
