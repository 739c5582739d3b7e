"""Tests for the live Python runtime provider."""

from __future__ import annotations

import abc
import sys
import types
from typing import Protocol, final

import pytest

from oometrics.analysis.complexity import ComplexityAnalyzer
from oometrics.analysis.oo_metrics import OOMetricsCalculator
from oometrics.core.exceptions import TypeNotFoundError
from oometrics.core.models import Visibility
from oometrics.core.runtime import PythonRuntimeProvider, qualified_name
from oometrics.core.snapshot import TypeSnapshotDiff


class Vehicle:
    wheels: int = 4
    _registry = {}
    __vin = "unset"

    def drive(self, speed):
        if speed > 100 and self.wheels:
            return "fast"
        for _ in range(3):
            if speed < 0:
                return "reverse"
        return "slow"

    def _tune(self):
        return None

    def __inspect(self):
        return self.__vin

    @final
    def register(self):
        return None

    @staticmethod
    def describe():
        return "vehicle"


class Car(Vehicle):
    doors = 4

    def drive(self, speed):
        return "car"


class Engine(abc.ABC):
    @abc.abstractmethod
    def start(self): ...


class Startable(Protocol):
    def start(self) -> None: ...


@pytest.fixture
def provider():
    return PythonRuntimeProvider()


def by_name(members):
    return {m.name: m for m in members}


class TestUniverse:
    """Enumeration of loaded classes."""

    def test_module_classes_are_declared(self, provider):
        names = provider.declared_type_names()
        assert qualified_name(Vehicle) in names
        assert qualified_name(Car) in names

    def test_protocols_are_interfaces(self, provider):
        assert qualified_name(Startable) in provider.declared_interface_names()
        assert qualified_name(Startable) not in provider.declared_type_names()

    def test_builtins_are_declared_but_not_user_defined(self, provider):
        assert "builtins.int" in provider.declared_type_names()
        info = provider.lookup_type("builtins.int")
        assert info.is_user_defined is False
        assert info.source_file is None

    def test_unknown_type(self, provider):
        with pytest.raises(TypeNotFoundError):
            provider.lookup_type("no.such.Type")

    def test_newly_loaded_module_is_seen_by_snapshot(self, provider, monkeypatch):
        diff = TypeSnapshotDiff(provider)
        diff.start()

        module = types.ModuleType("oometrics_dynamic_fixture")
        module.Dynamic = type("Dynamic", (), {"__module__": module.__name__})
        monkeypatch.setitem(sys.modules, module.__name__, module)

        assert "oometrics_dynamic_fixture.Dynamic" in diff.end()


class TestLookupType:
    """Mapping Python conventions onto the member model."""

    def test_user_defined_with_source_file(self, provider):
        info = provider.lookup_type(qualified_name(Vehicle))
        assert info.is_user_defined is True
        assert info.source_file == __file__ or info.source_file.endswith("test_runtime.py")

    def test_object_is_never_a_parent(self, provider):
        assert provider.lookup_type(qualified_name(Vehicle)).parent is None
        assert provider.lookup_type(qualified_name(Car)).parent == qualified_name(Vehicle)

    def test_method_visibility_and_flags(self, provider):
        methods = by_name(provider.lookup_type(qualified_name(Vehicle)).methods)
        assert methods["drive"].visibility is Visibility.PUBLIC
        assert methods["_tune"].visibility is Visibility.PROTECTED
        assert methods["__inspect"].visibility is Visibility.PRIVATE
        assert methods["register"].is_final is True
        assert "describe" in methods

    def test_abstract_methods(self, provider):
        methods = by_name(provider.lookup_type(qualified_name(Engine)).methods)
        assert methods["start"].is_abstract is True

    def test_fields(self, provider):
        fields = by_name(provider.lookup_type(qualified_name(Vehicle)).fields)
        assert fields["wheels"].visibility is Visibility.PUBLIC
        assert fields["_registry"].visibility is Visibility.PROTECTED
        assert fields["__vin"].visibility is Visibility.PRIVATE

    def test_inherited_members_keep_declaring_type(self, provider):
        car = provider.lookup_type(qualified_name(Car))
        methods = by_name(car.methods)
        assert methods["drive"].declaring_type == qualified_name(Car)
        assert methods["_tune"].declaring_type == qualified_name(Vehicle)
        assert methods["__inspect"].declaring_type == qualified_name(Vehicle)

        fields = by_name(car.fields)
        assert fields["wheels"].declaring_type == qualified_name(Vehicle)
        assert "__vin" not in fields

    def test_method_line_range(self, provider):
        drive = by_name(provider.lookup_type(qualified_name(Vehicle)).methods)["drive"]
        assert drive.start_line > 0
        assert drive.end_line - drive.start_line == 6


class TestMetricsOverRuntime:
    """Calculators running against live classes."""

    def test_cyclomatic_complexity_of_real_method(self, provider):
        analyzer = ComplexityAnalyzer(provider)
        # two ifs, one for, one and
        assert analyzer.cyclomatic_complexity(qualified_name(Vehicle), "drive") == 5

    def test_polymorphism_factor(self, provider):
        calculator = OOMetricsCalculator(provider)
        # Overridable on Vehicle: drive, _tune, describe. register is
        # final and __inspect is private.
        assert calculator.pf(qualified_name(Car)) == pytest.approx(100 / 3)

    def test_depth_of_inheritance(self, provider):
        calculator = OOMetricsCalculator(provider)
        assert calculator.dit(qualified_name(Car)) == 2
        assert calculator.dit(qualified_name(Vehicle)) == 1

    def test_number_of_children(self, provider):
        calculator = OOMetricsCalculator(provider)
        assert calculator.noc(qualified_name(Vehicle)) >= 1
