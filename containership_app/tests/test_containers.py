"""Tests for container load policies and hazard notifications."""

from __future__ import annotations

import math

import pytest

from containership_app.models import (
    Container,
    ContainerIdRegistry,
    GasContainer,
    HazardNotifier,
    InvalidMassError,
    InvalidTemperatureError,
    LiquidContainer,
    LoadOutcome,
    OverfillError,
    RefrigeratedContainer,
)


class _PlainContainer(Container):
    """Container using the base load policy."""

    type_code = "X"


class TestContainerIds:
    def test_ids_shared_across_types(self, sink):
        first = LiquidContainer(1000, False, sink=sink)
        second = GasContainer(1000, 10, sink=sink)
        third = RefrigeratedContainer("Bananas", 12, 1000, sink=sink)
        assert first.id == "KON-L-1"
        assert second.id == "KON-G-2"
        assert third.id == "KON-C-3"

    def test_injected_registry(self, sink):
        registry = ContainerIdRegistry(start=100)
        c = GasContainer(1000, 10, sink=sink, registry=registry)
        assert c.id == "KON-G-100"
        assert registry.next_sequence == 101
        registry.reset()
        assert registry.next_sequence == 100

    def test_container_is_abstract(self):
        with pytest.raises(TypeError):
            Container(1000)  # type: ignore[abstract]

    def test_variants_are_hazard_notifiers(self, sink):
        for c in (
            LiquidContainer(1000, True, sink=sink),
            GasContainer(1000, 1, sink=sink),
            RefrigeratedContainer("Sausages", 4, 1000, sink=sink),
        ):
            assert isinstance(c, HazardNotifier)


class TestBaseContainer:
    def test_defaults(self):
        c = _PlainContainer(1000)
        assert c.load_mass_kg == 0.0
        assert c.max_weight_kg == 1000.0
        assert c.height_cm == 0.0

    def test_load_within_max(self):
        c = _PlainContainer(1000)
        result = c.load(1000)
        assert result.accepted
        assert result.outcome == LoadOutcome.ACCEPTED
        assert c.load_mass_kg == 1000.0

    def test_overfill_raises(self):
        c = _PlainContainer(1000)
        c.load(600)
        with pytest.raises(OverfillError) as exc:
            c.load(401)
        assert exc.value.container_id == c.id
        assert "exceeds max weight" in str(exc.value)
        assert c.load_mass_kg == 600.0

    def test_negative_mass_rejected(self):
        c = _PlainContainer(1000)
        with pytest.raises(InvalidMassError):
            c.load(-1)
        with pytest.raises(ValueError):
            c.load(math.nan)

    def test_invalid_max_weight(self):
        with pytest.raises(InvalidMassError):
            _PlainContainer(0)

    def test_unload_resets(self):
        c = _PlainContainer(1000)
        c.load(500)
        c.unload()
        assert c.load_mass_kg == 0.0

    def test_describe(self):
        c = _PlainContainer(20000)
        c.load(10000)
        assert c.describe() == "KON-X-1: Load 10000/20000 kg"
        assert str(c) == c.describe()


class TestLiquidContainer:
    def test_dimensions(self, sink):
        c = LiquidContainer(14000, True, sink=sink)
        assert (c.height_cm, c.depth_cm) == (250.0, 300.0)

    def test_hazardous_ceiling_is_half(self, sink):
        c = LiquidContainer(14000, True, sink=sink)
        assert c.ceiling_kg == 7000.0
        assert c.load(7000).accepted
        assert sink.lines == []

    def test_hazardous_over_ceiling_rejected(self, sink):
        c = LiquidContainer(10000, True, sink=sink)
        c.load(4000)
        result = c.load(1001)
        assert result.outcome == LoadOutcome.REJECTED
        assert c.load_mass_kg == 4000.0
        assert sink.lines == [f"ALERT: Dangerous operation on {c.id}! Load limit exceeded."]
        assert "Container Serial Number" not in sink.lines[0]

    def test_non_hazardous_ceiling(self, sink):
        c = LiquidContainer(10000, False, sink=sink)
        assert c.load(9000).accepted
        assert not c.load(1).accepted
        assert c.load_mass_kg == 9000.0
        assert len(sink.lines) == 1

    def test_never_raises(self, sink):
        c = LiquidContainer(10000, False, sink=sink)
        result = c.load(50000)
        assert not result.accepted
        assert result.reason.startswith("Dangerous operation")


class TestGasContainer:
    def test_unload_leaves_residue(self, sink):
        c = GasContainer(5000, 50, sink=sink)
        c.load(2500)
        c.unload()
        assert c.load_mass_kg == pytest.approx(125.0)
        assert c.has_residue

    def test_overfill_warns(self, sink):
        c = GasContainer(5000, 50, sink=sink)
        c.load(4000)
        result = c.load(1500)
        assert not result.accepted
        assert c.load_mass_kg == 4000.0
        assert sink.lines == [
            f"ALERT: Dangerous load operation on {c.id}! Load exceeds the maximum allowed."
            f" - Container Serial Number: {c.id}"
        ]

    def test_load_up_to_max(self, sink):
        c = GasContainer(5000, 50, sink=sink)
        assert c.load(5000).accepted
        assert sink.lines == []

    def test_load_after_unload_clears_residue_flag(self, sink):
        c = GasContainer(5000, 50, sink=sink)
        c.load(1000)
        c.unload()
        c.load(100)
        assert not c.has_residue
        assert c.load_mass_kg == pytest.approx(150.0)


class TestRefrigeratedContainer:
    def test_too_cold_still_constructed(self, sink):
        c = RefrigeratedContainer("Bananas", 5, 20000, sink=sink)
        assert c.temperature == 5.0
        assert not c.is_temperature_safe
        assert sink.lines == [
            "ALERT: Temperature for Bananas container cannot be lower than 10°C. Given: 5°C."
            f" - Container Serial Number: {c.id}"
        ]

    def test_safe_temperature_silent(self, sink):
        c = RefrigeratedContainer("FrozenFood", -18, 10000, sink=sink)
        assert c.is_temperature_safe
        assert c.required_temperature == -18.0
        assert sink.lines == []

    def test_unknown_product(self, sink):
        c = RefrigeratedContainer("Cheese", 3, 10000, sink=sink)
        assert c.temperature is None
        assert c.required_temperature is None
        assert sink.lines == [
            f"ALERT: No temperature requirement defined for product type Cheese. - Container Serial Number: {c.id}"
        ]

    def test_overfill_warns(self, sink):
        c = RefrigeratedContainer("Sausages", 4, 5000, sink=sink)
        c.load(4000)
        assert not c.load(1001).accepted
        assert c.load_mass_kg == 4000.0
        assert f"Container Serial Number: {c.id}" in sink.lines[-1]

    def test_unload_empties(self, sink):
        c = RefrigeratedContainer("Sausages", 4, 5000, sink=sink)
        c.load(4000)
        c.unload()
        assert c.load_mass_kg == 0.0

    @pytest.mark.parametrize("temperature", [math.nan, math.inf, -math.inf, "cold"])
    def test_non_finite_temperature_rejected(self, sink, temperature):
        with pytest.raises(InvalidTemperatureError):
            RefrigeratedContainer("Bananas", temperature, 1000, sink=sink)
        assert sink.lines == []
        assert LiquidContainer(1000, False, sink=sink).id == "KON-L-1"

    def test_temperature_error_is_value_error(self, sink):
        with pytest.raises(ValueError):
            RefrigeratedContainer("Sausages", math.nan, 1000, sink=sink)


class TestLoadMassNeverNegative:
    @pytest.mark.parametrize("masses", [[100, 200, 50], [0, 0], [4999, 2]])
    def test_load_sequence(self, sink, masses):
        c = GasContainer(5000, 1, sink=sink)
        previous = c.load_mass_kg
        for mass in masses:
            c.load(mass)
            assert c.load_mass_kg >= previous >= 0.0
            previous = c.load_mass_kg
