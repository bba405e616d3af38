"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from containership_app.models import (
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
    Ship,
    default_registry,
)
from containership_app.reports.sink import MemorySink, set_default_sink


@pytest.fixture(autouse=True)
def reset_container_ids():
    """Every test starts numbering containers from 1."""
    default_registry.reset(1)
    yield
    default_registry.reset(1)


@pytest.fixture(autouse=True)
def default_sink():
    """Route output of containers built without a sink into memory."""
    sink = MemorySink()
    previous = set_default_sink(sink)
    yield sink
    set_default_sink(previous)


@pytest.fixture
def sink():
    return MemorySink()


@pytest.fixture
def sample_ship(sink):
    """Ship for 10 containers and 50 t of cargo."""
    return Ship(10, 50, name="Test Vessel", sink=sink)


@pytest.fixture
def sample_containers(sink):
    """The four containers of the demonstration voyage, already loaded."""
    bananas = RefrigeratedContainer("Bananas", 12, 20000, sink=sink)
    helium = GasContainer(5000, 50, sink=sink)
    sausages = RefrigeratedContainer("Sausages", 5, 5000, sink=sink)
    fuel = LiquidContainer(14000, True, sink=sink)
    bananas.load(10000)
    helium.load(2500)
    sausages.load(4000)
    fuel.load(7000)
    return {"bananas": bananas, "helium": helium, "sausages": sausages, "fuel": fuel}
