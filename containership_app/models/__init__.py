"""
Domain models for the containership app.

Containers carry their own load policy; the ship only tracks membership
and ship-wide limits.
"""

from containership_app.models.container import (
    Container,
    ContainerError,
    InvalidMassError,
    InvalidTemperatureError,
    OverfillError,
)
from containership_app.models.gas_container import GasContainer
from containership_app.models.hazard import HazardNotifier
from containership_app.models.liquid_container import LiquidContainer
from containership_app.models.load_result import LoadOutcome, LoadResult
from containership_app.models.refrigerated_container import RefrigeratedContainer
from containership_app.models.registry import ContainerIdRegistry, default_registry
from containership_app.models.ship import Ship

__all__ = [
    "Container",
    "ContainerError",
    "InvalidMassError",
    "InvalidTemperatureError",
    "OverfillError",
    "GasContainer",
    "HazardNotifier",
    "LiquidContainer",
    "LoadOutcome",
    "LoadResult",
    "RefrigeratedContainer",
    "ContainerIdRegistry",
    "default_registry",
    "Ship",
]
