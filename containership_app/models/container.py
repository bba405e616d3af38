"""
Base shipping container: identity, dimensions and load accounting.

Concrete types (liquid, gas, refrigerated) each replace `load` with their
own ceiling and warn-and-reject policy; the base policy here raises
OverfillError instead.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod

from containership_app.config.limits import DEFAULT_DIMENSIONS_CM
from containership_app.models.load_result import LoadResult
from containership_app.models.registry import ContainerIdRegistry, default_registry
from containership_app.reports.sink import ReportSink, get_default_sink
from containership_app.utils.formatting import format_number

_LOG = logging.getLogger(__name__)


class ContainerError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class OverfillError(ContainerError):
    """Load would exceed the container's maximum weight."""

    def __init__(self, container_id: str, mass_kg: float) -> None:
        self.container_id = container_id
        self.mass_kg = mass_kg
        super().__init__(f"Cannot load {container_id}, exceeds max weight!")


class InvalidMassError(ContainerError, ValueError):
    """Mass is negative, NaN or infinite."""


class InvalidTemperatureError(ContainerError, ValueError):
    """Temperature is not a finite number."""


def validate_mass(value: float, what: str) -> float:
    try:
        mass = float(value)
    except (TypeError, ValueError):
        raise InvalidMassError(f"{what} must be a number, got {value!r}.") from None
    if not math.isfinite(mass) or mass < 0:
        raise InvalidMassError(f"{what} must be finite and non-negative, got {value!r}.")
    return mass


class Container(ABC):
    """
    Cargo unit with a fixed maximum weight.

    `load_mass_kg` starts at 0 and only changes through `load` and `unload`.
    The id is taken from the registry at construction and never changes.
    """

    def __init__(
        self,
        max_weight_kg: float,
        height_cm: float | None = None,
        depth_cm: float | None = None,
        *,
        sink: ReportSink | None = None,
        registry: ContainerIdRegistry | None = None,
    ) -> None:
        max_weight = validate_mass(max_weight_kg, "Maximum weight")
        if max_weight <= 0:
            raise InvalidMassError(f"Maximum weight must be greater than zero, got {max_weight_kg!r}.")

        default_height, default_depth = DEFAULT_DIMENSIONS_CM.get(self.type_code, (0.0, 0.0))
        self._id = (registry or default_registry).next_id(self.type_code)
        self._max_weight_kg = max_weight
        self._height_cm = float(default_height if height_cm is None else height_cm)
        self._depth_cm = float(default_depth if depth_cm is None else depth_cm)
        self._load_mass_kg = 0.0
        self._sink = sink

    @property
    @abstractmethod
    def type_code(self) -> str:
        """Single-letter code embedded in the id (L, G, C)."""

    @property
    def id(self) -> str:
        return self._id

    @property
    def load_mass_kg(self) -> float:
        return self._load_mass_kg

    @property
    def max_weight_kg(self) -> float:
        return self._max_weight_kg

    @property
    def height_cm(self) -> float:
        return self._height_cm

    @property
    def depth_cm(self) -> float:
        return self._depth_cm

    @property
    def sink(self) -> ReportSink:
        return self._sink if self._sink is not None else get_default_sink()

    @property
    def ceiling_kg(self) -> float:
        """Largest total load this container accepts."""
        return self._max_weight_kg

    @property
    def free_capacity_kg(self) -> float:
        return max(0.0, self.ceiling_kg - self._load_mass_kg)

    def load(self, mass_kg: float) -> LoadResult:
        mass = validate_mass(mass_kg, "Load mass")
        if self._load_mass_kg + mass > self._max_weight_kg:
            raise OverfillError(self._id, mass)
        self._load_mass_kg += mass
        _LOG.debug("Loaded %s kg into %s (now %s kg)", mass, self._id, self._load_mass_kg)
        return LoadResult.ok(self._id, mass)

    def unload(self) -> None:
        self._load_mass_kg = 0.0

    def describe(self) -> str:
        return (
            f"{self._id}: Load {format_number(self._load_mass_kg)}"
            f"/{format_number(self._max_weight_kg)} kg"
        )

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, load_mass_kg={self._load_mass_kg}, "
            f"max_weight_kg={self._max_weight_kg})"
        )
