from __future__ import annotations

import logging

from containership_app.config.limits import (
    ALERT_PREFIX,
    LIQUID_HAZARDOUS_FILL_FRACTION,
    LIQUID_SAFE_FILL_FRACTION,
)
from containership_app.models.container import Container, validate_mass
from containership_app.models.hazard import HazardNotifier
from containership_app.models.load_result import LoadResult
from containership_app.models.registry import ContainerIdRegistry
from containership_app.reports.sink import ReportSink

_LOG = logging.getLogger(__name__)


class LiquidContainer(Container, HazardNotifier):
    """
    Liquid cargo container.

    Hazardous cargo may fill half of the maximum weight, other liquids 90%.
    Loads over that ceiling are reported and dropped.
    """

    type_code = "L"

    def __init__(
        self,
        max_weight_kg: float,
        is_hazardous: bool,
        height_cm: float | None = None,
        depth_cm: float | None = None,
        *,
        sink: ReportSink | None = None,
        registry: ContainerIdRegistry | None = None,
    ) -> None:
        super().__init__(max_weight_kg, height_cm, depth_cm, sink=sink, registry=registry)
        self._is_hazardous = bool(is_hazardous)

    @property
    def is_hazardous(self) -> bool:
        return self._is_hazardous

    @property
    def ceiling_kg(self) -> float:
        fraction = LIQUID_HAZARDOUS_FILL_FRACTION if self._is_hazardous else LIQUID_SAFE_FILL_FRACTION
        return self.max_weight_kg * fraction

    def load(self, mass_kg: float) -> LoadResult:
        mass = validate_mass(mass_kg, "Load mass")
        if self.load_mass_kg + mass > self.ceiling_kg:
            message = f"Dangerous operation on {self.id}! Load limit exceeded."
            self.notify_danger(message)
            return LoadResult.rejected(self.id, mass, message)
        return super().load(mass)

    def notify_danger(self, message: str) -> None:
        _LOG.warning("%s", message)
        self.sink.write(ALERT_PREFIX + message)
