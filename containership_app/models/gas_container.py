from __future__ import annotations

import logging

from containership_app.config.limits import ALERT_PREFIX, GAS_RESIDUE_FRACTION
from containership_app.models.container import Container, validate_mass
from containership_app.models.hazard import HazardNotifier
from containership_app.models.load_result import LoadResult
from containership_app.models.registry import ContainerIdRegistry
from containership_app.reports.sink import ReportSink

_LOG = logging.getLogger(__name__)


class GasContainer(Container, HazardNotifier):
    """
    Pressurised gas container.

    Overfill is reported instead of raised. Unloading leaves 5% of the
    previous load in the container.
    """

    type_code = "G"

    def __init__(
        self,
        max_weight_kg: float,
        pressure: float,
        height_cm: float | None = None,
        depth_cm: float | None = None,
        *,
        sink: ReportSink | None = None,
        registry: ContainerIdRegistry | None = None,
    ) -> None:
        super().__init__(max_weight_kg, height_cm, depth_cm, sink=sink, registry=registry)
        self._pressure = float(pressure)
        self._has_residue = False

    @property
    def pressure(self) -> float:
        return self._pressure

    @property
    def has_residue(self) -> bool:
        """True when the current load is what unloading left behind."""
        return self._has_residue

    def load(self, mass_kg: float) -> LoadResult:
        mass = validate_mass(mass_kg, "Load mass")
        if self.load_mass_kg + mass > self.max_weight_kg:
            message = f"Dangerous load operation on {self.id}! Load exceeds the maximum allowed."
            self.notify_danger(message)
            return LoadResult.rejected(self.id, mass, message)
        result = super().load(mass)
        self._has_residue = False
        return result

    def unload(self) -> None:
        self._load_mass_kg *= GAS_RESIDUE_FRACTION
        self._has_residue = self._load_mass_kg > 0

    def notify_danger(self, message: str) -> None:
        _LOG.warning("%s (container %s)", message, self.id)
        self.sink.write(f"{ALERT_PREFIX}{message} - Container Serial Number: {self.id}")
