"""
Refrigerated container with per-product storage temperature checks.
"""

from __future__ import annotations

import logging
import math

from containership_app.config.limits import ALERT_PREFIX, PRODUCT_MIN_TEMPERATURE_C
from containership_app.models.container import Container, InvalidTemperatureError, validate_mass
from containership_app.models.hazard import HazardNotifier
from containership_app.models.load_result import LoadResult
from containership_app.models.registry import ContainerIdRegistry
from containership_app.reports.sink import ReportSink
from containership_app.utils.formatting import format_number

_LOG = logging.getLogger(__name__)


class RefrigeratedContainer(Container, HazardNotifier):
    """
    Container for chilled or frozen products.

    The temperature is checked once, at construction, against the minimum
    for the product. A too-cold setting or an unknown product is reported
    but does not stop construction. The temperature is only recorded for
    known products; for unknown ones it stays None.
    """

    type_code = "C"

    def __init__(
        self,
        product_type: str,
        temperature: float,
        max_weight_kg: float,
        height_cm: float | None = None,
        depth_cm: float | None = None,
        *,
        sink: ReportSink | None = None,
        registry: ContainerIdRegistry | None = None,
    ) -> None:
        try:
            temperature = float(temperature)
        except (TypeError, ValueError):
            raise InvalidTemperatureError(f"Temperature must be a number, got {temperature!r}.") from None
        if not math.isfinite(temperature):
            raise InvalidTemperatureError(f"Temperature must be finite, got {temperature!r}.")

        super().__init__(max_weight_kg, height_cm, depth_cm, sink=sink, registry=registry)
        self._product_type = product_type
        self._temperature: float | None = None

        required = PRODUCT_MIN_TEMPERATURE_C.get(product_type)
        if required is None:
            self.notify_danger(f"No temperature requirement defined for product type {product_type}.")
            return

        if temperature < required:
            self.notify_danger(
                f"Temperature for {product_type} container cannot be lower than "
                f"{format_number(required)}°C. Given: {format_number(temperature)}°C."
            )
        self._temperature = temperature

    @property
    def product_type(self) -> str:
        return self._product_type

    @property
    def temperature(self) -> float | None:
        return self._temperature

    @property
    def required_temperature(self) -> float | None:
        return PRODUCT_MIN_TEMPERATURE_C.get(self._product_type)

    @property
    def is_temperature_safe(self) -> bool:
        required = self.required_temperature
        if required is None or self._temperature is None:
            return False
        return self._temperature >= required

    def load(self, mass_kg: float) -> LoadResult:
        mass = validate_mass(mass_kg, "Load mass")
        if self.load_mass_kg + mass > self.max_weight_kg:
            message = f"Dangerous load operation on {self.id}! Load exceeds the maximum allowed."
            self.notify_danger(message)
            return LoadResult.rejected(self.id, mass, message)
        return super().load(mass)

    def notify_danger(self, message: str) -> None:
        _LOG.warning("%s (container %s)", message, self.id)
        self.sink.write(f"{ALERT_PREFIX}{message} - Container Serial Number: {self.id}")
