"""
Fleet-level rules: creating ships, looking them up and moving containers
between them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List

from containership_app.config.settings import Settings
from containership_app.models import Ship
from containership_app.reports.sink import ReportSink

_LOG = logging.getLogger(__name__)


@dataclass(slots=True)
class ShipValidationError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


class FleetService:
    """In-memory fleet of named ships."""

    def __init__(self, settings: Settings, sink: ReportSink | None = None) -> None:
        self._settings = settings
        self._sink = sink
        self._ships: Dict[str, Ship] = {}

    def list_ships(self) -> List[Ship]:
        return [self._ships[name] for name in sorted(self._ships)]

    def get_ship(self, name: str) -> Ship | None:
        return self._ships.get(name)

    def create_ship(self, name: str, max_containers: int, max_weight_t: float) -> Ship:
        self._validate(name, max_containers, max_weight_t)
        ship = Ship(
            max_containers,
            max_weight_t,
            name=name,
            sink=self._sink,
            rollback_failed_transfers=self._settings.rollback_failed_transfers,
        )
        self._ships[name] = ship
        _LOG.info("Created ship %s (%d containers, %s t)", name, max_containers, max_weight_t)
        return ship

    def remove_ship(self, name: str) -> None:
        self._ships.pop(name, None)

    def transfer(self, container_id: str, source_name: str, target_name: str) -> bool:
        source = self._require(source_name)
        target = self._require(target_name)
        return source.transfer_container(container_id, target)

    def _require(self, name: str) -> Ship:
        ship = self._ships.get(name)
        if ship is None:
            raise ShipValidationError(f"Unknown ship {name!r}.")
        return ship

    def _validate(self, name: str, max_containers: int, max_weight_t: float) -> None:
        if not name.strip():
            raise ShipValidationError("Ship name is required.")
        if name in self._ships:
            raise ShipValidationError(f"Ship {name!r} already exists.")
        if max_containers <= 0:
            raise ShipValidationError("Container limit must be greater than zero.")
        if max_weight_t <= 0:
            raise ShipValidationError("Weight capacity must be greater than zero.")
