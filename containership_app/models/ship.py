"""
Ship: a capacity-limited collection of containers.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator, List, Tuple

from containership_app.config.limits import KG_PER_TONNE
from containership_app.models.container import Container
from containership_app.reports.sink import ReportSink, get_default_sink
from containership_app.reports.simple_text_report import build_ship_summary_lines

_LOG = logging.getLogger(__name__)


class Ship:
    """
    Ship carrying at most `max_containers` containers and
    `max_weight_capacity_kg` of cargo.

    Boarding checks the container's current load, not its maximum weight,
    and nothing re-checks the ship when a container on board is loaded
    further.
    """

    def __init__(
        self,
        max_containers: int,
        max_weight_t: float,
        *,
        name: str = "",
        sink: ReportSink | None = None,
        rollback_failed_transfers: bool = False,
    ) -> None:
        if int(max_containers) <= 0:
            raise ValueError(f"Container limit must be greater than zero, got {max_containers!r}.")
        if not math.isfinite(float(max_weight_t)) or max_weight_t <= 0:
            raise ValueError(f"Weight capacity must be greater than zero, got {max_weight_t!r}.")
        self.name = name
        self._max_containers = int(max_containers)
        self._max_weight_capacity_kg = float(max_weight_t) * KG_PER_TONNE
        self._containers: List[Container] = []
        self._sink = sink
        self.rollback_failed_transfers = rollback_failed_transfers

    @property
    def max_containers(self) -> int:
        return self._max_containers

    @property
    def max_weight_capacity_kg(self) -> float:
        return self._max_weight_capacity_kg

    @property
    def containers(self) -> Tuple[Container, ...]:
        return tuple(self._containers)

    @property
    def sink(self) -> ReportSink:
        return self._sink if self._sink is not None else get_default_sink()

    def __len__(self) -> int:
        return len(self._containers)

    def __iter__(self) -> Iterator[Container]:
        return iter(list(self._containers))

    def __contains__(self, item: object) -> bool:
        container_id = item.id if isinstance(item, Container) else item
        return self.get_container(container_id) is not None

    def get_container(self, container_id: str) -> Container | None:
        for container in self._containers:
            if container.id == container_id:
                return container
        return None

    def get_total_weight(self) -> float:
        total = 0.0
        for container in self._containers:
            total += container.load_mass_kg
        return total

    def can_accept(self, container: Container) -> bool:
        if self.get_container(container.id) is not None:
            return False
        if len(self._containers) >= self._max_containers:
            return False
        return self.get_total_weight() + container.load_mass_kg <= self._max_weight_capacity_kg

    def load_container(self, container: Container) -> bool:
        """Board a container; returns False (and reports why) when refused."""
        if self.get_container(container.id) is not None:
            self.sink.write(f"Container {container.id} is already on board.")
            _LOG.warning("Refused %s on %s: already on board", container.id, self._label)
            return False
        if not self.can_accept(container):
            self.sink.write(f"Cannot load {container.id}, exceeds ship limits.")
            _LOG.warning(
                "Refused %s on %s: %d/%d containers, %.1f + %.1f kg of %.1f kg",
                container.id,
                self._label,
                len(self._containers),
                self._max_containers,
                self.get_total_weight(),
                container.load_mass_kg,
                self._max_weight_capacity_kg,
            )
            return False
        self._containers.append(container)
        _LOG.info("Boarded %s on %s", container.id, self._label)
        return True

    def unload_container(self, container_id: str) -> Container | None:
        """Remove a container from the ship; unknown ids are ignored."""
        container = self.get_container(container_id)
        if container is None:
            _LOG.debug("Unload of %s from %s ignored: not on board", container_id, self._label)
            return None
        self._containers.remove(container)
        self.sink.write(f"Container {container_id} removed from ship.")
        _LOG.info("Removed %s from %s", container_id, self._label)
        return container

    def transfer_container(self, container_id: str, target_ship: "Ship") -> bool:
        """
        Move a container to another ship.

        By default the container is taken off this ship before the target
        decides; if the target refuses it, the container is on neither ship.
        With `rollback_failed_transfers` the target is asked first and a
        refused container stays here.
        """
        container = self.get_container(container_id)
        if container is None:
            _LOG.debug("Transfer of %s from %s ignored: not on board", container_id, self._label)
            return False

        if self.rollback_failed_transfers and not target_ship.can_accept(container):
            self.sink.write(f"Cannot transfer {container_id}, exceeds target ship limits.")
            _LOG.warning("Transfer of %s kept on %s: target refused", container_id, self._label)
            return False

        self._containers.remove(container)
        if target_ship.load_container(container):
            _LOG.info("Transferred %s from %s to %s", container_id, self._label, target_ship._label)
            return True

        _LOG.warning(
            "Container %s lost in transfer from %s: target %s refused it",
            container_id,
            self._label,
            target_ship._label,
        )
        return False

    def summary_lines(self) -> List[str]:
        return build_ship_summary_lines(self)

    def display_ship_info(self) -> None:
        for line in self.summary_lines():
            self.sink.write(line)

    @property
    def _label(self) -> str:
        return self.name or f"ship@{id(self):x}"

    def __repr__(self) -> str:
        return (
            f"Ship(name={self.name!r}, containers={len(self._containers)}/{self._max_containers}, "
            f"weight={self.get_total_weight()}/{self._max_weight_capacity_kg} kg)"
        )
