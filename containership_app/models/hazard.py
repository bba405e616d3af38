from __future__ import annotations

from abc import ABC, abstractmethod


class HazardNotifier(ABC):
    """Capability of containers that can signal a dangerous operation."""

    @abstractmethod
    def notify_danger(self, message: str) -> None:
        ...
