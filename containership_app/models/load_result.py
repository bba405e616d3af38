"""
Outcome of a container load attempt.

Accepted and rejected loads are returned as values; hard failures
(OverfillError, InvalidMassError) are raised instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LoadOutcome(Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(slots=True, frozen=True)
class LoadResult:
    outcome: LoadOutcome
    container_id: str
    mass_kg: float
    reason: str = ""

    @property
    def accepted(self) -> bool:
        return self.outcome == LoadOutcome.ACCEPTED

    @classmethod
    def ok(cls, container_id: str, mass_kg: float) -> "LoadResult":
        return cls(LoadOutcome.ACCEPTED, container_id, mass_kg)

    @classmethod
    def rejected(cls, container_id: str, mass_kg: float, reason: str) -> "LoadResult":
        return cls(LoadOutcome.REJECTED, container_id, mass_kg, reason)
