"""
Limit checks for a ship after boarding.

Boarding only looks at each container's load at the moment it comes on
board, so a ship can end up over its limits when containers already on
board are loaded further. These checks report that state without changing
anything.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from containership_app.config.limits import EPS
from containership_app.models import GasContainer, RefrigeratedContainer, Ship
from containership_app.utils.formatting import format_number


class ValidationSeverity(Enum):
    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


@dataclass(slots=True)
class ValidationIssue:
    code: str
    severity: ValidationSeverity
    message: str
    value: float | None = None
    limit: float | None = None
    container_id: str | None = None


@dataclass(slots=True)
class ValidationResult:
    valid: bool
    total_weight_kg: float
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(i.severity == ValidationSeverity.WARNING for i in self.issues)

    def codes(self) -> List[str]:
        return [i.code for i in self.issues]


def validate_ship(ship: Ship) -> ValidationResult:
    """
    Run all checks against the ship's current state.
    """
    issues: List[ValidationIssue] = []
    total = ship.get_total_weight()
    capacity = ship.max_weight_capacity_kg
    count = len(ship)

    # 1. Overweight (a boarded container was loaded past the ship limit)
    if total > capacity + EPS:
        issues.append(
            ValidationIssue(
                code="SHIP_OVERWEIGHT",
                severity=ValidationSeverity.ERROR,
                message=f"Total load {format_number(total)} kg exceeds capacity {format_number(capacity)} kg.",
                value=total,
                limit=capacity,
            )
        )

    # 2. Container count
    if count > ship.max_containers:
        issues.append(
            ValidationIssue(
                code="SHIP_OVER_COUNT",
                severity=ValidationSeverity.ERROR,
                message=f"{count} containers on board, limit is {ship.max_containers}.",
                value=float(count),
                limit=float(ship.max_containers),
            )
        )
    elif count == ship.max_containers:
        issues.append(
            ValidationIssue(
                code="SHIP_FULL",
                severity=ValidationSeverity.WARNING,
                message=f"Ship is at its container limit ({ship.max_containers}).",
                value=float(count),
                limit=float(ship.max_containers),
            )
        )

    # 3. Per-container conditions
    for container in ship.containers:
        if isinstance(container, RefrigeratedContainer) and not container.is_temperature_safe:
            required = container.required_temperature
            if required is None:
                message = f"{container.id}: no temperature requirement for {container.product_type}."
            else:
                message = (
                    f"{container.id}: {container.product_type} kept at "
                    f"{format_number(container.temperature)}°C, minimum {format_number(required)}°C."
                )
            issues.append(
                ValidationIssue(
                    code="TEMPERATURE_UNSAFE",
                    severity=ValidationSeverity.WARNING,
                    message=message,
                    value=container.temperature,
                    limit=required,
                    container_id=container.id,
                )
            )
        if isinstance(container, GasContainer) and container.has_residue:
            issues.append(
                ValidationIssue(
                    code="GAS_RESIDUE",
                    severity=ValidationSeverity.WARNING,
                    message=f"{container.id} holds {format_number(container.load_mass_kg)} kg of residual gas after unloading.",
                    value=container.load_mass_kg,
                    container_id=container.id,
                )
            )

    # 4. Nothing loaded (informational)
    if total < EPS:
        issues.append(
            ValidationIssue(
                code="ZERO_WEIGHT",
                severity=ValidationSeverity.WARNING,
                message="Zero cargo mass on board.",
                value=0.0,
            )
        )

    valid = not any(i.severity == ValidationSeverity.ERROR for i in issues)
    return ValidationResult(valid=valid, total_weight_kg=total, issues=issues)
