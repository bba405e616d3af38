"""
Simple text-based report builder for a ship and its containers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from containership_app.utils.formatting import format_number

if TYPE_CHECKING:
    from containership_app.models import Ship


def build_ship_summary_lines(ship: "Ship") -> List[str]:
    lines: List[str] = []
    containers = ship.containers
    lines.append(
        f"Ship: {len(containers)}/{ship.max_containers} containers, "
        f"{format_number(ship.get_total_weight())}/{format_number(ship.max_weight_capacity_kg)} kg loaded."
    )
    for container in containers:
        lines.append(container.describe())
    return lines


def build_ship_summary_text(ship: "Ship") -> str:
    lines = build_ship_summary_lines(ship)
    if ship.name:
        lines.insert(0, f"Name: {ship.name}")
    return "\n".join(lines)
