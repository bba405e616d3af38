"""
Excel manifest export for a ship and its containers.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill

if TYPE_CHECKING:
    from containership_app.models import Container, Ship


MANIFEST_COLUMNS = [
    "Serial Number",
    "Type",
    "Load (kg)",
    "Max weight (kg)",
    "Ceiling (kg)",
    "Free capacity (kg)",
    "Fill (%)",
    "Height (cm)",
    "Depth (cm)",
    "Details",
]

_TYPE_NAMES = {"L": "Liquid", "G": "Gas", "C": "Refrigerated"}


def _fmt(value: object, fmt: str) -> str:
    """Safely format numeric values, falling back to string/blank."""
    if value is None:
        return ""
    try:
        return format(float(value), fmt)
    except (TypeError, ValueError):
        return str(value)


def _container_details(container: "Container") -> str:
    """Type-specific attributes as a short text."""
    if hasattr(container, "is_hazardous"):
        return "Hazardous" if container.is_hazardous else "Non-hazardous"
    if hasattr(container, "pressure"):
        return f"Pressure {_fmt(container.pressure, '.1f')}"
    if hasattr(container, "product_type"):
        temperature = getattr(container, "temperature", None)
        temp_text = f"{_fmt(temperature, '.1f')} °C" if temperature is not None else "not set"
        return f"{container.product_type}, {temp_text}"
    return ""


def _style_header(ws) -> None:
    header_fill = PatternFill(fill_type="solid", fgColor="4472C4")
    header_font = Font(bold=True, color="FFFFFF")
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment


def _style_body_table(ws, *, start_row: int = 2, first_col_bold: bool = True, stripe: bool = True) -> None:
    """Zebra striping and a bold, left-aligned first column."""
    stripe_fill = PatternFill(fill_type="solid", fgColor="F5F5F5")
    for row in ws.iter_rows(min_row=start_row, max_row=ws.max_row, min_col=1, max_col=ws.max_column):
        if first_col_bold and row and row[0].value not in (None, ""):
            row[0].font = Font(bold=True)
        for cell in row:
            if stripe and cell.row % 2 == 0:
                cell.fill = stripe_fill
            if cell.column == 1:
                cell.alignment = Alignment(horizontal="left", vertical="center", wrap_text=True)


def build_manifest_frame(ship: "Ship") -> pd.DataFrame:
    """One row per container on board, in boarding order."""
    rows: list[dict] = []
    for container in ship.containers:
        ceiling = getattr(container, "ceiling_kg", container.max_weight_kg)
        fill_pct = container.load_mass_kg / container.max_weight_kg * 100.0
        rows.append(
            {
                "Serial Number": container.id,
                "Type": _TYPE_NAMES.get(container.type_code, type(container).__name__),
                "Load (kg)": container.load_mass_kg,
                "Max weight (kg)": container.max_weight_kg,
                "Ceiling (kg)": ceiling,
                "Free capacity (kg)": container.free_capacity_kg,
                "Fill (%)": round(fill_pct, 1),
                "Height (cm)": container.height_cm,
                "Depth (cm)": container.depth_cm,
                "Details": _container_details(container),
            }
        )
    return pd.DataFrame(rows, columns=MANIFEST_COLUMNS)


def export_manifest_to_excel(filepath: Path, ship: "Ship") -> None:
    """
    Write a two-sheet workbook: ship summary and container manifest.
    """
    total = ship.get_total_weight()
    capacity = ship.max_weight_capacity_kg
    summary_data = {
        "Parameter": [
            "Ship",
            "Containers on board",
            "Container limit",
            "Total load (kg)",
            "Weight capacity (kg)",
            "Utilisation (%)",
        ],
        "Value": [
            ship.name or "-",
            str(len(ship)),
            str(ship.max_containers),
            _fmt(total, ".1f"),
            _fmt(capacity, ".1f"),
            _fmt(total / capacity * 100.0 if capacity > 0 else None, ".1f"),
        ],
    }
    df_summary = pd.DataFrame(summary_data)
    df_manifest = build_manifest_frame(ship)

    with pd.ExcelWriter(str(filepath), engine="openpyxl") as writer:
        df_summary.to_excel(writer, sheet_name="Ship Summary", index=False)
        ws_summary = writer.sheets["Ship Summary"]
        ws_summary.column_dimensions["A"].width = 28
        ws_summary.column_dimensions["B"].width = 24
        _style_header(ws_summary)
        _style_body_table(ws_summary)
        ws_summary.freeze_panes = "A2"

        df_manifest.to_excel(writer, sheet_name="Container Manifest", index=False)
        ws_manifest = writer.sheets["Container Manifest"]
        for letter, width in zip("ABCDEFGHIJ", (16, 14, 12, 16, 14, 16, 10, 12, 12, 28)):
            ws_manifest.column_dimensions[letter].width = width
        _style_header(ws_manifest)
        _style_body_table(ws_manifest)
        ws_manifest.freeze_panes = "A2"

        # Flag overweight ships on the summary sheet
        if total > capacity:
            cell = ws_summary.cell(row=5, column=2)
            cell.fill = PatternFill(fill_type="solid", fgColor="FFC7CE")
