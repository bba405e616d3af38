"""
PDF manifest export for a ship and its containers.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from containership_app.utils.formatting import format_number

if TYPE_CHECKING:
    from containership_app.models import Ship


def _section_title(text: str, styles) -> Paragraph:
    return Paragraph(f"<b>{text}</b>", styles["Heading3"])


def _table_style(header_bg: str = "#4472C4") -> TableStyle:
    return TableStyle(
        [
            ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor(header_bg)),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 8),
            ("GRID", (0, 0), (-1, -1), 0.4, colors.HexColor("#999999")),
            ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, colors.HexColor("#F5F5F5")]),
            ("ALIGN", (1, 1), (-1, -1), "RIGHT"),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]
    )


def _build_manifest_table(ship: "Ship") -> list[list[str]]:
    headers = ["Serial Number", "Load (kg)", "Max weight (kg)", "Ceiling (kg)", "Fill (%)"]
    rows: list[list[str]] = [headers]
    for container in ship.containers:
        ceiling = getattr(container, "ceiling_kg", container.max_weight_kg)
        fill_pct = container.load_mass_kg / container.max_weight_kg * 100.0
        rows.append(
            [
                container.id,
                format_number(container.load_mass_kg),
                format_number(container.max_weight_kg),
                format_number(ceiling),
                f"{fill_pct:.1f}",
            ]
        )
    return rows


def export_manifest_to_pdf(filepath: Path, ship: "Ship") -> None:
    """
    Generate a one-page PDF: ship summary followed by the container manifest.
    """
    doc = SimpleDocTemplate(
        str(filepath),
        pagesize=A4,
        rightMargin=2.2 * cm,
        leftMargin=2.2 * cm,
        topMargin=2.0 * cm,
        bottomMargin=2.0 * cm,
    )
    doc.title = ship.name or "Container manifest"
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "CustomTitle",
        parent=styles["Heading1"],
        fontSize=16,
        leading=20,
        spaceAfter=6,
    )

    total = ship.get_total_weight()
    capacity = ship.max_weight_capacity_kg
    story = [
        Paragraph(f"Container manifest{': ' + ship.name if ship.name else ''}", title_style),
        Spacer(1, 0.3 * cm),
        _section_title("Ship summary", styles),
    ]

    summary_rows = [
        ["Parameter", "Value"],
        ["Containers", f"{len(ship)}/{ship.max_containers}"],
        ["Total load (kg)", format_number(total)],
        ["Weight capacity (kg)", format_number(capacity)],
        ["Status", "OVERWEIGHT" if total > capacity else "OK"],
    ]
    summary_table = Table(summary_rows, colWidths=[6 * cm, 6 * cm])
    summary_style = _table_style()
    if total > capacity:
        summary_style.add("TEXTCOLOR", (1, 4), (1, 4), colors.red)
    summary_table.setStyle(summary_style)
    story.append(summary_table)
    story.append(Spacer(1, 0.5 * cm))

    story.append(_section_title("Containers on board", styles))
    manifest_rows = _build_manifest_table(ship)
    if len(manifest_rows) > 1:
        manifest_table = Table(manifest_rows, repeatRows=1)
        manifest_table.setStyle(_table_style())
        story.append(manifest_table)
    else:
        story.append(Paragraph("No containers on board.", styles["Normal"]))

    doc.build(story)
