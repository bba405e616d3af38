"""
Demonstration driver for the containership app.

Builds one ship, loads four containers, boards them, unloads the gas
container and prints the ship summary. Optionally exports the manifest.
"""

import argparse
import sys
from pathlib import Path

from containership_app.config.settings import Settings, init_logging
from containership_app.models import GasContainer, LiquidContainer, RefrigeratedContainer, Ship
from containership_app.reports.excel_report import export_manifest_to_excel
from containership_app.reports.pdf_report import export_manifest_to_pdf
from containership_app.reports.sink import ConsoleSink, ReportSink
from containership_app.services.ship_service import FleetService
from containership_app.services.validation import validate_ship


def run_demo(fleet: FleetService, sink: ReportSink) -> Ship:
    ship = fleet.create_ship("Demo Vessel", 10, 50)

    banana_container = RefrigeratedContainer("Bananas", 1, 20000, sink=sink)
    sausages_container = RefrigeratedContainer("Sausages", 5, 5000, sink=sink)
    helium_container = GasContainer(5000, 50, sink=sink)
    fuel_container = LiquidContainer(14000, True, sink=sink)

    banana_container.load(10000)
    helium_container.load(2500)
    sausages_container.load(4000)
    fuel_container.load(7000)

    ship.load_container(banana_container)
    ship.load_container(helium_container)
    ship.load_container(sausages_container)
    ship.load_container(fuel_container)
    helium_container.unload()

    ship.display_ship_info()
    return ship


def main(argv: list[str] | None = None) -> int:
    """Bootstraps settings and logging, then runs the demonstration."""
    parser = argparse.ArgumentParser(description="Container ship loading demo")
    parser.add_argument("--excel", type=Path, help="Write the manifest to this .xlsx file")
    parser.add_argument("--pdf", type=Path, help="Write the manifest to this .pdf file")
    parser.add_argument(
        "--rollback-transfers",
        action="store_true",
        help="Keep a container on its ship when the transfer target would refuse it",
    )
    args = parser.parse_args(argv)

    settings = Settings.default(rollback_failed_transfers=args.rollback_transfers)
    init_logging(settings)

    sink = ConsoleSink()
    fleet = FleetService(settings, sink=sink)
    ship = run_demo(fleet, sink)

    for issue in validate_ship(ship).issues:
        sink.write(f"[{issue.severity.value.upper()}] {issue.message}")

    if args.excel:
        export_manifest_to_excel(args.excel, ship)
        sink.write(f"Manifest written to {args.excel}")
    if args.pdf:
        export_manifest_to_pdf(args.pdf, ship)
        sink.write(f"Manifest written to {args.pdf}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
