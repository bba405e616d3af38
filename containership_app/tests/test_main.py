"""Tests for the demonstration driver."""

from __future__ import annotations

import pytest

from containership_app.config.settings import Settings
from containership_app.main import run_demo
from containership_app.services.ship_service import FleetService


def test_run_demo(tmp_path, sink):
    settings = Settings(project_root=tmp_path, data_dir=tmp_path, log_file=tmp_path / "test.log")
    ship = run_demo(FleetService(settings, sink=sink), sink)

    assert ship.get_total_weight() == pytest.approx(21125.0)
    assert sink.lines[0] == (
        "ALERT: Temperature for Bananas container cannot be lower than 10°C. Given: 1°C."
        " - Container Serial Number: KON-C-1"
    )
    assert sink.lines[-5:] == [
        "Ship: 4/10 containers, 21125/50000 kg loaded.",
        "KON-C-1: Load 10000/20000 kg",
        "KON-G-3: Load 125/5000 kg",
        "KON-C-2: Load 4000/5000 kg",
        "KON-L-4: Load 7000/14000 kg",
    ]
