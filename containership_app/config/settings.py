"""
Basic settings and logging configuration for the containership app.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path


def _get_resource_root() -> Path:

    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS)
    return Path(__file__).resolve().parents[2]


def _get_user_data_dir(resource_root: Path) -> Path:

    if getattr(sys, "frozen", False):
        exe_path = Path(getattr(sys, "executable", resource_root))
        return exe_path.parent / "containership_app_data"
    return resource_root / "containership_app_data"


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    log_file: Path

    # Check the target ship before removing a container during transfer.
    # Off by default: a rejected transfer loses the container from both ships.
    rollback_failed_transfers: bool = False

    @classmethod
    def default(cls, rollback_failed_transfers: bool = False) -> "Settings":
        resource_root = _get_resource_root()
        data_dir = _get_user_data_dir(resource_root)
        data_dir.mkdir(exist_ok=True)

        return cls(
            project_root=resource_root,
            data_dir=data_dir,
            log_file=data_dir / "containership.log",
            rollback_failed_transfers=rollback_failed_transfers,
        )


def init_logging(settings: Settings, level: int = logging.INFO) -> None:
    """Configure basic logging to the settings log file."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(settings.log_file, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info(
        "Logging initialized. Transfer rollback %s",
        "enabled" if settings.rollback_failed_transfers else "disabled",
    )
