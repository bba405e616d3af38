"""
Reporting utilities for containership.

The Excel and PDF exporters live in `excel_report` and `pdf_report` and are
imported from there, so the models do not pull in pandas or reportlab.
"""

from containership_app.reports.sink import (
    ConsoleSink,
    LoggingSink,
    MemorySink,
    ReportSink,
    get_default_sink,
    set_default_sink,
)
from containership_app.reports.simple_text_report import (
    build_ship_summary_lines,
    build_ship_summary_text,
)

__all__ = [
    "ConsoleSink",
    "LoggingSink",
    "MemorySink",
    "ReportSink",
    "get_default_sink",
    "set_default_sink",
    "build_ship_summary_lines",
    "build_ship_summary_text",
]
