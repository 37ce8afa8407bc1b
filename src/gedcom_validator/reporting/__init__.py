from __future__ import annotations

from .reporter import Reporter, TextSink, open_report_sink, render_finding, truncate_report
from .templates import REPORT_TEMPLATES, ReportTemplate, get_template

__all__ = [
    "REPORT_TEMPLATES",
    "ReportTemplate",
    "Reporter",
    "TextSink",
    "get_template",
    "open_report_sink",
    "render_finding",
    "truncate_report",
]
