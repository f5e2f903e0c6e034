"""Rendering of law reports: Jinja2 templates for text/markdown, dicts for JSON."""

from __future__ import annotations

import json
import os
from typing import Any, Literal

import jinja2

from .laws import LawReport

type ReportFormat = Literal["text", "markdown", "json"]

REPORT_FORMATS: tuple[ReportFormat, ...] = ("text", "markdown", "json")

_TEMPLATE_DIR = os.path.join(os.path.dirname(__file__), "templates")
_ENV = jinja2.Environment(
    loader=jinja2.FileSystemLoader(_TEMPLATE_DIR),
    autoescape=False,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=jinja2.StrictUndefined,
)

_TEMPLATES: dict[str, str] = {
    "text": "report.txt.j2",
    "markdown": "report.md.j2",
}


def _passed_count(report: LawReport) -> int:
    return sum(1 for law in report.laws if not report.diagnostics_for(law.name))


def format_report(report: LawReport, fmt: str = "text", *, verbose: bool = False) -> str:
    """Human-readable report for terminal output or markdown documents."""
    if fmt not in _TEMPLATES:
        raise ValueError(f"Unknown report format: {fmt!r}")
    template = _ENV.get_template(_TEMPLATES[fmt])
    return template.render(
        report=report,
        laws=report.laws,
        samples=report.samples,
        passed_count=_passed_count(report),
        verbose=verbose,
    )


def report_json(report: LawReport) -> dict[str, Any]:
    """Machine-readable report for pipeline integration."""
    return {
        "passed": report.passed,
        "law_count": len(report.laws),
        "sample_count": len(report.samples),
        "passed_count": _passed_count(report),
        "failure_count": len(report.failures),
        "error_count": len(report.errors),
        "laws": [
            {
                "name": law.name,
                "family": law.family.value,
                "description": law.description,
                "passed": not report.diagnostics_for(law.name),
            }
            for law in report.laws
        ],
        "diagnostics": [
            {
                "law": d.law,
                "family": d.family.value,
                "severity": d.severity.value,
                "sample": d.sample,
                "message": d.message,
            }
            for d in report.diagnostics
        ],
    }


def render_report(report: LawReport, fmt: ReportFormat, *, verbose: bool = False) -> str:
    match fmt:
        case "json":
            return json.dumps(report_json(report), indent=2)
        case "text" | "markdown":
            return format_report(report, fmt, verbose=verbose)
        case _:
            raise ValueError(f"Unknown report format: {fmt!r}")
