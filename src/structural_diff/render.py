"""Presentation helpers for DiffReport.

Rendering sits outside the comparison core: the engine only fills a report,
and callers pick how to show it (plain text, JSON, or a logger).
"""

from __future__ import annotations

import json
import logging

from structural_diff.report import (
    AttributeMismatch,
    DiffFinding,
    DiffReport,
    Mismatch,
    MissingAttribute,
    MissingElement,
)

__all__ = ["format_finding", "log_summary", "render_json", "render_text"]


def format_finding(finding: DiffFinding) -> str:
    """Return the one-line message for a single finding."""
    if isinstance(finding, Mismatch):
        return (
            f"Mismatch at {finding.path}: "
            f"{finding.label_a}=[{finding.value_a}] "
            f"{finding.label_b}=[{finding.value_b}]"
        )
    if isinstance(finding, MissingElement):
        return f"Missing element in {finding.label}: {finding.path}"
    if isinstance(finding, MissingAttribute):
        return (
            f"Missing attribute '{finding.attribute}' in {finding.label} "
            f"at element: {finding.path}"
        )
    if isinstance(finding, AttributeMismatch):
        return (
            f"Mismatch in attribute '{finding.attribute}' at {finding.path}: "
            f"{finding.label_a}=[{finding.value_a}] "
            f"{finding.label_b}=[{finding.value_b}]"
        )
    raise TypeError(f"Unsupported finding type: {type(finding)!r}")


def render_text(report: DiffReport) -> str:
    """Render every finding on its own line, or a single success line."""
    if not report.has_differences():
        return (
            f"No differences found between {report.label_a} and {report.label_b}."
        )
    lines = [format_finding(finding) for finding in report.findings()]
    lines.append(
        f"{len(report)} difference(s) found between "
        f"{report.label_a} and {report.label_b}."
    )
    return "\n".join(lines)


def render_json(report: DiffReport, indent: int | None = 2) -> str:
    return json.dumps(report.to_dict(), indent=indent)


def log_summary(report: DiffReport, logger: logging.Logger) -> None:
    """Log each finding at ERROR, or one INFO line when there are none."""
    if not report.has_differences():
        logger.info(
            "Comparison successful. No differences between %s and %s.",
            report.label_a,
            report.label_b,
        )
        return
    for finding in report.findings():
        logger.error("%s", format_finding(finding))
    logger.warning(
        "Comparison completed with %d difference(s) between %s and %s.",
        len(report),
        report.label_a,
        report.label_b,
    )
