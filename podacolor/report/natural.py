# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Human-readable progress lines.

Example::

    Ocean Breeze (#3): 2 corrections
      - typography_tokens color.heading: #7dd3fc -> #0F172A (heading contrast 1.92:1 below 4.5:1)
      - shape_tokens button_corner.md: 2px -> 0.5rem (radius 2px below 6px minimum)
      ! page_background: harsh gradient transition at stops 0->1
    Slate Night (#4): ok

    Reviewed 2 themes, updated 1.
"""

from __future__ import annotations

from podacolor.schema import Correction, NormalizationReport, ThemeReview


def _describe_value(value: object) -> str:
    if value is None:
        return "(unset)"
    if isinstance(value, dict):
        return ", ".join(f"{k}={v}" for k, v in value.items())
    return str(value)


def _describe_correction(correction: Correction) -> str:
    return (
        f"  - {correction.column} {correction.field}: "
        f"{_describe_value(correction.old)} -> {_describe_value(correction.new)} "
        f"({correction.reason})"
    )


def to_progress_lines(review: ThemeReview) -> list[str]:
    """Lines describing one reviewed theme."""
    count = len(review.corrections)
    if count:
        status = f"{count} correction" + ("" if count == 1 else "s")
    elif review.issues:
        status = "issues found"
    else:
        status = "ok"

    lines = [f"{review.name} (#{review.theme_id}): {status}"]
    lines.extend(_describe_correction(c) for c in review.corrections)
    lines.extend(f"  ! {issue}" for issue in review.issues)
    return lines


def to_summary(report: NormalizationReport) -> str:
    """One-line summary of a run."""
    noun = "theme" if report.reviewed == 1 else "themes"
    summary = f"Reviewed {report.reviewed} {noun}, updated {report.updated}."
    if report.dry_run:
        summary += " Dry run, nothing written."
    return summary
