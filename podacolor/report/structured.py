# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
JSON report serializer.

Example (JSON_PRETTY)::

    {
      "reviewed": 2,
      "updated": 1,
      "dry_run": false,
      "themes": [
        {
          "id": 3,
          "name": "Ocean Breeze",
          "background": "#0f172a",
          "changed": true,
          "columns": ["typography_tokens"],
          "corrections": [...],
          "issues": []
        }
      ]
    }
"""

from __future__ import annotations

import json
from enum import Enum

from podacolor.report.natural import to_progress_lines, to_summary
from podacolor.schema import NormalizationReport


class ReportFormat(Enum):
    """How ``podacolor-normalize`` prints its report (the ``--format`` choices)."""

    JSON = "json"
    JSON_PRETTY = "json_pretty"
    NATURAL = "natural"


def to_json(
    report: NormalizationReport,
    *,
    format: ReportFormat = ReportFormat.JSON,
) -> str:
    """Serialize a report as compact or indented JSON."""
    data = report.to_dict()
    if format == ReportFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def render(
    report: NormalizationReport,
    *,
    format: ReportFormat = ReportFormat.NATURAL,
) -> str:
    """Render a whole report in the requested format."""
    if format != ReportFormat.NATURAL:
        return to_json(report, format=format)

    lines: list[str] = []
    for review in report.reviews:
        lines.extend(to_progress_lines(review))
    if lines:
        lines.append("")
    lines.append(to_summary(report))
    return "\n".join(lines)
