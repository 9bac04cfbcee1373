# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Serializers for normalization results.

Progress lines and the summary are meant for a terminal; the JSON form
carries the same data for scripts. Serializers only format, they never
recompute anything.
"""

from podacolor.report.natural import to_progress_lines, to_summary
from podacolor.report.structured import ReportFormat, render, to_json

__all__ = [
    "ReportFormat",
    "to_progress_lines",
    "to_summary",
    "to_json",
    "render",
]
