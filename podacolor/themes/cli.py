# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
``podacolor-normalize``: run the theme token normalizer over a database.

Exit status is 0 when the run completes (with or without changes) and 1
when it aborts on a corrupt token column or a database error.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from podacolor.engine.adjust import AdjustPolicy
from podacolor.errors import PodaColorError, setup_logging
from podacolor.report import ReportFormat, render, to_progress_lines, to_summary
from podacolor.themes.config import NormalizerConfig
from podacolor.themes.normalizer import ThemeTokenNormalizer
from podacolor.themes.store import ThemeStore

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="podacolor-normalize",
        description="Fix theme text/icon contrast and button radii in stored themes.",
    )
    ap.add_argument("--db", default=os.getenv("PODACOLOR_DB"),
                    help="SQLite database path (default: $PODACOLOR_DB)")
    ap.add_argument("--dry-run", action="store_true",
                    help="review and report without writing")
    ap.add_argument("--format", choices=[f.value for f in ReportFormat],
                    default=ReportFormat.NATURAL.value)
    ap.add_argument("--policy", choices=[p.value for p in AdjustPolicy],
                    default=AdjustPolicy.FIXED_FALLBACK.value,
                    help="how failing colors are replaced")
    ap.add_argument("--smooth-gradients", action="store_true",
                    help="rewrite harsh gradient backgrounds instead of only reporting them")
    ap.add_argument("--include-inactive", action="store_true",
                    help="also review inactive themes")
    ap.add_argument("--debug", action="store_true")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    if not args.db:
        ap.error("--db is required when PODACOLOR_DB is not set")

    setup_logging(debug=args.debug)
    fmt = ReportFormat(args.format)
    config = NormalizerConfig(
        policy=AdjustPolicy(args.policy),
        smooth_gradients=args.smooth_gradients,
        include_inactive=args.include_inactive,
    )
    normalizer = ThemeTokenNormalizer(config)

    def progress(review) -> None:
        for line in to_progress_lines(review):
            print(line)

    try:
        with ThemeStore(args.db) as store:
            report = normalizer.run(
                store,
                dry_run=args.dry_run,
                on_review=progress if fmt == ReportFormat.NATURAL else None,
            )
    except PodaColorError as e:
        logger.debug("Normalization aborted", exc_info=True)
        print(f"Error: {e}. No changes were saved.")
        return 1

    if fmt == ReportFormat.NATURAL:
        print()
        print(to_summary(report))
    else:
        print(render(report, format=fmt))
    return 0


if __name__ == "__main__":
    sys.exit(main())
