# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""Exceptions for the batch boundary, and logging setup."""

from __future__ import annotations

import logging
import sys


class PodaColorError(Exception):
    """Base exception for PodaColor."""


class ThemeDecodeError(PodaColorError):
    """A stored token column is not valid JSON."""

    def __init__(self, theme_id: int, column: str, detail: str) -> None:
        self.theme_id = theme_id
        self.column = column
        super().__init__(f"Theme {theme_id}: cannot decode {column}: {detail}")


class ThemeStoreError(PodaColorError):
    """Reading or writing theme storage failed."""


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the ``podacolor`` logger (stderr, one handler)."""
    logger = logging.getLogger("podacolor")
    # Guard against duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    level = logging.DEBUG if debug else logging.WARNING
    logger.setLevel(level)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    ))
    logger.addHandler(console)

    return logger
