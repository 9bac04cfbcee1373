# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""Shared fixtures: theme databases and logger cleanup."""

import json
import logging

import pytest

from podacolor.themes.store import ThemeStore


GOOD_ICONS = json.dumps({"color": "#1e293b", "size": "48px", "spacing": "0.75rem"})


def theme_columns(
    *,
    background="#ffffff",
    heading="#0f172a",
    body="#1e293b",
    radius="0.75rem",
    icons=GOOD_ICONS,
    **overrides,
) -> dict:
    """Columns of a theme that passes every check unless overridden."""
    columns = {
        "page_background": background,
        "widget_background": "#ffffff",
        "color_tokens": json.dumps({"semantic": {"accent": {"primary": "#2563eb"}}}),
        "typography_tokens": json.dumps({
            "font": {"heading": "Inter", "body": "Inter"},
            "color": {"heading": heading, "body": body},
        }),
        "shape_tokens": json.dumps({"button_corner": {"md": radius}}),
        "iconography_tokens": icons,
    }
    columns.update(overrides)
    return columns


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "themes.db"
    with ThemeStore(path, create=True):
        pass
    return path


@pytest.fixture
def store(db_path):
    with ThemeStore(db_path) as s:
        yield s


@pytest.fixture(autouse=True)
def _reset_podacolor_logger():
    yield
    logger = logging.getLogger("podacolor")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
