# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Theme records and normalization results.

The engine does not own the theme schema. A ThemeRecord is the row as
read from storage; a TokenBundle is its decoded JSON token groups, which
the normalizer treats as a bag of named ColorValue strings (plus a few
non-color values such as font names and corner radii).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Optional


# Token JSON columns, in the order they are written back
TOKEN_COLUMNS = (
    "color_tokens",
    "typography_tokens",
    "shape_tokens",
    "iconography_tokens",
)

# Plain string columns the normalizer may rewrite
BACKGROUND_COLUMNS = ("page_background", "widget_background")


@dataclass(frozen=True, slots=True)
class ThemeRecord:
    """A stored theme row, token columns still JSON-encoded."""
    id: int
    name: str
    page_background: Optional[str] = None
    widget_background: Optional[str] = None
    color_tokens: Optional[str] = None
    typography_tokens: Optional[str] = None
    shape_tokens: Optional[str] = None
    iconography_tokens: Optional[str] = None
    is_active: bool = True

    @classmethod
    def from_row(cls, row) -> ThemeRecord:
        """Build from a mapping-like database row (e.g. ``sqlite3.Row``)."""
        keys = set(row.keys())

        def get(name: str):
            return row[name] if name in keys else None

        return cls(
            id=row["id"],
            name=row["name"],
            page_background=get("page_background"),
            widget_background=get("widget_background"),
            color_tokens=get("color_tokens"),
            typography_tokens=get("typography_tokens"),
            shape_tokens=get("shape_tokens"),
            iconography_tokens=get("iconography_tokens"),
            is_active=bool(row["is_active"]) if "is_active" in keys else True,
        )


@dataclass
class TokenBundle:
    """
    Decoded token groups of one theme.

    Mutable: the normalizer edits it in place during a single
    review, then serializes the groups it touched.
    """
    color: dict = field(default_factory=dict)
    typography: dict = field(default_factory=dict)
    shape: dict = field(default_factory=dict)
    iconography: dict = field(default_factory=dict)

    def group(self, column: str) -> dict:
        """Return the group stored in a ``*_tokens`` column."""
        return getattr(self, column.removesuffix("_tokens"))

    def encode(self, column: str) -> str:
        """JSON-encode one group for writing back to its column."""
        return json.dumps(self.group(column), separators=(",", ":"))


@dataclass(frozen=True, slots=True)
class Correction:
    """
    A single field the normalizer rewrote.

    Attributes:
        column: Storage column that will be updated
        field: Dotted path of the token inside the column's JSON
        old: Previous value (None if absent)
        new: Replacement value
        reason: Human-readable explanation
    """
    column: str
    field: str
    old: object
    new: object
    reason: str

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "column": self.column,
            "field": self.field,
            "old": self.old,
            "new": self.new,
            "reason": self.reason,
        }


@dataclass(frozen=True, slots=True)
class ThemeReview:
    """
    Outcome of normalizing one theme.

    Attributes:
        theme_id: Row id
        name: Theme name
        background: Dominant color of the page background used for checks
        corrections: Fields rewritten
        issues: Findings that were reported but not rewritten
        updates: Column name -> new stored value, only for changed columns
    """
    theme_id: int
    name: str
    background: str
    corrections: tuple[Correction, ...] = ()
    issues: tuple[str, ...] = ()
    updates: tuple[tuple[str, str], ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.updates)

    @property
    def changed_columns(self) -> tuple[str, ...]:
        return tuple(column for column, _ in self.updates)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "id": self.theme_id,
            "name": self.name,
            "background": self.background,
            "changed": self.changed,
            "columns": list(self.changed_columns),
            "corrections": [c.to_dict() for c in self.corrections],
            "issues": list(self.issues),
        }


@dataclass(frozen=True, slots=True)
class NormalizationReport:
    """Result of one batch run over all selected themes."""
    reviews: tuple[ThemeReview, ...] = ()
    dry_run: bool = False

    @property
    def reviewed(self) -> int:
        return len(self.reviews)

    @property
    def updated(self) -> int:
        return sum(1 for r in self.reviews if r.changed)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "reviewed": self.reviewed,
            "updated": self.updated,
            "dry_run": self.dry_run,
            "themes": [r.to_dict() for r in self.reviews],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)
