# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Batch theme token normalizer.

For every stored theme:

1. Decode the JSON token groups, substituting default groups for empty
   or missing ones.
2. Take the dominant color of the page background.
3. Check heading text, body text and icon color against it (WCAG AA,
   4.5:1) and replace failures with the configured adjust policy.
4. Initialize empty iconography.
5. Bring the button corner radius into [6px, 20px], preferring >= 8px.
6. Report (and optionally smooth) harsh gradient backgrounds.

Only columns with at least one correction are written back. A corrupt
JSON column or a storage error aborts the whole run.
"""

from __future__ import annotations

import json
import logging
from typing import Callable, Optional

from podacolor.schema import (
    AA_NORMAL_TEXT,
    BACKGROUND_COLUMNS,
    TOKEN_COLUMNS,
    Correction,
    NormalizationReport,
    ThemeRecord,
    ThemeReview,
    TokenBundle,
)
from podacolor.engine.adjust import TextRole, adjust_for_contrast, fallback_color
from podacolor.engine.codec import expand_hex
from podacolor.engine.contrast import contrast_ratio, dominant_color, is_light, meets_wcag_aa
from podacolor.engine.gradient import is_gradient
from podacolor.engine.smoothing import harsh_transitions, smooth_gradient
from podacolor.errors import ThemeDecodeError
from podacolor.themes.config import NormalizerConfig, RadiusRule, default_tokens
from podacolor.themes.store import ThemeStore

logger = logging.getLogger(__name__)

REM_PX = 16.0


# =============================================================================
# Corner radius lint
# =============================================================================


def radius_to_px(value: object, default: float = 12.0) -> float:
    """
    Convert a CSS radius to pixels.

    ``"0.5rem"`` -> 8.0, ``"10px"`` -> 10.0, ``6`` -> 6.0. Anything else
    (percentages, keywords, garbage) yields ``default``.
    """
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value)

    text = str(value or "").strip().lower()
    scale = 1.0
    if text.endswith("rem"):
        text, scale = text[:-3], REM_PX
    elif text.endswith("px"):
        text = text[:-2]

    try:
        return float(text) * scale
    except ValueError:
        logger.warning("Unreadable corner radius %r, assuming %gpx", value, default)
        return default


def _first_item(group: object) -> Optional[tuple[str, object]]:
    if isinstance(group, dict) and group:
        return next(iter(group.items()))
    return None


def normalize_corner_radius(
    shape: dict,
    rule: Optional[RadiusRule] = None,
) -> Optional[Correction]:
    """
    Lint the button corner radius of a shape token group, in place.

    The radius is the first value of ``button_corner``, else the first
    value of ``corner``. Corrections are written to the first key of
    ``button_corner`` (``md`` if it has none).

    Returns:
        The correction made, or None if the radius was acceptable.
    """
    rule = rule or RadiusRule()

    source = _first_item(shape.get("button_corner")) or _first_item(shape.get("corner"))
    old = source[1] if source else None
    px = radius_to_px(old, rule.default_px) if source else rule.default_px

    if px < rule.min_px:
        new, reason = rule.raise_to, f"radius {px:g}px below {rule.min_px:g}px minimum"
    elif px > rule.max_px:
        new, reason = rule.lower_to, f"radius {px:g}px above {rule.max_px:g}px maximum"
    elif px < rule.preferred_min_px:
        new, reason = rule.raise_to, f"radius {px:g}px below preferred {rule.preferred_min_px:g}px"
    else:
        return None

    button = shape.get("button_corner")
    if not isinstance(button, dict):
        button = {}
        shape["button_corner"] = button
    key = next(iter(button), "md")
    previous = button.get(key)
    button[key] = new

    return Correction(
        column="shape_tokens",
        field=f"button_corner.{key}",
        old=previous,
        new=new,
        reason=reason,
    )


# =============================================================================
# Normalizer
# =============================================================================


class ThemeTokenNormalizer:
    """
    Reviews theme records and writes back corrected token groups.

    Example:
        >>> normalizer = ThemeTokenNormalizer()
        >>> with ThemeStore("themes.db") as store:
        ...     report = normalizer.run(store)
        >>> report.updated
        2
    """

    def __init__(self, config: Optional[NormalizerConfig] = None) -> None:
        self.config = config or NormalizerConfig()

    # --- Decoding ---

    def decode_group(self, record: ThemeRecord, column: str) -> dict:
        """
        Decode one token column.

        NULL, blank, ``null``, ``[]`` and ``{}`` all mean "unset" and give
        the default group. Invalid JSON or a non-object raises
        ThemeDecodeError.
        """
        raw = getattr(record, column)
        data = None
        if raw is not None and str(raw).strip():
            try:
                data = json.loads(raw)
            except json.JSONDecodeError as e:
                raise ThemeDecodeError(record.id, column, str(e)) from e

        if data in (None, [], {}):
            if column != "iconography_tokens":
                logger.warning("Theme %s has no %s, using defaults", record.id, column)
            return default_tokens(column)
        if not isinstance(data, dict):
            raise ThemeDecodeError(
                record.id, column, f"expected an object, got {type(data).__name__}"
            )
        return data

    def decode(self, record: ThemeRecord) -> TokenBundle:
        groups = {column: self.decode_group(record, column) for column in TOKEN_COLUMNS}
        return TokenBundle(
            color=groups["color_tokens"],
            typography=groups["typography_tokens"],
            shape=groups["shape_tokens"],
            iconography=groups["iconography_tokens"],
        )

    # --- Checks ---

    def _fix_contrast(
        self,
        current: str,
        background: str,
        role: TextRole,
    ) -> Optional[str]:
        """Replacement for a failing foreground, or None if it passes."""
        if meets_wcag_aa(background, current):
            return None
        cfg = self.config
        replacement = adjust_for_contrast(
            current,
            background,
            role,
            policy=cfg.policy,
            palette=cfg.palette,
            iterative=cfg.iterative,
        )
        if expand_hex(replacement) == expand_hex(current):
            return None
        return replacement

    def _check_color(
        self,
        group: dict,
        key: str,
        background: str,
        role: TextRole,
        default: str,
        *,
        column: str,
        field: str,
        label: str,
    ) -> Optional[Correction]:
        """
        Check one stored foreground color in ``group[key]``, in place.

        A missing value is checked as ``default``. A value that is not a
        string is replaced by ``default`` (or its contrast fix).
        """
        stored = group.get(key)
        malformed = stored is not None and not isinstance(stored, str)
        if malformed:
            logger.warning("Ignoring non-string %s color %r, using %s", label, stored, default)
        current = default if malformed or not stored else stored

        replacement = self._fix_contrast(current, background, role)
        if replacement is not None:
            reason = (
                f"{label} contrast {contrast_ratio(background, current):.2f}:1 "
                f"below {AA_NORMAL_TEXT:g}:1"
            )
        elif malformed:
            replacement, reason = current, f"{label} color {stored!r} is not a color string"
        else:
            return None

        group[key] = replacement
        return Correction(column=column, field=field, old=stored, new=replacement, reason=reason)

    def _check_text(
        self,
        typography: dict,
        background: str,
        role: TextRole,
        default: str,
    ) -> Optional[Correction]:
        colors = typography.get("color")
        if not isinstance(colors, dict):
            colors = {}
            typography["color"] = colors

        key = role.value
        return self._check_color(
            colors, key, background, role, default,
            column="typography_tokens", field=f"color.{key}", label=key,
        )

    def _check_icons(self, iconography: dict, background: str) -> Optional[Correction]:
        cfg = self.config
        if not iconography:
            color = fallback_color(TextRole.ICON, background, cfg.palette)
            iconography.update(color=color, size=cfg.icon_size, spacing=cfg.icon_spacing)
            return Correction(
                column="iconography_tokens",
                field="iconography",
                old=None,
                new=dict(iconography),
                reason="iconography initialized for "
                       + ("light" if is_light(background) else "dark") + " background",
            )

        return self._check_color(
            iconography, "color", background, TextRole.ICON, cfg.default_icon,
            column="iconography_tokens", field="color", label="icon",
        )

    def _check_gradients(
        self,
        record: ThemeRecord,
    ) -> tuple[list[Correction], list[str]]:
        corrections: list[Correction] = []
        issues: list[str] = []
        if not self.config.check_gradients:
            return corrections, issues

        for column in BACKGROUND_COLUMNS:
            value = getattr(record, column)
            if not value or not is_gradient(value):
                continue
            pairs = harsh_transitions(value)
            if not pairs:
                continue

            stops = ", ".join(f"{a}->{b}" for a, b in pairs)
            if self.config.smooth_gradients:
                smoothed = smooth_gradient(value)
                if smoothed != value:
                    corrections.append(Correction(
                        column=column,
                        field=column,
                        old=value,
                        new=smoothed,
                        reason=f"harsh gradient transition at stops {stops}",
                    ))
                    continue
            issues.append(f"{column}: harsh gradient transition at stops {stops}")

        return corrections, issues

    # --- Review ---

    def review(self, record: ThemeRecord) -> ThemeReview:
        """
        Normalize one theme without touching storage.

        Raises:
            ThemeDecodeError: if a token column holds corrupt JSON.
        """
        cfg = self.config
        bundle = self.decode(record)
        background = dominant_color(record.page_background or cfg.default_background)

        found = [
            self._check_text(bundle.typography, background, TextRole.HEADING, cfg.default_heading),
            self._check_text(bundle.typography, background, TextRole.BODY, cfg.default_body),
            self._check_icons(bundle.iconography, background),
            normalize_corner_radius(bundle.shape, cfg.radius),
        ]
        corrections = [c for c in found if c is not None]

        gradient_corrections, issues = self._check_gradients(record)
        corrections.extend(gradient_corrections)

        touched = {c.column for c in corrections}
        updates = [(column, bundle.encode(column)) for column in TOKEN_COLUMNS if column in touched]
        updates.extend((c.column, c.new) for c in gradient_corrections)

        return ThemeReview(
            theme_id=record.id,
            name=record.name,
            background=background,
            corrections=tuple(corrections),
            issues=tuple(issues),
            updates=tuple(updates),
        )

    def run(
        self,
        store: ThemeStore,
        *,
        dry_run: bool = False,
        on_review: Optional[Callable[[ThemeReview], None]] = None,
    ) -> NormalizationReport:
        """
        Review every selected theme inside one transaction.

        Changed columns are written with one UPDATE per theme. A dry run
        performs the same reads and reviews, then rolls back. Any error
        rolls back everything written so far and propagates.

        Args:
            store: Open theme store
            dry_run: Review and report only
            on_review: Called after each theme, e.g. to print progress
        """
        reviews: list[ThemeReview] = []
        with store.transaction(commit=not dry_run):
            themes = store.fetch_themes(include_inactive=self.config.include_inactive)
            logger.debug("Reviewing %d themes", len(themes))
            for record in themes:
                review = self.review(record)
                if review.changed and not dry_run:
                    store.update_theme(review.theme_id, dict(review.updates))
                reviews.append(review)
                if on_review is not None:
                    on_review(review)

        return NormalizationReport(reviews=tuple(reviews), dry_run=dry_run)
