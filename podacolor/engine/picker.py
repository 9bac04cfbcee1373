# Copyright (c) 2026 PodaBio
# SPDX-License-Identifier: MIT

"""
Value-mode controller for a solid/gradient (and vanta) color control.

The controller is the state machine behind every color picker. It holds
one current mode and the decoded value for that mode, reconciles values
pushed down by the host, and emits exactly one canonical ColorValue
string upward for every edit.

States: SOLID, GRADIENT and, for page-background controls, VANTA.

Feedback loop guard:
    A host typically answers ``on_change(v)`` by pushing ``v`` straight
    back down through ``receive``, and may also re-push the value it held
    before the edit once more before its own state settles. Neither may
    revert the edit. Instead of a settle timer, the controller keeps the
    values it emitted that have not been echoed yet, plus the value held
    before the first of them. ``receive`` drops echoes, and drops that
    stale value once only, so a host that stores without echoing can
    still revert on its next push. Anything else is a genuine external
    change and resets the guard. The guard also clears once the newest
    emission is echoed.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional

from podacolor.schema import DEFAULT_GRADIENT, GradientGrammar, GradientSpec, ValueMode
from podacolor.engine.codec import format_hsl, format_rgb
from podacolor.engine.gradient import build_gradient, classify, parse_gradient

logger = logging.getLogger(__name__)

DEFAULT_SOLID = "#FFFFFF"
DEFAULT_VANTA = "vanta:clouds2"

_SIX_DIGIT_HEX_RE = re.compile(r"#[0-9a-fA-F]{6}")


class ColorValueController:
    """
    Stateful controller for one editable color/gradient value.

    Args:
        value: Initial ColorValue.
        on_change: Called with the new canonical ColorValue after every edit.
        allow_vanta: Page-background variant; enables the VANTA mode.
        solid_only: Never leave SOLID; incoming gradients collapse to their
            first stop, which is emitted back to the host.
        grammar: Gradient grammar used to decode incoming values.
        default_gradient: Gradient used when a solid is first turned into a
            gradient, or when an incoming gradient cannot be decoded.

    Example::

        ctl = ColorValueController("#2563EB", on_change=store.set)
        ctl.toggle_mode(ValueMode.GRADIENT)
        # emits "linear-gradient(135deg, #2563EB 0%, #7C3AED 100%)"
        ctl.toggle_mode(ValueMode.SOLID)
        # emits "#2563EB"
    """

    def __init__(
        self,
        value: str = DEFAULT_SOLID,
        on_change: Optional[Callable[[str], None]] = None,
        *,
        allow_vanta: bool = False,
        solid_only: bool = False,
        grammar: GradientGrammar = GradientGrammar.STRICT,
        default_gradient: GradientSpec = DEFAULT_GRADIENT,
    ) -> None:
        self.on_change = on_change
        self.allow_vanta = allow_vanta
        self.solid_only = solid_only
        self.grammar = grammar
        self.default_gradient = default_gradient

        self._mode = ValueMode.SOLID
        self._solid = DEFAULT_SOLID
        self._gradient: Optional[GradientSpec] = None
        self._vanta = DEFAULT_VANTA
        self._value = DEFAULT_SOLID

        # Echo guard: emitted values not yet echoed back, oldest first, and
        # the value held before the first of them (until dropped once)
        self._pending: list[str] = []
        self._superseded: Optional[str] = None

        # True when the last decode had to fall back to a default
        self.fallback_used = False

        self._adopt(value or DEFAULT_SOLID)
        if self.solid_only and value and value != self._value:
            self._emit(self._value, previous=value)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def mode(self) -> ValueMode:
        return self._mode

    @property
    def value(self) -> str:
        """Current canonical ColorValue."""
        return self._value

    @property
    def gradient(self) -> GradientSpec:
        """Gradient shown by the gradient controls (default if none yet)."""
        return self._gradient or self.default_gradient

    @property
    def solid(self) -> str:
        return self._solid

    @property
    def display_color(self) -> str:
        """The solid color the read-only RGB/HSL fields describe."""
        if self._mode == ValueMode.GRADIENT:
            return self.gradient.color1
        return self._solid

    @property
    def rgb_display(self) -> str:
        return format_rgb(self.display_color)

    @property
    def hsl_display(self) -> str:
        return format_hsl(self.display_color)

    # -------------------------------------------------------------------------
    # External values
    # -------------------------------------------------------------------------

    def receive(self, value: Optional[str]) -> bool:
        """
        Sync a value pushed down by the host.

        Returns True if the controller's state changed. Echoes of our own
        emission, the stale pre-edit value and empty values are ignored.
        """
        if not value:
            return False

        if self._pending:
            if value in self._pending:
                del self._pending[: self._pending.index(value) + 1]
                if not self._pending:
                    self._superseded = None
                return False
            if value == self._superseded:
                # Dropped once; the next push of it is a real revert
                self._superseded = None
                return False
            self._clear_guard()

        if value == self._value:
            return False

        self._adopt(value)
        if self.solid_only and value != self._value:
            self._emit(self._value, previous=value)
        return True

    def settle(self) -> None:
        """Drop the echo guard, e.g. once the host confirms it stored the value."""
        self._clear_guard()

    def _clear_guard(self) -> None:
        self._pending.clear()
        self._superseded = None

    def _adopt(self, value: str) -> None:
        """Classify and decode an external value without emitting."""
        self.fallback_used = False
        mode = classify(value)

        if mode == ValueMode.VANTA and not self.allow_vanta:
            mode = ValueMode.SOLID

        if self.solid_only and mode == ValueMode.GRADIENT:
            self._solid = self._first_color(value)
            self._set(ValueMode.SOLID, self._solid)
            return

        if mode == ValueMode.VANTA:
            self._vanta = value
            self._set(ValueMode.VANTA, value)
        elif mode == ValueMode.GRADIENT:
            self._gradient = self._decode(value)
            self._set(ValueMode.GRADIENT, value)
        else:
            self._solid = value
            self._set(ValueMode.SOLID, value)

    def _decode(self, value: str) -> Optional[GradientSpec]:
        """Decode a gradient; None means the controls show the default."""
        spec = parse_gradient(value, self.grammar)
        if spec is None:
            logger.warning(
                "Cannot decode gradient %r (%s grammar), showing default",
                value, self.grammar.value,
            )
            self.fallback_used = True
        return spec

    # -------------------------------------------------------------------------
    # User edits
    # -------------------------------------------------------------------------

    def set_solid(self, color: str) -> str:
        """Pick a solid color; switches to SOLID."""
        self._solid = color
        return self._commit(ValueMode.SOLID, color)

    def set_direction(self, direction: int) -> str:
        """Move the direction slider; switches to GRADIENT."""
        self._require_gradients()
        self._gradient = self.gradient.with_direction(max(0, min(360, int(direction))))
        return self._commit_gradient()

    def set_stop_color(self, index: int, color: str) -> str:
        """Pick the color of stop ``index``; switches to GRADIENT."""
        self._require_gradients()
        self._gradient = self.gradient.with_stop(index, color=color)
        return self._commit_gradient()

    def set_stop_position(self, index: int, position: int) -> str:
        """Move stop ``index`` (0-100); switches to GRADIENT."""
        self._require_gradients()
        self._gradient = self.gradient.with_stop(index, position=max(0, min(100, int(position))))
        return self._commit_gradient()

    def set_vanta(self, keyword: str) -> str:
        """Pick an animated background."""
        self._require_vanta()
        self._vanta = keyword
        return self._commit(ValueMode.VANTA, keyword)

    def toggle_mode(self, mode: ValueMode) -> str:
        """
        Switch modes from a toggle button and emit the converted value.

        SOLID → GRADIENT: the solid becomes stop 1; direction and stop 2
        come from the gradient already held, else the default gradient.
        GRADIENT → SOLID: stop 1 becomes the solid.
        Toggling to the current mode emits nothing.
        """
        if mode == self._mode:
            return self._value
        if mode == ValueMode.VANTA:
            return self.set_vanta(self._vanta)
        if mode == ValueMode.GRADIENT:
            self._require_gradients()
            base = self.gradient
            if self._mode == ValueMode.SOLID:
                base = base.with_stop(0, color=self._solid)
            self._gradient = base
            return self._commit_gradient()

        solid = self._solid_from_current()
        self._solid = solid
        return self._commit(ValueMode.SOLID, solid)

    def _solid_from_current(self) -> str:
        if self._mode == ValueMode.GRADIENT:
            if self._gradient is not None:
                return self._gradient.color1
            return self._first_color(self._value)
        return self._solid

    def _first_color(self, value: str) -> str:
        """Stop 1 of a decodable gradient, else the first hex, else white."""
        spec = parse_gradient(value, self.grammar)
        if spec is not None:
            return spec.color1
        m = _SIX_DIGIT_HEX_RE.search(value)
        if m:
            return m.group(0)
        logger.warning("No color found in %r, using %s", value, DEFAULT_SOLID)
        self.fallback_used = True
        return DEFAULT_SOLID

    def _require_gradients(self) -> None:
        if self.solid_only:
            raise ValueError("Gradient editing is disabled on a solid-only control")

    def _require_vanta(self) -> None:
        if not self.allow_vanta:
            raise ValueError("Animated backgrounds are only available on page-background controls")

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def _commit_gradient(self) -> str:
        spec = self.gradient
        value = build_gradient(
            spec.direction,
            spec.color1,
            spec.color2,
            spec.stops[0].position,
            spec.stops[1].position,
        )
        return self._commit(ValueMode.GRADIENT, value)

    def _commit(self, mode: ValueMode, value: str) -> str:
        previous = self._value
        self._set(mode, value)
        self._emit(value, previous=previous)
        return value

    def _set(self, mode: ValueMode, value: str) -> None:
        self._mode = mode
        self._value = value

    def _emit(self, value: str, *, previous: str) -> None:
        if not self._pending:
            self._superseded = previous
        self._pending.append(value)
        if self.on_change is not None:
            self.on_change(value)
