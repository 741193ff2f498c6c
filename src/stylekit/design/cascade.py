"""Seed-color cascade rules.

A small number of seed colors fan out into the per-component tokens:

========================  ====================================================
Rule                      Writes (in order)
========================  ====================================================
``set_primary(c)``        background.navigation_bar, background.tab_bar,
                          background.button, tint.button, tint.view,
                          tint.toolbar = c; when ``c`` is dark also
                          text.title = white, text.subtitle = darker(white, 5)
``set_secondary(c)``      tint.navigation_bar, tint.tab_bar, tint.toolbar = c,
                          tint.inactive = darker(c, 20), tint.view,
                          status.info = c
``set_tertiary(c)``       background.button, tint.view, status.info,
                          tint.toolbar = c
``set_detail(c)``         tint.view, tint.toolbar = c
``set_shadow(...)``       shadow record
========================  ====================================================

Every color rule derives its values first, commits them to the store in one
update and then dispatches the new snapshot exactly once. Shadow rules do not
dispatch: a shadow change becomes visible with the next dispatch (any color
rule or an explicit ``apply()``).
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import List, Protocol, Sequence, Tuple

from . import palette
from .color_ops import Color, InvalidFormatError, darker, is_dark
from .token_store import Shadow, ThemeDiff, TokenSnapshot, TokenStore, diff_snapshots

_logger = logging.getLogger(__name__)

__all__ = ["CascadeEngine", "Assignment"]

Assignment = Tuple[str, Color]


class _Dispatcher(Protocol):  # pragma: no cover - structural protocol
    def apply_all(self, snapshot: TokenSnapshot) -> None: ...  # noqa: E704


def _require_color(value: object) -> Color:
    if not isinstance(value, Color):
        raise InvalidFormatError(f"seed must be a Color, got {type(value).__name__}")
    return value


class CascadeEngine:
    """Applies the seed rules to a store and dispatches the results."""

    def __init__(self, store: TokenStore, dispatcher: _Dispatcher) -> None:
        self.store = store
        self.dispatcher = dispatcher
        self._lock = RLock()

    # Rule tables ----------------------------------------------------------
    @staticmethod
    def primary_assignments(color: Color) -> List[Assignment]:
        c = _require_color(color)
        writes: List[Assignment] = [
            ("background.navigation_bar", c),
            ("background.tab_bar", c),
            ("background.button", c),
            ("tint.button", c),
            ("tint.view", c),
            ("tint.toolbar", c),
        ]
        if is_dark(c):
            writes.append(("text.title", palette.WHITE))
            writes.append(("text.subtitle", darker(palette.WHITE, 5)))
        return writes

    @staticmethod
    def secondary_assignments(color: Color) -> List[Assignment]:
        c = _require_color(color)
        return [
            ("tint.navigation_bar", c),
            ("tint.tab_bar", c),
            ("tint.toolbar", c),
            ("tint.inactive", darker(c, 20)),
            ("tint.view", c),
            ("status.info", c),
        ]

    @staticmethod
    def tertiary_assignments(color: Color) -> List[Assignment]:
        c = _require_color(color)
        return [
            ("background.button", c),
            ("tint.view", c),
            ("status.info", c),
            ("tint.toolbar", c),
        ]

    @staticmethod
    def detail_assignments(color: Color) -> List[Assignment]:
        c = _require_color(color)
        return [("tint.view", c), ("tint.toolbar", c)]

    # Color rules ----------------------------------------------------------
    def set_primary(self, color: Color) -> ThemeDiff:
        """Navigation/tab bar and button backgrounds plus button, view and toolbar tint.

        Dark seeds also switch the title text to white and the subtitle to a
        slightly darkened white.
        """
        return self._run("primary", self.primary_assignments(color))

    def set_secondary(self, color: Color) -> ThemeDiff:
        """Bar, toolbar and view tints; inactive tint is the seed darkened by 20%."""
        return self._run("secondary", self.secondary_assignments(color))

    def set_tertiary(self, color: Color) -> ThemeDiff:
        return self._run("tertiary", self.tertiary_assignments(color))

    def set_detail(self, color: Color) -> ThemeDiff:
        return self._run("detail", self.detail_assignments(color))

    def apply(self) -> None:
        """Dispatch the current snapshot without changing any token."""
        with self._lock:
            self.dispatcher.apply_all(self.store.snapshot())

    # Shadow rules ---------------------------------------------------------
    def set_shadow(
        self,
        color: Color | None = None,
        opacity: float = 0.3,
        radius: float = 3,
        offset: Sequence[float] = (0, 2),
    ) -> ThemeDiff:
        """Replace the shadow record (defaults: Gray P500, 0.3, 3, (0, 2)).

        Not dispatched; see module docstring.
        """
        shadow_color = palette.color("gray", "P500") if color is None else _require_color(color)
        shadow = Shadow(color=shadow_color, opacity=opacity, radius=radius, offset=offset)
        with self._lock:
            before = self.store.snapshot()
            self.store.set_shadow(shadow)
            diff = diff_snapshots(before, self.store.snapshot())
        _logger.debug("Shadow updated (%d fields changed, dispatch deferred)", len(diff.changed))
        return diff

    def set_clean_shadow(self) -> ThemeDiff:
        """Flat, fully opaque one-point shadow."""
        return self.set_shadow(palette.color("gray", "P500"), opacity=1, radius=1, offset=(0, 0))

    def set_no_shadow(self) -> ThemeDiff:
        return self.set_shadow(palette.CLEAR, opacity=0, radius=0, offset=(0, 0))

    # Internal -------------------------------------------------------------
    def _run(self, rule: str, assignments: List[Assignment]) -> ThemeDiff:
        with self._lock:
            before = self.store.snapshot()
            self.store.update(assignments)
            after = self.store.snapshot()
            self.dispatcher.apply_all(after)
        diff = diff_snapshots(before, after)
        _logger.debug(
            "Cascade %s wrote %d tokens (%d changed)", rule, len(assignments), len(diff.changed)
        )
        return diff
