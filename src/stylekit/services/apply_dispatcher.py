"""Pushes resolved token snapshots out to an appearance sink.

``ApplyDispatcher.apply_all`` resolves one style record per component from an
immutable ``TokenSnapshot`` and calls the sink once per component, in
``COMPONENT_ORDER``. Resolution is pure (``resolve_styles``) so it can be
tested without a sink. Sinks that batch their output may define ``commit()``;
it is called once after each push, never between components.

``apply_component`` pushes a single component, optionally overriding resolved
fields, for callers that want to customize one widget class without running a
cascade.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from time import perf_counter
from typing import Any, Callable, Dict, Mapping, Optional

from stylekit.config import settings
from stylekit.design import palette
from stylekit.design.appearance import (
    COMPONENT_ORDER,
    AppearanceSink,
    ButtonStyle,
    Component,
    NavigationBarStyle,
    PageControlStyle,
    SearchBarStyle,
    SegmentedControlStyle,
    SliderStyle,
    SwitchStyle,
    TabBarStyle,
    ToolbarStyle,
    ViewStyle,
)
from stylekit.design.color_ops import is_light
from stylekit.design.token_store import TokenSnapshot

_logger = logging.getLogger(__name__)

__all__ = ["ApplyDispatcher", "resolve_styles", "resolve_component"]


def _view(snap: TokenSnapshot) -> ViewStyle:
    return ViewStyle(background_color=snap["background.view"], tint_color=snap["tint.view"])


def _navigation_bar(snap: TokenSnapshot) -> NavigationBarStyle:
    return NavigationBarStyle(
        bar_color=snap["background.navigation_bar"],
        text_color=snap["text.title"],
        button_tint=snap["tint.navigation_bar"],
        shadow=snap.shadow,
    )


def _tab_bar(snap: TokenSnapshot) -> TabBarStyle:
    return TabBarStyle(bar_color=snap["background.tab_bar"], tint_color=snap["tint.tab_bar"])


def _button(snap: TokenSnapshot) -> ButtonStyle:
    background = snap["background.button"]
    return ButtonStyle(
        background_color=background,
        tint_color=snap["tint.button"],
        title_color=palette.BLACK if is_light(background) else palette.WHITE,
    )


def _switch(snap: TokenSnapshot) -> SwitchStyle:
    return SwitchStyle(on_tint_color=snap["tint.view"])


def _search_bar(snap: TokenSnapshot) -> SearchBarStyle:
    return SearchBarStyle(bar_color=snap["background.view"], tint_color=snap["background.view"])


def _segmented_control(snap: TokenSnapshot) -> SegmentedControlStyle:
    return SegmentedControlStyle(
        background_color=snap["background.navigation_bar"],
        tint_color=snap["tint.navigation_bar"],
    )


def _slider(snap: TokenSnapshot) -> SliderStyle:
    return SliderStyle(minimum_track_tint_color=snap["tint.view"])


def _toolbar(snap: TokenSnapshot) -> ToolbarStyle:
    return ToolbarStyle(
        background_color=snap["background.toolbar"], tint_color=snap["tint.toolbar"]
    )


def _page_control(snap: TokenSnapshot) -> PageControlStyle:
    return PageControlStyle(
        page_indicator_tint_color=palette.LIGHT_GRAY,
        current_page_indicator_tint_color=snap["tint.view"],
        background_color=palette.CLEAR,
    )


_RESOLVERS: Mapping[Component, Callable[[TokenSnapshot], Any]] = {
    Component.VIEW: _view,
    Component.IMAGE_VIEW: _view,
    Component.TABLE_VIEW: _view,
    Component.NAVIGATION_BAR: _navigation_bar,
    Component.TAB_BAR: _tab_bar,
    Component.BUTTON: _button,
    Component.SWITCH: _switch,
    Component.SEARCH_BAR: _search_bar,
    Component.SEGMENTED_CONTROL: _segmented_control,
    Component.SLIDER: _slider,
    Component.TOOLBAR: _toolbar,
    Component.PAGE_CONTROL: _page_control,
}


def resolve_component(component: Component | str, snapshot: TokenSnapshot) -> Any:
    return _RESOLVERS[Component(component)](snapshot)


def resolve_styles(snapshot: TokenSnapshot) -> Dict[Component, Any]:
    """Resolve every component style from a snapshot (dispatch order preserved)."""
    return {component: _RESOLVERS[component](snapshot) for component in COMPONENT_ORDER}


class ApplyDispatcher:
    """Calls the sink once per component for every dispatched snapshot."""

    def __init__(
        self,
        sink: AppearanceSink,
        *,
        warn_threshold_ms: Optional[float] = None,
    ) -> None:
        self.sink = sink
        self.warn_threshold_ms = (
            settings.STYLE_APPLY_WARN_THRESHOLD_MS if warn_threshold_ms is None else warn_threshold_ms
        )
        self.apply_count = 0
        self.last_duration_ms: float = 0.0

    def apply_all(self, snapshot: TokenSnapshot) -> None:
        start = perf_counter()
        for component, style in resolve_styles(snapshot).items():
            self._push(component, style)
        self._commit()
        self.apply_count += 1
        self.last_duration_ms = (perf_counter() - start) * 1000.0
        if self.last_duration_ms > self.warn_threshold_ms:
            _logger.warning(
                "Theme dispatch took %.2fms (> %.1fms threshold)",
                self.last_duration_ms,
                self.warn_threshold_ms,
            )
        else:
            _logger.debug("Theme dispatch #%d took %.2fms", self.apply_count, self.last_duration_ms)

    def apply_component(
        self, component: Component | str, snapshot: TokenSnapshot, **overrides: Any
    ) -> Any:
        """Push one component's style, replacing any fields named in ``overrides``.

        Returns the style that was applied. Unknown field names raise TypeError.
        """
        comp = Component(component)
        style = resolve_component(comp, snapshot)
        if overrides:
            style = replace(style, **overrides)
        self._push(comp, style)
        self._commit()
        return style

    def _push(self, component: Component, style: Any) -> None:
        getattr(self.sink, f"apply_{component.value}")(style)

    def _commit(self) -> None:
        commit = getattr(self.sink, "commit", None)
        if commit is not None:
            commit()
