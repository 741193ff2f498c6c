"""Component style records and the appearance sink interface.

Each themed widget class receives one frozen style record resolved from a
``TokenSnapshot``. Sinks receive fully resolved values only; they never read
the token store themselves.

Font values are *role names* (``"title"``, ``"subtitle"``, ``"body"``); mapping
a role to a concrete font is the sink's concern.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Tuple

from .color_ops import Color
from .token_store import Shadow

__all__ = [
    "Component",
    "COMPONENT_ORDER",
    "ViewStyle",
    "NavigationBarStyle",
    "TabBarStyle",
    "ButtonStyle",
    "SwitchStyle",
    "SearchBarStyle",
    "SegmentedControlStyle",
    "SliderStyle",
    "ToolbarStyle",
    "PageControlStyle",
    "AppearanceSink",
    "NullAppearanceSink",
]


class Component(str, Enum):
    VIEW = "view"
    IMAGE_VIEW = "image_view"
    TABLE_VIEW = "table_view"
    NAVIGATION_BAR = "navigation_bar"
    TAB_BAR = "tab_bar"
    BUTTON = "button"
    SWITCH = "switch"
    SEARCH_BAR = "search_bar"
    SEGMENTED_CONTROL = "segmented_control"
    SLIDER = "slider"
    TOOLBAR = "toolbar"
    PAGE_CONTROL = "page_control"


# Dispatch order; sinks may rely on it (later rules override earlier ones in QSS).
COMPONENT_ORDER: Tuple[Component, ...] = tuple(Component)


@dataclass(frozen=True)
class ViewStyle:
    """Shared by plain views, image views and table views."""

    background_color: Color
    tint_color: Color


@dataclass(frozen=True)
class NavigationBarStyle:
    bar_color: Color
    text_color: Color
    button_tint: Color
    shadow: Shadow
    font_role: str = "title"


@dataclass(frozen=True)
class TabBarStyle:
    bar_color: Color
    tint_color: Color
    font_role: str = "subtitle"


@dataclass(frozen=True)
class ButtonStyle:
    background_color: Color
    tint_color: Color
    title_color: Color
    font_role: str = "body"


@dataclass(frozen=True)
class SwitchStyle:
    on_tint_color: Color


@dataclass(frozen=True)
class SearchBarStyle:
    bar_color: Color
    tint_color: Color


@dataclass(frozen=True)
class SegmentedControlStyle:
    background_color: Color
    tint_color: Color
    font_role: str = "body"


@dataclass(frozen=True)
class SliderStyle:
    minimum_track_tint_color: Color


@dataclass(frozen=True)
class ToolbarStyle:
    background_color: Color
    tint_color: Color


@dataclass(frozen=True)
class PageControlStyle:
    page_indicator_tint_color: Color
    current_page_indicator_tint_color: Color
    background_color: Color


class AppearanceSink(Protocol):  # pragma: no cover - structural protocol
    """Applies a resolved style to every future instance of a widget class."""

    def apply_view(self, style: ViewStyle) -> None: ...  # noqa: E704
    def apply_image_view(self, style: ViewStyle) -> None: ...  # noqa: E704
    def apply_table_view(self, style: ViewStyle) -> None: ...  # noqa: E704
    def apply_navigation_bar(self, style: NavigationBarStyle) -> None: ...  # noqa: E704
    def apply_tab_bar(self, style: TabBarStyle) -> None: ...  # noqa: E704
    def apply_button(self, style: ButtonStyle) -> None: ...  # noqa: E704
    def apply_switch(self, style: SwitchStyle) -> None: ...  # noqa: E704
    def apply_search_bar(self, style: SearchBarStyle) -> None: ...  # noqa: E704
    def apply_segmented_control(self, style: SegmentedControlStyle) -> None: ...  # noqa: E704
    def apply_slider(self, style: SliderStyle) -> None: ...  # noqa: E704
    def apply_toolbar(self, style: ToolbarStyle) -> None: ...  # noqa: E704
    def apply_page_control(self, style: PageControlStyle) -> None: ...  # noqa: E704


class NullAppearanceSink:
    """Sink that ignores every style (headless default)."""

    def __getattr__(self, name: str):
        if name.startswith("apply_"):
            return lambda style: None
        raise AttributeError(name)
