"""Qt stylesheet appearance sink.

Qt's application-wide stylesheet applies type selectors to every current and
future instance of a widget class, which makes it the natural target for
global appearance styling. ``QssAppearanceSink`` keeps one rule block per
component and, on ``commit()``, writes the combined block into the host
stylesheet below ``settings.QSS_MARKER``, so a dispatch sets the stylesheet
once. Content above the marker (hand-written application rules) is
preserved.

Components without a native Qt class are matched by object name or dynamic
property (``QWidget#NavigationBar``, ``QCheckBox[role="switch"]`` ...); widgets
opt in by setting that name or property.

The host defaults to ``QApplication.instance()``. PyQt6 is imported lazily so
the sink can be exercised headless with any object providing ``styleSheet()``
and ``setStyleSheet(str)``.
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional, Protocol

from stylekit.config import settings
from stylekit.design.appearance import (
    COMPONENT_ORDER,
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
from stylekit.design.token_store import Shadow

_logger = logging.getLogger(__name__)

__all__ = ["QssAppearanceSink", "SELECTORS", "apply_theme_qss", "install_shadow_effect"]

SELECTORS: Mapping[Component, str] = {
    Component.VIEW: "QWidget",
    Component.IMAGE_VIEW: "QLabel",
    Component.TABLE_VIEW: "QTableView",
    Component.NAVIGATION_BAR: "QWidget#NavigationBar",
    Component.TAB_BAR: "QTabBar",
    Component.BUTTON: "QPushButton",
    Component.SWITCH: 'QCheckBox[role="switch"]',
    Component.SEARCH_BAR: 'QLineEdit[role="search"]',
    Component.SEGMENTED_CONTROL: "QWidget#SegmentedControl QPushButton",
    Component.SLIDER: "QSlider",
    Component.TOOLBAR: "QToolBar",
    Component.PAGE_CONTROL: "QWidget#PageControl",
}


class _StyleHost(Protocol):  # pragma: no cover - structural protocol
    def styleSheet(self) -> str: ...  # noqa: D401,E704 - protocol signature only
    def setStyleSheet(self, qss: str) -> None: ...  # noqa: D401,E704


def apply_theme_qss(host: _StyleHost, qss: str, *, marker: str = settings.QSS_MARKER) -> str:
    """Replace the generated block in ``host``'s stylesheet, keeping user rules.

    Returns the full stylesheet that was set.
    """
    current = host.styleSheet() or ""
    pre = current.split(marker)[0].rstrip() if marker in current else current.rstrip()
    block = f"{marker}\n{qss}"
    new_sheet = f"{pre}\n{block}" if pre else block
    host.setStyleSheet(new_sheet)
    return new_sheet


def _rule(selector: str, declarations: Mapping[str, str]) -> str:
    body = " ".join(f"{k}: {v};" for k, v in declarations.items())
    return f"{selector} {{ {body} }}"


def install_shadow_effect(widget, shadow: Shadow):
    """Attach a ``QGraphicsDropShadowEffect`` matching ``shadow`` to ``widget``."""
    from PyQt6.QtGui import QColor  # local import keeps module headless-safe
    from PyQt6.QtWidgets import QGraphicsDropShadowEffect

    effect = QGraphicsDropShadowEffect(widget)
    c = shadow.color
    effect.setColor(QColor(c.r, c.g, c.b, int(round(c.a * shadow.opacity))))
    effect.setBlurRadius(shadow.radius)
    effect.setOffset(shadow.offset[0], shadow.offset[1])
    widget.setGraphicsEffect(effect)
    return effect


class QssAppearanceSink:
    """Appearance sink rendering component styles to Qt stylesheet rules.

    Parameters
    ----------
    host : object | None
        Stylesheet host (``styleSheet``/``setStyleSheet``). ``None`` resolves
        ``QApplication.instance()`` on first write.
    fonts : Mapping[str, str] | None
        Optional font role -> QSS font declaration (e.g. ``{"title": "600 17px"}``).
        Roles without an entry produce no font rule.
    """

    def __init__(
        self, host: Optional[_StyleHost] = None, *, fonts: Optional[Mapping[str, str]] = None
    ) -> None:
        self._host = host
        self._fonts = dict(fonts or {})
        self._blocks: Dict[Component, str] = {}
        self.navigation_bar_shadow: Optional[Shadow] = None

    # Introspection -----------------------------------------------------
    def block(self, component: Component) -> str:
        return self._blocks.get(component, "")

    def stylesheet(self) -> str:
        """Combined generated rules, in dispatch order."""
        return "\n".join(self._blocks[c] for c in COMPONENT_ORDER if c in self._blocks)

    def flush(self) -> bool:
        """Write the generated rules to the host; False when no host is available."""
        host = self._resolve_host()
        if host is None:
            return False
        apply_theme_qss(host, self.stylesheet())
        return True

    def commit(self) -> None:
        """Called by the dispatcher once every component of a push has been applied."""
        if not self.flush():
            _logger.debug("No stylesheet host yet; %d rule blocks kept for later", len(self._blocks))

    def install_navigation_bar_shadow(self, widget):
        """Give ``widget`` the most recently applied navigation bar shadow."""
        if self.navigation_bar_shadow is None:
            return None
        return install_shadow_effect(widget, self.navigation_bar_shadow)

    # AppearanceSink ----------------------------------------------------
    def apply_view(self, style: ViewStyle) -> None:
        self._set_view_like(Component.VIEW, style)

    def apply_image_view(self, style: ViewStyle) -> None:
        self._set_view_like(Component.IMAGE_VIEW, style)

    def apply_table_view(self, style: ViewStyle) -> None:
        sel = SELECTORS[Component.TABLE_VIEW]
        self._set(
            Component.TABLE_VIEW,
            _rule(
                sel,
                {
                    "background-color": style.background_color.to_qss(),
                    "selection-background-color": style.tint_color.to_qss(),
                },
            ),
        )

    def apply_navigation_bar(self, style: NavigationBarStyle) -> None:
        sel = SELECTORS[Component.NAVIGATION_BAR]
        decls = {"background-color": style.bar_color.to_qss()}
        title = {"color": style.text_color.to_qss(), **self._font(style.font_role)}
        self.navigation_bar_shadow = style.shadow
        self._set(
            Component.NAVIGATION_BAR,
            "\n".join(
                [
                    _rule(sel, decls),
                    _rule(f"{sel} QLabel", title),
                    _rule(
                        f"{sel} QToolButton, {sel} QPushButton",
                        {"color": style.button_tint.to_qss()},
                    ),
                ]
            ),
        )

    def apply_tab_bar(self, style: TabBarStyle) -> None:
        sel = SELECTORS[Component.TAB_BAR]
        self._set(
            Component.TAB_BAR,
            "\n".join(
                [
                    _rule(
                        sel,
                        {"background-color": style.bar_color.to_qss(), **self._font(style.font_role)},
                    ),
                    _rule(f"{sel}::tab:selected", {"color": style.tint_color.to_qss()}),
                ]
            ),
        )

    def apply_button(self, style: ButtonStyle) -> None:
        sel = SELECTORS[Component.BUTTON]
        self._set(
            Component.BUTTON,
            "\n".join(
                [
                    _rule(
                        sel,
                        {
                            "background-color": style.background_color.to_qss(),
                            "color": style.title_color.to_qss(),
                            **self._font(style.font_role),
                        },
                    ),
                    _rule(f"{sel}:focus", {"border-color": style.tint_color.to_qss()}),
                ]
            ),
        )

    def apply_switch(self, style: SwitchStyle) -> None:
        sel = SELECTORS[Component.SWITCH]
        self._set(
            Component.SWITCH,
            _rule(f"{sel}::indicator:checked", {"background-color": style.on_tint_color.to_qss()}),
        )

    def apply_search_bar(self, style: SearchBarStyle) -> None:
        sel = SELECTORS[Component.SEARCH_BAR]
        self._set(
            Component.SEARCH_BAR,
            _rule(
                sel,
                {
                    "background-color": style.bar_color.to_qss(),
                    "selection-background-color": style.tint_color.to_qss(),
                },
            ),
        )

    def apply_segmented_control(self, style: SegmentedControlStyle) -> None:
        sel = SELECTORS[Component.SEGMENTED_CONTROL]
        self._set(
            Component.SEGMENTED_CONTROL,
            "\n".join(
                [
                    _rule(
                        sel,
                        {
                            "background-color": style.background_color.to_qss(),
                            "color": style.tint_color.to_qss(),
                            "border": f"1px solid {style.tint_color.to_qss()}",
                            **self._font(style.font_role),
                        },
                    ),
                    _rule(
                        f"{sel}:checked",
                        {
                            "background-color": style.tint_color.to_qss(),
                            "color": style.background_color.to_qss(),
                        },
                    ),
                ]
            ),
        )

    def apply_slider(self, style: SliderStyle) -> None:
        sel = SELECTORS[Component.SLIDER]
        self._set(
            Component.SLIDER,
            _rule(f"{sel}::sub-page", {"background-color": style.minimum_track_tint_color.to_qss()}),
        )

    def apply_toolbar(self, style: ToolbarStyle) -> None:
        sel = SELECTORS[Component.TOOLBAR]
        self._set(
            Component.TOOLBAR,
            "\n".join(
                [
                    _rule(sel, {"background-color": style.background_color.to_qss()}),
                    _rule(f"{sel} QToolButton", {"color": style.tint_color.to_qss()}),
                ]
            ),
        )

    def apply_page_control(self, style: PageControlStyle) -> None:
        sel = SELECTORS[Component.PAGE_CONTROL]
        self._set(
            Component.PAGE_CONTROL,
            "\n".join(
                [
                    _rule(sel, {"background-color": style.background_color.to_qss()}),
                    _rule(
                        f"{sel} QRadioButton::indicator",
                        {"background-color": style.page_indicator_tint_color.to_qss()},
                    ),
                    _rule(
                        f"{sel} QRadioButton::indicator:checked",
                        {"background-color": style.current_page_indicator_tint_color.to_qss()},
                    ),
                ]
            ),
        )

    # Internal ----------------------------------------------------------
    def _set_view_like(self, component: Component, style: ViewStyle) -> None:
        sel = SELECTORS[component]
        self._set(
            component,
            _rule(
                sel,
                {
                    "background-color": style.background_color.to_qss(),
                    "selection-background-color": style.tint_color.to_qss(),
                },
            ),
        )

    def _font(self, role: str) -> Dict[str, str]:
        font = self._fonts.get(role)
        return {"font": font} if font else {}

    def _set(self, component: Component, qss: str) -> None:
        self._blocks[component] = qss

    def _resolve_host(self) -> Optional[_StyleHost]:
        if self._host is None:
            from PyQt6.QtWidgets import QApplication  # local import keeps module headless-safe

            self._host = QApplication.instance()
        return self._host
