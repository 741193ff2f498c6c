"""stylekit: global theme tokens with seed-color cascades.

Module-level functions operate on the process-wide ``ThemeService`` (created
headless on first use; install one with a real sink via
``install_theme_service`` or swap the sink with ``use_sink``)::

    import stylekit
    from stylekit.qt import QssAppearanceSink

    stylekit.get_theme_service().use_sink(QssAppearanceSink())
    stylekit.set_primary("#263238")
    stylekit.set_secondary("#FFC107")
"""

from __future__ import annotations

from typing import Optional, Sequence

from .design.color_ops import (  # noqa: F401
    Color,
    ColorLike,
    StyleKitError,
    InvalidFormatError,
    InvalidRangeError,
    from_hex,
    from_packed_rgba,
    lighter,
    darker,
    is_dark,
    is_light,
)
from .design.token_store import Namespace, Shadow, ThemeDiff, TokenStore  # noqa: F401
from .services.theme_service import (  # noqa: F401
    ThemeService,
    get_theme_service,
    install_theme_service,
)

__version__ = "1.0.0"


def set_primary(color: ColorLike) -> ThemeDiff:
    return get_theme_service().set_primary(color)


def set_secondary(color: ColorLike) -> ThemeDiff:
    return get_theme_service().set_secondary(color)


def set_tertiary(color: ColorLike) -> ThemeDiff:
    return get_theme_service().set_tertiary(color)


def set_detail(color: ColorLike) -> ThemeDiff:
    return get_theme_service().set_detail(color)


def set_shadow(
    color: Optional[ColorLike] = None,
    opacity: float = 0.3,
    radius: float = 3,
    offset: Sequence[float] = (0, 2),
) -> ThemeDiff:
    return get_theme_service().set_shadow(color, opacity=opacity, radius=radius, offset=offset)


def set_clean_shadow() -> ThemeDiff:
    return get_theme_service().set_clean_shadow()


def set_no_shadow() -> ThemeDiff:
    return get_theme_service().set_no_shadow()


def apply() -> None:
    get_theme_service().apply()


def tokens() -> TokenStore:
    """Direct access to the process-wide token store (bypasses the cascade)."""
    return get_theme_service().store


__all__ = [
    "Color",
    "ColorLike",
    "StyleKitError",
    "InvalidFormatError",
    "InvalidRangeError",
    "from_hex",
    "from_packed_rgba",
    "lighter",
    "darker",
    "is_dark",
    "is_light",
    "Namespace",
    "Shadow",
    "ThemeDiff",
    "TokenStore",
    "ThemeService",
    "get_theme_service",
    "install_theme_service",
    "set_primary",
    "set_secondary",
    "set_tertiary",
    "set_detail",
    "set_shadow",
    "set_clean_shadow",
    "set_no_shadow",
    "apply",
    "tokens",
]
