"""PyQt6 binding: applies resolved component styles through Qt stylesheets.

PyQt6 is imported lazily inside functions that need it.
"""

from .qss_sink import (  # noqa: F401
    QssAppearanceSink,
    SELECTORS,
    apply_theme_qss,
    install_shadow_effect,
)
