"""Global configuration and constants for theme resolution and application."""

from __future__ import annotations

import os
from typing import Final

# Colors whose YIQ brightness (0-1) falls strictly below this value are "dark".
DARKNESS_THRESHOLD: Final = float(os.environ.get("STYLEKIT_DARKNESS_THRESHOLD", "0.5"))

# Dispatches slower than this are logged as warnings.
STYLE_APPLY_WARN_THRESHOLD_MS: Final = float(
    os.environ.get("STYLEKIT_APPLY_WARN_MS", "50.0")
)

# Marker separating user stylesheet content from the generated theme block.
QSS_MARKER: Final = "/* STYLEKIT THEME (auto-generated runtime) */"

# Service locator key for the process-wide theme service
THEME_SERVICE_KEY: Final = "theme_service"
