"""Design package: color primitives, palette, token store and cascade rules.

Nothing here imports Qt.
"""

from .color_ops import (  # noqa: F401
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
from .token_store import (  # noqa: F401
    Namespace,
    Shadow,
    TokenSnapshot,
    TokenStore,
    ThemeDiff,
    diff_snapshots,
)
from .appearance import Component, COMPONENT_ORDER, AppearanceSink, NullAppearanceSink  # noqa: F401
from .cascade import CascadeEngine  # noqa: F401
