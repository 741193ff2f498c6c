"""Primitive color operations.

Provides the immutable ``Color`` value type used throughout the token store
plus the small set of transforms the cascade rules rely on:

- Parsing hex strings (``RRGGBB`` / ``RRGGBBAA``, optional leading ``#``)
- Decoding packed ``0xRRGGBBAA`` integers
- Lightening / darkening by a percentage of HSL lightness (clamped)
- Binary light/dark classification by perceived (YIQ) brightness

Public API:
    Color(r, g, b, a=255)
    from_hex(text) -> Color
    from_packed_rgba(value) -> Color
    lighter(color, percent) -> Color
    darker(color, percent) -> Color
    is_dark(color) -> bool
    is_light(color) -> bool

Notes:
    - All channels are ints in 0-255; alpha is preserved by every transform.
    - Lightness transforms are lossy: ``darker(lighter(c, p), p)`` is not
      guaranteed to return ``c``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple, Union

from stylekit.config import settings

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
]

RGBA = Tuple[int, int, int, int]

_HEX_RE = re.compile(r"[0-9A-Fa-f]+")


class StyleKitError(ValueError):
    """Base class for input validation failures."""


class InvalidFormatError(StyleKitError):
    """Raised for malformed color input (bad hex string, wrong type)."""


class InvalidRangeError(StyleKitError):
    """Raised when a numeric input falls outside its valid bounds."""


def _check_channel(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFormatError(f"channel {name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= 255:
        raise InvalidRangeError(f"channel {name} out of range 0-255: {value}")


@dataclass(frozen=True)
class Color:
    """An sRGB color with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            _check_channel(name, getattr(self, name))

    # Conversions ---------------------------------------------------------
    @property
    def rgba(self) -> RGBA:
        return self.r, self.g, self.b, self.a

    @property
    def hex(self) -> str:
        """``#RRGGBB`` when opaque, ``#RRGGBBAA`` otherwise (uppercase)."""
        return self.to_hex(include_alpha=self.a != 255)

    def to_hex(self, *, include_alpha: bool = False) -> str:
        if include_alpha:
            return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.a:02X}"
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def to_qss(self) -> str:
        """Qt stylesheet notation (``rgba(r, g, b, a)`` with 0-255 alpha)."""
        return f"rgba({self.r}, {self.g}, {self.b}, {self.a})"

    def with_alpha(self, a: int) -> "Color":
        return Color(self.r, self.g, self.b, a)

    @classmethod
    def coerce(cls, value: "ColorLike") -> "Color":
        """Accept a ``Color``, hex string or packed RGBA int."""
        if isinstance(value, Color):
            return value
        if isinstance(value, str):
            return from_hex(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return from_packed_rgba(value)
        raise InvalidFormatError(f"cannot interpret {value!r} as a color")

    def __str__(self) -> str:  # noqa: D401 - trivial
        return self.hex


ColorLike = Union[Color, str, int]


def from_hex(text: str) -> Color:
    """Parse ``RRGGBB`` or ``RRGGBBAA`` (optional leading ``#``).

    Raises InvalidFormatError for any other length or non-hex characters.
    """
    if not isinstance(text, str):
        raise InvalidFormatError("hex color must be a string")
    digits = text.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) not in (6, 8):
        raise InvalidFormatError(f"hex color must have 6 or 8 digits: {text!r}")
    # int(..., 16) alone would accept '0x', '_' and signs
    if not _HEX_RE.fullmatch(digits):
        raise InvalidFormatError(f"invalid hex digits in color: {text!r}")
    r = int(digits[0:2], 16)
    g = int(digits[2:4], 16)
    b = int(digits[4:6], 16)
    a = int(digits[6:8], 16) if len(digits) == 8 else 255
    return Color(r, g, b, a)


def from_packed_rgba(value: int) -> Color:
    """Decode a packed ``0xRRGGBBAA`` integer."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFormatError("packed RGBA value must be an int")
    if not 0 <= value <= 0xFFFFFFFF:
        raise InvalidRangeError(f"packed RGBA value out of range: {value:#x}")
    return Color(
        (value >> 24) & 0xFF,
        (value >> 16) & 0xFF,
        (value >> 8) & 0xFF,
        value & 0xFF,
    )


# HSL helpers ---------------------------------------------------------------
def _clamp(v: float, lo: float = 0.0, hi: float = 1.0) -> float:
    return max(lo, min(hi, v))


def _rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    mx = max(r, g, b)
    mn = min(r, g, b)
    l = (mx + mn) / 2
    if mx == mn:
        return 0.0, 0.0, l
    d = mx - mn
    s = d / (2 - mx - mn) if l > 0.5 else d / (mx + mn)
    if mx == r:
        h = ((g - b) / d) % 6
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6, s, l


def _hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    def hue(p: float, q: float, t: float) -> float:
        if t < 0:
            t += 1
        if t > 1:
            t -= 1
        if t < 1 / 6:
            return p + (q - p) * 6 * t
        if t < 1 / 2:
            return q
        if t < 2 / 3:
            return p + (q - p) * (2 / 3 - t) * 6
        return p

    if s == 0:
        return l, l, l
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return hue(p, q, h + 1 / 3), hue(p, q, h), hue(p, q, h - 1 / 3)


def _to_byte(v: float) -> int:
    return int(_clamp(v) * 255 + 0.5)


def _check_percent(percent: float) -> float:
    if isinstance(percent, bool) or not isinstance(percent, (int, float)):
        raise InvalidFormatError("percent must be a number")
    if not 0 <= percent <= 100:
        raise InvalidRangeError(f"percent must be between 0 and 100: {percent}")
    return float(percent)


def _adjust_lightness(color: Color, delta: float) -> Color:
    h, s, l = _rgb_to_hsl(color.r / 255.0, color.g / 255.0, color.b / 255.0)
    r, g, b = _hsl_to_rgb(h, s, _clamp(l + delta))
    return Color(_to_byte(r), _to_byte(g), _to_byte(b), color.a)


def lighter(color: Color, percent: float) -> Color:
    """Raise HSL lightness by ``percent`` points (0-100), clamped at white."""
    return _adjust_lightness(color, _check_percent(percent) / 100.0)


def darker(color: Color, percent: float) -> Color:
    """Lower HSL lightness by ``percent`` points (0-100), clamped at black."""
    return _adjust_lightness(color, -_check_percent(percent) / 100.0)


def brightness(color: Color) -> float:
    """Perceived (YIQ) brightness in 0-1, ignoring alpha."""
    return (color.r * 299 + color.g * 587 + color.b * 114) / 1000 / 255


def is_dark(color: Color) -> bool:
    return brightness(color) < settings.DARKNESS_THRESHOLD


def is_light(color: Color) -> bool:
    return not is_dark(color)
