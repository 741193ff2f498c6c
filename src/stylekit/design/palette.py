"""Material Design color palette (pure data).

Each family maps shade labels (``P50`` .. ``P900`` plus accent ``A100`` ..
``A700`` where defined) to ``#RRGGBB`` hex strings. Lookups return ``Color``
instances; family names are case-insensitive and ignore ``_``, ``-`` and
spaces (``"DeepPurple"``, ``"deep purple"`` and ``"deep_purple"`` are
equivalent).

Avoids any dependency on Qt so token defaults can be computed headless.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Dict, List

from .color_ops import Color, from_hex

__all__ = [
    "color",
    "families",
    "shades",
    "WHITE",
    "BLACK",
    "CLEAR",
    "LIGHT_GRAY",
    "FACEBOOK_BLUE",
    "TWITTER_BLUE",
    "LINKEDIN_BLUE",
]

_PALETTE: Dict[str, Dict[str, str]] = {
    "red": {
        "P50": "#FDE0DC",
        "P100": "#F9BDBB",
        "P200": "#F69988",
        "P300": "#F36C60",
        "P400": "#E84E40",
        "P500": "#E51C23",
        "P600": "#DD191D",
        "P700": "#D01716",
        "P800": "#C41411",
        "P900": "#B0120A",
        "A100": "#FF7997",
        "A200": "#FF5177",
        "A400": "#FF2D6F",
        "A700": "#E00032",
    },
    "pink": {
        "P50": "#FCE4EC",
        "P100": "#F8BBD0",
        "P200": "#F48FB1",
        "P300": "#F06292",
        "P400": "#EC407A",
        "P500": "#E91E63",
        "P600": "#D81B60",
        "P700": "#C2185B",
        "P800": "#AD1457",
        "P900": "#880E4F",
        "A100": "#FF80AB",
        "A200": "#FF4081",
        "A400": "#F50057",
        "A700": "#C51162",
    },
    "purple": {
        "P50": "#F3E5F5",
        "P100": "#E1BEE7",
        "P200": "#CE93D8",
        "P300": "#BA68C8",
        "P400": "#AB47BC",
        "P500": "#9C27B0",
        "P600": "#8E24AA",
        "P700": "#7B1FA2",
        "P800": "#6A1B9A",
        "P900": "#4A148C",
        "A100": "#EA80FC",
        "A200": "#E040FB",
        "A400": "#D500F9",
        "A700": "#AA00FF",
    },
    "deep_purple": {
        "P50": "#EDE7F6",
        "P100": "#D1C4E9",
        "P200": "#B39DDB",
        "P300": "#9575CD",
        "P400": "#7E57C2",
        "P500": "#673AB7",
        "P600": "#5E35B1",
        "P700": "#512DA8",
        "P800": "#4527A0",
        "P900": "#311B92",
        "A100": "#B388FF",
        "A200": "#7C4DFF",
        "A400": "#651FFF",
        "A700": "#6200EA",
    },
    "indigo": {
        "P50": "#E8EAF6",
        "P100": "#C5CAE9",
        "P200": "#9FA8DA",
        "P300": "#7986CB",
        "P400": "#5C6BC0",
        "P500": "#3F51B5",
        "P600": "#3949AB",
        "P700": "#303F9F",
        "P800": "#283593",
        "P900": "#1A237E",
        "A100": "#8C9EFF",
        "A200": "#536DFE",
        "A400": "#3D5AFE",
        "A700": "#304FFE",
    },
    "blue": {
        "P50": "#E7E9FD",
        "P100": "#D0D9FF",
        "P200": "#AFBFFF",
        "P300": "#91A7FF",
        "P400": "#738FFE",
        "P500": "#5677FC",
        "P600": "#4E6CEF",
        "P700": "#455EDE",
        "P800": "#3B50CE",
        "P900": "#2A36B1",
        "A100": "#A6BAFF",
        "A200": "#6889FF",
        "A400": "#4D73FF",
        "A700": "#4D69FF",
    },
    "light_blue": {
        "P50": "#E1F5FE",
        "P100": "#B3E5FC",
        "P200": "#81D4FA",
        "P300": "#4FC3F7",
        "P400": "#29B6F6",
        "P500": "#03A9F4",
        "P600": "#039BE5",
        "P700": "#0288D1",
        "P800": "#0277BD",
        "P900": "#01579B",
        "A100": "#80D8FF",
        "A200": "#40C4FF",
        "A400": "#00B0FF",
        "A700": "#0091EA",
    },
    "cyan": {
        "P50": "#E0F7FA",
        "P100": "#B2EBF2",
        "P200": "#80DEEA",
        "P300": "#4DD0E1",
        "P400": "#26C6DA",
        "P500": "#00BCD4",
        "P600": "#00ACC1",
        "P700": "#0097A7",
        "P800": "#00838F",
        "P900": "#006064",
        "A100": "#84FFFF",
        "A200": "#18FFFF",
        "A400": "#00E5FF",
        "A700": "#00B8D4",
    },
    "teal": {
        "P50": "#E0F2F1",
        "P100": "#B2DFDB",
        "P200": "#80CBC4",
        "P300": "#4DB6AC",
        "P400": "#26A69A",
        "P500": "#009688",
        "P600": "#00897B",
        "P700": "#00796B",
        "P800": "#00695C",
        "P900": "#004D40",
        "A100": "#A7FFEB",
        "A200": "#64FFDA",
        "A400": "#1DE9B6",
        "A700": "#00BFA5",
    },
    "green": {
        "P50": "#D0F8CE",
        "P100": "#A3E9A4",
        "P200": "#72D572",
        "P300": "#42BD41",
        "P400": "#2BAF2B",
        "P500": "#259B24",
        "P600": "#0A8F08",
        "P700": "#0A7E07",
        "P800": "#056F00",
        "P900": "#0D5302",
        "A100": "#A2F78D",
        "A200": "#5AF158",
        "A400": "#14E715",
        "A700": "#12C700",
    },
    "light_green": {
        "P50": "#F1F8E9",
        "P100": "#DCEDC8",
        "P200": "#C5E1A5",
        "P300": "#AED581",
        "P400": "#9CCC65",
        "P500": "#8BC34A",
        "P600": "#7CB342",
        "P700": "#689F38",
        "P800": "#558B2F",
        "P900": "#33691E",
        "A100": "#CCFF90",
        "A200": "#B2FF59",
        "A400": "#76FF03",
        "A700": "#64DD17",
    },
    "lime": {
        "P50": "#F9FBE7",
        "P100": "#F0F4C3",
        "P200": "#E6EE9C",
        "P300": "#DCE775",
        "P400": "#D4E157",
        "P500": "#CDDC39",
        "P600": "#C0CA33",
        "P700": "#AFB42B",
        "P800": "#9E9D24",
        "P900": "#827717",
        "A100": "#F4FF81",
        "A200": "#EEFF41",
        "A400": "#C6FF00",
        "A700": "#AEEA00",
    },
    "yellow": {
        "P50": "#FFFDE7",
        "P100": "#FFF9C4",
        "P200": "#FFF59D",
        "P300": "#FFF176",
        "P400": "#FFEE58",
        "P500": "#FFEB3B",
        "P600": "#FDD835",
        "P700": "#FBC02D",
        "P800": "#F9A825",
        "P900": "#F57F17",
        "A100": "#FFFF8D",
        "A200": "#FFFF00",
        "A400": "#FFEA00",
        "A700": "#FFD600",
    },
    "amber": {
        "P50": "#FFF8E1",
        "P100": "#FFECB3",
        "P200": "#FFE082",
        "P300": "#FFD54F",
        "P400": "#FFCA28",
        "P500": "#FFC107",
        "P600": "#FFB300",
        "P700": "#FFA000",
        "P800": "#FF8F00",
        "P900": "#FF6F00",
        "A100": "#FFE57F",
        "A200": "#FFD740",
        "A400": "#FFC400",
        "A700": "#FFAB00",
    },
    "orange": {
        "P50": "#FFF3E0",
        "P100": "#FFE0B2",
        "P200": "#FFCC80",
        "P300": "#FFB74D",
        "P400": "#FFA726",
        "P500": "#FF9800",
        "P600": "#FB8C00",
        "P700": "#F57C00",
        "P800": "#EF6C00",
        "P900": "#E65100",
        "A100": "#FFD180",
        "A200": "#FFAB40",
        "A400": "#FF9100",
        "A700": "#FF6D00",
    },
    "deep_orange": {
        "P50": "#FBE9E7",
        "P100": "#FFCCBC",
        "P200": "#FFAB91",
        "P300": "#FF8A65",
        "P400": "#FF7043",
        "P500": "#FF5722",
        "P600": "#F4511E",
        "P700": "#E64A19",
        "P800": "#D84315",
        "P900": "#BF360C",
        "A100": "#FF9E80",
        "A200": "#FF6E40",
        "A400": "#FF3D00",
        "A700": "#DD2C00",
    },
    "brown": {
        "P50": "#EFEBE9",
        "P100": "#D7CCC8",
        "P200": "#BCAAA4",
        "P300": "#A1887F",
        "P400": "#8D6E63",
        "P500": "#795548",
        "P600": "#6D4C41",
        "P700": "#5D4037",
        "P800": "#4E342E",
        "P900": "#3E2723",
    },
    "gray": {
        "P0": "#FFFFFF",
        "P50": "#FAFAFA",
        "P100": "#F5F5F5",
        "P200": "#EEEEEE",
        "P300": "#E0E0E0",
        "P400": "#BDBDBD",
        "P500": "#9E9E9E",
        "P600": "#757575",
        "P700": "#616161",
        "P800": "#424242",
        "P900": "#212121",
        "P1000": "#000000",
    },
    "blue_gray": {
        "P50": "#ECEFF1",
        "P100": "#CFD8DC",
        "P200": "#B0BEC5",
        "P300": "#90A4AE",
        "P400": "#78909C",
        "P500": "#607D8B",
        "P600": "#546E7A",
        "P700": "#455A64",
        "P800": "#37474F",
        "P900": "#263238",
    },
}

WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)
CLEAR = Color(0, 0, 0, 0)
LIGHT_GRAY = Color(170, 170, 170)

FACEBOOK_BLUE = from_hex("#3b5998")
TWITTER_BLUE = from_hex("#00aced")
LINKEDIN_BLUE = from_hex("#0077b5")


def _normalize_family(name: str) -> str:
    key = name.strip()
    for sep in ("_", "-", " "):
        key = key.replace(sep, "")
    return key.lower()


_FAMILY_INDEX: Dict[str, str] = {_normalize_family(k): k for k in _PALETTE}


def _family_key(family: str) -> str:
    key = _FAMILY_INDEX.get(_normalize_family(family))
    if key is None:
        raise KeyError(f"Unknown palette family: {family}")
    return key


@lru_cache(maxsize=None)
def color(family: str, shade: str) -> Color:
    """Return the palette color for ``family`` / ``shade`` (e.g. ``"gray", "P500"``)."""
    group = _PALETTE[_family_key(family)]
    value = group.get(shade.upper())
    if value is None:
        raise KeyError(f"Unknown shade {shade!r} for palette family {family!r}")
    return from_hex(value)


def families() -> List[str]:
    return list(_PALETTE.keys())


def shades(family: str) -> List[str]:
    return list(_PALETTE[_family_key(family)].keys())
