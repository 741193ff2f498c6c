"""Mutable theme token store.

Holds the current value of every color token, organized into four namespaces
(tint, background, text, status), plus a single shadow record. Consumers that
push values out to the toolkit read an immutable ``TokenSnapshot`` so a
dispatch never observes a half-applied cascade.

Tokens are addressed either as ``(namespace, name)`` or by the flattened key
``"<namespace>.<name>"`` (e.g. ``"tint.navigation_bar"``). Advanced callers
may also use attribute access::

    store.background.button = Color(255, 0, 0)
    store.tint.view

The store never deletes tokens; unknown names raise ``KeyError``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from threading import RLock
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from . import palette
from .color_ops import Color, InvalidFormatError, InvalidRangeError, from_hex, lighter

__all__ = [
    "Namespace",
    "Shadow",
    "TokenSnapshot",
    "TokenStore",
    "ThemeDiff",
    "TOKEN_NAMES",
    "default_colors",
    "default_shadow",
    "diff_snapshots",
    "token_key",
]


class Namespace(str, Enum):
    TINT = "tint"
    BACKGROUND = "background"
    TEXT = "text"
    STATUS = "status"


TOKEN_NAMES: Mapping[Namespace, Tuple[str, ...]] = MappingProxyType(
    {
        Namespace.TINT: ("view", "button", "navigation_bar", "tab_bar", "toolbar", "inactive"),
        Namespace.BACKGROUND: (
            "view",
            "view_controller",
            "button",
            "navigation_bar",
            "tab_bar",
            "toolbar",
        ),
        Namespace.TEXT: (
            "title",
            "subtitle",
            "body",
            "callout",
            "caption",
            "footnote",
            "headline",
            "subhead",
            "disabled",
        ),
        Namespace.STATUS: ("info", "success", "warning", "danger"),
    }
)

_ALL_KEYS: Tuple[str, ...] = tuple(
    f"{ns.value}.{name}" for ns, names in TOKEN_NAMES.items() for name in names
)


def token_key(namespace: Namespace | str, name: str) -> str:
    """Return the flattened key for a token, validating that it exists."""
    try:
        ns = Namespace(namespace)
    except ValueError:
        raise KeyError(f"Unknown token namespace: {namespace}") from None
    if name not in TOKEN_NAMES[ns]:
        raise KeyError(f"Unknown token: {ns.value}.{name}")
    return f"{ns.value}.{name}"


def _check_key(key: str) -> str:
    if key not in _ALL_KEYS:
        raise KeyError(f"Unknown token: {key}")
    return key


@dataclass(frozen=True)
class Shadow:
    """Shadow parameters shared by every shadow-carrying component."""

    color: Color
    opacity: float
    radius: float
    offset: Tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise InvalidFormatError("shadow color must be a Color")
        if not 0.0 <= self.opacity <= 1.0:
            raise InvalidRangeError(f"shadow opacity must be between 0 and 1: {self.opacity}")
        if not self.radius >= 0:
            raise InvalidRangeError(f"shadow radius must be >= 0: {self.radius}")
        try:
            offset = tuple(self.offset)
        except TypeError:
            raise InvalidFormatError("shadow offset must be an (x, y) pair") from None
        if len(offset) != 2:
            raise InvalidFormatError("shadow offset must be an (x, y) pair")
        object.__setattr__(self, "opacity", float(self.opacity))
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "offset", (float(offset[0]), float(offset[1])))

    def as_strings(self) -> Dict[str, str]:
        return {
            "shadow.color": self.color.hex,
            "shadow.opacity": f"{self.opacity:g}",
            "shadow.radius": f"{self.radius:g}",
            "shadow.offset": f"{self.offset[0]:g},{self.offset[1]:g}",
        }


def default_colors() -> Dict[str, Color]:
    """The built-in default theme (flattened key -> Color)."""
    light_blue = palette.color("light_blue", "P500")
    white = palette.WHITE
    body = from_hex("#333333")
    return {
        "tint.view": light_blue,
        "tint.button": light_blue,
        "tint.navigation_bar": light_blue,
        "tint.tab_bar": light_blue,
        "tint.toolbar": light_blue,
        "tint.inactive": palette.color("gray", "P500"),
        "background.view": white,
        "background.view_controller": from_hex("EFEFF4"),
        "background.button": white,
        "background.navigation_bar": white,
        "background.tab_bar": white,
        "background.toolbar": white,
        "text.title": palette.color("gray", "P900"),
        "text.subtitle": palette.color("gray", "P800"),
        "text.body": body,
        "text.callout": body,
        "text.caption": body,
        "text.footnote": body,
        "text.headline": body,
        "text.subhead": from_hex("#8E8E8E"),
        "text.disabled": palette.color("gray", "P500"),
        "status.info": light_blue,
        "status.success": from_hex("#37D387"),
        "status.warning": lighter(palette.color("orange", "P800"), 10),
        "status.danger": from_hex("#FF6E6E"),
    }


def default_shadow() -> Shadow:
    return Shadow(color=palette.color("gray", "P600"), opacity=0.3, radius=3, offset=(0, 2))


@dataclass(frozen=True)
class TokenSnapshot:
    """Immutable copy of every token value at one point in time."""

    colors: Mapping[str, Color]
    shadow: Shadow

    def __getitem__(self, key: str) -> Color:
        return self.colors[key]

    def color(self, namespace: Namespace | str, name: str) -> Color:
        return self.colors[token_key(namespace, name)]

    def as_flat_map(self) -> Dict[str, str]:
        """Flattened string form (colors as hex, shadow fields as text)."""
        flat = {k: v.hex for k, v in self.colors.items()}
        flat.update(self.shadow.as_strings())
        return flat


@dataclass
class ThemeDiff:
    """Represents changes between two theme states.

    Attributes
    ----------
    changed : dict[str, tuple[str|None, str|None]]
        Mapping of flattened key -> (old_value, new_value)
    """

    changed: Dict[str, Tuple[Optional[str], Optional[str]]]

    @property
    def no_changes(self) -> bool:  # noqa: D401 - trivial
        return not self.changed

    def keys(self) -> list[str]:
        return sorted(self.changed)


def diff_snapshots(old: TokenSnapshot, new: TokenSnapshot) -> ThemeDiff:
    old_map = old.as_flat_map()
    new_map = new.as_flat_map()
    changed: Dict[str, Tuple[Optional[str], Optional[str]]] = {}
    for k in set(old_map) | set(new_map):
        ov = old_map.get(k)
        nv = new_map.get(k)
        if ov != nv:
            changed[k] = (ov, nv)
    return ThemeDiff(changed)


class _NamespaceAccessor:
    """Attribute-style view on one namespace of a store."""

    __slots__ = ("_store", "_namespace")

    def __init__(self, store: "TokenStore", namespace: Namespace) -> None:
        object.__setattr__(self, "_store", store)
        object.__setattr__(self, "_namespace", namespace)

    def __getattr__(self, name: str) -> Color:
        try:
            return self._store.get(self._namespace, name)
        except KeyError as exc:
            raise AttributeError(str(exc)) from None

    def __setattr__(self, name: str, value: Color) -> None:
        self._store.set(self._namespace, name, value)

    def __iter__(self) -> Iterator[str]:
        return iter(TOKEN_NAMES[self._namespace])

    def __dir__(self) -> Iterable[str]:
        return list(TOKEN_NAMES[self._namespace])


@dataclass
class TokenStore:
    """Thread-safe token registry initialized with the default theme."""

    _colors: Dict[str, Color] = field(default_factory=default_colors)
    _shadow: Shadow = field(default_factory=default_shadow)
    _lock: RLock = field(default_factory=RLock, repr=False, compare=False)

    # Namespace accessors --------------------------------------------------
    @property
    def tint(self) -> _NamespaceAccessor:
        return _NamespaceAccessor(self, Namespace.TINT)

    @property
    def background(self) -> _NamespaceAccessor:
        return _NamespaceAccessor(self, Namespace.BACKGROUND)

    @property
    def text(self) -> _NamespaceAccessor:
        return _NamespaceAccessor(self, Namespace.TEXT)

    @property
    def status(self) -> _NamespaceAccessor:
        return _NamespaceAccessor(self, Namespace.STATUS)

    # Colors ---------------------------------------------------------------
    def get(self, namespace: Namespace | str, name: str) -> Color:
        return self.get_key(token_key(namespace, name))

    def set(self, namespace: Namespace | str, name: str, value: Color) -> None:
        self.set_key(token_key(namespace, name), value)

    def get_key(self, key: str) -> Color:
        _check_key(key)
        with self._lock:
            return self._colors[key]

    def set_key(self, key: str, value: Color) -> None:
        self.update([(key, value)])

    def update(self, assignments: Iterable[Tuple[str, Color]]) -> None:
        """Apply ordered ``(key, color)`` writes atomically.

        Every pair is validated before the first write; later pairs targeting
        the same key win.
        """
        pending = list(assignments)
        for key, value in pending:
            _check_key(key)
            if not isinstance(value, Color):
                raise TypeError(f"Token {key} requires a Color, got {type(value).__name__}")
        with self._lock:
            for key, value in pending:
                self._colors[key] = value

    # Shadow ---------------------------------------------------------------
    @property
    def shadow(self) -> Shadow:
        with self._lock:
            return self._shadow

    def set_shadow(self, shadow: Shadow) -> None:
        if not isinstance(shadow, Shadow):
            raise TypeError(f"set_shadow requires a Shadow, got {type(shadow).__name__}")
        with self._lock:
            self._shadow = shadow

    # Snapshots ------------------------------------------------------------
    def snapshot(self) -> TokenSnapshot:
        with self._lock:
            return TokenSnapshot(colors=MappingProxyType(dict(self._colors)), shadow=self._shadow)

    def reset(self) -> None:
        """Restore the default theme."""
        with self._lock:
            self._colors = default_colors()
            self._shadow = default_shadow()

    def keys(self) -> Tuple[str, ...]:
        return _ALL_KEYS
