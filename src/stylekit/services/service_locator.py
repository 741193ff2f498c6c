"""Process-wide registry holding the default ``ThemeService``.

``get_theme_service`` looks the service up here and creates a headless one on
first use; ``install_theme_service`` replaces it. Tests call ``clear()`` to
start from an empty registry.
"""

from __future__ import annotations

from threading import RLock
from typing import Any, Dict, Optional, Tuple

__all__ = ["ServiceLocator", "services", "ServiceAlreadyRegisteredError", "ServiceNotFoundError"]


class ServiceAlreadyRegisteredError(RuntimeError):
    """Raised when a key is registered twice without allow_override."""


class ServiceNotFoundError(KeyError):
    """Raised when a requested service key is not present."""


class ServiceLocator:
    """Thread-safe key -> service registry."""

    def __init__(self) -> None:
        self._lock = RLock()
        # key -> (service, origin)
        self._entries: Dict[str, Tuple[Any, Optional[str]]] = {}

    @property
    def lock(self) -> RLock:
        """Registry lock, for callers doing check-then-register sequences."""
        return self._lock

    def register(
        self, key: str, value: Any, *, allow_override: bool = False, origin: Optional[str] = None
    ) -> None:
        with self._lock:
            if key in self._entries and not allow_override:
                raise ServiceAlreadyRegisteredError(f"Service '{key}' already registered")
            self._entries[key] = (value, origin)

    def get(self, key: str) -> Any:
        with self._lock:
            if key not in self._entries:
                raise ServiceNotFoundError(key)
            return self._entries[key][0]

    def try_get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            return default if entry is None else entry[0]

    def origin(self, key: str) -> Optional[str]:
        """Who registered ``key`` (module name or ``"install"``)."""
        with self._lock:
            if key not in self._entries:
                raise ServiceNotFoundError(key)
            return self._entries[key][1]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


services = ServiceLocator()
