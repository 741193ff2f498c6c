"""Synchronous publish/subscribe for theme notifications.

Goals:
 - Let widgets and tooling react to theme changes without importing the engine
 - Safe error isolation: one failing handler doesn't break the publish cycle
 - One-shot (once) subscriptions and unsubscribe handles
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from threading import RLock
from time import perf_counter
from typing import Any, Dict, List, Protocol

__all__ = [
    "ThemeEvent",
    "Event",
    "EventBus",
    "EventHandler",
    "Subscription",
]


class ThemeEvent(str, Enum):  # Using str subclass for easier logging / JSON usage
    THEME_CHANGED = "theme_changed"
    THEME_APPLIED = "theme_applied"


@dataclass
class Event:
    name: str  # matches ThemeEvent value or custom string
    payload: Any
    timestamp: float


class EventHandler(Protocol):  # noqa: D401 - protocol signature docs implicit
    def __call__(self, event: Event) -> None: ...  # pragma: no cover - structural


@dataclass
class Subscription:
    event: str
    handler: EventHandler
    once: bool
    active: bool = True

    def cancel(self) -> None:
        self.active = False


class EventBus:
    """Synchronous event dispatcher.

    Thread-safety: the subscription table is guarded by a re-entrant lock.
    Handlers are invoked while the lock is NOT held (copy-first strategy) so
    handlers can subscribe/unsubscribe recursively without deadlock.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        self._subs: Dict[str, List[Subscription]] = {}
        self._errors: List[tuple[Event, BaseException]] = []

    # ------------------------------------------------------------------
    # Subscription management
    # ------------------------------------------------------------------
    def subscribe(
        self, name: str | ThemeEvent, handler: EventHandler, *, once: bool = False
    ) -> Subscription:
        key = name.value if isinstance(name, ThemeEvent) else name
        sub = Subscription(event=key, handler=handler, once=once)
        with self._lock:
            self._subs.setdefault(key, []).append(sub)
        return sub

    def unsubscribe(self, sub: Subscription) -> None:
        with self._lock:
            bucket = self._subs.get(sub.event)
            if not bucket:
                return
            for i, existing in enumerate(bucket):
                if existing is sub:
                    bucket.pop(i)
                    break
            if not bucket:
                self._subs.pop(sub.event, None)
        sub.active = False

    def clear(self) -> None:
        with self._lock:
            self._subs.clear()
            self._errors.clear()

    # ------------------------------------------------------------------
    # Publishing
    # ------------------------------------------------------------------
    def publish(self, name: str | ThemeEvent, payload: Any = None) -> Event:
        key = name.value if isinstance(name, ThemeEvent) else name
        evt = Event(name=key, payload=payload, timestamp=perf_counter())
        with self._lock:
            subs = list(self._subs.get(key, ()))
        to_remove: List[Subscription] = []
        for sub in subs:
            if not sub.active:
                continue
            try:
                sub.handler(evt)
            except Exception as exc:  # noqa: BLE001 - capture any handler failure
                self._errors.append((evt, exc))
            else:
                if sub.once:
                    to_remove.append(sub)
        if to_remove:
            with self._lock:
                bucket = self._subs.get(key)
                if bucket:
                    self._subs[key] = [s for s in bucket if s not in to_remove]
                    if not self._subs[key]:
                        self._subs.pop(key, None)
        return evt

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    def subscriber_count(self, name: str | ThemeEvent) -> int:
        key = name.value if isinstance(name, ThemeEvent) else name
        with self._lock:
            return len(self._subs.get(key, ()))

    @property
    def errors(self) -> list[tuple[Event, BaseException]]:
        with self._lock:
            return list(self._errors)
