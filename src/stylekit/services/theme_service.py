"""Theme service: the process-wide entry point.

Wires a ``TokenStore``, ``CascadeEngine`` and ``ApplyDispatcher`` together and
publishes ``ThemeEvent`` notifications on an ``EventBus``:

 - ``THEME_CHANGED`` after any rule that altered at least one value, with
   payload ``{"rule": str, "changed": list[str]}``
 - ``THEME_APPLIED`` after every dispatch, with payload ``{"apply_count": int}``

Seeds may be given as ``Color`` instances, hex strings or packed RGBA ints;
they are converted before anything is written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from stylekit.config import settings
from stylekit.design.appearance import AppearanceSink, NullAppearanceSink
from stylekit.design.cascade import CascadeEngine
from stylekit.design.color_ops import Color, ColorLike
from stylekit.design.token_store import (
    Shadow,
    ThemeDiff,
    TokenSnapshot,
    TokenStore,
    diff_snapshots,
)
from .apply_dispatcher import ApplyDispatcher
from .event_bus import EventBus, ThemeEvent
from .service_locator import services

_logger = logging.getLogger(__name__)

__all__ = ["ThemeService", "get_theme_service", "install_theme_service"]


@dataclass
class ThemeService:
    store: TokenStore
    dispatcher: ApplyDispatcher
    bus: EventBus = field(default_factory=EventBus)
    engine: CascadeEngine = field(init=False)

    def __post_init__(self) -> None:
        self.engine = CascadeEngine(self.store, self.dispatcher)

    @classmethod
    def create(
        cls,
        sink: Optional[AppearanceSink] = None,
        *,
        store: Optional[TokenStore] = None,
        bus: Optional[EventBus] = None,
    ) -> "ThemeService":
        return cls(
            store=store if store is not None else TokenStore(),
            dispatcher=ApplyDispatcher(sink if sink is not None else NullAppearanceSink()),
            bus=bus if bus is not None else EventBus(),
        )

    # Accessors ---------------------------------------------------------
    @property
    def sink(self) -> AppearanceSink:
        return self.dispatcher.sink

    def snapshot(self) -> TokenSnapshot:
        return self.store.snapshot()

    def use_sink(self, sink: AppearanceSink, *, apply: bool = True) -> None:
        """Swap the toolkit sink (e.g. once a QApplication exists)."""
        self.dispatcher.sink = sink
        if apply:
            self.apply()

    # Cascade rules -----------------------------------------------------
    def set_primary(self, color: ColorLike) -> ThemeDiff:
        return self._color_rule("primary", self.engine.set_primary, color)

    def set_secondary(self, color: ColorLike) -> ThemeDiff:
        return self._color_rule("secondary", self.engine.set_secondary, color)

    def set_tertiary(self, color: ColorLike) -> ThemeDiff:
        return self._color_rule("tertiary", self.engine.set_tertiary, color)

    def set_detail(self, color: ColorLike) -> ThemeDiff:
        return self._color_rule("detail", self.engine.set_detail, color)

    def set_shadow(
        self,
        color: Optional[ColorLike] = None,
        opacity: float = 0.3,
        radius: float = 3,
        offset: Sequence[float] = (0, 2),
    ) -> ThemeDiff:
        seed = None if color is None else Color.coerce(color)
        diff = self.engine.set_shadow(seed, opacity=opacity, radius=radius, offset=offset)
        self._publish_changed("shadow", diff)
        return diff

    def set_clean_shadow(self) -> ThemeDiff:
        diff = self.engine.set_clean_shadow()
        self._publish_changed("clean_shadow", diff)
        return diff

    def set_no_shadow(self) -> ThemeDiff:
        diff = self.engine.set_no_shadow()
        self._publish_changed("no_shadow", diff)
        return diff

    @property
    def shadow(self) -> Shadow:
        return self.store.shadow

    def apply(self) -> None:
        """Re-dispatch the current tokens (also makes pending shadow changes visible)."""
        self.engine.apply()
        self._publish_applied()

    def reset(self, *, apply: bool = True) -> ThemeDiff:
        """Restore the default theme."""
        before = self.store.snapshot()
        self.store.reset()
        diff = diff_snapshots(before, self.store.snapshot())
        self._publish_changed("reset", diff)
        if apply:
            self.apply()
        return diff

    # Internal ----------------------------------------------------------
    def _color_rule(self, rule: str, fn, color: ColorLike) -> ThemeDiff:
        seed = Color.coerce(color)
        diff = fn(seed)
        _logger.info("Applied %s color %s", rule, seed.hex)
        self._publish_changed(rule, diff)
        self._publish_applied()
        return diff

    def _publish_changed(self, rule: str, diff: ThemeDiff) -> None:
        if diff.no_changes:
            return
        self.bus.publish(ThemeEvent.THEME_CHANGED, {"rule": rule, "changed": diff.keys()})

    def _publish_applied(self) -> None:
        self.bus.publish(ThemeEvent.THEME_APPLIED, {"apply_count": self.dispatcher.apply_count})


def get_theme_service() -> ThemeService:
    """Return the process-wide theme service, creating a headless one on first use."""
    with services.lock:
        svc = services.try_get(settings.THEME_SERVICE_KEY)
        if svc is None:
            svc = ThemeService.create()
            services.register(settings.THEME_SERVICE_KEY, svc, origin=__name__)
            _logger.debug("Created default theme service")
        return svc


def install_theme_service(svc: ThemeService) -> ThemeService:
    """Register ``svc`` as the process-wide theme service (replacing any existing one)."""
    services.register(settings.THEME_SERVICE_KEY, svc, allow_override=True, origin="install")
    return svc
