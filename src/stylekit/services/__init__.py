"""Services: dispatch, events, the service locator and the theme service."""

from .apply_dispatcher import ApplyDispatcher, resolve_styles, resolve_component  # noqa: F401
from .event_bus import EventBus, ThemeEvent  # noqa: F401
from .service_locator import services  # noqa: F401
from .theme_service import ThemeService, get_theme_service, install_theme_service  # noqa: F401
