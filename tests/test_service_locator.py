import pytest

from stylekit.config import settings
from stylekit.services import service_locator
from stylekit.services.service_locator import (
    ServiceAlreadyRegisteredError,
    ServiceLocator,
    ServiceNotFoundError,
)
from stylekit.services.theme_service import ThemeService, get_theme_service, install_theme_service


def test_register_get_and_duplicate_guard():
    loc = ServiceLocator()
    loc.register("a", 1)
    assert loc.get("a") == 1
    with pytest.raises(ServiceAlreadyRegisteredError):
        loc.register("a", 2)
    loc.register("a", 2, allow_override=True, origin="tests")
    assert loc.get("a") == 2
    assert loc.origin("a") == "tests"


def test_missing_service():
    loc = ServiceLocator()
    with pytest.raises(ServiceNotFoundError):
        loc.get("missing")
    with pytest.raises(ServiceNotFoundError):
        loc.origin("missing")
    assert loc.try_get("missing", "fallback") == "fallback"


def test_clear_empties_registry():
    loc = ServiceLocator()
    loc.register("a", 1)
    loc.clear()
    assert loc.try_get("a") is None


def test_theme_service_registration_origin():
    svc = get_theme_service()
    key = settings.THEME_SERVICE_KEY
    assert service_locator.services.get(key) is svc
    assert service_locator.services.origin(key) == "stylekit.services.theme_service"
    replacement = install_theme_service(ThemeService.create())
    assert get_theme_service() is replacement
    assert service_locator.services.origin(key) == "install"
