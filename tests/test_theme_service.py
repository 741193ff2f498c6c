import pytest

import stylekit
from stylekit.design import palette
from stylekit.design.color_ops import InvalidFormatError, darker
from stylekit.services.event_bus import ThemeEvent
from stylekit.services.service_locator import services
from stylekit.services.theme_service import ThemeService, get_theme_service, install_theme_service
from stylekit.testing import RecordingAppearanceSink


@pytest.fixture
def recorded_service():
    sink = RecordingAppearanceSink()
    return ThemeService.create(sink), sink


def test_accepts_hex_and_packed_seeds(recorded_service):
    svc, sink = recorded_service
    svc.set_primary("#263238")
    assert svc.store.get_key("background.button").hex == "#263238"
    svc.set_detail(0xFF5722FF)
    assert svc.store.get_key("tint.view") == palette.color("deep_orange", "P500")
    assert sink.dispatch_count == 2


def test_invalid_seed_is_rejected_before_any_write(recorded_service):
    svc, sink = recorded_service
    before = svc.snapshot()
    with pytest.raises(InvalidFormatError):
        svc.set_secondary("not-a-color")
    assert svc.snapshot() == before
    assert sink.calls == []


def test_events_carry_rule_and_changed_keys(recorded_service):
    svc, _ = recorded_service
    changed, applied = [], []
    svc.bus.subscribe(ThemeEvent.THEME_CHANGED, lambda e: changed.append(e.payload))
    svc.bus.subscribe(ThemeEvent.THEME_APPLIED, lambda e: applied.append(e.payload))
    svc.set_detail("#FF0000")
    svc.set_detail("#FF0000")  # no-op: applied again, but nothing changed
    assert changed == [{"rule": "detail", "changed": ["tint.toolbar", "tint.view"]}]
    assert applied == [{"apply_count": 1}, {"apply_count": 2}]


def test_shadow_rules_publish_change_without_dispatch(recorded_service):
    svc, sink = recorded_service
    changed = []
    svc.bus.subscribe(ThemeEvent.THEME_CHANGED, lambda e: changed.append(e.payload["rule"]))
    svc.set_no_shadow()
    svc.set_shadow("#000000", opacity=0.5, radius=4, offset=(1, 1))
    assert changed == ["no_shadow", "shadow"]
    assert sink.calls == []
    assert svc.shadow.opacity == 0.5
    svc.apply()
    assert sink.last("navigation_bar").shadow.radius == 4.0


def test_reset_restores_defaults_and_applies(recorded_service):
    svc, sink = recorded_service
    svc.set_primary("#000000")
    diff = svc.reset()
    assert "text.title" in diff.changed
    assert svc.store.get_key("text.title") == palette.color("gray", "P900")
    assert sink.dispatch_count == 2


def test_use_sink_reapplies_current_tokens():
    svc = ThemeService.create()
    svc.set_secondary("#9C27B0")
    sink = RecordingAppearanceSink()
    svc.use_sink(sink)
    assert sink.dispatch_count == 1
    assert sink.last("tab_bar").tint_color.hex == "#9C27B0"


def test_default_service_is_created_once_and_registered():
    svc = get_theme_service()
    assert get_theme_service() is svc
    assert services.get("theme_service") is svc
    replacement = install_theme_service(ThemeService.create())
    assert get_theme_service() is replacement


def test_package_level_functions_use_default_service():
    sink = RecordingAppearanceSink()
    install_theme_service(ThemeService.create(sink))
    stylekit.set_primary("#212121")
    stylekit.set_secondary("#FFC107")
    stylekit.set_tertiary("#00BCD4")
    stylekit.set_detail("#8BC34A")
    assert sink.dispatch_count == 4
    tokens = stylekit.tokens()
    assert tokens.text.title == palette.WHITE
    assert tokens.text.subtitle == darker(palette.WHITE, 5)
    assert tokens.tint.inactive == darker(stylekit.from_hex("#FFC107"), 20)
    assert tokens.status.info.hex == "#00BCD4"
    assert tokens.tint.view.hex == "#8BC34A"
    stylekit.set_no_shadow()
    assert tokens.shadow.opacity == 0.0
    stylekit.set_clean_shadow()
    stylekit.set_shadow(opacity=0.2)
    assert sink.dispatch_count == 4
    stylekit.apply()
    assert sink.dispatch_count == 5
    assert sink.last("navigation_bar").shadow.opacity == pytest.approx(0.2)
