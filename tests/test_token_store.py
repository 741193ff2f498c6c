import threading

import pytest

from stylekit.design import palette
from stylekit.design.color_ops import Color, InvalidRangeError, lighter
from stylekit.design.token_store import (
    Namespace,
    Shadow,
    TokenStore,
    TOKEN_NAMES,
    diff_snapshots,
    token_key,
)


def test_defaults_match_builtin_theme(store):
    light_blue = palette.color("light_blue", "P500")
    assert store.get(Namespace.TINT, "view") == light_blue
    assert store.get("tint", "inactive") == palette.color("gray", "P500")
    assert store.get_key("background.view_controller").hex == "#EFEFF4"
    assert store.get_key("text.title") == palette.color("gray", "P900")
    assert store.get_key("text.subhead").hex == "#8E8E8E"
    assert store.get_key("status.warning") == lighter(palette.color("orange", "P800"), 10)
    assert store.get_key("status.danger").hex == "#FF6E6E"
    shadow = store.shadow
    assert shadow.color == palette.color("gray", "P600")
    assert (shadow.opacity, shadow.radius, shadow.offset) == (0.3, 3.0, (0.0, 2.0))


def test_every_declared_token_has_a_value(store):
    snap = store.snapshot()
    count = sum(len(names) for names in TOKEN_NAMES.values())
    assert len(snap.colors) == count == 25
    for ns, names in TOKEN_NAMES.items():
        for name in names:
            assert isinstance(snap.color(ns, name), Color)


def test_set_overwrites_and_attribute_access(store):
    red = Color(255, 0, 0)
    store.set(Namespace.BACKGROUND, "button", red)
    assert store.background.button == red
    store.tint.view = red
    assert store.get_key("tint.view") == red
    assert "navigation_bar" in dir(store.tint)


def test_unknown_tokens_raise_key_error(store):
    with pytest.raises(KeyError):
        store.get("tint", "nonexistent")
    with pytest.raises(KeyError):
        store.get("fonts", "title")
    with pytest.raises(KeyError):
        store.set_key("status.unknown", palette.WHITE)
    with pytest.raises(AttributeError):
        store.text.nonexistent  # noqa: B018
    with pytest.raises(KeyError):
        token_key("text", "Title")


def test_set_rejects_non_color(store):
    with pytest.raises(TypeError):
        store.set("tint", "view", "#FFFFFF")  # type: ignore[arg-type]


def test_update_validates_before_writing(store):
    before = store.snapshot()
    with pytest.raises(KeyError):
        store.update([("tint.view", palette.BLACK), ("tint.bogus", palette.BLACK)])
    assert store.snapshot() == before


def test_snapshot_is_immutable_copy(store):
    snap = store.snapshot()
    store.set_key("tint.view", palette.BLACK)
    assert snap["tint.view"] == palette.color("light_blue", "P500")
    with pytest.raises(TypeError):
        snap.colors["tint.view"] = palette.BLACK  # type: ignore[index]


def test_shadow_validation():
    with pytest.raises(InvalidRangeError):
        Shadow(color=palette.BLACK, opacity=1.5, radius=1)
    with pytest.raises(InvalidRangeError):
        Shadow(color=palette.BLACK, opacity=0.5, radius=-1)
    s = Shadow(color=palette.BLACK, opacity=1, radius=2, offset=(1, 3))
    assert s.offset == (1.0, 3.0)
    assert isinstance(s.opacity, float)


def test_reset_restores_defaults(store):
    store.set_key("text.title", palette.WHITE)
    store.set_shadow(Shadow(color=palette.CLEAR, opacity=0, radius=0))
    store.reset()
    assert store.snapshot() == TokenStore().snapshot()


def test_diff_reports_changed_keys(store):
    before = store.snapshot()
    store.set_key("tint.view", palette.BLACK)
    store.set_shadow(Shadow(color=palette.BLACK, opacity=0.3, radius=3, offset=(0, 2)))
    diff = diff_snapshots(before, store.snapshot())
    assert diff.keys() == ["shadow.color", "tint.view"]
    assert diff.changed["tint.view"] == ("#03A9F4", "#000000")
    assert diff_snapshots(before, before).no_changes


def test_concurrent_updates_never_tear(store):
    a = [(k, palette.BLACK) for k in ("tint.view", "tint.toolbar")]
    b = [(k, palette.WHITE) for k in ("tint.view", "tint.toolbar")]
    torn = []

    def writer():
        for i in range(500):
            store.update(a if i % 2 else b)

    def reader():
        for _ in range(500):
            snap = store.snapshot()
            if snap["tint.view"] != snap["tint.toolbar"]:
                torn.append(snap)

    store.update(a)
    threads = [threading.Thread(target=writer), threading.Thread(target=reader)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert not torn
