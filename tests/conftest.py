# Shared fixtures: headless Qt platform and an isolated service registry per test.

import os

import pytest

from stylekit.design.token_store import TokenStore
from stylekit.services.apply_dispatcher import ApplyDispatcher
from stylekit.services.service_locator import services
from stylekit.design.cascade import CascadeEngine
from stylekit.testing import RecordingAppearanceSink

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _isolated_services():
    services.clear()
    yield
    services.clear()


@pytest.fixture
def store():
    return TokenStore()


@pytest.fixture
def sink():
    return RecordingAppearanceSink()


@pytest.fixture
def dispatcher(sink):
    return ApplyDispatcher(sink)


@pytest.fixture
def engine(store, dispatcher):
    return CascadeEngine(store, dispatcher)
