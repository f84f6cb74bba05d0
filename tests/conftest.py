from __future__ import annotations

import pytest
from _fakes import FakeTransport, RecordingObserver

from pynetstate.config import NetStateConfig
from pynetstate.state.store import NetworkStateStore


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def store(transport: FakeTransport, observer: RecordingObserver) -> NetworkStateStore:
    state_store = NetworkStateStore(transport, config=NetStateConfig(strict_invariants=True))
    state_store.add_observer(observer)
    return state_store
