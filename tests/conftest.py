import pytest

from roster.adapters.clock import FixedClock
from roster.adapters.memory_storage import InMemoryKeyValueStore
from roster.components.students import RosterStore


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep developer config and data dirs out of tests."""
    monkeypatch.delenv("ROSTER_CONFIG", raising=False)
    monkeypatch.delenv("ROSTER_DATA_DIR", raising=False)


@pytest.fixture
def memory_storage():
    return InMemoryKeyValueStore()


@pytest.fixture
def fixed_clock():
    return FixedClock(1_700_000_000_000)


@pytest.fixture
def roster_store(memory_storage, fixed_clock):
    """
    RosterStore over in-memory storage with a pinned clock.
    """
    return RosterStore(memory_storage, clock=fixed_clock)
