from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from string_analyzer.main import create_app
from string_analyzer.store import StringStore


class TickingClock:
    """Returns a later timestamp on every call."""

    def __init__(self, start=datetime(2025, 1, 1, tzinfo=timezone.utc)):
        self.current = start

    def __call__(self):
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def store(clock):
    return StringStore(clock=clock)


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client
