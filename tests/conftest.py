from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient

from taskflow.config import Settings
from taskflow.infrastructure.storage import MemoryTaskStorage
from taskflow.main import create_app


class FakeClock:
    """Deterministic clock: each call advances by one minute."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current += timedelta(minutes=1)
        return now


@pytest.fixture()
def now() -> datetime:
    return datetime(2024, 12, 13, 10, 30)


@pytest.fixture()
def storage(now: datetime) -> MemoryTaskStorage:
    return MemoryTaskStorage(clock=FakeClock(now - timedelta(days=1)))


@pytest.fixture()
def settings() -> Settings:
    return Settings(seed_demo=False, cors_origins=["http://testserver"])


@pytest.fixture()
def app(settings: Settings, storage: MemoryTaskStorage):
    return create_app(settings, storage)


@pytest.fixture()
def client(app) -> TestClient:
    return TestClient(app)
