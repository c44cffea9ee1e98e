"""
Pytest configuration for Domain Watch.

Provides fixtures for:
- A fixed "now" so classification never depends on the wall clock
- Empty and sample-seeded stores
- Settings cache reset around each test
"""

from __future__ import annotations

from datetime import datetime
from typing import Generator

import pytest

from domain_watch.config import get_settings
from domain_watch.seed import seed_sample_domains
from domain_watch.store import DomainRecordStore

# No 29 February between this instant and two years before it.
FIXED_NOW = datetime(2023, 6, 15, 12, 0, 0)


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Clear cached settings and pin a wide console so tables never wrap.
    """
    monkeypatch.setenv("CONSOLE_WIDTH", "200")
    monkeypatch.delenv("DATE_FORMAT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_JSON", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def store() -> DomainRecordStore:
    return DomainRecordStore()


@pytest.fixture
def sample_store(store: DomainRecordStore, now: datetime) -> DomainRecordStore:
    """
    Store seeded with the ten sample registrations relative to `now`.
    """
    return seed_sample_domains(store, now)
