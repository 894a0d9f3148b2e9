"""Shared fixtures for the telemetry test suite."""

from __future__ import annotations

import pytest

from src.telemetry.application.generator import ReadingGenerator
from src.telemetry.application.scoring import HealthScorer
from src.telemetry.domain.dtos import SiteCreate
from src.telemetry.domain.models import SiteStatus
from src.telemetry.infrastructure.broadcast import BroadcastChannel
from src.telemetry.infrastructure.memory_store import InMemoryStore
from tests.helpers.doubles import ScriptedRandom, SteppingClock


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def store(clock: SteppingClock) -> InMemoryStore:
    return InMemoryStore(clock=clock)


@pytest.fixture
def channel() -> BroadcastChannel:
    return BroadcastChannel()


@pytest.fixture
def generator() -> ReadingGenerator:
    """Generator whose draws all sit at the band centre (baseline values)."""
    return ReadingGenerator(rng=ScriptedRandom(default=0.5))


@pytest.fixture
def never_alert_scorer() -> HealthScorer:
    return HealthScorer(rng=ScriptedRandom(default=0.99))


@pytest.fixture
def always_alert_scorer() -> HealthScorer:
    return HealthScorer(rng=ScriptedRandom(default=0.0))


@pytest.fixture
def murray_site(store: InMemoryStore):
    return store.create_site(
        SiteCreate(
            name="Murray River Site A",
            location="-35.1185, 147.3598",
            latitude=-35.1185,
            longitude=147.3598,
            status=SiteStatus.ONLINE,
            health_score=92,
        )
    )


@pytest.fixture
def offline_site(store: InMemoryStore):
    return store.create_site(
        SiteCreate(
            name="Lake Albert",
            location="-35.1598, 147.3112",
            latitude=-35.1598,
            longitude=147.3112,
            status=SiteStatus.OFFLINE,
        )
    )
