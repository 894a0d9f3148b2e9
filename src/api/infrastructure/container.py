"""Dependency injection container for API layer."""

import random

from dependency_injector import containers, providers

from src.telemetry.application.generator import ReadingGenerator
from src.telemetry.application.scheduler import SimulationScheduler
from src.telemetry.application.scoring import HealthScorer
from src.telemetry.infrastructure.broadcast import BroadcastChannel
from src.telemetry.infrastructure.memory_store import InMemoryStore


class APIContainer(containers.DeclarativeContainer):
    """Dependency injection container for API layer."""

    config = providers.Configuration()

    # Shared random source (seedable)
    random_source = providers.Singleton(random.Random, config.simulation.seed)

    # Store
    store = providers.Singleton(InMemoryStore)

    # Real-time fan-out
    broadcast_channel = providers.Singleton(BroadcastChannel)

    # Scoring & simulation
    scorer = providers.Singleton(
        HealthScorer,
        rng=random_source,
        alert_probability=config.simulation.alert_probability,
        nitrate_threshold=config.simulation.alert_nitrate_threshold,
        alert_confidence=config.simulation.alert_confidence,
    )

    reading_generator = providers.Singleton(ReadingGenerator, rng=random_source)

    scheduler = providers.Singleton(
        SimulationScheduler,
        store=store,
        channel=broadcast_channel,
        scorer=scorer,
        generator=reading_generator,
        interval_seconds=config.simulation.interval_seconds,
        initial_delay_seconds=config.simulation.initial_delay_seconds,
    )


# Global container instance
_container: APIContainer | None = None


def init_container(config) -> APIContainer:
    """Initialize the global container."""
    global _container
    _container = APIContainer()
    _container.config.from_dict(config)
    return _container


def get_container() -> APIContainer:
    """Get the global container instance."""
    if _container is None:
        raise RuntimeError("Container not initialized. Call init_container() first.")
    return _container
