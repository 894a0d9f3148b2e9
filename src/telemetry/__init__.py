"""Real-time telemetry pipeline: store, scoring, simulation and fan-out."""

from src.telemetry.application import HealthScorer, ReadingGenerator, SimulationScheduler
from src.telemetry.domain import TelemetryEvent, parse_event, serialize_event
from src.telemetry.infrastructure import BroadcastChannel, InMemoryStore, seed_store

__all__ = [
    "HealthScorer",
    "ReadingGenerator",
    "SimulationScheduler",
    "TelemetryEvent",
    "parse_event",
    "serialize_event",
    "BroadcastChannel",
    "InMemoryStore",
    "seed_store",
]
