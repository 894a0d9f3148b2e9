"""Infrastructure layer for the telemetry pipeline."""

from src.telemetry.infrastructure.broadcast import BroadcastChannel
from src.telemetry.infrastructure.memory_store import InMemoryStore
from src.telemetry.infrastructure.seed import seed_store

__all__ = [
    "BroadcastChannel",
    "InMemoryStore",
    "seed_store",
]
