"""Real-time client for the telemetry channel."""

from src.client.connection_manager import ConnectionManager, ConnectionState

__all__ = ["ConnectionManager", "ConnectionState"]
