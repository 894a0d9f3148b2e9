"""Best-effort fan-out of telemetry events to open real-time connections."""

from loguru import logger

from src.telemetry.domain.events import TelemetryEvent, serialize_event
from src.telemetry.domain.protocols import Connection


class BroadcastChannel:
    """
    Registry of outbound connections.

    Delivery is at-most-once with no retry or replay: closed connections are
    skipped, and a connection whose send fails is dropped from the registry.
    """

    def __init__(self):
        self._connections: set[Connection] = set()

    def connect(self, connection: Connection) -> None:
        """Register a connection."""
        self._connections.add(connection)
        logger.info(f"Client connected to real-time channel ({len(self._connections)} open)")

    def disconnect(self, connection: Connection) -> None:
        """Unregister a connection. Unknown connections are ignored."""
        if connection in self._connections:
            self._connections.discard(connection)
            logger.info(f"Client disconnected from real-time channel ({len(self._connections)} open)")

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def broadcast(self, event: TelemetryEvent) -> int:
        """
        Serialise ``event`` once and send it to every open connection.

        Iterates over a snapshot, so connections may be removed while a
        broadcast is suspended on a send; a removed connection is not written to.

        Returns:
            Number of connections the event was delivered to
        """
        if not self._connections:
            return 0

        payload = serialize_event(event)
        delivered = 0

        for connection in list(self._connections):
            if connection not in self._connections or not connection.is_open:
                continue

            try:
                await connection.send_text(payload)
                delivered += 1
            except Exception as e:
                logger.warning(f"Dropping connection after failed send of {event.type}: {e}")
                self.disconnect(connection)

        return delivered

    def close(self) -> None:
        """Forget every registered connection."""
        self._connections.clear()
