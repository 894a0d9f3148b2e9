"""Client-side real-time connection manager with linear reconnect backoff."""

import asyncio
from enum import Enum
from typing import Any, Awaitable, Callable

from loguru import logger
from websockets.asyncio.client import connect
from websockets.exceptions import ConnectionClosed, WebSocketException

from src.telemetry.domain.events import TelemetryEvent, parse_event, serialize_event
from src.telemetry.domain.exceptions import MalformedEventError

EventListener = Callable[[TelemetryEvent], None]
StatusListener = Callable[["ConnectionState"], None]


class ConnectionState(str, Enum):
    """Connectivity status of the manager."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class ConnectionManager:
    """
    Keeps one real-time connection open and surfaces parsed events.

    On connection loss the manager retries after ``base_delay * attempt``
    seconds (linear, not exponential). After ``max_attempts`` consecutive
    failed reconnects it gives up and stays disconnected until ``run()`` is
    invoked again. A successful connection resets the attempt counter.
    """

    def __init__(
        self,
        url: str,
        base_delay: float = 3.0,
        max_attempts: int = 5,
        connector: Callable[[str], Awaitable[Any]] = connect,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize the manager.

        Args:
            url: WebSocket URL of the real-time channel
            base_delay: Delay unit of the linear backoff, in seconds
            max_attempts: Reconnect attempts before giving up
            connector: Opens a connection for a URL; defaults to ``websockets`` connect
            sleep: Awaitable sleep used for reconnect delays
        """
        self.url = url
        self.base_delay = base_delay
        self.max_attempts = max_attempts
        self._connector = connector
        self._sleep = sleep

        self._state = ConnectionState.DISCONNECTED
        self._attempts = 0
        self._gave_up = False
        self._closing = False
        self._ws = None
        self._task: asyncio.Task | None = None
        self._last_event: TelemetryEvent | None = None
        self._listeners: list[EventListener] = []
        self._status_listeners: list[StatusListener] = []

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state == ConnectionState.CONNECTED

    @property
    def reconnect_attempts(self) -> int:
        return self._attempts

    @property
    def gave_up(self) -> bool:
        """True once the retry budget is exhausted."""
        return self._gave_up

    @property
    def last_event(self) -> TelemetryEvent | None:
        return self._last_event

    def add_listener(self, listener: EventListener) -> None:
        """Register a callback for every parsed inbound event."""
        self._listeners.append(listener)

    def add_status_listener(self, listener: StatusListener) -> None:
        """Register a callback for connectivity changes."""
        self._status_listeners.append(listener)

    def _set_state(self, state: ConnectionState) -> None:
        if state == self._state:
            return

        self._state = state
        for listener in self._status_listeners:
            try:
                listener(state)
            except Exception:
                logger.exception("Status listener failed")

    def register_disconnect(self) -> float | None:
        """
        Record a lost or failed connection and plan the next attempt.

        Returns:
            Delay in seconds before the next attempt, or None when giving up
        """
        self._set_state(ConnectionState.DISCONNECTED)

        if self._attempts >= self.max_attempts:
            self._gave_up = True
            logger.error(f"Giving up on {self.url} after {self._attempts} reconnect attempts")
            return None

        self._attempts += 1
        delay = self.base_delay * self._attempts
        logger.info(f"Reconnecting in {delay:g}s (attempt {self._attempts}/{self.max_attempts})")
        return delay

    def handle_message(self, raw: str | bytes) -> TelemetryEvent | None:
        """
        Parse an inbound payload and notify listeners.

        Malformed payloads are logged and discarded.
        """
        try:
            event = parse_event(raw)
        except MalformedEventError as e:
            logger.warning(f"Discarding malformed real-time message: {e.message} {e.details}")
            return None

        self._last_event = event
        for listener in self._listeners:
            try:
                listener(event)
            except Exception:
                logger.exception(f"Listener failed on {event.type} event")
        return event

    async def _connect_once(self) -> None:
        """Open a connection and consume it until it closes or fails."""
        self._set_state(ConnectionState.CONNECTING)

        try:
            self._ws = await self._connector(self.url)
        except (OSError, WebSocketException, asyncio.TimeoutError) as e:
            logger.warning(f"Connection to {self.url} failed: {e}")
            return

        self._attempts = 0
        self._set_state(ConnectionState.CONNECTED)
        logger.info(f"Connected to {self.url}")

        try:
            async for raw in self._ws:
                self.handle_message(raw)
        except ConnectionClosed as e:
            logger.warning(f"Connection to {self.url} lost: {e}")
        finally:
            self._ws = None

        logger.info(f"Disconnected from {self.url}")

    async def run(self) -> None:
        """Connect, receive and reconnect until closed or out of attempts."""
        self._closing = False
        self._attempts = 0
        self._gave_up = False

        while not self._closing:
            await self._connect_once()
            if self._closing:
                break

            delay = self.register_disconnect()
            if delay is None:
                break

            await self._sleep(delay)

        self._set_state(ConnectionState.DISCONNECTED)

    def start(self) -> asyncio.Task:
        """Run the manager in a background task."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self.run(), name="realtime-connection")
        return self._task

    async def send(self, event: TelemetryEvent) -> bool:
        """
        Send an event to the server.

        Returns:
            True if sent; False (no-op) unless currently connected
        """
        if not self.is_connected or self._ws is None:
            return False

        try:
            await self._ws.send(serialize_event(event))
        except ConnectionClosed as e:
            logger.warning(f"Send to {self.url} failed, connection closed: {e}")
            return False
        return True

    async def close(self) -> None:
        """Stop reconnecting and close the current connection."""
        self._closing = True

        if self._ws is not None:
            await self._ws.close()

        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
        self._set_state(ConnectionState.DISCONNECTED)
