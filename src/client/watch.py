"""Command-line watcher that logs every event received from a telemetry server."""

import argparse
import asyncio

from loguru import logger

from src.client.connection_manager import ConnectionManager, ConnectionState
from src.config import AppConfig
from src.telemetry.domain.events import TelemetryEvent
from src.telemetry.infrastructure.logging import configure_logging


def _log_event(event: TelemetryEvent) -> None:
    logger.info(f"{event.type}: {event.data.model_dump_json(by_alias=True)}")


def _log_status(state: ConnectionState) -> None:
    logger.info(f"Connection status: {state.value}")


async def watch(url: str, base_delay: float, max_attempts: int) -> None:
    manager = ConnectionManager(url, base_delay=base_delay, max_attempts=max_attempts)
    manager.add_listener(_log_event)
    manager.add_status_listener(_log_status)

    try:
        await manager.run()
    finally:
        await manager.close()

    if manager.gave_up:
        logger.error("Real-time channel unavailable; restart the watcher to try again")


def main() -> None:
    config = AppConfig()
    parser = argparse.ArgumentParser(description="Stream real-time telemetry events to the console.")
    parser.add_argument("--url", default=config.client.url, help="WebSocket URL of the telemetry server")
    args = parser.parse_args()

    configure_logging(config.logging.level, config.logging.file)
    try:
        asyncio.run(watch(args.url, config.client.base_delay_seconds, config.client.max_reconnect_attempts))
    except KeyboardInterrupt:
        logger.info("Stopped")


if __name__ == "__main__":
    main()
