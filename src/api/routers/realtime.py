"""Real-time WebSocket endpoint feeding the broadcast channel."""

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from loguru import logger

from src.api.infrastructure.container import get_container
from src.api.infrastructure.websocket import WebSocketConnection
from src.config import AppConfig
from src.telemetry.domain.events import parse_event
from src.telemetry.domain.exceptions import MalformedEventError

# Load configuration
_app_config = AppConfig()

router = APIRouter(tags=["realtime"])


@router.websocket(_app_config.realtime.path)
async def realtime_updates(websocket: WebSocket):
    """
    Stream `sensor_update`, `site_status_update` and `alert_created` events.

    The socket is registered before the handshake completes; the channel only
    writes to it once it is open. Inbound frames are validated and logged only.
    """
    channel = get_container().broadcast_channel()
    connection = WebSocketConnection(websocket)
    channel.connect(connection)

    try:
        await websocket.accept()
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break

            raw = message.get("text") or message.get("bytes") or ""
            try:
                event = parse_event(raw)
            except MalformedEventError as e:
                logger.warning(f"Ignoring malformed client message: {e.message}")
                continue
            logger.debug(f"Received {event.type} from client")
    except WebSocketDisconnect:
        pass
    finally:
        channel.disconnect(connection)
