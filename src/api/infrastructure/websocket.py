"""Adapter exposing a FastAPI WebSocket as a broadcast channel connection."""

from fastapi import WebSocket
from starlette.websockets import WebSocketState


class WebSocketConnection:
    """Wraps a server-side WebSocket for the broadcast channel."""

    def __init__(self, websocket: WebSocket):
        self.websocket = websocket

    @property
    def is_open(self) -> bool:
        return (
            self.websocket.client_state == WebSocketState.CONNECTED
            and self.websocket.application_state == WebSocketState.CONNECTED
        )

    async def send_text(self, payload: str) -> None:
        await self.websocket.send_text(payload)
