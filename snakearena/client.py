"""Headless websocket client for bots and scripted sessions."""

from __future__ import annotations

import json
from typing import Any, Dict, Optional

from websockets.asyncio.client import ClientConnection, connect

from .utils import Vec2


class NetworkClient:
    """Asynchronous websocket client that joins the arena and reads updates."""

    def __init__(self, uri: str, name: str) -> None:
        self.uri = uri
        self.name = name
        self.websocket: Optional[ClientConnection] = None
        self.snake_id: Optional[int] = None

    async def connect(self) -> int:
        """Connect, announce the player name and return the controlled snake id."""

        self.websocket = await connect(self.uri)
        await self._send_json({"type": "start", "name": self.name})
        init = await self._next_of_type("init")
        self.snake_id = init["id"]
        return self.snake_id

    async def _send_json(self, payload: Dict[str, Any]) -> None:
        if self.websocket is None:
            raise RuntimeError("Client is not connected")
        await self.websocket.send(json.dumps(payload))

    async def _recv_json(self) -> Dict[str, Any]:
        if self.websocket is None:
            raise RuntimeError("Client is not connected")
        message = await self.websocket.recv()
        return json.loads(message)

    async def _next_of_type(self, message_type: str) -> Dict[str, Any]:
        while True:
            payload = await self._recv_json()
            if payload.get("type") == message_type:
                return payload

    async def send_move(self, direction: Vec2, snake_id: Optional[int] = None) -> None:
        """Steer ``snake_id`` (our own snake by default) towards ``direction``."""

        target = self.snake_id if snake_id is None else snake_id
        await self._send_json({"type": "move", "id": target, "direction": direction.to_dict()})

    async def send_raw(self, message: str) -> None:
        if self.websocket is None:
            raise RuntimeError("Client is not connected")
        await self.websocket.send(message)

    async def next_update(self) -> Dict[str, Any]:
        """Return the next full world update broadcast by the server."""

        return await self._next_of_type("update")

    async def close(self) -> None:
        if self.websocket is not None:
            await self.websocket.close()
