"""JSON protocol helpers for the websocket transport."""

from __future__ import annotations

from dataclasses import dataclass
import json
import math
from typing import Union

from .utils import Vec2
from .world import World


@dataclass(frozen=True)
class StartCommand:
    """``{"type": "start", "name": ...}``: set the sender's display name."""

    name: str


@dataclass(frozen=True)
class MoveCommand:
    """``{"type": "move", "id": ..., "direction": {"x": ..., "y": ...}}``."""

    id: int
    direction: Vec2


ClientCommand = Union[StartCommand, MoveCommand]


def _is_number(value: object) -> bool:
    """Return ``True`` for finite ints and floats (``json`` lets NaN and inf through)."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _parse_start(payload: dict) -> StartCommand:
    name = payload.get("name")
    if not isinstance(name, str):
        raise ValueError("start message needs a string name")
    return StartCommand(name=name)


def _parse_move(payload: dict) -> MoveCommand:
    snake_id = payload.get("id")
    if not isinstance(snake_id, int) or isinstance(snake_id, bool):
        raise ValueError("move message needs an integer id")
    direction = payload.get("direction")
    if not isinstance(direction, dict):
        raise ValueError("move message needs a direction object")
    x, y = direction.get("x"), direction.get("y")
    if not (_is_number(x) and _is_number(y)):
        raise ValueError("direction components must be numbers")
    return MoveCommand(id=snake_id, direction=Vec2(float(x), float(y)))


_PARSERS = {
    "start": _parse_start,
    "move": _parse_move,
}


def parse_client_message(message: Union[str, bytes]) -> ClientCommand:
    """Parse a raw client ``message`` into a command.

    Raises ``ValueError`` for anything that is not a well formed command.
    """

    try:
        payload = json.loads(message)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValueError("Invalid client message") from exc
    if not isinstance(payload, dict):
        raise ValueError("Client message must be a JSON object")
    message_type = payload.get("type")
    parser = _PARSERS.get(message_type) if isinstance(message_type, str) else None
    if parser is None:
        raise ValueError(f"Unknown message type {message_type!r}")
    return parser(payload)


def encode_init(snake_id: int) -> str:
    """Encode the reply telling a client which snake it controls."""

    return json.dumps({"type": "init", "id": snake_id})


def encode_update(world: World) -> str:
    """Encode a world snapshot for broadcasting to clients."""

    return json.dumps(world.snapshot())
