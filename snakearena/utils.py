"""Utility primitives used by the authoritative game server."""

from __future__ import annotations

from dataclasses import dataclass
import random
import time
from typing import Container

from . import constants


@dataclass
class Vec2:
    """A light‑weight two dimensional vector used for positions and headings.

    Only the handful of operations the simulation needs are implemented:
    addition, scaling and conversion to the JSON friendly ``{"x", "y"}`` form
    used on the wire.
    """

    x: float
    y: float

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: float) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def to_dict(self) -> dict[str, float]:
        """Serialise the vector to a JSON friendly dictionary."""

        return {"x": self.x, "y": self.y}


def random_color() -> str:
    """Return a random ``#RRGGBB`` colour drawn uniformly from the RGB cube."""

    return "#{:06X}".format(random.randrange(0x1000000))


def random_position() -> Vec2:
    """Return a uniformly random point inside the playing field."""

    return Vec2(
        random.random() * constants.FIELD_WIDTH,
        random.random() * constants.FIELD_HEIGHT,
    )


def random_id(taken: Container[int]) -> int:
    """Return a random snake id that is not already in ``taken``."""

    while True:
        candidate = random.randrange(constants.MAX_SNAKE_ID)
        if candidate not in taken:
            return candidate


def wrap_position(position: Vec2) -> Vec2:
    """Move a point that left the field to the opposite edge.

    The coordinate is set to exactly ``0`` or the field dimension rather than
    wrapped modulo the field size.
    """

    x, y = position.x, position.y
    if x < 0:
        x = constants.FIELD_WIDTH
    elif x > constants.FIELD_WIDTH:
        x = 0
    if y < 0:
        y = constants.FIELD_HEIGHT
    elif y > constants.FIELD_HEIGHT:
        y = 0
    return Vec2(x, y)


def within(a: Vec2, b: Vec2, threshold: float) -> bool:
    """Return ``True`` if ``a`` and ``b`` are closer than ``threshold`` on both axes."""

    return abs(a.x - b.x) < threshold and abs(a.y - b.y) < threshold


def now_ms() -> float:
    """Return the wall clock time in milliseconds."""

    return time.time() * 1000.0
