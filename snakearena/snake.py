"""Snake entity implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from . import constants, utils


@dataclass
class Snake:
    """Authoritative representation of a snake controlled by a player.

    ``body`` is ordered head first and never holds more than ``length``
    points. ``power_up_end_time`` is an absolute timestamp in milliseconds and
    only meaningful while ``power_up_active`` is set.
    """

    id: int
    name: str
    color: str
    body: List[utils.Vec2]
    length: int = constants.MINIMUM_LENGTH
    direction: utils.Vec2 = field(default_factory=lambda: utils.Vec2(1.0, 0.0))
    speed: float = constants.BASE_SPEED
    power_up_active: bool = False
    power_up_end_time: Optional[float] = None

    @classmethod
    def spawn(cls, snake_id: int) -> "Snake":
        """Create a freshly connected snake with a single segment at a random spot."""

        return cls(
            id=snake_id,
            name=f"Player{snake_id}",
            color=utils.random_color(),
            body=[utils.random_position()],
        )

    @property
    def head(self) -> utils.Vec2:
        return self.body[0]

    def advance_head(self, delta_time: float) -> utils.Vec2:
        """Move the head by ``delta_time`` seconds and drop the tail if needed.

        Returns the new head position.
        """

        head = utils.wrap_position(self.head + self.direction * (self.speed * delta_time))
        self.body.insert(0, head)
        del self.body[self.length:]
        return head

    def activate_power_up(self, now: float) -> None:
        """Speed the snake up until ``now`` plus the power-up duration."""

        if not self.power_up_active:
            self.speed *= constants.SPEED_MULTIPLIER
            self.power_up_active = True
        self.power_up_end_time = now + constants.POWER_UP_DURATION

    def expire_power_up(self, now: float) -> bool:
        """Restore the normal speed once the power-up ran out.

        Returns ``True`` if the power-up expired during this call.
        """

        if not self.power_up_active or now <= self.power_up_end_time:
            return False
        self.speed /= constants.SPEED_MULTIPLIER
        self.power_up_active = False
        return True

    def shrink_to_minimum(self) -> None:
        """Reset the snake to the minimum length after losing a collision."""

        self.length = constants.MINIMUM_LENGTH
        del self.body[constants.MINIMUM_LENGTH:]

    def to_snapshot(self) -> dict:
        """Return a snapshot representation for clients."""

        return {
            "body": [point.to_dict() for point in self.body],
            "length": self.length,
            "direction": self.direction.to_dict(),
            "speed": self.speed,
            "color": self.color,
            "name": self.name,
            "powerUpActive": self.power_up_active,
            "powerUpEndTime": self.power_up_end_time,
        }
