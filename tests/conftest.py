# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add repo root (parent of this file) to import search path
repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from snakearena import constants  # noqa: E402
from snakearena.snake import Snake  # noqa: E402
from snakearena.utils import Vec2  # noqa: E402
from snakearena.world import World  # noqa: E402


def make_snake(snake_id, x, y, length=constants.MINIMUM_LENGTH, direction=(1.0, 0.0)):
    """Build a snake whose body is ``length`` points stacked on ``(x, y)``."""
    return Snake(
        id=snake_id,
        name=f"snake{snake_id}",
        color="#112233",
        body=[Vec2(x, y) for _ in range(length)],
        length=length,
        direction=Vec2(*direction),
    )


@pytest.fixture
def world():
    """A world at time 0 with food parked in a corner and no power-up schedule."""
    w = World(now=0.0)
    w.food = [Vec2(700.0, 500.0) for _ in range(constants.FOOD_COUNT)]
    w.next_power_up_time = float("inf")
    return w
