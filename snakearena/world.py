"""Authoritative game world simulation."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from . import collision, constants, utils
from .snake import Snake


class World:
    """Holds all entities and advances the simulation on every tick.

    Snakes are kept in insertion order, which is the fixed order they are
    visited in by :meth:`advance`.
    """

    def __init__(self, now: Optional[float] = None) -> None:
        self.snakes: Dict[int, Snake] = {}
        self.food: List[utils.Vec2] = [
            utils.random_position() for _ in range(constants.FOOD_COUNT)
        ]
        self.power_up: Optional[utils.Vec2] = None
        self.last_tick: float = utils.now_ms() if now is None else now
        self.next_power_up_time: float = 0.0

    def add_snake(self) -> Snake:
        snake = Snake.spawn(utils.random_id(self.snakes))
        self.snakes[snake.id] = snake
        return snake

    def remove_snake(self, snake_id: int) -> None:
        self.snakes.pop(snake_id, None)

    def rename(self, snake_id: int, name: str) -> None:
        snake = self.snakes.get(snake_id)
        if snake:
            snake.name = name

    def set_direction(self, snake_id: int, direction: utils.Vec2) -> None:
        snake = self.snakes.get(snake_id)
        if snake:
            snake.direction = direction

    def replace_food(self, index: int) -> None:
        self.food[index] = utils.random_position()

    def spawn_power_up(self, now: float) -> None:
        self.power_up = utils.random_position()
        self.next_power_up_time = now + constants.POWER_UP_INTERVAL
        logging.debug("Power-up spawned at (%.1f, %.1f)", self.power_up.x, self.power_up.y)

    def _handle_food(self, snake: Snake) -> None:
        for index, food in enumerate(self.food):
            if utils.within(snake.head, food, constants.SEGMENT_SIZE):
                snake.length += 1
                self.replace_food(index)

    def _handle_power_up(self, snake: Snake, now: float) -> None:
        if self.power_up and utils.within(snake.head, self.power_up, constants.POWER_UP_SIZE):
            snake.activate_power_up(now)
            self.power_up = None
            logging.debug("Snake %s picked up the power-up", snake.id)
        snake.expire_power_up(now)

    def advance(self, now: float) -> None:
        """Advance the simulation to ``now`` (milliseconds)."""

        delta_time = (now - self.last_tick) / 1000.0
        self.last_tick = now

        snakes = list(self.snakes.values())
        for snake in snakes:
            snake.advance_head(delta_time)
            self._handle_food(snake)
            self._handle_power_up(snake, now)

        collision.apply_collisions(collision.detect_head_collisions(snakes))

        if self.power_up is None and now > self.next_power_up_time:
            self.spawn_power_up(now)

    def snapshot(self) -> dict:
        """Return the full world state as sent to every client."""

        return {
            "type": "update",
            "snakes": {snake_id: snake.to_snapshot() for snake_id, snake in self.snakes.items()},
            "foodItems": [food.to_dict() for food in self.food],
            "powerUp": self.power_up.to_dict() if self.power_up else None,
        }
