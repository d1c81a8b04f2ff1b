"""Gameplay constants shared across the server modules."""

FIELD_WIDTH: int = 800
FIELD_HEIGHT: int = 600
FOOD_COUNT: int = 20
MINIMUM_LENGTH: int = 5
SEGMENT_SIZE: float = 10.0
POWER_UP_SIZE: float = 20.0
SPEED_MULTIPLIER: float = 2.0
POWER_UP_DURATION: int = 5_000  # ms
POWER_UP_INTERVAL: int = 60_000  # ms
TICK_INTERVAL: int = 50  # ms
BASE_SPEED: float = 50.0  # units per second
MAX_SNAKE_ID: int = 100_000
DEFAULT_HOST: str = "0.0.0.0"
DEFAULT_PORT: int = 8080
