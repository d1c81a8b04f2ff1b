from snakearena import constants
from snakearena.utils import Vec2
from snakearena.world import World

from conftest import make_snake


def add(world, snake):
    world.snakes[snake.id] = snake
    return snake


def test_new_world_has_full_food_and_no_power_up():
    world = World(now=0.0)
    assert len(world.food) == constants.FOOD_COUNT
    assert world.power_up is None
    assert world.snakes == {}


def test_advance_uses_elapsed_time_once_per_tick(world):
    a = add(world, make_snake(1, 100.0, 100.0))
    b = add(world, make_snake(2, 300.0, 300.0, direction=(0.0, 1.0)))
    world.advance(100.0)
    assert world.last_tick == 100.0
    assert a.head == Vec2(105.0, 100.0)
    assert b.head == Vec2(300.0, 305.0)


def test_body_never_exceeds_length(world):
    snake = add(world, make_snake(1, 100.0, 100.0, length=1))
    snake.length = 5
    world.food[0] = Vec2(110.0, 100.0)
    for step in range(1, 40):
        world.advance(step * 50.0)
        for s in world.snakes.values():
            assert len(s.body) <= s.length
    assert snake.length >= 6


def test_eating_food_grows_and_replaces_slot(world):
    snake = add(world, make_snake(1, 100.0, 100.0))
    world.food[3] = Vec2(105.0, 100.0)
    world.advance(100.0)
    assert snake.length == constants.MINIMUM_LENGTH + 1
    assert len(world.food) == constants.FOOD_COUNT
    replacement = world.food[3]
    assert 0 <= replacement.x < constants.FIELD_WIDTH
    assert 0 <= replacement.y < constants.FIELD_HEIGHT


def test_every_food_hit_counts(world):
    snake = add(world, make_snake(1, 100.0, 100.0))
    world.food[0] = Vec2(104.0, 101.0)
    world.food[1] = Vec2(106.0, 99.0)
    world.advance(100.0)
    assert snake.length == constants.MINIMUM_LENGTH + 2
    assert len(world.food) == constants.FOOD_COUNT


def test_power_up_pickup_and_expiry(world):
    snake = add(world, make_snake(1, 100.0, 100.0))
    world.power_up = Vec2(115.0, 100.0)
    world.advance(100.0)
    assert world.power_up is None
    assert snake.power_up_active
    assert snake.speed == constants.BASE_SPEED * constants.SPEED_MULTIPLIER
    assert snake.power_up_end_time == 100.0 + constants.POWER_UP_DURATION

    world.advance(100.0 + constants.POWER_UP_DURATION)
    assert snake.power_up_active
    world.advance(101.0 + constants.POWER_UP_DURATION)
    assert not snake.power_up_active
    assert snake.speed == constants.BASE_SPEED


def test_only_one_snake_gets_the_power_up(world):
    first = add(world, make_snake(1, 100.0, 100.0))
    second = add(world, make_snake(2, 100.0, 130.0))
    world.power_up = Vec2(105.0, 115.0)
    world.advance(100.0)
    assert first.power_up_active
    assert not second.power_up_active
    assert second.speed == constants.BASE_SPEED
    assert world.power_up is None


def test_power_up_spawns_only_after_interval(world):
    world.next_power_up_time = 60_000.0
    world.advance(30_000.0)
    assert world.power_up is None
    world.advance(60_000.0)
    assert world.power_up is None
    world.advance(60_001.0)
    assert world.power_up is not None
    assert world.next_power_up_time == 60_001.0 + constants.POWER_UP_INTERVAL


def test_present_power_up_is_not_replaced(world):
    world.next_power_up_time = 0.0
    world.advance(10.0)
    power_up = world.power_up
    world.advance(10.0 + 2 * constants.POWER_UP_INTERVAL)
    assert world.power_up is power_up


def test_first_tick_spawns_a_power_up():
    world = World(now=0.0)
    world.advance(50.0)
    assert world.power_up is not None
    assert world.next_power_up_time == 50.0 + constants.POWER_UP_INTERVAL


def test_head_collision_during_advance(world):
    a = add(world, make_snake(1, 100.0, 100.0, length=5, direction=(0.0, 0.0)))
    b = add(world, make_snake(2, 100.0, 104.0, length=12, direction=(0.0, 0.0)))
    world.advance(50.0)
    assert a.length == 12
    assert b.length == constants.MINIMUM_LENGTH
    assert len(b.body) <= constants.MINIMUM_LENGTH


def test_add_snake_assigns_unique_ids():
    world = World(now=0.0)
    snakes = [world.add_snake() for _ in range(300)]
    assert len({snake.id for snake in snakes}) == 300
    assert set(world.snakes) == {snake.id for snake in snakes}


def test_commands_for_unknown_ids_are_ignored(world):
    snake = add(world, make_snake(1, 100.0, 100.0))
    world.set_direction(99, Vec2(0.0, 1.0))
    world.rename(99, "ghost")
    world.remove_snake(99)
    assert snake.direction == Vec2(1.0, 0.0)
    assert list(world.snakes) == [1]


def test_rename_and_set_direction(world):
    snake = add(world, make_snake(1, 100.0, 100.0))
    world.rename(1, "")
    world.set_direction(1, Vec2(0.0, -1.0))
    assert snake.name == ""
    assert snake.direction == Vec2(0.0, -1.0)


def test_removed_snake_is_gone_from_snapshot(world):
    add(world, make_snake(1, 100.0, 100.0))
    add(world, make_snake(2, 200.0, 200.0))
    world.remove_snake(1)
    world.advance(50.0)
    snapshot = world.snapshot()
    assert list(snapshot["snakes"]) == [2]


def test_snapshot_shape(world):
    add(world, make_snake(7, 100.0, 100.0))
    snapshot = world.snapshot()
    assert snapshot["type"] == "update"
    assert snapshot["snakes"][7]["name"] == "snake7"
    assert len(snapshot["foodItems"]) == constants.FOOD_COUNT
    assert snapshot["foodItems"][0] == {"x": 700.0, "y": 500.0}
    assert snapshot["powerUp"] is None
    world.power_up = Vec2(1.0, 2.0)
    assert world.snapshot()["powerUp"] == {"x": 1.0, "y": 2.0}
