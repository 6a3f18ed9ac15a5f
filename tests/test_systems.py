import random

import pytest

from snakeworld.components import Direction, GameState, Position
from snakeworld.systems import (
    ESCAPE,
    QuitRequested,
    collision_system,
    eating_system,
    input_system,
    movement_system,
)
from snakeworld.world import World


def make_snake(width=30, height=20, segments=1, seed=3):
    world = World(width, height, random.Random(seed))
    head = world.spawn_head()
    segs = [world.spawn_follower() for _ in range(segments)]
    return world, head, segs


def test_head_moves_by_velocity():
    world, head, _ = make_snake()
    before = world.positions[head]
    vel = world.velocities[head]
    movement_system(world)
    assert world.positions[head] == before.moved(vel.dx, vel.dy)


def test_segments_take_leaders_previous_cells():
    world, head, segs = make_snake(segments=3)
    before = dict(world.positions)
    movement_system(world)
    assert world.positions[segs[0]] == before[head]
    assert world.positions[segs[1]] == before[segs[0]]
    assert world.positions[segs[2]] == before[segs[1]]


def test_eating_grows_snake_and_respawns_food():
    world, head, segs = make_snake()
    food = world.create_entity()
    world.edibles.add(food)
    world.positions[food] = world.positions[head]
    followers_before = len(world.followers)
    gained = eating_system(world)
    assert gained == 1
    assert food not in world.entities
    assert len(world.followers) == followers_before + 1
    assert len(world.edibles) == 1
    assert not world.growing


def test_no_contact_means_no_growth():
    world, head, _ = make_snake()
    food = world.spawn_food()
    assert world.positions[food] != world.positions[head]
    followers_before = len(world.followers)
    assert eating_system(world) == 0
    assert len(world.followers) == followers_before
    assert food in world.edibles


def test_collision_wraps_left_and_top():
    world, head, segs = make_snake(segments=0)
    world.positions[head] = Position(-1, -1)
    assert collision_system(world) == GameState.PLAYING
    assert world.positions[head] == Position(world.field_width - 1, world.field_height - 1)


def test_collision_wraps_right_and_bottom():
    world, head, _ = make_snake(segments=0)
    world.positions[head] = Position(world.field_width, world.field_height)
    assert collision_system(world) == GameState.PLAYING
    assert world.positions[head] == Position(0, 0)


def test_in_bounds_positions_untouched():
    world, head, segs = make_snake()
    before = dict(world.positions)
    assert collision_system(world) == GameState.PLAYING
    assert world.positions == before


def test_overlapping_segments_end_game():
    world, head, segs = make_snake(segments=2)
    world.positions[segs[1]] = world.positions[segs[0]]
    assert collision_system(world) == GameState.GAME_OVER


@pytest.mark.parametrize(
    "key,direction",
    [
        ("w", Direction.UP),
        ("W", Direction.UP),
        ("a", Direction.LEFT),
        ("A", Direction.LEFT),
        ("s", Direction.DOWN),
        ("d", Direction.RIGHT),
        ("D", Direction.RIGHT),
    ],
)
def test_keys_steer_head(key, direction):
    world, head, _ = make_snake()
    input_system(world, key)
    vel = world.velocities[head]
    assert (vel.dx, vel.dy) == direction.delta


@pytest.mark.parametrize("key", [None, "x", "ww"])
def test_other_keys_leave_velocity(key):
    world, head, _ = make_snake()
    input_system(world, key)
    vel = world.velocities[head]
    assert (vel.dx, vel.dy) == Direction.DOWN.delta


def test_escape_requests_quit():
    world, _, _ = make_snake()
    with pytest.raises(QuitRequested):
        input_system(world, ESCAPE)