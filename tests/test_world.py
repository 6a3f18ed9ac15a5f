import random

import pytest

from snakeworld.components import Follows, Position
from snakeworld.world import World


def make_world(width=30, height=20, seed=1):
    return World(width, height, random.Random(seed))


def test_entity_ids_start_at_zero_and_increase():
    world = make_world()
    ids = [world.create_entity() for _ in range(3)]
    assert ids == [0, 1, 2]
    assert world.entities == set(ids)


def test_spawn_head():
    world = make_world()
    head = world.spawn_head()
    assert world.positions[head] == Position(2, 3)
    assert (world.velocities[head].dx, world.velocities[head].dy) == (0, 1)
    assert head in world.controllables
    assert world.renderables[head].symbol == "%"


def test_follower_trails_head():
    world = make_world()
    head = world.spawn_head()
    seg = world.spawn_follower()
    assert world.followers[seg] == Follows(head)
    assert world.positions[seg] == world.positions[head].moved(-1, -1)
    assert world.renderables[seg].symbol == "+"


def test_followers_chain_to_newest_segment():
    world = make_world()
    world.spawn_head()
    first = world.spawn_follower()
    world.spawn_food()
    second = world.spawn_follower()
    assert world.followers[second] == Follows(first)
    assert world.positions[second] == world.positions[first].moved(-1, -1)


def test_follower_without_leader_position_has_no_position():
    world = make_world()
    seg = world.spawn_follower()
    assert world.followers[seg] == Follows(0)
    assert seg not in world.positions


def test_remove_entity_clears_all_components():
    world = make_world()
    head = world.spawn_head()
    world.growing.add(head)
    world.remove_entity(head)
    assert head not in world.entities
    assert head not in world.positions
    assert head not in world.velocities
    assert head not in world.controllables
    assert head not in world.growing
    assert head not in world.colliders
    assert head not in world.renderables


@pytest.mark.parametrize("seed", range(20))
def test_food_lands_on_free_interior_cell(seed):
    world = make_world(8, 6, seed)
    world.spawn_head()
    world.spawn_follower()
    food = world.spawn_food()
    pos = world.positions[food]
    assert 1 <= pos.x < world.field_width - 1
    assert 1 <= pos.y < world.field_height - 1
    snake = {world.positions[e] for e in world.controllables | set(world.followers)}
    assert pos not in snake
    assert food in world.edibles
    assert world.renderables[food].symbol == "@"


def test_food_not_placed_when_interior_is_full():
    world = make_world(3, 3)
    head = world.spawn_head()
    world.positions[head] = Position(1, 1)
    assert world.spawn_food() is None
    assert not world.edibles


def test_food_not_placed_when_field_is_full():
    world = make_world(2, 2)
    for x in range(2):
        for y in range(2):
            e = world.create_entity()
            world.controllables.add(e)
            world.positions[e] = Position(x, y)
    before = len(world.entities)
    assert world.spawn_food() is None
    assert len(world.entities) == before + 1
    assert not world.edibles


def test_food_id_is_consumed_even_without_room():
    world = make_world(3, 3)
    head = world.spawn_head()
    world.positions[head] = Position(1, 1)
    world.spawn_food()
    nxt = world.create_entity()
    assert nxt == head + 2