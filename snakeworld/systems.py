"""Systems that advance the snake world by one tick."""

from __future__ import annotations

from snakeworld.components import Direction, GameState, Position
from snakeworld.world import World

ESCAPE = "\x1b"

_KEY_DIRECTIONS = {
    "w": Direction.UP,
    "a": Direction.LEFT,
    "s": Direction.DOWN,
    "d": Direction.RIGHT,
}


class QuitRequested(Exception):
    """Raised when the player asks to leave the game."""


def movement_system(world: World) -> None:
    """Move body segments onto their leaders' cells, then move the heads."""
    leader_positions = {
        entity: world.positions[follows.leader]
        for entity, follows in world.followers.items()
        if follows.leader in world.positions
    }
    for entity, leader_pos in leader_positions.items():
        if entity in world.positions:
            world.positions[entity] = leader_pos

    for entity in world.controllables:
        velocity = world.velocities.get(entity)
        position = world.positions.get(entity)
        if velocity is not None and position is not None:
            world.positions[entity] = position.moved(velocity.dx, velocity.dy)


def eating_system(world: World) -> int:
    """Let heads eat food they stand on and grow; return the points gained."""
    contacts = [
        (head, food)
        for head in world.controllables
        for food in world.edibles
        if world.positions.get(head) == world.positions.get(food)
    ]
    for head, food in contacts:
        world.growing.add(head)
        world.remove_entity(food)
        world.spawn_food()

    gained = 0
    for entity in list(world.growing):
        world.spawn_follower()
        world.growing.discard(entity)
        gained += 1
    return gained


def _segments_overlap(world: World) -> bool:
    distinct = {world.positions[e] for e in world.followers if e in world.positions}
    return len(world.followers) != len(distinct)


def collision_system(world: World) -> GameState:
    """End the game on a body overlap; otherwise wrap entities around the walls."""
    if _segments_overlap(world):
        return GameState.GAME_OVER

    last_column = world.field_width - 1
    last_row = world.field_height - 1
    for entity, pos in list(world.positions.items()):
        x, y = pos.x, pos.y
        if x < 0:
            x = last_column
        elif x > last_column:
            x = 0
        if y < 0:
            y = last_row
        elif y > last_row:
            y = 0
        if (x, y) != (pos.x, pos.y):
            world.positions[entity] = Position(x, y)
    return GameState.PLAYING


def input_system(world: World, key: str | None) -> None:
    """Steer the heads with WASD; Escape raises QuitRequested."""
    if key is None:
        return
    for entity in world.controllables:
        velocity = world.velocities.get(entity)
        if velocity is None:
            continue
        if key == ESCAPE:
            raise QuitRequested
        direction = _KEY_DIRECTIONS.get(key.lower()) if len(key) == 1 else None
        if direction is None:
            return
        velocity.dx, velocity.dy = direction.delta