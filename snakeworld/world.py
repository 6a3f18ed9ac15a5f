"""Entity storage for the snake game."""

from __future__ import annotations

import random
from itertools import product

from snakeworld.components import (
    Collider,
    Color,
    Entity,
    Follows,
    Position,
    Renderable,
    Velocity,
)


class World:
    """Holds every entity of a game and the components attached to them."""

    def __init__(
        self,
        field_width: int,
        field_height: int,
        rng: random.Random | None = None,
    ) -> None:
        self.field_width = field_width
        self.field_height = field_height
        self._rng = rng if rng is not None else random.Random()
        self._next_entity: Entity = 0
        self.entities: set[Entity] = set()
        self.positions: dict[Entity, Position] = {}
        self.velocities: dict[Entity, Velocity] = {}
        self.followers: dict[Entity, Follows] = {}
        self.controllables: set[Entity] = set()
        self.growing: set[Entity] = set()
        self.edibles: set[Entity] = set()
        self.colliders: dict[Entity, Collider] = {}
        self.renderables: dict[Entity, Renderable] = {}

    def create_entity(self) -> Entity:
        """Allocate a fresh entity id."""
        entity = self._next_entity
        self._next_entity += 1
        self.entities.add(entity)
        return entity

    def remove_entity(self, entity: Entity) -> None:
        """Drop an entity and every component it carries."""
        self.entities.discard(entity)
        self.positions.pop(entity, None)
        self.velocities.pop(entity, None)
        self.followers.pop(entity, None)
        self.controllables.discard(entity)
        self.growing.discard(entity)
        self.edibles.discard(entity)
        self.colliders.pop(entity, None)
        self.renderables.pop(entity, None)

    def spawn_head(self) -> Entity:
        """Create the controllable snake head, heading down."""
        head = self.create_entity()
        self.velocities[head] = Velocity(0, 1)
        self.controllables.add(head)
        self.positions[head] = Position(2, 3)
        self.colliders[head] = Collider(1, 1)
        self.renderables[head] = Renderable(1, 1, "%", Color.DARK_GREEN)
        return head

    def spawn_follower(self) -> Entity:
        """Append a body segment trailing the newest segment (or entity 0)."""
        entity = self.create_entity()
        leader = max(self.followers, default=0)
        self.followers[entity] = Follows(leader)
        self.colliders[entity] = Collider(1, 1)
        self.renderables[entity] = Renderable(1, 1, "+", Color.GREEN)
        leader_pos = self.positions.get(leader)
        if leader_pos is not None:
            self.positions[entity] = leader_pos.moved(-1, -1)
        return entity

    def _snake_cells(self) -> set[Position]:
        return {
            pos
            for entity, pos in self.positions.items()
            if entity in self.controllables or entity in self.followers
        }

    def spawn_food(self) -> Entity | None:
        """Place food on a random free interior cell.

        Returns the food entity, or None when there is no room for it.
        """
        food = self.create_entity()
        occupied = self._snake_cells()
        occupied_count = sum(
            1
            for entity in self.positions
            if entity in self.controllables or entity in self.followers
        )
        if occupied_count == self.field_width * self.field_height:
            return None
        interior = product(range(1, self.field_width - 1), range(1, self.field_height - 1))
        if all(Position(x, y) in occupied for x, y in interior):
            return None
        while True:
            x = self._rng.randrange(1, self.field_width - 1)
            y = self._rng.randrange(1, self.field_height - 1)
            position = Position(x, y)
            if position not in occupied:
                break
        self.positions[food] = position
        self.edibles.add(food)
        self.renderables[food] = Renderable(1, 1, "@", Color.RED)
        return food