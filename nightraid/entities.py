"""Game world objects, bullets, gifts and collision dispatch."""

from __future__ import annotations

import math
import random
import weakref
from typing import Iterable, Protocol

from .bars import Color
from .constants import (
    BULLET_TEXTURE,
    GIFT_TEXTURES,
    PIXELS_PER_METER,
    EntityType,
    GiftType,
)


class World:
    """Holds the live entities of a level."""

    def __init__(self) -> None:
        self.entities: list[Entity] = []

    def add(self, entity: Entity) -> Entity:
        self.entities.append(entity)
        return entity

    def add_bullets(self, bullets: Iterable[Bullet]) -> None:
        self.entities.extend(bullets)

    @property
    def enemies(self) -> list[Entity]:
        """Entities that are enemies, including those turned spy."""
        return [e for e in self.entities if e.entity_type in (EntityType.ENEMY, EntityType.SPY)]

    def update(self, delta_time: float) -> None:
        """Update every entity, then drop the destroyed ones."""
        for entity in list(self.entities):
            entity.update(delta_time)
        self.remove_destroyed()

    def remove_destroyed(self) -> None:
        self.entities = [e for e in self.entities if not e.destroyed]


class Entity:
    """Something with a position in the world that can collide.

    Positions are in pixels; velocities are in metres per second.
    Collisions use double dispatch: ``on_collide`` calls the handler on the
    other entity that matches this entity's kind. The default handlers only
    remember the last entity that touched this one.
    """

    entity_type: EntityType | None = None
    radius: float = 1.0
    is_sensor: bool = False

    def __init__(self, world: World, position: tuple[float, float]) -> None:
        self.world = world
        self.position = (float(position[0]), float(position[1]))
        self.initial_position = self.position
        self.velocity = (0.0, 0.0)
        self.visible = True
        self.destroyed = False
        self.texture: str | None = None
        self.last_contact: Entity | None = None

    def on_collide(self, other: Entity) -> None:
        """First dispatch: tell ``other`` what it touched."""

    def hit_by_bullet(self, bullet: Bullet) -> None:
        """A bullet touched this entity."""
        self.last_contact = bullet

    def touched_by_player(self, player: Entity) -> None:
        """The player touched this entity."""
        self.last_contact = player

    def touched_gift(self, gift: Gift) -> None:
        """This entity touched a gift."""
        self.last_contact = gift

    def update(self, delta_time: float) -> None:
        """Advance the entity by one frame."""


class _Owner(Protocol):
    entity_type: EntityType | None


class Bullet(Entity):
    """A fast sensor that travels in a straight line up to its range."""

    entity_type = EntityType.BULLET
    radius = 0.3
    is_sensor = True

    def __init__(
        self,
        world: World,
        position: tuple[float, float],
        direction: tuple[float, float],
        owner: Entity | None,
        damage: float,
        range: float,
        speed: float = 30.0,
    ) -> None:
        super().__init__(world, position)
        self.direction = (float(direction[0]), float(direction[1]))
        self._owner = weakref.ref(owner) if owner is not None else None
        self.damage = damage
        self.range = range - 50
        self.speed = speed
        self.texture = BULLET_TEXTURE

    @property
    def owner(self) -> Entity | None:
        """The shooter, or None once it is gone."""
        return self._owner() if self._owner is not None else None

    def update(self, delta_time: float) -> None:
        if self.destroyed:
            return
        self.velocity = (self.direction[0] * self.speed, self.direction[1] * self.speed)
        step = delta_time * PIXELS_PER_METER
        self.position = (
            self.position[0] + self.velocity[0] * step,
            self.position[1] + self.velocity[1] * step,
        )
        travelled = math.hypot(
            self.position[0] - self.initial_position[0],
            self.position[1] - self.initial_position[1],
        )
        if travelled > self.range:
            self.destroyed = True

    def on_collide(self, other: Entity) -> None:
        shooter = self.owner
        if shooter is None or shooter is other:
            return
        if shooter.entity_type != other.entity_type:
            self.destroyed = True
        other.hit_by_bullet(self)


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


_RARE_GIFTS = tuple(g for g in GiftType if g not in (GiftType.ARMOR, GiftType.HEALTH))


class Gift(Entity):
    """A pickup with a pulsing glow that disappears when the player takes it."""

    entity_type = EntityType.GIFT
    radius = 0.6
    is_sensor = True

    def __init__(
        self,
        world: World,
        position: tuple[float, float],
        rng: _RandRange | None = None,
    ) -> None:
        super().__init__(world, position)
        self.type = self.generate_type(rng)
        self.texture = GIFT_TEXTURES[self.type]
        self.light_color = Color.GREEN
        self.light_range = 50.0
        self.light_intensity = 0.3
        self.pulse_time = 0.0

    @staticmethod
    def generate_type(rng: _RandRange | None = None) -> GiftType:
        """Armour and health 30% each; the rest shared among the others."""
        source = rng if rng is not None else random
        chance = source.randrange(100)
        if chance < 30:
            return GiftType.ARMOR
        if chance < 60:
            return GiftType.HEALTH
        return _RARE_GIFTS[source.randrange(len(_RARE_GIFTS))]

    def update(self, delta_time: float) -> None:
        self.pulse_time += delta_time
        pulse = math.sin(self.pulse_time * 2.0)
        self.light_intensity = 0.3 + 0.2 * pulse
        self.light_range = 50.0 + 20.0 * pulse

    def on_collide(self, other: Entity) -> None:
        other.touched_gift(self)

    def touched_by_player(self, player: Entity) -> None:
        self.last_contact = player
        self.visible = False
        self.destroyed = True


def dispatch_contact(first: Entity | None, second: Entity | None) -> None:
    """Let each of two touching entities handle the other."""
    if first is None or second is None:
        return
    first.on_collide(second)
    second.on_collide(first)