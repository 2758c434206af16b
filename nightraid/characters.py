"""Characters that see, pick targets and take damage, and the enemies among them."""

from __future__ import annotations

import math
import random
import weakref
from typing import Protocol

from .animation import Animation
from .bars import Color, HealthBar
from .constants import EntityType, WeaponType, weapon_data
from .entities import Bullet, Entity, World

_HEALTH_BAR_OFFSET = 40.0


class _RandRange(Protocol):
    def randrange(self, stop: int) -> int: ...


def _distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


class Character(Entity):
    """An entity with health, a weapon, a vision cone and a current target.

    ``rotation`` is in degrees; the vision cone is centred on it and spans
    ``beam_angle`` degrees out to ``vision_range`` pixels.
    """

    radius = 1.0
    vision_range = 300.0
    beam_angle = 60.0
    max_health = 100.0

    def __init__(
        self,
        world: World,
        position: tuple[float, float],
        weapon: WeaponType = WeaponType.HANDGUN,
    ) -> None:
        super().__init__(world, position)
        self.health = self.max_health
        self.speed = 0.0
        self.rotation = 0.0
        self.weapon = weapon
        self.weapon_light_range = self.vision_range
        self.health_bar = HealthBar(50.0, 5.0, self.max_health)
        self.seen: list[Character] = []
        self._target: weakref.ref[Character] | None = None
        move = weapon_data(weapon).move_anim
        self.texture = move.texture
        self.animation = Animation(None, move.frame_size, move.speed)

    @property
    def target(self) -> Character | None:
        """The character being aimed at, or None once it is gone."""
        return self._target() if self._target is not None else None

    @target.setter
    def target(self, value: Character | None) -> None:
        self._target = weakref.ref(value) if value is not None else None

    def set_rotation(self, angle: float) -> None:
        """Face the given direction, in degrees."""
        self.rotation = float(angle)

    def can_see(self, other: Entity) -> bool:
        """True if ``other`` lies inside this character's vision cone."""
        dx = other.position[0] - self.position[0]
        dy = other.position[1] - self.position[1]
        distance = math.hypot(dx, dy)
        if distance > self.vision_range:
            return False
        if distance == 0.0:
            return True
        bearing = math.degrees(math.atan2(dy, dx))
        offset = (bearing - self.rotation + 180.0) % 360.0 - 180.0
        return abs(offset) <= self.beam_angle / 2.0

    def update_targets(self) -> None:
        """Collect the other live characters inside the vision cone."""
        self.seen = [
            entity
            for entity in self.world.entities
            if isinstance(entity, Character)
            and entity is not self
            and not entity.destroyed
            and self.can_see(entity)
        ]

    def choose_target(self) -> None:
        """Pick a target from what is seen; subclasses decide how."""

    def update(self, delta_time: float) -> None:
        self.update_targets()
        self.choose_target()
        self.health_bar.position = (self.position[0], self.position[1] + _HEALTH_BAR_OFFSET)
        self.health_bar.set_value(self.health)


_OTHER_WEAPONS = tuple(w for w in WeaponType if w is not WeaponType.HANDGUN)

_FOOTSTEP_DISTANCE = 1050.0
_FOOTSTEP_MAX_INTERVAL = 1.0
_FOOTSTEP_MIN_INTERVAL = 0.25
_FOOTSTEP_MAX_VOLUME = 110.0
_FOOTSTEP_MIN_VOLUME = 60.0
_HIDE_DELAY = 0.2
_MIN_SPEED = 4.0
_SPEED_STEP = 0.2


class Enemy(Character):
    """A computer-controlled character that can be turned into a spy."""

    entity_type = EntityType.ENEMY

    def __init__(
        self,
        world: World,
        position: tuple[float, float],
        rng: _RandRange | None = None,
    ) -> None:
        super().__init__(world, position, self.generate_weapon_type(rng))
        self.entity_type = EntityType.ENEMY
        self.speed = self.original_speed = 7.0
        self.visible = False
        self.is_spy = False
        self.spy_timer = 0.0
        self.speed_down_timer = 0.0
        self.hide_delay_timer = 0.0
        self.footstep_timer = 0.0
        self.footstep_interval = _FOOTSTEP_MAX_INTERVAL
        self.light_color = Color.RED

    @staticmethod
    def generate_weapon_type(rng: _RandRange | None = None) -> WeaponType:
        """A handgun 70% of the time, otherwise one of the other weapons."""
        source = rng if rng is not None else random
        if source.randrange(100) < 70:
            return WeaponType.HANDGUN
        return _OTHER_WEAPONS[source.randrange(len(_OTHER_WEAPONS))]

    def choose_target(self) -> None:
        current = self.target
        if current is not None:
            if any(c is current for c in self.seen):
                return
            if _distance(current.position, self.position) <= self.weapon_light_range:
                return
        if not self.seen:
            self.target = None
            return

        closest: Character | None = None
        min_dist = math.inf
        for candidate in self.seen:
            if isinstance(candidate, Enemy) and candidate.is_spy == self.is_spy:
                continue
            if candidate.entity_type == EntityType.PLAYER and self.is_spy:
                continue
            dist = _distance(candidate.position, self.position)
            if dist < min_dist:
                if (
                    closest is not None
                    and closest.entity_type == EntityType.PLAYER
                    and not self.is_spy
                ):
                    continue
                min_dist = dist
                closest = candidate
        self.target = closest

    def take_damage(self, damage: float) -> None:
        """Lose health, never going below zero."""
        if self.health > 0:
            self.health = max(self.health - damage, 0.0)
            self.health_bar.set_value(self.health)

    def update(self, delta_time: float) -> None:
        target = self.target
        if target is not None and target.entity_type == self.entity_type:
            self.target = None

        super().update(delta_time)

        if self.target is not None or self.is_spy:
            self.visible = True
            self.hide_delay_timer = _HIDE_DELAY
        elif self.hide_delay_timer > 0.0:
            self.hide_delay_timer -= delta_time
            if self.hide_delay_timer <= 0.0:
                self.visible = False

        if self.health <= 0.0:
            self.destroyed = True
            return

        if self.is_spy:
            self.spy_timer -= delta_time
            if self.spy_timer <= 0.0:
                self.set_spy(False)

        if self.speed_down_timer > 0.0:
            self.speed_down_timer -= delta_time
            if self.speed_down_timer <= 0.0:
                self.speed = self.original_speed

        self.light_color = Color.BLUE if self.is_spy else Color.RED

    def speed_down(self) -> None:
        """Slow down by one step, but not below the minimum speed."""
        self.speed = max(self.speed - _SPEED_STEP, _MIN_SPEED)

    def set_speed_down_timer(self, seconds: float) -> None:
        """Slow down now and recover the original speed after ``seconds``."""
        self.speed_down()
        self.speed_down_timer = seconds

    def set_spy(self, value: bool, seconds: float = 0.0) -> None:
        """Turn spy mode on for ``seconds``, or off."""
        self.entity_type = EntityType.SPY if value else EntityType.ENEMY
        self.is_spy = value
        self.visible = value
        self.spy_timer = seconds
        self.target = None

    def footstep_volume(self, distance_to_player: float, delta_time: float) -> float | None:
        """Advance the footstep clock; return a volume when a step should sound.

        Steps come faster and louder the nearer the player is, and are silent
        beyond the hearing distance or while in spy mode.
        """
        if self.is_spy:
            return None
        normalized = min(max(distance_to_player / _FOOTSTEP_DISTANCE, 0.0), 1.0)
        self.footstep_interval = (
            _FOOTSTEP_MIN_INTERVAL
            + (_FOOTSTEP_MAX_INTERVAL - _FOOTSTEP_MIN_INTERVAL) * normalized
        )
        self.footstep_timer += delta_time
        if self.footstep_timer >= self.footstep_interval and distance_to_player <= _FOOTSTEP_DISTANCE:
            self.footstep_timer = 0.0
            return _FOOTSTEP_MAX_VOLUME - (_FOOTSTEP_MAX_VOLUME - _FOOTSTEP_MIN_VOLUME) * normalized
        return None

    def hit_by_bullet(self, bullet: Bullet) -> None:
        shooter = bullet.owner
        if shooter is None or shooter is self:
            return
        if self.entity_type != shooter.entity_type:
            self.take_damage(bullet.damage)
            if isinstance(shooter, Character) and self.target is not shooter:
                self.target = shooter