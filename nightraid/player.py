"""The character the user controls."""

from __future__ import annotations

import math
from typing import Callable

from .bars import ArmorBar, Color
from .characters import Character, Enemy, _distance
from .constants import EntityType, GiftType, weapon_data
from .entities import Bullet, Entity, Gift, World
from .session import GameSession

DEATH_SOUND = "Sounds/charcter_death.ogg"
HEARTBEAT_SOUND = "Sounds/heartbeat_sound.ogg"
SHIELD_SOUND = "Sounds/shield_sound.ogg"
HEALTH_SOUND = "Sounds/hp_sound.ogg"
SPEEDUP_SOUND = "Sounds/speedup.ogg"
VISIONUP_SOUND = "Sounds/vision_up.ogg"
SPEEDDOWN_SOUND = "Sounds/speeddown.ogg"
SPY_SOUND = "Sounds/spy.ogg"

_MAX_HEALTH = 100.0
_MAX_ARMOR = 50.0
_HEAL_AMOUNT = 30.0
_ARMOR_AMOUNT = 30.0
_SPEED_STEP = 0.5
_MAX_SPEED = 16.0
_START_SPEED = 9.0
_HEARTBEAT_HEALTH = 50.0
_ARMOR_BAR_OFFSET = 30.0
_VISION_BOOST_RANGE = 100.0
_VISION_BOOST_SECONDS = 10.0
_ENEMY_SLOWDOWN_SECONDS = 10.0
_SPY_SECONDS = 20.0


class Player(Character):
    """The player: armour over health, gift pickups and a weapon from the session.

    ``play_sound`` is called with the name of each one-shot sound effect;
    ``heartbeat_playing`` tells whether the low-health heartbeat should loop.
    """

    entity_type = EntityType.PLAYER

    def __init__(
        self,
        world: World,
        position: tuple[float, float],
        session: GameSession | None = None,
        play_sound: Callable[[str], None] | None = None,
    ) -> None:
        self.session = session if session is not None else GameSession()
        super().__init__(world, position, self.session.selected_weapon)
        self.entity_type = EntityType.PLAYER
        self.light_color = Color.GREEN
        self.armor = 0.0
        self.armor_bar = ArmorBar(50.0, 5.0, _MAX_ARMOR)
        self.speed = _START_SPEED
        self.alive = True
        self.heartbeat_playing = False
        self.vision_boost_active = False
        self.vision_boost_timer = 0.0
        self.original_vision_range = self.vision_range
        self._play_sound = play_sound
        self._gift_handlers: dict[GiftType, Callable[[], None]] = {
            GiftType.ARMOR: self._armor_gift,
            GiftType.HEALTH: self._health_gift,
            GiftType.SPEEDUP: self._speed_gift,
            GiftType.VISIONUP: self._vision_gift,
            GiftType.ENEMYSPEEDDOWN: self._enemy_slowdown_gift,
            GiftType.SPY: self._spy_gift,
        }

    def _sound(self, name: str) -> None:
        if self._play_sound is not None:
            self._play_sound(name)

    def _equip_selected_weapon(self) -> None:
        self.weapon = self.session.selected_weapon
        self.light_color = Color.GREEN
        move = weapon_data(self.weapon).move_anim
        self.animation.reset(None, move.frame_size, move.speed)
        self.texture = move.texture
        self.session.acknowledge_weapon_change()

    def update(self, delta_time: float) -> None:
        if self.session.should_update_weapon:
            self._equip_selected_weapon()

        super().update(delta_time)

        self.armor_bar.position = (self.position[0], self.position[1] + _ARMOR_BAR_OFFSET)
        self.armor_bar.set_value(self.armor)

        if self.health >= _HEARTBEAT_HEALTH:
            self.heartbeat_playing = False
        elif self.health > 0:
            self.heartbeat_playing = True

        if self.vision_boost_active:
            self.vision_boost_timer -= delta_time
            if self.vision_boost_timer <= 0.0:
                self.vision_range = self.original_vision_range
                self.vision_boost_active = False

    def take_damage(self, damage: float) -> None:
        """Lose armour first, then health; die when health runs out."""
        damage = int(damage)
        if self.armor > 0:
            absorbed = min(self.armor, float(damage))
            self.armor -= absorbed
            damage -= int(absorbed)
        if damage > 0:
            self.health -= damage
            self.session.health = self.health
            if self.health < 0.0:
                self.health = 0.0
        if self.health <= 0.0:
            self.destroyed = True
            self.alive = False
            self._sound(DEATH_SOUND)
        self.health_bar.set_value(self.health)
        self.armor_bar.set_value(self.armor)

    def add_health(self) -> None:
        self.health = min(self.health + _HEAL_AMOUNT, _MAX_HEALTH)
        self.health_bar.set_value(self.health)
        self.session.health = self.health

    def add_armor(self) -> None:
        self.armor = min(self.armor + _ARMOR_AMOUNT, _MAX_ARMOR)
        self.armor_bar.set_value(self.armor)

    def add_speed(self) -> None:
        self.speed = min(self.speed + _SPEED_STEP, _MAX_SPEED)

    def increase_vision_temporarily(self, extra_range: float, duration: float) -> None:
        """Widen the vision range for ``duration`` seconds; no stacking."""
        if self.vision_boost_active:
            return
        self.original_vision_range = self.vision_range
        self.vision_range = self.original_vision_range + extra_range
        self.vision_boost_timer = duration
        self.vision_boost_active = True

    def rotate_toward(self, point: tuple[float, float]) -> None:
        """Face a point in world coordinates."""
        dx = point[0] - self.position[0]
        dy = point[1] - self.position[1]
        self.set_rotation(math.degrees(math.atan2(dy, dx)))

    def choose_target(self) -> None:
        """Reveal everything seen and aim at the nearest non-spy enemy."""
        for character in self.seen:
            character.visible = True
        candidates = [
            c for c in self.seen
            if c.visible and isinstance(c, Enemy) and not c.is_spy
        ]
        self.target = min(
            candidates,
            key=lambda c: _distance(c.position, self.position),
            default=None,
        )

    def on_collide(self, other: Entity) -> None:
        other.touched_by_player(self)

    def touched_gift(self, gift: Gift) -> None:
        handler = self._gift_handlers.get(gift.type)
        if handler is not None:
            handler()

    def hit_by_bullet(self, bullet: Bullet) -> None:
        shooter = bullet.owner
        if shooter is None or shooter is self:
            return
        if shooter.entity_type == EntityType.ENEMY:
            self.take_damage(bullet.damage)

    def _armor_gift(self) -> None:
        self.add_armor()
        self._sound(SHIELD_SOUND)

    def _health_gift(self) -> None:
        self.add_health()
        self._sound(HEALTH_SOUND)

    def _speed_gift(self) -> None:
        self.add_speed()
        self._sound(SPEEDUP_SOUND)

    def _vision_gift(self) -> None:
        self.increase_vision_temporarily(_VISION_BOOST_RANGE, _VISION_BOOST_SECONDS)
        self._sound(VISIONUP_SOUND)

    def _enemy_slowdown_gift(self) -> None:
        for enemy in self.world.enemies:
            if isinstance(enemy, Enemy):
                enemy.speed_down()
                enemy.set_speed_down_timer(_ENEMY_SLOWDOWN_SECONDS)
                self._sound(SPEEDDOWN_SOUND)

    def _spy_gift(self) -> None:
        for enemy in self.world.enemies:
            if isinstance(enemy, Enemy) and not enemy.is_spy:
                enemy.set_spy(True, _SPY_SECONDS)
                self._sound(SPY_SOUND)
                break