import math
import random

from nightraid.constants import GIFT_TEXTURES, EntityType, GiftType
from nightraid.entities import Bullet, Entity, Gift, World, dispatch_contact


class Recorder(Entity):
    def __init__(self, world, entity_type=EntityType.ENEMY):
        super().__init__(world, (0.0, 0.0))
        self.entity_type = entity_type
        self.collided = []
        self.bullets = []
        self.gifts = []

    def on_collide(self, other):
        self.collided.append(other)

    def hit_by_bullet(self, bullet):
        self.bullets.append(bullet)

    def touched_gift(self, gift):
        self.gifts.append(gift)


class FakePlayer(Recorder):
    def __init__(self, world):
        super().__init__(world, EntityType.PLAYER)

    def on_collide(self, other):
        other.touched_by_player(self)


class ScriptedRng:
    def __init__(self, values):
        self.values = list(values)

    def randrange(self, stop):
        value = self.values.pop(0)
        assert 0 <= value < stop
        return value


def test_dispatch_contact_calls_both_sides():
    world = World()
    a, b = Recorder(world), Recorder(world)
    dispatch_contact(a, b)
    assert a.collided == [b]
    assert b.collided == [a]


def test_dispatch_contact_ignores_missing_entity():
    a = Recorder(World())
    dispatch_contact(a, None)
    dispatch_contact(None, a)
    assert a.collided == []


def test_bullet_hits_other_side_and_is_destroyed():
    world = World()
    shooter = Recorder(world, EntityType.PLAYER)
    target = Recorder(world, EntityType.ENEMY)
    bullet = Bullet(world, (0, 0), (1, 0), shooter, 10, 200)
    bullet.on_collide(target)
    assert bullet.destroyed
    assert target.bullets == [bullet]


def test_bullet_passes_through_same_side_but_still_reports():
    world = World()
    shooter = Recorder(world, EntityType.ENEMY)
    ally = Recorder(world, EntityType.ENEMY)
    bullet = Bullet(world, (0, 0), (1, 0), shooter, 10, 200)
    bullet.on_collide(ally)
    assert not bullet.destroyed
    assert ally.bullets == [bullet]


def test_bullet_ignores_its_owner():
    world = World()
    shooter = Recorder(world, EntityType.PLAYER)
    bullet = Bullet(world, (0, 0), (1, 0), shooter, 10, 200)
    bullet.on_collide(shooter)
    assert not bullet.destroyed
    assert shooter.bullets == []


def test_bullet_of_vanished_owner_does_nothing():
    world = World()
    shooter = Recorder(world, EntityType.PLAYER)
    target = Recorder(world)
    bullet = Bullet(world, (0, 0), (1, 0), shooter, 10, 200)
    del shooter
    assert bullet.owner is None
    bullet.on_collide(target)
    assert target.bullets == []
    assert not bullet.destroyed


def test_bullet_range_is_shortened_by_muzzle_offset():
    bullet = Bullet(World(), (0, 0), (0, 1), None, 5, 300)
    assert bullet.range == 300 - 50
    assert bullet.entity_type == EntityType.BULLET


def test_bullet_travels_until_out_of_range():
    bullet = Bullet(World(), (10, 20), (0.6, 0.8), None, 5, 150)
    steps = 0
    while not bullet.destroyed:
        travelled = math.hypot(bullet.position[0] - 10, bullet.position[1] - 20)
        assert travelled <= bullet.range
        bullet.update(0.01)
        steps += 1
        assert steps < 10_000
    travelled = math.hypot(bullet.position[0] - 10, bullet.position[1] - 20)
    assert travelled > bullet.range
    frozen = bullet.position
    bullet.update(1.0)
    assert bullet.position == frozen


def test_gift_type_thresholds():
    assert Gift.generate_type(ScriptedRng([0])) == GiftType.ARMOR
    assert Gift.generate_type(ScriptedRng([29])) == GiftType.ARMOR
    assert Gift.generate_type(ScriptedRng([30])) == GiftType.HEALTH
    assert Gift.generate_type(ScriptedRng([59])) == GiftType.HEALTH
    assert Gift.generate_type(ScriptedRng([60, 0])) == GiftType.ENEMYSPEEDDOWN
    assert Gift.generate_type(ScriptedRng([99, 3])) == GiftType.VISIONUP


def test_random_gifts_cover_every_type():
    rng = random.Random(7)
    seen = {Gift.generate_type(rng) for _ in range(500)}
    assert seen == set(GiftType)


def test_gift_uses_texture_of_its_type():
    gift = Gift(World(), (5, 5), ScriptedRng([40]))
    assert gift.type == GiftType.HEALTH
    assert gift.texture == GIFT_TEXTURES[GiftType.HEALTH]


def test_player_picks_up_gift():
    world = World()
    player = FakePlayer(world)
    gift = Gift(world, (0, 0), ScriptedRng([0]))
    dispatch_contact(player, gift)
    assert gift.destroyed
    assert not gift.visible
    assert player.gifts == [gift]


def test_enemy_does_not_pick_up_gift():
    world = World()
    enemy = Recorder(world)
    gift = Gift(world, (0, 0), ScriptedRng([0]))
    gift.on_collide(enemy)
    assert enemy.gifts == [gift]
    assert not gift.destroyed


def test_gift_glow_stays_within_pulse_bounds():
    gift = Gift(World(), (0, 0), ScriptedRng([0]))
    for _ in range(200):
        gift.update(0.05)
        assert 0.1 - 1e-9 <= gift.light_intensity <= 0.5 + 1e-9
        assert 30.0 - 1e-9 <= gift.light_range <= 70.0 + 1e-9


def test_world_lists_enemies_and_drops_destroyed():
    world = World()
    enemy = world.add(Recorder(world, EntityType.ENEMY))
    spy = world.add(Recorder(world, EntityType.SPY))
    player = world.add(Recorder(world, EntityType.PLAYER))
    bullet = Bullet(world, (0, 0), (1, 0), player, 1, 60)
    world.add_bullets([bullet])
    assert world.enemies == [enemy, spy]
    world.update(1.0)
    assert bullet not in world.entities
    assert world.entities == [enemy, spy, player]