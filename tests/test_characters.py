import pytest

from nightraid.bars import Color
from nightraid.characters import Character, Enemy
from nightraid.constants import EntityType, WeaponType
from nightraid.entities import Bullet, World, dispatch_contact


class _SeqRng:
    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value


class _Hero(Character):
    entity_type = EntityType.PLAYER


def _enemy(world, pos=(0.0, 0.0)):
    return world.add(Enemy(world, pos, rng=_SeqRng([0])))


@pytest.mark.parametrize(
    "values, expected",
    [
        ([0], WeaponType.HANDGUN),
        ([69], WeaponType.HANDGUN),
        ([70, 0], WeaponType.RIFLE),
        ([99, 1], WeaponType.SHOTGUN),
        ([85, 2], WeaponType.SNIPER),
    ],
)
def test_generate_weapon_type(values, expected):
    assert Enemy.generate_weapon_type(_SeqRng(values)) == expected


def test_generate_weapon_type_never_random_handgun_in_rare_branch():
    results = {Enemy.generate_weapon_type(_SeqRng([80, i])) for i in range(3)}
    assert WeaponType.HANDGUN not in results
    assert len(results) == 3


def test_new_enemy_defaults():
    enemy = _enemy(World())
    assert enemy.weapon == WeaponType.HANDGUN
    assert enemy.speed == enemy.original_speed == 7.0
    assert enemy.visible is False
    assert enemy.entity_type == EntityType.ENEMY
    assert enemy.health == 100.0


def test_take_damage_and_clamp():
    enemy = _enemy(World())
    enemy.take_damage(30)
    assert enemy.health == pytest.approx(70.0)
    assert enemy.health_bar.value == pytest.approx(70.0)
    enemy.take_damage(500)
    assert enemy.health == 0.0
    enemy.take_damage(10)
    assert enemy.health == 0.0


def test_dead_enemy_is_destroyed_on_update():
    world = World()
    enemy = _enemy(world)
    enemy.take_damage(100)
    world.update(0.016)
    assert enemy.destroyed
    assert enemy not in world.entities


def test_speed_down_has_floor():
    enemy = _enemy(World())
    enemy.speed_down()
    assert enemy.speed == pytest.approx(6.8)
    for _ in range(50):
        enemy.speed_down()
    assert enemy.speed == 4.0


def test_speed_down_timer_restores_speed():
    enemy = _enemy(World())
    enemy.set_speed_down_timer(1.0)
    assert enemy.speed < enemy.original_speed
    enemy.update(0.5)
    assert enemy.speed < enemy.original_speed
    enemy.update(0.6)
    assert enemy.speed == enemy.original_speed


def test_spy_mode_expires():
    enemy = _enemy(World())
    enemy.set_spy(True, 1.0)
    assert enemy.entity_type == EntityType.SPY
    assert enemy.visible
    enemy.update(0.5)
    assert enemy.is_spy
    assert enemy.light_color == Color.BLUE
    enemy.update(0.6)
    assert not enemy.is_spy
    assert enemy.entity_type == EntityType.ENEMY
    assert enemy.light_color == Color.RED


def test_footstep_volume_nearby():
    enemy = _enemy(World())
    assert enemy.footstep_volume(0.0, 0.1) is None
    assert enemy.footstep_volume(0.0, 0.2) == pytest.approx(110.0)
    assert enemy.footstep_timer == 0.0


def test_footstep_silent_far_away_and_for_spy():
    enemy = _enemy(World())
    assert enemy.footstep_volume(5000.0, 10.0) is None
    spy = _enemy(World())
    spy.set_spy(True, 5.0)
    assert spy.footstep_volume(0.0, 10.0) is None


def test_footstep_quieter_with_distance():
    near = _enemy(World())
    far = _enemy(World())
    near_volume = near.footstep_volume(100.0, 2.0)
    far_volume = far.footstep_volume(900.0, 2.0)
    assert near_volume > far_volume
    assert near.footstep_interval < far.footstep_interval


def test_enemy_targets_visible_player():
    world = World()
    enemy = _enemy(world)
    hero = world.add(_Hero(world, (100.0, 0.0)))
    enemy.update(0.016)
    assert enemy.target is hero
    assert enemy.visible


def test_enemy_ignores_player_behind():
    world = World()
    enemy = _enemy(world)
    world.add(_Hero(world, (-100.0, 0.0)))
    enemy.update(0.016)
    assert enemy.target is None
    assert enemy.visible is False


def test_set_rotation_turns_vision_cone():
    world = World()
    enemy = _enemy(world)
    hero = world.add(_Hero(world, (0.0, 100.0)))
    enemy.set_rotation(90)
    assert enemy.rotation == 90.0
    enemy.update(0.016)
    assert enemy.target is hero


def test_enemy_ignores_other_enemies_unless_spy():
    world = World()
    enemy = _enemy(world)
    other = _enemy(world, (100.0, 0.0))
    enemy.update(0.016)
    assert enemy.target is None
    other.set_spy(True, 10.0)
    enemy.update(0.016)
    assert enemy.target is other


def test_spy_does_not_target_player():
    world = World()
    enemy = _enemy(world)
    world.add(_Hero(world, (100.0, 0.0)))
    enemy.set_spy(True, 10.0)
    enemy.update(0.016)
    assert enemy.target is None


def test_hide_delay_after_target_lost():
    world = World()
    enemy = _enemy(world)
    hero = world.add(_Hero(world, (100.0, 0.0)))
    enemy.update(0.016)
    assert enemy.visible
    hero.position = (1000.0, 0.0)
    enemy.update(0.1)
    assert enemy.target is None
    assert enemy.visible
    enemy.update(0.15)
    assert enemy.visible is False


def test_player_bullet_damages_and_targets_enemy():
    world = World()
    enemy = _enemy(world)
    hero = world.add(_Hero(world, (500.0, 500.0)))
    bullet = Bullet(world, (0.0, 0.0), (1.0, 0.0), hero, 25.0, 400.0)
    dispatch_contact(bullet, enemy)
    assert enemy.health == pytest.approx(75.0)
    assert enemy.target is hero
    assert bullet.destroyed


def test_enemy_bullet_does_not_hurt_enemy():
    world = World()
    enemy = _enemy(world)
    shooter = _enemy(world, (50.0, 0.0))
    bullet = Bullet(world, (0.0, 0.0), (1.0, 0.0), shooter, 25.0, 400.0)
    dispatch_contact(bullet, enemy)
    assert enemy.health == 100.0
    assert not bullet.destroyed


def test_own_bullet_is_ignored():
    world = World()
    enemy = _enemy(world)
    bullet = Bullet(world, (0.0, 0.0), (1.0, 0.0), enemy, 25.0, 400.0)
    enemy.hit_by_bullet(bullet)
    assert enemy.health == 100.0


def test_health_bar_follows_character():
    world = World()
    hero = world.add(_Hero(world, (10.0, 20.0)))
    hero.health = 40.0
    hero.update(0.016)
    assert hero.health_bar.position == (10.0, 60.0)
    assert hero.health_bar.value == 40.0
    assert hero.health_bar.fill_color() == Color.YELLOW