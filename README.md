# nightraid

The game logic of a top-down night-time shooter, with no graphics attached.
It covers tile maps with spawn points and walls, A* pathfinding over the
map, the player and enemies with health, armor, targets and spy mode,
bullets and gifts with contact dispatch, health and armor bars, sprite-sheet
frame stepping, a screen stack and menu commands.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `nightraid.constants`: the `WeaponType`, `LevelID`, `GiftType`,
  `EntityType` and `ScreenID` enums, `AnimationInfo` and `WeaponData`, and
  the lookups `weapon_price`, `weapon_data` and `level_name`. It also holds
  texture names for levels, gifts and bullets.
- `nightraid.tilemap`: `TileMap.load(path)` reads a JSON tile map and
  `TileMap.from_dict(data)` builds one from decoded JSON. A map needs at
  least one layer, and its `Spawns` layer must hold at least one enemy spawn
  and one gift spawn. The map exposes `player_spawn`, `enemy_spawns` and
  `gift_spawns` in pixels. `is_walkable(x, y)` checks the `walls` layer.
  `collision_boxes(layer_name)` merges the solid tiles of a layer into
  rectangles (`CollisionBox`) with their centre and half extents in metres.
  Missing files, bad JSON and missing content raise `MapError`.
- `nightraid.pathfinding`: `find_path(grid, start, goal)` runs a four-way A*
  search over any object that has `width`, `height` and `is_walkable(x, y)`.
  The goal tile itself need not be walkable. The result lists the steps from
  `start` to `goal`, without `start`. It is empty when the goal cannot be
  reached or equals the start.
- `nightraid.session`: `GameSession` holds money, health, owned weapons, the
  selected weapon and a flag that tells the player to re-equip.
  `LevelManager` maps each level to its map file. It raises
  `LevelNotFoundError` when no level is current.
- `nightraid.animation`: `Animation` steps through a sprite sheet so that
  one full cycle takes two seconds. Its `uv_rect` (a `Rect`) marks the
  current frame.
- `nightraid.bars`: `HealthBar` and `ArmorBar` keep a value clamped between
  0 and their maximum. Each gives a fill `ratio()`, a `filled_width`, a
  `fill_color()` that changes as the value drops, and a `"current / max"`
  `label()`.
- `nightraid.controller`: `Screen` and `ScreenStack`. Pop requests on the
  stack are deferred until `apply_requests()`, and a plain pop wins over a
  pop-to-home. `Factory` is a registry of constructors by kind.
- `nightraid.commands`: `ExitCommand`, `PopScreenCommand`,
  `PopToHomeCommand`, `WeaponShopCommand` (buy a weapon, or equip one you
  already own) and `StartGameCommand`.
- `nightraid.entities`: `World`, `Entity`, `Bullet` and `Gift`. Collisions
  use double dispatch, and `dispatch_contact(a, b)` lets each of two
  touching entities handle the other.
- `nightraid.characters`: `Character` has health, a vision cone and a
  target. `Enemy` gets a random weapon, can be slowed down or turned into a
  spy for a time, and has footstep timing through `footstep_volume`.
- `nightraid.player`: `Player` takes damage on armor first, then health. It
  handles gift pickups and takes its weapon from the session.

## Example

```python
from nightraid.tilemap import TileMap
from nightraid.pathfinding import find_path

level_map = TileMap.load("easy_map.json")
for x, y in find_path(level_map, (1, 1), (10, 4)):
    print(x, y)
```

```python
from nightraid.constants import WeaponType, weapon_price
from nightraid.session import GameSession

session = GameSession(money=500)
if session.money >= weapon_price(WeaponType.RIFLE):
    session.money -= weapon_price(WeaponType.RIFLE)
    session.add_weapon(WeaponType.RIFLE)
    session.select_weapon(WeaponType.RIFLE)
```

```python
from nightraid.characters import Enemy
from nightraid.entities import Bullet, World, dispatch_contact
from nightraid.player import Player

world = World()
player = world.add(Player(world, (0.0, 0.0)))
enemy = world.add(Enemy(world, (100.0, 0.0)))
bullet = world.add(Bullet(world, (90.0, 0.0), (1.0, 0.0), player, damage=25, range=500))
dispatch_contact(bullet, enemy)
print(enemy.health)  # 75.0
```

## What it does not do

There is no window, rendering, input handling, sound playback, physics
engine or main loop, and there is no command to run. Characters do not move
on their own, and weapons do not fire. The package keeps positions, speeds
and timers and decides targets and damage. Moving the characters, spawning
bullets and playing sounds is left to the code that uses it. `Player`
accepts a `play_sound` callback for its sound effects.