"""Game-wide identifiers, prices and per-weapon presentation data."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType

PIXELS_PER_METER = 30.0
PLAYER_MAX_HEALTH = 100


class WeaponType(enum.Enum):
    HANDGUN = 0
    RIFLE = 1
    SHOTGUN = 2
    SNIPER = 3


class LevelID(enum.Enum):
    EASY_MAP = 0
    MEDIUM_MAP = 1
    HARD_MAP = 2


class GiftType(enum.Enum):
    ARMOR = 0
    HEALTH = 1
    ENEMYSPEEDDOWN = 2
    SPEEDUP = 3
    SPY = 4
    VISIONUP = 5


class EntityType(enum.Enum):
    PLAYER = enum.auto()
    ENEMY = enum.auto()
    SPY = enum.auto()
    BULLET = enum.auto()
    GIFT = enum.auto()


class ScreenID(enum.Enum):
    SPLASH = enum.auto()
    HOME = enum.auto()
    CHOOSE_LEVEL = enum.auto()
    LOAD_GAME = enum.auto()
    MARKET = enum.auto()
    HELP = enum.auto()
    PLAYGROUND = enum.auto()
    PAUSE = enum.auto()
    GAME_OVER = enum.auto()
    GAME_WIN = enum.auto()


@dataclass(frozen=True)
class AnimationInfo:
    """A sprite sheet, its frame grid (columns, rows) and frame speed."""

    texture: str
    frame_size: tuple[int, int]
    speed: float


@dataclass(frozen=True)
class WeaponData:
    """How a weapon looks and sounds."""

    move_anim: AnimationInfo
    shoot_anim: AnimationInfo
    shoot_sound: str


_WEAPON_PRICES = MappingProxyType({
    WeaponType.HANDGUN: 0,
    WeaponType.RIFLE: 400,
    WeaponType.SHOTGUN: 100,
    WeaponType.SNIPER: 300,
})

_LEVEL_NAMES = MappingProxyType({
    LevelID.EASY_MAP: "Easy",
    LevelID.MEDIUM_MAP: "Medium",
    LevelID.HARD_MAP: "Hard",
})

LEVEL_COLORS = MappingProxyType({
    LevelID.EASY_MAP: (0, 255, 0),
    LevelID.MEDIUM_MAP: (255, 255, 0),
    LevelID.HARD_MAP: (255, 0, 0),
})

LEVEL_TEXTURES = MappingProxyType({
    LevelID.EASY_MAP: "easy_map.png",
    LevelID.MEDIUM_MAP: "medium_map.png",
    LevelID.HARD_MAP: "hard_map.png",
})

GIFT_TEXTURES = MappingProxyType({
    GiftType.ARMOR: "shield.png",
    GiftType.HEALTH: "Health.png",
    GiftType.ENEMYSPEEDDOWN: "EnemySpeedDownGift.png",
    GiftType.SPEEDUP: "SpeedUpGift.png",
    GiftType.SPY: "spy.png",
    GiftType.VISIONUP: "vision_up.png",
})

BULLET_TEXTURE = "game_bullet.png"

_RIFLE_MOVE = AnimationInfo("rifle_move.png", (3, 7), 0.1)
_RIFLE_SHOOT = AnimationInfo("rifle_shoot.png", (1, 9), 0.1)

_WEAPON_DATA = MappingProxyType({
    WeaponType.HANDGUN: WeaponData(
        AnimationInfo("handGun_Move.png", (7, 3), 0.3),
        AnimationInfo("handGun_shoot.png", (1, 9), 0.3),
        "Sounds/pistol_shot.ogg",
    ),
    WeaponType.RIFLE: WeaponData(_RIFLE_MOVE, _RIFLE_SHOOT, "Sounds/AK47.ogg"),
    WeaponType.SHOTGUN: WeaponData(
        AnimationInfo("shotgun_move.png", (3, 7), 0.1),
        AnimationInfo("shotgun_shoot.png", (1, 9), 0.1),
        "Sounds/shotgun_shot.ogg",
    ),
    WeaponType.SNIPER: WeaponData(_RIFLE_MOVE, _RIFLE_SHOOT, "Sounds/sniper_shot.ogg"),
})


def weapon_price(weapon: WeaponType) -> int:
    """Market price of a weapon."""
    return _WEAPON_PRICES[weapon]


def weapon_data(weapon: WeaponType) -> WeaponData:
    """Animation and sound data for a weapon."""
    return _WEAPON_DATA[weapon]


def level_name(level: LevelID) -> str:
    """Display name of a level."""
    return _LEVEL_NAMES[level]