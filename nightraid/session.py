"""State that lives across screens: money, weapons, health and level."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType

from .constants import PLAYER_MAX_HEALTH, LevelID, WeaponType


@dataclass
class GameSession:
    money: int = 0
    health: float = PLAYER_MAX_HEALTH
    selected_weapon: WeaponType = WeaponType.HANDGUN
    owned_weapons: set[WeaponType] = field(default_factory=lambda: {WeaponType.HANDGUN})
    should_update_weapon: bool = False
    enemies: int = 0
    level_id: LevelID = LevelID.EASY_MAP

    def has_weapon(self, weapon: WeaponType) -> bool:
        return weapon in self.owned_weapons

    def add_weapon(self, weapon: WeaponType) -> None:
        self.owned_weapons.add(weapon)

    def select_weapon(self, weapon: WeaponType) -> None:
        """Select a weapon and flag that the player must re-equip."""
        self.selected_weapon = weapon
        self.should_update_weapon = True

    def acknowledge_weapon_change(self) -> None:
        self.should_update_weapon = False


class LevelNotFoundError(LookupError):
    """The requested level has no map file."""


class LevelManager:
    """Tracks which level is current and where its map lives."""

    LEVEL_FILES = MappingProxyType({
        LevelID.EASY_MAP: "easy_map.json",
        LevelID.MEDIUM_MAP: "medium_map.json",
        LevelID.HARD_MAP: "hard_map.json",
    })

    def __init__(self) -> None:
        self.current_level: LevelID | None = None

    def load_level(self, level: LevelID) -> None:
        if level not in self.LEVEL_FILES:
            raise LevelNotFoundError("Level not found")
        self.current_level = level

    def current_level_path(self) -> str:
        if self.current_level not in self.LEVEL_FILES:
            raise LevelNotFoundError("Current level not found")
        return self.LEVEL_FILES[self.current_level]