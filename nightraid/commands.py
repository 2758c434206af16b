"""Actions bound to menu buttons."""

from __future__ import annotations

import sys
from typing import Callable, Protocol

from .constants import LevelID, WeaponType, weapon_price
from .controller import Screen, ScreenStack
from .session import GameSession, LevelManager

COINS_SOUND = "Sounds/coins-handling.ogg"


class Command:
    """Something a button does when pressed."""

    def execute(self) -> None:
        raise NotImplementedError


class ExitCommand(Command):
    def execute(self) -> None:
        sys.exit(0)


class PopScreenCommand(Command):
    def __init__(self, stack: ScreenStack) -> None:
        self.stack = stack

    def execute(self) -> None:
        self.stack.request_pop()


class PopToHomeCommand(Command):
    def __init__(self, stack: ScreenStack) -> None:
        self.stack = stack

    def execute(self) -> None:
        self.stack.request_pop_to_home()


class _Market(Protocol):
    def set_message(self, message: str) -> None: ...

    def update_weapon_button_labels(self) -> None: ...


class WeaponShopCommand(Command):
    """Buys a weapon if it is not owned, otherwise equips it."""

    def __init__(
        self,
        weapon: WeaponType,
        session: GameSession,
        market: _Market,
        on_purchase: Callable[[], None] | None = None,
    ) -> None:
        self.weapon = weapon
        self.session = session
        self.market = market
        self.on_purchase = on_purchase

    def execute(self) -> None:
        session = self.session
        price = weapon_price(self.weapon)
        if not session.has_weapon(self.weapon):
            if session.money >= price:
                session.money -= price
                session.add_weapon(self.weapon)
                self.market.set_message("Weapon purchased!")
                if self.on_purchase is not None:
                    self.on_purchase()
            else:
                self.market.set_message("You don't have enough money!")
        elif session.selected_weapon != self.weapon:
            session.select_weapon(self.weapon)
            self.market.set_message("Weapon equipped!")
        else:
            self.market.set_message("Weapon already equipped.")
        self.market.update_weapon_button_labels()


class StartGameCommand(Command):
    """Selects a level and shows the screen that loads it."""

    def __init__(
        self,
        level: LevelID,
        levels: LevelManager,
        stack: ScreenStack,
        loading_screen: Callable[[], Screen],
    ) -> None:
        self.level = level
        self.levels = levels
        self.stack = stack
        self.loading_screen = loading_screen

    def execute(self) -> None:
        self.levels.load_level(self.level)
        self.stack.push(self.loading_screen())