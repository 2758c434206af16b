"""Health and armour bars."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int
    a: int = 255

    GREEN: ClassVar[Color]
    YELLOW: ClassVar[Color]
    RED: ClassVar[Color]
    BLUE: ClassVar[Color]
    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]


Color.GREEN = Color(0, 255, 0)
Color.YELLOW = Color(255, 255, 0)
Color.RED = Color(255, 0, 0)
Color.BLUE = Color(0, 0, 255)
Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)


class Bar:
    """A bar whose filled width follows a value between 0 and a maximum."""

    def __init__(self, width: float, height: float, color: Color, max_value: float) -> None:
        self.width = width
        self.height = height
        self.max_value = max_value
        self.value = max_value
        self.position = (0.0, 0.0)
        self._fill = color

    def set_max_value(self, max_value: float) -> None:
        self.max_value = max_value
        self._refresh()

    def set_value(self, value: float) -> None:
        """Set the value, clamped to [0, max_value]."""
        self.value = min(max(value, 0.0), self.max_value)
        self._refresh()

    def ratio(self) -> float:
        return self.value / self.max_value if self.max_value > 0 else 0.0

    @property
    def filled_width(self) -> float:
        return self.width * self.ratio()

    def label(self) -> str:
        return f"{int(self.value)} / {int(self.max_value)}"

    def fill_color(self) -> Color:
        return self._fill

    def _refresh(self) -> None:
        self._fill = self._color_for(self.ratio())

    def _color_for(self, ratio: float) -> Color:
        return self._fill


class HealthBar(Bar):
    def __init__(self, width: float, height: float, max_health: float) -> None:
        super().__init__(width, height, Color.GREEN, max_health)

    def _color_for(self, ratio: float) -> Color:
        if ratio > 0.5:
            return Color.GREEN
        if ratio > 0.2:
            return Color.YELLOW
        return Color.RED


class ArmorBar(Bar):
    def __init__(self, width: float, height: float, max_armor: float) -> None:
        super().__init__(width, height, Color.BLUE, max_armor)

    def _color_for(self, ratio: float) -> Color:
        if ratio > 0.5:
            return Color.BLUE
        if ratio > 0.2:
            return Color(0, 0, 255, 128)
        return Color(0, 0, 255, 64)