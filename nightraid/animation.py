"""Sprite-sheet frame selection."""

from __future__ import annotations

from dataclasses import dataclass

# Every animation cycles through its frames in this many seconds.
_CYCLE_SECONDS = 2.0


@dataclass
class Rect:
    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0


def _checked_count(image_count: tuple[int, int]) -> tuple[int, int]:
    columns, rows = (int(n) for n in image_count)
    if columns <= 0 or rows <= 0:
        raise ValueError(f"image count must be positive, got {image_count!r}")
    return columns, rows


class Animation:
    """Selects the current frame of a sprite sheet as time passes.

    ``switch_time`` is accepted for symmetry with the animation data but the
    frame time is always chosen so that one full cycle takes two seconds.
    """

    def __init__(
        self,
        texture_size: tuple[int, int] | None,
        image_count: tuple[int, int],
        switch_time: float = 0.0,
    ) -> None:
        columns, rows = _checked_count(image_count)
        self.image_count = (columns, rows)
        self.switch_time = _CYCLE_SECONDS / (columns * rows)
        self.uv_rect = Rect()
        self._displayed = 0
        self._total_time = 0.0
        self._frame_x = 0
        self._frame_y = 0
        self._total_images = columns * rows - 1
        if texture_size is not None:
            self.uv_rect.width = int(texture_size[0]) // columns
            self.uv_rect.height = int(texture_size[1]) // rows
            self.update(0.0)

    def update(self, delta_time: float) -> None:
        """Advance time and move to the next frame when it is due."""
        columns, rows = self.image_count
        self._frame_y = self._displayed // columns
        self._total_time += delta_time
        if self._total_time >= self.switch_time:
            self._total_time -= self.switch_time
            self._displayed += 1
            if self._total_images <= self._displayed:
                self._displayed = 0
                self._frame_x = self._frame_y = 0
            self._frame_x %= columns
            self._frame_y = (self._displayed // columns) % rows
        self.uv_rect.top = self._frame_y * self.uv_rect.height
        self.uv_rect.left = self._frame_x * self.uv_rect.width

    def reset(
        self,
        texture_size: tuple[int, int] | None,
        image_count: tuple[int, int],
        switch_time: float = 0.0,
    ) -> None:
        """Start over with a new sprite sheet."""
        columns, rows = _checked_count(image_count)
        self.image_count = (columns, rows)
        self.switch_time = _CYCLE_SECONDS / (columns * rows)
        self._total_time = 0.0
        self._frame_x = self._frame_y = 0
        self._displayed = 0
        self._total_images = columns * rows
        if texture_size is not None:
            self.uv_rect.width = int(texture_size[0]) // columns
            self.uv_rect.height = int(texture_size[1]) // rows
        else:
            self.uv_rect = Rect()