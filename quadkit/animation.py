"""Sprite-sheet animations: one row of tiles per animation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .rect import Rect
from .vector import Vec2


@dataclass(frozen=True)
class Animation:
    """An animation occupying one row of the sheet."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass(frozen=True)
class AnimationFrame:
    """Where the current frame sits in the sheet, and its size."""

    source_rect: Rect
    dest_size: Vec2


class AnimatedSprite:
    """All animations of one sprite sheet, with the playback position."""

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        animations: Iterable[Animation],
        playing: bool,
    ) -> None:
        self._tile_width = float(tile_width)
        self._tile_height = float(tile_height)
        self._animations = list(animations)
        self._current = 0
        self._time = 0.0
        self._frame = 0
        self.playing = playing

    def set_animation(self, animation: int) -> None:
        """Switch animation; the frame number is kept, wrapped to the new length."""
        self._current = animation
        self._frame %= self._animations[animation].frames

    def current_animation(self) -> int:
        return self._current

    def set_frame(self, frame: int) -> None:
        self._frame = frame

    def update(self, frame_time: float) -> None:
        """Advance by frame_time seconds, stepping a frame every 1/fps seconds."""
        animation = self._animations[self._current]
        if self.playing:
            self._time += frame_time
            if animation.fps > 0 and self._time > 1.0 / animation.fps:
                self._frame += 1
                self._time = 0.0
        self._frame %= animation.frames

    def frame(self) -> AnimationFrame:
        animation = self._animations[self._current]
        return AnimationFrame(
            source_rect=Rect(
                self._tile_width * self._frame,
                self._tile_height * animation.row,
                self._tile_width,
                self._tile_height,
            ),
            dest_size=Vec2(self._tile_width, self._tile_height),
        )