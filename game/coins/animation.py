"""
Sprite sheet addressing and frame animation state
"""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import Rect


@dataclass(frozen=True)
class SpriteSheet:
    """A grid of equally sized frames stored in a single image"""
    image: str
    columns: int
    frame_width: float
    frame_height: float

    def __post_init__(self):
        if self.columns < 1:
            raise ValueError(f"Sprite sheet {self.image!r} needs at least one column, got {self.columns}")

    def source_rect(self, frame: int) -> Rect:
        """Rectangle of ``frame`` inside the sheet image"""
        row = frame // self.columns
        col = frame % self.columns
        return Rect(col * self.frame_width, row * self.frame_height,
                    self.frame_width, self.frame_height)


@dataclass
class SpriteAnimator:
    """
    Frame counter for a sheet-based sprite.

    Frames run from ``start_frame`` to ``end_frame`` inclusive, each shown for
    ``frame_delay`` milliseconds. Looping animations wrap back to the start;
    the others stop on the last frame.
    """
    current_frame: int = 0
    start_frame: int = 0
    end_frame: int = 0
    loop: bool = False
    frame_delay: float = 150.0
    elapsed: float = 0.0
    finished: bool = False

    def configure(self, start_frame: int, end_frame: int, loop: bool, frame_delay: float):
        if frame_delay <= 0:
            raise ValueError(f"Animation frame delay must be positive, got {frame_delay}")
        if start_frame < 0 or start_frame > end_frame:
            raise ValueError(f"Invalid frame range {start_frame}..{end_frame}")

        self.start_frame = start_frame
        self.end_frame = end_frame
        self.loop = loop
        self.frame_delay = frame_delay
        self.current_frame = start_frame
        self.elapsed = 0.0
        self.finished = False

    def advance(self, delta_ms: float):
        if delta_ms <= 0 or self.finished:
            return

        self.elapsed += delta_ms
        while self.elapsed >= self.frame_delay:
            self.elapsed -= self.frame_delay
            self.current_frame += 1
            if self.current_frame > self.end_frame:
                if self.loop:
                    self.current_frame = self.start_frame
                else:
                    # Frozen on the last frame until reconfigured
                    self.current_frame = self.end_frame
                    self.elapsed = 0.0
                    self.finished = True
                    break
