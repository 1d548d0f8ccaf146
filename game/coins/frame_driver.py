"""
Turns host frame callbacks into draw/update calls with elapsed time
"""

from typing import Callable, Optional


class FrameDriver:
    """
    Per-frame entry point for a host that supplies wall-clock timestamps.

    The first frame only sets the time baseline (and draws the initial state).
    Every later frame draws, then advances the game by the milliseconds since
    the previous frame. Long pauses are simulated as one big step.
    """

    def __init__(self, game, surface, request_frame: Optional[Callable] = None):
        self.game = game
        self.surface = surface
        self.request_frame = request_frame
        self.previous_time: Optional[float] = None
        self.frames = 0

    def on_frame(self, timestamp_ms: float) -> float:
        self.frames += 1

        if self.previous_time is None:
            self.previous_time = timestamp_ms
            self.game.draw(self.surface)
            delta = 0.0
        else:
            delta = timestamp_ms - self.previous_time
            self.game.draw(self.surface)
            self.game.update(delta)
            self.previous_time = timestamp_ms

        if self.request_frame is not None:
            self.request_frame(self.on_frame)
        return delta
