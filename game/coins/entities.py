"""
Game entity dataclasses
"""

from dataclasses import dataclass, field
from typing import Optional, Set, Tuple

from .animation import SpriteAnimator, SpriteSheet
from .geometry import Rect, Vec
from .utils import clamp

Color = Tuple[int, int, int]


@dataclass(eq=False)
class Entity:
    """Positioned, sized sprite with its own animation state"""
    position: Vec
    width: float
    height: float
    color: Color = (255, 255, 255)  # used when the sheet image is unavailable
    sheet: Optional[SpriteSheet] = None
    animator: SpriteAnimator = field(default_factory=SpriteAnimator)

    @property
    def rect(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.width, self.height)

    def set_sprite(self, sheet: SpriteSheet):
        self.sheet = sheet

    def set_animation(self, start_frame: int, end_frame: int, loop: bool, frame_delay: float):
        self.animator.configure(start_frame, end_frame, loop, frame_delay)

    def update(self, delta_ms: float):
        self.animator.advance(delta_ms)

    def draw(self, surface):
        if self.sheet is None:
            surface.draw_sprite(None, None, self.rect, self.color)
            return
        src = self.sheet.source_rect(self.animator.current_frame)
        surface.draw_sprite(self.sheet.image, src, self.rect, self.color)


@dataclass(eq=False)
class Player(Entity):
    """Keyboard-driven entity that stays inside the arena"""
    arena_width: float = 800.0
    arena_height: float = 600.0
    velocity: Vec = field(default_factory=Vec)
    current_direction: Optional[str] = None  # key id that set the velocity
    keys_pressed: Set[str] = field(default_factory=set)

    def update(self, delta_ms: float):
        moved = self.position + self.velocity * delta_ms
        self.position = Vec(
            clamp(moved.x, 0.0, self.arena_width - self.width),
            clamp(moved.y, 0.0, self.arena_height - self.height),
        )
        self.animator.advance(delta_ms)


@dataclass(eq=False)
class Coin(Entity):
    """Static collectible; stops animating once picked up"""
    collected: bool = False

    def update(self, delta_ms: float):
        if not self.collected:
            self.animator.advance(delta_ms)


@dataclass
class TextLabel:
    """Fixed-position HUD text"""
    x: float
    y: float
    font_size: int = 24
    color: Color = (0, 0, 0)

    def draw(self, surface, text: str):
        surface.draw_text(text, self.x, self.y, self.font_size, self.color, "left")
