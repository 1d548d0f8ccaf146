"""
CoinGame - a small sprite-based coin collection game
----------------------------------------------------
- The player walks around a bounded arena with WASD or the arrow keys
- Coins are scattered at random positions and animate until picked up
- Collecting every coin wins; the restart key then starts a new round

The game only knows the drawing surface through the RenderSurface protocol
and receives input as string key ids, so it runs the same under the arcade
window, the gymnasium environment and the tests.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Tuple

from .animation import SpriteSheet
from .config import (COIN_ANIMATION, COIN_SHEET, COLORS, DIRECTIONS, GAME_CONFIG, HUD_CONFIG,
                     KEY_DIRECTIONS, PLAYER_SHEET, PLAYER_START_FRAME,
                     WALK_ANIMATION_LOOP)
from .entities import Coin, Color, Player, TextLabel
from .geometry import Rect, Vec
from .utils import box_overlap, random_position


class RenderSurface(Protocol):
    """Drawing operations the game needs from its host"""

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color):
        ...

    def draw_sprite(self, image: Optional[str], src: Optional[Rect], dst: Rect, color: Color):
        ...

    def draw_text(self, text: str, x: float, y: float, font_size: int, color: Color,
                  align: str = "left"):
        ...


@dataclass(frozen=True)
class Move:
    """What pressing or releasing one direction key does to the player"""
    velocity: Vec
    frames: Tuple[int, int]
    idle_frame: int


def build_move_table(speed: float) -> Dict[str, Move]:
    """Map every direction key id to its movement"""
    moves = {}
    for key, direction in KEY_DIRECTIONS.items():
        entry = DIRECTIONS[direction]
        dx, dy = entry["velocity"]
        moves[key] = Move(Vec(dx * speed, dy * speed), tuple(entry["frames"]), entry["idle"])
    return moves


class CoinGame:
    """Owns the player, the coins and the score"""

    def __init__(
        self,
        width: float = GAME_CONFIG["width"],
        height: float = GAME_CONFIG["height"],
        coin_size: float = GAME_CONFIG["coin_size"],
        num_coins: int = GAME_CONFIG["num_coins"],
        player_speed: float = GAME_CONFIG["player_speed"],
        animation_delay: float = GAME_CONFIG["animation_delay"],
        player_width: float = GAME_CONFIG["player_width"],
        player_height: float = GAME_CONFIG["player_height"],
        restart_key: str = GAME_CONFIG["restart_key"],
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        if animation_delay <= 0:
            raise ValueError(f"animation_delay must be positive, got {animation_delay}")
        if num_coins < 1:
            raise ValueError(f"num_coins must be at least 1, got {num_coins}")
        if player_speed <= 0:
            raise ValueError(f"player_speed must be positive, got {player_speed}")
        if coin_size <= 0 or width <= coin_size or height <= coin_size:
            raise ValueError(f"Arena {width}x{height} cannot hold coins of size {coin_size}")
        if player_width <= 0 or player_height <= 0 or width < player_width or height < player_height:
            raise ValueError(
                f"Arena {width}x{height} cannot hold a {player_width}x{player_height} player")

        # Arena
        self.width = width
        self.height = height

        # Gameplay config
        self.coin_size = coin_size
        self.num_coins = num_coins
        self.player_speed = player_speed
        self.animation_delay = animation_delay
        self.player_width = player_width
        self.player_height = player_height
        self.restart_key = restart_key

        self.rng = rng if rng is not None else random.Random(seed)
        self.moves = build_move_table(player_speed)
        self.player_sheet = SpriteSheet(**PLAYER_SHEET)
        self.coin_sheet = SpriteSheet(**COIN_SHEET)

        self.score_label = TextLabel(HUD_CONFIG["score_x"], HUD_CONFIG["score_y"],
                                     HUD_CONFIG["score_font_size"], COLORS["text"])

        # World state
        self.score = 0
        self.won = False
        self.player: Player = None  # type: ignore
        self.coins: List[Coin] = []

        self.init_objects()

    # ----------------------------
    # Setup
    # ----------------------------

    def init_objects(self):
        self.player = Player(
            position=Vec(self.width / 2, self.height / 2),
            width=self.player_width,
            height=self.player_height,
            color=COLORS["player"],
            arena_width=self.width,
            arena_height=self.height,
        )
        self.player.set_sprite(self.player_sheet)
        self.player.set_animation(PLAYER_START_FRAME, PLAYER_START_FRAME, False, self.animation_delay)

        self.coins = [self._spawn_coin() for _ in range(self.num_coins)]

    def _spawn_coin(self) -> Coin:
        # Coins may overlap each other; they only have to fit in the arena
        pos = random_position(self.rng, self.width - self.coin_size, self.height - self.coin_size)
        coin = Coin(position=pos, width=self.coin_size, height=self.coin_size, color=COLORS["coin"])
        coin.set_sprite(self.coin_sheet)
        coin.set_animation(**COIN_ANIMATION)
        return coin

    def reset(self):
        self.score = 0
        self.won = False
        self.init_objects()

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_down(self, key: str):
        player = self.player
        if key in player.keys_pressed:
            return
        player.keys_pressed.add(key)

        # Most recent direction key wins; keys never combine into diagonals
        move = self.moves.get(key)
        if move is not None:
            player.velocity = move.velocity
            player.set_animation(*move.frames, WALK_ANIMATION_LOOP, self.animation_delay)
            player.current_direction = key

        if key == self.restart_key and self.won:
            self.reset()

    def on_key_up(self, key: str):
        player = self.player
        player.keys_pressed.discard(key)
        if key != player.current_direction:
            return

        idle = self.moves[key].idle_frame
        player.velocity = Vec(0, 0)
        player.set_animation(idle, idle, False, self.animation_delay)
        player.current_direction = None

    # ----------------------------
    # Frame
    # ----------------------------

    @property
    def visible_coins(self) -> List[Coin]:
        return [c for c in self.coins if not c.collected]

    def update(self, delta_ms: float):
        self.player.update(delta_ms)

        for coin in self.coins:
            coin.update(delta_ms)
            if not coin.collected and box_overlap(self.player, coin):
                coin.collected = True
                self.score += 1
                if self.score == self.num_coins:
                    self.won = True

    def draw(self, surface: RenderSurface):
        surface.fill_rect(0, 0, self.width, self.height, COLORS["background"])

        for coin in self.visible_coins:
            coin.draw(surface)
        self.player.draw(surface)
        self.score_label.draw(surface, f"Coins: {self.score}/{self.num_coins}")

        if self.won:
            cx, cy = self.width / 2, self.height / 2
            surface.draw_text(HUD_CONFIG["win_text"], cx, cy,
                              HUD_CONFIG["win_font_size"], COLORS["win"], "center")
            surface.draw_text(HUD_CONFIG["hint_text"], cx, cy + HUD_CONFIG["hint_offset"],
                              HUD_CONFIG["hint_font_size"], COLORS["win"], "center")
