"""
Arcade host for CoinGame: window, drawing surface and keyboard input

Quick test:
    python -m game.coins.window --seed 42
"""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

import arcade

from .coin_game import CoinGame
from .config import COIN_SHEET, GAME_CONFIG, PLAYER_SHEET
from .entities import Color
from .frame_driver import FrameDriver
from .geometry import Rect

# Arcade key symbols -> key ids understood by CoinGame
KEY_NAMES = {
    arcade.key.W: "w",
    arcade.key.A: "a",
    arcade.key.S: "s",
    arcade.key.D: "d",
    arcade.key.UP: "ArrowUp",
    arcade.key.LEFT: "ArrowLeft",
    arcade.key.DOWN: "ArrowDown",
    arcade.key.RIGHT: "ArrowRight",
    arcade.key.R: "r",
}


def load_sheets(asset_dir: Optional[str], images: Iterable[str]) -> Dict[str, arcade.Texture]:
    """Load the sprite sheet images that exist under asset_dir"""
    textures = {}
    if asset_dir is None:
        return textures
    for name in images:
        path = Path(asset_dir) / name
        if not path.exists():
            print(f"Warning: sprite sheet not found, drawing plain boxes instead: {path}")
            continue
        textures[name] = arcade.load_texture(path)
    return textures


class ArcadeSurface:
    """
    Canvas-style drawing (top-left origin, y down) on an arcade window.

    Arcade puts the origin at the bottom left, so every call flips y.
    """

    def __init__(self, height: float, textures: Optional[Dict[str, arcade.Texture]] = None,
                 font_name: str = "Arial"):
        self.height = height
        self.textures = textures or {}
        self.font_name = font_name
        self._frames: Dict[Tuple[str, Rect], arcade.Texture] = {}

    def fill_rect(self, x: float, y: float, width: float, height: float, color: Color):
        arcade.draw_lrbt_rectangle_filled(x, x + width, self.height - (y + height), self.height - y, color)

    def draw_sprite(self, image: Optional[str], src: Optional[Rect], dst: Rect, color: Color):
        texture = self.textures.get(image) if image else None
        if texture is None or src is None:
            self.fill_rect(dst.x, dst.y, dst.width, dst.height, color)
            return

        frame = self._frames.get((image, src))
        if frame is None:
            frame = texture.crop(int(src.x), int(src.y), int(src.width), int(src.height))
            self._frames[(image, src)] = frame

        bottom = self.height - (dst.y + dst.height)
        arcade.draw_texture_rect(frame, arcade.LBWH(dst.x, bottom, dst.width, dst.height))

    def draw_text(self, text: str, x: float, y: float, font_size: int, color: Color,
                  align: str = "left"):
        arcade.draw_text(text, x, self.height - y, color, font_size,
                         font_name=self.font_name, anchor_x=align, anchor_y="baseline")


class CoinWindow(arcade.Window):
    """Arcade window that runs a CoinGame"""

    def __init__(self, game: CoinGame, asset_dir: Optional[str] = None,
                 title: str = "Coin Collector - Arcade"):
        super().__init__(int(game.width), int(game.height), title)
        self.game = game
        textures = load_sheets(asset_dir, [PLAYER_SHEET["image"], COIN_SHEET["image"]])
        self.surface = ArcadeSurface(game.height, textures)
        # Arcade's event loop keeps calling on_draw, so no explicit rescheduling
        self.driver = FrameDriver(game, self.surface)

    def on_draw(self):
        self.clear()
        self.driver.on_frame(time.perf_counter() * 1000.0)

    def draw_scene(self):
        """Draw the current state without advancing the game"""
        self.clear()
        self.game.draw(self.surface)

    def on_key_press(self, symbol: int, modifiers: int):
        key = KEY_NAMES.get(symbol)
        if key is not None:
            self.game.on_key_down(key)

    def on_key_release(self, symbol: int, modifiers: int):
        key = KEY_NAMES.get(symbol)
        if key is not None:
            self.game.on_key_up(key)


def run_game(seed: Optional[int] = None, asset_dir: Optional[str] = "assets"):
    """Open a window and play until it is closed"""
    game = CoinGame(seed=seed, **GAME_CONFIG)
    CoinWindow(game, asset_dir=asset_dir)
    print(f"Collect all {game.num_coins} coins with WASD or the arrow keys. Close the window to quit.")
    arcade.run()


def main():
    parser = argparse.ArgumentParser(description="Play the coin collection game")
    parser.add_argument("--seed", type=int, default=None, help="Seed for coin placement")
    parser.add_argument("--assets", type=str, default="assets", help="Directory with sprite sheets")
    args = parser.parse_args()
    run_game(seed=args.seed, asset_dir=args.assets)


if __name__ == "__main__":
    main()
