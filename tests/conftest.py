from typing import List, Tuple

import pytest

from game.coins.coin_game import CoinGame
from game.coins.entities import Coin
from game.coins.geometry import Vec


class RecordingSurface:
    """Render surface that remembers every call"""

    def __init__(self) -> None:
        self.calls: List[Tuple] = []

    def fill_rect(self, x, y, width, height, color) -> None:
        self.calls.append(("fill_rect", x, y, width, height, color))

    def draw_sprite(self, image, src, dst, color) -> None:
        self.calls.append(("draw_sprite", image, src, dst, color))

    def draw_text(self, text, x, y, font_size, color, align="left") -> None:
        self.calls.append(("draw_text", text, x, y, font_size, color, align))

    def of(self, kind: str) -> List[Tuple]:
        return [c for c in self.calls if c[0] == kind]


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


def line_up_coins(game: CoinGame, spacing: float = 70.0) -> None:
    """Replace the random coins with a row along the top edge, far from the player"""
    game.coins = []
    for i in range(game.num_coins):
        coin = Coin(position=Vec(i * spacing, 0.0), width=game.coin_size, height=game.coin_size)
        coin.set_sprite(game.coin_sheet)
        coin.set_animation(0, 7, True, 80)
        game.coins.append(coin)


@pytest.fixture
def game() -> CoinGame:
    g = CoinGame(seed=1234)
    line_up_coins(g)
    return g
