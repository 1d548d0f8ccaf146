"""2D Game module - Sprite-based coin collection game"""

from .coin_game import CoinGame
from .coin_env import CoinCollectEnv
from .frame_driver import FrameDriver

__all__ = ['CoinGame', 'CoinCollectEnv', 'FrameDriver']
