"""
CoinCollectEnv - gymnasium wrapper around CoinGame
--------------------------------------------------
- Each step holds at most one direction key and simulates one frame
- Actions become key-down/key-up events, so movement follows the same
  last-key-wins rules as keyboard play
- Vector observation: player state + every coin relative to the player
- Reward: coins picked up during the step
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .coin_game import CoinGame
from .config import GAME_CONFIG
from .utils import clamp


class CoinCollectEnv(gym.Env):
    """Coin collection game as a gymnasium environment"""

    metadata = {"render_modes": ["human"], "render_fps": 30}

    # Action -> key held during the step (0: nothing held)
    ACTION_KEYS = [None, "ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight"]

    def __init__(
        self,
        render_mode: Optional[str] = None,
        frame_ms: float = 1000 / 30,
        max_steps: int = 1800,  # 60s at 30 FPS
        game_config: Optional[Dict[str, Any]] = None,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unsupported render mode: {render_mode}")
        if frame_ms <= 0:
            raise ValueError(f"frame_ms must be positive, got {frame_ms}")
        self.render_mode = render_mode
        self.frame_ms = frame_ms
        self.max_steps = max_steps
        self.game_config = {**GAME_CONFIG, **(game_config or {})}

        num_coins = self.game_config["num_coins"]
        self.action_space = spaces.Discrete(len(self.ACTION_KEYS))

        # Player: pos(2) vel(2)
        # Each coin: rel pos(2) collected(1)
        obs_dim = 2 + 2 + num_coins * 3
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.game: CoinGame = CoinGame(**self.game_config)
        self._held: Optional[str] = None
        self._step_count = 0
        self._window = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)

        game_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.game = CoinGame(seed=game_seed, **self.game_config)
        self._held = None
        self._step_count = 0

        if self._window is not None:
            self._window.game = self.game
            self._window.driver.game = self.game

        return self._get_obs(), self._get_info()

    def step(self, action):
        if not self.action_space.contains(action):
            raise ValueError(f"Invalid action: {action!r}")

        self._hold(self.ACTION_KEYS[int(action)])

        score_before = self.game.score
        self.game.update(self.frame_ms)
        reward = float(self.game.score - score_before)

        terminated = self.game.won
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def _hold(self, key: Optional[str]):
        if key == self._held:
            return
        if self._held is not None:
            self.game.on_key_up(self._held)
            self._held = None
        if key is not None:
            self.game.on_key_down(key)
            self._held = key

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        game = self.game
        player = game.player

        span_x = max(1e-6, game.width - player.width)
        span_y = max(1e-6, game.height - player.height)
        obs_parts = [
            player.position.x / span_x * 2 - 1,
            player.position.y / span_y * 2 - 1,
            player.velocity.x / game.player_speed,
            player.velocity.y / game.player_speed,
        ]

        for coin in game.coins:
            dx = (coin.position.x - player.position.x) / game.width
            dy = (coin.position.y - player.position.y) / game.height
            obs_parts += [dx, dy, 1.0 if coin.collected else -1.0]

        obs = np.array([clamp(v, -1.0, 1.0) for v in obs_parts], dtype=np.float32)
        return obs

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "won": self.game.won,
            "coins_left": len(self.game.visible_coins),
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            # Imported here so headless use never touches a display
            from .window import CoinWindow
            self._window = CoinWindow(self.game, title="CoinCollectEnv - Arcade")

        self._window.dispatch_events()
        self._window.draw_scene()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None
