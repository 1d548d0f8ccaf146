"""
Random-policy baseline for the coin collection environment
"""

import argparse
import time
from typing import Optional

import numpy as np

from game.coins import CoinCollectEnv
from game.coins.utils import seed_everything
from rl.configs.coin_env_config import ENV_CONFIG, EVAL_CONFIG


def evaluate_random(n_episodes: int = 10, seed: Optional[int] = None, render: bool = False,
                    env_config: Optional[dict] = None):
    """
    Evaluate a uniformly random policy
    """
    print("Evaluating random policy baseline...")
    seed_everything(seed)

    config = {**ENV_CONFIG, **(env_config or {})}
    env = CoinCollectEnv(render_mode="human" if render else None, **config)
    env.action_space.seed(seed)

    episode_rewards = []
    episode_lengths = []
    episode_wins = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            action = env.action_space.sample()
            obs, reward, terminated, truncated, info = env.step(action)
            total_reward += reward
            steps += 1
            if render:
                time.sleep(config["frame_ms"] / 1000.0)

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_wins.append(1.0 if info["won"] else 0.0)

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Coins = {total_reward:.0f}, Length = {steps}")

    env.close()

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)
    mean_length = np.mean(episode_lengths)
    win_rate = np.mean(episode_wins)

    print("\n" + "="*50)
    print(f"Random Policy Results ({n_episodes} episodes):")
    print(f"Mean Coins: {mean_reward:.2f} ± {std_reward:.2f}")
    print(f"Mean Episode Length: {mean_length:.1f}")
    print(f"Win Rate: {win_rate:.0%}")
    print("="*50)

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_length": mean_length,
        "win_rate": win_rate,
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Evaluate a random policy on the coin game")
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help="Number of evaluation episodes (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help="Random seed (default: 42)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=ENV_CONFIG["max_steps"],
        help="Step limit per episode (default: 1800)",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Show episodes in a window",
    )

    args = parser.parse_args(argv)

    return evaluate_random(
        n_episodes=args.n_episodes,
        seed=args.seed,
        render=args.render,
        env_config={"max_steps": args.max_steps},
    )


if __name__ == "__main__":
    main()
