from __future__ import annotations

import argparse
from typing import Optional, Sequence

import gymnasium as gym

import falling_blocks.env  # ensure registration
from falling_blocks.utils.logging import setup_logger


def run_random(episodes: int = 1, steps: int = 500, seed: Optional[int] = None, level: str = "info") -> float:
    # Engine loggers report spawns/locks at DEBUG and game over at INFO.
    log = setup_logger(name="falling_blocks", level=level)
    env = gym.make("FallingBlocks-10x25-v0")
    env.action_space.seed(seed)
    total_reward = 0.0
    try:
        for episode in range(episodes):
            obs, info = env.reset(seed=None if seed is None else seed + episode)
            episode_reward = 0.0
            for _ in range(steps):
                obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
                episode_reward += float(reward)
                if terminated or truncated:
                    break
            log.info(
                "episode %d: reward=%.0f score=%d lines=%d pieces=%d",
                episode, episode_reward, info["score"], info["lines_cleared_total"], info["pieces_locked"],
            )
            total_reward += episode_reward
    finally:
        env.close()
    log.info("random agent total reward: %.2f", total_reward)
    return total_reward


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play Falling Blocks with uniformly random actions")
    p.add_argument("--episodes", type=int, default=1)
    p.add_argument("--steps", type=int, default=500)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", type=str, default="info")
    return p


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    run_random(episodes=args.episodes, steps=args.steps, seed=args.seed, level=args.log_level)


if __name__ == "__main__":  # pragma: no cover
    main()
