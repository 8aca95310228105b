import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np
from tqdm import trange

from .api import Game2048Env
from .status import GameStatus


@dataclass
class SimulationConfig:
    games: int = 100
    seed: int = 42
    max_steps: int = 10_000
    render: bool = False
    quiet: bool = False


def play_random(env: Game2048Env, policy_rng: np.random.Generator, seed: int, max_steps: int) -> Dict:
    """Play one session with a uniform-random legal-move policy."""
    env.reset(seed=seed)
    steps = 0
    while not env.is_over() and steps < max_steps:
        legal = env.legal_actions()
        if not legal:
            break
        env.step(legal[int(policy_rng.integers(0, len(legal)))])
        steps += 1
    return {
        "score": env.score,
        "max_tile": env.max_tile(),
        "status": env.status,
        "steps": steps,
    }


def run(config: SimulationConfig) -> List[Dict]:
    env = Game2048Env(seed=config.seed)
    policy_rng = np.random.default_rng(config.seed)
    results: List[Dict] = []

    for ep in trange(config.games, desc="Simulating", disable=config.quiet):
        result = play_random(env, policy_rng, seed=config.seed + ep, max_steps=config.max_steps)
        results.append(result)
        if config.render:
            print(env.board.render())
            print(f"Score: {result['score']}  Status: {result['status'].value}")

    return results


def summarize(results: List[Dict]) -> Dict:
    scores = np.array([r["score"] for r in results], dtype=np.int64)
    tiles = np.array([r["max_tile"] for r in results], dtype=np.int64)
    steps = np.array([r["steps"] for r in results], dtype=np.int64)
    return {
        "games": len(results),
        "mean_score": float(scores.mean()) if len(scores) else 0.0,
        "max_score": int(scores.max()) if len(scores) else 0,
        "best_tile": int(tiles.max()) if len(tiles) else 0,
        "mean_steps": float(steps.mean()) if len(steps) else 0.0,
        "won": sum(1 for r in results if r["status"] is GameStatus.WON),
        "lost": sum(1 for r in results if r["status"] is GameStatus.LOST),
    }


def parse_args(argv: Optional[List[str]] = None) -> SimulationConfig:
    parser = argparse.ArgumentParser(description="Headless random-play runner for the 2048 engine")
    parser.add_argument("--games", type=int, default=100)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--max-steps", type=int, default=10_000)
    parser.add_argument("--render", action="store_true", help="print the final board of every game")
    parser.add_argument("--quiet", action="store_true", help="hide the progress bar")
    args = parser.parse_args(argv)
    if args.games < 1:
        parser.error("--games must be at least 1")
    return SimulationConfig(
        games=args.games,
        seed=args.seed,
        max_steps=args.max_steps,
        render=args.render,
        quiet=args.quiet,
    )


def main(argv: Optional[List[str]] = None) -> None:
    config = parse_args(argv)
    print(f"[Info] games={config.games}, seed={config.seed}, max_steps={config.max_steps}")
    stats = summarize(run(config))
    print(
        f"[Result] mean_score={stats['mean_score']:.1f}, max_score={stats['max_score']}, "
        f"best_tile={stats['best_tile']}, mean_steps={stats['mean_steps']:.1f}, "
        f"won={stats['won']}, lost={stats['lost']}"
    )


if __name__ == "__main__":
    main()
