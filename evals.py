"""
evals.py — Batch evaluation of game configurations
(Non-plotting version)

A uniformly random player is run over many games of a configuration to
get a feel for how forgiving a mode / size / density combination is.

Includes:
    • play_random_game()         — one game to completion
    • evaluate_random_policy()   — full evaluation loop
    • difficulty_buckets()       — 3BV-based difficulty tiers
    • summarize_eval()           — summary text
    • compare_configs()          — text-only comparison table
"""

from __future__ import annotations
import argparse
import numpy as np
from tqdm import tqdm

from board_generation import mesh_for_config
from density import GameConfig, MODES
from game import PLAYING, WON, MinesweeperGame
from hardness import compute_3bv
from logger_config import configure_logging


# ======================================================================
# Difficulty buckets (by 3BV)
# ======================================================================

DIFFICULTY_BUCKETS = [
    (0, 10, "Trivial"),
    (10, 25, "Easy"),
    (25, 50, "Medium"),
    (50, 100, "Hard"),
    (100, 200, "Expert"),
    (200, 10**9, "Extreme"),
]


# ======================================================================
# Play a single complete game
# ======================================================================

def play_random_game(game: MinesweeperGame, rng: np.random.Generator, mesh=None):
    """
    Reset `game` and reveal random hidden tiles until it ends.

    Returns:
        win (bool)
        steps (int)
        three_bv (int)   3BV of the board laid by the first click
    """
    game.reset(mesh=mesh)
    steps = 0
    three_bv = 0

    while game.phase == PLAYING:
        hidden = [t.id for t in game.tiles if not t.is_revealed and not t.is_flagged]
        tile_id = hidden[int(rng.integers(len(hidden)))]
        first = steps == 0
        game.reveal(tile_id)
        steps += 1
        if first:
            three_bv = compute_3bv(game.tiles)

    return game.phase == WON, steps, three_bv


# ======================================================================
# Evaluate over N episodes at a fixed configuration
# ======================================================================

def evaluate_random_policy(config: GameConfig, episodes: int = 100, seed: int = 0):
    """
    Full evaluation:
        - win rate
        - avg steps
        - avg 3BV
        - per-episode logs
    """
    rng = np.random.default_rng(seed)
    mesh = mesh_for_config(config)
    game = MinesweeperGame(config=config, seed=seed)

    wins = 0
    all_steps = []
    all_3bv = []

    for _ in tqdm(range(episodes), desc=f"Eval {config.mode}/{config.size}"):
        win, steps, tbv = play_random_game(game, rng, mesh=mesh)
        wins += int(win)
        all_steps.append(steps)
        all_3bv.append(tbv)

    all_steps = np.array(all_steps, dtype=np.float32)
    all_3bv = np.array(all_3bv, dtype=np.float32)

    return {
        "wins": int(wins),
        "episodes": episodes,
        "win_rate": wins / episodes,
        "avg_steps": float(all_steps.mean()),
        "avg_3bv": float(all_3bv.mean()),
        "steps": all_steps.tolist(),
        "three_bv": all_3bv.tolist(),
    }


# ======================================================================
# Difficulty bucket analysis
# ======================================================================

def difficulty_buckets(eval_data: dict):
    """
    Splits episodes into difficulty categories based on 3BV.
    Returns a list of bucket summaries.
    """
    steps = np.array(eval_data["steps"])
    bv = np.array(eval_data["three_bv"])

    results = []

    for lo, hi, label in DIFFICULTY_BUCKETS:
        mask = (bv >= lo) & (bv < hi)
        count = int(mask.sum())
        if count == 0:
            continue

        results.append({
            "difficulty": label,
            "count": count,
            "avg_steps": float(steps[mask].mean()),
        })

    return results


# ======================================================================
# Summaries and comparisons (non-plotting)
# ======================================================================

def summarize_eval(name: str, results: dict) -> str:
    return (
        f"\n===== {name} Evaluation Summary =====\n"
        f"Win Rate:                {results['win_rate']:.3f}\n"
        f"Average Steps:           {results['avg_steps']:.2f}\n"
        f"Average 3BV:             {results['avg_3bv']:.2f}\n"
    )


def compare_configs(result_dict: dict):
    """
    Print a readable table comparing configurations.
    Input:
        result_dict = {
            "sphere/small": {...},
            "cube/small": {...},
        }
    """
    print("\n================ CONFIG COMPARISON ================")
    print(f"{'Config':<16} {'WinRate':<10} {'AvgSteps':<10} {'Avg3BV':<10}")

    for name, res in result_dict.items():
        print(
            f"{name:<16} "
            f"{res['win_rate']:<10.3f} "
            f"{res['avg_steps']:<10.2f} "
            f"{res['avg_3bv']:<10.2f}"
        )


# ================================================================
#  STANDALONE EXECUTION ENTRY
# ================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(description="Random-play evaluation of game presets")
    parser.add_argument("--modes", nargs="+", default=list(MODES), choices=MODES)
    parser.add_argument("--size", default="small")
    parser.add_argument("--density", type=float, default=0.15)
    parser.add_argument("--episodes", type=int, default=100)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args(argv)

    configure_logging("WARNING")

    results = {}
    for mode in args.modes:
        config = GameConfig(mode=mode, size=args.size, density=args.density)
        name = f"{mode}/{args.size}"
        results[name] = evaluate_random_policy(config, episodes=args.episodes, seed=args.seed)
        print(summarize_eval(name, results[name]))

    compare_configs(results)
    return results


if __name__ == "__main__":
    main()
