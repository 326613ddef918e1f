"""
hardness.py — Board difficulty metrics on a tile graph

This module computes:

    • 3BV (Bechtel's Board Benchmark Value)
    • Opening count (zero-valued regions)
    • Mine density
    • Clue density
    • Composite hardness score and band

Main API:
    hardness = compute_hardness(tiles)

Returns a dictionary:
    {
        "3bv": int,
        "openings": int,
        "mine_density": float,
        "clue_density": float,
        "score": float,
        "band": str,
    }
"""

from __future__ import annotations
import numpy as np
from typing import Dict, Sequence

from clue import compute_clue_board, extract_zero_regions
from tiles import Tile


# ============================================================================
# Openings
# ============================================================================

def count_openings(tiles: Sequence[Tile]) -> int:
    """Number of connected zero-clue regions; each opens with one click."""
    return len(extract_zero_regions(tiles))


# ============================================================================
# 3BV Calculation
# ============================================================================

def compute_3bv(tiles: Sequence[Tile]) -> int:
    """
    3BV = (# openings) + (# numbered tiles not bordering any opening)

    The minimum number of reveals needed to clear the board.
    """
    clue = compute_clue_board(tiles)
    openings = count_openings(tiles)

    isolated = 0
    for t in tiles:
        if clue[t.id] > 0 and not any(clue[n] == 0 for n in t.neighbors):
            isolated += 1

    return openings + isolated


# ============================================================================
# Composite Hardness Score
# ============================================================================

def composite_score(
    bv: int,
    openings: int,
    mine_density: float,
    clue_density: float,
    area: int
) -> float:
    """
    Heuristic composite hardness score. Higher score = harder board.

    Weighted contributions:
        • 3BV per tile:     structural difficulty
        • mine_density:     randomness difficulty
        • clue_density:     informational density
        • openings:         inversely affects difficulty
    """
    score = (
        0.6 * (bv / area)
        + 0.4 * mine_density
        + 0.3 * clue_density
        - 0.2 * (openings / area)
    )
    return float(score)


def hardness_band(score: float) -> str:
    if score < 0.05:
        return "easy"
    if score < 0.09:
        return "medium"
    if score < 0.14:
        return "hard"
    return "expert"


# ============================================================================
# Main API
# ============================================================================

def compute_hardness(tiles: Sequence[Tile]) -> Dict:
    """
    Compute all hardness metrics for a mined board.

    Args:
        tiles: board after place_mines()
    """
    area = len(tiles)
    clue = compute_clue_board(tiles)

    mine_density = float(np.sum(clue < 0) / area)
    clue_density = float(np.sum(clue > 0) / area)

    openings = count_openings(tiles)
    bv = compute_3bv(tiles)

    score = composite_score(
        bv=bv,
        openings=openings,
        mine_density=mine_density,
        clue_density=clue_density,
        area=area,
    )

    return {
        "3bv": int(bv),
        "openings": int(openings),
        "mine_density": mine_density,
        "clue_density": clue_density,
        "score": score,
        "band": hardness_band(score),
    }
