"""
analysis_tools.py — Diagnostic utilities for meshes and boards

This module includes:
    • Mesh structure summaries (side histogram, degree stats, symmetry)
    • Board summaries (mine / clue / zero counts, densities)
    • Generic distribution statistics

No plotting is performed.
"""

from __future__ import annotations
import numpy as np
from collections import Counter
from typing import Any, Dict, List, Sequence

from clue import compute_clue_board
from tiles import Tile, is_symmetric


# ======================================================================
#  MESH ANALYSIS
# ======================================================================

def mesh_summary(tiles: Sequence[Tile]) -> Dict[str, Any]:
    """
    Structural facts about a generated mesh.

    Returns:
        {
            "tiles": int,
            "sides": {sides: count},
            "degree": distribution_stats of neighbor counts,
            "symmetric": bool,
            "dense_ids": bool,
        }
    """
    degrees = [len(t.neighbors) for t in tiles]
    return {
        "tiles": len(tiles),
        "sides": dict(sorted(Counter(t.sides for t in tiles).items())),
        "degree": distribution_stats(degrees),
        "symmetric": is_symmetric(tiles),
        "dense_ids": [t.id for t in tiles] == list(range(len(tiles))),
    }


# ======================================================================
#  BOARD ANALYSIS
# ======================================================================

def board_summary(tiles: Sequence[Tile]) -> Dict[str, Any]:
    """Basic board characteristics. No hardness bands; those live in hardness.py."""
    clue = compute_clue_board(tiles)
    area = len(tiles)
    num_mines = int(np.sum(clue < 0))
    num_clues = int(np.sum(clue > 0))
    return {
        "area": area,
        "num_mines": num_mines,
        "num_clues": num_clues,
        "num_zeros": int(np.sum(clue == 0)),
        "num_revealed": sum(1 for t in tiles if t.is_revealed),
        "num_flagged": sum(1 for t in tiles if t.is_flagged),
        "mine_density": float(num_mines / area) if area else 0.0,
        "clue_density": float(num_clues / area) if area else 0.0,
    }


# ======================================================================
#  DISTRIBUTION ANALYSIS
# ======================================================================

def distribution_stats(values: List[float]) -> Dict[str, float]:
    """
    Generic distribution summarizer for lists.
    Returns an empty dict for an empty input.
    """
    if len(values) == 0:
        return {}

    arr = np.array(values, dtype=float)
    return {
        "count": len(arr),
        "min": float(arr.min()),
        "max": float(arr.max()),
        "mean": float(arr.mean()),
        "std": float(arr.std()),
        "median": float(np.median(arr)),
        "q25": float(np.percentile(arr, 25)),
        "q75": float(np.percentile(arr, 75)),
    }
