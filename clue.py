"""
Clue Computation and Zero-Region Utilities on a tile graph

This module provides:
    • mine_mask():              boolean mine vector indexed by tile id
    • compute_adjacent_mines(): neighbor mine count per tile
    • compute_clue_board():     clue vector (-1 for mines)
    • flood_zero_region():      zero-region expansion
    • extract_zero_regions():   all connected zero-clue components

Adjacency comes from Tile.neighbors, so the same code serves the
sphere and the cube meshes.
"""

from __future__ import annotations
import numpy as np
from typing import List, Sequence

from tiles import Tile


# ============================================================
# MINES & CLUES
# ============================================================

def mine_mask(tiles: Sequence[Tile]) -> np.ndarray:
    """Bool array of length N, True where the tile holds a mine."""
    return np.fromiter((t.is_mine for t in tiles), dtype=bool, count=len(tiles))


def compute_adjacent_mines(tiles: Sequence[Tile], mines: np.ndarray) -> np.ndarray:
    """
    Count mine neighbors for every tile.

    Args:
        tiles: mesh tiles (only `neighbors` is read)
        mines: bool array from mine_mask() or an equivalent layout

    Returns:
        int array, counts[i] = |{u in neighbors(i) : mines[u]}|
    """
    counts = np.zeros(len(tiles), dtype=int)
    for t in tiles:
        if t.neighbors:
            counts[t.id] = int(mines[list(t.neighbors)].sum())
    return counts


def compute_clue_board(tiles: Sequence[Tile]) -> np.ndarray:
    """
    Clue vector for a mined board:
        -1  for mines
         k  for the number of adjacent mines otherwise
    """
    mines = mine_mask(tiles)
    clue = compute_adjacent_mines(tiles, mines)
    clue[mines] = -1
    return clue


# ============================================================
# ZERO-REGION DETECTION
# ============================================================

def flood_zero_region(
    clue: np.ndarray,
    tiles: Sequence[Tile],
    start: int,
    visited: np.ndarray
) -> List[int]:
    """
    Expand a connected zero-clue region beginning at `start`.

    Args:
        clue: clue vector (computed by compute_clue_board)
        tiles: mesh tiles providing adjacency
        start: id of a tile with clue 0
        visited: boolean mask updated in-place

    Returns:
        region: list of tile ids belonging to the zero-region
    """
    stack = [start]
    visited[start] = True
    region = [start]

    while stack:
        current = stack.pop()
        for nid in tiles[current].neighbors:
            if clue[nid] == 0 and not visited[nid]:
                visited[nid] = True
                region.append(nid)
                stack.append(nid)

    return region


def extract_zero_regions(tiles: Sequence[Tile]) -> List[List[int]]:
    """All connected zero-clue regions of a mined board, in id order of their first tile."""
    clue = compute_clue_board(tiles)
    visited = np.zeros(len(tiles), dtype=bool)
    regions: List[List[int]] = []

    for tid in range(len(tiles)):
        if clue[tid] == 0 and not visited[tid]:
            regions.append(flood_zero_region(clue, tiles, tid, visited))

    return regions
