"""
Board Generation Utilities

This module handles:

    • building the mesh for a game mode (sphere or cube)
    • producing a fully mined board in one call, for metrics and
      batch evaluation where there is no interactive first click

Interactive games go through game.MinesweeperGame, which defers mine
placement to the first reveal.
"""

from __future__ import annotations
import numpy as np
from typing import List, Optional

from cube_surface import generate_cube_surface
from density import GameConfig, MODES
from goldberg import generate_goldberg
from minesweeper import init_game_tiles, place_mines
from tiles import Tile


# ============================================================
# MESH
# ============================================================

def build_mesh(mode: str, size_param: int) -> List[Tile]:
    """
    Args:
        mode: "sphere" or "cube"
        size_param: Goldberg frequency or per-face grid size
    """
    if mode == "sphere":
        return generate_goldberg(size_param)
    if mode == "cube":
        return generate_cube_surface(size_param)
    raise ValueError(f"unknown mode {mode!r}, expected one of {MODES}")


def mesh_for_config(config: GameConfig) -> List[Tile]:
    return build_mesh(config.mode, config.size_param)


# ============================================================
# MINED BOARDS
# ============================================================

def generate_board(
    config: GameConfig,
    first_id: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    mesh: Optional[List[Tile]] = None,
) -> List[Tile]:
    """
    Build a mined board as if `first_id` had been clicked first.

    Args:
        config: game settings
        first_id: safe tile; drawn uniformly at random when omitted
        rng: numpy Generator used for the first tile and for placement
        mesh: pre-built mesh for `config`, to skip regeneration

    Returns:
        tile list with mines and clue counts, nothing revealed
    """
    if rng is None:
        rng = np.random.default_rng()
    tiles = init_game_tiles(mesh if mesh is not None else mesh_for_config(config))
    if first_id is None:
        first_id = int(rng.integers(len(tiles)))
    return place_mines(tiles, config.mine_count, first_id, rng=rng)
