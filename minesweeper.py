"""
Minesweeper engine on an arbitrary tile graph.

This module provides:
    • init_game_tiles():  attach puzzle state to mesh tiles
    • place_mines():      first-click-safe mine placement + clue counts
    • reveal_tile():      reveal with breadth-first flood fill
    • toggle_flag():      flag / unflag an unrevealed tile
    • check_win():        every non-mine tile revealed
    • reveal_all_mines(): expose mines after a loss
    • EngineState:        tile list + the first-click flag, snapshot-able

Every operation takes a tile list and returns a new list; the input is
never modified. Tiles are frozen, so unchanged tiles are shared between
the old and new lists.

No geometry lives here. Only Tile.id and Tile.neighbors are read.
"""

from __future__ import annotations
import logging
import numpy as np
from collections import deque
from dataclasses import dataclass, field, replace
from typing import List, Optional, Sequence

from clue import compute_adjacent_mines
from tiles import Tile, check_tile_id


logger = logging.getLogger(__name__)


# ============================================================
# SETUP
# ============================================================

def init_game_tiles(mesh_tiles: Sequence[Tile]) -> List[Tile]:
    """Fresh puzzle state: no mines, nothing revealed or flagged."""
    return [
        replace(t, is_mine=False, is_revealed=False, is_flagged=False, adjacent_mines=0)
        for t in mesh_tiles
    ]


def place_mines(
    tiles: Sequence[Tile],
    mine_count: int,
    exclude_id: int,
    rng: Optional[np.random.Generator] = None,
) -> List[Tile]:
    """
    Place mines outside the safe zone of the first revealed tile.

    The safe zone is exclude_id plus its neighbors. Candidates are all
    other ids, shuffled with an unbiased permutation; the first
    min(mine_count, len(candidates)) become mines. Requests for more
    mines than candidates are clamped (logged, not raised).

    Args:
        tiles: board from init_game_tiles()
        mine_count: requested number of mines, >= 0
        exclude_id: id of the first revealed tile
        rng: numpy Generator; a fresh default_rng() when omitted

    Returns:
        new tile list with is_mine and adjacent_mines set on every tile

    Raises:
        TileIdError: exclude_id outside [0, N)
        ValueError: negative mine_count
    """
    exclude_id = check_tile_id(tiles, exclude_id)
    if mine_count < 0:
        raise ValueError(f"mine_count must be >= 0, got {mine_count}")
    if rng is None:
        rng = np.random.default_rng()

    safe_zone = {exclude_id, *tiles[exclude_id].neighbors}
    candidates = np.array([t.id for t in tiles if t.id not in safe_zone], dtype=int)

    actual = min(int(mine_count), len(candidates))
    if actual < mine_count:
        logger.warning(
            "requested %d mines but only %d tiles are eligible; clamping",
            mine_count, actual,
        )

    mines = np.zeros(len(tiles), dtype=bool)
    mines[rng.permutation(candidates)[:actual]] = True
    counts = compute_adjacent_mines(tiles, mines)

    return [
        replace(t, is_mine=bool(mines[t.id]), adjacent_mines=int(counts[t.id]))
        for t in tiles
    ]


# ============================================================
# REVEAL LOGIC
# ============================================================

def reveal_tile(tiles: Sequence[Tile], tile_id: int) -> List[Tile]:
    """
    Reveal a tile and flood-fill zero regions including border clues.

    Already revealed or flagged targets are a no-op. A mine target is
    revealed and not expanded. During the flood fill, flagged tiles
    are never revealed and block expansion; mines are never revealed.
    """
    tile_id = check_tile_id(tiles, tile_id)
    new_tiles = list(tiles)

    target = new_tiles[tile_id]
    if target.is_revealed or target.is_flagged:
        return new_tiles

    if target.is_mine:
        new_tiles[tile_id] = replace(target, is_revealed=True)
        return new_tiles

    queue = deque([tile_id])
    visited = {tile_id}

    while queue:
        tile = new_tiles[queue.popleft()]
        if tile.is_flagged or tile.is_mine:
            continue

        new_tiles[tile.id] = replace(tile, is_revealed=True)

        if tile.adjacent_mines == 0:
            for nid in tile.neighbors:
                if nid not in visited and not new_tiles[nid].is_revealed:
                    visited.add(nid)
                    queue.append(nid)

    return new_tiles


def toggle_flag(tiles: Sequence[Tile], tile_id: int) -> List[Tile]:
    """Flip the flag on an unrevealed tile; revealed tiles are ignored."""
    tile_id = check_tile_id(tiles, tile_id)
    new_tiles = list(tiles)
    tile = new_tiles[tile_id]
    if not tile.is_revealed:
        new_tiles[tile_id] = replace(tile, is_flagged=not tile.is_flagged)
    return new_tiles


def check_win(tiles: Sequence[Tile]) -> bool:
    """True iff every non-mine tile is revealed. Flags are irrelevant."""
    return all(t.is_mine or t.is_revealed for t in tiles)


def reveal_all_mines(tiles: Sequence[Tile]) -> List[Tile]:
    return [replace(t, is_revealed=True) if t.is_mine and not t.is_revealed else t for t in tiles]


# ============================================================
# ENGINE STATE
# ============================================================

@dataclass
class EngineState:
    """
    Tile list plus the bookkeeping that travels with it.

    mines_placed replaces a global "first click" flag: mines are laid
    on the first reveal so that tile and its neighbors are safe.
    """

    tiles: List[Tile] = field(default_factory=list)
    mine_count: int = 0
    flag_count: int = 0
    mines_placed: bool = False

    def copy(self) -> "EngineState":
        return EngineState(
            tiles=list(self.tiles),
            mine_count=self.mine_count,
            flag_count=self.flag_count,
            mines_placed=self.mines_placed,
        )
