"""
Tile data model shared by the mesh generators and the puzzle engine.

A mesh is a flat list of Tile objects indexed by id. Neighbors are
stored as integer ids into that list, never as object references, so a
snapshot of the board is a shallow list copy.
"""

from __future__ import annotations
import operator
from dataclasses import dataclass
from typing import List, Sequence, Tuple


Vec3 = Tuple[float, float, float]


# ============================================================
# ERRORS
# ============================================================

class MeshParameterError(ValueError):
    """Raised for an invalid generator argument (frequency or grid size)."""


class TileIdError(IndexError):
    """Raised when a tile id does not reference a tile of the current mesh."""


# ============================================================
# TILE
# ============================================================

@dataclass(frozen=True)
class Tile:
    """
    One polygonal tile on the surface of a solid.

    Geometry:
        id:        dense index in [0, N)
        center:    tile center (unit vector for sphere tiles)
        vertices:  boundary polygon, counter-clockwise seen along `normal`
        normal:    outward unit normal
        neighbors: ids of adjacent tiles (symmetric relation)
        sides:     boundary vertex count

    Puzzle state:
        is_mine, is_revealed, is_flagged, adjacent_mines
    """

    id: int
    center: Vec3
    vertices: Tuple[Vec3, ...]
    normal: Vec3
    neighbors: Tuple[int, ...]
    sides: int
    is_mine: bool = False
    is_revealed: bool = False
    is_flagged: bool = False
    adjacent_mines: int = 0


# ============================================================
# HELPERS
# ============================================================

def check_size(name: str, value) -> int:
    """Validate a generator size argument (integer >= 1)."""
    if isinstance(value, bool):
        raise MeshParameterError(f"{name} must be an integer >= 1, got {value!r}")
    try:
        value = operator.index(value)
    except TypeError:
        raise MeshParameterError(f"{name} must be an integer >= 1, got {value!r}") from None
    if value < 1:
        raise MeshParameterError(f"{name} must be >= 1, got {value}")
    return value


def check_tile_id(tiles: Sequence[Tile], tile_id) -> int:
    """Return tile_id as an int, or raise TileIdError if it is out of range."""
    if isinstance(tile_id, bool):
        raise TileIdError(f"tile id must be an integer, got {tile_id!r}")
    try:
        tile_id = operator.index(tile_id)
    except TypeError:
        raise TileIdError(f"tile id must be an integer, got {tile_id!r}") from None
    if not 0 <= tile_id < len(tiles):
        raise TileIdError(f"tile id {tile_id} outside [0, {len(tiles)})")
    return tile_id


def neighbor_lists(tiles: Sequence[Tile]) -> List[Tuple[int, ...]]:
    return [t.neighbors for t in tiles]


def is_symmetric(tiles: Sequence[Tile]) -> bool:
    """True iff j in neighbors(i) <=> i in neighbors(j) for every pair."""
    sets = [set(t.neighbors) for t in tiles]
    for i, nbrs in enumerate(sets):
        for j in nbrs:
            if not 0 <= j < len(sets) or i not in sets[j]:
                return False
    return True
