"""
Cube surface tile generator (cube mode).

Each of the six faces of [-1, 1]³ carries an n×n grid of square tiles,
6·n² tiles in total. Neighbors are found by center distance: two tiles
are adjacent iff their centers lie within cell_size·√2 (plus a 1%
tolerance). That captures the 8 surrounding tiles on a face and the
matching tiles across a shared cube edge without seam tables.

The pairwise distance matrix is O(N²); fine for the preset sizes (a few
hundred to a few thousand tiles), too slow for very large grids.
"""

from __future__ import annotations
import logging
import numpy as np
from typing import List

from geometry import as_tuple
from tiles import Tile, check_size


logger = logging.getLogger(__name__)

# Relative slack added to the neighbor distance threshold.
NEIGHBOR_TOLERANCE = 0.01

# origin corner, u direction, v direction, outward normal
FACES = (
    ((-1, -1, 1), (1, 0, 0), (0, 1, 0), (0, 0, 1)),     # +Z front
    ((1, -1, -1), (-1, 0, 0), (0, 1, 0), (0, 0, -1)),   # -Z back
    ((-1, -1, -1), (0, 0, 1), (0, 1, 0), (-1, 0, 0)),   # -X left
    ((1, -1, 1), (0, 0, -1), (0, 1, 0), (1, 0, 0)),     # +X right
    ((-1, 1, 1), (1, 0, 0), (0, 0, -1), (0, 1, 0)),     # +Y top
    ((-1, -1, -1), (1, 0, 0), (0, 0, 1), (0, -1, 0)),   # -Y bottom
)


# ============================================================
# NEIGHBOR DETECTION
# ============================================================

def neighbor_threshold(cell_size: float) -> float:
    return cell_size * np.sqrt(2.0) + cell_size * NEIGHBOR_TOLERANCE


def find_neighbors(centers: np.ndarray, normals: np.ndarray, cell_size: float) -> List[List[int]]:
    """
    Pairwise center-distance adjacency.

    Tiles on opposite faces are never linked. At n = 1 the opposite-face
    distance (2) is inside the threshold even though the faces share no
    edge; for n >= 2 it never is.
    """
    sq = np.einsum("ij,ij->i", centers, centers)
    dist_sq = sq[:, None] + sq[None, :] - 2.0 * (centers @ centers.T)

    threshold = neighbor_threshold(cell_size)
    close = dist_sq <= threshold * threshold
    opposite = (normals @ normals.T) < -0.5
    adjacent = close & ~opposite
    np.fill_diagonal(adjacent, False)

    return [np.flatnonzero(row).tolist() for row in adjacent]


# ============================================================
# GENERATOR
# ============================================================

def generate_cube_surface(n: int) -> List[Tile]:
    """
    Generate n×n square tiles on each face of the cube [-1, 1]³.

    Args:
        n: grid size per face, integer >= 1

    Returns:
        list of 6·n² tiles, face by face, row-major within a face

    Raises:
        MeshParameterError: n is not an integer >= 1
    """
    n = check_size("n", n)
    cell_size = 2.0 / n

    cells = []
    for origin, u_dir, v_dir, normal in FACES:
        origin = np.array(origin, dtype=float)
        u_step = np.array(u_dir, dtype=float) * cell_size
        v_step = np.array(v_dir, dtype=float) * cell_size

        for row in range(n):
            for col in range(n):
                # top-left, top-right, bottom-right, bottom-left
                corners = [(col, row), (col + 1, row), (col + 1, row + 1), (col, row + 1)]
                verts = np.array([origin + u * u_step + v * v_step for u, v in corners])
                cells.append((verts, verts.mean(axis=0), normal))

    centers = np.array([c[1] for c in cells])
    normals = np.array([c[2] for c in cells], dtype=float)
    neighbors = find_neighbors(centers, normals, cell_size)

    tiles = [
        Tile(
            id=idx,
            center=as_tuple(center),
            vertices=tuple(as_tuple(v) for v in verts),
            normal=as_tuple(normal),
            neighbors=tuple(neighbors[idx]),
            sides=4,
        )
        for idx, (verts, center, normal) in enumerate(cells)
    ]

    logger.debug("cube n=%d: %d tiles", n, len(tiles))
    return tiles
