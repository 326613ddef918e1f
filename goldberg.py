"""
Goldberg polyhedron tile generator (sphere mode).

Pipeline:
    1. subdivide each icosahedron face into a barycentric grid of
       `frequency + 1` rows, projected onto the unit sphere
    2. merge points shared between faces by rounded coordinates
    3. triangulate every face grid (frequency² small triangles)
    4. take the dual: each geodesic vertex becomes a tile bounded by the
       centroids of its incident triangles, ordered by angle
    5. tiles are neighbors iff their geodesic vertices share an edge

Result: 12 pentagons + (10·f² − 10) hexagons = 10·f² + 2 tiles.
"""

from __future__ import annotations
import logging
import numpy as np
from typing import Dict, List, Set, Tuple

from geometry import angular_order, as_tuple, normalize
from icosahedron import create_icosahedron
from tiles import Tile, check_size


logger = logging.getLogger(__name__)

# Decimal places used to key geodesic points for deduplication.
DEDUP_DECIMALS = 8


# ============================================================
# GEODESIC SUBDIVISION
# ============================================================

class _PointIndex:
    """Spatial hash of unit-sphere points keyed by rounded coordinates."""

    def __init__(self, decimals: int = DEDUP_DECIMALS):
        self.decimals = decimals
        self.points: List[np.ndarray] = []
        self._index: Dict[Tuple[float, float, float], int] = {}

    def add(self, p: np.ndarray) -> int:
        key = tuple(round(float(c), self.decimals) for c in p)
        idx = self._index.get(key)
        if idx is None:
            idx = len(self.points)
            self.points.append(p)
            self._index[key] = idx
        return idx


def subdivide_icosahedron(frequency: int) -> Tuple[np.ndarray, List[Tuple[int, int, int]]]:
    """
    Build the geodesic sphere of the given frequency.

    Returns:
        points:    (10·f² + 2, 3) array of unit vectors
        triangles: list of vertex-index triples, 20·f² entries
    """
    frequency = check_size("frequency", frequency)
    ico_verts, ico_faces = create_icosahedron()

    index = _PointIndex()
    triangles: List[Tuple[int, int, int]] = []

    for a, b, c in ico_faces:
        vA, vB, vC = ico_verts[a], ico_verts[b], ico_verts[c]

        # grid[i][j] = P(i, j) with k = frequency - i - j
        grid: List[List[int]] = []
        for i in range(frequency + 1):
            row = []
            for j in range(frequency - i + 1):
                k = frequency - i - j
                p = normalize((i * vA + j * vB + k * vC) / frequency)
                row.append(index.add(p))
            grid.append(row)

        for i in range(frequency):
            for j in range(frequency - i):
                triangles.append((grid[i][j], grid[i + 1][j], grid[i][j + 1]))
                if i + j < frequency - 1:
                    triangles.append((grid[i + 1][j], grid[i + 1][j + 1], grid[i][j + 1]))

    return np.array(index.points), triangles


def unique_edges(triangles: List[Tuple[int, int, int]]) -> List[Tuple[int, int]]:
    """Undirected triangle edges as (low, high) pairs, first-seen order."""
    seen: Set[Tuple[int, int]] = set()
    edges: List[Tuple[int, int]] = []
    for tri in triangles:
        for n in range(3):
            a, b = tri[n], tri[(n + 1) % 3]
            key = (a, b) if a < b else (b, a)
            if key not in seen:
                seen.add(key)
                edges.append(key)
    return edges


# ============================================================
# DUAL
# ============================================================

def generate_goldberg(frequency: int) -> List[Tile]:
    """
    Generate the Goldberg polyhedron tiling for a subdivision frequency.

    Args:
        frequency: icosahedron subdivision level, integer >= 1

    Returns:
        list of 10·frequency² + 2 tiles; tile id == geodesic vertex index

    Raises:
        MeshParameterError: frequency is not an integer >= 1
    """
    points, triangles = subdivide_icosahedron(frequency)

    vertex_triangles: List[List[int]] = [[] for _ in range(len(points))]
    for t_idx, tri in enumerate(triangles):
        for v_idx in tri:
            vertex_triangles[v_idx].append(t_idx)

    tri_array = np.array(triangles)
    centroids = points[tri_array].mean(axis=1)
    centroids /= np.linalg.norm(centroids, axis=1, keepdims=True)

    neighbors: List[List[int]] = [[] for _ in range(len(points))]
    for a, b in unique_edges(triangles):
        neighbors[a].append(b)
        neighbors[b].append(a)

    tiles: List[Tile] = []
    for v_idx, vertex in enumerate(points):
        ring = [centroids[t] for t in vertex_triangles[v_idx]]
        order = angular_order(vertex, vertex, ring)
        center = as_tuple(vertex)
        tiles.append(Tile(
            id=v_idx,
            center=center,
            vertices=tuple(as_tuple(ring[i]) for i in order),
            normal=center,
            neighbors=tuple(sorted(neighbors[v_idx])),
            sides=len(ring),
        ))

    logger.debug("goldberg f=%d: %d tiles, %d triangles", frequency, len(tiles), len(triangles))
    return tiles
