"""
Regular icosahedron on the unit sphere.

The base solid for the Goldberg generator: 12 vertices built from the
golden ratio and a fixed table of 20 triangular faces.
"""

from __future__ import annotations
import math
import numpy as np
from typing import Tuple


PHI = (1.0 + math.sqrt(5.0)) / 2.0

_RAW_VERTICES = [
    [-1, PHI, 0], [1, PHI, 0], [-1, -PHI, 0], [1, -PHI, 0],
    [0, -1, PHI], [0, 1, PHI], [0, -1, -PHI], [0, 1, -PHI],
    [PHI, 0, -1], [PHI, 0, 1], [-PHI, 0, -1], [-PHI, 0, 1],
]

FACES = (
    (0, 11, 5), (0, 5, 1), (0, 1, 7), (0, 7, 10), (0, 10, 11),
    (1, 5, 9), (5, 11, 4), (11, 10, 2), (10, 7, 6), (7, 1, 8),
    (3, 9, 4), (3, 4, 2), (3, 2, 6), (3, 6, 8), (3, 8, 9),
    (4, 9, 5), (2, 4, 11), (6, 2, 10), (8, 6, 7), (9, 8, 1),
)


def create_icosahedron() -> Tuple[np.ndarray, np.ndarray]:
    """
    Returns:
        vertices: (12, 3) float array, every row of unit length
        faces:    (20, 3) int array of vertex indices
    """
    verts = np.array(_RAW_VERTICES, dtype=np.float64)
    verts /= np.linalg.norm(verts, axis=1, keepdims=True)
    return verts, np.array(FACES, dtype=np.int64)
