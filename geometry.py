"""
Vector helpers shared by the tile generators.

This module provides:
    • normalize / cross on 3-vectors
    • tangent_basis():  two unit vectors spanning the plane orthogonal to a normal
    • angular_order():  order points around a reference vertex by polar angle

Everything works on numpy float arrays; callers convert to tuples
when they build Tile objects.
"""

from __future__ import annotations
import math
import numpy as np
from typing import List, Sequence, Tuple


Vec3 = Tuple[float, float, float]


# ============================================================
# BASIC VECTOR OPS
# ============================================================

def normalize(v) -> np.ndarray:
    """Scale v to unit length. The zero vector is returned unchanged."""
    v = np.asarray(v, dtype=float)
    length = np.linalg.norm(v)
    if length == 0:
        return np.zeros(3)
    return v / length


def cross(a, b) -> np.ndarray:
    return np.cross(np.asarray(a, dtype=float), np.asarray(b, dtype=float))


def as_tuple(v) -> Vec3:
    """Plain-float 3-tuple, the storage format used by Tile."""
    return (float(v[0]), float(v[1]), float(v[2]))


# ============================================================
# TANGENT PLANE
# ============================================================

def tangent_basis(normal) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return (u, v), two orthonormal vectors perpendicular to `normal`.

    The helper axis is +Y unless the normal is nearly parallel to it,
    in which case +X is used. (u, v, normal) is right-handed, so
    increasing atan2(v, u) runs counter-clockwise seen from outside.
    """
    normal = np.asarray(normal, dtype=float)
    helper = np.array([0.0, 1.0, 0.0]) if abs(normal[1]) < 0.9 else np.array([1.0, 0.0, 0.0])
    u = normalize(cross(normal, helper))
    v = cross(normal, u)
    return u, v


def angular_order(reference, normal, points: Sequence) -> List[int]:
    """
    Sort points around `reference` by polar angle in its tangent plane.

    Args:
        reference: the vertex the polygon surrounds
        normal: outward normal at the reference vertex
        points: sequence of 3D points

    Returns:
        indices into `points`, ordered by ascending atan2 angle
    """
    reference = np.asarray(reference, dtype=float)
    u, v = tangent_basis(normal)

    angles = []
    for p in points:
        d = np.asarray(p, dtype=float) - reference
        angles.append(math.atan2(float(d @ v), float(d @ u)))

    return sorted(range(len(points)), key=lambda i: angles[i])
