"""Mesh generators: icosahedron, Goldberg sphere and cube surface."""

from __future__ import annotations
import unittest
import numpy as np

from cube_surface import generate_cube_surface, neighbor_threshold
from goldberg import generate_goldberg, subdivide_icosahedron, unique_edges
from icosahedron import create_icosahedron
from tiles import MeshParameterError, is_symmetric


def winds_outward(tile) -> bool:
    """Every consecutive boundary edge turns counter-clockwise about the normal."""
    c = np.array(tile.center)
    n = np.array(tile.normal)
    verts = [np.array(v) for v in tile.vertices]
    for i in range(len(verts)):
        a = verts[i] - c
        b = verts[(i + 1) % len(verts)] - c
        if np.dot(np.cross(a, b), n) <= 0:
            return False
    return True


class TestIcosahedron(unittest.TestCase):

    def test_shape_and_unit_length(self):
        verts, faces = create_icosahedron()
        self.assertEqual(verts.shape, (12, 3))
        self.assertEqual(faces.shape, (20, 3))
        np.testing.assert_allclose(np.linalg.norm(verts, axis=1), 1.0)

    def test_every_vertex_in_five_faces(self):
        _, faces = create_icosahedron()
        counts = np.bincount(faces.ravel(), minlength=12)
        np.testing.assert_array_equal(counts, np.full(12, 5))

    def test_thirty_edges(self):
        _, faces = create_icosahedron()
        self.assertEqual(len(unique_edges([tuple(f) for f in faces])), 30)


class TestGoldberg(unittest.TestCase):

    def test_tile_counts(self):
        for f in (1, 2, 3, 4):
            tiles = generate_goldberg(f)
            self.assertEqual(len(tiles), 10 * f * f + 2)
            sides = [t.sides for t in tiles]
            self.assertEqual(sides.count(5), 12)
            self.assertEqual(sides.count(6), len(tiles) - 12)

    def test_frequency_one_is_dodecahedron(self):
        tiles = generate_goldberg(1)
        self.assertEqual(len(tiles), 12)
        for t in tiles:
            self.assertEqual(t.sides, 5)
            self.assertEqual(len(t.neighbors), 5)

    def test_subdivision_deduplicates_shared_points(self):
        points, triangles = subdivide_icosahedron(3)
        self.assertEqual(len(points), 92)
        self.assertEqual(len(triangles), 20 * 9)

    def test_ids_dense_and_neighbors_symmetric(self):
        tiles = generate_goldberg(3)
        self.assertEqual([t.id for t in tiles], list(range(len(tiles))))
        self.assertTrue(is_symmetric(tiles))
        for t in tiles:
            self.assertNotIn(t.id, t.neighbors)
            self.assertEqual(len(t.neighbors), t.sides)

    def test_geometry_on_unit_sphere(self):
        for t in generate_goldberg(2):
            self.assertAlmostEqual(float(np.linalg.norm(t.center)), 1.0)
            self.assertEqual(t.normal, t.center)
            self.assertEqual(len(t.vertices), t.sides)
            for v in t.vertices:
                self.assertAlmostEqual(float(np.linalg.norm(v)), 1.0)

    def test_boundary_is_simple_and_outward(self):
        for t in generate_goldberg(3):
            self.assertTrue(winds_outward(t), f"tile {t.id} boundary is not ordered")

    def test_invalid_frequency(self):
        for bad in (0, -1, 1.5, "2", True):
            with self.assertRaises(MeshParameterError):
                generate_goldberg(bad)

    def test_mesh_parameter_error_is_value_error(self):
        with self.assertRaises(ValueError):
            generate_goldberg(0)


class TestCubeSurface(unittest.TestCase):

    def test_tile_counts(self):
        for n in (1, 2, 3, 5):
            tiles = generate_cube_surface(n)
            self.assertEqual(len(tiles), 6 * n * n)
            self.assertTrue(all(t.sides == 4 for t in tiles))

    def test_single_tile_faces(self):
        tiles = generate_cube_surface(1)
        self.assertEqual(len(tiles), 6)
        for t in tiles:
            self.assertEqual(len(t.neighbors), 4)
            # the opposite face is the only one left out
            opposite = [u.id for u in tiles if np.dot(u.normal, t.normal) < -0.5]
            self.assertEqual(len(opposite), 1)
            self.assertNotIn(opposite[0], t.neighbors)

    def test_neighbors_symmetric(self):
        for n in (1, 2, 4):
            self.assertTrue(is_symmetric(generate_cube_surface(n)))

    def test_degrees_on_three_by_three(self):
        tiles = generate_cube_surface(3)
        # face 0 is +Z, row-major: id 4 is the face center, id 0 a corner
        self.assertEqual(set(tiles[4].neighbors), {0, 1, 2, 3, 5, 6, 7, 8})
        self.assertEqual(len(tiles[0].neighbors), 7)
        self.assertEqual(max(len(t.neighbors) for t in tiles), 8)

    def test_cross_face_neighbors_within_threshold(self):
        n = 4
        tiles = generate_cube_surface(n)
        limit = neighbor_threshold(2.0 / n)
        crossed = 0
        for t in tiles:
            for nid in t.neighbors:
                u = tiles[nid]
                dist = np.linalg.norm(np.subtract(t.center, u.center))
                self.assertLessEqual(dist, limit)
                if u.normal != t.normal:
                    crossed += 1
        self.assertGreater(crossed, 0)

    def test_geometry(self):
        for t in generate_cube_surface(2):
            np.testing.assert_allclose(np.mean(t.vertices, axis=0), t.center)
            self.assertTrue(np.all(np.abs(t.vertices) <= 1.0 + 1e-12))
            # the center lies on the face plane given by the normal
            self.assertAlmostEqual(float(np.dot(t.center, t.normal)), 1.0)
            self.assertTrue(winds_outward(t))

    def test_invalid_size(self):
        for bad in (0, -3, 2.0, None):
            with self.assertRaises(MeshParameterError):
                generate_cube_surface(bad)


if __name__ == "__main__":
    unittest.main()
