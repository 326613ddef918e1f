"""Clue vectors, zero regions and 3BV on small hand-built graphs."""

from __future__ import annotations
import unittest
from dataclasses import replace
import numpy as np

from clue import (
    compute_adjacent_mines,
    compute_clue_board,
    extract_zero_regions,
    flood_zero_region,
    mine_mask,
)
from hardness import compute_3bv, compute_hardness, count_openings, hardness_band
from tiles import Tile


def make_board(edges, n, mine_ids):
    nbrs = [set() for _ in range(n)]
    for a, b in edges:
        nbrs[a].add(b)
        nbrs[b].add(a)
    origin = (0.0, 0.0, 0.0)
    tiles = [
        Tile(id=i, center=origin, vertices=(), normal=origin,
             neighbors=tuple(sorted(nbrs[i])), sides=0, is_mine=i in mine_ids)
        for i in range(n)
    ]
    counts = compute_adjacent_mines(tiles, mine_mask(tiles))
    return [replace(t, adjacent_mines=int(counts[t.id])) for t in tiles]


def path_board(n, mine_ids):
    return make_board([(i, i + 1) for i in range(n - 1)], n, mine_ids)


class TestClue(unittest.TestCase):

    def test_clue_board(self):
        tiles = path_board(5, {2})
        np.testing.assert_array_equal(compute_clue_board(tiles), [0, 1, -1, 1, 0])

    def test_adjacent_mines_star(self):
        # hub 0 with four leaves, two of them mined
        tiles = make_board([(0, i) for i in range(1, 5)], 5, {1, 3})
        np.testing.assert_array_equal(
            compute_adjacent_mines(tiles, mine_mask(tiles)), [2, 0, 0, 0, 0]
        )

    def test_flood_zero_region(self):
        tiles = path_board(6, {3})
        clue = compute_clue_board(tiles)
        visited = np.zeros(len(tiles), dtype=bool)
        region = flood_zero_region(clue, tiles, 0, visited)
        self.assertEqual(set(region), {0, 1})
        self.assertTrue(visited[0] and visited[1])
        self.assertFalse(visited[2])

    def test_extract_zero_regions_multiple(self):
        # clue: [0, 0, 1, -1, 1, 0, 0, 0]
        tiles = path_board(8, {3})
        regions = extract_zero_regions(tiles)
        self.assertEqual({frozenset(r) for r in regions},
                         {frozenset({0, 1}), frozenset({5, 6, 7})})


class TestHardness(unittest.TestCase):

    def test_3bv_single_opening(self):
        # clue: [0, 0, 0, 1, -1]; the 1 borders the opening
        tiles = path_board(5, {4})
        self.assertEqual(count_openings(tiles), 1)
        self.assertEqual(compute_3bv(tiles), 1)

    def test_3bv_isolated_numbers(self):
        # clue: [1, -1, 1]; no openings, two isolated numbers
        tiles = path_board(3, {1})
        self.assertEqual(count_openings(tiles), 0)
        self.assertEqual(compute_3bv(tiles), 2)

    def test_3bv_two_openings(self):
        tiles = path_board(8, {3})
        self.assertEqual(compute_3bv(tiles), 2)

    def test_compute_hardness(self):
        tiles = path_board(8, {3})
        h = compute_hardness(tiles)
        self.assertEqual(h["3bv"], 2)
        self.assertEqual(h["openings"], 2)
        self.assertAlmostEqual(h["mine_density"], 1 / 8)
        self.assertAlmostEqual(h["clue_density"], 2 / 8)
        self.assertIn(h["band"], ("easy", "medium", "hard", "expert"))
        self.assertEqual(h["band"], hardness_band(h["score"]))

    def test_bands(self):
        self.assertEqual(hardness_band(0.0), "easy")
        self.assertEqual(hardness_band(0.07), "medium")
        self.assertEqual(hardness_band(0.1), "hard")
        self.assertEqual(hardness_band(0.5), "expert")


if __name__ == "__main__":
    unittest.main()
