import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cave_maze.core.grid import Direction, Tile, TileGrid
from cave_maze.core.params import MazeParams
from cave_maze.core.complexity import MazeStats
from cave_maze.algo.dfs import gen_maze
from cave_maze.algo.rooms import gen_rooms

class TestComplexity(unittest.TestCase):
    def test_perfect_maze_stats(self):
        params = MazeParams(20, 20, room_count=0)
        grid = TileGrid()
        gen_maze(grid, random.Random(42), params)

        stats = MazeStats.calculate_stats(grid, params)
        self.assertEqual(stats["edges"], params.width * params.height - 1)
        self.assertEqual(stats["horizontal_edges"] + stats["vertical_edges"], stats["edges"])
        self.assertGreater(stats["dead_ends"], 0)
        self.assertEqual(stats["dead_ends"] + stats["corridors"] + stats["intersections"],
                         params.width * params.height)

    def test_rooms_reduce_dead_ends(self):
        params = MazeParams(30, 30, room_count=40)
        grid = TileGrid()
        rng = random.Random(99)
        gen_maze(grid, rng, params)

        before = MazeStats.calculate_stats(grid, params)
        gen_rooms(grid, rng, params)
        after = MazeStats.calculate_stats(grid, params)

        self.assertGreater(after["edges"], before["edges"])
        self.assertLessEqual(after["dead_ends"], before["dead_ends"])

    def test_closed_and_grass_tiles(self):
        params = MazeParams(3, 3, room_count=0)
        grid = TileGrid()
        # One grass tile in an all-closed rectangle
        grid.set(params.center, Tile(0b0010_1111))

        stats = MazeStats.calculate_stats(grid, params)
        self.assertEqual(stats["edges"], 0)
        self.assertEqual(stats["dead_ends"], 0)
        self.assertEqual(stats["bias_ratio"], float("inf"))

    def test_single_corridor(self):
        params = MazeParams(3, 3, room_count=0)
        grid = TileGrid()
        grid.carve_path(params.center, Direction.RIGHT)

        stats = MazeStats.calculate_stats(grid, params)
        self.assertEqual(stats["horizontal_edges"], 1)
        self.assertEqual(stats["vertical_edges"], 0)
        self.assertEqual(stats["dead_ends"], 2)

if __name__ == '__main__':
    unittest.main()
