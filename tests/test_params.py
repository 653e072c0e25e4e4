import unittest
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from cave_maze.core.grid import CANVAS_SIZE, MAX_MAZE_SIZE, MIN_MAZE_SIZE, Direction, TilePos
from cave_maze.core.params import DirectionalBias, MazeParams, neighbors

class TestMazeParams(unittest.TestCase):
    def test_margins(self):
        params = MazeParams(7, 5)
        self.assertEqual(params.margin_x, (CANVAS_SIZE - 7) // 2 + 1)
        self.assertEqual(params.margin_y, (CANVAS_SIZE - 5) // 2 + 1)

    def test_center_is_playable(self):
        for w, h in [(1, 1), (2, 2), (3, 3), (4, 7), (100, 100)]:
            params = MazeParams(w, h)
            self.assertTrue(params.contains(params.center), f"{w}x{h}")

    def test_positions(self):
        params = MazeParams(4, 3)
        positions = list(params.positions())
        self.assertEqual(len(positions), 12)
        self.assertTrue(all(params.contains(p) for p in positions))

        interior = list(params.interior())
        self.assertEqual(len(interior), 2)

    def test_clamped(self):
        params = MazeParams.clamped(1, 500, -3)
        self.assertEqual(params.width, MIN_MAZE_SIZE)
        self.assertEqual(params.height, MAX_MAZE_SIZE)
        self.assertEqual(params.room_count, 0)

    def test_validate(self):
        MazeParams(MAX_MAZE_SIZE, MAX_MAZE_SIZE).validate()

        with self.assertRaises(ValueError):
            MazeParams(0, 5).validate()
        with self.assertRaises(ValueError):
            MazeParams(CANVAS_SIZE, 5).validate()
        with self.assertRaises(ValueError):
            MazeParams(5, 5, room_count=-1).validate()

    def test_bias_weights(self):
        self.assertEqual(DirectionalBias.NONE.weights, (1, 1))
        self.assertEqual(DirectionalBias.HORIZONTAL.weights, (2, 1))
        self.assertEqual(DirectionalBias.VERY_VERTICAL.weights, (1, 5))

class TestNeighbors(unittest.TestCase):
    def test_interior(self):
        params = MazeParams(5, 5)
        pos = params.center
        result = neighbors(pos, params)
        self.assertEqual(result, [
            (TilePos(pos.x, pos.y + 1), Direction.TOP),
            (TilePos(pos.x + 1, pos.y), Direction.RIGHT),
            (TilePos(pos.x, pos.y - 1), Direction.BOTTOM),
            (TilePos(pos.x - 1, pos.y), Direction.LEFT),
        ])

    def test_clamped_at_corner(self):
        params = MazeParams(5, 5)
        corner = TilePos(params.margin_x, params.margin_y)
        result = dict((d, p) for p, d in neighbors(corner, params))

        # Moving off the rectangle stays in place
        self.assertEqual(result[Direction.LEFT], corner)
        self.assertEqual(result[Direction.BOTTOM], corner)
        self.assertEqual(result[Direction.RIGHT], TilePos(corner.x + 1, corner.y))
        self.assertEqual(result[Direction.TOP], TilePos(corner.x, corner.y + 1))

    def test_clamped_at_top_right(self):
        params = MazeParams(3, 4)
        corner = TilePos(params.margin_x + 2, params.margin_y + 3)
        result = dict((d, p) for p, d in neighbors(corner, params))
        self.assertEqual(result[Direction.TOP], corner)
        self.assertEqual(result[Direction.RIGHT], corner)

if __name__ == '__main__':
    unittest.main()
