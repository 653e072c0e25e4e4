from typing import Any, Dict

import numpy as np

from cave_maze.core.grid import Tile, TileGrid
from cave_maze.core.params import MazeParams


class MazeStats:
    @staticmethod
    def playable_region(grid: TileGrid, params: MazeParams) -> np.ndarray:
        """The playable rectangle as a (height, width) array, row 0 at the bottom."""
        cells = grid.to_numpy()
        return cells[params.margin_y:params.margin_y + params.height,
                     params.margin_x:params.margin_x + params.width]

    @staticmethod
    def calculate_stats(grid: TileGrid, params: MazeParams) -> Dict[str, Any]:
        region = MazeStats.playable_region(grid, params)
        walls = region & Tile.WALLS

        # Grass counts as closed on every side
        grass = (walls == Tile.WALLS) & (region != Tile.CLOSED)
        open_right = ((walls & Tile.RIGHT) == 0) & ~grass
        open_top = ((walls & Tile.TOP) == 0) & ~grass

        # Each edge counted once, from its left / lower tile; the exit breach
        # on the top row is not an edge between two playable tiles
        horizontal_edges = int(open_right[:, :-1].sum())
        vertical_edges = int(open_top[:-1, :].sum())

        closed = np.zeros(walls.shape, dtype=np.int32)
        for bit in (Tile.LEFT, Tile.BOTTOM, Tile.RIGHT, Tile.TOP):
            closed += (walls & bit) != 0
        closed[grass] = 4

        dead_ends = int((closed == 3).sum())
        corridors = int((closed == 2).sum())
        intersections = int((closed <= 1).sum())

        total = params.width * params.height
        return {
            "horizontal_edges": horizontal_edges,
            "vertical_edges": vertical_edges,
            "edges": horizontal_edges + vertical_edges,
            "bias_ratio": horizontal_edges / vertical_edges if vertical_edges else float("inf"),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
