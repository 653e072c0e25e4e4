import logging
import random
from dataclasses import dataclass
from typing import List, Optional

from cave_maze.core.grid import TileGrid, TilePos
from cave_maze.core.params import MazeParams
from cave_maze.core.decorate import decorate, prepare_canvas
from cave_maze.algo.dfs import gen_maze
from cave_maze.algo.rooms import gen_rooms
from cave_maze.algo.solvers import solve_maze, trace_path
from cave_maze.algo.tree import SortedTree

logger = logging.getLogger(__name__)


def generate(tiles: TileGrid, rng: random.Random, params: MazeParams) -> TilePos:
    """Carves the maze in place and returns the exit position."""
    return gen_maze(tiles, rng, params)


def carve_rooms(tiles: TileGrid, rng: random.Random, params: MazeParams):
    gen_rooms(tiles, rng, params)


def solve(tiles: TileGrid, start: TilePos, params: MazeParams) -> SortedTree[TilePos]:
    return solve_maze(tiles, start, params)


@dataclass
class Maze:
    tiles: TileGrid
    params: MazeParams
    exit: TilePos
    paths: SortedTree[TilePos]

    def trail(self, pos: Optional[TilePos] = None) -> List[TilePos]:
        """Positions from pos (the canvas centre by default) back to the exit."""
        return trace_path(self.paths, pos if pos is not None else self.params.center)


def build_maze(rng: random.Random, params: MazeParams) -> Maze:
    """
    Runs the whole pipeline in order: canvas, corridors, rooms, decoration,
    then the shortest-path tree rooted at the exit.
    """
    params.validate()

    tiles = prepare_canvas(rng, params)
    exit_pos = generate(tiles, rng, params)
    carve_rooms(tiles, rng, params)
    decorate(tiles, params)

    logger.info(f"maze exit at {exit_pos}")

    paths = solve(tiles, exit_pos, params)
    return Maze(tiles, params, exit_pos, paths)
