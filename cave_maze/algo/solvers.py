import heapq
import logging
from abc import ABC, abstractmethod
from array import array
from typing import Iterator, List, Optional

from cave_maze.core.grid import TileGrid, TilePos
from cave_maze.core.params import MazeParams, neighbors
from cave_maze.algo.tree import SortedTree, Tree

logger = logging.getLogger(__name__)


class Solver(ABC):
    def __init__(self, grid: TileGrid, params: MazeParams):
        self.grid = grid
        self.params = params
        self.visited_count = 0

    @abstractmethod
    def run(self, start: TilePos) -> Iterator[str]:
        pass

    def reachable_neighbors(self, pos: TilePos) -> Iterator[TilePos]:
        """Neighbours of pos behind an open wall of the tile at pos."""
        tile = self.grid.get(pos)
        for n, direction in neighbors(pos, self.params):
            if n != pos and tile.is_open(direction):
                yield n


class ShortestPathTree(Solver):
    """
    Dijkstra with unit edge weights from a single start tile. Every reached
    tile is appended to a Tree under its closest already finalized
    neighbour, so the depth of a node equals its distance from start.
    """
    def __init__(self, grid: TileGrid, params: MazeParams):
        super().__init__(grid, params)
        self.tree: Optional[Tree[TilePos]] = None
        # -1 = infinity
        self.distances = array('i')

    def pick_parent(self, pos: TilePos, finalized: bytearray, start: TilePos) -> TilePos:
        best = None
        best_dist = -1
        # First minimum wins, in neighbour order
        for n in self.reachable_neighbors(pos):
            n_idx = n.index()
            if finalized[n_idx] and (best is None or self.distances[n_idx] < best_dist):
                best = n
                best_dist = self.distances[n_idx]
        return best if best is not None else start

    def run(self, start: TilePos) -> Iterator[str]:
        if not self.params.contains(start):
            raise ValueError(f"Start {start} is outside the playable rectangle")

        size = self.grid.width * self.grid.height
        self.distances = array('i', [-1] * size)
        finalized = bytearray(size)
        # Tile index -> node index in the tree
        node_of = array('i', [-1] * size)

        tree = Tree(start)
        self.tree = tree

        start_idx = start.index()
        self.distances[start_idx] = 0
        node_of[start_idx] = 0

        # Priority Queue: (distance, tile index)
        open_set = [(0, start_idx)]

        while open_set:
            dist, idx = heapq.heappop(open_set)
            if finalized[idx]:
                continue # Stale entry

            current = TilePos.from_index(idx)
            finalized[idx] = 1
            self.visited_count += 1

            if idx != start_idx:
                parent = self.pick_parent(current, finalized, start)
                node_of[idx] = tree.append(current, node_of[parent.index()])

            for n in self.reachable_neighbors(current):
                n_idx = n.index()
                if finalized[n_idx]:
                    continue

                new_dist = dist + 1
                old_dist = self.distances[n_idx]
                if old_dist == -1 or new_dist < old_dist:
                    self.distances[n_idx] = new_dist
                    heapq.heappush(open_set, (new_dist, n_idx))

            if self.visited_count % 100 == 0:
                yield f"Visited: {self.visited_count}"

        logger.debug(f"solve_maze - reached {self.visited_count} of "
                     f"{self.params.width * self.params.height} tiles")
        yield "Solved"

    def distance(self, pos: TilePos) -> Optional[int]:
        """Distance of pos from the start, None if it was not reached."""
        if not self.distances:
            return None
        dist = self.distances[pos.index()]
        return None if dist == -1 else dist


def solve_maze(grid: TileGrid, start: TilePos, params: MazeParams) -> SortedTree[TilePos]:
    """
    Solve the maze, returning a minimum-distance tree with start as the
    root node, sorted for binary search by tile position.
    """
    solver = ShortestPathTree(grid, params)
    for _ in solver.run(start):
        pass
    return SortedTree(solver.tree)


def trace_path(tree: SortedTree[TilePos], pos: TilePos) -> List[TilePos]:
    """
    Walk parent links from pos back to the root. Returns an empty list when
    pos is not in the tree.
    """
    path: List[TilePos] = []
    current = tree.search(pos)

    while current is not None:
        path.append(tree.get(current))
        current = tree.parent(current)

    return path
