import logging
import random
from typing import Iterator, List, Optional, Tuple

from cave_maze.core.grid import Direction, TileGrid, TilePos
from cave_maze.core.params import MazeParams, neighbors
from cave_maze.algo.base import Generator

logger = logging.getLogger(__name__)


class RecursiveBacktracker(Generator):
    def __init__(self, grid: TileGrid, params: MazeParams, rng: random.Random):
        super().__init__(grid, params, rng)
        self.exit: Optional[TilePos] = None

    def next_tile(self, pos: TilePos, visited: bytearray) -> Optional[Tuple[TilePos, Direction]]:
        """Randomly pick an unvisited neighbour of pos, honouring the bias."""
        candidates = [
            (n, d) for n, d in neighbors(pos, self.params) if not visited[n.index()]
        ]
        if not candidates:
            return None

        h_weight, v_weight = self.params.bias.weights
        if h_weight == v_weight:
            return self.rng.choice(candidates)

        weights = [h_weight if d.is_horizontal else v_weight for _, d in candidates]
        return self.rng.choices(candidates, weights=weights)[0]

    def run(self) -> Iterator[str]:
        total = self.params.width * self.params.height

        # Start in the middle of the canvas
        start = self.params.center
        visited = bytearray(self.grid.width * self.grid.height)
        visited[start.index()] = 1

        stack: List[TilePos] = [start]

        while stack:
            current = stack[-1]
            step = self.next_tile(current, visited)

            if step:
                nxt, direction = step

                # Carve
                self.grid.carve_path(current, direction)
                visited[nxt.index()] = 1

                stack.append(nxt)
                self.step_count += 1

                if self.step_count % 512 == 0:
                    logger.debug(f"gen_maze - {100.0 * (self.step_count + 1) / total:.2f}%")
                    yield f"Carving... Stack: {len(stack)}"
            else:
                # Backtrack
                stack.pop()

        self.exit = self.place_exit()
        yield "Done"

    def place_exit(self) -> TilePos:
        """Breach the top wall of a random tile on the rectangle's top row."""
        p = self.params
        exit_pos = TilePos(
            self.rng.randrange(p.margin_x, p.margin_x + p.width),
            p.margin_y + p.height - 1,
        )
        # Opens the exit's Top and the Bottom of the border tile above it
        self.grid.carve_path(exit_pos, Direction.TOP)
        return exit_pos


def gen_maze(grid: TileGrid, rng: random.Random, params: MazeParams) -> TilePos:
    """Carve a perfect maze into the playable rectangle, returning its exit."""
    generator = RecursiveBacktracker(grid, params, rng)
    generator.run_all()
    return generator.exit
