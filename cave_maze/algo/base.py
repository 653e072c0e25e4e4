import random
from abc import ABC, abstractmethod
from typing import Iterator

from cave_maze.core.grid import TileGrid
from cave_maze.core.params import MazeParams


class Generator(ABC):
    def __init__(self, grid: TileGrid, params: MazeParams, rng: random.Random):
        self.grid = grid
        self.params = params
        self.rng = rng
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual tile modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
