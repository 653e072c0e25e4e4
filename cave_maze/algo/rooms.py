import random
from typing import Iterator, List

from cave_maze.core.grid import Direction, TileGrid, TilePos
from cave_maze.core.params import MazeParams, neighbors
from cave_maze.algo.base import Generator


class RoomCarver(Generator):
    """
    Opens fully connected single-tile rooms, which adds loops to the
    otherwise perfect maze.
    """
    def __init__(self, grid: TileGrid, params: MazeParams, rng: random.Random):
        super().__init__(grid, params, rng)
        self.rooms: List[TilePos] = []

    def pick_rooms(self) -> List[TilePos]:
        if self.params.room_count == 0:
            return []

        # room_count - 1 distinct random rooms plus one at the start tile
        interior = list(self.params.interior())
        count = min(self.params.room_count - 1, len(interior))
        return self.rng.sample(interior, count) + [self.params.center]

    def open_room(self, pos: TilePos):
        tile = self.grid.get(pos)
        tile.open(Direction.TOP).open(Direction.RIGHT).open(Direction.BOTTOM).open(Direction.LEFT)
        self.grid.set(pos, tile)

        # Open the neighbours' walls facing the room
        for neighbor, direction in neighbors(pos, self.params):
            self.grid.open_wall(neighbor, -direction)

    def run(self) -> Iterator[str]:
        for pos in self.pick_rooms():
            self.open_room(pos)
            self.rooms.append(pos)
            self.step_count += 1
            yield f"Rooms: {self.step_count}"

        yield "Done"


def gen_rooms(grid: TileGrid, rng: random.Random, params: MazeParams):
    RoomCarver(grid, params, rng).run_all()
