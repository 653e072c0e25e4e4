from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from cave_maze.core.grid import (
    CANVAS_SIZE, MIN_MAZE_SIZE, MAX_MAZE_SIZE, Direction, TilePos
)


class DirectionalBias(Enum):
    """The directional bias of passages in the maze."""
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    VERY_HORIZONTAL = "very-horizontal"
    VERY_VERTICAL = "very-vertical"

    @property
    def weights(self) -> Tuple[int, int]:
        """Sampling weight of (horizontal, vertical) candidate moves."""
        return BIAS_WEIGHTS[self]


BIAS_WEIGHTS = {
    DirectionalBias.NONE: (1, 1),
    DirectionalBias.HORIZONTAL: (2, 1),
    DirectionalBias.VERTICAL: (1, 2),
    DirectionalBias.VERY_HORIZONTAL: (5, 1),
    DirectionalBias.VERY_VERTICAL: (1, 5),
}


@dataclass(frozen=True)
class MazeParams:
    """
    Maze generation parameters.

    width/height bound the playable rectangle, which is centered in the
    fixed CANVAS_SIZE x CANVAS_SIZE canvas with a one-tile border kept
    free around it for decoration.
    """
    width: int = 7
    height: int = 5
    room_count: int = 2
    bias: DirectionalBias = DirectionalBias.NONE

    @classmethod
    def clamped(cls, width: int, height: int, room_count: int = 0,
                bias: DirectionalBias = DirectionalBias.NONE) -> "MazeParams":
        """Builds params with the size limits the parameter controls enforce."""
        width = max(MIN_MAZE_SIZE, min(MAX_MAZE_SIZE, width))
        height = max(MIN_MAZE_SIZE, min(MAX_MAZE_SIZE, height))
        return cls(width, height, max(0, room_count), bias)

    @property
    def margin_x(self) -> int:
        return (CANVAS_SIZE - self.width) // 2 + 1

    @property
    def margin_y(self) -> int:
        return (CANVAS_SIZE - self.height) // 2 + 1

    @property
    def center(self) -> TilePos:
        # Start tile of the generator and the guaranteed room
        return TilePos(CANVAS_SIZE // 2, CANVAS_SIZE // 2)

    def validate(self):
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Maze size must be positive, got {self.width}x{self.height}")
        if self.room_count < 0:
            raise ValueError(f"Room count must not be negative, got {self.room_count}")
        if self.margin_x + self.width > CANVAS_SIZE - 1 or self.margin_y + self.height > CANVAS_SIZE - 1:
            raise ValueError(
                f"Maze {self.width}x{self.height} does not fit in a {CANVAS_SIZE}x{CANVAS_SIZE} canvas"
            )

    def contains(self, pos: TilePos) -> bool:
        return (self.margin_x <= pos.x < self.margin_x + self.width
                and self.margin_y <= pos.y < self.margin_y + self.height)

    def positions(self) -> Iterator[TilePos]:
        """Every tile of the playable rectangle, column by column."""
        for x in range(self.margin_x, self.margin_x + self.width):
            for y in range(self.margin_y, self.margin_y + self.height):
                yield TilePos(x, y)

    def interior(self) -> Iterator[TilePos]:
        """The playable rectangle minus its outermost ring."""
        for x in range(self.margin_x + 1, self.margin_x + self.width - 1):
            for y in range(self.margin_y + 1, self.margin_y + self.height - 1):
                yield TilePos(x, y)


def neighbors(pos: TilePos, params: MazeParams) -> List[Tuple[TilePos, Direction]]:
    """
    Get the neighbours of a tile along with the direction towards which they
    are from pos. Moves are clamped to the playable rectangle, so the result
    contains pos itself on a side where movement is not possible.
    """
    x, y = pos
    mx, my = params.margin_x, params.margin_y

    return [
        (TilePos(x, min(y + 1, my + params.height - 1)), Direction.TOP),
        (TilePos(min(x + 1, mx + params.width - 1), y), Direction.RIGHT),
        (TilePos(x, max(y - 1, my)), Direction.BOTTOM),
        (TilePos(max(x - 1, mx), y), Direction.LEFT),
    ]
