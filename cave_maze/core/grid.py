import random
from array import array
from enum import Enum
from typing import Iterator, NamedTuple

import numpy as np

# Fixed backing canvas, the playable rectangle is centered inside it
CANVAS_SIZE = 128
MIN_MAZE_SIZE = 3
MAX_MAZE_SIZE = 100


class Direction(Enum):
    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3

    def __neg__(self) -> "Direction":
        return OPPOSITE[self]

    @property
    def is_horizontal(self) -> bool:
        return self is Direction.LEFT or self is Direction.RIGHT

    @property
    def is_vertical(self) -> bool:
        return self is Direction.TOP or self is Direction.BOTTOM


OPPOSITE = {
    Direction.TOP: Direction.BOTTOM,
    Direction.RIGHT: Direction.LEFT,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
}

# y grows towards the top of the maze
DX = {Direction.TOP: 0, Direction.BOTTOM: 0, Direction.RIGHT: 1, Direction.LEFT: -1}
DY = {Direction.TOP: 1, Direction.BOTTOM: -1, Direction.RIGHT: 0, Direction.LEFT: 0}


class TilePos(NamedTuple):
    x: int
    y: int

    def index(self) -> int:
        """Row-major index of this position in the canvas."""
        return self.y * CANVAS_SIZE + self.x

    @classmethod
    def from_index(cls, idx: int) -> "TilePos":
        return cls(idx % CANVAS_SIZE, idx // CANVAS_SIZE)

    def step(self, direction: Direction) -> "TilePos":
        return TilePos(self.x + DX[direction], self.y + DY[direction])


class Tile:
    """
    Packed 8-bit tile state.

    Bits 0-3 are the walls (set = wall present), bits 4-7 are either the
    corner decoration bits of a stone tile or the variant of a grass tile.
    A tile is grass when all four wall bits are set but the byte is not
    the fully closed 0xFF sentinel.
    """
    # Wall bits
    LEFT   = 0b0000_0001
    BOTTOM = 0b0000_0010
    RIGHT  = 0b0000_0100
    TOP    = 0b0000_1000
    WALLS  = LEFT | BOTTOM | RIGHT | TOP

    # Corner decoration bits
    CORNER_TOP_LEFT     = 0b1000_0000
    CORNER_TOP_RIGHT    = 0b0100_0000
    CORNER_BOTTOM_LEFT  = 0b0010_0000
    CORNER_BOTTOM_RIGHT = 0b0001_0000

    # Fully closed and fully open stone tiles
    CLOSED = 0b1111_1111
    OPEN   = 0b0000_0000

    WALL_BITS = {
        Direction.TOP: TOP,
        Direction.RIGHT: RIGHT,
        Direction.BOTTOM: BOTTOM,
        Direction.LEFT: LEFT,
    }

    __slots__ = ('bits',)

    def __init__(self, bits: int = CLOSED):
        self.bits = bits

    @classmethod
    def grass(cls, rng: random.Random) -> "Tile":
        # Variant 0xF would collide with the CLOSED sentinel
        return cls(rng.randrange(0, 0xF) << 4 | cls.WALLS)

    def open(self, side: Direction) -> "Tile":
        """Open the given side of this tile. Returns self so calls can chain."""
        self.bits &= ~self.WALL_BITS[side] & 0xFF
        return self

    def is_open(self, side: Direction) -> bool:
        return not self.is_grass() and (self.bits & self.WALL_BITS[side]) == 0

    def is_closed(self, side: Direction) -> bool:
        return not self.is_open(side)

    def is_grass(self) -> bool:
        return (self.bits & self.WALLS) == self.WALLS and self.bits != self.CLOSED

    def __eq__(self, other) -> bool:
        if isinstance(other, Tile):
            return self.bits == other.bits
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.bits)

    def __int__(self) -> int:
        return self.bits

    def __repr__(self) -> str:
        return f"Tile(0b{self.bits:08b})"


class TileGrid:
    """The flat, row-major tile table covering the whole canvas."""

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, fill: int = Tile.CLOSED):
        self.width = CANVAS_SIZE
        self.height = CANVAS_SIZE
        # 'B' (unsigned char) -> 1 byte per tile
        self.cells = array('B', [fill] * (self.width * self.height))

    def __len__(self) -> int:
        return len(self.cells)

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def get(self, pos: TilePos) -> Tile:
        return Tile(self.cells[self.get_index(*pos)])

    def set(self, pos: TilePos, tile: Tile):
        self.cells[self.get_index(*pos)] = tile.bits

    def open_wall(self, pos: TilePos, side: Direction):
        """Opens a single side of the tile at pos, leaving its neighbour alone."""
        idx = self.get_index(*pos)
        self.cells[idx] = Tile(self.cells[idx]).open(side).bits

    def carve_path(self, pos: TilePos, direction: Direction):
        """
        Removes the wall between the tile at pos and its neighbour in
        'direction'. Also removes the OPPOSITE wall from the neighbour.
        """
        neighbor = pos.step(direction)
        if not (0 <= neighbor.x < self.width and 0 <= neighbor.y < self.height):
            return # Cannot carve into void

        self.open_wall(pos, direction)
        self.open_wall(neighbor, -direction)

    def is_open(self, pos: TilePos, side: Direction) -> bool:
        return self.get(pos).is_open(side)

    def positions(self) -> Iterator[TilePos]:
        for y in range(self.height):
            for x in range(self.width):
                yield TilePos(x, y)

    def to_numpy(self) -> np.ndarray:
        """Copy of the tile table as a (height, width) uint8 array indexed [y, x]."""
        return np.frombuffer(self.cells, dtype=np.uint8).reshape(self.height, self.width).copy()

    def tobytes(self) -> bytes:
        return self.cells.tobytes()
