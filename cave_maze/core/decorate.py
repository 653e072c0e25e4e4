import random
from array import array

from cave_maze.core.grid import CANVAS_SIZE, Direction, Tile, TileGrid, TilePos
from cave_maze.core.params import MazeParams

TOP, RIGHT, BOTTOM, LEFT = Direction.TOP, Direction.RIGHT, Direction.BOTTOM, Direction.LEFT


def prepare_canvas(rng: random.Random, params: MazeParams) -> TileGrid:
    """Grass everywhere, with a fully closed playable rectangle."""
    grid = TileGrid()
    for i in range(len(grid.cells)):
        grid.cells[i] = Tile.grass(rng).bits

    for pos in params.positions():
        grid.cells[pos.index()] = Tile.CLOSED

    return grid


def _open_sides(grid: TileGrid, pos: TilePos, *sides: Direction):
    for side in sides:
        grid.open_wall(pos, side)


def tile_bits(i: int, cells: array) -> int:
    """
    Recompute the corner bits of the stone tile at index i. A corner is
    marked when one of the walls meeting there from a neighbouring tile is
    closed. Grass tiles and tiles on the canvas edge keep their bits.
    """
    tile = Tile(cells[i])
    if tile.is_grass():
        return tile.bits

    size = CANVAS_SIZE
    is_edge = not (size <= i <= (size - 1) * size) or i % size == 0 or i % size == size - 1

    res = tile.bits & Tile.WALLS
    if is_edge:
        return res

    left, right = Tile(cells[i - 1]), Tile(cells[i + 1])
    above, below = Tile(cells[i + size]), Tile(cells[i - size])

    if left.is_closed(TOP) or above.is_closed(LEFT):
        res |= Tile.CORNER_TOP_LEFT
    if right.is_closed(TOP) or above.is_closed(RIGHT):
        res |= Tile.CORNER_TOP_RIGHT
    if left.is_closed(BOTTOM) or below.is_closed(LEFT):
        res |= Tile.CORNER_BOTTOM_LEFT
    if right.is_closed(BOTTOM) or below.is_closed(RIGHT):
        res |= Tile.CORNER_BOTTOM_RIGHT

    return res


def decorate(grid: TileGrid, params: MazeParams):
    """
    Texture pass run after generation: opens the outward walls of the ring
    around the playable rectangle and derives every stone tile's corner
    bits. Wall bits inside the rectangle are left untouched.
    """
    left = params.margin_x - 1
    right = params.margin_x + params.width
    bottom = params.margin_y - 1
    top = params.margin_y + params.height

    for x in range(left, right + 1):
        _open_sides(grid, TilePos(x, top), TOP, LEFT, RIGHT)
        _open_sides(grid, TilePos(x, bottom), BOTTOM, LEFT, RIGHT)

    for y in range(bottom, top + 1):
        _open_sides(grid, TilePos(right, y), TOP, BOTTOM, RIGHT)
        _open_sides(grid, TilePos(left, y), TOP, BOTTOM, LEFT)

    cells = grid.cells
    for i in range(len(cells)):
        cells[i] = tile_bits(i, cells)

    # Ring corners facing away from the maze stay bare
    for x in range(left, right + 1):
        cells[TilePos(x, top).index()] &= Tile.CORNER_BOTTOM_LEFT | Tile.CORNER_BOTTOM_RIGHT | Tile.WALLS
        cells[TilePos(x, bottom).index()] &= Tile.CORNER_TOP_LEFT | Tile.CORNER_TOP_RIGHT | Tile.WALLS

    for y in range(bottom, top + 1):
        cells[TilePos(right, y).index()] &= Tile.CORNER_TOP_LEFT | Tile.CORNER_BOTTOM_LEFT | Tile.WALLS
        cells[TilePos(left, y).index()] &= Tile.CORNER_TOP_RIGHT | Tile.CORNER_BOTTOM_RIGHT | Tile.WALLS
