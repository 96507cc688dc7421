from array import array
from enum import IntEnum
from typing import Iterator, Tuple

from maze_core.core.errors import GridFrozen, InvalidDimensions, OutOfRange


class Direction(IntEnum):
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @property
    def opposite(self) -> "Direction":
        return Direction((self + 2) % 4)


class Grid:
    # Directions
    UP = Direction.UP
    RIGHT = Direction.RIGHT
    DOWN = Direction.DOWN
    LEFT = Direction.LEFT
    DIRECTIONS = (UP, RIGHT, DOWN, LEFT)

    # Wall bit for direction d is (1 << d)
    WALL = (0b0001, 0b0010, 0b0100, 0b1000)

    # All walls present by default (U|R|D|L) = 15
    ALL_WALLS = 0b1111

    # Direction Helpers, indexed by direction
    DX = (0, 1, 0, -1)
    DY = (-1, 0, 1, 0)

    __slots__ = ('width', 'height', 'cells', '_frozen')

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise InvalidDimensions(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._frozen = False
        # using 'B' (unsigned char) -> 1 byte per cell
        # Read-only for consumers; only carve_path and reset write to it
        self.cells = array('B', [self.ALL_WALLS] * (width * height))

    @staticmethod
    def opposite(direction: int) -> int:
        return (direction + 2) % 4

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise OutOfRange(f"Coordinate ({x}, {y}) out of bounds")

    def _check_direction(self, direction: int):
        if not isinstance(direction, int) or direction not in (0, 1, 2, 3):
            raise OutOfRange(f"Invalid direction {direction!r}")

    def carve_path(self, x1: int, y1: int, direction: int):
        """
        Removes the wall between cell (x1, y1) and its neighbor in 'direction'.
        Also removes the OPPOSITE wall from the neighbor.
        """
        if self._frozen:
            raise GridFrozen("Cannot carve into a completed maze")
        self._check_direction(direction)
        idx1 = self.get_index(x1, y1)

        x2 = x1 + self.DX[direction]
        y2 = y1 + self.DY[direction]
        if not self.in_bounds(x2, y2):
            raise OutOfRange(f"Cannot carve from ({x1}, {y1}) out of the grid")
        idx2 = y2 * self.width + x2

        self.cells[idx1] &= ~self.WALL[direction]
        self.cells[idx2] &= ~self.WALL[self.opposite(direction)]

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self):
        self._frozen = True

    def reset(self):
        """Restores all four walls on every cell."""
        if self._frozen:
            raise GridFrozen("Cannot reset a completed maze")
        for i in range(len(self.cells)):
            self.cells[i] = self.ALL_WALLS

    def has_wall(self, x: int, y: int, direction: int) -> bool:
        self._check_direction(direction)
        return (self.cells[self.get_index(x, y)] & self.WALL[direction]) != 0

    def has_passage(self, x: int, y: int, direction: int) -> bool:
        """True when a move from (x, y) in 'direction' is open."""
        return not self.has_wall(x, y, direction)

    def wall_count(self, x: int, y: int) -> int:
        val = self.cells[self.get_index(x, y)]
        return sum(1 for bit in self.WALL if val & bit)

    def get_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int, int]]:
        """
        Yields (nx, ny, direction_to_neighbor) for all in-bounds neighbors.
        Does NOT check walls (that's for pathfinding).
        """
        for direction in self.DIRECTIONS:
            nx, ny = x + self.DX[direction], y + self.DY[direction]
            if self.in_bounds(nx, ny):
                yield (nx, ny, direction)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Tuple[int, int]]:
        """
        Yields (nx, ny) for neighbors that are NOT blocked by a wall.
        """
        val = self.cells[self.get_index(x, y)]
        for nx, ny, direction in self.get_neighbors(x, y):
            if not (val & self.WALL[direction]):
                yield (nx, ny)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and self.cells == other.cells

    def __repr__(self):
        return f"Grid({self.width}x{self.height})"
