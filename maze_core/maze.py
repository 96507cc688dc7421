import logging
import random
from typing import NamedTuple, Optional, Tuple

from maze_core.algo.dfs import carve
from maze_core.algo.solvers import find_path
from maze_core.core.grid import Grid
from maze_core.core.path import Path

logger = logging.getLogger(__name__)

ENTRY = (0, 0)

# Difficulty -> side length of the square maze
LEVEL_SIZES = {1: 10, 2: 15, 3: 20}
DEFAULT_LEVEL_SIZE = 10


class Maze(NamedTuple):
    """A generated grid together with its solution from entry to exit."""
    grid: Grid
    path: Path

    @property
    def entry(self) -> Tuple[int, int]:
        return ENTRY

    @property
    def exit(self) -> Tuple[int, int]:
        return (self.grid.width - 1, self.grid.height - 1)

    def is_exit(self, position: Tuple[int, int]) -> bool:
        return tuple(position) == self.exit


def new_maze(width: int, height: int, seed: Optional[int] = None, rng=None) -> Maze:
    """
    Generate a perfect maze and solve it from the top-left to the bottom-right cell.

    If rng is given it drives the generator; otherwise a private
    random.Random(seed) is created. A seed of None draws from OS entropy.
    """
    if rng is None:
        rng = random.Random(seed)
    grid = carve(width, height, rng)
    path = find_path(grid, ENTRY, (width - 1, height - 1))
    logger.debug("Generated %dx%d maze (seed=%s), solution length %d", width, height, seed, len(path))
    return Maze(grid, path)


def level_size(difficulty: int) -> int:
    return LEVEL_SIZES.get(difficulty, DEFAULT_LEVEL_SIZE)


def new_level_maze(difficulty: int, seed: Optional[int] = None, rng=None) -> Maze:
    size = level_size(difficulty)
    return new_maze(size, size, seed=seed, rng=rng)


def move(grid: Grid, position: Tuple[int, int], direction: int) -> Tuple[int, int]:
    """
    Returns the cell reached by stepping from position in direction,
    or position itself when a wall is in the way.
    """
    x, y = position
    if grid.has_passage(x, y, direction):
        return (x + Grid.DX[direction], y + Grid.DY[direction])
    return (x, y)
