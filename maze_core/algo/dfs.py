from typing import Iterator, List, Tuple
from maze_core.core.grid import Grid
from maze_core.algo.base import Generator


def shuffle_directions(rng) -> List[int]:
    """
    Fisher-Yates shuffle of the four directions, drawing only from rng.randrange
    so every one of the 24 orderings is equally likely.
    """
    dirs = list(Grid.DIRECTIONS)
    for i in range(len(dirs) - 1, 0, -1):
        j = rng.randrange(i + 1)
        dirs[i], dirs[j] = dirs[j], dirs[i]
    return dirs


class RecursiveBacktracker(Generator):
    def run(self) -> Iterator[str]:
        grid = self.grid
        # Every run carves a fresh tree from a blank grid
        grid.reset()
        self.step_count = 0
        width = grid.width
        visited = bytearray(width * grid.height)

        # Start at (0,0)
        start_x, start_y = 0, 0
        visited[0] = 1

        # Stack of (x, y)
        stack: List[Tuple[int, int]] = [(start_x, start_y)]

        while stack:
            cx, cy = stack[-1]

            # First shuffled direction leading to an unvisited cell
            for direction in shuffle_directions(self.rng):
                nx, ny = cx + Grid.DX[direction], cy + Grid.DY[direction]
                if grid.in_bounds(nx, ny) and not visited[ny * width + nx]:
                    grid.carve_path(cx, cy, direction)
                    visited[ny * width + nx] = 1
                    stack.append((nx, ny))
                    self.step_count += 1

                    # Yield every N steps to keep callers responsive without spamming
                    if self.step_count % 100 == 0:
                        yield f"Carving... Stack: {len(stack)}"
                    break
            else:
                # Backtrack
                stack.pop()

        yield "Done"


def carve(width: int, height: int, rng) -> Grid:
    """Build a perfect maze of the given size. The returned grid is frozen."""
    grid = Grid(width, height)
    RecursiveBacktracker(grid, rng).run_all()
    grid.freeze()
    return grid
