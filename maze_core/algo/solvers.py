from abc import ABC, abstractmethod
from array import array
from collections import deque
from typing import Iterator, List, Tuple
from maze_core.core.errors import NoPathFound
from maze_core.core.grid import Grid
from maze_core.core.path import Path

class Solver(ABC):
    def __init__(self, grid: Grid):
        self.grid = grid
        self.path: List[Tuple[int, int]] = []
        self.visited_count = 0

    @abstractmethod
    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        pass

    def solve(self, start: Tuple[int, int], end: Tuple[int, int]) -> Path:
        """Runs the search to completion and returns the path."""
        for _ in self.run(start, end):
            pass
        return Path(self.path)

class BFS(Solver):
    # Order in which a cell's exits are scanned; the result never depends on it
    SCAN_ORDER = Grid.DIRECTIONS

    def run(self, start: Tuple[int, int], end: Tuple[int, int]) -> Iterator[str]:
        grid = self.grid
        start_idx = grid.get_index(*start)
        end_idx = grid.get_index(*end)
        start, end = tuple(start), tuple(end)

        size = grid.width * grid.height
        visited = bytearray(size)
        # Dense parent array: direction from a cell back to its parent, -1 = None
        self.parents = array('b', [-1] * size)
        self.path = []

        queue = deque([start])
        visited[start_idx] = 1
        self.visited_count = 1
        found = False

        while queue:
            current = queue.popleft()
            if current == end:
                found = True
                break

            cx, cy = current
            walls = grid.cells[cy * grid.width + cx]
            for direction in self.SCAN_ORDER:
                if walls & Grid.WALL[direction]:
                    continue
                nx, ny = cx + Grid.DX[direction], cy + Grid.DY[direction]
                if not grid.in_bounds(nx, ny):
                    continue
                idx = ny * grid.width + nx
                if not visited[idx]:
                    visited[idx] = 1
                    self.visited_count += 1
                    self.parents[idx] = Grid.opposite(direction)
                    queue.append((nx, ny))

            if self.visited_count % 100 == 0:
                yield f"Visited: {self.visited_count}"

        if not found:
            raise NoPathFound(f"No path from {start} to {end}")

        self.reconstruct_path(start, end)
        yield "Solved"

    def reconstruct_path(self, start, end):
        curr = end
        while curr != start:
            self.path.append(curr)
            p_dir = self.parents[self.grid.get_index(*curr)]
            curr = (curr[0] + Grid.DX[p_dir], curr[1] + Grid.DY[p_dir])

        self.path.append(start)
        self.path.reverse()


def find_path(grid: Grid, entry: Tuple[int, int], exit: Tuple[int, int]) -> Path:
    return BFS(grid).solve(entry, exit)
