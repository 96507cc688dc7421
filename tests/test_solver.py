import unittest
import random
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_core.core.grid import Grid
from maze_core.core.errors import NoPathFound, OutOfRange
from maze_core.algo.dfs import carve
from maze_core.algo.solvers import BFS, find_path


def all_simple_paths(grid, start, end):
    """Exhaustive DFS enumeration of every simple path between two cells."""
    found = []
    trail = [start]
    on_trail = {start}

    def walk(cell):
        if cell == end:
            found.append(list(trail))
            return
        for n in grid.get_open_neighbors(*cell):
            if n not in on_trail:
                trail.append(n)
                on_trail.add(n)
                walk(n)
                on_trail.discard(n)
                trail.pop()

    walk(start)
    return found


class ReversedBFS(BFS):
    SCAN_ORDER = tuple(reversed(Grid.DIRECTIONS))


class TestSolvers(unittest.TestCase):
    def create_simple_maze(self):
        # 5x5 maze, simple path
        grid = Grid(5, 5)
        # 0,0 -> 0,1 -> 0,2 -> 1,2 -> 2,2 -> 3,2 -> 4,2 -> 4,3 -> 4,4
        grid.carve_path(0, 0, Grid.DOWN)  # to 0,1
        grid.carve_path(0, 1, Grid.DOWN)  # to 0,2
        grid.carve_path(0, 2, Grid.RIGHT) # to 1,2
        grid.carve_path(1, 2, Grid.RIGHT) # to 2,2
        grid.carve_path(2, 2, Grid.RIGHT) # to 3,2
        grid.carve_path(3, 2, Grid.RIGHT) # to 4,2
        grid.carve_path(4, 2, Grid.DOWN)  # to 4,3
        grid.carve_path(4, 3, Grid.DOWN)  # to 4,4
        return grid

    def test_bfs_optimality(self):
        grid = self.create_simple_maze()
        bfs = BFS(grid)
        for _ in bfs.run((0,0), (4,4)): pass

        self.assertEqual(bfs.path, [(0,0), (0,1), (0,2), (1,2), (2,2), (3,2), (4,2), (4,3), (4,4)])
        self.assertEqual(bfs.visited_count, 9)

    def test_bfs_does_not_write_grid(self):
        grid = self.create_simple_maze()
        before = grid.cells.tobytes()
        find_path(grid, (0, 0), (4, 4))
        self.assertEqual(grid.cells.tobytes(), before)

    def test_shortest_with_loop(self):
        # Ring around a 3x2 grid: both routes take three steps
        grid = Grid(3, 2)
        grid.carve_path(0, 0, Grid.RIGHT)
        grid.carve_path(1, 0, Grid.RIGHT)
        grid.carve_path(2, 0, Grid.DOWN)
        grid.carve_path(0, 0, Grid.DOWN)
        grid.carve_path(0, 1, Grid.RIGHT)
        grid.carve_path(1, 1, Grid.RIGHT)
        path = find_path(grid, (0, 0), (2, 1))
        self.assertEqual(len(path), 4)

    def test_no_path(self):
        grid = Grid(5, 5) # All walls
        with self.assertRaises(NoPathFound):
            find_path(grid, (0, 0), (4, 4))

    def test_endpoints_out_of_range(self):
        grid = self.create_simple_maze()
        with self.assertRaises(OutOfRange):
            find_path(grid, (0, 0), (5, 5))
        with self.assertRaises(OutOfRange):
            find_path(grid, (-1, 0), (4, 4))

    def test_entry_equals_exit(self):
        grid = Grid(1, 1)
        self.assertEqual(find_path(grid, (0, 0), (0, 0)).sequence(), ((0, 0),))

    def test_corridor(self):
        for w, h in [(1, 6), (6, 1)]:
            grid = carve(w, h, random.Random(0))
            path = find_path(grid, (0, 0), (w - 1, h - 1))
            self.assertEqual(len(path), max(w, h))

    def test_path_validity(self):
        for seed in range(5):
            grid = carve(12, 9, random.Random(seed))
            path = find_path(grid, (0, 0), (11, 8))
            self.assertEqual(path.entry, (0, 0))
            self.assertEqual(path.exit, (11, 8))
            for (x1, y1), (x2, y2) in zip(path, path[1:]):
                direction = [d for d in Grid.DIRECTIONS
                             if (x1 + Grid.DX[d], y1 + Grid.DY[d]) == (x2, y2)]
                self.assertEqual(len(direction), 1)
                self.assertTrue(grid.has_passage(x1, y1, direction[0]))

    def test_scan_order_independent(self):
        for seed in range(5):
            grid = carve(9, 9, random.Random(seed))
            self.assertEqual(BFS(grid).solve((0, 0), (8, 8)),
                             ReversedBFS(grid).solve((0, 0), (8, 8)))

    def test_matches_brute_force(self):
        # Exactly one simple path per pair, and BFS returns it
        for w, h in [(2, 2), (3, 3), (4, 3), (5, 5)]:
            grid = carve(w, h, random.Random(42))
            cells = [(x, y) for y in range(h) for x in range(w)]
            for i, a in enumerate(cells):
                for b in cells[i + 1:]:
                    paths = all_simple_paths(grid, a, b)
                    self.assertEqual(len(paths), 1, f"{w}x{h}: {a}->{b}")
                    self.assertEqual(list(find_path(grid, a, b)), paths[0])

if __name__ == '__main__':
    unittest.main()
