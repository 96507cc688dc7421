from collections import deque
from maze_core.core.grid import Grid

class MazeAnalyzer:
    @staticmethod
    def passage_count(grid: Grid) -> int:
        """
        Number of open walls between cells. Each passage is counted once,
        from its upper or left cell.
        """
        count = 0
        for y in range(grid.height):
            for x in range(grid.width):
                val = grid.cells[y * grid.width + x]
                if x < grid.width - 1 and not (val & Grid.WALL[Grid.RIGHT]):
                    count += 1
                if y < grid.height - 1 and not (val & Grid.WALL[Grid.DOWN]):
                    count += 1
        return count

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        A perfect maze is a spanning tree: W*H-1 passages and every cell
        reachable from (0,0).
        """
        total = grid.width * grid.height
        if MazeAnalyzer.passage_count(grid) != total - 1:
            return False

        seen = {(0, 0)}
        queue = deque([(0, 0)])
        while queue:
            x, y = queue.popleft()
            for n in grid.get_open_neighbors(x, y):
                if n not in seen:
                    seen.add(n)
                    queue.append(n)
        return len(seen) == total

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        intersections = 0 # 0, 1 walls
        corridors = 0 # 2 walls

        for y in range(grid.height):
            for x in range(grid.width):
                walls = grid.wall_count(x, y)
                if walls == 3: dead_ends += 1
                elif walls == 2: corridors += 1
                elif walls <= 1: intersections += 1

        total = grid.width * grid.height
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "intersections": intersections,
            "passages": MazeAnalyzer.passage_count(grid),
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0
        }
