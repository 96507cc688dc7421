from abc import ABC, abstractmethod
from typing import Iterator
from maze_core.core.grid import Grid

class Generator(ABC):
    def __init__(self, grid: Grid, rng):
        # rng only needs randrange(n); a random.Random instance in practice
        self.grid = grid
        self.rng = rng
        self.step_count = 0

    @abstractmethod
    def run(self) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual grid modifications happen in-place on self.grid.
        """
        pass

    def run_all(self):
        """Helper to run the generator to completion."""
        for _ in self.run():
            pass
