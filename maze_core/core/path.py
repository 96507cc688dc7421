from typing import Iterable, Iterator, Tuple

Coord = Tuple[int, int]


class Path:
    """
    Ordered, read-only sequence of cells from entry to exit.
    """

    __slots__ = ('_cells',)

    def __init__(self, cells: Iterable[Coord]):
        self._cells = tuple((int(x), int(y)) for x, y in cells)

    def sequence(self) -> Tuple[Coord, ...]:
        return self._cells

    @property
    def entry(self) -> Coord:
        return self._cells[0]

    @property
    def exit(self) -> Coord:
        return self._cells[-1]

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Coord]:
        return iter(self._cells)

    def __getitem__(self, index):
        return self._cells[index]

    def __eq__(self, other):
        if isinstance(other, Path):
            return self._cells == other._cells
        return NotImplemented

    def __hash__(self):
        return hash(self._cells)

    def __repr__(self):
        return f"Path(len={len(self._cells)})"
