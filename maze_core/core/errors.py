class MazeError(Exception):
    """
    Base class for all maze-core errors.
    """
    pass


class InvalidDimensions(MazeError, ValueError):
    """
    Raised when a grid is constructed with a width or height below 1.
    """
    pass


class OutOfRange(MazeError, IndexError):
    """
    Raised when a coordinate or direction is outside the grid.
    """
    pass


class NoPathFound(MazeError):
    """
    Raised when the solver cannot reach the exit.
    A generated maze is a spanning tree, so this means the grid is broken.
    """
    pass


class GridFrozen(MazeError):
    """
    Raised when carving into a grid whose generation has completed.
    """
    pass
