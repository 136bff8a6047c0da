class MazeError(Exception):
    """Base class for every error raised by the maze engine."""


class InvalidDimensionError(MazeError, ValueError):
    """Maze width or height is not a positive integer."""


class InvalidCoordinateError(MazeError, ValueError):
    """Cell x or y is not a non-negative integer."""


class OutOfBoundsError(MazeError, IndexError):
    """A coordinate lies outside the maze grid."""


class CellPositionMismatchError(MazeError, ValueError):
    """A cell was stored in a grid slot that does not match its own position."""


class NotNeighborsError(MazeError, ValueError):
    """An operation that needs two adjacent cells got cells that are not adjacent."""


class InvalidPositionError(MazeError, ValueError):
    """A solver start or end position lies outside the maze grid."""
