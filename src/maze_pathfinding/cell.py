from maze_pathfinding.errors import InvalidCoordinateError
from maze_pathfinding.primitives import Direction, Position, Walls


def _is_non_negative_int(value) -> bool:
    # bool is an int subclass but never a valid coordinate
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class Cell:
    """A single maze cell: a fixed position, its walls, and a visited flag."""

    def __init__(self, x: int, y: int, walls: Walls | None = None):
        """
        Create a cell at (x, y).

        Args:
            x: Column index, a non-negative integer.
            y: Row index, a non-negative integer.
            walls: Initial wall state. Defaults to all four walls present.

        Raises
        ------
            InvalidCoordinateError: If x or y is not a non-negative integer.
        """
        if not _is_non_negative_int(x):
            raise InvalidCoordinateError(
                f"Invalid x coordinate: {x!r}. Must be non-negative integer."
            )
        if not _is_non_negative_int(y):
            raise InvalidCoordinateError(
                f"Invalid y coordinate: {y!r}. Must be non-negative integer."
            )
        self._position = Position(x, y)
        self._walls = walls if walls is not None else Walls.closed()
        self.visited = False

    @classmethod
    def create_open(cls, x: int, y: int) -> "Cell":
        return cls(x, y, Walls.open())

    @property
    def position(self) -> Position:
        return self._position

    @property
    def x(self) -> int:
        return self._position.x

    @property
    def y(self) -> int:
        return self._position.y

    @property
    def walls(self) -> Walls:
        return self._walls

    def has_wall_in_direction(self, direction: Direction) -> bool:
        return self._walls.has(direction)

    def is_open_in_direction(self, direction: Direction) -> bool:
        return not self._walls.has(direction)

    def get_walled_directions(self) -> list[Direction]:
        return self._walls.directions(present=True)

    def get_open_directions(self) -> list[Direction]:
        return self._walls.directions(present=False)

    def remove_wall_mutable(self, direction: Direction) -> None:
        self._walls = self._walls.without(direction)

    def add_wall_mutable(self, direction: Direction) -> None:
        self._walls = self._walls.with_wall(direction)

    def get_neighbor_position(self, direction: Direction) -> Position:
        """Position one step away in ``direction``; not checked against any grid."""
        return self._position.move(direction, 1)

    def manhattan_distance_to(self, other: "Cell | Position | tuple[int, int]") -> int:
        other_x, other_y = other.position if isinstance(other, Cell) else other
        return abs(self.x - other_x) + abs(self.y - other_y)

    def is_adjacent_to(self, other: "Cell | Position | tuple[int, int]") -> bool:
        # Diagonal cells are at distance 2 and never count as adjacent
        return self.manhattan_distance_to(other) == 1

    def reset(self) -> None:
        self.visited = False

    def get_wall_count(self) -> int:
        return self._walls.count()

    def __str__(self) -> str:
        visited_status = "visited" if self.visited else "unvisited"
        return f"Cell({self.x},{self.y}): {self.get_wall_count()} walls, {visited_status}"

    def __repr__(self) -> str:
        return (
            f"Cell(x={self.x}, y={self.y}, walls={self._walls.mask:04b}, "
            f"visited={self.visited})"
        )
