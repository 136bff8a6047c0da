import random
from collections import deque
from dataclasses import asdict, dataclass

from maze_pathfinding.cell import Cell
from maze_pathfinding.errors import (
    CellPositionMismatchError,
    InvalidDimensionError,
    InvalidPositionError,
    NotNeighborsError,
    OutOfBoundsError,
)
from maze_pathfinding.primitives import ALL_DIRECTIONS, Direction, Position


@dataclass(frozen=True)
class MazeStatistics:
    total_cells: int
    visited_cells: int
    unvisited_cells: int
    total_walls: int
    removed_walls: int
    connectivity: float

    def as_dict(self) -> dict:
        return asdict(self)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_positive_int(value) -> bool:
    return _is_int(value) and value > 0


class Maze:
    """
    A rectangular grid of cells that can be carved into a perfect maze and solved.

    ``grid[y][x].position == (x, y)`` holds for every slot at all times. Cells
    are only ever replaced by a new cell built at the same coordinate.
    """

    def __init__(self, width: int, height: int, all_walls: bool = True):
        """
        Initialize the grid.

        Args:
            width: Number of columns, a positive integer.
            height: Number of rows, a positive integer.
            all_walls: Start with every wall present (default) or every wall removed.

        Raises
        ------
            InvalidDimensionError: If width or height is not a positive integer.
        """
        if not _is_positive_int(width):
            raise InvalidDimensionError(
                f"Invalid width: {width!r}. Must be positive integer."
            )
        if not _is_positive_int(height):
            raise InvalidDimensionError(
                f"Invalid height: {height!r}. Must be positive integer."
            )
        self._width = width
        self._height = height
        self._grid = self._create_grid(all_walls)

    @classmethod
    def create_open(cls, width: int, height: int) -> "Maze":
        return cls(width, height, all_walls=False)

    def _create_grid(self, with_walls: bool) -> list[list[Cell]]:
        make_cell = Cell if with_walls else Cell.create_open
        return [
            [make_cell(x, y) for x in range(self._width)] for y in range(self._height)
        ]

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def total_cells(self) -> int:
        return self._width * self._height

    @property
    def dimensions(self) -> tuple[int, int]:
        return self._width, self._height

    # --- grid queries -------------------------------------------------------

    def is_valid_position(self, x: int, y: int) -> bool:
        if not (_is_int(x) and _is_int(y)):
            return False
        return 0 <= x < self._width and 0 <= y < self._height

    def is_valid_position_object(self, pos: Position | tuple[int, int]) -> bool:
        x, y = pos
        return self.is_valid_position(x, y)

    def get_cell(self, x: int, y: int) -> Cell:
        if not self.is_valid_position(x, y):
            raise OutOfBoundsError(
                f"Position ({x}, {y}) is out of bounds. "
                f"Maze size: {self._width}x{self._height}"
            )
        return self._grid[y][x]

    def get_cell_at(self, pos: Position | tuple[int, int]) -> Cell:
        x, y = pos
        return self.get_cell(x, y)

    def get_cell_safe(self, x: int, y: int) -> Cell | None:
        """Like get_cell, but returns None for coordinates outside the grid."""
        if not self.is_valid_position(x, y):
            return None
        return self._grid[y][x]

    def set_cell(self, x: int, y: int, cell: Cell) -> None:
        if not self.is_valid_position(x, y):
            raise OutOfBoundsError(f"Cannot set cell at ({x}, {y}): out of bounds")
        if cell.position != (x, y):
            raise CellPositionMismatchError(
                f"Cell position ({cell.x}, {cell.y}) doesn't match "
                f"target position ({x}, {y})"
            )
        self._grid[y][x] = cell

    def get_all_cells(self) -> list[Cell]:
        """All cells in row-major order."""
        return [cell for row in self._grid for cell in row]

    def get_row(self, y: int) -> list[Cell]:
        if not _is_int(y) or not 0 <= y < self._height:
            raise OutOfBoundsError(f"Row {y} is out of bounds")
        return list(self._grid[y])

    def get_neighbor_in_direction(self, cell: Cell, direction: Direction) -> Cell | None:
        x, y = cell.get_neighbor_position(direction)
        return self.get_cell_safe(x, y)

    def get_neighbors(self, cell: Cell) -> list[Cell]:
        """In-bounds grid neighbors, ignoring walls, in Up/Down/Left/Right order."""
        neighbors = []
        for direction in ALL_DIRECTIONS:
            neighbor = self.get_neighbor_in_direction(cell, direction)
            if neighbor is not None:
                neighbors.append(neighbor)
        return neighbors

    def get_accessible_neighbors(self, cell: Cell) -> list[Cell]:
        """Neighbors reached through the open sides of ``cell`` itself."""
        neighbors = []
        for direction in cell.get_open_directions():
            neighbor = self.get_neighbor_in_direction(cell, direction)
            if neighbor is not None:
                neighbors.append(neighbor)
        return neighbors

    def get_unvisited_neighbors(self, cell: Cell) -> list[Cell]:
        return [n for n in self.get_neighbors(cell) if not n.visited]

    def are_neighbors(self, cell1: Cell, cell2: Cell) -> bool:
        return cell1.is_adjacent_to(cell2)

    @staticmethod
    def are_positions_adjacent(
        pos1: Position | tuple[int, int], pos2: Position | tuple[int, int]
    ) -> bool:
        return abs(pos1[0] - pos2[0]) + abs(pos1[1] - pos2[1]) == 1

    def get_direction_between(self, from_cell: Cell, to_cell: Cell) -> Direction:
        if not self.are_neighbors(from_cell, to_cell):
            raise NotNeighborsError(
                f"Cells ({from_cell.x}, {from_cell.y}) and "
                f"({to_cell.x}, {to_cell.y}) are not neighbors"
            )
        delta = (to_cell.x - from_cell.x, to_cell.y - from_cell.y)
        for direction in ALL_DIRECTIONS:
            if direction.offset == delta:
                return direction
        raise AssertionError(f"No direction matches delta {delta}")

    def can_move_between(
        self, from_pos: Position | tuple[int, int], to_pos: Position | tuple[int, int]
    ) -> bool:
        """
        True if the two positions are adjacent and joined by a passage.

        Raises
        ------
            OutOfBoundsError: If an adjacent pair lies partly outside the grid.
        """
        if not self.are_positions_adjacent(from_pos, to_pos):
            return False
        return self.has_passage_between(self.get_cell_at(from_pos), self.get_cell_at(to_pos))

    # --- wall mutation ------------------------------------------------------

    def remove_wall_between(self, cell1: Cell, cell2: Cell) -> None:
        """Open a passage between two adjacent cells, updating both faces."""
        if not self.are_neighbors(cell1, cell2):
            raise NotNeighborsError(
                f"Cannot remove wall: cells ({cell1.x}, {cell1.y}) and "
                f"({cell2.x}, {cell2.y}) are not neighbors"
            )
        direction = self.get_direction_between(cell1, cell2)
        cell1.remove_wall_mutable(direction)
        cell2.remove_wall_mutable(direction.opposite)

    def remove_wall_between_positions(
        self, pos1: Position | tuple[int, int], pos2: Position | tuple[int, int]
    ) -> None:
        self.remove_wall_between(self.get_cell_at(pos1), self.get_cell_at(pos2))

    def add_wall_between(self, cell1: Cell, cell2: Cell) -> None:
        """Close the passage between two adjacent cells, updating both faces."""
        if not self.are_neighbors(cell1, cell2):
            raise NotNeighborsError(
                f"Cannot add wall: cells ({cell1.x}, {cell1.y}) and "
                f"({cell2.x}, {cell2.y}) are not neighbors"
            )
        direction = self.get_direction_between(cell1, cell2)
        cell1.add_wall_mutable(direction)
        cell2.add_wall_mutable(direction.opposite)

    def has_passage_between(self, cell1: Cell, cell2: Cell) -> bool:
        if not self.are_neighbors(cell1, cell2):
            return False
        return cell1.is_open_in_direction(self.get_direction_between(cell1, cell2))

    # --- resets -------------------------------------------------------------

    def reset_visited(self) -> None:
        for cell in self.get_all_cells():
            cell.reset()

    def reset_to_fully_walled(self) -> None:
        for y in range(self._height):
            for x in range(self._width):
                self.set_cell(x, y, Cell(x, y))

    # --- generation ---------------------------------------------------------

    def generate_recursive_backtracking(
        self, start_x: int = 0, start_y: int = 0, seed: int | None = None
    ) -> None:
        """
        Carve a perfect maze using the recursive backtracker (iterative DFS).

        Any previous walls and visited flags are discarded. When this returns
        every cell is visited and the passages form a spanning tree, so the
        maze has exactly ``total_cells - 1`` passages.

        Args:
            start_x: Column of the cell the carve starts from.
            start_y: Row of the cell the carve starts from.
            seed: Random seed for a reproducible maze. Defaults to None.
        """
        rng = random.Random(seed)
        self.reset_to_fully_walled()
        self.reset_visited()

        start_cell = self.get_cell(start_x, start_y)
        start_cell.visited = True
        # Stack for DFS backtracking
        stack = [start_cell]

        while stack:
            current = stack[-1]
            unvisited = self.get_unvisited_neighbors(current)
            if unvisited:
                next_cell = rng.choice(unvisited)
                self.remove_wall_between(current, next_cell)
                next_cell.visited = True
                stack.append(next_cell)
            else:
                stack.pop()  # Backtrack

    # --- solving ------------------------------------------------------------

    def _validate_endpoints(
        self, start: Position | tuple[int, int], end: Position | tuple[int, int]
    ) -> tuple[Position, Position]:
        start, end = Position(*start), Position(*end)
        if not self.is_valid_position_object(start):
            raise InvalidPositionError(f"Invalid start position: ({start.x}, {start.y})")
        if not self.is_valid_position_object(end):
            raise InvalidPositionError(f"Invalid end position: ({end.x}, {end.y})")
        return start, end

    def solve_dfs(
        self, start: Position | tuple[int, int], end: Position | tuple[int, int]
    ) -> list[Position] | None:
        """
        Find a path with depth-first search.

        Accessible neighbors are tried in Up/Down/Left/Right order and the first
        path that reaches ``end`` wins, so the result is not necessarily the
        shortest on a maze with loops.

        Returns
        -------
            list: Positions from start to end inclusive, or None if no path exists.
        """
        start, end = self._validate_endpoints(start, end)
        self.reset_visited()

        start_cell = self.get_cell_at(start)
        start_cell.visited = True
        path = [start]
        if start == end:
            return path

        # One iterator of untried neighbors per cell on the current path;
        # stack and path always have the same length.
        stack = [iter(self.get_accessible_neighbors(start_cell))]
        while stack:
            for neighbor in stack[-1]:
                if neighbor.visited:
                    continue
                neighbor.visited = True
                path.append(neighbor.position)
                if neighbor.position == end:
                    return path
                stack.append(iter(self.get_accessible_neighbors(neighbor)))
                break
            else:
                stack.pop()
                path.pop()  # Backtrack

        return None

    def solve_bfs(
        self, start: Position | tuple[int, int], end: Position | tuple[int, int]
    ) -> list[Position] | None:
        """
        Find a shortest path (by number of steps) with breadth-first search.

        Returns
        -------
            list: Positions from start to end inclusive, or None if no path exists.
        """
        start, end = self._validate_endpoints(start, end)
        self.reset_visited()

        # came_from[y][x] is the position we reached (x, y) from
        came_from: list[list[Position | None]] = [
            [None] * self._width for _ in range(self._height)
        ]
        queue = deque([start])
        self.get_cell_at(start).visited = True

        while queue:
            current = queue.popleft()
            if current == end:
                return self._reconstruct_path(came_from, start, end)

            for neighbor in self.get_accessible_neighbors(self.get_cell_at(current)):
                # Mark on enqueue so each cell enters the queue at most once
                if not neighbor.visited:
                    neighbor.visited = True
                    came_from[neighbor.y][neighbor.x] = current
                    queue.append(neighbor.position)

        return None

    @staticmethod
    def _reconstruct_path(
        came_from: list[list[Position | None]], start: Position, end: Position
    ) -> list[Position]:
        path = [end]
        current = end
        while current != start:
            current = came_from[current.y][current.x]
            path.append(current)
        path.reverse()
        return path

    # --- statistics ---------------------------------------------------------

    def get_statistics(self) -> MazeStatistics:
        visited_count = 0
        total_walls = 0
        removed_walls = 0
        for cell in self.get_all_cells():
            if cell.visited:
                visited_count += 1
            wall_count = cell.get_wall_count()
            total_walls += wall_count
            removed_walls += 4 - wall_count

        return MazeStatistics(
            total_cells=self.total_cells,
            visited_cells=visited_count,
            unvisited_cells=self.total_cells - visited_count,
            total_walls=total_walls,
            removed_walls=removed_walls,
            connectivity=removed_walls / (self.total_cells * 4),
        )
