import pytest

from maze_pathfinding.cell import Cell
from maze_pathfinding.errors import InvalidCoordinateError
from maze_pathfinding.primitives import ALL_DIRECTIONS, Direction, Position, Walls


def test_new_cell_defaults():
    cell = Cell(3, 4)

    assert cell.position == Position(3, 4)
    assert (cell.x, cell.y) == (3, 4)
    assert cell.visited is False
    assert cell.get_wall_count() == 4
    assert cell.get_walled_directions() == list(ALL_DIRECTIONS)
    assert cell.get_open_directions() == []


def test_create_open():
    cell = Cell.create_open(0, 0)
    assert cell.get_wall_count() == 0
    assert cell.get_open_directions() == list(ALL_DIRECTIONS)


@pytest.mark.parametrize(
    ("x", "y"),
    [(-1, 0), (0, -1), (1.5, 0), (0, "2"), (True, 0), (None, 0)],
)
def test_invalid_coordinates(x, y):
    with pytest.raises(InvalidCoordinateError):
        Cell(x, y)


def test_wall_mutation_is_idempotent():
    cell = Cell(1, 1)

    assert cell.remove_wall_mutable(Direction.LEFT) is None
    cell.remove_wall_mutable(Direction.LEFT)
    assert cell.is_open_in_direction(Direction.LEFT)
    assert not cell.has_wall_in_direction(Direction.LEFT)
    assert cell.get_wall_count() == 3

    cell.add_wall_mutable(Direction.LEFT)
    cell.add_wall_mutable(Direction.LEFT)
    assert cell.has_wall_in_direction(Direction.LEFT)
    assert cell.get_wall_count() == 4


def test_explicit_walls():
    cell = Cell(0, 0, Walls.open().with_wall(Direction.DOWN))
    assert cell.get_walled_directions() == [Direction.DOWN]
    assert cell.get_open_directions() == [Direction.UP, Direction.LEFT, Direction.RIGHT]


def test_neighbor_position_is_not_bounds_checked():
    cell = Cell(0, 0)
    assert cell.get_neighbor_position(Direction.UP) == (0, -1)
    assert cell.get_neighbor_position(Direction.RIGHT) == (1, 0)


def test_distance_and_adjacency():
    cell = Cell(2, 2)

    assert cell.manhattan_distance_to(Cell(5, 0)) == 5
    assert cell.manhattan_distance_to(Position(2, 2)) == 0
    assert cell.manhattan_distance_to((0, 0)) == 4

    assert cell.is_adjacent_to(Cell(2, 3))
    assert cell.is_adjacent_to(Cell(1, 2))
    # Diagonals and the cell itself are never adjacent
    assert not cell.is_adjacent_to(Cell(3, 3))
    assert not cell.is_adjacent_to(Cell(2, 2))


def test_reset_clears_visited_only():
    cell = Cell(0, 0)
    cell.remove_wall_mutable(Direction.DOWN)
    cell.visited = True

    cell.reset()

    assert cell.visited is False
    assert cell.is_open_in_direction(Direction.DOWN)


def test_str():
    cell = Cell(1, 2)
    assert str(cell) == "Cell(1,2): 4 walls, unvisited"
    cell.visited = True
    cell.remove_wall_mutable(Direction.UP)
    assert str(cell) == "Cell(1,2): 3 walls, visited"
