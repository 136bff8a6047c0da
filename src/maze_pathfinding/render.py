"""Box-drawing renderings of a maze, a solution path, or two paths side by side."""

from collections.abc import Callable, Iterable

from maze_pathfinding.maze import Maze
from maze_pathfinding.primitives import Direction, Position

CELL_WIDTH = 5


def _render(maze: Maze, content_for: Callable[[int, int], str]) -> str:
    """
    Draw the grid, asking ``content_for(x, y)`` for each cell's 3-char interior.

    Only right and bottom walls are drawn per cell; the outer border is always
    closed.
    """
    horizontal = "─" * CELL_WIDTH
    lines = ["┌" + "┬".join([horizontal] * maze.width) + "┐"]

    for y in range(maze.height):
        row = maze.get_row(y)
        line = "│"
        for cell in row:
            line += f" {content_for(cell.x, y)} "
            line += "│" if cell.has_wall_in_direction(Direction.RIGHT) else " "
        lines.append(line)

        if y < maze.height - 1:
            segments = [
                horizontal if cell.has_wall_in_direction(Direction.DOWN) else " " * CELL_WIDTH
                for cell in row
            ]
            lines.append("├" + "┼".join(segments) + "┤")

    lines.append("└" + "┴".join([horizontal] * maze.width) + "┘")
    return "\n".join(lines)


def _endpoint_marker(
    x: int, y: int, start: Position | None, end: Position | None
) -> str | None:
    if start is not None and (x, y) == tuple(start):
        return " S "
    if end is not None and (x, y) == tuple(end):
        return " E "
    return None


def render_maze(maze: Maze) -> str:
    return _render(maze, lambda x, y: "   ")


def render_solution(
    maze: Maze,
    path: Iterable[Position],
    start: Position | None = None,
    end: Position | None = None,
) -> str:
    """
    Render a maze with a solution overlaid.

    Cells on the path show ``●``; cells the last search visited but that are
    not on the path show ``·``.
    """
    on_path = {tuple(pos) for pos in path}

    def content_for(x: int, y: int) -> str:
        marker = _endpoint_marker(x, y, start, end)
        if marker:
            return marker
        if (x, y) in on_path:
            return " ● "
        if maze.get_cell(x, y).visited:
            return " · "
        return "   "

    return _render(maze, content_for)


def render_compared_paths(
    maze: Maze,
    path1: Iterable[Position],
    path2: Iterable[Position],
    start: Position | None = None,
    end: Position | None = None,
) -> str:
    """Overlay two paths: ``◆`` on both, ``●`` first only, ``○`` second only."""
    first = {tuple(pos) for pos in path1}
    second = {tuple(pos) for pos in path2}

    def content_for(x: int, y: int) -> str:
        marker = _endpoint_marker(x, y, start, end)
        if marker:
            return marker
        if (x, y) in first and (x, y) in second:
            return " ◆ "
        if (x, y) in first:
            return " ● "
        if (x, y) in second:
            return " ○ "
        return "   "

    return _render(maze, content_for)
