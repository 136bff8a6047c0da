import sys

import click

from maze_pathfinding.config import load_settings
from maze_pathfinding.errors import MazeError
from maze_pathfinding.maze import Maze
from maze_pathfinding.primitives import Position
from maze_pathfinding.render import render_maze


def parse_maze_sizes(maze_sizes: str) -> list[tuple[int, int]]:
    """Parse "5x5,10x6" into [(5, 5), (10, 6)]. Raises ValueError if malformed."""
    sizes = []
    for size in maze_sizes.split(","):
        width, height = map(int, size.strip().lower().split("x"))
        sizes.append((width, height))
    return sizes


def endpoint_pairs(width: int, height: int) -> list[tuple[Position, Position]]:
    """Both diagonals plus the vertical and horizontal midlines."""
    return [
        (Position(0, 0), Position(width - 1, height - 1)),
        (Position(0, height - 1), Position(width - 1, 0)),
        (Position(width // 2, 0), Position(width // 2, height - 1)),
        (Position(0, height // 2), Position(width - 1, height // 2)),
    ]


def paths_identical(path1: list[Position], path2: list[Position]) -> bool:
    """True if both paths visit the same cells in the same order."""
    return list(path1) == list(path2)


def analyze_maze(maze: Maze) -> list[dict]:
    """
    Solve every endpoint pair with DFS and BFS and record how they compare.

    On a perfect maze the two solvers must agree on every pair, since the
    path between any two cells is unique.
    """
    results = []
    for start, end in endpoint_pairs(maze.width, maze.height):
        dfs_path = maze.solve_dfs(start, end)
        bfs_path = maze.solve_bfs(start, end)
        found = dfs_path is not None and bfs_path is not None
        results.append(
            {
                "start": start,
                "end": end,
                "dfs_length": len(dfs_path) if dfs_path else None,
                "bfs_length": len(bfs_path) if bfs_path else None,
                "identical": found and paths_identical(dfs_path, bfs_path),
            }
        )
    return results


def report_size(width: int, height: int, seed: int | None):
    """Generate one maze, solve every endpoint pair both ways, and print the results."""
    click.echo(f"\nTesting {click.style(f'{width}x{height}', fg='cyan')} maze:")
    maze = Maze(width, height)
    maze.generate_recursive_backtracking(seed=seed)

    for i, result in enumerate(analyze_maze(maze), start=1):
        start, end = result["start"], result["end"]
        route = f"({start.x},{start.y}) → ({end.x},{end.y})"
        if result["dfs_length"] is None or result["bfs_length"] is None:
            click.echo(f"  Test {i}: No path found for {route}")
            continue
        click.echo(f"  Test {i}: {route}")
        click.echo(f"    DFS path length: {result['dfs_length']}")
        click.echo(f"    BFS path length: {result['bfs_length']}")
        color = "green" if result["identical"] else "red"
        click.echo(
            f"    Paths identical: {click.style(str(result['identical']), fg=color)}"
        )
        if not result["identical"] and result["dfs_length"] != result["bfs_length"]:
            click.echo(
                click.style(
                    "    Different path lengths - multiple paths may exist!",
                    fg="yellow",
                )
            )

    click.echo("\nMaze structure:")
    click.echo(render_maze(maze))
    stats = maze.get_statistics()
    click.echo(f"Connectivity ratio: {stats.connectivity * 100:.1f}%")


@click.command(name="analyze-paths")
@click.option(
    "--sizes",
    type=str,
    default="5x5,10x6,8x8",
    help="Comma-separated list of maze sizes to test (format: WIDTHxHEIGHT)",
)
@click.option("--seed", type=int, help="Random seed for reproducible maze generation")
def analyze_paths_command(sizes: str, seed: int | None):
    """Check that DFS and BFS find the same unique path on generated mazes."""
    try:
        parsed_sizes = parse_maze_sizes(sizes)
    except ValueError:
        click.echo(
            click.style(
                "Error: Invalid maze sizes format. Use format: WIDTHxHEIGHT,WIDTHxHEIGHT",
                fg="red",
                bold=True,
            )
        )
        return

    if seed is None:
        seed = load_settings().seed

    click.echo(click.style("Maze Path Analysis", bold=True))
    click.echo("==================")

    try:
        for width, height in parsed_sizes:
            report_size(width, height, seed)
    except MazeError as e:
        click.echo(click.style(f"Error: {e}", fg="red", bold=True), err=True)
        sys.exit(1)


if __name__ == "__main__":
    analyze_paths_command()
