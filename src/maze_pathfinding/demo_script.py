import sys
import time

import click

from maze_pathfinding.config import load_settings
from maze_pathfinding.errors import MazeError
from maze_pathfinding.maze import Maze, MazeStatistics
from maze_pathfinding.primitives import Position
from maze_pathfinding.render import render_compared_paths, render_maze, render_solution


def print_heading(title: str):
    """Prints a section title underlined with '='."""
    click.echo(click.style(title, bold=True))
    click.echo("=" * len(title))


def print_statistics(stats: MazeStatistics):
    for key, value in stats.as_dict().items():
        label = key.replace("_", " ").title()
        if key == "connectivity":
            value = f"{value * 100:.1f}%"
        click.echo(f"{label}: {click.style(str(value), fg='cyan')}")


def timed_solve(solver, start: Position, end: Position):
    """Run ``solver(start, end)`` and return ``(path, elapsed_ms)``."""
    started = time.perf_counter()
    path = solver(start, end)
    return path, (time.perf_counter() - started) * 1000


def report_solution(
    maze: Maze,
    name: str,
    path: list[Position] | None,
    elapsed_ms: float,
    start: Position,
    end: Position,
):
    if path is None:
        click.echo(click.style(f"No solution found with {name}", fg="red"))
        return
    click.echo(
        f"Path found - Length: {click.style(str(len(path)), fg='green')} steps"
    )
    click.echo(f"Time: {elapsed_ms:.3f}ms")
    click.echo(f"\nMaze with {name} solution:")
    click.echo(render_solution(maze, path, start, end))


def run_comparison(width: int, height: int, seed: int | None = None):
    """
    Generate a maze, solve it with DFS and BFS, and print both results.

    Args:
        width (int): The number of cells wide the maze should be.
        height (int): The number of cells high the maze should be.
        seed (int, optional): Random seed for reproducible maze generation.

    Returns
    -------
        tuple: (dfs_path, bfs_path); either may be None.
    """
    click.echo(f"\nCreating {click.style(f'{width}x{height}', fg='cyan')} maze...")
    maze = Maze(width, height)
    maze.generate_recursive_backtracking(seed=seed)

    click.echo("\nGenerated Maze:")
    click.echo(render_maze(maze))

    start, end = Position(0, 0), Position(width - 1, height - 1)
    click.echo(
        f"\nSolving from ({start.x}, {start.y}) to ({end.x}, {end.y})...\n"
    )

    print_heading("1. DFS (Depth-First Search) Solution:")
    dfs_path, dfs_ms = timed_solve(maze.solve_dfs, start, end)
    report_solution(maze, "DFS", dfs_path, dfs_ms, start, end)

    maze.reset_visited()

    click.echo()
    print_heading("2. BFS (Breadth-First Search) Solution:")
    bfs_path, bfs_ms = timed_solve(maze.solve_bfs, start, end)
    report_solution(maze, "BFS", bfs_path, bfs_ms, start, end)

    if dfs_path and bfs_path:
        click.echo()
        print_heading("3. Algorithm Comparison:")
        click.echo(f"DFS: {len(dfs_path)} steps in {dfs_ms:.3f}ms")
        click.echo(f"BFS: {len(bfs_path)} steps in {bfs_ms:.3f}ms")
        if len(bfs_path) <= len(dfs_path):
            click.echo(
                click.style("BFS found a shorter or equal path (optimal)", fg="green")
            )
        else:
            click.echo(
                click.style("DFS found a shorter path (unusual for BFS)", fg="yellow")
            )
        click.echo("\nPath Comparison (● = DFS, ○ = BFS, ◆ = Both):")
        click.echo(render_compared_paths(maze, dfs_path, bfs_path, start, end))

    click.echo()
    print_heading("4. Maze Statistics:")
    print_statistics(maze.get_statistics())

    return dfs_path, bfs_path


@click.command(name="run-demo")
@click.option("--width", type=int, help="Maze width in cells")
@click.option("--height", type=int, help="Maze height in cells")
@click.option("--seed", type=int, help="Random seed for reproducible maze generation")
def run_demo_command(width, height, seed):
    """Generate a maze and compare its DFS and BFS solutions."""
    settings = load_settings()
    width = width if width is not None else settings.demo_width
    height = height if height is not None else settings.demo_height
    seed = seed if seed is not None else settings.seed

    click.echo(click.style("Maze Algorithm - Demo Version", bold=True))
    click.echo("====================================")

    try:
        run_comparison(width, height, seed)
    except MazeError as e:
        click.echo(click.style(f"Error: {e}", fg="red", bold=True), err=True)
        sys.exit(1)


if __name__ == "__main__":
    run_demo_command()
