import click

from maze_pathfinding.demo_script import run_demo_command
from maze_pathfinding.interactive_cli import run_interactive_command
from maze_pathfinding.path_analysis import analyze_paths_command


@click.group()
def cli():
    """Maze Pathfinding - Generate perfect mazes and compare DFS and BFS solvers."""
    pass


cli.add_command(run_demo_command)
cli.add_command(run_interactive_command)
cli.add_command(analyze_paths_command)
