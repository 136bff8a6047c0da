import click

from maze_pathfinding.config import load_settings
from maze_pathfinding.demo_script import run_demo_command


@click.command(name="run-interactive")
def run_interactive_command() -> None:
    """Run the maze demo in an *interactive* fashion.

    The command asks for the maze width and height (each clamped to the
    configured ``MAZE_MIN_SIZE``..``MAZE_MAX_SIZE`` range, 3..20 by default)
    and an optional RNG seed.

    After collecting all answers, the function calls the regular
    :pymeth:`maze_pathfinding.demo_script.run_demo_command` via ``ctx.invoke``
    so generation and solving run exactly as if the user had typed the
    ``run-demo`` options manually.
    """

    ctx = click.get_current_context()
    settings = load_settings()

    click.echo(click.style("Maze Algorithm - Simple Version", bold=True))
    click.echo("======================================")

    # ------------------------------------------------------------------
    # 1.  Maze dimensions
    # ------------------------------------------------------------------
    size_range = f"({settings.min_size}-{settings.max_size})"
    width = click.prompt(
        f"Enter maze width {size_range}", default=settings.demo_width, type=int
    )
    height = click.prompt(
        f"Enter maze height {size_range}", default=settings.demo_height, type=int
    )

    clamped_width = settings.clamp_size(width)
    clamped_height = settings.clamp_size(height)
    if (clamped_width, clamped_height) != (width, height):
        click.echo(
            click.style(
                f"Size adjusted to {clamped_width}x{clamped_height}", fg="yellow"
            )
        )

    # ------------------------------------------------------------------
    # 2.  Seed (blank = random maze)
    # ------------------------------------------------------------------
    default_seed = "" if settings.seed is None else str(settings.seed)
    seed_input = click.prompt(
        "Random seed (leave blank for a random maze)",
        default=default_seed,
        show_default=False,
        type=str,
    ).strip()
    seed: int | None = None
    if seed_input:
        try:
            seed = int(seed_input)
        except ValueError:
            click.echo(
                click.style(
                    f"Warning: seed {seed_input!r} is not an integer – using a random maze.",
                    fg="red",
                )
            )

    # ------------------------------------------------------------------
    # 3.  Delegate to the actual demo command
    # ------------------------------------------------------------------
    ctx.invoke(
        run_demo_command,
        width=clamped_width,
        height=clamped_height,
        seed=seed,
    )
