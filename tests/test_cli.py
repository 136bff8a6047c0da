import pytest
from click.testing import CliRunner

from maze_pathfinding import cli
from maze_pathfinding.config import Settings, load_settings
from maze_pathfinding.errors import MazeError
from maze_pathfinding.maze import Maze
from maze_pathfinding.path_analysis import analyze_maze, parse_maze_sizes

SETTINGS_VARS = [
    "MAZE_SEED",
    "MAZE_DEMO_WIDTH",
    "MAZE_DEMO_HEIGHT",
    "MAZE_MIN_SIZE",
    "MAZE_MAX_SIZE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SETTINGS_VARS:
        monkeypatch.delenv(name, raising=False)


def test_default_settings():
    assert load_settings() == Settings()


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("MAZE_SEED", "42")
    monkeypatch.setenv("MAZE_DEMO_WIDTH", "8")
    monkeypatch.setenv("MAZE_MAX_SIZE", "12")

    settings = load_settings()

    assert settings.seed == 42
    assert settings.demo_width == 8
    assert settings.demo_height == 5
    assert settings.clamp_size(50) == 12
    assert settings.clamp_size(1) == 3


def test_invalid_setting(monkeypatch):
    monkeypatch.setenv("MAZE_DEMO_HEIGHT", "tall")
    with pytest.raises(ValueError, match="MAZE_DEMO_HEIGHT"):
        load_settings()


def test_run_demo():
    runner = CliRunner()
    result = runner.invoke(cli, ["run-demo", "--width", "4", "--height", "3", "--seed", "7"])

    assert result.exit_code == 0, result.output
    assert "Creating 4x3 maze..." in result.output
    assert "Solving from (0, 0) to (3, 2)..." in result.output
    assert result.output.count("Path found - Length:") == 2
    # On a perfect maze the DFS path is the unique path, so BFS can only tie
    assert "BFS found a shorter or equal path (optimal)" in result.output
    assert "Removed Walls: 22" in result.output
    assert "Connectivity: 45.8%" in result.output


def test_run_demo_uses_configured_defaults(monkeypatch):
    monkeypatch.setenv("MAZE_DEMO_WIDTH", "3")
    monkeypatch.setenv("MAZE_DEMO_HEIGHT", "2")
    monkeypatch.setenv("MAZE_SEED", "1")

    result = CliRunner().invoke(cli, ["run-demo"])

    assert result.exit_code == 0, result.output
    assert "Creating 3x2 maze..." in result.output


def test_run_demo_is_reproducible_with_seed():
    runner = CliRunner()
    args = ["run-demo", "--width", "5", "--height", "5", "--seed", "3"]
    first = runner.invoke(cli, args).output
    second = runner.invoke(cli, args).output

    def maze_section(output):
        return output.split("Generated Maze:")[1].split("Solving from")[0]

    assert maze_section(first) == maze_section(second)


def test_run_demo_invalid_size():
    result = CliRunner().invoke(cli, ["run-demo", "--width", "0", "--height", "3"])

    assert result.exit_code == 1
    assert "Invalid width: 0" in result.output


def test_run_interactive():
    result = CliRunner().invoke(cli, ["run-interactive"], input="5\n4\n42\n")

    assert result.exit_code == 0, result.output
    assert "Creating 5x4 maze..." in result.output
    assert "Size adjusted" not in result.output


def test_run_interactive_clamps_size():
    result = CliRunner().invoke(cli, ["run-interactive"], input="50\n1\n\n")

    assert result.exit_code == 0, result.output
    assert "Size adjusted to 20x3" in result.output
    assert "Creating 20x3 maze..." in result.output


def test_run_interactive_bad_seed():
    result = CliRunner().invoke(cli, ["run-interactive"], input="3\n3\nabc\n")

    assert result.exit_code == 0, result.output
    assert "is not an integer" in result.output
    assert "Creating 3x3 maze..." in result.output


def test_analyze_paths():
    result = CliRunner().invoke(cli, ["analyze-paths", "--sizes", "4x4,6x3", "--seed", "9"])

    assert result.exit_code == 0, result.output
    assert "Testing 4x4 maze:" in result.output
    assert "Testing 6x3 maze:" in result.output
    assert result.output.count("Paths identical: True") == 8
    assert "Paths identical: False" not in result.output
    assert result.output.count("Connectivity ratio:") == 2


def test_analyze_paths_invalid_sizes():
    result = CliRunner().invoke(cli, ["analyze-paths", "--sizes", "4by4"])

    assert "Error: Invalid maze sizes format" in result.output


def test_parse_maze_sizes():
    assert parse_maze_sizes("5x5, 10X6") == [(5, 5), (10, 6)]
    with pytest.raises(ValueError):
        parse_maze_sizes("5x")


def test_analyze_maze_on_closed_grid():
    results = analyze_maze(Maze(3, 3))

    assert len(results) == 4
    assert all(r["dfs_length"] is None and r["bfs_length"] is None for r in results)
    assert not any(r["identical"] for r in results)


@pytest.mark.parametrize("sizes", ["0x5", "4x4,-3x4"])
def test_analyze_paths_rejects_invalid_dimensions(sizes):
    result = CliRunner().invoke(cli, ["analyze-paths", "--sizes", sizes, "--seed", "1"])

    assert result.exit_code == 1
    assert not isinstance(result.exception, MazeError)
    assert "Error: Invalid width" in result.output
