import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    seed: int | None = None
    demo_width: int = 6
    demo_height: int = 5
    min_size: int = 3
    max_size: int = 20

    def clamp_size(self, value: int) -> int:
        """Clamp a requested width or height into [min_size, max_size]."""
        return max(self.min_size, min(self.max_size, value))


def _int_from_env(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """
    Build settings from the environment.

    A local ``.env`` file is loaded first, so the same variables can live
    there instead of the shell.
    """
    load_dotenv()  # does nothing if no file is present

    defaults = Settings()
    return Settings(
        seed=_int_from_env("MAZE_SEED", defaults.seed),
        demo_width=_int_from_env("MAZE_DEMO_WIDTH", defaults.demo_width),
        demo_height=_int_from_env("MAZE_DEMO_HEIGHT", defaults.demo_height),
        min_size=_int_from_env("MAZE_MIN_SIZE", defaults.min_size),
        max_size=_int_from_env("MAZE_MAX_SIZE", defaults.max_size),
    )
