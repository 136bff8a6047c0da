from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class Direction(Enum):
    """The four cardinal directions used for movement and wall placement."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        """(dx, dy) for a single step. y grows downwards."""
        return _OFFSETS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def bit(self) -> int:
        return _BITS[self]


_OFFSETS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

_BITS = {
    Direction.UP: 0b0001,
    Direction.DOWN: 0b0010,
    Direction.LEFT: 0b0100,
    Direction.RIGHT: 0b1000,
}

# Every algorithm walks neighbors in this order, which keeps results
# reproducible for a fixed generation seed.
ALL_DIRECTIONS: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)


class Position(NamedTuple):
    """A grid coordinate. Compares equal to the plain tuple ``(x, y)``."""

    x: int
    y: int

    def move(self, direction: Direction, distance: int = 1) -> "Position":
        """
        Translate this position by ``distance`` steps in ``direction``.

        No bounds checking happens here, so the result may be negative.
        """
        dx, dy = direction.offset
        return Position(self.x + dx * distance, self.y + dy * distance)


_ALL_WALLS_MASK = 0b1111


@dataclass(frozen=True)
class Walls:
    """
    Wall state of a single cell, one flag per direction packed into 4 bits.

    Instances are immutable; ``without`` and ``with_wall`` return new values.
    """

    mask: int = _ALL_WALLS_MASK

    def __post_init__(self):
        if (
            not isinstance(self.mask, int)
            or isinstance(self.mask, bool)
            or not 0 <= self.mask <= _ALL_WALLS_MASK
        ):
            raise ValueError(
                f"Invalid wall mask: {self.mask!r}. Must be an integer in 0..{_ALL_WALLS_MASK}."
            )

    @classmethod
    def closed(cls) -> "Walls":
        return cls(_ALL_WALLS_MASK)

    @classmethod
    def open(cls) -> "Walls":
        return cls(0)

    def has(self, direction: Direction) -> bool:
        return bool(self.mask & direction.bit)

    def without(self, direction: Direction) -> "Walls":
        return Walls(self.mask & ~direction.bit & _ALL_WALLS_MASK)

    def with_wall(self, direction: Direction) -> "Walls":
        return Walls(self.mask | direction.bit)

    def directions(self, present: bool = True) -> list[Direction]:
        """Directions whose wall flag equals ``present``, in ALL_DIRECTIONS order."""
        return [d for d in ALL_DIRECTIONS if self.has(d) == present]

    def count(self) -> int:
        return bin(self.mask).count("1")
