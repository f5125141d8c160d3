"""Common type aliases and enumerations.

``Direction`` is the heading of a search state. ``NONE`` marks the start state,
which has not moved yet and therefore has no heading to persist or reverse.
"""

from enum import StrEnum, auto
from typing import Dict, Tuple

Cost = int
Coord = Tuple[int, int]


class Direction(StrEnum):
    """Heading of the crucible.

    Members:
        UP, DOWN, LEFT, RIGHT: Cardinal unit moves (no diagonals).
        NONE: Undirected start state; its own opposite, with no perpendiculars.
    """

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    NONE = auto()

    @property
    def delta(self) -> Coord:
        """Unit ``(dx, dy)`` step; ``(0, 0)`` for ``NONE``."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def perpendicular(self) -> Tuple["Direction", ...]:
        """The two 90 degree turns (empty for ``NONE``)."""
        return _PERPENDICULARS[self]


MOVE_DIRECTIONS = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]

_DELTAS: Dict[Direction, Coord] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.NONE: (0, 0),
}

_OPPOSITES: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.NONE: Direction.NONE,
}

_PERPENDICULARS: Dict[Direction, Tuple[Direction, ...]] = {
    Direction.UP: (Direction.LEFT, Direction.RIGHT),
    Direction.DOWN: (Direction.LEFT, Direction.RIGHT),
    Direction.LEFT: (Direction.UP, Direction.DOWN),
    Direction.RIGHT: (Direction.UP, Direction.DOWN),
    Direction.NONE: (),
}
