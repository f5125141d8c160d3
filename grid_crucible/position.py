"""Position value object.

Immutable integer grid coordinates used by the cost grid, search states and
solver results.
"""

from dataclasses import dataclass

from grid_crucible.types import Direction


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int

    def step(self, direction: Direction) -> "Position":
        """Return the adjacent position one move in ``direction`` (no bounds check)."""
        dx, dy = direction.delta
        return Position(self.x + dx, self.y + dy)
