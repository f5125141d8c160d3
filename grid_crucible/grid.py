"""Dense cost grid.

``CostGrid`` stores per-cell traversal costs row-major in a persistent vector.
It is an immutable value object: build it once from the puzzle text and share
it freely between searches (including concurrent ones).
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_crucible.errors import ParseError
from grid_crucible.position import Position

DIGITS = "0123456789"


@dataclass(frozen=True)
class CostGrid:
    """Rectangular array of digit costs.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        costs: Row-major costs, ``width * height`` entries in ``0..9``.
    """

    width: int
    height: int
    costs: PVector[int]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ParseError(f"Grid must be non-empty, got {self.width}x{self.height}")
        if len(self.costs) != self.width * self.height:
            raise ParseError(
                f"Expected {self.width * self.height} costs for a "
                f"{self.width}x{self.height} grid, got {len(self.costs)}"
            )
        for i, c in enumerate(self.costs):
            if not 0 <= c <= 9:
                y, x = divmod(i, self.width)
                raise ParseError(
                    f"Invalid cost {c!r} at row {y}, column {x}", row=y, column=x
                )

    @classmethod
    def from_text(cls, text: str) -> "CostGrid":
        """Parse one row per line; empty lines before and after the grid are ignored."""
        lines = text.splitlines()
        while lines and not lines[0]:
            lines.pop(0)
        while lines and not lines[-1]:
            lines.pop()
        return cls.from_rows(lines)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "CostGrid":
        """Build a grid from digit strings, one per row.

        Raises:
            ParseError: No rows, a non-digit character, or rows of unequal length.
        """
        if not rows or not rows[0]:
            raise ParseError("Grid text contains no rows")
        width = len(rows[0])
        costs: List[int] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ParseError(
                    f"Row {y} has length {len(row)}, expected {width}", row=y
                )
            for x, char in enumerate(row):
                if char not in DIGITS:
                    raise ParseError(
                        f"Invalid cost {char!r} at row {y}, column {x}",
                        row=y,
                        column=x,
                    )
                costs.append(ord(char) - ord("0"))
        return cls(width=width, height=len(rows), costs=pvector(costs))

    @classmethod
    def from_costs(cls, rows: Iterable[Iterable[int]]) -> "CostGrid":
        """Build a grid from nested integer rows (e.g. test fixtures)."""
        return cls.from_rows(["".join(str(c) for c in row) for row in rows])

    def is_in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the grid rectangle."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def get(self, x: int, y: int) -> int:
        """Return the cost of entering cell ``(x, y)``.

        Raises:
            IndexError: Coordinates outside the grid.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Out of bounds: {(x, y)} for grid {self.width}x{self.height}"
            )
        return self.costs[y * self.width + x]

    def cost_at(self, pos: Position) -> int:
        return self.get(pos.x, pos.y)

    @property
    def top_left(self) -> Position:
        return Position(0, 0)

    @property
    def bottom_right(self) -> Position:
        return Position(self.width - 1, self.height - 1)

    def rows(self) -> List[str]:
        """Digit rows as they appear in the puzzle text."""
        return [
            "".join(
                str(c) for c in self.costs[y * self.width : (y + 1) * self.width]
            )
            for y in range(self.height)
        ]
