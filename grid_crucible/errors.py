"""Exception hierarchy.

Construction problems (``ParseError``, ``InvalidConstraint``) subclass
``ValueError`` so generic callers can treat them as bad input. ``NoPathError``
is an expected search outcome and is not a ``ValueError``.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from grid_crucible.position import Position


class CrucibleError(Exception):
    """Base class for all grid_crucible errors."""


class ParseError(CrucibleError, ValueError):
    """Grid text contains a non-digit character, ragged rows, or no rows.

    Attributes:
        row: Offending row index, if known.
        column: Offending column index, if known.
    """

    def __init__(
        self, message: str, row: Optional[int] = None, column: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.row = row
        self.column = column


class InvalidConstraint(CrucibleError, ValueError):
    """Run-length bounds violate ``1 <= min_run <= max_run``, or unknown preset."""


class NoPathError(CrucibleError):
    """The frontier emptied before any goal state was settled."""

    def __init__(self, start: "Position", goal: "Position") -> None:
        super().__init__(f"No legal path from {start} to {goal}")
        self.start = start
        self.goal = goal

    def __reduce__(self):
        return (type(self), (self.start, self.goal))
