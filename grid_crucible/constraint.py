"""Movement constraints and named presets.

A ``MovementConstraint`` bounds how many consecutive steps the crucible takes
in one direction: at least ``min_run`` before it may turn or stop, at most
``max_run`` before it must turn. Reversal is always forbidden and is not a
parameter.
"""

from dataclasses import dataclass
from typing import Dict

from grid_crucible.errors import InvalidConstraint


@dataclass(frozen=True)
class MovementConstraint:
    """Straight-run bounds.

    Attributes:
        min_run: Steps required in a direction before turning or stopping (>= 1).
        max_run: Steps allowed in a direction before a turn is forced (>= min_run).
    """

    min_run: int = 1
    max_run: int = 3

    def __post_init__(self) -> None:
        if self.min_run < 1:
            raise InvalidConstraint(f"min_run must be >= 1, got {self.min_run}")
        if self.max_run < self.min_run:
            raise InvalidConstraint(
                f"max_run ({self.max_run}) must be >= min_run ({self.min_run})"
            )


CRUCIBLE = MovementConstraint(min_run=1, max_run=3)
ULTRA_CRUCIBLE = MovementConstraint(min_run=4, max_run=10)

CONSTRAINT_PRESETS: Dict[str, MovementConstraint] = {
    "crucible": CRUCIBLE,
    "ultra": ULTRA_CRUCIBLE,
}
"""Name → constraint mapping used by the command line driver."""


def get_preset(name: str) -> MovementConstraint:
    """Look up a named preset.

    Raises:
        InvalidConstraint: Unknown preset name.
    """
    try:
        return CONSTRAINT_PRESETS[name]
    except KeyError:
        available = ", ".join(CONSTRAINT_PRESETS)
        raise InvalidConstraint(
            f"Unknown constraint preset: {name}. Available: {available}"
        ) from None
