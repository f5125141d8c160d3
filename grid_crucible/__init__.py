"""grid_crucible
=================================

Minimum-cost search across a digit cost grid for a vehicle that cannot
reverse, must hold a heading for at least ``min_run`` cells and must turn
after ``max_run`` cells.

The symbols re-exported here form the public surface, e.g.::

    from grid_crucible import CostGrid, MovementConstraint, shortest_path

    grid = CostGrid.from_text(text)
    result = shortest_path(grid, MovementConstraint(min_run=4, max_run=10))
    print(result.cost)

"""

from .types import Direction, MOVE_DIRECTIONS
from .position import Position
from .errors import CrucibleError, ParseError, InvalidConstraint, NoPathError
from .grid import CostGrid
from .constraint import (
    MovementConstraint,
    CRUCIBLE,
    ULTRA_CRUCIBLE,
    CONSTRAINT_PRESETS,
    get_preset,
)
from .state_space import SearchState, StateSpace
from .solver import SearchResult, ShortestPathSolver, shortest_path, solve
from .render import render_path
from .sweep import sweep_constraints, sweep_goals

__all__ = [
    "Direction",
    "MOVE_DIRECTIONS",
    "Position",
    "CrucibleError",
    "ParseError",
    "InvalidConstraint",
    "NoPathError",
    "CostGrid",
    "MovementConstraint",
    "CRUCIBLE",
    "ULTRA_CRUCIBLE",
    "CONSTRAINT_PRESETS",
    "get_preset",
    "SearchState",
    "StateSpace",
    "SearchResult",
    "ShortestPathSolver",
    "shortest_path",
    "solve",
    "render_path",
    "sweep_constraints",
    "sweep_goals",
]
