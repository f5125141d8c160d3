"""Search states and successor generation.

The solver does not walk the raw grid. It walks an implicit graph whose nodes
are ``(position, direction, run_length)`` triples: two visits to the same cell
are different nodes when they arrive with a different heading or a different
straight-run count, because the moves available next depend on both.

Successor rules, applied in order:

1. Reversal is never legal.
2. With a heading and ``run_length < min_run`` the only candidate is straight
   ahead.
3. With ``run_length == max_run`` straight ahead is excluded; only the two
   perpendicular turns remain.
4. Otherwise straight ahead (run + 1) and both turns (run reset to 1).
5. Candidates leaving the grid are dropped.
6. The edge cost is the cost of the cell being entered.

The undirected start state bypasses rules 1-4 and may move in all four
directions.
"""

from dataclasses import dataclass
from typing import List, Tuple

from grid_crucible.constraint import MovementConstraint
from grid_crucible.grid import CostGrid
from grid_crucible.position import Position
from grid_crucible.types import MOVE_DIRECTIONS, Cost, Direction


@dataclass(frozen=True)
class SearchState:
    """Node of the state space; also the solver's settled-set key.

    Attributes:
        position: Cell currently occupied.
        direction: Heading of the last move (``NONE`` before the first move).
        run_length: Consecutive moves made in ``direction``.
    """

    position: Position
    direction: Direction = Direction.NONE
    run_length: int = 0

    @property
    def is_start(self) -> bool:
        return self.direction is Direction.NONE


class StateSpace:
    """Successor generator over a grid under a movement constraint.

    Holds no per-search state, so one instance may serve many searches.
    """

    def __init__(self, grid: CostGrid, constraint: MovementConstraint) -> None:
        self.grid = grid
        self.constraint = constraint

    def start_state(self, position: Position) -> SearchState:
        return SearchState(position=position)

    def candidate_directions(self, state: SearchState) -> List[Direction]:
        """Headings legal from ``state`` before the bounds check."""
        if state.is_start:
            return list(MOVE_DIRECTIONS)
        if state.run_length < self.constraint.min_run:
            return [state.direction]
        turns = list(state.direction.perpendicular)
        if state.run_length >= self.constraint.max_run:
            return turns
        return [state.direction] + turns

    def successors(self, state: SearchState) -> List[Tuple[SearchState, Cost]]:
        """Legal next states paired with the cost of entering their cell."""
        out: List[Tuple[SearchState, Cost]] = []
        for direction in self.candidate_directions(state):
            next_pos = state.position.step(direction)
            if not self.grid.is_in_bounds(next_pos):
                continue
            run_length = state.run_length + 1 if direction is state.direction else 1
            out.append(
                (
                    SearchState(next_pos, direction, run_length),
                    self.grid.cost_at(next_pos),
                )
            )
        return out

    def is_goal(self, state: SearchState, goal: Position) -> bool:
        """Goal reached and the current straight run is long enough to stop.

        The undirected start state counts when it already sits on the goal:
        no move is needed, so there is no run to complete.
        """
        if state.position != goal:
            return False
        return state.is_start or state.run_length >= self.constraint.min_run

    def state_count_bound(self) -> int:
        """Upper bound on distinct reachable states (plus the start state)."""
        return self.grid.width * self.grid.height * 4 * self.constraint.max_run + 1
