"""Dijkstra search over the constrained state space.

Frontier entries are ``(cost, seq, state)`` tuples: ``seq`` is a monotonic
counter that keeps heap ordering stable (FIFO among equal costs) without ever
comparing ``SearchState`` objects.

Stale entries are skipped on pop by comparing against the best recorded cost.
A state is settled when popped, and the goal test runs at settle time, not at
push time: with non-negative edge costs nothing popped later can be cheaper.
"""

import heapq
import logging
from dataclasses import dataclass
from math import inf
from typing import Dict, List, Optional, Set, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from grid_crucible.constraint import MovementConstraint
from grid_crucible.errors import NoPathError
from grid_crucible.grid import CostGrid
from grid_crucible.position import Position
from grid_crucible.state_space import SearchState, StateSpace
from grid_crucible.types import Coord, Cost

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a successful search.

    Attributes:
        cost: Minimum accumulated cost (start cell not charged).
        path: States from the start state to the goal state, inclusive.
        settled: Number of states finalized before the goal was settled.
    """

    cost: Cost
    path: PVector[SearchState]
    settled: int

    @property
    def positions(self) -> List[Position]:
        return [state.position for state in self.path]


class ShortestPathSolver:
    """Minimum-cost search for one grid and constraint.

    The grid and constraint are read-only; every ``search`` call builds its own
    frontier and settled map, so a solver may be reused across calls and
    threads.
    """

    def __init__(self, grid: CostGrid, constraint: MovementConstraint) -> None:
        self.grid = grid
        self.constraint = constraint
        self.space = StateSpace(grid, constraint)

    def search(self, start: Position, goal: Position) -> SearchResult:
        """Run Dijkstra from ``start`` until a goal state is settled.

        Raises:
            IndexError: ``start`` or ``goal`` outside the grid.
            NoPathError: No state satisfying the goal predicate is reachable.
        """
        for label, pos in (("start", start), ("goal", goal)):
            if not self.grid.is_in_bounds(pos):
                raise IndexError(
                    f"Out of bounds {label}: {pos} for grid "
                    f"{self.grid.width}x{self.grid.height}"
                )

        source = self.space.start_state(start)
        best: Dict[SearchState, Cost] = {source: 0}
        parent: Dict[SearchState, SearchState] = {}
        settled: Set[SearchState] = set()
        frontier: List[Tuple[Cost, int, SearchState]] = [(0, 0, source)]
        seq = 0

        while frontier:
            cost, _, state = heapq.heappop(frontier)
            if state in settled or cost > best[state]:
                continue
            settled.add(state)

            if self.space.is_goal(state, goal):
                logger.debug(
                    f"Settled goal {goal} at cost {cost} "
                    f"({len(settled)} states settled, constraint={self.constraint})"
                )
                return SearchResult(
                    cost=cost,
                    path=self._reconstruct_path(parent, state),
                    settled=len(settled),
                )

            for next_state, edge_cost in self.space.successors(state):
                if next_state in settled:
                    continue
                alt = cost + edge_cost
                if alt < best.get(next_state, inf):
                    best[next_state] = alt
                    parent[next_state] = state
                    seq += 1
                    heapq.heappush(frontier, (alt, seq, next_state))

        logger.debug(
            f"Frontier exhausted after {len(settled)} states; "
            f"{goal} unreachable from {start} under {self.constraint}"
        )
        raise NoPathError(start, goal)

    def solve(self, start: Position, goal: Position) -> Cost:
        """Minimum accumulated cost from ``start`` to ``goal``."""
        return self.search(start, goal).cost

    def _reconstruct_path(
        self, parent: Dict[SearchState, SearchState], end: SearchState
    ) -> PVector[SearchState]:
        path: List[SearchState] = [end]
        cur = end
        while cur in parent:
            cur = parent[cur]
            path.append(cur)
        path.reverse()
        return pvector(path)


def shortest_path(
    grid: CostGrid,
    constraint: MovementConstraint,
    start: Optional[Position] = None,
    goal: Optional[Position] = None,
) -> SearchResult:
    """Search between two cells, defaulting to the top-left and bottom-right corners."""
    solver = ShortestPathSolver(grid, constraint)
    return solver.search(
        start if start is not None else grid.top_left,
        goal if goal is not None else grid.bottom_right,
    )


def solve(
    grid_text: str, min_run: int, max_run: int, start: Coord, goal: Coord
) -> Cost:
    """Parse ``grid_text`` and return the minimum cost from ``start`` to ``goal``.

    Raises:
        ParseError: Malformed grid text.
        InvalidConstraint: Run bounds violate ``1 <= min_run <= max_run``.
        NoPathError: Goal unreachable under the constraint.
    """
    grid = CostGrid.from_text(grid_text)
    constraint = MovementConstraint(min_run=min_run, max_run=max_run)
    return ShortestPathSolver(grid, constraint).solve(
        Position(*start), Position(*goal)
    )
