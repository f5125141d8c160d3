"""Batch evaluation of independent searches.

Each job gets its own ``ShortestPathSolver.search`` call and therefore its own
frontier and settled map; only the immutable grid and constraints are shared
between workers. Unreachable goals are reported per key as the
``NoPathError`` instance rather than aborting the batch.

The search is pure Python, so the default thread pool overlaps jobs but does
not speed them up. Pass ``processes=True`` to spread CPU-bound sweeps over a
process pool; grids, constraints and positions are frozen and picklable.
"""

import logging
from concurrent.futures import Executor, ProcessPoolExecutor, ThreadPoolExecutor
from typing import Dict, Hashable, Iterable, Optional, Tuple, TypeVar, Union

from grid_crucible.constraint import MovementConstraint
from grid_crucible.errors import NoPathError
from grid_crucible.grid import CostGrid
from grid_crucible.position import Position
from grid_crucible.solver import ShortestPathSolver
from grid_crucible.types import Cost

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)

SweepOutcome = Union[Cost, NoPathError]
SweepJob = Tuple[CostGrid, MovementConstraint, Position, Position]


def _solve_job(job: SweepJob) -> SweepOutcome:
    grid, constraint, start, goal = job
    try:
        return ShortestPathSolver(grid, constraint).solve(start, goal)
    except NoPathError as e:
        return e


def _run_jobs(
    jobs: Dict[K, SweepJob], max_workers: Optional[int], processes: bool
) -> Dict[K, SweepOutcome]:
    pool_type = "process" if processes else "thread"
    logger.info(
        f"Running {len(jobs)} searches in a {pool_type} pool "
        f"(max_workers={max_workers})"
    )
    pool: Executor = (
        ProcessPoolExecutor(max_workers=max_workers)
        if processes
        else ThreadPoolExecutor(max_workers=max_workers)
    )
    with pool:
        outcomes = dict(zip(jobs, pool.map(_solve_job, jobs.values())))
    for key, outcome in outcomes.items():
        if isinstance(outcome, NoPathError):
            logger.warning(f"Sweep job {key}: {outcome}")
    return outcomes


def sweep_constraints(
    grid: CostGrid,
    constraints: Iterable[MovementConstraint],
    start: Optional[Position] = None,
    goal: Optional[Position] = None,
    max_workers: Optional[int] = None,
    processes: bool = False,
) -> Dict[MovementConstraint, SweepOutcome]:
    """Solve one start/goal pair under several constraints.

    ``start``/``goal`` default to the top-left and bottom-right corners.
    """
    start = start if start is not None else grid.top_left
    goal = goal if goal is not None else grid.bottom_right
    jobs = {constraint: (grid, constraint, start, goal) for constraint in constraints}
    return _run_jobs(jobs, max_workers, processes)


def sweep_goals(
    grid: CostGrid,
    constraint: MovementConstraint,
    pairs: Iterable[Tuple[Position, Position]],
    max_workers: Optional[int] = None,
    processes: bool = False,
) -> Dict[Tuple[Position, Position], SweepOutcome]:
    """Solve many ``(start, goal)`` pairs under one constraint."""
    jobs = {(start, goal): (grid, constraint, start, goal) for start, goal in pairs}
    return _run_jobs(jobs, max_workers, processes)
