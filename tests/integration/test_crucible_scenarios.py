from typing import List, Tuple

import pytest

from grid_crucible.constraint import CRUCIBLE, ULTRA_CRUCIBLE, MovementConstraint
from grid_crucible.errors import NoPathError
from grid_crucible.grid import CostGrid
from grid_crucible.position import Position
from grid_crucible.render import render_path
from grid_crucible.solver import ShortestPathSolver, shortest_path, solve
from tests.test_utils import (
    EXAMPLE_TEXT,
    UNFORTUNATE_TEXT,
    assert_legal_path,
    make_example_grid,
    make_grid,
    plain_dijkstra,
)


@pytest.mark.parametrize(
    "text, min_run, max_run, goal, expected",
    [
        (EXAMPLE_TEXT, 1, 3, (12, 12), 102),
        (EXAMPLE_TEXT, 4, 10, (12, 12), 94),
        (UNFORTUNATE_TEXT, 4, 10, (11, 4), 71),
    ],
)
def test_puzzle_examples(
    text: str, min_run: int, max_run: int, goal: Tuple[int, int], expected: int
) -> None:
    assert solve(text, min_run, max_run, (0, 0), goal) == expected


@pytest.mark.parametrize(
    "text, constraint",
    [
        (EXAMPLE_TEXT, CRUCIBLE),
        (EXAMPLE_TEXT, ULTRA_CRUCIBLE),
        (UNFORTUNATE_TEXT, ULTRA_CRUCIBLE),
    ],
)
def test_solved_paths_obey_rules(text: str, constraint: MovementConstraint) -> None:
    grid = CostGrid.from_text(text)
    result = shortest_path(grid, constraint)
    assert result.path[0].position == grid.top_left
    assert result.path[-1].position == grid.bottom_right
    assert_legal_path(grid, constraint, result)


def test_ultra_crucible_cannot_stop_short_of_min_run() -> None:
    # Cheaper routes reach the corner mid-run; stopping there is illegal.
    grid = CostGrid.from_text(UNFORTUNATE_TEXT)
    result = shortest_path(grid, ULTRA_CRUCIBLE)
    assert result.cost == 71
    assert result.path[-1].run_length >= 4


@pytest.mark.parametrize(
    "rows",
    [
        ["2413432311323", "3215453535623", "3255245654254"],
        ["19", "11"],
        ["1", "2", "3"],
        ["5"],
        ["91111", "91991", "91191", "99991", "11111"],
    ],
)
def test_min_run_one_matches_plain_dijkstra(rows: List[str]) -> None:
    grid = CostGrid.from_rows(rows)
    constraint = MovementConstraint(1, max(grid.width, grid.height))
    assert shortest_path(grid, constraint).cost == plain_dijkstra(
        grid, grid.top_left, grid.bottom_right
    )


def test_example_grid_matches_plain_dijkstra() -> None:
    grid = make_example_grid()
    solver = ShortestPathSolver(grid, MovementConstraint(1, 13))
    for goal in [Position(12, 12), Position(5, 7), Position(12, 0)]:
        assert solver.solve(grid.top_left, goal) == plain_dijkstra(
            grid, grid.top_left, goal
        )


@pytest.mark.parametrize("min_run", [1, 4])
def test_raising_max_run_never_costs_more(min_run: int) -> None:
    grid = make_example_grid()
    costs = [
        shortest_path(grid, MovementConstraint(min_run, max_run)).cost
        for max_run in range(max(min_run, 2), 11)
    ]
    assert costs == sorted(costs, reverse=True)


def test_repeated_solves_are_deterministic() -> None:
    grid = make_example_grid()
    results = [shortest_path(grid, ULTRA_CRUCIBLE) for _ in range(3)]
    assert all(r == results[0] for r in results)
    assert len({render_path(grid, r.path) for r in results}) == 1


def test_walled_in_goal_has_no_path() -> None:
    # Vertical runs in a three-row grid never reach four cells, so the
    # crucible can never leave row 0.
    grid = make_grid(
        "11111111",
        "11111111",
        "11111111",
    )
    with pytest.raises(NoPathError):
        ShortestPathSolver(grid, ULTRA_CRUCIBLE).solve(Position(0, 0), Position(1, 1))
