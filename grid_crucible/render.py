"""Text rendering of solved paths.

Produces the arrow diagrams used in the puzzle statement: every cell the path
enters shows the arrow of the move that entered it, all other cells keep their
cost digit.
"""

from typing import Dict, Iterable, List

from grid_crucible.grid import CostGrid
from grid_crucible.state_space import SearchState
from grid_crucible.types import Direction

ARROWS: Dict[Direction, str] = {
    Direction.UP: "^",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
    Direction.RIGHT: ">",
}


def render_path(grid: CostGrid, path: Iterable[SearchState]) -> str:
    """Overlay ``path`` on the grid's digit rows.

    A cell entered more than once shows the last move into it.
    """
    canvas: List[List[str]] = [list(row) for row in grid.rows()]
    for state in path:
        if state.direction is Direction.NONE:
            continue
        canvas[state.position.y][state.position.x] = ARROWS[state.direction]
    return "\n".join("".join(row) for row in canvas)
