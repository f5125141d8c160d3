"""Command line driver: load a cost grid, run the solver, print the result."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from grid_crucible.constraint import (
    CONSTRAINT_PRESETS,
    MovementConstraint,
    get_preset,
)
from grid_crucible.errors import InvalidConstraint, NoPathError, ParseError
from grid_crucible.grid import CostGrid
from grid_crucible.position import Position
from grid_crucible.render import render_path
from grid_crucible.solver import shortest_path

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2


def parse_position(value: str) -> Position:
    """Parse ``"X,Y"`` into a ``Position``."""
    try:
        x, y = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"Expected X,Y integer coordinates, got {value!r}"
        ) from None
    return Position(x, y)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid_crucible",
        description="Minimum heat loss across a digit grid under straight-run limits",
    )
    parser.add_argument("input", type=Path, help="Path to the grid text file")
    parser.add_argument(
        "--preset",
        choices=sorted(CONSTRAINT_PRESETS),
        default=None,
        help="Named run-length bounds (default: crucible)",
    )
    parser.add_argument("--min-run", type=int, default=None, help="Minimum straight run")
    parser.add_argument("--max-run", type=int, default=None, help="Maximum straight run")
    parser.add_argument(
        "--start", type=parse_position, default=None, help="Start cell X,Y (default 0,0)"
    )
    parser.add_argument(
        "--goal",
        type=parse_position,
        default=None,
        help="Goal cell X,Y (default: bottom-right corner)",
    )
    parser.add_argument(
        "--render", action="store_true", help="Also print the path as arrows"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser


def resolve_constraint(args: argparse.Namespace) -> MovementConstraint:
    """Explicit bounds override the preset's; the default preset is ``crucible``."""
    base = get_preset(args.preset or "crucible")
    return MovementConstraint(
        min_run=args.min_run if args.min_run is not None else base.min_run,
        max_run=args.max_run if args.max_run is not None else base.max_run,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        constraint = resolve_constraint(args)
        grid = CostGrid.from_text(args.input.read_text(encoding="utf-8"))
        logger.info(f"Loaded {grid.width}x{grid.height} grid from {args.input}")
        result = shortest_path(grid, constraint, args.start, args.goal)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.input}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except (ParseError, InvalidConstraint, IndexError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except NoPathError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_NO_PATH

    logger.info(f"Settled {result.settled} states")
    print(result.cost)
    if args.render:
        print(render_path(grid, result.path))
    return EXIT_OK
