from __future__ import annotations

# Facade module that re-exports the Stackgrid core.
# The Flask app and the tests import from here; the logic lives under stackgrid_core/*.

from stackgrid_core.board import Board, Token, Coord, Color, RED, GREEN, BLUE, COLORS
from stackgrid_core.rules import (
    UP,
    DOWN,
    LEFT,
    RIGHT,
    DIRECTIONS,
    MoveCheck,
    parse_direction,
    step,
    check_move,
    legal_moves,
    all_in_last_column,
)
from stackgrid_core.history import CSV_HEADER, MoveRecord, format_timestamp, history_to_csv
from stackgrid_core.layouts import DEFAULT_COLS, DEFAULT_LAYOUT, DEFAULT_ROWS, Placement, parse_layout
from stackgrid_core.engine import BoardEngine, MoveResult
from stackgrid_core.solution import SOLUTION_MOVES, replay_solution


def main() -> None:
    # CLI driver delegated to stackgrid_core.cli
    from stackgrid_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
