from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from .board import COLORS, Board, Coord, Token
from .history import MoveRecord, history_to_csv, utc_now
from .layouts import DEFAULT_COLS, DEFAULT_LAYOUT, DEFAULT_ROWS, Placement
from .rules import NOT_FOUND, MoveCheck, all_in_last_column, check_move, legal_moves, parse_direction, step

log = logging.getLogger("stackgrid.engine")


@dataclass(frozen=True)
class MoveResult:
    success: bool
    reason: Optional[str] = None
    won: Optional[bool] = None


class BoardEngine:
    """
    Owns the grid of stacks, the token registry, positions and the move history.

    All rejections come back as MoveResult(success=False, reason=...) and are
    recorded in history. initialize/move run under the re-entrant `lock`, which
    callers may also hold to run several moves as one unit.
    """

    def __init__(self, rows: int = DEFAULT_ROWS, cols: int = DEFAULT_COLS,
                 layout: Optional[Iterable[Placement]] = None):
        if rows <= 0 or cols <= 0:
            raise ValueError('Grid dimensions must be positive')
        self.rows = rows
        self.cols = cols
        self.board = Board(rows, cols)
        self.tokens: Dict[str, Token] = {}
        self.positions: Dict[str, Coord] = {}
        self.history: List[MoveRecord] = []
        self.lock = threading.RLock()
        if layout is None:
            self.reset()
        else:
            self.initialize(layout)

    # ---------------- Lifecycle -----------------
    def initialize(self, layout: Iterable[Placement]) -> None:
        """Replaces all state with the given placements, pushed in order. Stacking rules are not checked."""
        board = Board(self.rows, self.cols)
        tokens: Dict[str, Token] = {}
        positions: Dict[str, Coord] = {}
        for token_id, color, r, c in layout:
            if color not in COLORS:
                raise ValueError(f'Unknown color {color!r} for {token_id}')
            if token_id in tokens:
                raise ValueError(f'Duplicate circle id {token_id}')
            if not board.in_bounds(r, c):
                raise ValueError(f'Placement of {token_id} at ({r}, {c}) is outside the {self.rows}x{self.cols} grid')
            tokens[token_id] = Token(token_id, color)
            positions[token_id] = (r, c)
            board.push(r, c, token_id)
        with self.lock:
            self.board = board
            self.tokens = tokens
            self.positions = positions
            self.history = []
        log.info("board initialized with %d circles", len(tokens))

    def reset(self) -> None:
        self.initialize(DEFAULT_LAYOUT)

    # ---------------- Queries -----------------
    def describe_state(self) -> Dict[str, Any]:
        with self.lock:
            return {
                'grid': self.board.snapshot(),
                'colors': {tid: t.color for tid, t in self.tokens.items()},
                'rows': self.rows,
                'cols': self.cols,
                'won': all_in_last_column(self.positions, self.cols),
            }

    def validate_move(self, token_id: str, to_row: int, to_col: int) -> MoveCheck:
        with self.lock:
            return check_move(self.board, self.tokens, self.positions, token_id, to_row, to_col)

    def legal_moves(self) -> List[Tuple[str, str]]:
        with self.lock:
            return legal_moves(self.board, self.tokens, self.positions)

    def is_won(self) -> bool:
        with self.lock:
            return all_in_last_column(self.positions, self.cols)

    def position_of(self, token_id: str) -> Optional[Coord]:
        return self.positions.get(token_id)

    # ---------------- Moves -----------------
    def move(self, token_id: str, direction: str) -> MoveResult:
        """Moves the top circle one step. Raises ValueError for an unrecognized direction."""
        direction = parse_direction(direction)
        with self.lock:
            src = self.positions.get(token_id)
            if src is None:
                self.history.append(MoveRecord(token_id, None, None, utc_now(), False, NOT_FOUND))
                log.info("rejected %s %s: %s", token_id, direction, NOT_FOUND)
                return MoveResult(False, NOT_FOUND)

            dst = step(src, direction)
            check = check_move(self.board, self.tokens, self.positions, token_id, dst[0], dst[1])
            self.history.append(MoveRecord(token_id, src, dst, utc_now(), check.valid, check.reason))
            if not check.valid:
                log.info("rejected %s %s: %s", token_id, direction, check.reason)
                return MoveResult(False, check.reason)

            self.board.pop(*src)
            self.board.push(dst[0], dst[1], token_id)
            self.positions[token_id] = dst
            won = all_in_last_column(self.positions, self.cols)
            log.debug("moved %s %s -> %s", token_id, src, dst)
            if won:
                log.info("all circles in the last column after %d attempts", len(self.history))
            return MoveResult(True, None, won)

    # ---------------- Export -----------------
    def history_csv(self) -> str:
        with self.lock:
            return history_to_csv(list(self.history))
