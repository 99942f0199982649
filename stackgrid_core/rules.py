from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .board import BLUE, RED, Board, Coord, Token

UP, DOWN, LEFT, RIGHT = 'UP', 'DOWN', 'LEFT', 'RIGHT'

DIRECTIONS: Dict[str, Coord] = {
    UP: (-1, 0),
    DOWN: (1, 0),
    LEFT: (0, -1),
    RIGHT: (0, 1),
}

OUT_OF_BOUNDS = 'Out of bounds'
NOT_FOUND = 'Circle not found'
DIAGONAL = 'Diagonal movement not allowed'
NOT_TOP = 'Can only move the TOP circle'
ON_RED = 'Cannot place anything on top of Red'
ON_BLUE = 'Only Red can be placed on Blue'


@dataclass(frozen=True)
class MoveCheck:
    valid: bool
    reason: Optional[str] = None


def parse_direction(text: str) -> str:
    """Normalizes an externally supplied direction ('up', ' Left ') to one of DIRECTIONS."""
    if not isinstance(text, str):
        raise ValueError(f'Invalid direction: {text!r}')
    d = text.strip().upper()
    if d not in DIRECTIONS:
        raise ValueError(f'Invalid direction: {text!r}')
    return d


def step(coord: Coord, direction: str) -> Coord:
    """Returns the coordinate one step from coord. The result may lie off the board."""
    dr, dc = DIRECTIONS[direction]
    return coord[0] + dr, coord[1] + dc


def check_move(
    board: Board,
    tokens: Dict[str, Token],
    positions: Dict[str, Coord],
    token_id: str,
    to_row: int,
    to_col: int,
) -> MoveCheck:
    """
    Checks a single-step move. The first failing rule wins:
    bounds, existence, linearity, top-of-stack, then compatibility with the
    destination's current top token.
    """
    if not board.in_bounds(to_row, to_col):
        return MoveCheck(False, OUT_OF_BOUNDS)

    pos = positions.get(token_id)
    if pos is None or token_id not in tokens:
        return MoveCheck(False, NOT_FOUND)

    # Exactly one axis changes; a same-cell target is not a move either.
    row_changed = pos[0] != to_row
    col_changed = pos[1] != to_col
    if row_changed == col_changed:
        return MoveCheck(False, DIAGONAL)

    if board.top(*pos) != token_id:
        return MoveCheck(False, NOT_TOP)

    below_id = board.top(to_row, to_col)
    if below_id is not None:
        below = tokens[below_id]
        if below.color == RED:
            return MoveCheck(False, ON_RED)
        if below.color == BLUE and tokens[token_id].color != RED:
            return MoveCheck(False, ON_BLUE)
        # Green accepts anything.

    return MoveCheck(True)


def legal_moves(board: Board, tokens: Dict[str, Token], positions: Dict[str, Coord]) -> List[Tuple[str, str]]:
    """All (token_id, direction) pairs that currently pass check_move, sorted by id then direction."""
    out: List[Tuple[str, str]] = []
    for token_id in sorted(positions):
        pos = positions[token_id]
        if board.top(*pos) != token_id:
            continue
        for direction in DIRECTIONS:
            r, c = step(pos, direction)
            if check_move(board, tokens, positions, token_id, r, c).valid:
                out.append((token_id, direction))
    return out


def all_in_last_column(positions: Dict[str, Coord], cols: int) -> bool:
    """Win condition: every token sits in column cols - 1."""
    return all(c == cols - 1 for (_, c) in positions.values())
