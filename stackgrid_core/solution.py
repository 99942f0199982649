from __future__ import annotations

import time
from typing import Callable, List, Optional, Tuple

from .engine import BoardEngine, MoveResult
from .rules import DOWN, LEFT, RIGHT, UP

# Fixed 23-move winning line for layouts.DEFAULT_LAYOUT. Not a search.
SOLUTION_MOVES: List[Tuple[str, str]] = [
    ('c3', LEFT),
    ('c6', DOWN),
    ('c9', LEFT),
    ('c9', LEFT),
    ('c8', RIGHT),
    ('c9', DOWN),
    ('c7', RIGHT),
    ('c7', RIGHT),   # stack at (0,2): G, B
    ('c9', UP),
    ('c9', RIGHT),
    ('c9', RIGHT),   # stack at (0,2): G, B, R
    ('c3', RIGHT),
    ('c1', RIGHT),
    ('c1', RIGHT),   # stack at (2,2): G, B, R
    ('c5', LEFT),
    ('c2', UP),
    ('c2', RIGHT),
    ('c5', DOWN),
    ('c5', RIGHT),
    ('c4', RIGHT),
    ('c4', RIGHT),
    ('c5', UP),
    ('c5', RIGHT),   # stack at (1,2): G, B, R
]

Step = Tuple[str, str]


def replay_solution(
    engine: BoardEngine,
    moves: Optional[List[Step]] = None,
    delay_s: float = 0.0,
    on_step: Optional[Callable[[int, Step, MoveResult], None]] = None,
) -> List[Tuple[Step, MoveResult]]:
    """
    Resets the engine and plays the move list through engine.move.
    Stops at the first rejected step; returns the (step, result) pairs played.
    """
    played: List[Tuple[Step, MoveResult]] = []
    # Other callers wait until the whole sequence has been played.
    with engine.lock:
        engine.reset()
        for i, mv in enumerate(moves if moves is not None else SOLUTION_MOVES):
            if delay_s > 0 and i > 0:
                time.sleep(delay_s)
            res = engine.move(*mv)
            played.append((mv, res))
            if on_step is not None:
                on_step(i, mv, res)
            if not res.success:
                break
    return played
