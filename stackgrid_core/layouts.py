from __future__ import annotations

from typing import List, Tuple

from .board import BLUE, GREEN, RED, Color

# (id, color, row, col); earlier entries land lower when they share a cell.
Placement = Tuple[str, Color, int, int]

DEFAULT_ROWS = 3
DEFAULT_COLS = 3

# One circle per cell. Row 0 is the top of the board.
DEFAULT_LAYOUT: List[Placement] = [
    ('c1', RED, 2, 0),
    ('c2', GREEN, 2, 1),
    ('c3', BLUE, 2, 2),
    ('c4', BLUE, 1, 0),
    ('c5', RED, 1, 1),
    ('c6', GREEN, 1, 2),
    ('c7', BLUE, 0, 0),
    ('c8', GREEN, 0, 1),
    ('c9', RED, 0, 2),
]


def parse_layout(items) -> List[Placement]:
    """Builds placements from JSON-ish rows: [{'id','color','row','col'}] or [id, color, row, col]."""
    out: List[Placement] = []
    for it in items:
        if isinstance(it, dict):
            out.append((str(it['id']), str(it['color']), int(it['row']), int(it['col'])))
        else:
            tid, color, r, c = it
            out.append((str(tid), str(color), int(r), int(c)))
    return out
