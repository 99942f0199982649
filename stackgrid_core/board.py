from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

Color = str  # 'Red', 'Green', 'Blue'
Coord = Tuple[int, int]

RED: Color = 'Red'
GREEN: Color = 'Green'
BLUE: Color = 'Blue'
COLORS: Tuple[Color, ...] = (RED, GREEN, BLUE)


@dataclass(frozen=True)
class Token:
    """A colored circle identified by a stable id."""
    id: str
    color: Color


@dataclass
class Board:
    """Dense rows x cols grid where every cell holds a stack of token ids (index 0 is the bottom)."""
    rows: int
    cols: int
    cells: List[List[List[str]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[[] for _ in range(self.cols)] for _ in range(self.rows)]

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def stack(self, r: int, c: int) -> List[str]:
        """Returns the live stack at (r, c)."""
        return self.cells[r][c]

    def top(self, r: int, c: int) -> Optional[str]:
        s = self.cells[r][c]
        return s[-1] if s else None

    def push(self, r: int, c: int, token_id: str) -> None:
        self.cells[r][c].append(token_id)

    def pop(self, r: int, c: int) -> str:
        return self.cells[r][c].pop()

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the board."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def snapshot(self) -> List[List[List[str]]]:
        """Deep copy of the grid, safe to hand out to callers."""
        return [[list(s) for s in row] for row in self.cells]

    def pretty(self, colors: Optional[Dict[str, Color]] = None) -> str:
        """Human-readable grid. Each cell lists its stack bottom-to-top, e.g. 'c6:G,c3:B'; '.' is empty."""
        colors = colors or {}
        rendered: List[List[str]] = []
        for row in self.cells:
            out: List[str] = []
            for s in row:
                if not s:
                    out.append('.')
                else:
                    out.append(','.join(f"{tid}:{colors[tid][0]}" if tid in colors else tid for tid in s))
            rendered.append(out)
        width = max((len(cell) for row in rendered for cell in row), default=1)
        return "\n".join(" | ".join(cell.ljust(width) for cell in row) for row in rendered)
