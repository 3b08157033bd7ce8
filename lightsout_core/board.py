from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

Coord = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """Represents the board: its dimensions and the lit/unlit state of every cell."""
    rows: int
    cols: int
    cells: Tuple[bool, ...]  # row-major, length == rows * cols

    def __post_init__(self) -> None:
        if self.rows < 0 or self.cols < 0:
            raise ValueError(f'Invalid grid dimensions: {self.rows}x{self.cols}')
        if len(self.cells) != self.rows * self.cols:
            raise ValueError(
                f'Expected {self.rows * self.cols} cells for a {self.rows}x{self.cols} grid, got {len(self.cells)}'
            )

    def index(self, r: int, c: int) -> int:
        """Calculates the 1D index for a given row and column."""
        return r * self.cols + c

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.rows and 0 <= c < self.cols

    def at(self, r: int, c: int) -> bool:
        """Gets the cell at a given row and column. No wrap-around."""
        if not self.in_bounds((r, c)):
            raise IndexError(f'({r}, {c}) is outside a {self.rows}x{self.cols} grid')
        return self.cells[self.index(r, c)]

    def coords(self) -> Iterable[Coord]:
        """Iterates over all coordinates on the grid."""
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def lit_count(self) -> int:
        return sum(1 for cell in self.cells if cell)

    def rows_as_lists(self) -> List[List[bool]]:
        return [list(self.cells[r * self.cols:(r + 1) * self.cols]) for r in range(self.rows)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[bool]]) -> 'Grid':
        """Builds a grid from an array-of-arrays; all rows must be the same length."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        flat: List[bool] = []
        for row in rows:
            if len(row) != width:
                raise ValueError('Ragged board: all rows must have the same length')
            flat.extend(bool(cell) for cell in row)
        return cls(rows=height, cols=width, cells=tuple(flat))

    def pretty(self, lit: str = 'O', unlit: str = '.') -> str:
        """Generates a human-readable string representation of the grid."""
        lines: List[str] = []
        for r in range(self.rows):
            row = self.cells[r * self.cols:(r + 1) * self.cols]
            lines.append(' '.join(lit if cell else unlit for cell in row))
        return '\n'.join(lines)


def coord_key(coord: Coord) -> str:
    """Formats a coordinate as the 'r-c' key used to identify cells, e.g. (1, 2) -> '1-2'."""
    r, c = coord
    return f'{r}-{c}'


def parse_coord_key(key: str) -> Coord:
    """Parses an 'r-c' key back into a coordinate."""
    parts = key.strip().split('-')
    if len(parts) != 2 or not all(p.isdigit() for p in parts):
        raise ValueError(f'Malformed coordinate key: {key!r}')
    return int(parts[0]), int(parts[1])
