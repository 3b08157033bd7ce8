from __future__ import annotations

from typing import List

from .board import Coord, Grid


def neighbors(grid: Grid, coord: Coord) -> List[Coord]:
    """Gets the orthogonal neighbors of a coordinate that lie on the grid."""
    r, c = coord
    candidates = [(r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)]
    return [n for n in candidates if grid.in_bounds(n)]


def toggle_targets(grid: Grid, coord: Coord) -> List[Coord]:
    """The cells a toggle at coord flips: the cell itself, then up, down, left, right.

    Positions off the grid are skipped, so a corner yields 3 targets, an edge 4
    and an interior cell 5.
    """
    targets = [coord] if grid.in_bounds(coord) else []
    targets.extend(neighbors(grid, coord))
    return targets


def toggle(grid: Grid, coord: Coord) -> Grid:
    """Flips the cell at coord and its in-bounds orthogonal neighbors.

    Returns a new grid; the one passed in is left unchanged.
    """
    cells = list(grid.cells)
    for r, c in toggle_targets(grid, coord):
        i = grid.index(r, c)
        cells[i] = not cells[i]
    return Grid(rows=grid.rows, cols=grid.cols, cells=tuple(cells))


def has_won(grid: Grid) -> bool:
    """True when every cell is lit. An empty grid counts as won."""
    return all(grid.cells)
