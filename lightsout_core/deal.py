from __future__ import annotations

import random
from typing import Optional

from .board import Grid


def create_grid(
    rows: int = 3,
    cols: int = 3,
    lit_probability: float = 0.5,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Grid:
    """Creates a rows x cols grid where each cell is independently lit with probability lit_probability.

    Pass ``rng`` to supply the random source directly, or ``seed`` for a reproducible grid.
    """
    if rows <= 0 or cols <= 0:
        raise ValueError(f'Grid dimensions must be positive, got {rows}x{cols}')
    if not 0.0 <= lit_probability <= 1.0:
        raise ValueError(f'lit_probability must be within [0, 1], got {lit_probability}')
    if rng is None:
        rng = random.Random(seed)
    cells = tuple(rng.random() < lit_probability for _ in range(rows * cols))
    return Grid(rows=rows, cols=cols, cells=cells)
