from __future__ import annotations

import enum
import logging
import random
from dataclasses import dataclass
from typing import Optional

from .board import Coord, Grid
from .deal import create_grid
from .moves import has_won, toggle

logger = logging.getLogger(__name__)


class GameStatus(str, enum.Enum):
    PLAYING = 'playing'
    WON = 'won'


class GameOverError(RuntimeError):
    """Raised when a toggle is attempted on a game that has already been won."""


@dataclass(frozen=True)
class GameState:
    """Represents one play session: the current grid and how many toggles got it there."""
    grid: Grid
    moves: int = 0

    @property
    def status(self) -> GameStatus:
        return GameStatus.WON if has_won(self.grid) else GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        return self.status is GameStatus.WON


def new_game(
    rows: int = 3,
    cols: int = 3,
    lit_probability: float = 0.5,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> GameState:
    grid = create_grid(rows, cols, lit_probability, seed=seed, rng=rng)
    logger.debug('new game %dx%d chance=%s lit=%d', rows, cols, lit_probability, grid.lit_count())
    return GameState(grid=grid)


def apply_toggle(state: GameState, coord: Coord) -> GameState:
    """Applies a toggle to the session and returns the new state."""
    if state.is_won:
        raise GameOverError('Game already won; no further toggles accepted')
    next_state = GameState(grid=toggle(state.grid, coord), moves=state.moves + 1)
    logger.debug('toggle %s move=%d lit=%d', coord, next_state.moves, next_state.grid.lit_count())
    if next_state.is_won:
        logger.debug('game won after %d moves', next_state.moves)
    return next_state
