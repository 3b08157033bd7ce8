from __future__ import annotations

# Facade module that re-exports the Lights Out core.
# The Flask app and the tests import from here; the logic itself lives
# in lightsout_core/*.

from lightsout_core.board import Coord, Grid, coord_key, parse_coord_key
from lightsout_core.deal import create_grid
from lightsout_core.moves import has_won, neighbors, toggle, toggle_targets
from lightsout_core.state import (
    GameOverError,
    GameState,
    GameStatus,
    apply_toggle,
    new_game,
)

__all__ = [
    'Coord',
    'Grid',
    'coord_key',
    'parse_coord_key',
    'create_grid',
    'has_won',
    'neighbors',
    'toggle',
    'toggle_targets',
    'GameOverError',
    'GameState',
    'GameStatus',
    'apply_toggle',
    'new_game',
]
