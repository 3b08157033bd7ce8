"""
Lights Out core Python package.

Pure-logic building blocks for the game, kept separate from the Flask app
and the CLI so they can be tested on their own.
Modules:
- board.py: Grid, Coord, coord keys
- deal.py: create_grid
- moves.py: toggle, has_won
- state.py: GameState, apply_toggle
"""
