from __future__ import annotations

import argparse
from typing import List, Optional

from .board import Coord, parse_coord_key
from .state import apply_toggle, new_game


def parse_move(text: str) -> Coord:
    """Parses 'r,c', 'r c' or 'r-c' into a coordinate."""
    text = text.strip()
    if '-' in text and ',' not in text and ' ' not in text:
        return parse_coord_key(text)
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.split(sep) if t.strip() != '']
    if len(parts) != 2:
        raise ValueError(f'Could not parse move: {text!r}')
    return int(parts[0]), int(parts[1])


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Lights Out: turn every light on')
    parser.add_argument('--rows', type=int, default=3, help='Number of rows')
    parser.add_argument('--cols', type=int, default=3, help='Number of columns')
    parser.add_argument('--chance', type=float, default=0.5, help='Chance each light starts on (0..1)')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the starting board')
    args = parser.parse_args(argv)

    try:
        state = new_game(args.rows, args.cols, args.chance, seed=args.seed)
    except ValueError as e:
        parser.error(str(e))

    print('Initial board:')
    print(state.grid.pretty())

    while not state.is_won:
        text = input('Toggle which cell? (r,c / r c / r-c, q to quit): ').strip()
        if text.lower() in ('q', 'quit'):
            print(f'Gave up after {state.moves} moves.')
            return
        try:
            move = parse_move(text)
        except ValueError:
            print('Could not parse. Try again.')
            continue
        if not state.grid.in_bounds(move):
            print('That cell is not on the board. Try again.')
            continue
        state = apply_toggle(state, move)
        print(state.grid.pretty())

    print(f'You won! ({state.moves} moves)')


if __name__ == '__main__':
    main()
