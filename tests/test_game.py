import unittest

from game import (
    Grid,
    GameOverError,
    GameState,
    GameStatus,
    apply_toggle,
    create_grid,
    has_won,
    new_game,
    toggle,
)


def lit_coords(grid):
    return {rc for rc in grid.coords() if grid.at(*rc)}


class TestLightsOutBasics(unittest.TestCase):
    def test_given_dark_3x3_when_toggling_centre_then_plus_shape_lit(self):
        grid = create_grid(3, 3, 0.0)
        after = toggle(grid, (1, 1))
        self.assertEqual(lit_coords(after), {(0, 1), (1, 0), (1, 1), (1, 2), (2, 1)})
        self.assertFalse(has_won(after))

    def test_given_dark_3x3_when_toggling_corner_then_three_cells_lit(self):
        grid = create_grid(3, 3, 0.0)
        after = toggle(grid, (0, 0))
        self.assertEqual(lit_coords(after), {(0, 0), (0, 1), (1, 0)})

    def test_given_any_coord_when_toggling_twice_then_original_restored(self):
        grid = create_grid(4, 4, 0.5, seed=3)
        for coord in list(grid.coords()) + [(-1, 0), (4, 4), (2, -1)]:
            self.assertEqual(toggle(toggle(grid, coord), coord), grid)

    def test_given_one_move_from_win_when_toggling_then_won(self):
        # Toggling (1,1) on this board lights everything
        grid = Grid.from_rows([
            [True, False, True],
            [False, False, False],
            [True, False, True],
        ])
        self.assertTrue(has_won(toggle(grid, (1, 1))))


class TestGameSession(unittest.TestCase):
    def test_given_new_game_when_created_then_playing_with_zero_moves(self):
        state = new_game(3, 3, 0.0)
        self.assertEqual(state.moves, 0)
        self.assertEqual(state.status, GameStatus.PLAYING)
        self.assertFalse(state.is_won)

    def test_given_all_lit_start_when_created_then_already_won(self):
        state = new_game(2, 2, 1.0)
        self.assertEqual(state.status, GameStatus.WON)
        with self.assertRaises(GameOverError):
            apply_toggle(state, (0, 0))

    def test_given_state_when_apply_toggle_then_moves_counted_and_previous_unchanged(self):
        state = new_game(3, 3, 0.0)
        nxt = apply_toggle(state, (1, 1))
        self.assertEqual(nxt.moves, 1)
        self.assertEqual(state.moves, 0)
        self.assertEqual(state.grid.lit_count(), 0)
        self.assertEqual(nxt.grid, toggle(state.grid, (1, 1)))

    def test_given_winning_toggle_when_applied_then_further_toggles_rejected(self):
        grid = Grid.from_rows([
            [True, False, True],
            [False, False, False],
            [True, False, True],
        ])
        state = apply_toggle(GameState(grid=grid, moves=4), (1, 1))
        self.assertEqual(state.status, GameStatus.WON)
        self.assertEqual(state.moves, 5)
        with self.assertRaises(GameOverError):
            apply_toggle(state, (0, 0))

    def test_given_toggles_when_applied_then_debug_records_for_toggle_and_win(self):
        grid = Grid.from_rows([[True, False], [False, False]])
        with self.assertLogs('lightsout_core.state', level='DEBUG') as logs:
            apply_toggle(GameState(grid=grid), (1, 1))
        self.assertEqual(len(logs.records), 2)
        self.assertTrue(all(rec.levelname == 'DEBUG' for rec in logs.records))
        self.assertIn('toggle (1, 1) move=1 lit=4', logs.output[0])
        self.assertIn('game won after 1 moves', logs.output[1])

    def test_given_seed_when_new_game_then_reproducible(self):
        self.assertEqual(new_game(4, 4, 0.5, seed=9), new_game(4, 4, 0.5, seed=9))

    def test_given_bad_dimensions_when_new_game_then_value_error(self):
        with self.assertRaises(ValueError):
            new_game(0, 3, 0.5)


if __name__ == '__main__':
    unittest.main(verbosity=2)
