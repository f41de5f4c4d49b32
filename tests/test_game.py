import random

import pytest

from buscaminas.game import Game


def make_game(rows, cols, mines):
    game = Game(rows, cols)
    for row, col in mines:
        game.place_mine(row, col)
    return game


def all_cells(game):
    return {(r, c) for r in range(game.rows) for c in range(game.cols)}


def test_new_game_counters():
    game = Game(3, 4)
    assert (game.rows, game.cols) == (3, 4)
    assert game.mines == 0
    assert game.moves == 0
    assert game.display_mines == 0
    assert game.mode is False
    assert game.mine_exploded is False
    assert not game.is_complete()


def test_place_mine_counts_and_marks():
    mines = [(0, 0), (2, 2)]
    game = make_game(3, 3, mines)
    assert game.mines == len(mines)
    assert game.display_mines == len(mines)
    assert {p for p in all_cells(game) if game.has_mine(*p)} == set(mines)


def test_center_mine_numbers_every_neighbour():
    game = make_game(3, 3, [(1, 1)])
    neighbours = all_cells(game) - {(1, 1)}
    assert all(game.has_number(*p) for p in neighbours)
    assert {game.number(*p) for p in neighbours} == {1}


def test_corner_mine_leaves_far_cells_empty():
    game = make_game(3, 3, [(0, 0)])
    assert game.has_number(0, 1) and game.has_number(1, 0) and game.has_number(1, 1)
    assert game.is_empty(2, 2)
    assert game.is_empty(0, 2)


def test_numbers_add_up_between_mines():
    mines = [(0, 0), (0, 2)]
    game = make_game(3, 3, mines)
    assert game.number(0, 1) == len(mines)


def test_place_mine_outside_raises():
    game = Game(3, 3)
    with pytest.raises(IndexError):
        game.place_mine(3, 0)
    assert game.mines == 0


def test_play_flood_reveals_everything_but_mine():
    game = make_game(3, 3, [(2, 2)])
    revealed = game.play(0, 0)
    assert revealed[0] == (0, 0)
    assert set(revealed) == all_cells(game) - {(2, 2)}
    assert len(revealed) == len(set(revealed))
    assert game.moves == 1
    assert game.is_complete()
    assert not game.mine_exploded


def test_play_number_reveals_only_that_cell():
    game = make_game(3, 3, [(2, 2)])
    assert game.play(1, 1) == ((1, 1),)
    assert game.is_revealed(1, 1)
    assert not game.is_revealed(0, 0)


def test_play_mine_explodes():
    game = make_game(3, 3, [(1, 1)])
    assert game.play(1, 1) == ((1, 1),)
    assert game.mine_exploded


def test_play_revealed_or_flagged_does_nothing():
    game = make_game(3, 3, [(2, 2)])
    game.play(1, 1)
    assert game.play(1, 1) == ()
    game.toggle_flag(0, 0)
    assert game.play(0, 0) == ()
    assert game.moves == 1


def test_flood_stops_at_flags():
    game = make_game(4, 4, [(3, 3)])
    game.toggle_flag(0, 3)
    revealed = set(game.play(0, 0))
    assert (0, 3) not in revealed
    assert not game.is_revealed(0, 3)
    assert not game.is_complete()


def test_play_outside_raises():
    game = Game(3, 3)
    with pytest.raises(IndexError):
        game.play(-1, 0)


def test_toggle_flag_round_trip():
    game = make_game(3, 3, [(0, 0)])
    before = game.display_mines
    assert game.toggle_flag(1, 1) is True
    assert game.is_flagged(1, 1)
    assert game.display_mines == before - 1
    assert game.toggle_flag(1, 1) is False
    assert game.display_mines == before


def test_toggle_flag_outside_raises():
    with pytest.raises(IndexError):
        Game(2, 2).toggle_flag(2, 2)


def test_hide_undoes_a_move():
    game = make_game(3, 3, [(2, 2)])
    revealed = game.play(0, 0)
    assert all(game.hide(*p) for p in revealed)
    assert not any(game.is_revealed(*p) for p in all_cells(game))
    assert not game.is_complete()
    assert set(game.play(0, 0)) == set(revealed)


def test_hide_hidden_cell_returns_false():
    game = Game(3, 3)
    assert game.hide(0, 0) is False


def test_swap_mode():
    game = Game(3, 3)
    assert game.swap_mode() is True
    assert game.mode is True
    assert game.swap_mode() is False


def test_reset_clears_everything():
    game = make_game(3, 3, [(1, 1)])
    game.play(1, 1)
    game.swap_mode()
    game.reset()
    assert (game.rows, game.cols) == (0, 0)
    assert game.mines == 0
    assert game.moves == 0
    assert not game.mine_exploded
    assert not game.mode


@pytest.mark.parametrize("mines", [0, 5, 25])
def test_random_places_requested_mines(mines):
    game = Game.random(5, 5, mines, random.Random(7))
    assert game.mines == mines
    assert sum(game.has_mine(*p) for p in all_cells(game)) == mines


def test_random_is_deterministic_with_seed():
    first = Game.random(6, 6, 8, random.Random(42))
    second = Game.random(6, 6, 8, random.Random(42))
    cells = all_cells(first)
    assert {p for p in cells if first.has_mine(*p)} == {p for p in cells if second.has_mine(*p)}


def test_random_too_many_mines_raises():
    with pytest.raises(ValueError):
        Game.random(3, 3, 10)