import random

import pytest

from shashki.game import (
    START_PIECES,
    TURNS_CAP,
    Game,
    Outcome,
    Piece,
    make_start_board,
)


def _squares(board, pieces):
    return [
        (r, c)
        for r, row in enumerate(board)
        for c, p in enumerate(row)
        if p in pieces
    ]


def _move(game, src, dst):
    assert dst in game.select(*src)
    assert game.do_turn(*dst)


def test_start_board_layout():
    board = make_start_board()
    whites = _squares(board, {Piece.WHITE})
    blacks = _squares(board, {Piece.BLACK})
    assert len(whites) == START_PIECES
    assert len(blacks) == START_PIECES
    assert all((r + c) % 2 == 0 for r, c in whites + blacks)
    assert {r for r, _ in whites} == {0, 1, 2}
    assert {r for r, _ in blacks} == {5, 6, 7}


def test_new_game_state():
    game = Game()
    assert game.turn is True
    assert game.is_over is False
    assert game.winner is None
    assert game.board == make_start_board()


def test_board_is_a_copy():
    game = Game()
    board = game.board
    board[0][0] = Piece.EMPTY
    assert game.board[0][0] == Piece.WHITE


def test_board_vector_start_is_symmetric():
    game = Game()
    vector = game.board_vector(False)
    assert len(vector) == 32
    assert vector[:12] == [Piece.WHITE] * 12
    assert vector[12:20] == [Piece.EMPTY] * 8
    assert vector[20:] == [Piece.BLACK] * 12
    assert game.board_vector(True) == vector


def test_board_vector_inverted_is_rotated_and_negated():
    game = Game()
    _move(game, (2, 0), (3, 1))
    normal = game.board_vector(False)
    inverted = game.board_vector(True)
    assert inverted == [-x for x in reversed(normal)]
    assert game.board_vector(False) == normal
    assert game.board == game.copy().board


def test_opening_moves():
    game = Game()
    movers = game.moveable()
    assert len(movers) == 4
    assert all(r == 2 for r, _ in movers)
    assert game.possible_turns(2, 0) == ([(3, 1)], False)


def test_possible_turns_empty_square_and_opponent():
    game = Game()
    assert game.possible_turns(4, 4) == ([], False)
    assert game.possible_turns(5, 1) == ([], False)


def test_select_opponent_piece_fails():
    game = Game()
    assert game.select(5, 1) == []
    assert game.do_turn(4, 0) is False
    assert game.turn is True


def test_do_turn_requires_a_selected_target():
    game = Game()
    targets = game.select(2, 2)
    assert sorted(targets) == [(3, 1), (3, 3)]
    assert game.do_turn(4, 4) is False
    assert game.do_turn(3, 3) is True
    board = game.board
    assert board[3][3] == Piece.WHITE
    assert board[2][2] == Piece.EMPTY
    assert game.turn is False


def test_move_onto_own_piece_rejected():
    game = Game()
    game.select(2, 0)
    assert game.do_turn_unchecked(1, 1) is False
    assert game.board == make_start_board()


def test_do_turn_unchecked_skips_target_check():
    game = Game()
    game.select(2, 0)
    assert game.do_turn(4, 2) is False
    assert game.do_turn_unchecked(4, 2) is True
    board = game.board
    assert board[4][2] == Piece.WHITE
    assert board[2][0] == Piece.EMPTY
    assert game.turn is False


def test_capture_is_mandatory_and_removes_piece():
    game = Game()
    _move(game, (2, 2), (3, 3))
    _move(game, (5, 5), (4, 4))
    assert game.moveable() == [(3, 3)]
    targets, capture = game.possible_turns(3, 3)
    assert capture is True
    assert game.select(3, 3) == targets == [(5, 5)]
    assert game.do_turn(5, 5) is True
    board = game.board
    assert board[4][4] == Piece.EMPTY
    assert board[5][5] == Piece.WHITE
    assert len(_squares(board, {Piece.BLACK, Piece.BLACK_KING})) == START_PIECES - 1
    assert game.turn is False
    movers = game.moveable()
    assert movers == [(6, 4), (6, 6)]
    assert all(game.possible_turns(*m)[1] for m in movers)


def test_copy_is_independent():
    game = Game()
    clone = game.copy()
    _move(clone, (2, 0), (3, 1))
    assert game.board == make_start_board()
    assert game.turn is True
    assert clone.turn is False


def test_restart_restores_start():
    game = Game()
    _move(game, (2, 0), (3, 1))
    game.restart()
    assert game.board == make_start_board()
    assert game.turn is True
    assert game.is_over is False


@pytest.mark.parametrize("seed", range(5))
def test_random_games_keep_invariants(seed):
    rng = random.Random(seed)
    game = Game()
    moves = 0
    while True:
        movers = game.moveable()
        if game.is_over:
            break
        src = rng.choice(movers)
        targets = game.select(*src)
        assert targets
        dst = rng.choice(targets)
        turn_before = game.turn
        assert game.do_turn(*dst)
        moves += 1
        board = game.board
        assert Piece.WHITE not in board[7]
        assert Piece.BLACK not in board[0]
        if not game.is_over and game.turn == turn_before:
            assert game.moveable() == [dst]
            assert game.possible_turns(*dst)[1] is True

    assert moves <= TURNS_CAP + 1
    assert game.winner in set(Outcome)
    board = game.board
    if game.winner == Outcome.WHITE:
        assert _squares(board, {Piece.BLACK, Piece.BLACK_KING}) == []
    if game.winner == Outcome.BLACK:
        assert _squares(board, {Piece.WHITE, Piece.WHITE_KING}) == []
    assert game.do_turn(0, 0) is False
    assert game.do_turn_unchecked(4, 4) is False