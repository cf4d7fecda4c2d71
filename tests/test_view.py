import pytest

from shashki.game import Piece, make_start_board
from shashki.view import BoardView


def test_corners_map_to_picture_corners():
    view = BoardView(800, 600)
    assert view.to_screen(0, 8) == pytest.approx((0.0, 0.0))
    assert view.to_screen(8, 0) == pytest.approx((800.0, 600.0))


def test_bottom_row_is_at_bottom_of_picture():
    view = BoardView(400, 400)
    _, y_low = view.to_screen(0, 0)
    _, y_high = view.to_screen(0, 7)
    assert y_low > y_high


@pytest.mark.parametrize("row,col", [(0, 0), (3, 5), (7, 7), (7, 0)])
def test_cell_centre_round_trip(row, col):
    view = BoardView(640, 480)
    px, py = view.to_screen(col + 0.5, row + 0.5)
    assert view.to_cell(px, py) == (row, col)


def test_round_trip_with_padding():
    view = BoardView(500, 500)
    view.set_padding(10, 5, 20, 15)
    for row, col in [(0, 0), (4, 2), (7, 7)]:
        px, py = view.to_screen(col + 0.5, row + 0.5)
        assert view.to_cell(px, py) == (row, col)


def test_padding_area_is_off_board():
    view = BoardView(500, 500)
    view.set_padding(10, 10, 10, 10)
    assert view.to_cell(1, 1) is None
    assert view.to_cell(499, 499) is None


def test_click_outside_picture_is_off_board():
    view = BoardView(100, 100)
    assert view.to_cell(-5, 50) is None
    assert view.to_cell(50, 150) is None


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        BoardView(0, 100)


def test_impossible_padding_rejected():
    view = BoardView(100, 100)
    with pytest.raises(ValueError):
        view.set_padding(-60, -40, 0, 0)


def test_render_empty_board_is_blank():
    assert BoardView(100, 100).render_text([], [], "title") == ""


def test_render_title_and_selection():
    view = BoardView(100, 100)
    text = view.render_text(make_start_board(), [(2, 0), (3, 1)], "Game")
    lines = text.split("\n")
    assert lines[0] == "Game"
    row3 = next(line for line in lines if line.startswith("3 "))
    row4 = next(line for line in lines if line.startswith("4 "))
    assert "[w]" in row3
    assert "[.]" in row4


def test_render_kings():
    board = [[Piece.EMPTY] * 8 for _ in range(8)]
    board[7][1] = Piece.WHITE_KING
    board[0][0] = Piece.BLACK_KING
    lines = BoardView(10, 10).render_text(board).split("\n")
    assert "W" in lines[0]
    assert "B" in lines[7]


def test_render_rejects_wrong_shape():
    with pytest.raises(ValueError):
        BoardView(10, 10).render_text([[0] * 8] * 7)