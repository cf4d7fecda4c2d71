"""Geometry and text rendering of the board picture."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from .game import SIZE, Piece, Square

_SYMBOLS = {
    Piece.WHITE: "w",
    Piece.WHITE_KING: "W",
    Piece.BLACK: "b",
    Piece.BLACK_KING: "B",
}
_COLUMNS = "abcdefgh"


class BoardView:
    """Maps board coordinates to pixels of a picture and back.

    Board coordinates run from 0 to 8 on both axes, with ``x`` along the
    columns and ``y`` along the rows; row 0 is drawn at the bottom. Padding
    is given in per cent of the board's extent on each side.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("picture size must be positive")
        self.width = width
        self.height = height
        self.padding = (0.0, 0.0, 0.0, 0.0)

    def set_padding(self, left: float, right: float, top: float, bottom: float) -> None:
        """Set the margins around the board, in per cent (normally 0 to 100)."""
        if 100.0 + left + right <= 0 or 100.0 + top + bottom <= 0:
            raise ValueError("padding leaves no room for the board")
        self.padding = (float(left), float(right), float(top), float(bottom))

    def _frame(self) -> tuple[float, float, float, float]:
        left, right, top, bottom = self.padding
        pad_left = SIZE * left / 100.0
        pad_right = SIZE * right / 100.0
        pad_top = SIZE * top / 100.0
        pad_bottom = SIZE * bottom / 100.0
        act_top = SIZE + pad_top
        act_width = SIZE + pad_right + pad_left
        act_height = act_top + pad_bottom
        x_scale = self.width / act_width
        y_scale = -self.height / act_height
        return x_scale, y_scale, pad_left, act_top

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        """Pixel position of the board point (x, y)."""
        x_scale, y_scale, offset, act_top = self._frame()
        return (x + offset) * x_scale, (y - act_top) * y_scale

    def to_cell(self, px: float, py: float) -> Square | None:
        """The (row, col) of the square under a pixel, or None off the board."""
        x_scale, y_scale, offset, act_top = self._frame()
        x = px / x_scale - offset
        y = py / y_scale + act_top
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            return None
        return math.floor(y), math.floor(x)

    def render_text(
        self,
        board: Sequence[Sequence[int]],
        selected: Iterable[Square] = (),
        title: str = "",
    ) -> str:
        """Draw the board as text, top row first, with highlighted squares.

        An empty board gives an empty picture.
        """
        if not board:
            return ""
        if len(board) != SIZE or any(len(row) != SIZE for row in board):
            raise ValueError(f"board must be {SIZE}x{SIZE}")
        marked = set(selected)
        lines = [title] if title else []
        for row in reversed(range(SIZE)):
            cells = "".join(
                self._cell(Piece(board[row][col]), (row, col) in marked, (row + col) % 2 == 0)
                for col in range(SIZE)
            )
            lines.append(f"{row + 1} {cells}")
        lines.append("  " + "".join(f" {name} " for name in _COLUMNS))
        return "\n".join(lines)

    @staticmethod
    def _cell(piece: Piece, marked: bool, dark: bool) -> str:
        symbol = _SYMBOLS.get(piece, "." if dark else " ")
        return f"[{symbol}]" if marked else f" {symbol} "