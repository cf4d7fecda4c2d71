"""Rules and state of a game of draughts on an 8x8 board.

Rows are numbered from 0 (white's home row) to 7 (black's home row).
Pieces stand on the squares where ``row + col`` is even.
"""

from __future__ import annotations

from copy import copy as _shallow_copy
from enum import IntEnum
from itertools import product

Square = tuple[int, int]

SIZE = 8
TURNS_CAP = 150
START_PIECES = 12


class Piece(IntEnum):
    """Contents of a board square; white pieces are positive, black negative."""

    EMPTY = 0
    WHITE = 1
    WHITE_KING = 2
    BLACK = -1
    BLACK_KING = -2


class Outcome(IntEnum):
    """Result of a finished game."""

    WHITE = 1
    BLACK = 0
    DRAW = -1


_KING_CAPTURES = ((1, -1), (-1, -1), (1, 1), (-1, 1))

_CAPTURE_DIRS = {
    Piece.WHITE: ((1, -1), (1, 1)),
    Piece.WHITE_KING: _KING_CAPTURES,
    Piece.BLACK: ((-1, -1), (-1, 1)),
    Piece.BLACK_KING: _KING_CAPTURES,
}

_STEP_DIRS = {
    Piece.WHITE: ((1, -1), (1, 1)),
    Piece.WHITE_KING: ((1, -1), (1, 1), (-1, -1), (-1, 1)),
    Piece.BLACK: ((-1, -1), (-1, 1)),
    Piece.BLACK_KING: ((-1, -1), (-1, 1), (1, -1), (1, 1)),
}


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < SIZE and 0 <= col < SIZE


def make_start_board() -> list[list[Piece]]:
    """Return the starting position: white on rows 0-2, black on rows 5-7."""
    board = [[Piece.EMPTY] * SIZE for _ in range(SIZE)]
    for row in range(SIZE):
        if row < 3:
            piece = Piece.WHITE
        elif row >= 5:
            piece = Piece.BLACK
        else:
            continue
        for col in range(row % 2, SIZE, 2):
            board[row][col] = piece
    return board


class Game:
    """A draughts game with mandatory captures and multi-jump sequences."""

    def __init__(self) -> None:
        self._selected: Square = (0, 0)
        self._targets: list[Square] = []
        self._winner = Outcome.BLACK
        self.restart()

    def restart(self) -> None:
        """Reset the game to the starting position with white to move."""
        self._turn = True
        self._board = make_start_board()
        self._sequence = False
        self._white_count = START_PIECES
        self._black_count = START_PIECES
        self._over = False
        self._counter = 0

    def copy(self) -> Game:
        """Return an independent copy of the whole game state."""
        clone = _shallow_copy(self)
        clone._board = [list(row) for row in self._board]
        clone._targets = list(self._targets)
        return clone

    @property
    def board(self) -> list[list[Piece]]:
        """A copy of the board, indexed as ``board[row][col]``."""
        return [list(row) for row in self._board]

    @property
    def turn(self) -> bool:
        """True while white is to move."""
        return self._turn

    @property
    def is_over(self) -> bool:
        return self._over

    @property
    def winner(self) -> Outcome | None:
        """The outcome once the game is over, otherwise None."""
        return self._winner if self._over else None

    def board_vector(self, inverted: bool) -> list[int]:
        """The 32 playable squares in row order.

        When ``inverted`` the board is seen from black's side: rotated by a
        half turn and with the colours of all pieces swapped.
        """
        values = []
        for row in range(SIZE):
            for col in range(row % 2, SIZE, 2):
                if inverted:
                    values.append(-int(self._board[SIZE - 1 - row][SIZE - 1 - col]))
                else:
                    values.append(int(self._board[row][col]))
        return values

    def _owns(self, piece: int) -> bool:
        return piece > 0 if self._turn else piece < 0

    def _can_capture(self, row: int, col: int, drow: int, dcol: int, piece: int) -> bool:
        land_row, land_col = row + 2 * drow, col + 2 * dcol
        if not _on_board(land_row, land_col):
            return False
        jumped = self._board[row + drow][col + dcol]
        return jumped * piece < 0 and self._board[land_row][land_col] == Piece.EMPTY

    def possible_turns(self, row: int, col: int) -> tuple[list[Square], bool]:
        """Targets of the piece on (row, col) and whether they are captures.

        Captures, when any exist, are returned alone. An empty square or a
        piece of the side not to move gives no targets.
        """
        piece = self._board[row][col]
        if piece == Piece.EMPTY or not self._owns(piece):
            return [], False
        captures = [
            (row + 2 * drow, col + 2 * dcol)
            for drow, dcol in _CAPTURE_DIRS[piece]
            if self._can_capture(row, col, drow, dcol, piece)
        ]
        if captures:
            return captures, True
        steps = [
            (row + drow, col + dcol)
            for drow, dcol in _STEP_DIRS[piece]
            if _on_board(row + drow, col + dcol)
            and self._board[row + drow][col + dcol] == Piece.EMPTY
        ]
        return steps, False

    def moveable(self) -> list[Square]:
        """Squares of the pieces that may move now.

        During a capture sequence only the capturing piece may move. When the
        side to move has no move at all the game ends in a draw.
        """
        if self._sequence:
            return [self._selected]
        captures: list[Square] = []
        steps: list[Square] = []
        for row, col in product(range(SIZE), repeat=2):
            targets, capture = self.possible_turns(row, col)
            if not targets:
                continue
            (captures if capture else steps).append((row, col))
        if captures:
            return captures
        if not steps:
            self._winner = Outcome.DRAW
            self._over = True
        return steps

    def select(self, row: int, col: int) -> list[Square]:
        """Select the piece on (row, col) and return its targets.

        An empty list means the square cannot be selected; the previous
        selection is then kept.
        """
        targets, _ = self.possible_turns(row, col)
        if not targets:
            return []
        self._selected = (row, col)
        self._targets = targets
        return list(targets)

    def _holds_own(self, row: int, col: int) -> bool:
        return self._owns(self._board[row][col])

    def do_turn(self, row: int, col: int) -> bool:
        """Move the selected piece to (row, col) if that is one of its targets."""
        if self._over or self._holds_own(row, col):
            return False
        if (row, col) not in self._targets:
            return False
        self._apply(row, col)
        return True

    def do_turn_unchecked(self, row: int, col: int) -> bool:
        """Move the selected piece to (row, col) without checking its targets."""
        if self._over or self._holds_own(row, col):
            return False
        self._apply(row, col)
        return True

    def _enemy_between(self, start: Square, end: Square) -> Square | None:
        drow = -1 if end[0] - start[0] < 0 else 1
        dcol = -1 if end[1] - start[1] < 0 else 1
        row, col = start
        while row != end[0] and col != end[1]:
            row += drow
            col += dcol
            if self._board[row][col] != Piece.EMPTY:
                return row, col
        return None

    def _apply(self, row: int, col: int) -> None:
        board = self._board
        src_row, src_col = self._selected
        taken = self._enemy_between(self._selected, (row, col))
        if taken is not None:
            board[taken[0]][taken[1]] = Piece.EMPTY
            if self._turn:
                self._black_count -= 1
            else:
                self._white_count -= 1

        if self._turn and row == SIZE - 1:
            board[row][col] = Piece.WHITE_KING
        elif not self._turn and row == 0:
            board[row][col] = Piece.BLACK_KING
        else:
            board[row][col] = board[src_row][src_col]
        board[src_row][src_col] = Piece.EMPTY
        self._selected = (row, col)

        self._sequence = taken is not None and self.possible_turns(row, col)[1]
        if not self._sequence:
            self._turn = not self._turn

        if self._white_count == 0:
            self._over = True
            self._winner = Outcome.BLACK
        if self._black_count == 0:
            self._over = True
            self._winner = Outcome.WHITE
        self._counter += 1
        if self._counter > TURNS_CAP:
            self._over = True
            self._winner = Outcome.DRAW