"""An interactive game between people and a trained network."""

from __future__ import annotations

from enum import Enum

from .game import Game, Outcome, Square
from .network import Move

GAME_OVER_TITLE = "Игра окончена"

_MESSAGES = {
    Outcome.WHITE: "Победили коричневые",
    Outcome.BLACK: "Победили белые",
    Outcome.DRAW: "Ничья",
}


class GameMode(Enum):
    """Who plays which side."""

    PVP = "pvp"
    PVN = "pvn"
    NVP = "nvp"
    EDUC = "educ"


def outcome_message(winner: Outcome) -> str:
    """The announcement shown for a finished game.

    White pieces are drawn brown and black pieces white.
    """
    return _MESSAGES[Outcome(winner)]


class GameSession:
    """Turns clicks on squares into moves and lets the bot answer them."""

    def __init__(self, mode: GameMode = GameMode.PVP, bot=None) -> None:
        if mode in (GameMode.PVN, GameMode.NVP) and bot is None:
            raise ValueError(f"mode {mode.value} needs a bot")
        self.mode = mode
        self.bot = bot
        self.game = Game()
        self._selected = False
        self._highlighted: list[Square] = []
        self.restart()

    def restart(self) -> None:
        """Start a new game; the bot moves first when it plays white."""
        self.game.restart()
        self._selected = False
        self._highlighted = self.game.moveable()
        if self.mode is GameMode.NVP:
            self.bot_turn()

    def click(self, row: int, col: int) -> bool:
        """Handle a click on (row, col); False when the click did nothing.

        The first click selects a piece, the second moves it.
        """
        if not (0 <= row < 8 and 0 <= col < 8):
            return False
        if not self._selected:
            targets = self.game.select(row, col)
            if not targets:
                return False
            self._highlighted = targets
            self._selected = True
            return True

        turn = self.game.turn
        if not self.game.do_turn(row, col):
            return False
        self._highlighted = []
        self._selected = False
        self._refresh()
        if (
            self.mode in (GameMode.PVN, GameMode.NVP)
            and turn != self.game.turn
            and not self.game.is_over
        ):
            self.bot_turn()
        return True

    def bot_turn(self) -> list[Move]:
        """Let the bot move until the turn passes; returns the moves it made."""
        made: list[Move] = []
        while not self.game.is_over:
            move = self.bot.predict(self.game)
            if move is None or self.game.is_over:
                break
            turn = self.game.turn
            self.game.select(*move.source)
            if not self.game.do_turn(*move.target):
                raise RuntimeError(
                    f"bot chose an illegal move from {move.source} to {move.target}"
                )
            made.append(move)
            if turn != self.game.turn:
                break
        self._refresh()
        return made

    def _refresh(self) -> None:
        if self.game.is_over:
            self._highlighted = []
        else:
            self._highlighted = self.game.moveable()

    def highlighted(self) -> list[Square]:
        """Squares currently marked: movable pieces or the selected piece's targets."""
        return list(self._highlighted)

    def end_message(self) -> str | None:
        """The announcement for a finished game, or None while it goes on."""
        winner = self.game.winner
        return None if winner is None else outcome_message(winner)