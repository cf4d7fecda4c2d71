"""Command line front end: play against a trained network or train one."""

from __future__ import annotations

import argparse
import re
import sys
import time
from collections.abc import Sequence

from .network import Network
from .session import GameMode, GameSession
from .trainer import ALL_FILE, BEST_FILE, Trainer
from .view import BoardView

PLAY_TITLE = "Игра с Ген. алгоритмом"
TRAIN_TITLE = "Обучение Ген. алгоритма"
GENERATIONS_ERROR = "Введите количество поколений больше 0"
DEFAULT_GENERATIONS = "50"
SCORES_PER_LINE = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_COLUMNS = "abcdefgh"
_MODES = {"pvn": GameMode.PVN, "nvp": GameMode.NVP, "pvp": GameMode.PVP}


def parse_generations(text: str) -> int:
    """Read the number of generations from the start of ``text``.

    Anything after the leading integer is ignored; text without one counts
    as zero. Raises ValueError unless the number is greater than zero.
    """
    match = _LEADING_INT.match(text)
    value = int(match.group(1)) if match else 0
    if value <= 0:
        raise ValueError(GENERATIONS_ERROR)
    return value


def format_info(trainer: Trainer, elapsed: float) -> str:
    """Progress report of a training run: best score, generation, time, scores."""
    seconds = int(elapsed)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    lines = [
        f"Лучший счет: {trainer.best_score}",
        f"Поколение: {trainer.generation_count}",
        f"Время: {hours}:{minutes:02d}:{secs:02d}",
    ]
    scores = list(trainer.scores)
    lines.extend(
        ", ".join(str(score) for score in scores[start:start + SCORES_PER_LINE])
        for start in range(0, len(scores), SCORES_PER_LINE)
    )
    return "\n".join(lines)


def _parse_square(token: str) -> tuple[int, int] | None:
    token = token.lower()
    if len(token) != 2 or token[0] not in _COLUMNS or token[1] not in "12345678":
        return None
    return int(token[1]) - 1, _COLUMNS.index(token[0])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shashki", description="Draughts with a genetic bot.")
    commands = parser.add_subparsers(dest="command", required=True)

    play = commands.add_parser("play", help=PLAY_TITLE)
    play.add_argument("--mode", choices=sorted(_MODES), default="pvn")
    play.add_argument("--network", default=BEST_FILE, help="file of the playing network")

    train = commands.add_parser("train", help=TRAIN_TITLE)
    train.add_argument("--generations", default=DEFAULT_GENERATIONS)
    train.add_argument("--population", type=int, default=30)
    train.add_argument("--games", type=int, default=5)
    train.add_argument("--save", help="write the best network to this file")
    train.add_argument("--save-all", help="write the whole population to this file")
    return parser


def _play(args: argparse.Namespace) -> int:
    mode = _MODES[args.mode]
    bot = None
    if mode is not GameMode.PVP:
        try:
            bot = Network.load_file(args.network)
        except OSError as exc:
            print(f"Не удалось загрузить сеть: {exc}", file=sys.stderr)
            return 1
        except ValueError as exc:
            print(f"Неверный файл сети: {exc}", file=sys.stderr)
            return 1
    title = PLAY_TITLE if bot is not None else "Игра"
    session = GameSession(mode, bot)
    view = BoardView(800, 800)

    def show() -> None:
        print(view.render_text(session.game.board, session.highlighted(), title))
        message = session.end_message()
        if message is not None:
            print(f"Игра окончена: {message}")

    show()
    for line in sys.stdin:
        for token in line.split():
            lowered = token.lower()
            if lowered == "q":
                return 0
            if lowered == "r":
                session.restart()
                continue
            square = _parse_square(token)
            if square is None:
                print(f"Неизвестная клетка: {token}")
            elif not session.click(*square):
                print(f"Ход невозможен: {token}")
        show()
    return 0


def _train(args: argparse.Namespace) -> int:
    try:
        generations = parse_generations(args.generations)
        trainer = Trainer(population_size=args.population, games_per_net=args.games)
    except ValueError as exc:
        print(f"Error! {exc}", file=sys.stderr)
        return 1
    trainer.force_to_train(generations)
    trainer.train()
    print(format_info(trainer, trainer.end_time - trainer.start_time))
    if args.save:
        trainer.save_best(args.save)
    if args.save_all:
        trainer.save_all(args.save_all)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line; returns the exit status."""
    args = _build_parser().parse_args(argv)
    started = time.monotonic()
    if args.command == "play":
        return _play(args)
    status = _train(args)
    del started
    return status


if __name__ == "__main__":
    sys.exit(main())