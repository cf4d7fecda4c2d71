"""Feed-forward position evaluator and the look-ahead move search built on it."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from operator import attrgetter, mul
from typing import TextIO

from .game import Game, Square

INIT_RANGE = 0.2
MUTATION_RANGE = 0.1
SEARCH_DEPTH = 4
DEFAULT_FILE = "best.nw"


def sigmoid(x: float) -> float:
    """Logistic activation ``1 / (1 + exp(-2x))``, safe for large arguments."""
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-2.0 * x))
    e = math.exp(2.0 * x)
    return e / (1.0 + e)


@dataclass
class Neuron:
    """A single unit: input weights and a threshold subtracted from their sum."""

    weights: list[float] = field(default_factory=list)
    bias: float = 0.0

    @classmethod
    def random(cls, size: int, rng: random.Random) -> Neuron:
        """A neuron with ``size`` weights and a bias drawn from [-0.2, 0.2]."""
        weights = [rng.uniform(-INIT_RANGE, INIT_RANGE) for _ in range(size)]
        return cls(weights, rng.uniform(-INIT_RANGE, INIT_RANGE))

    def fire(self, inputs: Sequence[float]) -> float:
        return sigmoid(sum(map(mul, self.weights, inputs)) - self.bias)


@dataclass(frozen=True)
class Move:
    """A candidate move with the estimate the search gave it."""

    estimate: float
    source: Square
    target: Square


def _pick(moves: list[Move], maximize: bool) -> Move:
    key = attrgetter("estimate")
    return max(moves, key=key) if maximize else min(moves, key=key)


def _fmt(value: float) -> str:
    return f"{value:.6g}"


def _tokens(stream: TextIO) -> Iterator[str]:
    # Reads one line at a time so that several networks can follow each other.
    while line := stream.readline():
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of network data") from None


def _read_count(tokens: Iterator[str]) -> int:
    count = int(_next_token(tokens))
    if count < 0:
        raise ValueError(f"negative count in network data: {count}")
    return count


def _read_float(tokens: Iterator[str]) -> float:
    return float(_next_token(tokens))


class Network:
    """Layered network whose output neuron also sees the raw board inputs."""

    def __init__(
        self,
        layer_sizes: Iterable[int],
        inputs: int,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.score = 0
        self.layers: list[list[Neuron]] = []
        sizes = list(layer_sizes)
        if not sizes:
            return
        if any(size < 1 for size in sizes) or inputs < 1:
            raise ValueError("layer sizes and input count must be positive")
        previous = inputs
        for size in sizes:
            self.layers.append([Neuron.random(previous, self.rng) for _ in range(size)])
            previous = size
        self.layers[-1][0].weights.extend([1.0] * inputs)

    def _require_layers(self) -> None:
        if not self.layers:
            raise ValueError("network has no layers")

    def evaluate(self, inputs: Sequence[float]) -> float:
        """Output of the network for one input vector, in (0, 1)."""
        self._require_layers()
        values = [float(v) for v in inputs]
        current = values
        for layer in self.layers[:-1]:
            if len(layer[0].weights) != len(current):
                raise ValueError(
                    f"layer expects {len(layer[0].weights)} inputs, got {len(current)}"
                )
            current = [neuron.fire(current) for neuron in layer]
        final = self.layers[-1][0]
        combined = current + values
        if len(final.weights) != len(combined):
            raise ValueError(
                f"output neuron expects {len(final.weights)} inputs, got {len(combined)}"
            )
        return final.fire(combined)

    def make_child(self, left: Network, right: Network) -> None:
        """Overwrite this network with a random per-weight blend of two parents."""
        rng = self.rng

        def blend(a: float, b: float) -> float:
            chance = rng.uniform(0.0, 1.0)
            return chance * a + (1.0 - chance) * b

        for own_layer, left_layer, right_layer in zip(
            self.layers, left.layers, right.layers, strict=True
        ):
            for own, a, b in zip(own_layer, left_layer, right_layer, strict=True):
                own.weights = [
                    blend(x, y) for x, y in zip(a.weights, b.weights, strict=True)
                ]
                own.bias = blend(a.bias, b.bias)

    def mutate(self) -> None:
        """Scale weights and biases by random factors within 10 per cent.

        The output neuron's weights on the raw board inputs stay untouched.
        """
        self._require_layers()
        low, high = 1.0 - MUTATION_RANGE, 1.0 + MUTATION_RANGE
        rng = self.rng
        for layer in self.layers[:-1]:
            for neuron in layer:
                neuron.weights = [w * rng.uniform(low, high) for w in neuron.weights]
                neuron.bias *= rng.uniform(low, high)
        last = self.layers[-1][0]
        hidden = len(self.layers[-2]) if len(self.layers) > 1 else 0
        last.weights[:hidden] = [w * rng.uniform(low, high) for w in last.weights[:hidden]]
        last.bias *= rng.uniform(low, high)

    def predict(self, game: Game) -> Move | None:
        """Choose a move for the side to move with a four-ply minimax search.

        Returns None when the side to move has no move; the game is then over.
        The game's position is left as it was, though its selection changes.
        """
        pieces = game.moveable()
        if not pieces:
            return None
        turn = game.turn
        candidates = [
            self._search(game.copy(), piece, target, turn, 1)
            for piece in pieces
            for target in game.select(*piece)
        ]
        if not candidates:
            return None
        return _pick(candidates, maximize=True)

    def _search(
        self, game: Game, source: Square, target: Square, turn: bool, level: int
    ) -> Move:
        if not game.do_turn_unchecked(*target):
            return self._estimate(game, source, target, turn)
        pieces = game.moveable()
        if not pieces:
            return self._estimate(game, source, target, turn)
        replies: list[Move] = []
        for piece in pieces:
            for reply in game.select(*piece):
                if level == SEARCH_DEPTH:
                    replies.append(self._estimate(game, piece, reply, turn))
                else:
                    replies.append(
                        self._search(game.copy(), piece, reply, turn, level + 1)
                    )
        if not replies:
            return self._estimate(game, source, target, turn)
        chosen = _pick(replies, maximize=level % 2 == 0)
        return Move(chosen.estimate, source, target)

    def _estimate(self, game: Game, source: Square, target: Square, turn: bool) -> Move:
        position = game.copy()
        position.do_turn_unchecked(*target)
        return Move(self.evaluate(position.board_vector(not turn)), source, target)

    def dump(self, stream: TextIO) -> None:
        """Write the network as one number per line."""
        lines = [str(len(self.layers))]
        for layer in self.layers:
            lines.append(str(len(layer)))
            for neuron in layer:
                lines.append(str(len(neuron.weights)))
                lines.extend(_fmt(w) for w in neuron.weights)
                lines.append(_fmt(neuron.bias))
        stream.write("\n".join(lines) + "\n")

    @classmethod
    def load(cls, stream: TextIO, rng: random.Random | None = None) -> Network:
        """Read a network written by :meth:`dump`; raises ValueError on bad data."""
        tokens = _tokens(stream)
        network = cls([], 0, rng)
        for _ in range(_read_count(tokens)):
            layer = []
            for _ in range(_read_count(tokens)):
                weights = [_read_float(tokens) for _ in range(_read_count(tokens))]
                layer.append(Neuron(weights, _read_float(tokens)))
            network.layers.append(layer)
        return network

    def save_file(self, path: str = DEFAULT_FILE) -> None:
        with open(path, "w", encoding="utf-8") as stream:
            self.dump(stream)

    @classmethod
    def load_file(
        cls, path: str = DEFAULT_FILE, rng: random.Random | None = None
    ) -> Network:
        with open(path, encoding="utf-8") as stream:
            return cls.load(stream, rng)