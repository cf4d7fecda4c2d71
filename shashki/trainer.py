"""Genetic training of a population of position evaluators by self-play."""

from __future__ import annotations

import copy
import random
import time
from operator import attrgetter

from .game import Game, Outcome
from .network import Network

WIN = 1
DRAW = 0
LOSE = -2

LAYER_SIZES = (40, 10, 1)
BOARD_INPUTS = 32
MUTATION_CHANCE = 0.5
BEST_FILE = "best.nw"
ALL_FILE = "all.nw"


class Trainer:
    """Scores networks against each other, breeds the better half and mutates."""

    def __init__(
        self,
        rng: random.Random | None = None,
        population_size: int = 30,
        games_per_net: int = 5,
    ) -> None:
        if population_size < 2:
            raise ValueError("population needs at least two networks")
        if games_per_net < 0:
            raise ValueError("games per network cannot be negative")
        self.rng = rng if rng is not None else random.Random()
        self.games_per_net = games_per_net
        self.population = [
            Network(LAYER_SIZES, BOARD_INPUTS, self.rng) for _ in range(population_size)
        ]
        self.train_limit = 1
        self.best_score = 0
        self.games_count = 0
        self.generation_count = 0
        self.scores = [0] * population_size
        self.moves = 0
        self.start_time = 0.0
        self.end_time = 0.0
        self.out_network: Network | None = None
        self._forced = False

    def play_match(self, target, opponent, turn: bool) -> Outcome:
        """Play one game and add its result to ``target.score``.

        ``target`` plays white when ``turn`` is true. The players alternate
        strictly, one move each. Raises RuntimeError on an illegal move.
        """
        game = Game()
        self.moves = 0
        first, second = (target, opponent) if turn else (opponent, target)
        while not game.is_over:
            if not self._play_once(game, first):
                break
            if not self._play_once(game, second):
                break
        self.games_count += 1
        outcome = game.winner if game.winner is not None else Outcome.DRAW
        if outcome == Outcome.DRAW:
            target.score += DRAW
        elif (outcome == Outcome.WHITE) == turn:
            target.score += WIN
        else:
            target.score += LOSE
        return outcome

    def _play_once(self, game: Game, player) -> bool:
        move = player.predict(game)
        if move is None or game.is_over:
            return False
        game.select(*move.source)
        if not game.do_turn_unchecked(*move.target):
            raise RuntimeError(f"illegal move from {move.source} to {move.target}")
        self.moves += 1
        return not game.is_over

    def _score_all(self) -> None:
        size = len(self.population)
        for index, network in enumerate(self.population):
            turn = self.rng.random() < 0.5
            for _ in range(self.games_per_net):
                rival = self.rng.randrange(size - 1)
                if rival >= index:
                    rival += 1
                self.play_match(network, self.population[rival], turn)

    def _replace(self) -> None:
        half = len(self.population) // 2
        parents = self.population[:half]
        for child in self.population[half:]:
            child.make_child(self.rng.choice(parents), self.rng.choice(parents))

    def _mutate_all(self) -> None:
        for network in self.population:
            if self.rng.uniform(0.0, 1.0) < MUTATION_CHANCE:
                network.mutate()

    def force_to_train(self, limit: int) -> None:
        """Make the next :meth:`train` run until ``limit`` generations have passed."""
        self._forced = True
        self.train_limit = limit

    def train(self) -> None:
        """Run generations until the limit, or until a network wins every game."""
        self.generation_count = 0
        self.start_time = time.monotonic()
        perfect = self.games_per_net * WIN
        while True:
            for network in self.population:
                network.score = 0
            self.games_count = 0
            self._score_all()

            self.population.sort(key=attrgetter("score"), reverse=True)
            self.scores = [network.score for network in self.population]
            self.best_score = self.scores[0]

            if self._forced:
                if self.generation_count > self.train_limit:
                    break
            elif self.best_score == perfect:
                break

            self._replace()
            self._mutate_all()
            self.generation_count += 1
            if self.generation_count > self.train_limit:
                break
        self._forced = False
        self.end_time = time.monotonic()

    def save_best(self, path: str = BEST_FILE) -> None:
        self.population.sort(key=attrgetter("score"), reverse=True)
        self.population[0].save_file(path)

    def save_all(self, path: str = ALL_FILE) -> None:
        with open(path, "w", encoding="utf-8") as stream:
            for network in self.population:
                network.dump(stream)

    def load(self, path: str = BEST_FILE) -> None:
        """Load the network that plays against people."""
        self.out_network = Network.load_file(path, self.rng)

    def load_all(self, path: str = ALL_FILE) -> None:
        with open(path, encoding="utf-8") as stream:
            self.population = [
                Network.load(stream, self.rng) for _ in self.population
            ]

    def fill_out(self) -> None:
        """Make an independent copy of the leading network the playing one."""
        self.out_network = copy.deepcopy(self.population[0])