# shashki

Draughts (shashki) on an 8×8 board, played in the terminal against a bot.
The bot is a small feed-forward neural network that scores positions and
picks its move with a four-ply minimax search. A genetic algorithm trains
a population of such networks by letting them play each other.

## Rules as implemented

- White moves first; rows are numbered 1 (white's home row) to 8.
- Men move one square diagonally forward.
- Captures are mandatory. A piece that has just captured keeps moving
  while it has another capture.
- A man that reaches the far row becomes a king. Kings step and capture
  one square in any diagonal direction.
- A side that loses all its pieces loses. If the side to move has no
  move, the game is a draw. It is also a draw once more than 150 moves
  have been made.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

The `shashki` command has two subcommands.

### Playing

```
shashki play [--mode pvn|nvp|pvp] [--network FILE]
```

- `--mode pvn` (default): you play white, the bot plays black.
- `--mode nvp`: the bot plays white and moves first.
- `--mode pvp`: two people at one keyboard, no bot.
- `--network FILE`: the network the bot uses, default `best.nw`. It is
  not needed in `pvp` mode.

The board is printed as text with the top row first. White pieces are
`w`, black pieces `b`, kings in capitals; highlighted squares are shown
in brackets. Moves are read from standard input as square names such as
`c3`: the first name selects a piece, the second moves it there. `r`
starts a new game and `q` quits. Messages are in Russian.

### Training

```
shashki train [--generations N] [--population N] [--games N]
              [--save FILE] [--save-all FILE]
```

- `--generations`: how many generations to train, default 50. Only the
  leading integer is read; it must be greater than zero.
- `--population`: number of networks, default 30.
- `--games`: games each network plays per generation, default 5.
- `--save FILE`: write the best network to FILE after training.
- `--save-all FILE`: write the whole population to FILE.

When training ends, the best score, the generation count, the time taken
and every network's score are printed. Nothing is saved unless `--save`
or `--save-all` is given. Use `--save best.nw` to produce the file that
`shashki play` loads by default.

Training is slow: every move of every game runs the four-ply search.

## Library use

```python
import random

from shashki.game import Game
from shashki.network import Network
from shashki.trainer import LAYER_SIZES, BOARD_INPUTS, Trainer

game = Game()
print(game.moveable())            # squares of the pieces that may move

bot = Network(LAYER_SIZES, BOARD_INPUTS, random.Random(1))
move = bot.predict(game)          # Move(estimate, source, target) or None

trainer = Trainer(random.Random(1), population_size=6, games_per_net=1)
trainer.force_to_train(1)
trainer.train()
trainer.fill_out()                # trainer.out_network is now the best network
```

- `shashki.game`: `Game` holds the rules and the board; `Piece` and
  `Outcome` are the square contents and game results.
- `shashki.network`: `Network` evaluates positions and chooses moves with
  `predict`; `dump`/`load` and `save_file`/`load_file` store it as text,
  one number per line.
- `shashki.trainer`: `Trainer` scores, breeds and mutates a population;
  `save_best`, `save_all`, `load` and `load_all` handle its files
  (`best.nw` and `all.nw` by default).
- `shashki.session`: `GameSession` turns clicks on squares into moves and
  lets the bot answer; `outcome_message` gives the end-of-game text.
- `shashki.view`: `BoardView` maps board coordinates to pixels and back
  and draws the board as text.
- `shashki.cli`: the command line, with `parse_generations` and
  `format_info`.

## What it does not do

There is no graphical board and no mouse input: play happens in the
terminal. Training runs in the foreground on one thread and reports its
progress only when it has finished.