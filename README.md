# cluedo

A small engine for the classic deduction board game. It models the board
as a graph of squares and rooms, the deck of character, weapon and room
cards, the players who take part, and the loop that runs a game, which can
also run on a background thread.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

The `test` extra installs pytest for the test suite: `pip install ".[test]"`.

## What is inside

- `cluedo.vector2d.Vector2D`: an immutable 2-D vector with `+`, `-`,
  multiplication and division by a scalar, `dot`, `cross`, `length`,
  `normalized`, `projected_onto`, `rejected_from`, `rotated_by`,
  `rotated_ccw90`, `decompose` (to radius and angle) and `from_polar`.
- `cluedo.box2d.Box2D`: an axis-aligned box with `min_corner` and
  `max_corner`. `Box2D.empty()` gives an inverted box that
  `expand_to_include_point` grows from nothing. It also has `width`,
  `height`, `aspect_ratio`, `area`, `contains_point`, `add_margin`,
  `minimally_expand_to_match_aspect_ratio`,
  `minimally_contract_to_match_aspect_ratio`, and `point_to_uvs` /
  `point_from_uvs`, which map points to and from coordinates relative to
  the box.
- `cluedo.card`: the `Room`, `Weapon` and `Character` enums, `CardType`,
  the frozen `Card` (ordered by type, then value; its `room`, `weapon` and
  `character` properties raise `ValueError` for a card of another type) and
  `Accusation`. The functions are `generate_deck()` (21 cards),
  `shuffle_deck(cards, rng)`, `random_integer(low, high, rng)` and
  `find_and_remove_card_of_type(cards, card_type)`, which returns `None`
  when no card of that type is left.
- `cluedo.board_graph`: `BoardGraph`, built by `regenerate()`. Its `Node`s
  are the squares of the 24 × 25 board. Each node knows its `room` (or
  `None` for a hallway), its `location` and its `adjacencies()`.
  `is_pathway(node)` tells whether a token may move directly between two
  squares: within one room, along hallways, or through a doorway. The six
  `Token`s stand at the characters' starting squares. A token has a
  `color()`, and `animate(delta_time)` moves it towards the `node` it is
  assigned. `bounding_box()`, `iter_nodes()` and `tokens()` give access to
  the board, and `lock` guards regeneration.
- `cluedo.player.Player`: the abstract base of every participant. The game
  tells a player what happens and asks it for decisions; players never call
  into the game.
- `cluedo.computer_player.ComputerPlayer`: keeps track of the cards it knows
  are not in the solution. It accuses with the first unknown ones, refutes
  with the first matching card in its hand, and makes its final accusation
  once only one candidate of each kind remains.
- `cluedo.human_player.HumanPlayer`: asks a person through an `ask`
  callable and informs them through a `tell` callable (by default `input`
  and `print`). Choices are made by number or by name.
- `cluedo.game.Game`: `add_player` refuses duplicate names. `play(max_turns)`
  deals the cards, sets the solution aside, and runs turns until a player
  names the solution. It returns that player, or `None` if the turn limit is
  reached, `request_stop()` was called, or every player was disqualified.
  A wrong final accusation disqualifies a player, who then only answers
  other players' accusations.
- `cluedo.worker`: `Worker`, an abstract named background thread with
  `split`, `join`, `is_running` and `run`. `ThreadSafeQueue` is a locked
  FIFO whose `remove` raises `IndexError` when it is empty.
- `cluedo.game_thread.GameThread`: a `Worker` that plays its `game` and
  stores the result in `winner`. Its `join` asks a running game to stop
  before waiting for it.

## Example

```python
from cluedo.board_graph import BoardGraph
from cluedo.card import generate_deck

board = BoardGraph()
board.regenerate()
print(board.is_generated())           # True
print(board.bounding_box().width())   # 23.0

for token in board.tokens():
    print(token.character.name, token.color())

print(len(generate_deck()))           # 21
```

Playing a game between computer players:

```python
import random

from cluedo.computer_player import ComputerPlayer
from cluedo.game import Game

game = Game(rng=random.Random(1))
game.add_player(ComputerPlayer("Alice"))
game.add_player(ComputerPlayer("Bob"))
winner = game.play(max_turns=1000)
print(winner, game.solution)
```

Running one in the background:

```python
from cluedo.computer_player import ComputerPlayer
from cluedo.game_thread import GameThread

worker = GameThread(max_turns=1000)
worker.game.add_player(ComputerPlayer("Alice"))
worker.game.add_player(ComputerPlayer("Bob"))
worker.split()
worker.join()      # stops the game if it is still running
print(worker.winner)
```

## What it does not do

- There is no window or drawing of the board and no command to start a
  game. The package is a library. A console game can be assembled from
  `HumanPlayer` and `Game` in your own script.
- `Game` does not move tokens across the board. Whether a player reaches the
  room it asks for is decided by chance, and the board graph is only
  regenerated at the start of a game.
- The board has no secret passages.