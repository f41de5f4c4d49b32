# buscaminas

A minesweeper game for the terminal. Boards up to 20 × 20 are drawn with
ANSI colours; you can flag cells, undo your last moves and keep a list of
games in a plain text file, ordered by difficulty. The prompts are in
Spanish.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Playing

```
buscaminas
buscaminas --seed 42
```

`--seed` fixes the random generator used to place mines, so a random board
can be played again.

The game first asks for the name of a games file. If it can be read, you
choose between a random game (option 1, or any number other than 2) and
one of the stored games (option 2, then the game's number from the list
shown). If the file cannot be opened or holds no games, a random game is
generated straight away.

For a random game you give the number of rows and columns (each kept
between 3 and 20) and the number of mines (kept between 1 and the number
of cells). The new game is added to the list of stored games.

On each turn you type two numbers:

| Input   | Effect                                        |
|---------|-----------------------------------------------|
| `-3 -3` | Undo the last move (up to ten moves back)     |
| `-2 -2` | Flag mode: then give the cell to flag/unflag  |
| `-1 -1` | Give up (counts as a loss)                    |
| `r c`   | Uncover the cell at row `r`, column `c`       |

Uncovering an empty cell opens its neighbours, spreading across the empty
region; flagged cells are never uncovered. The game ends when you step on
a mine, when every cell without a mine is uncovered, or when you give up.
A won game is removed from the list, and the list is then saved to a file
whose name you are asked for. If the input ends before the session does,
the command exits with status 1.

## Games file format

Whitespace-separated integers:

```
<number of games>
<rows> <cols>
<mines>
<row> <col>      one line per mine
...
```

Games are kept in order of difficulty, `rows * cols // mines`, lowest
(hardest) first; games of equal difficulty keep the order they were added
in. A stored game needs at least one mine.

## As a library

```python
from buscaminas.game import Game

game = Game(3, 3)
game.place_mine(0, 0)
revealed = game.play(2, 2)   # positions uncovered by this move, in order
print(game.is_complete())
```

- `buscaminas.game.Game` holds a board and its counters. `Game.random`
  places mines at distinct random positions; `play`, `toggle_flag`, `hide`
  and `place_mine` change it. Positions off the board raise `IndexError`.
- `buscaminas.undo.UndoHistory` keeps the positions revealed by the latest
  moves (ten by default), dropping the oldest.
- `buscaminas.game_list.GameList` keeps copies of games sorted by
  `difficulty`.
- `buscaminas.manager.GameManager` loads and saves game lists;
  `read_games`, `write_games` and `parse_game` work on streams and tokens.
- `buscaminas.display.render_game`, `render_banner`, `render_result` and
  `render_prompt` return the coloured text as strings.
- `buscaminas.cli.play_turn`, `undo` and `finish` carry out the steps of a
  session without reading from the terminal themselves.

## What it does not do

There is no full-screen or mouse interface: the board is printed anew
after every move and all input is typed as numbers on standard input.