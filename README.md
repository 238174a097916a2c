# coinflip

A small puzzle game played in the terminal. Each level shows a 4×4 board of
coins, some gold side up (`G`) and some silver side up (`S`). Choosing a coin
flips it and the coins directly beside it: above, below, left and right. The
level is won when every coin shows its gold side; after that the board no
longer takes moves.

There are twenty levels. Levels 10, 15 and 20 are made up at random each time
the game starts, and they always hold an even number of gold coins. Every
level is played on a 4×4 board; for the larger layouts of levels 11 to 20 only
their top-left 4×4 corner is used.

## Installing

```
pip install .
```

## Playing

```
coinflip
```

The game reads commands from standard input, one per line:

- On the main menu, `start` opens the level menu.
- On the level menu, type a level number from 1 to 20 to play it, or `back`
  to return to the main menu.
- On a board, type the column and row of the coin to flip, counting from 0,
  for example `1 2`. `back` returns to the level menu.
- `quit` leaves the game from anywhere.

The option `--seed N` seeds the random levels, so that the same seed gives the
same boards for levels 10, 15 and 20.

## Using it from Python

The game logic can also be used without the terminal front end:

```python
from coinflip.play import PlayScene

scene = PlayScene(1)
won = scene.click(0, 0)
print(scene.render())
print(scene.board())   # board()[x][y], 1 for gold, 0 for silver
print(scene.is_won())
```

- `coinflip.levels.load_levels(rng)` returns the starting grid of every level,
  keyed by level number; `random_level(size, fix_row, fix_col, rng)` makes one
  random grid with an even number of gold coins.
- `coinflip.play.neighbours(x, y, size)` lists the cells that a click flips
  along with the one clicked.
- `coinflip.coin.Coin` models one coin and the frames of its flip animation
  (`flip`, `tick`, `image`), and `coin_image(frame)` names a frame's image.
- `coinflip.button.ImageButton` models a button with a normal and a pressed
  image, and `bounce_down` / `bounce_up` describe its bounce animation as
  start and end `Rect`s.
- `coinflip.app.run(stdin, stdout, rng)` runs the text game on any streams.

## What it does not do

The game is text only. It draws no windows or images and plays no sounds; the
coin and button modules only describe which image and animation frame would be
shown, they do not display anything.

## Running the tests

```
pip install .[test]
pytest
```