# fifteen

The classic 15 puzzle: fifteen numbered tiles on a 4×4 board with one gap.
Slide tiles into the gap until they read 1 to 15 in order, with the gap in
the bottom-right corner. Starting a game shuffles the board with 50 random
legal moves, so every game can be solved. If you get stuck, the automatic
solver finds a sequence of moves and plays it out.

## Installing

```
pip install .
```

## Playing

```
fifteen
fifteen --seed 7
```

The game prints the board (the gap shown as `.`) and a move counter, then
reads one command per line from standard input:

- `start` shuffles the board. Tiles cannot be moved before this.
- a tile number, such as `12`, slides that tile into the gap if it is next
  to it; otherwise the game says the tile cannot move.
- `auto` searches for a solution, prints the tiles it slides and plays
  them. It is available once per round, after `start`.
- `retry` begins a new round once the board is sorted.
- `quit`, `close` or `q` ends the program.

When the board is sorted the game congratulates you and reports the number
of moves; after an automatic solve that number is the length of the
solver's move sequence. `--seed` makes the shuffle repeatable.

## Using it as a library

```python
import random

from fifteen.game import Game
from fifteen.solver import solve

game = Game(random.Random(7))
game.start()
print(game.render())

game.auto_solve()
print(game.render())

print(solve([1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 0, 15]))
```

- `fifteen.solver.solve(board)` takes the sixteen tile numbers in
  row-major order, with `0` for the gap, and returns the numbers of the
  tiles to slide, in order. It raises `ValueError` for a board that does
  not hold each number from 0 to 15 once, or that cannot be sorted. The
  search always expands the starting board, so even a sorted board yields
  a short sequence of moves that returns to sorted order.
- `fifteen.game.Game` runs a session: `start`, `click(number)`,
  `auto_solve`, `retry` and `render`, with `moves_num`, `status` and
  `solved` as its state.
- `fifteen.field.Field` holds the board itself and offers `move`,
  `shuffle`, `is_sorted`, `is_near` and `board`.
- `fifteen.state.State` and `fifteen.pqueue.PriorityQueue` are the search's
  building blocks.

The solver is a weighted best-first search: states are ordered by
`2 * moves + 3 * manhattan_distance`, with ties broken by the smaller
distance. It is fast on well-shuffled boards but does not promise the
shortest solution.

## What it does not do

There is no graphical window and no animation: the board is played as text
in the terminal, and an automatic solve applies its moves at once.

## Running the tests

```
pip install .[test]
pytest
```