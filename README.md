# progbasics

A collection of small, self-contained programs that show the fundamentals of
programming: enums, iterators, operator overloading, polymorphism and
callbacks, plus two complete console games. It needs nothing beyond the
Python standard library (Python 3.10 or later).

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Programs

Each program is started from the command line and reads from standard input
where it needs input:

| Command                     | What it does                                                                 |
|-----------------------------|------------------------------------------------------------------------------|
| `progbasics-snake`          | Snake on a 5×5 board in the terminal; steer with W, A, S, D                 |
| `progbasics-tictactoe`      | Tic-tac-toe: you play X, the computer takes the first empty cell as O        |
| `progbasics-traffic-light`  | Lists the traffic light colours and tells you what to do for the one you pick |
| `progbasics-graph`          | Walks a small tree depth-first, resuming and copying iterators               |
| `progbasics-chunked`        | Numbers an array split into chunks and copies it into another                |
| `progbasics-shop`           | A tiny shop: pick items by number, enter 0 to finish                         |
| `progbasics-quiz`           | People and a dog answer the same quiz, each in their own way                 |
| `progbasics-item-ops`       | Applies printing, adding and multiplying operations to each item             |
| `progbasics-menus`          | Menus of buttons, each bound to a function and its context                   |
| `progbasics-arrays`         | Sums sample arrays and shows a recursive computation                         |

Options worth knowing:

- `progbasics-snake --seed N` fixes where apples appear. Every character read
  (other than a newline) advances the snake one cell; W, A, S and D turn it
  first. The snake wraps around the board edges.
- `progbasics-menus [functions|state|items|closures]` picks which menu to run
  (`functions` by default). `functions` runs one chosen action; `state` and
  `items` repeat until a choice out of range is entered; `closures` prints a
  fixed demonstration.

## Using the modules

The pieces behind the programs can also be used directly.

```python
from progbasics.vector2 import Vector, add, scale, subtract

a = Vector(1, 2)
b = Vector(3, 4)
result = (a + b) * 5 - a + b
assert result == add(subtract(scale(add(a, b), 5), a), b)
```

```python
from progbasics.graph_iter import DepthFirstIterator, DepthFirstRange, create_graph, dfs_values

root = create_graph()
print(list(DepthFirstRange(root)))   # [1, 2, 6, 7, 5, 3, 4]
print(list(dfs_values(root)))        # same order, by recursion

it = DepthFirstIterator(root)
next(it)
resumed = it.copy()                  # independent iterator from the same point
```

```python
from progbasics.chunked import ChunkedArray, copy_items

source = ChunkedArray([2, 3, 4, 3])
target = ChunkedArray([3, 2, 4, 3])
for number, position in enumerate(source.positions()):
    source[position] = number
copy_items(source, target)
print(list(target))
```

```python
from progbasics.arrays import filled_example, recurse, sum_values

sum_values(filled_example(1))   # 50
recurse(0)                      # 7
```

```python
import random
from progbasics.snake_common import BoardDimensions, Direction
from progbasics.snake_logic import GameResult, GameState

state = GameState(BoardDimensions(5, 5), random.Random(1))
state.direction = Direction.RIGHT
assert state.step() in GameResult
```

Other entry points: `progbasics.snake_console.render_board` and `play`,
`progbasics.tictactoe.Board` and `play`, `progbasics.shop.process_customer`,
`progbasics.quiz.quiz` and `enter_and_leave`, `progbasics.item_ops.for_each_item`
with `Adder`, `Multiplier` and `SumProduct`, and `progbasics.menus.Console`
with `run_menu`.

## What it does not do

- Snake has no graphical window and no timer: it is played in the terminal
  only, and the game moves only when a key is read. In most terminals input is
  line-buffered, so keys take effect after Enter.
- The shop checks whether you can afford an item but does not take the money
  off your balance.