# watersort

A solver for the water sort puzzle. There is a row of bottles, and each one
holds up to four units of coloured liquid. The puzzle is solved when every
bottle is either empty or holds four units of a single colour.

The solver tries pours with a breadth-first search. A depth-first search with
a depth limit is also available. Both searches skip positions they have
already seen, and the bottles are treated as unordered when positions are
compared. The solver then prints the positions that lead to the solution.

## Installation

```
pip install .
```

## Command line

```
watersort
watersort --dfs 100
```

With no options, `watersort` solves the built-in sample puzzle breadth first.
`--dfs DEPTH` searches depth first instead, going at most `DEPTH` pours deep.

The command prints the following, in order:

1. The starting position.
2. For a breadth-first search, the number of pours tried.
3. `Complete!!`
4. The positions along the solution. They start from the solved position and
   go back to the position after the first pour.
5. The number of moves (`手数`).
6. The elapsed time (`経過時間`).

If no solution is found, it prints `解無し？`.

Positions are drawn with the top level first, one column per bottle. Each
cell holds the colour's name, or blanks where the bottle is empty at that
level.

## Library use

```python
from watersort.box import Box
from watersort.colors import Color
from watersort.game import Solver

box = Box([
    [Color.ORANGE, Color.RED, Color.ORANGE, Color.RED],
    [Color.BLUE, Color.BLUE, Color.ORANGE, Color.RED],
    [Color.RED, Color.ORANGE, Color.BLUE, Color.BLUE],
    [],
    [],
])
print(box.render())

solver = Solver(box)
answer = solver.bfs()          # or solver.dfs(box, 100)
if answer is not None:
    for step in solver.solution_path(answer):
        print(step.render())
```

The package has these modules:

- `watersort.colors`
  - `Color`: an `IntEnum` of the twelve colours.
  - `color_name(color)`: returns a colour's display name.
  - `MAX_UNIT`: the capacity of a bottle, which is 4.
- `watersort.bottle`
  - `Bottle`: a `list` of colours, bottom first.
  - `pour(other)`: moves the top run of one colour into another bottle,
    as far as it fits, and returns the number of units moved.
  - `is_mono()`: tells whether the bottle holds at most one colour.
  - `check()`: tells whether the bottle is empty or full of one colour.
  - `copy()`: returns a copy of the bottle.
- `watersort.box`
  - `Box`: the bottles of one position.
  - `copy()`, `check()`: copy or check every bottle in the position.
  - `render()`: returns the drawn text.
  - `display(file=None)`: prints the drawn text to `file`.
- `watersort.node`
  - `make_hash(bottles)`: returns an order-independent key for a position.
  - `Node`: the search tree, with `add`, `replace` and `search`.
- `watersort.game`
  - `Solver`: with `bfs()`, `dfs(box, depth)` and `solution_path(answer)`.
  - `main(argv=None)`: the entry point of the command.

## Limitations

The command only solves its built-in sample puzzle. There is no way to give it
another puzzle from the command line or from a file. For other puzzles, build
a `Box` and use `Solver` from Python.

## Tests

```
pip install .[test]
pytest
```