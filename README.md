# ltlengine

An engine for *Larger than Life* cellular automata. These automata are
Conway's Game of Life generalised in three ways: the neighbourhood radius can
be larger, a cell can have more than two states, and the survival and birth
ranges can be set.

## Installation

```
pip install .
```

## Concepts

A rule is a frozen dataclass, `ltlengine.config.Config`:

- `rr` – the neighbourhood radius
- `cc` – the number of cell states. When setting, stepping or randomizing
  cells, values below 2 are treated as 2.
- `mm` – `1` if the centre cell counts as its own neighbour, `0` if it does not
- `ss` – the inclusive `(low, high)` range of live neighbours a live cell needs to survive
- `bb` – the inclusive `(low, high)` range of live neighbours a dead cell needs to be born
- `nn` – `Neighbourhood.MOORE` (square) or `Neighbourhood.NEUMANN` (diamond)

State `0` is a dead cell and state `1` is a live one. Any state other than `0`
counts as live when neighbours are counted. In one update:

- a dead cell becomes `1` if its live-neighbour count is within `bb`;
- a live cell (state `1`) stays `1` if its count is within `ss`. Otherwise it
  moves to state `2` when `cc > 2`, and to `0` when it is not;
- any higher state `s` becomes `(s + 1) % cc`, so the cell ages and then
  wraps back to `0`.

The board is square and is stored row-major in `Board.cells`. `x` is the
row and `y` is the column. Cells beyond the edge of the board are not counted;
the board does not wrap around. The board's edges do not wrap.

## Usage

```python
from ltlengine.board import Board
from ltlengine.config import Config
from ltlengine.neighbourhood import Neighbourhood

# Conway's Game of Life: radius 1, two states, centre excluded, S2-3, B3
life = Config(rr=1, cc=0, mm=0, ss=(2, 3), bb=(3, 3), nn=Neighbourhood.MOORE)

board = Board.from_cells(life, [0, 0, 0,
                                1, 1, 1,
                                0, 0, 0])
board.update()
print(board.cells)          # [0, 1, 0, 0, 1, 0, 0, 1, 0]

board.cell_up(0, 0)         # step a cell to its next state, wrapping to 0
board.cell_down(0, 0)       # step it back; a cell in state 0 stays 0
board.set_cell(2, 2, 1)     # ValueError if the rule has no such state
board.get_cell(2, 2)        # 1; IndexError outside the board
board.reset()               # every cell back to 0
```

`Board(size, config)` creates an empty `size` by `size` board.
`Board.from_cells` takes a flat list and raises `ValueError` if its length is
not a perfect square.

The neighbourhood of a cell can be inspected directly:

```python
board.neighbourhood_moore(1, 1)     # values in the square of radius rr
board.neighbourhood_neumann(1, 1)   # values within Manhattan distance rr
board.neighbourhood_count(1, 1)     # live cells in the rule's neighbourhood
```

The same lookups work on a plain list through `ltlengine.neighbours`.
`moore_neighbourhood(cells, size, x, y, radius, include_centre)`,
`neumann_neighbourhood(...)` and `live_count(cells, size, x, y, config)`
take the list as their first argument.

Random boards and random rules take any `random.Random` instance. If none is
given, a fresh generator is used:

```python
import random

rng = random.Random(42)
rule = Config.randomize(rng)
board = Board.from_cells(rule, [0] * 100)
board.randomize(rng)
```

Neighbourhood kinds can be read from their short codes, and `str()` gives the
code back:

```python
Neighbourhood.parse("NM")       # Neighbourhood.MOORE
Neighbourhood.parse("NN")       # Neighbourhood.NEUMANN; other codes raise ValueError
str(Neighbourhood.MOORE)        # "NM"
Neighbourhood.MOORE.area(1, 0)  # 8 cells around the centre
```

`area` is capped at 255.

## Parallel updates

`Board.update` splits the cells into contiguous runs, one per CPU, and
computes them on a thread pool. The split is done by
`ltlengine.chunks.split_chunks(size, cores)`. It returns a list of `range`
objects that covers every cell index exactly once. The longer runs come first.

```python
from ltlengine.chunks import split_chunks

split_chunks(100, 2)   # [range(0, 5000), range(5000, 10000)]
split_chunks(3, 8)     # [range(0, 2), range(2, 3), ..., range(8, 9)]
```

## What it does not do

`ltlengine` is a library only. It has no command-line program. It does not
draw or display boards, and it does not save boards or rules to files.

## Running the tests

```
pip install .[test]
pytest
```