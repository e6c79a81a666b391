"""A square board of Larger than Life cells and its update rules."""

from __future__ import annotations

import math
import os
import random
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from ltlengine.chunks import split_chunks
from ltlengine.config import Config
from ltlengine.neighbours import live_count, moore_neighbourhood, neumann_neighbourhood


def _cores() -> int:
    return os.cpu_count() or 1


class Board:
    """A ``size`` by ``size`` board of cells stored row-major in ``cells``.

    ``x`` is the row and ``y`` the column of a cell. Each cell holds a state
    between 0 and ``max(config.cc, 2) - 1``.
    """

    def __init__(self, size: int, config: Config) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative, got {size}")
        self.size = size
        self.config = config
        self.cells: list[int] = [0] * (size * size)
        self._chunks = split_chunks(size, _cores())

    @classmethod
    def from_cells(cls, config: Config, cells: Iterable[int]) -> "Board":
        """Build a board from a flat row-major list whose length is a perfect square."""
        values = list(cells)
        size = math.isqrt(len(values))
        if size * size != len(values):
            raise ValueError(
                "only square boards are supported: "
                f"{len(values)} cells is not a perfect square"
            )
        board = cls(size, config)
        board.cells = values
        return board

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size
            and self.config == other.config
            and self.cells == other.cells
        )

    def __repr__(self) -> str:
        return f"Board(size={self.size!r}, config={self.config!r}, cells={self.cells!r})"

    @property
    def _states(self) -> int:
        return max(self.config.cc, 2)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"cell ({x}, {y}) is outside a board of size {self.size}")
        return x * self.size + y

    def reset(self) -> None:
        """Set every cell back to state 0."""
        self.cells = [0] * (self.size * self.size)

    def get_cell(self, x: int, y: int) -> int:
        """Return the state of the cell at row ``x``, column ``y``."""
        return self.cells[self._index(x, y)]

    def set_cell(self, x: int, y: int, value: int) -> None:
        """Set the cell at ``(x, y)``; the value must be a state the config supports."""
        if not 0 <= value < self._states:
            raise ValueError(f"config does not support cell value {value}")
        self.cells[self._index(x, y)] = value

    def randomize(self, rng: random.Random | None = None) -> None:
        """Give every cell a random state."""
        rng = rng if rng is not None else random.Random()
        states = self._states
        self.cells = [rng.randrange(states) for _ in self.cells]

    def cell_up(self, x: int, y: int) -> None:
        """Advance the cell at ``(x, y)`` to its next state, wrapping to 0."""
        self.set_cell(x, y, (self.get_cell(x, y) + 1) % self._states)

    def cell_down(self, x: int, y: int) -> None:
        """Move the cell at ``(x, y)`` back one state; state 0 stays 0."""
        value = self.get_cell(x, y)
        if value == 0:
            return
        self.set_cell(x, y, (value - 1) % self._states)

    def update(self) -> None:
        """Advance every cell one generation according to the rules."""
        if len(self._chunks) > 1:
            with ThreadPoolExecutor(max_workers=len(self._chunks)) as pool:
                parts = list(pool.map(self._update_chunk, self._chunks))
        else:
            parts = [self._update_chunk(chunk) for chunk in self._chunks]
        self.cells = [state for part in parts for state in part]

    def _update_chunk(self, chunk: range) -> list[int]:
        return [self._next_state(*divmod(i, self.size)) for i in chunk]

    def _next_state(self, x: int, y: int) -> int:
        count = self.neighbourhood_count(x, y)
        state = self.get_cell(x, y)
        config = self.config
        if state == 0:
            return int(config.bb[0] <= count <= config.bb[1])
        if state == 1:
            if config.ss[0] <= count <= config.ss[1]:
                return 1
            return 2 if config.cc > 2 else 0
        return (state + 1) % config.cc

    def neighbourhood_count(self, x: int, y: int) -> int:
        """Number of live (non-zero) cells in the neighbourhood of ``(x, y)``."""
        return live_count(self.cells, self.size, x, y, self.config)

    def neighbourhood_moore(self, x: int, y: int) -> list[int]:
        """Cell values in the Moore neighbourhood of ``(x, y)``."""
        return moore_neighbourhood(
            self.cells, self.size, x, y, self.config.rr, self.config.mm != 0
        )

    def neighbourhood_neumann(self, x: int, y: int) -> list[int]:
        """Cell values in the von Neumann neighbourhood of ``(x, y)``."""
        return neumann_neighbourhood(
            self.cells, self.size, x, y, self.config.rr, self.config.mm != 0
        )