"""Neighbourhood lookups on a square board stored as a flat row-major list."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from ltlengine.config import Config
from ltlengine.neighbourhood import Neighbourhood


def _check(cells: Sequence[int], size: int, x: int, y: int, radius: int) -> None:
    if len(cells) != size * size:
        raise ValueError(
            f"expected {size * size} cells for a board of size {size}, got {len(cells)}"
        )
    if not (0 <= x < size and 0 <= y < size):
        raise IndexError(f"cell ({x}, {y}) is outside a board of size {size}")
    if radius < 0:
        raise ValueError(f"radius must not be negative, got {radius}")


def _window(size: int, x: int, y: int, radius: int) -> Iterator[tuple[int, int]]:
    """Yield the coordinates of the square of ``radius`` around ``(x, y)``, clipped to the board."""
    last = size - 1
    rows = range(max(x - radius, 0), min(x + radius, last) + 1)
    cols = range(max(y - radius, 0), min(y + radius, last) + 1)
    for row in rows:
        for col in cols:
            yield row, col


def moore_neighbourhood(
    cells: Sequence[int],
    size: int,
    x: int,
    y: int,
    radius: int,
    include_centre: bool,
) -> list[int]:
    """Return the cell values in the square of ``radius`` around ``(x, y)``.

    ``x`` is the row and ``y`` the column. Cells beyond the board edge are
    left out; the centre cell is included only when ``include_centre`` is true.
    """
    _check(cells, size, x, y, radius)
    return [
        cells[row * size + col]
        for row, col in _window(size, x, y, radius)
        if include_centre or (row, col) != (x, y)
    ]


def neumann_neighbourhood(
    cells: Sequence[int],
    size: int,
    x: int,
    y: int,
    radius: int,
    include_centre: bool,
) -> list[int]:
    """Return the cell values within Manhattan distance ``radius`` of ``(x, y)``.

    ``x`` is the row and ``y`` the column. Cells beyond the board edge are
    left out; the centre cell is included only when ``include_centre`` is true.
    """
    _check(cells, size, x, y, radius)
    return [
        cells[row * size + col]
        for row, col in _window(size, x, y, radius)
        if (include_centre or (row, col) != (x, y))
        and abs(row - x) + abs(col - y) <= radius
    ]


def live_count(cells: Sequence[int], size: int, x: int, y: int, config: Config) -> int:
    """Count the non-zero cells in the neighbourhood of ``(x, y)`` described by ``config``."""
    lookup = (
        neumann_neighbourhood if config.nn is Neighbourhood.NEUMANN else moore_neighbourhood
    )
    neighbourhood = lookup(cells, size, x, y, config.rr, config.mm != 0)
    return sum(1 for state in neighbourhood if state > 0)