"""Splitting a board's cells into contiguous runs for parallel updates."""

from __future__ import annotations


def split_chunks(size: int, cores: int) -> list[range]:
    """Split the ``size`` by ``size`` cells into at most ``cores`` index ranges.

    The ranges are contiguous, in order, and together cover every cell index
    exactly once. When there are fewer cells than cores, each cell gets a
    range of its own. Otherwise the longer ranges come first and the rest
    are one cell shorter.
    """
    if cores < 1:
        raise ValueError(f"cores must be at least 1, got {cores}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")

    total = size * size
    if total < cores:
        return [range(start, start + 1) for start in range(total)]

    longer = -(-total // cores)
    shorter = total // cores

    chunks: list[range] = []
    start = 0
    remaining = cores
    while remaining > 0 and (total - start) % remaining != 0:
        chunks.append(range(start, start + longer))
        start += longer
        remaining -= 1
    for _ in range(remaining):
        chunks.append(range(start, start + shorter))
        start += shorter
    return chunks