"""Neighbourhood shapes used by Larger than Life cellular automata."""

from __future__ import annotations

import random
from enum import Enum

_MAX_AREA = 255


class Neighbourhood(Enum):
    """The two neighbourhood shapes: von Neumann (diamond) and Moore (square)."""

    NEUMANN = "NN"
    MOORE = "NM"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> "Neighbourhood":
        """Return the neighbourhood named by its short code, ``NN`` or ``NM``."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"unknown neighbourhood code: {text!r}") from None

    @classmethod
    def randomize(cls, rng: random.Random | None = None) -> "Neighbourhood":
        """Pick a neighbourhood with equal probability."""
        rng = rng if rng is not None else random.Random()
        return cls.MOORE if rng.random() < 0.5 else cls.NEUMANN

    def area(self, rr: int, mm: int) -> int:
        """Number of cells in the neighbourhood of radius ``rr``.

        The centre cell is counted only when ``mm`` is 1; the result is
        capped at 255.
        """
        if self is Neighbourhood.MOORE:
            area = (rr * 2 + 1) ** 2
        else:
            area = rr**2 + (rr + 1) ** 2
        if mm != 1:
            area -= 1
        return min(area, _MAX_AREA)