"""Rule configuration for a Larger than Life game."""

from __future__ import annotations

import random
from dataclasses import dataclass

from ltlengine.neighbourhood import Neighbourhood


@dataclass(frozen=True)
class Config:
    """Rule set of a Larger than Life automaton.

    ``rr`` is the neighbourhood radius, ``cc`` the number of cell states,
    ``mm`` is 1 when the centre cell counts as its own neighbour, ``ss`` and
    ``bb`` are the inclusive survival and birth ranges of live-neighbour
    counts, and ``nn`` is the neighbourhood shape.
    """

    rr: int
    cc: int
    mm: int
    ss: tuple[int, int]
    bb: tuple[int, int]
    nn: Neighbourhood

    def __post_init__(self) -> None:
        object.__setattr__(self, "ss", tuple(self.ss))
        object.__setattr__(self, "bb", tuple(self.bb))

    @classmethod
    def randomize(cls, rng: random.Random | None = None) -> "Config":
        """Build a configuration with randomly chosen parameters."""
        rng = rng if rng is not None else random.Random()
        rr = rng.randint(1, 10)
        mm = int(rng.random() < 0.5)
        nn = Neighbourhood.randomize(rng)
        max_count = nn.area(rr, mm)
        ss_min = rng.randrange(0, max_count)
        ss_max = rng.randint(ss_min, max_count)
        bb_min = rng.randrange(0, max_count)
        bb_max = rng.randint(bb_min, max_count)
        return cls(
            rr=rr,
            cc=rng.randint(1, 25),
            mm=mm,
            ss=(ss_min, ss_max),
            bb=(bb_min, bb_max),
            nn=nn,
        )