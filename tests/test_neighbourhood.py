import random

import pytest

from ltlengine.neighbourhood import Neighbourhood


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_parse_moore():
    assert Neighbourhood.parse("NM") is Neighbourhood.MOORE


def test_parse_neumann():
    assert Neighbourhood.parse("NN") is Neighbourhood.NEUMANN


def test_parse_error():
    with pytest.raises(ValueError):
        Neighbourhood.parse("asd")


def test_moore_to_string():
    member = Neighbourhood.parse("NM")
    assert str(member) == "NM"


def test_neumann_to_string():
    member = Neighbourhood.parse("NN")
    assert str(member) == "NN"


@pytest.mark.parametrize("member", list(Neighbourhood))
def test_string_round_trip(member):
    assert Neighbourhood.parse(str(member)) is member


def test_randomize_moore():
    assert Neighbourhood.randomize(_FixedRng(0.0)) is Neighbourhood.MOORE


def test_randomize_neumann():
    assert Neighbourhood.randomize(_FixedRng(0.999)) is Neighbourhood.NEUMANN


def test_randomize_yields_both_kinds():
    rng = random.Random(1)
    seen = {Neighbourhood.randomize(rng) for _ in range(200)}
    assert seen == {Neighbourhood.MOORE, Neighbourhood.NEUMANN}


def test_moore_area_included():
    assert Neighbourhood.MOORE.area(1, 1) == 9


def test_moore_area_excluded():
    assert Neighbourhood.MOORE.area(1, 0) == 8


def test_moore_area_bigger_radius():
    assert Neighbourhood.MOORE.area(3, 1) == 49


def test_neumann_area_included():
    assert Neighbourhood.NEUMANN.area(1, 1) == 5


def test_neumann_area_excluded():
    assert Neighbourhood.NEUMANN.area(1, 0) == 4


def test_neumann_area_bigger_radius():
    assert Neighbourhood.NEUMANN.area(3, 1) == 25


def test_moore_area_is_capped():
    assert Neighbourhood.MOORE.area(10, 1) == 255
    assert Neighbourhood.MOORE.area(10, 0) == 255


def test_neumann_area_largest_radius_below_cap():
    assert Neighbourhood.NEUMANN.area(10, 1) == 221
    assert Neighbourhood.NEUMANN.area(10, 0) == 220