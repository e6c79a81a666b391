import pytest

from ltlengine.chunks import split_chunks


def test_one_core():
    size = 100
    assert split_chunks(size, 1) == [range(0, size * size)]


def test_two_cores():
    assert split_chunks(100, 2) == [range(0, 5000), range(5000, 10000)]


def test_eight_cores():
    assert split_chunks(3, 8) == [
        range(0, 2),
        range(2, 3),
        range(3, 4),
        range(4, 5),
        range(5, 6),
        range(6, 7),
        range(7, 8),
        range(8, 9),
    ]


def test_small_board_many_cores():
    assert split_chunks(3, 70) == [range(i, i + 1) for i in range(9)]


def test_empty_board():
    assert split_chunks(0, 4) == []


@pytest.mark.parametrize(
    ("size", "cores"),
    [(1, 1), (3, 2), (5, 3), (7, 4), (10, 3), (10, 7), (13, 16), (20, 12), (4, 16)],
)
def test_chunks_cover_all_cells_in_order(size, cores):
    chunks = split_chunks(size, cores)
    covered = [i for chunk in chunks for i in chunk]
    assert covered == list(range(size * size))


@pytest.mark.parametrize(
    ("size", "cores"),
    [(3, 2), (5, 3), (7, 4), (10, 3), (10, 7), (20, 12), (4, 16)],
)
def test_chunk_count_and_lengths(size, cores):
    chunks = split_chunks(size, cores)
    assert len(chunks) == min(cores, size * size)
    lengths = [len(chunk) for chunk in chunks]
    assert max(lengths) - min(lengths) <= 1
    assert lengths == sorted(lengths, reverse=True)


@pytest.mark.parametrize("cores", [0, -1])
def test_rejects_non_positive_cores(cores):
    with pytest.raises(ValueError):
        split_chunks(3, cores)


def test_rejects_negative_size():
    with pytest.raises(ValueError):
        split_chunks(-1, 2)