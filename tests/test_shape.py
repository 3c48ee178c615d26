import logging
import random
import pytest
from seqmanip import chunk


def test_chunk():
    assert chunk([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunk([], 3) == []
    assert chunk([1, 2, 3], 3) == [[1, 2, 3]]
    assert chunk([1, 2, 3], 10) == [[1, 2, 3]]
    assert chunk(range(4), 1) == [[0], [1], [2], [3]]

    for _ in range(20):
        arr = [random.random() for _ in range(random.randint(0, 137))]
        size = random.randint(1, 20)
        chunks = chunk(arr, size)

        assert [x for c in chunks for x in c] == arr
        assert all(len(c) == size for c in chunks[:-1])
        if chunks:
            assert 0 < len(chunks[-1]) <= size


def test_chunk_does_not_alias_input():
    arr = list(range(10))
    chunks = chunk(arr, 5)
    chunks[0][0] = -1
    assert arr == list(range(10))


def test_chunk_options():
    arr = list(range(137))

    chunked = chunk(arr, 5, drop_last=True)
    assert chunked == [[i + k for k in range(5)] for i in range(0, 135, 5)]

    chunked = chunk(arr, 5, pad=0)
    assert chunked[-1] == [135, 136, 0, 0, 0]
    assert chunked[:-1] == [[i + k for k in range(5)]
                            for i in range(0, 135, 5)]

    assert chunk(list(range(10)), 5, drop_last=True) == chunk(range(10), 5)
    assert chunk(list(range(10)), 5, pad=-1) == chunk(range(10), 5)


def test_chunk_pad_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="seqmanip.shape"):
        chunked = chunk([1, 2, 3], 2, drop_last=True, pad=0)

    assert chunked == [[1, 2]]
    assert "pad value is ignored" in caplog.text


@pytest.mark.parametrize('size', [0, -1, -10])
def test_chunk_invalid_size(size):
    with pytest.raises(ValueError):
        chunk([1, 2, 3], size)

    with pytest.raises(ValueError):
        chunk([], size)


@pytest.mark.parametrize('size', [2.0, '2', None, True])
def test_chunk_size_type(size):
    with pytest.raises(TypeError):
        chunk([1, 2, 3], size)
