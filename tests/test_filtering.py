import math
import random
import pytest
from seqmanip import sfilter, find, some, every, includes, EvaluationError, seterr


def test_sfilter():
    data = [random.randint(0, 1000) for _ in range(200)]
    original = list(data)

    def pred(x):
        pred.call_cnt += 1
        return x % 3 == 0

    pred.call_cnt = 0

    result = sfilter(pred, data)
    assert result == [x for x in data if x % 3 == 0]
    assert all(pred(x) for x in result)
    assert len(result) <= len(data)
    assert data == original

    assert sfilter(lambda x: x % 2 == 0, [1, 2, 3, 4]) == [2, 4]
    assert sfilter(lambda x: False, data) == []
    assert sfilter(lambda x: True, []) == []

    with pytest.raises(TypeError):
        sfilter(None, data)


def test_find():
    result = find(lambda x: x > 5, [1, 2, 3])
    assert not result
    assert result.found is False
    assert result.value is None

    value, found = find(lambda x: x > 1, [1, 2, 3])
    assert (value, found) == (2, True)

    # a match on a falsy value is still a match
    result = find(lambda x: x == 0, [3, 0, 1])
    assert result
    assert result.value == 0

    assert find(lambda x: x > 5, [], default=-1) == (-1, False)


def test_find_short_circuits():
    def pred(x):
        pred.seen.append(x)
        return x == 'c'

    pred.seen = []
    assert find(pred, 'abcdef').value == 'c'
    assert pred.seen == ['a', 'b', 'c']


def test_some_every():
    data = [random.randint(0, 10) for _ in range(100)]

    assert some(lambda x: x > 5, data) == any(x > 5 for x in data)
    assert every(lambda x: x > 5, data) == all(x > 5 for x in data)
    assert some(lambda x: x > 100, data) is False
    assert every(lambda x: x >= 0, data) is True

    assert some(lambda x: True, []) is False
    assert every(lambda x: False, []) is True

    def pred(x):
        pred.call_cnt += 1
        return x < 3

    pred.call_cnt = 0
    assert every(pred, [1, 2, 3, 4, 5]) is False
    assert pred.call_cnt == 3

    pred.call_cnt = 0
    assert some(lambda x: not pred(x), [1, 2, 3, 4, 5]) is True
    assert pred.call_cnt == 3


def test_some_every_exceptions():
    def pred(x):
        raise KeyError(x)

    with pytest.raises(KeyError):
        some(pred, [1])

    seterr('wrap')
    try:
        with pytest.raises(EvaluationError):
            every(pred, [1])
    finally:
        seterr('passthrough')


def test_includes():
    data = ['a', 'b', 'c']
    assert includes(data, 'b')
    assert not includes(data, 'd')
    assert not includes([], None)

    # equality, not identity
    assert includes([[1, 2], [3]], [3])
    assert includes([1, 2, 3], 2.0)
    nan = math.nan
    assert not includes([nan], nan)
