import pickle as pkl
import pytest
from seqmanip import smap, EvaluationError, seterr


class CustomException(Exception):
    pass


def fail(x):
    raise CustomException(x)


def test_seterr():
    assert seterr() == 'passthrough'

    try:
        assert seterr('wrap') == 'wrap'
        assert seterr() == 'wrap'
        assert seterr('passthrough') == 'passthrough'
    finally:
        seterr('passthrough')

    with pytest.raises(ValueError):
        seterr('ignore')
    assert seterr() == 'passthrough'


def test_no_double_wrapping():
    seterr('wrap')
    try:
        with pytest.raises(EvaluationError) as excinfo:
            smap(lambda x: smap(fail, [x]), [1])
        assert isinstance(excinfo.value.__cause__, CustomException)
    finally:
        seterr('passthrough')


def test_pickle_evaluation_error():
    seterr('wrap')
    try:
        with pytest.raises(EvaluationError) as excinfo:
            smap(fail, [1, 2])
    finally:
        seterr('passthrough')

    error = pkl.loads(pkl.dumps(excinfo.value))
    assert isinstance(error, EvaluationError)
    assert str(error) == str(excinfo.value)
    assert isinstance(error.__cause__, CustomException)
    assert error.__traceback__ is not None
