from .errors import evaluate
from .utils import check_callable


def smap(f, sequence, *sequences):
    """Return the list of `f` applied to each item of the sequence(s).

    Equivalent to :code:`[f(x) for x in sequence]`, the input is left
    untouched.

    If several sequences are passed, they will be zipped together and
    their items will be passed as distinct arguments to f:
    :code:`[f(*x) for x in zip(*sequences)]`. All sequences must have
    the same length.

    Example:

        >>> a = [1, 2, 3, 4]
        >>> seqmanip.smap(lambda x: x + 2, a)
        [3, 4, 5, 6]
        >>> a, b = [1, 2, 3, 4], [4, 3, 2, 1]
        >>> seqmanip.smap(lambda y, z: y * z, a, b)
        [4, 6, 6, 4]
    """
    check_callable(f)

    if not sequences:
        return [evaluate("smap", i, f, x) for i, x in enumerate(sequence)]

    sequences = (sequence,) + sequences
    if not all(len(seq) == len(sequence) for seq in sequences):
        raise ValueError("all sequences should have the same length")

    return [evaluate("smap", i, f, *args)
            for i, args in enumerate(zip(*sequences))]


def starmap(f, sequence):
    """Map a function over a sequence of argument tuples.

    An eager equivalent of :func:`python:itertools.starmap`.
    """
    check_callable(f)
    return smap(lambda x: f(*x), sequence)


def flat_map(f, sequence):
    """Map `f` over a sequence and concatenate the resulting sequences.

    Only one level of nesting is flattened, empty results contribute
    nothing.

    Example:

        >>> seqmanip.flat_map(lambda x: [x, x], [1, 2])
        [1, 1, 2, 2]
        >>> seqmanip.flat_map(lambda x: [[x]], [1, 2])
        [[1], [2]]
    """
    check_callable(f)

    result = []
    for i, x in enumerate(sequence):
        result.extend(evaluate("flat_map", i, f, x))

    return result


def for_each(action, sequence):
    """Call `action` on every item, in order, for its side effects."""
    check_callable(action, "action")

    for i, x in enumerate(sequence):
        evaluate("for_each", i, action, x)
