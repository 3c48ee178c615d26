from .errors import evaluate
from .utils import check_callable


def sreduce(f, sequence, initial):
    """Fold a sequence from left to right.

    Equivalent to :func:`python:functools.reduce` with a mandatory
    initial value: the accumulator starts at `initial` and is replaced
    by :code:`f(accumulator, item)` for each item in order.

    Args:
        f (Callable[[Any, Any], Any]):
            The reducer, takes the accumulator then the current item.
        sequence (Sequence):
            The items to fold.
        initial (Any):
            The starting accumulator, returned as is for an empty
            sequence.

    Return:
        The final accumulator.

    Example:

        >>> seqmanip.sreduce(lambda acc, x: acc + [x * 2], [1, 2, 3], [])
        [2, 4, 6]
        >>> seqmanip.sreduce(lambda acc, x: acc - x, [1, 2, 3], 10)
        4
    """
    check_callable(f)

    accumulator = initial
    for i, x in enumerate(sequence):
        accumulator = evaluate("sreduce", i, f, accumulator, x)

    return accumulator
