"""Operations that select or test items of a sequence."""

from collections import namedtuple

from .errors import evaluate
from .utils import check_callable


class FindResult(namedtuple("FindResult", ["value", "found"])):
    """Outcome of a search: the matching value and whether there was one.

    Unpacks as a pair and evaluates to `found` in a boolean context.
    When nothing matched, `value` holds the default requested by the
    caller.
    """
    __slots__ = ()

    def __bool__(self):
        return self.found


def sfilter(pred, sequence):
    """Return the list of items for which `pred` is true.

    The relative order of the selected items is preserved.

    Example:

        >>> seqmanip.sfilter(lambda x: x % 2 == 0, [1, 2, 3, 4])
        [2, 4]
    """
    check_callable(pred, "pred")

    return [x for i, x in enumerate(sequence)
            if evaluate("sfilter", i, pred, x)]


def find(pred, sequence, default=None):
    """Return the first item satisfying `pred`.

    Args:
        pred (Callable[[Any], bool]):
            The test to apply on items.
        sequence (Sequence):
            The searched sequence, items are tested in order.
        default (Any):
            Value reported when no item matches (default None).

    Return:
        FindResult: A `(value, found)` pair, `found` is False when no
        item matched, in which case `value` is `default`.

    Example:

        >>> seqmanip.find(lambda x: x > 1, [1, 2, 3])
        FindResult(value=2, found=True)
        >>> value, found = seqmanip.find(lambda x: x > 5, [1, 2, 3])
        >>> found
        False
    """
    check_callable(pred, "pred")

    for i, x in enumerate(sequence):
        if evaluate("find", i, pred, x):
            return FindResult(x, True)

    return FindResult(default, False)


def some(pred, sequence):
    """Return whether at least one item satisfies `pred`.

    Stops testing at the first match.
    """
    check_callable(pred, "pred")

    return any(evaluate("some", i, pred, x) for i, x in enumerate(sequence))


def every(pred, sequence):
    """Return whether all items satisfy `pred`, True for empty sequences.

    Stops testing at the first failure.
    """
    check_callable(pred, "pred")

    return all(evaluate("every", i, pred, x) for i, x in enumerate(sequence))


def includes(sequence, value):
    """Return whether some item of the sequence equals `value`.

    Unlike the `in` operator, items are only compared by equality, an
    item that is `value` but does not compare equal to it (such as NaN)
    is not reported.
    """
    return any(x == value for x in sequence)
