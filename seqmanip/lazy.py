"""Deferred operations over producers.

A producer is a source of items that pushes them one at a time to a
consumer callback. The consumer returns a true value to ask for the
next item and a false value to stop the production right away::

    >>> def consumer(x):
    ...     print(x)
    ...     return x < 2
    ...
    >>> seqmanip.from_sequence([1, 2, 3]).drive(consumer)
    1
    2
    False

:meth:`Producer.drive` returns True when the source was exhausted and
False when a consumer interrupted it.

Transformations such as :func:`lazy_map` wrap a producer into another
one, nothing is computed until the outermost producer is driven, and a
stop request from the final consumer interrupts every level of the
chain, so infinite sources are fine as long as the consumer eventually
stops.
"""

from abc import ABC, abstractmethod

from .errors import evaluate, format_stack
from .filtering import FindResult
from .utils import check_callable, get_logger


logger = get_logger(__name__)


class Producer(ABC):
    @abstractmethod
    def drive(self, consumer):
        """Offer items to `consumer` until it returns false or the items
        run out.

        Return:
            bool: True if the items ran out, False if the consumer
            stopped the production.
        """
        raise NotImplementedError

    def __call__(self, consumer):
        return self.drive(consumer)


class SequenceProducer(Producer):
    def __init__(self, sequence):
        self.sequence = sequence

    def drive(self, consumer):
        for x in self.sequence:
            if not consumer(x):
                return False

        return True


class IterableProducer(Producer):
    """One-shot producer, later drives find the iterator consumed."""
    def __init__(self, iterable):
        self.iterator = iter(iterable)
        self.driven = False

    def drive(self, consumer):
        if self.driven:
            logger.warning(
                "%s can only be driven once, no item will be produced",
                self.__class__.__name__)
            return True

        self.driven = True
        for x in self.iterator:
            if not consumer(x):
                return False

        return True


class FuncProducer(Producer):
    """Adapt a function `func(consumer)` to the producer interface.

    The function must stop calling the consumer as soon as it returns a
    false value, doing otherwise raises a :class:`python:RuntimeError`.
    """
    def __init__(self, func):
        check_callable(func, "func")
        self.func = func

    def drive(self, consumer):
        stopped = False

        def guarded(x):
            nonlocal stopped
            if stopped:
                raise RuntimeError(
                    "producer function {} continued after the consumer "
                    "requested to stop".format(
                        getattr(self.func, "__name__", repr(self.func))))

            stopped = not consumer(x)
            return not stopped

        self.func(guarded)
        return not stopped


def as_producer(source):
    """Return `source` as a :class:`Producer`.

    Producers are returned as is, other callables are assumed to follow
    the producer protocol and are wrapped in a :class:`FuncProducer`.
    """
    if isinstance(source, Producer):
        return source
    elif callable(source):
        return FuncProducer(source)
    else:
        raise TypeError(
            "expected a producer or a callable, not "
            + source.__class__.__name__)


class LazyMapping(Producer):
    def __init__(self, f, producer):
        check_callable(f)
        self.f = f
        self.producer = as_producer(producer)
        self.stack = format_stack(2)

    def drive(self, consumer):
        i = 0

        def forward(x):
            nonlocal i
            value = evaluate(
                self.__class__.__name__, i, self.f, x, stack=self.stack)
            i += 1
            return consumer(value)

        return self.producer.drive(forward)


def lazy_map(f, producer):
    """Return a producer of `f` applied to the items of `producer`.

    `f` is only called on items pulled by a consumer, items after a
    stop request are never transformed.

    Example:

        >>> def naturals(consumer):
        ...     i = 0
        ...     while consumer(i):
        ...         i += 1
        ...
        >>> squares = seqmanip.lazy_map(lambda x: x ** 2, naturals)
        >>> seqmanip.lazy_find(lambda x: x > 50, squares)
        FindResult(value=64, found=True)
    """
    return LazyMapping(f, producer)


class LazyFiltering(Producer):
    def __init__(self, pred, producer):
        check_callable(pred, "pred")
        self.pred = pred
        self.producer = as_producer(producer)
        self.stack = format_stack(2)

    def drive(self, consumer):
        i = 0

        def forward(x):
            nonlocal i
            keep = evaluate(
                self.__class__.__name__, i, self.pred, x, stack=self.stack)
            i += 1
            return consumer(x) if keep else True

        return self.producer.drive(forward)


def lazy_filter(pred, producer):
    """Return a producer of the items of `producer` satisfying `pred`.

    Rejected items are still pulled from `producer` but never reach the
    consumer.

    Example:

        >>> evens = seqmanip.lazy_filter(
        ...     lambda x: x % 2 == 0, seqmanip.from_sequence(range(10)))
        >>> seqmanip.to_list(evens)
        [0, 2, 4, 6, 8]
    """
    return LazyFiltering(pred, producer)


def lazy_find(pred, producer, default=None):
    """Drive `producer` until an item satisfies `pred`.

    The producer is asked to stop as soon as a match is found.

    Args:
        pred (Callable[[Any], bool]):
            The test to apply on items.
        producer (Producer or Callable):
            The source of items.
        default (Any):
            Value reported when no item matches (default None).

    Return:
        FindResult: A `(value, found)` pair, `found` is False when the
        producer ran out without a match, in which case `value` is
        `default`.
    """
    check_callable(pred, "pred")
    producer = as_producer(producer)

    result = FindResult(default, False)
    i = 0

    def consumer(x):
        nonlocal result, i
        if evaluate("lazy_find", i, pred, x):
            result = FindResult(x, True)
            return False

        i += 1
        return True

    producer.drive(consumer)
    return result
