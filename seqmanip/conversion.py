"""Conversions between sequences and producers."""

from .lazy import IterableProducer, SequenceProducer, as_producer


def to_list(producer):
    """Drive a producer to the end and return all its items in a list.

    .. warning::

        This never returns if `producer` is infinite, restrict it
        beforehand or use :func:`seqmanip.lazy_find` instead.

    Example:

        >>> def countdown(consumer):
        ...     for i in (3, 2, 1):
        ...         if not consumer(i):
        ...             return
        ...
        >>> seqmanip.to_list(countdown)
        [3, 2, 1]
    """
    producer = as_producer(producer)

    result = []

    def consumer(x):
        result.append(x)
        return True

    producer.drive(consumer)
    return result


def from_sequence(sequence):
    """Return a producer of the items of a sequence.

    The producer can be driven any number of times, each drive starts
    over from the first item.
    """
    return SequenceProducer(sequence)


def from_iterable(iterable):
    """Return a one-shot producer over an iterable or iterator.

    The items are pulled from a single iterator, which is useful to
    wrap external sources such as files or generators. Once driven, the
    producer is spent: driving it again produces nothing, even if the
    first drive was interrupted before the end.
    """
    return IterableProducer(iterable)
