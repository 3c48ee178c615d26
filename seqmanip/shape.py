"""Operations that change how the items of a sequence are grouped."""

from .utils import isint, get_logger


def chunk(sequence, size, drop_last=False, pad=None):
    """Split a sequence into consecutive groups of `size` items.

    Args:
        sequence (Sequence):
            The input sequence.
        size (int):
            Number of items by group, must be positive.
        drop_last (bool):
            Wether the last group should be ignored if it contains less
            than `size` items. (default False)
        pad (Optional[any]):
            padding item value to use in order to increase the size of
            the last group to `size` elements, set to `None` to prevent
            padding and return an incomplete group anyways (default
            None).

    Return:
        List[List]: The groups, in order. Concatenating them gives back
        the input items unless `drop_last` or `pad` alter the last one.

    Raises:
        TypeError: if `size` is not an integer.
        ValueError: if `size` is not positive.

    Example:

        >>> seqmanip.chunk([1, 2, 3, 4, 5], 2)
        [[1, 2], [3, 4], [5]]
        >>> seqmanip.chunk([1, 2, 3, 4, 5], 2, pad=0)
        [[1, 2], [3, 4], [5, 0]]
        >>> seqmanip.chunk([1, 2, 3, 4, 5], 2, drop_last=True)
        [[1, 2], [3, 4]]
    """
    if not isint(size):
        raise TypeError("chunk size must be an integer, not "
                        + size.__class__.__name__)
    if size <= 0:
        raise ValueError("chunk size must be greater than 0")

    if drop_last and pad is not None:
        logger = get_logger(__name__)
        logger.warning("pad value is ignored because drop_last is true")

    items = list(sequence)
    result = [items[i:i + size] for i in range(0, len(items), size)]

    if result and len(result[-1]) < size:
        if drop_last:
            result.pop()
        elif pad is not None:
            result[-1].extend([pad] * (size - len(result[-1])))

    return result
