"""
A python library to transform sequences and item producers.

The seqmanip package contains the usual functional building blocks
(map, filter, reduce, flatten, chunk...) in two flavours:

- eager functions take a sequence (anything that can be iterated in a
  stable order such as lists or tuples) and return their result right
  away, inputs are never modified;
- lazy functions take a producer, an object that pushes items one at a
  time to a consumer callback which can stop it at any point, and
  return a new producer. Nothing is evaluated until the final producer
  is driven, which makes it possible to work on infinite sources.

:func:`to_list` and :func:`from_sequence` convert from one flavour to
the other.
"""

from .conversion import from_iterable, from_sequence, to_list
from .errors import EvaluationError, seterr
from .filtering import FindResult, every, find, includes, sfilter, some
from .lazy import (
    FuncProducer,
    IterableProducer,
    LazyFiltering,
    LazyMapping,
    Producer,
    SequenceProducer,
    as_producer,
    lazy_filter,
    lazy_find,
    lazy_map,
)
from .mapping import flat_map, for_each, smap, starmap
from .reduction import sreduce
from .shape import chunk

__all__ = [
    "EvaluationError",
    "seterr",
    "smap",
    "starmap",
    "flat_map",
    "for_each",
    "sfilter",
    "find",
    "FindResult",
    "some",
    "every",
    "includes",
    "sreduce",
    "chunk",
    "Producer",
    "SequenceProducer",
    "IterableProducer",
    "FuncProducer",
    "LazyMapping",
    "LazyFiltering",
    "as_producer",
    "lazy_map",
    "lazy_filter",
    "lazy_find",
    "to_list",
    "from_sequence",
    "from_iterable",
]
