"""
A python library to chain lazy transformations over sequences.

The seqstream package wraps ordered collections (lists, tuples, ranges,
strings...) into :class:`Stream` objects that expose a fluent chain of
combinators such as :meth:`Stream.map`, :meth:`Stream.filter`,
:meth:`Stream.uniq` or :meth:`Stream.chunk_every`.

Combinators only describe the transformation: nothing is evaluated until a
terminal operation such as :meth:`Stream.collect`, :meth:`Stream.sum` or
:meth:`Stream.any` traverses the stream, which makes it cheap to build and
reuse pipelines.

Example:

    >>> import seqstream
    >>> seqstream.range(1, 5).map(lambda x: x * 2).collect()
    [2, 4, 6, 8, 10]
"""

from .buffering import buffered
from .errors import EvaluationError, seterr
from .stream import Stream, of, inclusive_range

range = inclusive_range

__all__ = [
    "Stream",
    "of",
    "range",
    "inclusive_range",
    "buffered",
    "EvaluationError",
    "seterr",
]
