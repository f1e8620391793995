from operator import itemgetter

from .errors import evaluation_error, format_stack, should_wrap
from .indexing import Indexing, InclusiveRange, Source, Taking
from .mapping import Filtering, Mapping, Uniq, side_effect, unpacked
from .shape import Chunking, Joining, Splitting
from .utils import get_logger


logger = get_logger(__name__)

_missing = object()


class Stream(object):
    """A lazy, chainable view over an ordered sequence.

    A stream only describes how to produce its elements: combinators such
    as :meth:`map` or :meth:`filter` return a new stream wrapping the
    previous view and never touch the elements. Work is done when a
    terminal operation (:meth:`collect`, :meth:`sum`, :meth:`count`...)
    or a plain ``for`` loop traverses the stream, and each traversal
    starts over from the source.

    Streams support :func:`len` and indexing whenever the underlying view
    can provide them without evaluating the elements, for instance after
    :meth:`map` or :meth:`chunk_every`, but not after :meth:`filter`.

    Example:

        >>> s = seqstream.range(1, 5).map(lambda x: x * 2)
        >>> s.filter(lambda x: x < 5).collect()
        [2, 4]
        >>> s[-1]
        10
    """

    def __init__(self, view):
        self.view = view

    def __iter__(self):
        return iter(self.view)

    def __len__(self):
        return len(self.view)

    def __getitem__(self, key):
        item = self.view[key]
        if isinstance(key, slice):
            return Stream(item)
        return item

    def __contains__(self, value):
        return self.contains(value)

    def __repr__(self):
        names = []
        view = self.view
        while view is not None:
            names.append(view.__class__.__name__)
            view = None if isinstance(view, Source) \
                else getattr(view, 'sequence', None)

        return "Stream(" + " -> ".join(reversed(names)) + ")"

    # Lazy transforms ---------------------------------------------------------

    def map(self, f):
        """Return a stream of `f(x)` for every element `x`."""
        return Stream(Mapping(f, self.view))

    def starmap(self, f):
        """Map a function over a stream of argument tuples.

        Example:

            >>> seqstream.of(['a', 'b']).with_index().starmap(
            ...     lambda i, v: v * (i + 1)).collect()
            ['a', 'bb']
        """
        return Stream(Mapping(unpacked(f), self.view))

    def each(self, f):
        """Call `f` on every element when traversed, pass elements through.

        `f` is called once per element and per traversal, in order, and
        never before the stream is actually traversed. Its return value
        is ignored.

        Example:

            >>> seen = []
            >>> s = seqstream.range(1, 3).each(seen.append)
            >>> seen
            []
            >>> s.run()
            >>> seen
            [1, 2, 3]
        """
        return Stream(Mapping(side_effect(f), self.view))

    def filter(self, predicate):
        """Keep the elements for which `predicate` is true."""
        return Stream(Filtering(predicate, self.view))

    def reject(self, predicate):
        """Keep the elements for which `predicate` is false."""
        return Stream(Filtering(predicate, self.view, negate=True))

    def take(self, n):
        """Return a stream over the first `n` elements.

        Args:
            n (int): Non-negative number of elements, the stream is
                shorter if upstream has less than `n` elements.
        """
        return Stream(Taking(self.view, n))

    def keys(self):
        """Project the first component of pairs."""
        return Stream(Mapping(itemgetter(0), self.view))

    def values(self):
        """Project the second component of pairs."""
        return Stream(Mapping(itemgetter(1), self.view))

    # Compound transforms -----------------------------------------------------

    def with_index(self):
        """Pair every element with its position.

        Example:

            >>> seqstream.of('abc').with_index().collect()
            [(0, 'a'), (1, 'b'), (2, 'c')]
        """
        return Stream(Indexing(self.view))

    def uniq(self):
        """Keep the first occurrence of every distinct value.

        An element is kept if no element before it compares equal, so
        the order of first appearances is preserved.

        Example:

            >>> seqstream.of([1, 2, 1, 3, 4, 5, 1, 6, 7]).uniq().collect()
            [1, 2, 3, 4, 5, 6, 7]
        """
        return Stream(Uniq(self.view))

    def chunk_every(self, size):
        """Return a stream of consecutive lists of `size` elements.

        The last chunk holds the remaining elements and may be shorter,
        it is never empty.

        Args:
            size (int): Positive number of elements per chunk.

        Example:

            >>> seqstream.range(1, 5).chunk_every(2).collect()
            [[1, 2], [3, 4], [5]]
        """
        return Stream(Chunking(self.view, size))

    def split_by(self, token):
        """Split the stream into lists delimited by elements equal to `token`.

        Delimiters are dropped. Leading, trailing and consecutive delimiters
        produce empty groups, as :meth:`python:str.split` does.

        Example:

            >>> seqstream.of([1, 2, 1, 3, 4, 5, 1, 6, 7]).split_by(1).collect()
            [[], [2], [3, 4, 5], [6, 7]]
        """
        return Stream(Splitting(self.view, token))

    def join(self):
        """Flatten a stream of sequences by one level."""
        return Stream(Joining(self.view))

    # Terminal operations -----------------------------------------------------

    def collect(self):
        """Evaluate the stream and return its elements as a list."""
        return list(self.view)

    def run(self):
        """Evaluate the stream for its side effects only."""
        for _ in self.view:
            pass

    def reduce(self, initial, f):
        """Fold `f` over the elements from left to right.

        The fold is evaluated immediately, starting with `initial` as the
        accumulator: :code:`f(f(f(initial, x0), x1), x2)...`.

        Return:
            Stream: A stream holding the result as its single element.
        """
        if not callable(f):
            raise TypeError("f must be callable")

        accumulator = initial
        i = 0
        try:
            for value in self.view:
                accumulator = f(accumulator, value)
                i += 1

        except Exception as error:
            if should_wrap(error):
                raise evaluation_error("reduce", i, format_stack(1)) from error
            raise

        return of([accumulator])

    def sum(self):
        """Return the sum of the elements, 0 for an empty stream."""
        return sum(self.view, 0)

    def min(self):
        """Return the smallest element, raise ValueError if there is none."""
        result = min(self.view, default=_missing)
        if result is _missing:
            raise ValueError("min() of an empty stream")
        return result

    def max(self):
        """Return the largest element, raise ValueError if there is none."""
        result = max(self.view, default=_missing)
        if result is _missing:
            raise ValueError("max() of an empty stream")
        return result

    def count(self, value=_missing):
        """Count elements.

        Args:
            value (Optional[Any]): If specified, only count elements equal
                to `value`.

        Return:
            int: The number of (matching) elements.
        """
        if value is not _missing:
            return sum(1 for x in self.view if x == value)

        try:
            return len(self.view)
        except TypeError:
            logger.debug("length of %r is not known, traversing it", self)
            return sum(1 for _ in self.view)

    def contains(self, value):
        """Return wether some element is equal to `value`."""
        for x in self.view:
            if x == value:
                return True

        return False

    def all(self, predicate):
        """Return wether all elements satisfy `predicate` (True if empty)."""
        for _ in Filtering(predicate, self.view, negate=True):
            return False

        return True

    def any(self, predicate):
        """Return wether some element satisfies `predicate` (False if empty)."""
        for _ in Filtering(predicate, self.view):
            return True

        return False


def of(source):
    """Return a stream over the elements of a collection.

    Args:
        source (Iterable): An ordered collection that can be iterated
            several times, such as a list, a tuple, a string or a range.
            Single-pass iterables must be wrapped with
            :func:`seqstream.buffered` instead.

    Example:

        >>> seqstream.of([('b', 3), ('a', 4)]).keys().collect()
        ['b', 'a']
    """
    if isinstance(source, Stream):
        return Stream(source.view)

    return Stream(Source(source))


def inclusive_range(begin, end):
    """Return a stream of the integers from `begin` to `end`, both included.

    Unlike :class:`python:range`, the upper bound is part of the sequence.
    The stream is empty when `end < begin`.

    Example:

        >>> seqstream.range(1, 5).collect()
        [1, 2, 3, 4, 5]
        >>> seqstream.range(5, 1).collect()
        []
    """
    return Stream(InclusiveRange(begin, end))
