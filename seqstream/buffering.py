from .utils import isint, get_logger


logger = get_logger(__name__)


class Buffering:
    def __init__(self, iterable):
        self.iterator = iter(iterable)
        self.buffer = []
        self.exhausted = False

    def _pull(self):
        """Fetch one more item from the source, return wether it worked."""
        if self.exhausted:
            return False

        try:
            self.buffer.append(next(self.iterator))
        except StopIteration:
            self.exhausted = True
            self.iterator = None
            logger.debug("source exhausted after %d items", len(self.buffer))
            return False

        return True

    def __iter__(self):
        i = 0
        while i < len(self.buffer) or self._pull():
            yield self.buffer[i]
            i += 1

    def __getitem__(self, key):
        if isinstance(key, slice):
            raise TypeError(self.__class__.__name__ + " does not support slicing")
        elif not isint(key):
            raise TypeError(
                self.__class__.__name__ + " indices must be integers, not "
                + key.__class__.__name__)
        elif key < 0:
            raise IndexError(
                "Cannot use indices relative to length on "
                + self.__class__.__name__)

        while key >= len(self.buffer):
            if not self._pull():
                raise IndexError(self.__class__.__name__ + " index out of range")

        return self.buffer[key]


def buffered(iterable):
    """Return a stream over a single-pass iterable.

    Items are pulled from `iterable` only when a traversal reaches them
    and are kept so that later traversals replay the same values. Only
    the prefix actually consumed is ever read, which makes it possible
    to stream from unbounded generators as long as the pipeline is
    truncated, for instance with :meth:`Stream.take`.

    Args:
        iterable (Iterable): Any iterable, possibly single-pass or
            infinite.

    Return:
        Stream: A stream over the buffered items.

    Example:

        >>> import itertools
        >>> naturals = seqstream.buffered(itertools.count())
        >>> naturals.map(lambda x: x * x).take(4).collect()
        [0, 1, 4, 9]
    """
    from .stream import Stream
    return Stream(Buffering(iterable))
