"""Element-producing views and views driven by element positions."""

import itertools
from collections.abc import Iterator, Mapping

from .utils import isint, basic_getitem, normalize_slice


class Source(object):
    def __init__(self, sequence):
        try:
            iterator = iter(sequence)
        except TypeError:
            raise TypeError(
                "stream source must be iterable, not "
                + sequence.__class__.__name__) from None

        if isinstance(sequence, Iterator) or iterator is sequence:
            raise TypeError(
                "stream source must support repeated iteration, "
                "use buffered() to wrap single-pass iterables")

        self.sequence = sequence

    def __len__(self):
        return len(self.sequence)

    def __iter__(self):
        return iter(self.sequence)

    def __getitem__(self, key):
        if isinstance(self.sequence, Mapping):
            raise TypeError(
                self.__class__.__name__ + " over a mapping does not support "
                "positional indexing")

        return self._getitem(key)

    @basic_getitem
    def _getitem(self, key):
        return self.sequence[key]


class InclusiveRange(object):
    """Integers from `begin` to `end`, both included."""

    def __init__(self, begin, end):
        if not isint(begin) or not isint(end):
            raise TypeError(
                "range bounds must be integers, not {} and {}".format(
                    begin.__class__.__name__, end.__class__.__name__))

        self.begin = int(begin)
        # reversed bounds give an empty range
        self.end = max(int(end), self.begin - 1)

    def __len__(self):
        return self.end - self.begin + 1

    def __iter__(self):
        return iter(range(self.begin, self.end + 1))

    def __getitem__(self, key):
        if isinstance(key, slice):
            start, stop, step = normalize_slice(
                key.start, key.stop, key.step, len(self))
            if step == 1:
                return InclusiveRange(self.begin + start, self.begin + stop - 1)
            return Source(range(self.begin + start, self.begin + stop, step))

        elif not isint(key):
            raise TypeError(
                self.__class__.__name__ + " indices must be integers or "
                "slices, not " + key.__class__.__name__)

        if key < -len(self) or key >= len(self):
            raise IndexError(self.__class__.__name__ + " index out of range")

        if key < 0:
            key = len(self) + key

        return self.begin + key


class Taking(object):
    def __init__(self, sequence, n):
        if not isint(n):
            raise TypeError(
                "number of items to take must be an integer, not "
                + n.__class__.__name__)
        if n < 0:
            raise ValueError("number of items to take must be non-negative")

        if isinstance(sequence, Taking):  # collapse nested takes
            n = min(n, sequence.n)
            sequence = sequence.sequence

        self.sequence = sequence
        self.n = n

    def __len__(self):
        return min(self.n, len(self.sequence))

    def __iter__(self):
        return itertools.islice(self.sequence, self.n)

    @basic_getitem
    def __getitem__(self, key):
        if key >= self.n:
            raise IndexError(self.__class__.__name__ + " index out of range")

        return self.sequence[key]


class Indexing(object):
    def __init__(self, sequence):
        self.sequence = sequence

    def __len__(self):
        return len(self.sequence)

    def __iter__(self):
        return enumerate(self.sequence)

    @basic_getitem
    def __getitem__(self, key):
        return key, self.sequence[key]
