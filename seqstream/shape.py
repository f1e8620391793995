"""Views that regroup elements or flatten groups."""

import itertools

from .utils import isint, basic_getitem


class Chunking(object):
    def __init__(self, sequence, chunk_size):
        if not isint(chunk_size):
            raise TypeError(
                "chunk size must be an integer, not "
                + chunk_size.__class__.__name__)
        if chunk_size <= 0:
            raise ValueError("chunk size must be a positive integer")

        self.sequence = sequence
        self.chunk_size = chunk_size

    def __len__(self):
        return -(-len(self.sequence) // self.chunk_size)

    def __iter__(self):
        chunk = []
        for value in self.sequence:
            chunk.append(value)
            if len(chunk) == self.chunk_size:
                yield chunk
                chunk = []

        if len(chunk) > 0:
            yield chunk

    @basic_getitem
    def __getitem__(self, key):
        start = key * self.chunk_size
        try:
            stop = min(start + self.chunk_size, len(self.sequence))
        except TypeError:  # upstream has no len, index until exhausted
            chunk = []
            for i in range(start, start + self.chunk_size):
                try:
                    chunk.append(self.sequence[i])
                except IndexError:
                    break

            if len(chunk) == 0:
                raise IndexError(self.__class__.__name__ + " index out of range")
            return chunk

        return [self.sequence[i] for i in range(start, stop)]


class Splitting(object):
    """Groups of elements delimited by a separator value.

    A delimiter at either end of the sequence and consecutive delimiters
    produce empty groups, an empty sequence produces no group.
    """

    def __init__(self, sequence, token):
        self.sequence = sequence
        self.token = token

    def __iter__(self):
        iterator = iter(self.sequence)
        try:
            first = next(iterator)
        except StopIteration:
            return

        group = []
        for value in itertools.chain([first], iterator):
            if value == self.token:
                yield group
                group = []
            else:
                group.append(value)

        yield group


class Joining(object):
    def __init__(self, sequence):
        self.sequence = sequence

    def __iter__(self):
        return itertools.chain.from_iterable(self.sequence)
