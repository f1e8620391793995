"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler


def isint(x):
    """Return wether `x` is an integral number (booleans excluded)."""
    return isinstance(x, numbers.Integral) and not isinstance(x, bool)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def basic_getitem(func):
    """Give a view negative indices and slices on top of `func`.

    `func` only ever receives a non-negative position. Bounds are
    checked against `len(view)` when the view has one, otherwise `func`
    is trusted to raise :class:`IndexError` itself. Slices return a
    :class:`SeqSlice` over the view.
    """
    def getitem(self, key):
        name = self.__class__.__name__

        if isinstance(key, slice):
            return SeqSlice(self, key)
        elif not isint(key):
            raise TypeError(
                name + " indices must be integers or slices, not "
                + key.__class__.__name__)

        try:
            size = len(self)
        except TypeError:  # unsized view
            if key < 0:
                raise
            size = None

        if key < 0:
            key += size
        if key < 0 or (size is not None and key >= size):
            raise IndexError(name + " index out of range")

        return func(self, key)

    return getitem


def normalize_slice(start, stop, step, size):
    """Resolve a slice against a view of length `size`.

    Return a `(start, stop, step)` triplet such that positions are
    `start + i * step` for `i` in `range(abs(stop - start) // abs(step))`.
    Out of range bounds are clamped, a zero step raises `ValueError`.
    """
    if step is None:
        step = 1
    elif step == 0:
        raise ValueError("slice step cannot be 0")

    if start is None:
        start = 0 if step > 0 else size - 1
    elif start >= 0:
        start = min(start, size if step > 0 else size - 1)
    else:
        start = max(0 if step > 0 else -1, size + start)

    if stop is None:
        stop = size if step > 0 else -1
    elif stop >= 0:
        stop = min(stop, size)
    else:
        stop = max(-1, size + stop)

    if (stop - start) / step < 0:
        stop = start

    size = abs(stop - start) - 1
    abs_step = abs(step)
    numel = (size + abs_step - (size % abs_step)) // abs_step
    stop = start + numel * step

    return start, stop, step


class SeqSlice:
    """Read-only slice of a random-access view, nested slices are flattened."""

    def __init__(self, sequence, key):
        if isinstance(sequence, SeqSlice):
            key_start, key_stop, key_step = normalize_slice(
                key.start, key.stop, key.step, len(sequence))
            numel = abs(key_stop - key_start) // abs(key_step)
            start = sequence.start + key_start * sequence.step
            step = key_step * sequence.step
            stop = start + step * numel
            sequence = sequence.sequence

        else:
            start, stop, step = normalize_slice(
                key.start, key.stop, key.step, len(sequence))

        self.sequence = sequence
        self.start = start
        self.stop = stop
        self.step = step

    def __len__(self):
        return abs(self.stop - self.start) // abs(self.step)

    def __iter__(self):
        for i in range(self.start, self.stop, self.step):
            yield self.sequence[i]

    @basic_getitem
    def __getitem__(self, key):
        return self.sequence[self.start + key * self.step]
