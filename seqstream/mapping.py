from .errors import evaluation_error, format_stack, should_wrap
from .utils import basic_getitem


class Mapping(object):
    def __init__(self, f, sequence):
        if not callable(f):
            raise TypeError("f must be callable")

        self.sequence = sequence
        self.f = f
        self.stack = format_stack(2)

    def __len__(self):
        return len(self.sequence)

    def __iter__(self):
        i = 0
        try:
            for value in self.sequence:
                yield self.f(value)
                i += 1

        except Exception as error:
            if should_wrap(error):
                raise evaluation_error(self.__class__.__name__, i, self.stack) from error
            raise

    @basic_getitem
    def __getitem__(self, item):
        value = self.sequence[item]
        try:
            return self.f(value)

        except Exception as error:
            if should_wrap(error):
                raise evaluation_error(self.__class__.__name__, item, self.stack) from error
            raise


def side_effect(f):
    """Turn a side-effect function into one that returns its argument."""
    if not callable(f):
        raise TypeError("f must be callable")

    def call(value):
        f(value)
        return value

    return call


def unpacked(f):
    """Turn a function of several arguments into one taking a tuple."""
    if not callable(f):
        raise TypeError("f must be callable")

    def call(args):
        return f(*args)

    return call


class Filtering(object):
    def __init__(self, predicate, sequence, negate=False):
        if not callable(predicate):
            raise TypeError("predicate must be callable")

        self.sequence = sequence
        self.predicate = predicate
        self.negate = negate
        self.stack = format_stack(2)

    def __iter__(self):
        i = 0
        try:
            for value in self.sequence:
                if bool(self.predicate(value)) != self.negate:
                    yield value
                i += 1

        except Exception as error:
            if should_wrap(error):
                raise evaluation_error(self.__class__.__name__, i, self.stack) from error
            raise


class Uniq(object):
    """First occurrence of every distinct value, in order of appearance.

    Hashable values are remembered in a set, others are compared one by
    one against previously kept values, so the memory cost is
    proportional to the number of distinct values. Values unequal to
    themselves, such as nan, are always kept.
    """

    def __init__(self, sequence):
        self.sequence = sequence

    def __iter__(self):
        seen = set()
        seen_unhashable = []

        for value in self.sequence:
            if value != value:  # nan equals nothing, not even itself
                yield value
                continue

            try:
                if value in seen or value in seen_unhashable:
                    continue
                seen.add(value)

            except TypeError:  # unhashable
                if value in seen_unhashable or any(value == s for s in seen):
                    continue
                seen_unhashable.append(value)

            yield value
