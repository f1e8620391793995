from operator import add
from random import randint, random

import pytest
import seqstream
from seqstream import Stream


def test_collect():
    assert seqstream.range(1, 10).collect() == list(range(1, 11))
    assert isinstance(seqstream.of((1, 2)).collect(), list)
    assert isinstance(seqstream.of("ab").chunk_every(1).collect(), list)
    assert list(seqstream.range(1, 3)) == [1, 2, 3]


def test_run():
    seen = []
    assert seqstream.range(1, 5).each(seen.append).run() is None
    assert seen == [1, 2, 3, 4, 5]


def test_reduce():
    result = seqstream.range(1, 5).reduce(0, add)
    assert isinstance(result, Stream)
    assert result.collect() == [15]
    assert result.map(lambda x: x * 2).collect() == [30]

    # strictly left to right
    assert seqstream.of("abc").reduce("", lambda acc, x: x + acc).collect() == ["cba"]
    assert seqstream.of([]).reduce(42, add).collect() == [42]

    # evaluated immediately
    seen = []
    seqstream.range(1, 3).each(seen.append).reduce(0, add)
    assert seen == [1, 2, 3]

    with pytest.raises(TypeError):
        seqstream.range(1, 5).reduce(0, None)


def test_sum():
    assert seqstream.range(1, 5).sum() == 15
    assert seqstream.of([]).sum() == 0
    data = [random() for _ in range(100)]
    assert seqstream.of(data).sum() == pytest.approx(sum(data))

    with pytest.raises(TypeError):
        seqstream.of(["a", "b"]).sum()


def test_min_max():
    assert seqstream.range(1, 5).min() == 1
    assert seqstream.range(1, 5).max() == 5
    data = [randint(-100, 100) for _ in range(100)]
    assert seqstream.of(data).min() == min(data)
    assert seqstream.of(data).max() == max(data)
    assert seqstream.of(["b", "a", "c"]).max() == "c"

    with pytest.raises(ValueError):
        seqstream.of([]).min()
    with pytest.raises(ValueError):
        seqstream.range(5, 1).max()
    with pytest.raises(ValueError):
        seqstream.range(1, 5).filter(lambda x: x > 5).min()


def test_count():
    assert seqstream.range(1, 5).count() == 5
    assert seqstream.range(5, 1).count() == 0
    assert seqstream.range(1, 10).filter(lambda x: x % 2 == 0).count() == 5
    assert seqstream.range(1, 3).map(lambda v: [v] * v).join().count() == 6

    data = [randint(0, 5) for _ in range(100)]
    for v in range(6):
        assert seqstream.of(data).count(v) == data.count(v)
    assert seqstream.of(data).count(None) == 0


def test_contains():
    assert seqstream.range(1, 5).contains(1)
    assert not seqstream.range(1, 5).contains(6)
    assert 3 in seqstream.range(1, 5)
    assert 0 not in seqstream.of([])

    # stops at first match
    seen = []
    assert seqstream.range(1, 100).each(seen.append).contains(3)
    assert seen == [1, 2, 3]


def test_all_any():
    assert not seqstream.range(1, 5).all(lambda x: x == 5)
    assert seqstream.range(1, 5).all(lambda x: x > 0)
    assert seqstream.range(1, 5).any(lambda x: x == 5)
    assert not seqstream.range(1, 5).any(lambda x: x > 5)

    empty = seqstream.of([])
    for pred in [lambda x: True, lambda x: False]:
        assert empty.all(pred)
        assert not empty.any(pred)

    seen = []
    assert seqstream.range(1, 100).each(seen.append).any(lambda x: x == 2)
    assert seen == [1, 2]

    data = [randint(0, 10) for _ in range(50)]
    stream = seqstream.of(data)

    def pred(x):
        return x < 9

    assert stream.all(pred) == (stream.count() == stream.filter(pred).count())


def test_len_and_indexing():
    stream = seqstream.range(1, 10).map(lambda x: x * 10)
    assert len(stream) == 10
    assert stream[0] == 10
    assert stream[-2] == 90
    assert stream[::3].collect() == [10, 40, 70, 100]
    assert stream[::-4].collect() == [100, 60, 20]
    assert stream[2:5][1:].collect() == [40, 50]

    with pytest.raises(IndexError):
        stream[10]
    with pytest.raises(TypeError):
        stream["a"]
    with pytest.raises(TypeError):
        len(seqstream.range(1, 3).map(lambda v: [v]).join())


def test_repr():
    stream = seqstream.range(1, 5).map(abs).filter(bool)
    assert repr(stream) == "Stream(InclusiveRange -> Mapping -> Filtering)"
    assert repr(seqstream.of([1])) == "Stream(Source)"


def test_reuse():
    stream = seqstream.range(1, 5).map(lambda x: x * 2)
    assert stream.collect() == stream.collect()
    assert stream.sum() == 30
    assert stream.uniq().collect() == [2, 4, 6, 8, 10]
