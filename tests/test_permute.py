from __future__ import annotations

import itertools
from collections import Counter

import numpy as np
import pytest

from randdraw import shuffle


class _Scripted:
    def __init__(self, values):
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        v = self._values[self.calls]
        self.calls += 1
        return float(v)


def test_shuffle_keeps_multiset():
    rng = np.random.default_rng(0)
    x = [3, 1, 1, "a", None, 2.5, 3]
    before = Counter(map(repr, x))
    for _ in range(50):
        shuffle(x, rng=rng)
        assert len(x) == 7
        assert Counter(map(repr, x)) == before


def test_shuffle_returns_none_and_keeps_identity():
    x = list(range(10))
    ident = id(x)
    assert shuffle(x, rng=np.random.default_rng(1)) is None
    assert id(x) == ident
    assert sorted(x) == list(range(10))


@pytest.mark.parametrize("x", [[], ["only"]])
def test_shuffle_short_sequences_are_noops(x):
    before = list(x)
    shuffle(x, rng=np.random.default_rng(2))
    assert x == before


def test_shuffle_swaps_from_the_back():
    x = ["a", "b", "c"]
    src = _Scripted([0.0, 0.0, 0.0])
    shuffle(x, rng=src)
    assert x == ["b", "c", "a"]
    assert src.calls == 3

    y = ["a", "b", "c"]
    shuffle(y, rng=_Scripted([0.99, 0.99, 0.99]))
    assert y == ["a", "b", "c"]


def test_shuffle_visits_all_orderings_uniformly():
    stats = pytest.importorskip("scipy.stats")
    rng = np.random.default_rng(12345)
    trials = 60_000
    counts: Counter = Counter()
    for _ in range(trials):
        x = [1, 2, 3, 4, 5]
        shuffle(x, rng=rng)
        counts[tuple(x)] += 1

    perms = list(itertools.permutations([1, 2, 3, 4, 5]))
    assert set(counts) == set(perms)
    observed = np.array([counts[p] for p in perms], dtype=np.float64)
    assert stats.chisquare(observed).pvalue > 1e-4


def test_shuffle_numpy_and_bytearray():
    a = np.arange(20)
    shuffle(a, rng=np.random.default_rng(3))
    assert sorted(a.tolist()) == list(range(20))

    b = bytearray(b"abcdef")
    shuffle(b, rng=np.random.default_rng(4))
    assert sorted(b) == sorted(b"abcdef")


def test_shuffle_immutable_sequence_raises():
    with pytest.raises(TypeError):
        shuffle((1, 2, 3), rng=np.random.default_rng(5))
