from __future__ import annotations

import random

import numpy as np
import pytest

import randdraw
from randdraw import AliasTable, Draw, UniformSource, as_source, default_source


def test_default_source_is_numpy_generator():
    src = default_source()
    assert isinstance(src, np.random.Generator)
    assert isinstance(src, UniformSource)
    u = src.random()
    assert 0.0 <= u < 1.0


def test_as_source_seeds_and_passthrough():
    a = as_source(42)
    b = as_source(np.random.SeedSequence(42))
    assert a.random() == b.random()

    gen = np.random.default_rng(1)
    assert as_source(gen) is gen
    stdlib = random.Random(3)
    assert as_source(stdlib) is stdlib
    assert isinstance(as_source(None), np.random.Generator)


@pytest.mark.parametrize("bad", ["seed", 1.5, object(), True])
def test_as_source_rejects_non_sources(bad):
    with pytest.raises(TypeError):
        as_source(bad)


def test_draw_is_reproducible_from_seed():
    def run(d: Draw) -> list:
        d.custom.init([1, 2, 3])
        x = list(range(8))
        d.shuffle(x)
        return [
            d.random(),
            d.uniform(-2.0, 5.0),
            d.exponential(0.5),
            d.pareto(1.0, 2.0),
            d.pareto_bounded(1.0, 4.0, 1.5),
            d.custom.sample(),
            x,
        ]

    assert run(Draw(99)) == run(Draw(99))


def test_draw_shares_one_source():
    d = Draw(random.Random(7))
    assert d.custom.rng is d.source
    assert isinstance(d.custom, AliasTable)
    assert d.custom.n == 0
    assert d.custom.sample() == 0


def test_draw_with_stdlib_source():
    d = Draw(random.Random(11))
    d.custom.init([0.0, 1.0])
    assert {d.custom.sample() for _ in range(100)} == {1}
    v = d.uniform(5.0, 6.0)
    assert 5.0 <= v < 6.0


def test_draw_propagates_precondition_errors():
    d = Draw(0)
    with pytest.raises(randdraw.PreconditionError):
        d.exponential(0.0)
    with pytest.raises(randdraw.PreconditionError):
        d.pareto_bounded(2.0, 1.0, 1.0)


def test_public_surface():
    for name in randdraw.__all__:
        assert hasattr(randdraw, name)
    assert isinstance(randdraw.__version__, str)
