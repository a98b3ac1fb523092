"""One source, every sampler.

:class:`Draw` is the library instance: it owns a single uniform source and
routes all samplers, including its alias table, through it. Passing the same
integer seed twice gives two instances that produce identical streams.
"""

from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from . import continuous as _continuous
from .alias import AliasTable
from .permute import shuffle as _shuffle
from .source import UniformSource, as_source


class Draw:
    def __init__(self, rng: Any = None) -> None:
        self._rng: UniformSource = as_source(rng)
        self.custom = AliasTable(rng=self._rng)

    @property
    def source(self) -> UniformSource:
        return self._rng

    def random(self) -> float:
        return float(self._rng.random())

    def uniform(self, low: float, high: float) -> float:
        return _continuous.uniform(low, high, rng=self._rng)

    def exponential(self, lam: float) -> float:
        return _continuous.exponential(lam, rng=self._rng)

    def pareto(self, x_min: float, alpha: float) -> float:
        return _continuous.pareto(x_min, alpha, rng=self._rng)

    def pareto_bounded(self, low: float, high: float, alpha: float) -> float:
        return _continuous.pareto_bounded(low, high, alpha, rng=self._rng)

    def shuffle(self, x: MutableSequence[Any]) -> None:
        _shuffle(x, rng=self._rng)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(source={type(self._rng).__name__}, custom={self.custom!r})"
