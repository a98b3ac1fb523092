"""Uniform [0, 1) random sources.

Every sampler in :mod:`randdraw` takes its randomness from an explicit source
object instead of a process-wide global. A source is anything with a
``random()`` method returning a float in [0, 1); both
:class:`numpy.random.Generator` and :class:`random.Random` qualify.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class UniformSource(Protocol):
    def random(self) -> float:
        """Return the next uniform variate in [0, 1)."""
        ...


def default_source() -> np.random.Generator:
    """Fresh OS-entropy seeded generator."""

    return np.random.default_rng()


def as_source(rng: Any = None) -> UniformSource:
    """Coerce ``rng`` into a uniform source.

    Parameters
    ----------
    rng
        ``None`` for a fresh :func:`default_source`, an ``int`` or
        :class:`numpy.random.SeedSequence` to seed a new
        :class:`numpy.random.Generator`, or an existing source which is
        returned unchanged.
    """

    if rng is None:
        return default_source()
    if isinstance(rng, bool):
        raise TypeError("rng must be a uniform source, an int seed or None, not bool")
    if isinstance(rng, (int, np.integer, np.random.SeedSequence)):
        return np.random.default_rng(rng)
    if callable(getattr(rng, "random", None)):
        return rng
    raise TypeError(f"rng must be a uniform source, an int seed or None, got {type(rng).__name__}")
