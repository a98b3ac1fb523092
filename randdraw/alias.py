from __future__ import annotations

import warnings
from collections import deque
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

import numpy as np

from .errors import PreconditionError
from .source import UniformSource, as_source


@dataclass(frozen=True)
class AliasArrays:
    """Committed state of an alias table (Vose's method).

    Attributes
    ----------
    prob
        float64 array of shape (n,) with the biased-coin acceptance
        probability of each slot, values in [0, 1].
    alias
        int64 array of shape (n,) with alias indices in [0, n).
    weight_sum
        Sum of the input weights as float64 (0.0 for the single-slot
        fallback table).
    """

    prob: np.ndarray
    alias: np.ndarray
    weight_sum: float

    @property
    def n(self) -> int:
        return int(self.prob.size)


_UNSET: Any = object()

_EMPTY = AliasArrays(
    prob=np.empty((0,), dtype=np.float64),
    alias=np.empty((0,), dtype=np.int64),
    weight_sum=0.0,
)


def _single_slot() -> AliasArrays:
    return AliasArrays(
        prob=np.zeros((1,), dtype=np.float64),
        alias=np.zeros((1,), dtype=np.int64),
        weight_sum=0.0,
    )


def _is_weight_sequence(weights: Any) -> bool:
    if isinstance(weights, np.ndarray):
        return weights.ndim >= 1
    if isinstance(weights, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(weights, Sequence)


def build_alias_arrays(weights: Any, *, stacklevel: int = 2) -> AliasArrays:
    """Build alias arrays for sampling index ``i`` with probability ∝ ``weights[i]``.

    Notes
    -----
    - Weights need not be normalized but must be finite and non-negative with
      a positive total; otherwise :class:`PreconditionError` is raised.
    - An empty sequence, or input that is not a sequence at all, yields the
      single-slot table ``prob=[0]``, ``alias=[0]`` which always samples 0.
      Non-sequence input also emits a ``RuntimeWarning``; ``stacklevel`` is
      passed to :func:`warnings.warn` and counts from the caller of this
      function.
    - Both worklists are processed first-in-first-out, so the pairing of
      small and large slots follows the input order.
    """

    if not _is_weight_sequence(weights):
        warnings.warn(
            f"alias table weights must be a sequence, got {type(weights).__name__}; "
            "falling back to a single-slot table that always samples 0",
            RuntimeWarning,
            stacklevel=stacklevel,
        )
        return _single_slot()

    try:
        w = np.asarray(weights, dtype=np.float64).ravel()
    except (TypeError, ValueError) as e:
        raise PreconditionError(f"weights must be numeric: {e}") from e
    n = int(w.size)
    if n == 0:
        return _single_slot()

    if not np.all(np.isfinite(w)):
        raise PreconditionError("weights must be finite")
    if np.any(w < 0.0):
        raise PreconditionError("weights must be >= 0")
    w_sum = float(np.sum(w))
    if not np.isfinite(w_sum) or w_sum <= 0.0:
        raise PreconditionError(f"weights must have a finite positive sum, got {w_sum!r}")

    p = [float(n) * float(wi) / w_sum for wi in w]

    small: deque[int] = deque()
    large: deque[int] = deque()
    for i in range(n):
        if p[i] < 1.0:
            small.append(i)
        else:
            large.append(i)

    prob = np.ones((n,), dtype=np.float64)
    alias = np.arange(n, dtype=np.int64)

    while small and large:
        s = small.popleft()
        l = large.popleft()
        prob[s] = p[s]
        alias[s] = l
        p[l] = p[l] + p[s] - 1.0
        if p[l] < 1.0:
            small.append(l)
        else:
            large.append(l)

    # Leftovers sit at 1.0 up to rounding.
    for i in large:
        prob[i] = 1.0
        alias[i] = i
    for i in small:
        prob[i] = 1.0
        alias[i] = i

    return AliasArrays(prob=prob, alias=alias, weight_sum=w_sum)


class AliasTable:
    """O(1) discrete sampler over indices ``0..n-1``.

    The table starts empty (``n == 0``) and is replaced wholesale by each
    :meth:`init`. Sampling a table with ``n <= 1`` returns 0 without drawing
    from the source; otherwise each sample consumes exactly two uniform draws.

    Not safe for concurrent ``init``/``sample`` on one instance.
    """

    def __init__(self, weights: Any = _UNSET, *, rng: Any = None) -> None:
        self._rng: UniformSource = as_source(rng)
        self._table: AliasArrays = _EMPTY
        # Only an omitted argument skips the build; None falls back like in init().
        if weights is not _UNSET:
            self._table = build_alias_arrays(weights, stacklevel=3)

    def init(self, weights: Any) -> None:
        """Rebuild the table from ``weights``; see :func:`build_alias_arrays`."""

        self._table = build_alias_arrays(weights, stacklevel=3)

    @property
    def rng(self) -> UniformSource:
        return self._rng

    @property
    def n(self) -> int:
        return self._table.n

    @property
    def prob(self) -> np.ndarray:
        return self._table.prob.copy()

    @property
    def alias(self) -> np.ndarray:
        return self._table.alias.copy()

    @property
    def weight_sum(self) -> float:
        return self._table.weight_sum

    def sample(self) -> int:
        table = self._table
        n = table.n
        if n <= 1:
            return 0

        i = int(float(self._rng.random()) * n)
        if i >= n:
            i = n - 1
        if float(self._rng.random()) < float(table.prob[i]):
            return i
        return int(table.alias[i])

    def sample_many(self, size: int) -> np.ndarray:
        """Draw ``size`` samples, identical to ``size`` successive :meth:`sample` calls."""

        size = int(size)
        if size < 0:
            raise PreconditionError("size must be >= 0")
        out = np.empty((size,), dtype=np.int64)
        for k in range(size):
            out[k] = self.sample()
        return out

    def probabilities(self) -> np.ndarray:
        """Distribution over indices encoded by the current table.

        Slot ``i`` keeps ``prob[i] / n`` of the mass for itself and hands
        ``(1 - prob[i]) / n`` to ``alias[i]``.
        """

        table = self._table
        n = table.n
        if n == 0:
            return np.empty((0,), dtype=np.float64)
        out = table.prob.copy()
        np.add.at(out, table.alias, 1.0 - table.prob)
        return out / float(n)

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n={self.n})"
