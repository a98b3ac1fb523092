"""Continuous variates by inverse-CDF transforms of a single uniform draw."""

from __future__ import annotations

import math

import numpy as np

from .errors import PreconditionError
from .source import UniformSource


def _require_positive(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise PreconditionError(f"{name} must be finite and > 0, got {value!r}")
    return value


def uniform(low: float, high: float, *, rng: UniformSource) -> float:
    """Uniform variate on [low, high).

    ``low > high`` is accepted and yields values on (high, low].
    """

    low = float(low)
    high = float(high)
    return float(rng.random()) * (high - low) + low


def exponential(lam: float, *, rng: UniformSource) -> float:
    """Exponential variate with rate ``lam`` (mean ``1 / lam``)."""

    lam = _require_positive("lam", lam)
    u = float(rng.random())
    # u == 0.0 maps to +inf.
    with np.errstate(divide="ignore"):
        return float(-np.log(u) / lam)


def pareto(x_min: float, alpha: float, *, rng: UniformSource) -> float:
    """Pareto (type I) variate with scale ``x_min`` and shape ``alpha``."""

    x_min = _require_positive("x_min", x_min)
    alpha = _require_positive("alpha", alpha)
    u = float(rng.random())
    with np.errstate(divide="ignore", over="ignore"):
        return float(x_min * np.power(u, -1.0 / alpha))


def pareto_bounded(low: float, high: float, alpha: float, *, rng: UniformSource) -> float:
    """Pareto variate truncated to [low, high].

    Notes
    -----
    Inverse CDF of the bounded Pareto distribution. With ``l = low**alpha`` and
    ``h = high**alpha`` a uniform draw ``u`` maps to

        ((h + u * (l - h)) / (l * h)) ** (-1 / alpha)

    which is ``low`` at ``u = 0`` and tends to ``high`` as ``u -> 1``. The
    same expression is evaluated in log space as

        r = exp(alpha * (log(low) - log(high)))
        x = exp(log(low) - log((1 - u) + u * r) / alpha)

    so ``l`` and ``h`` are never formed and large ``alpha`` or extreme bounds
    cannot overflow. ``low == high`` returns ``low`` exactly.
    """

    low = _require_positive("low", low)
    high = _require_positive("high", high)
    alpha = _require_positive("alpha", alpha)
    if low > high:
        raise PreconditionError(f"low must be <= high, got low={low!r} high={high!r}")

    u = float(rng.random())
    if low == high:
        return low

    with np.errstate(over="ignore", under="ignore"):
        log_low = np.log(low)
        r = np.exp(alpha * (log_low - np.log(high)))
        x = float(np.exp(log_low - np.log((1.0 - u) + u * r) / alpha))
    # Rounding can step just outside the support.
    return min(max(x, low), high)
