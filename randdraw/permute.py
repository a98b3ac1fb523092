from __future__ import annotations

from collections.abc import MutableSequence
from typing import Any

from .source import UniformSource


def shuffle(x: MutableSequence[Any], *, rng: UniformSource) -> None:
    """Permute ``x`` in place with the Fisher-Yates algorithm.

    Walks from the back, swapping each position with a uniformly chosen
    position at or before it. Consumes one draw per element.
    """

    remaining = len(x)
    while remaining:
        j = int(float(rng.random()) * remaining)
        if j >= remaining:
            j = remaining - 1
        remaining -= 1
        x[remaining], x[j] = x[j], x[remaining]
