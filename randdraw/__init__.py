"""randdraw — random variates from an explicit uniform source.

Continuous samplers (uniform, exponential, Pareto, bounded Pareto), an O(1)
alias-table sampler for arbitrary discrete weights, and Fisher-Yates shuffle.
"""

from importlib.metadata import PackageNotFoundError, version as _dist_version

from randdraw.alias import AliasArrays, AliasTable, build_alias_arrays
from randdraw.continuous import exponential, pareto, pareto_bounded, uniform
from randdraw.draw import Draw
from randdraw.errors import PreconditionError
from randdraw.permute import shuffle
from randdraw.source import UniformSource, as_source, default_source

try:
    __version__ = _dist_version("randdraw")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0"

__all__ = [
    "__version__",
    # Library instance
    "Draw",
    # Sources
    "UniformSource",
    "as_source",
    "default_source",
    # Continuous samplers
    "exponential",
    "pareto",
    "pareto_bounded",
    "uniform",
    # Discrete sampling
    "AliasArrays",
    "AliasTable",
    "build_alias_arrays",
    # Permutations
    "shuffle",
    # Errors
    "PreconditionError",
]
