from __future__ import annotations


class PreconditionError(ValueError):
    """A sampler was called with parameters outside its domain.

    Raised before any uniform draw is consumed and before any table state is
    touched, so the caller can correct the arguments and retry.
    """
