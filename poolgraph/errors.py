"""Pool graph error classes."""


class PoolGraphError(Exception):
    """Base error for pool graph operations."""

    pass


class InvalidRouteIdError(PoolGraphError):
    """Route id did not split into exactly two non-empty token addresses.

    Raised only when an internal invariant is broken. Callers should let it
    propagate rather than treat it as a missing route.
    """

    pass
