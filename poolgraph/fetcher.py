"""Interface to the external pool account fetcher.

The fetcher decodes on-chain pool accounts and keeps its own account cache.
This package only depends on the shape below; implementations live with the
network layer.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class AccountFetchOptions:
    """How stale a cached account may be before the fetcher refetches it.

    Attributes:
        max_age: Maximum cache age in seconds. ``math.inf`` always serves
            from cache when possible, ``0`` always goes to the network,
            ``None`` leaves the choice to the fetcher.
    """

    max_age: float | None = None


PREFER_CACHE = AccountFetchOptions(max_age=math.inf)
IGNORE_CACHE = AccountFetchOptions(max_age=0)


class PoolData(Protocol):
    """Decoded pool state. Only the two token mints are read here."""

    @property
    def token_mint_a(self) -> Any: ...
    @property
    def token_mint_b(self) -> Any: ...


class PoolAccountFetcher(Protocol):
    """Protocol for the batched pool account fetcher."""

    async def get_pools(
        self,
        addresses: Sequence[str],
        opts: AccountFetchOptions | None = None,
    ) -> Mapping[str, PoolData | None]:
        """Fetch decoded pools, keyed by address. Missing pools map to None."""
        ...


__all__ = [
    "AccountFetchOptions",
    "IGNORE_CACHE",
    "PREFER_CACHE",
    "PoolAccountFetcher",
    "PoolData",
]
