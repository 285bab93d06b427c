"""Configuration for pool graph construction and route search."""

from __future__ import annotations

import os
from dataclasses import dataclass

from poolgraph.fetcher import PREFER_CACHE, AccountFetchOptions
from poolgraph.models.types import normalize_address

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class PoolGraphConfig:
    """Centralized configuration for building and querying pool graphs.

    Attributes:
        fetch_options: Cache policy passed to the account fetcher when
            building a graph from pool addresses (default: prefer cache).
        warn_on_unresolved_pools: If True, log a warning when pool addresses
            resolve to no pool data. The addresses are dropped either way.
        default_intermediate_tokens: Allow-list applied to queries made
            without explicit options. None allows any intermediate token.
    """

    fetch_options: AccountFetchOptions = PREFER_CACHE
    warn_on_unresolved_pools: bool = True
    default_intermediate_tokens: tuple[str, ...] | None = None

    @classmethod
    def from_env(cls) -> PoolGraphConfig:
        """Build a config from environment variables.

        - POOLGRAPH_WARN_ON_UNRESOLVED: warn on dropped pools (default: true)
        - POOLGRAPH_INTERMEDIATE_TOKENS: comma separated mint allow-list
          (default: unset, any intermediate allowed)

        Raises:
            ValueError: If an intermediate token is not a valid address
        """
        warn = os.environ.get("POOLGRAPH_WARN_ON_UNRESOLVED", "true").lower() in _TRUTHY

        raw_tokens = os.environ.get("POOLGRAPH_INTERMEDIATE_TOKENS")
        intermediate_tokens: tuple[str, ...] | None = None
        if raw_tokens is not None:
            intermediate_tokens = tuple(
                normalize_address(t.strip(), validate=True) for t in raw_tokens.split(",") if t.strip()
            )

        return cls(
            warn_on_unresolved_pools=warn,
            default_intermediate_tokens=intermediate_tokens,
        )


# Default configuration instance
DEFAULT_POOL_GRAPH_CONFIG = PoolGraphConfig()
