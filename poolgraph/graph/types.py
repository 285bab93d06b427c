"""Type definitions for pool graph routes."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, TypeAlias

from poolgraph.models.types import AddressLike


@dataclass(frozen=True)
class PoolGraphEdge:
    """Adjacency list entry: a pool and the token on its other side."""

    address: str
    other_token: str


@dataclass(frozen=True)
class Hop:
    """A single swap across one pool."""

    pool_address: str


@dataclass(frozen=True)
class Route:
    """An ordered sequence of hops from start token to end token."""

    start_token_mint: str
    end_token_mint: str
    hops: tuple[Hop, ...]

    @property
    def pool_addresses(self) -> list[str]:
        """Pool addresses in swap order."""
        return [hop.pool_address for hop in self.hops]

    @property
    def is_multihop(self) -> bool:
        """Check if this route goes through an intermediate token."""
        return len(self.hops) > 1


@dataclass(frozen=True)
class RouteSearchOptions:
    """Options for route queries.

    Attributes:
        intermediate_tokens: Tokens allowed as the middle token of a 2-hop
            route. None allows any token, an empty sequence allows none.
            Direct routes are never filtered.
    """

    intermediate_tokens: Sequence[AddressLike] | None = None


# (search_route_id, routes) per queried pair, in query order
RouteSearchEntries: TypeAlias = list[tuple[str, list[Route]]]


class PoolGraph(Protocol):
    """Protocol for graphs that answer route queries."""

    def get_route(
        self,
        start_mint: AddressLike,
        end_mint: AddressLike,
        options: RouteSearchOptions | None = None,
    ) -> list[Route]: ...

    def get_routes_for_pairs(
        self,
        search_token_pairs: Sequence[tuple[AddressLike, AddressLike]],
        options: RouteSearchOptions | None = None,
    ) -> RouteSearchEntries: ...


__all__ = [
    "Hop",
    "PoolGraph",
    "PoolGraphEdge",
    "Route",
    "RouteSearchEntries",
    "RouteSearchOptions",
]
