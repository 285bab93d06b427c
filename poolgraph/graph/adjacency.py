"""Adjacency list pool graph and route search.

Pools (edges) and tokens (nodes) form a sparse graph concentrated on a few
hub tokens such as SOL and USDC, so an adjacency list is cheaper to build and
hold than a matrix.

Routes are found for at most two hops:
- Direct (1 hop): [pool(start, end)]
- 2-hop: [pool(start, x), pool(x, end)]

Walks are searched once per unordered token pair and then oriented to the
direction each caller asked for.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

import structlog

from poolgraph.config import DEFAULT_POOL_GRAPH_CONFIG, PoolGraphConfig
from poolgraph.graph.route_id import (
    deconstruct_route_id,
    get_internal_route_id,
    get_search_route_id,
)
from poolgraph.graph.types import (
    Hop,
    PoolGraphEdge,
    Route,
    RouteSearchEntries,
    RouteSearchOptions,
)
from poolgraph.models.pool import PoolTokenPair
from poolgraph.models.types import AddressLike, normalize_address

logger = structlog.get_logger()

# token mint -> edges, in insertion order
AdjacencyPoolGraphMap = dict[str, list[PoolGraphEdge]]

# internal route id -> walks, each walk a list of pool addresses
PoolWalks = dict[str, list[list[str]]]


def build_pool_graph(pools: Iterable[PoolTokenPair]) -> AdjacencyPoolGraphMap:
    """Build the adjacency lists for a pool snapshot.

    Each pool is recorded once on each of its two tokens. Repeated pool
    addresses are ignored, so feeding the same pool twice gives the same
    graph as feeding it once.

    Args:
        pools: Pool edges (address, token_mint_a, token_mint_b)

    Returns:
        Mapping of token mint to its pool edges
    """
    graph: AdjacencyPoolGraphMap = {}
    # Pool addresses already recorded per token, for O(1) dedup
    inserted: dict[str, set[str]] = {}
    pool_count = 0

    for pool in pools:
        address = normalize_address(pool.address)
        mint_a = normalize_address(pool.token_mint_a)
        mint_b = normalize_address(pool.token_mint_b)
        pool_count += 1

        for mint in (mint_a, mint_b):
            if mint not in graph:
                graph[mint] = []
                inserted[mint] = set()

        if address not in inserted[mint_a]:
            graph[mint_a].append(PoolGraphEdge(address=address, other_token=mint_b))
            inserted[mint_a].add(address)

        if address not in inserted[mint_b]:
            graph[mint_b].append(PoolGraphEdge(address=address, other_token=mint_a))
            inserted[mint_b].add(address)

    logger.debug("pool_graph_built", tokens=len(graph), pools=pool_count)
    return graph


def find_walks(
    token_pairs: Iterable[tuple[str, str]],
    graph: AdjacencyPoolGraphMap,
    intermediate_tokens: set[str] | None = None,
) -> PoolWalks:
    """Find all walks of length 1 and 2 for each token pair.

    Walks are oriented from the lower to the higher mint of each pair
    (internal route id order). A pair whose unordered form was already
    searched earlier in the batch is skipped. Pairs with no walk are left out
    of the result.

    Args:
        token_pairs: Normalized (start, end) mints, start != end
        graph: Adjacency lists from build_pool_graph
        intermediate_tokens: Allowed middle tokens for 2-hop walks, or None

    Returns:
        Mapping of internal route id to walks of pool addresses
    """
    walks: PoolWalks = {}
    searched: set[str] = set()

    for token_from, token_to in token_pairs:
        internal_route_id = get_internal_route_id(token_from, token_to)
        if internal_route_id in searched:
            continue
        searched.add(internal_route_id)

        internal_from, internal_to = sorted((token_from, token_to))
        edges_from = graph.get(internal_from, [])
        edges_to = graph.get(internal_to, [])
        pools_to = {edge.address for edge in edges_to}

        routes: list[list[str]] = []

        # Direct routes: every pool shared by both tokens
        routes.extend([edge.address] for edge in edges_from if edge.address in pools_to)

        # 2-hop routes: token_from --> intermediate --> token_to
        for first in edges_from:
            if first.address in pools_to:
                continue
            intermediate = first.other_token
            if intermediate_tokens is not None and intermediate not in intermediate_tokens:
                continue
            routes.extend(
                [first.address, second.address]
                for second in edges_to
                if second.other_token == intermediate
            )

        if routes:
            walks[internal_route_id] = routes

    return walks


def get_hops_from_walk(
    internal_route_id: str, search_route_id: str, walk: Sequence[str]
) -> tuple[Hop, ...]:
    """Orient a walk to the searched direction.

    The walk is shared by both directions of a pair, so it is read in
    reverse rather than reversed in place.
    """
    internal_start, _ = deconstruct_route_id(internal_route_id)
    search_start, _ = deconstruct_route_id(search_route_id)
    ordered = reversed(walk) if search_start != internal_start else walk
    return tuple(Hop(pool_address=address) for address in ordered)


class AdjacencyListPoolGraph:
    """Pool graph backed by adjacency lists, with cached route queries.

    The adjacency lists are fixed at construction. Query results are cached
    per directed token pair for the lifetime of the instance; a changed pool
    set needs a new instance.

    The cache is not locked. Callers sharing one instance across threads
    must serialize queries themselves.

    Usage:
        graph = AdjacencyListPoolGraph(pools)
        routes = graph.get_route(usdc_mint, orca_mint)
    """

    def __init__(
        self,
        pools: Iterable[PoolTokenPair],
        config: PoolGraphConfig | None = None,
    ) -> None:
        """Build the graph from a pool snapshot.

        Args:
            pools: Pool edges to build the graph from
            config: Query defaults (default intermediate tokens)
        """
        self._config = config or DEFAULT_POOL_GRAPH_CONFIG
        self._graph: AdjacencyPoolGraphMap = build_pool_graph(pools)
        # search route id -> routes, written once per directed pair
        self._cache: dict[str, list[Route]] = {}

    def get_route(
        self,
        start_mint: AddressLike,
        end_mint: AddressLike,
        options: RouteSearchOptions | None = None,
    ) -> list[Route]:
        """Find all routes from start_mint to end_mint.

        Query mints are not checked for base58 format. A mint that is not
        in the graph, malformed or not, has no routes and yields [].

        Args:
            start_mint: Token to swap from
            end_mint: Token to swap to
            options: Optional intermediate-token allow-list

        Returns:
            Direct and 2-hop routes, unranked. Empty if none exist or
            start_mint == end_mint.
        """
        results = self.get_routes_for_pairs([(start_mint, end_mint)], options)
        return results[0][1]

    def get_routes_for_pairs(
        self,
        search_token_pairs: Sequence[tuple[AddressLike, AddressLike]],
        options: RouteSearchOptions | None = None,
    ) -> RouteSearchEntries:
        """Find routes for a batch of token pairs.

        Pairs already answered are served from the cache. The remaining pairs
        are searched together, so a pair queried in both directions is only
        searched once.

        Args:
            search_token_pairs: (start, end) mints to search
            options: Optional intermediate-token allow-list

        Returns:
            One (search_route_id, routes) entry per input pair, in input order
        """
        pairs = [(normalize_address(start), normalize_address(end)) for start, end in search_token_pairs]

        pairs_to_find = [
            (start, end)
            for start, end in pairs
            if start != end and get_search_route_id(start, end) not in self._cache
        ]

        walk_map: PoolWalks = {}
        if pairs_to_find:
            walk_map = find_walks(pairs_to_find, self._graph, self._get_intermediate_tokens(options))

        logger.debug(
            "route_search_batch",
            pairs=len(pairs),
            searched=len(pairs_to_find),
            walks_found=len(walk_map),
        )

        results: RouteSearchEntries = []
        for start, end in pairs:
            search_route_id = get_search_route_id(start, end)

            routes = self._cache.get(search_route_id)
            if routes is None:
                internal_route_id = get_internal_route_id(start, end)
                routes = [
                    Route(
                        start_token_mint=start,
                        end_token_mint=end,
                        hops=get_hops_from_walk(internal_route_id, search_route_id, walk),
                    )
                    for walk in walk_map.get(internal_route_id, [])
                ]
                self._cache[search_route_id] = routes

            # Copy so callers cannot alter the cached list
            results.append((search_route_id, list(routes)))

        return results

    def _get_intermediate_tokens(self, options: RouteSearchOptions | None) -> set[str] | None:
        """Resolve the intermediate-token allow-list for a query."""
        if options is None:
            tokens = self._config.default_intermediate_tokens
        else:
            tokens = options.intermediate_tokens
        if tokens is None:
            return None
        return {normalize_address(token) for token in tokens}

    def get_edges(self, token: AddressLike) -> list[PoolGraphEdge]:
        """Get the pool edges of a token (empty if unknown)."""
        return list(self._graph.get(normalize_address(token), []))

    def get_neighbors(self, token: AddressLike) -> set[str]:
        """Get all tokens sharing at least one pool with the given token."""
        return {edge.other_token for edge in self._graph.get(normalize_address(token), [])}

    def has_token(self, token: AddressLike) -> bool:
        """Check if a token exists in the graph."""
        return normalize_address(token) in self._graph

    def tokens(self) -> list[str]:
        """All token mints in the graph, in first-seen order."""
        return list(self._graph)

    @property
    def token_count(self) -> int:
        """Number of unique tokens in the graph."""
        return len(self._graph)

    @property
    def pool_count(self) -> int:
        """Number of unique pools in the graph."""
        return len({edge.address for edges in self._graph.values() for edge in edges})

    @property
    def cache_size(self) -> int:
        """Number of directed token pairs with cached results."""
        return len(self._cache)


__all__ = [
    "AdjacencyListPoolGraph",
    "AdjacencyPoolGraphMap",
    "PoolWalks",
    "build_pool_graph",
    "find_walks",
    "get_hops_from_walk",
]
