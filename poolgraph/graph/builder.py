"""Builders for pool graphs.

Callers holding decoded pool data use build_pool_graph directly. Callers
holding only pool addresses use build_pool_graph_with_fetch, which resolves
the addresses through the account fetcher in one batched call.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog
from pydantic import ValidationError

from poolgraph.config import DEFAULT_POOL_GRAPH_CONFIG, PoolGraphConfig
from poolgraph.fetcher import AccountFetchOptions, PoolAccountFetcher
from poolgraph.graph.adjacency import AdjacencyListPoolGraph
from poolgraph.models.pool import PoolTokenPair
from poolgraph.models.types import AddressLike, normalize_address

logger = structlog.get_logger()

# Max unresolved addresses echoed in the warning event
_UNRESOLVED_SAMPLE_SIZE = 5


class PoolGraphBuilder:
    """Builds AdjacencyListPoolGraph instances from pool data or addresses."""

    @staticmethod
    def build_pool_graph(
        pools: Iterable[PoolTokenPair],
        config: PoolGraphConfig | None = None,
    ) -> AdjacencyListPoolGraph:
        """Build a graph from decoded pool edges.

        Args:
            pools: Pool edges (address, token_mint_a, token_mint_b)
            config: Graph configuration (default: DEFAULT_POOL_GRAPH_CONFIG)

        Returns:
            A new AdjacencyListPoolGraph
        """
        return AdjacencyListPoolGraph(pools, config)

    @staticmethod
    async def build_pool_graph_with_fetch(
        pool_addresses: Iterable[AddressLike],
        fetcher: PoolAccountFetcher,
        fetch_options: AccountFetchOptions | None = None,
        config: PoolGraphConfig | None = None,
    ) -> AdjacencyListPoolGraph:
        """Fetch pools by address and build a graph from them.

        Addresses the fetcher cannot resolve, or whose decoded mints are not
        valid addresses, are left out of the graph without raising. A warning
        is logged for them unless disabled in the config.

        Args:
            pool_addresses: Pool account addresses
            fetcher: Account fetcher used for the batched pool lookup
            fetch_options: Cache policy for the fetch (default: config.fetch_options)
            config: Graph configuration (default: DEFAULT_POOL_GRAPH_CONFIG)

        Returns:
            A new AdjacencyListPoolGraph over the resolved pools
        """
        config = config or DEFAULT_POOL_GRAPH_CONFIG
        addresses = [normalize_address(address) for address in pool_addresses]

        fetched = await fetcher.get_pools(addresses, fetch_options or config.fetch_options)

        pools: list[PoolTokenPair] = []
        unresolved: list[str] = []
        for address in addresses:
            pool = fetched.get(address)
            if pool is None:
                unresolved.append(address)
                continue
            try:
                pools.append(
                    PoolTokenPair(
                        address=address,
                        token_mint_a=normalize_address(pool.token_mint_a),
                        token_mint_b=normalize_address(pool.token_mint_b),
                    )
                )
            except ValidationError as err:
                logger.debug("pool_graph_invalid_pool", pool=address, errors=err.error_count())
                unresolved.append(address)

        if unresolved and config.warn_on_unresolved_pools:
            logger.warning(
                "pool_graph_unresolved_pools",
                requested=len(addresses),
                dropped=len(unresolved),
                sample=unresolved[:_UNRESOLVED_SAMPLE_SIZE],
            )

        return AdjacencyListPoolGraph(pools, config)


__all__ = ["PoolGraphBuilder"]
