"""Pool graph route discovery - Python Implementation."""

from poolgraph.config import DEFAULT_POOL_GRAPH_CONFIG, PoolGraphConfig
from poolgraph.errors import InvalidRouteIdError, PoolGraphError
from poolgraph.fetcher import (
    IGNORE_CACHE,
    PREFER_CACHE,
    AccountFetchOptions,
    PoolAccountFetcher,
    PoolData,
)
from poolgraph.graph import (
    AdjacencyListPoolGraph,
    Hop,
    PoolGraph,
    PoolGraphBuilder,
    PoolGraphEdge,
    Route,
    RouteSearchEntries,
    RouteSearchOptions,
    build_pool_graph,
    deconstruct_route_id,
    get_internal_route_id,
    get_search_route_id,
)
from poolgraph.models import PoolTokenPair

__version__ = "0.1.0"
__all__ = [
    "AccountFetchOptions",
    "AdjacencyListPoolGraph",
    "DEFAULT_POOL_GRAPH_CONFIG",
    "Hop",
    "IGNORE_CACHE",
    "InvalidRouteIdError",
    "PREFER_CACHE",
    "PoolAccountFetcher",
    "PoolData",
    "PoolGraph",
    "PoolGraphBuilder",
    "PoolGraphConfig",
    "PoolGraphEdge",
    "PoolGraphError",
    "PoolTokenPair",
    "Route",
    "RouteSearchEntries",
    "RouteSearchOptions",
    "build_pool_graph",
    "deconstruct_route_id",
    "get_internal_route_id",
    "get_search_route_id",
    "__version__",
]
