"""Pool graph construction and route search.

Module structure:
- route_id.py: search / internal route id encoding
- types.py: Route, Hop, PoolGraphEdge, RouteSearchOptions, PoolGraph protocol
- adjacency.py: adjacency list graph, walk finding and the result cache
- builder.py: PoolGraphBuilder from pool edges or fetched pool addresses
"""

from poolgraph.graph.adjacency import AdjacencyListPoolGraph, build_pool_graph
from poolgraph.graph.builder import PoolGraphBuilder
from poolgraph.graph.route_id import (
    deconstruct_route_id,
    get_internal_route_id,
    get_search_route_id,
)
from poolgraph.graph.types import (
    Hop,
    PoolGraph,
    PoolGraphEdge,
    Route,
    RouteSearchEntries,
    RouteSearchOptions,
)

__all__ = [
    "AdjacencyListPoolGraph",
    "Hop",
    "PoolGraph",
    "PoolGraphBuilder",
    "PoolGraphEdge",
    "Route",
    "RouteSearchEntries",
    "RouteSearchOptions",
    "build_pool_graph",
    "deconstruct_route_id",
    "get_internal_route_id",
    "get_search_route_id",
]
