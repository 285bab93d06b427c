#!/usr/bin/env python3
"""Analyze pool graph structure and look up routes.

Usage:
    python scripts/analyze_graph.py pools.json
    python scripts/analyze_graph.py pools.json --pair <MINT_A> <MINT_B> --via <MINT_X>

The pools file is a JSON list of {"address", "tokenMintA", "tokenMintB"}.
"""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

import structlog

sys.path.insert(0, str(Path(__file__).parent.parent))

from poolgraph.graph import PoolGraphBuilder, RouteSearchOptions
from poolgraph.models import PoolTokenPair

logger = structlog.get_logger()


def load_pools(path: Path) -> list[PoolTokenPair]:
    """Load and validate pool edges from a JSON file."""
    with open(path) as f:
        data = json.load(f)
    return [PoolTokenPair.model_validate(item) for item in data]


def main() -> int:
    parser = argparse.ArgumentParser(description="Analyze a pool graph and query routes")
    parser.add_argument("pools", type=Path, help="JSON file with pool edges")
    parser.add_argument(
        "--pair",
        nargs=2,
        action="append",
        default=[],
        metavar=("START", "END"),
        help="Token pair to route (repeatable)",
    )
    parser.add_argument(
        "--via",
        action="append",
        default=None,
        metavar="MINT",
        help="Allowed intermediate token (repeatable, default: any)",
    )
    parser.add_argument("--top", type=int, default=10, help="Number of hub tokens to list")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
    )

    if not args.pools.exists():
        logger.error("pools_file_not_found", path=str(args.pools))
        print(f"Error: Pools file not found: {args.pools}")
        return 1

    pools = load_pools(args.pools)
    graph = PoolGraphBuilder.build_pool_graph(pools)

    print("Graph structure:")
    print(f"  Tokens (nodes): {graph.token_count}")
    print(f"  Pools (edges): {graph.pool_count}")

    degrees = {token: len(graph.get_edges(token)) for token in graph.tokens()}
    if degrees:
        print(f"  Max degree: {max(degrees.values())}")
        print(f"  Avg degree: {sum(degrees.values()) / len(degrees):.1f}")

        # High-degree tokens are the usual hubs (SOL, USDC, ...)
        print(f"\nTop {args.top} highest degree tokens:")
        for token, degree in sorted(degrees.items(), key=lambda x: x[1], reverse=True)[: args.top]:
            print(f"  {token}: {degree} pools")

    if not args.pair:
        return 0

    options = RouteSearchOptions(intermediate_tokens=args.via) if args.via is not None else None

    print("\nRoutes:")
    for start, end in args.pair:
        t0 = time.perf_counter()
        routes = graph.get_route(start, end, options)
        elapsed = time.perf_counter() - t0
        print(f"  {start[:8]}/{end[:8]}: {len(routes)} routes, {elapsed * 1000:.2f}ms")
        for route in routes:
            print(f"    {' -> '.join(route.pool_addresses)}")

        # Second call (cached)
        t0 = time.perf_counter()
        graph.get_route(start, end, options)
        elapsed = time.perf_counter() - t0
        print(f"    (cached): {elapsed * 1000:.3f}ms")

    return 0


if __name__ == "__main__":
    sys.exit(main())
