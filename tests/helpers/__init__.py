"""Test helpers module for shared test utilities.

- constants: Token mints, pool addresses and make_address
- factories: Pool edge factory and route inspection helpers
- mocks: In-memory account fetcher
"""

from tests.helpers.constants import (
    MSOL,
    ORCA,
    POOL_1,
    POOL_2,
    POOL_3,
    POOL_4,
    POOL_5,
    POOL_6,
    SOL,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    TOKEN_D,
    TOKEN_X,
    USDC,
    USDT,
    make_address,
)
from tests.helpers.factories import make_pool, route_pools

__all__ = [
    # Constants
    "SOL",
    "USDC",
    "USDT",
    "MSOL",
    "ORCA",
    "TOKEN_A",
    "TOKEN_B",
    "TOKEN_C",
    "TOKEN_D",
    "TOKEN_X",
    "POOL_1",
    "POOL_2",
    "POOL_3",
    "POOL_4",
    "POOL_5",
    "POOL_6",
    "make_address",
    # Factories
    "make_pool",
    "route_pools",
]
