"""Route id encoding.

A route id joins two token mints with ``ROUTE_ID_DELIMITER``:

- search route id: caller order kept, keys the result cache and the
  entries returned to callers
- internal route id: mints sorted, keys undirected walk computation so
  (A, B) and (B, A) share one search
"""

from poolgraph.constants import ROUTE_ID_DELIMITER
from poolgraph.errors import InvalidRouteIdError
from poolgraph.models.types import AddressLike, normalize_address


def get_search_route_id(token_a: AddressLike, token_b: AddressLike) -> str:
    """Build the direction-preserving route id for a token pair."""
    return f"{normalize_address(token_a)}{ROUTE_ID_DELIMITER}{normalize_address(token_b)}"


def get_internal_route_id(token_a: AddressLike, token_b: AddressLike) -> str:
    """Build the order-independent route id for a token pair."""
    first, second = sorted((normalize_address(token_a), normalize_address(token_b)))
    return f"{first}{ROUTE_ID_DELIMITER}{second}"


def deconstruct_route_id(route_id: str) -> tuple[str, str]:
    """Split a route id back into its two token mints.

    Args:
        route_id: A search or internal route id

    Returns:
        (first_mint, second_mint) in the order they appear in the id

    Raises:
        InvalidRouteIdError: If the id does not hold exactly two non-empty mints
    """
    parts = route_id.split(ROUTE_ID_DELIMITER)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise InvalidRouteIdError(f"Invalid route id: {route_id!r}")
    return parts[0], parts[1]


__all__ = ["deconstruct_route_id", "get_internal_route_id", "get_search_route_id"]
