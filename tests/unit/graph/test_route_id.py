"""Tests for route id encoding."""

import pytest

from poolgraph.constants import ROUTE_ID_DELIMITER
from poolgraph.errors import InvalidRouteIdError, PoolGraphError
from poolgraph.graph.route_id import (
    deconstruct_route_id,
    get_internal_route_id,
    get_search_route_id,
)
from tests.helpers import ORCA, USDC


class FakePubkey:
    """Key object whose str() is the base58 address."""

    def __init__(self, address: str) -> None:
        self._address = address

    def __str__(self) -> str:
        return self._address


class TestSearchRouteId:
    def test_keeps_caller_order(self) -> None:
        assert get_search_route_id(ORCA, USDC) == f"{ORCA}{ROUTE_ID_DELIMITER}{USDC}"
        assert get_search_route_id(USDC, ORCA) == f"{USDC}{ROUTE_ID_DELIMITER}{ORCA}"

    def test_accepts_key_objects(self) -> None:
        assert get_search_route_id(FakePubkey(ORCA), USDC) == get_search_route_id(ORCA, USDC)


class TestInternalRouteId:
    def test_sorted_regardless_of_order(self) -> None:
        expected = f"{USDC}{ROUTE_ID_DELIMITER}{ORCA}"  # "E..." sorts before "o..."
        assert get_internal_route_id(USDC, ORCA) == expected
        assert get_internal_route_id(ORCA, USDC) == expected


class TestDeconstructRouteId:
    def test_round_trip(self) -> None:
        assert deconstruct_route_id(get_search_route_id(ORCA, USDC)) == (ORCA, USDC)

    @pytest.mark.parametrize(
        "route_id",
        [
            "",
            USDC,
            f"{USDC}{ROUTE_ID_DELIMITER}",
            f"{ROUTE_ID_DELIMITER}{USDC}",
            f"{USDC}{ROUTE_ID_DELIMITER}{ORCA}{ROUTE_ID_DELIMITER}{USDC}",
        ],
    )
    def test_malformed_id_raises(self, route_id: str) -> None:
        with pytest.raises(InvalidRouteIdError):
            deconstruct_route_id(route_id)

    def test_error_is_pool_graph_error(self) -> None:
        with pytest.raises(PoolGraphError, match="Invalid route id"):
            deconstruct_route_id("not-a-route-id")
