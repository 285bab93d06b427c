"""Tests for adjacency list construction."""

from poolgraph.graph import AdjacencyListPoolGraph, PoolGraphEdge, build_pool_graph
from poolgraph.models import PoolTokenPair
from tests.helpers import (
    POOL_1,
    POOL_2,
    POOL_3,
    TOKEN_A,
    TOKEN_B,
    TOKEN_C,
    make_pool,
)


class TestBuildPoolGraph:
    """Tests for build_pool_graph."""

    def test_empty_pool_list(self) -> None:
        assert build_pool_graph([]) == {}

    def test_single_pool_links_both_tokens(self) -> None:
        graph = build_pool_graph([make_pool(POOL_1, TOKEN_A, TOKEN_B)])

        assert graph == {
            TOKEN_A: [PoolGraphEdge(address=POOL_1, other_token=TOKEN_B)],
            TOKEN_B: [PoolGraphEdge(address=POOL_1, other_token=TOKEN_A)],
        }

    def test_chain_keeps_insertion_order(self) -> None:
        graph = build_pool_graph(
            [
                make_pool(POOL_1, TOKEN_A, TOKEN_B),
                make_pool(POOL_2, TOKEN_B, TOKEN_C),
            ]
        )

        assert graph[TOKEN_B] == [
            PoolGraphEdge(address=POOL_1, other_token=TOKEN_A),
            PoolGraphEdge(address=POOL_2, other_token=TOKEN_C),
        ]
        assert graph[TOKEN_C] == [PoolGraphEdge(address=POOL_2, other_token=TOKEN_B)]

    def test_duplicate_pool_is_ignored(self) -> None:
        pool = make_pool(POOL_1, TOKEN_A, TOKEN_B)

        assert build_pool_graph([pool, pool]) == build_pool_graph([pool])

    def test_parallel_pools_are_separate_edges(self) -> None:
        graph = build_pool_graph(
            [
                make_pool(POOL_1, TOKEN_A, TOKEN_B),
                make_pool(POOL_2, TOKEN_A, TOKEN_B),
            ]
        )

        assert [edge.address for edge in graph[TOKEN_A]] == [POOL_1, POOL_2]
        assert [edge.address for edge in graph[TOKEN_B]] == [POOL_1, POOL_2]

    def test_accepts_camel_case_pool_records(self) -> None:
        pool = PoolTokenPair.model_validate(
            {"address": POOL_3, "tokenMintA": TOKEN_A, "tokenMintB": TOKEN_C}
        )
        graph = build_pool_graph([pool])

        assert graph[TOKEN_C] == [PoolGraphEdge(address=POOL_3, other_token=TOKEN_A)]


class TestGraphIntrospection:
    """Tests for AdjacencyListPoolGraph token accessors."""

    def test_counts(self) -> None:
        graph = AdjacencyListPoolGraph(
            [
                make_pool(POOL_1, TOKEN_A, TOKEN_B),
                make_pool(POOL_2, TOKEN_B, TOKEN_C),
                make_pool(POOL_2, TOKEN_B, TOKEN_C),
            ]
        )

        assert graph.token_count == 3
        assert graph.pool_count == 2
        assert graph.tokens() == [TOKEN_A, TOKEN_B, TOKEN_C]

    def test_neighbors_and_membership(self) -> None:
        graph = AdjacencyListPoolGraph(
            [
                make_pool(POOL_1, TOKEN_A, TOKEN_B),
                make_pool(POOL_2, TOKEN_B, TOKEN_C),
            ]
        )

        assert graph.has_token(TOKEN_A)
        assert not graph.has_token(POOL_1)
        assert graph.get_neighbors(TOKEN_B) == {TOKEN_A, TOKEN_C}
        assert graph.get_neighbors(POOL_3) == set()

    def test_get_edges_returns_copy(self) -> None:
        graph = AdjacencyListPoolGraph([make_pool(POOL_1, TOKEN_A, TOKEN_B)])

        graph.get_edges(TOKEN_A).clear()

        assert graph.get_edges(TOKEN_A) == [PoolGraphEdge(address=POOL_1, other_token=TOKEN_B)]
