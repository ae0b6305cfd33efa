import networkx as nx
import pytest

from conftest import random_movies
from src.graph.adjacency import build_adjacency, to_networkx
from src.graph.construction import build_graph
from src.graph.traversal import (
    breadth_first_search,
    connected_components,
    depth_first_search,
    is_connected,
)


@pytest.fixture
def branching():
    return {
        '1': ['2', '3'],
        '2': ['1', '4'],
        '3': ['1'],
        '4': ['2'],
    }


def test_dfs_goes_deep_first(branching):
    assert depth_first_search(branching, '1') == ['1', '2', '4', '3']


def test_bfs_goes_level_by_level(branching):
    assert breadth_first_search(branching, '1') == ['1', '2', '3', '4']


def test_cycle_is_visited_once():
    triangle = {'a': ['b', 'c'], 'b': ['a', 'c'], 'c': ['a', 'b']}

    assert depth_first_search(triangle, 'a') == ['a', 'b', 'c']
    assert breadth_first_search(triangle, 'a') == ['a', 'b', 'c']


def test_only_reachable_component(three_graph):
    adjacency = build_adjacency(*three_graph)

    assert depth_first_search(adjacency, '1') == ['1', '2']
    assert breadth_first_search(adjacency, '1') == ['1', '2']
    assert depth_first_search(adjacency, '3') == ['3']


def test_unknown_or_empty():
    assert depth_first_search({}, '1') == []
    assert breadth_first_search({}, '1') == []
    assert depth_first_search({'1': []}, '2') == []
    assert breadth_first_search({'1': []}, '2') == []


def test_connectivity(three_graph, triangle_graph):
    assert is_connected(build_adjacency(*three_graph)) is False
    assert is_connected(build_adjacency(*triangle_graph)) is True
    assert is_connected({}) is True
    assert is_connected({'1': []}) is True


def test_long_chain_does_not_recurse():
    size = 5000
    chain = {str(i): [] for i in range(size)}
    for i in range(size - 1):
        chain[str(i)].append(str(i + 1))
        chain[str(i + 1)].append(str(i))

    assert len(depth_first_search(chain, '0')) == size
    assert is_connected(chain)


@pytest.mark.parametrize("seed", range(8))
def test_traversals_cover_component(seed):
    nodes, edges = build_graph(random_movies(seed), [], [])
    adjacency = build_adjacency(nodes, edges)
    G = to_networkx(nodes, edges)

    for node_id in adjacency:
        expected = nx.node_connected_component(G, node_id)
        dfs = depth_first_search(adjacency, node_id)
        bfs = breadth_first_search(adjacency, node_id)
        assert set(dfs) == set(bfs) == expected
        assert len(dfs) == len(bfs) == len(expected)

    first = next(iter(adjacency))
    assert is_connected(adjacency) == (len(depth_first_search(adjacency, first)) == len(adjacency))
    assert is_connected(adjacency) == nx.is_connected(G)
    assert len(connected_components(adjacency)) == nx.number_connected_components(G)
