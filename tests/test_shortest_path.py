import math

import networkx as nx
import pytest

from conftest import make_movie, random_movies
from src.graph.adjacency import build_adjacency, build_weight_map, to_networkx
from src.graph.construction import build_graph
from src.graph.models import PathResult
from src.graph.shortest_path import edge_weight, shortest_path


def _prepare(movies):
    nodes, edges = build_graph(movies, [], [])
    return build_adjacency(nodes, edges), build_weight_map(edges)


def test_prefers_strong_links(triangle_movies):
    adjacency, weights = _prepare(triangle_movies)

    result = shortest_path(adjacency, weights, '1', '2')

    assert result.path == ['1', '3', '2']
    assert result.distance == pytest.approx(2 / 3)


def test_clique_neighbours_are_one_hop(clique_movies):
    adjacency, weights = _prepare(clique_movies)

    for source in adjacency:
        for target in adjacency[source]:
            result = shortest_path(adjacency, weights, source, target)
            assert result.distance == 1
            assert result.path == [source, target]


def test_same_node():
    adjacency, weights = _prepare([make_movie(1, [1]), make_movie(2, [1])])

    assert shortest_path(adjacency, weights, '2', '2') == PathResult(path=['2'], distance=0)


def test_unreachable_target():
    adjacency, weights = _prepare([make_movie(1, [1]), make_movie(2, [2])])

    result = shortest_path(adjacency, weights, '1', '2')

    assert result.path == []
    assert result.distance == math.inf
    assert not result.reachable


def test_unknown_ids(three_graph):
    adjacency = build_adjacency(*three_graph)
    weights = build_weight_map(three_graph[1])

    assert shortest_path(adjacency, weights, '1', '42') == PathResult()
    assert shortest_path(adjacency, weights, '42', '1') == PathResult()
    assert shortest_path({}, {}, '1', '1') == PathResult()


def test_weight_lookup_tries_both_directions():
    weights = {'1-2': 0.25, '3-1': 0.5}

    assert edge_weight(weights, '1', '2') == 0.25
    assert edge_weight(weights, '2', '1') == 0.25
    assert edge_weight(weights, '1', '3') == 0.5
    assert edge_weight(weights, '2', '3') == 1.0


def test_missing_weights_default_to_one():
    adjacency = {'a': ['b'], 'b': ['a', 'c'], 'c': ['b']}

    result = shortest_path(adjacency, {}, 'c', 'a')

    assert result.path == ['c', 'b', 'a']
    assert result.distance == 2


def test_tie_goes_to_first_key():
    # a-b-d and a-c-d cost the same; b comes before c in key order.
    adjacency = {'a': ['b', 'c'], 'b': ['a', 'd'], 'c': ['a', 'd'], 'd': ['b', 'c']}

    assert shortest_path(adjacency, {}, 'a', 'd').path == ['a', 'b', 'd']


def test_repeated_calls_are_identical(triangle_movies):
    adjacency, weights = _prepare(triangle_movies)

    assert shortest_path(adjacency, weights, '1', '2') == shortest_path(adjacency, weights, '1', '2')


@pytest.mark.parametrize("seed", range(8))
def test_matches_networkx(seed):
    movies = random_movies(seed, count=10, n_genres=6)
    nodes, edges = build_graph(movies, [], [])
    adjacency = build_adjacency(nodes, edges)
    weights = build_weight_map(edges)
    G = to_networkx(nodes, edges)

    for source in adjacency:
        for target in adjacency:
            result = shortest_path(adjacency, weights, source, target)
            if nx.has_path(G, source, target):
                expected = nx.dijkstra_path_length(G, source, target, weight='weight')
                assert result.distance == pytest.approx(expected)
                assert result.path[0] == source and result.path[-1] == target
                hops = sum(edge_weight(weights, a, b) for a, b in zip(result.path, result.path[1:]))
                assert hops == pytest.approx(result.distance)
            else:
                assert result == PathResult()
