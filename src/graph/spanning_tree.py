"""
Minimum spanning forest (Kruskal) over the genre graph, plus a visiting order of the result.
A disconnected graph yields one tree per component; connectivity is never forced.
"""

import logging
from typing import Dict, Iterable, List

from src.graph.models import SpanningEdge
from src.graph.traversal import depth_first_search

logger = logging.getLogger(__name__)


class DisjointSet:
    """
    Union-find with path compression and union by rank.
    Lives for a single spanning-forest computation.
    """

    def __init__(self, items: Iterable[str]):
        self.parent: Dict[str, str] = {}
        self.rank: Dict[str, int] = {}
        for item in items:
            self.parent[item] = item
            self.rank[item] = 0

    def find(self, item: str) -> str:
        # Unknown ids become their own singleton set.
        if item not in self.parent:
            self.parent[item] = item
            self.rank[item] = 0

        root = item
        while self.parent[root] != root:
            root = self.parent[root]
        while item != root:
            next_item = self.parent[item]
            self.parent[item] = root
            item = next_item
        return root

    def union(self, a: str, b: str) -> bool:
        """Merge the sets of a and b. Returns False when they were already joined."""
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.rank[root_a] < self.rank[root_b]:
            self.parent[root_a] = root_b
        elif self.rank[root_a] > self.rank[root_b]:
            self.parent[root_b] = root_a
        else:
            self.parent[root_b] = root_a
            self.rank[root_a] += 1
        return True


def _unique_edges(edges) -> List[SpanningEdge]:
    # "a-b" and "b-a" are the same edge; the first occurrence wins.
    seen = set()
    unique = []
    for edge in edges:
        if (edge.source, edge.target) in seen or (edge.target, edge.source) in seen:
            continue
        seen.add((edge.source, edge.target))
        unique.append(SpanningEdge(source=edge.source, target=edge.target, weight=edge.weight))
    return unique


def minimum_spanning_forest(node_ids, edges) -> List[SpanningEdge]:
    """
    Kruskal's algorithm.

    Args:
        node_ids: All node ids of the graph, isolated ones included.
        edges: Sequence of MovieEdge; weight is 1 / strength.

    Returns:
        list[SpanningEdge]: Accepted edges in ascending weight order. Holds
        V - (number of components) edges.
    """
    node_ids = list(node_ids)
    candidates = sorted(_unique_edges(edges), key=lambda edge: edge.weight)
    components = DisjointSet(node_ids)

    forest = []
    for edge in candidates:
        if len(forest) == len(node_ids) - 1:
            break
        if components.union(edge.source, edge.target):
            forest.append(edge)

    logger.debug("Spanning forest: %d edges over %d nodes", len(forest), len(node_ids))
    return forest


def mst_traversal_order(forest_edges, start_id: str) -> List[str]:
    """
    Depth-first visiting order of the spanning forest from start_id.
    A start with no forest edge yields [start_id].
    """
    forest_adjacency: Dict[str, List[str]] = {}
    for edge in forest_edges:
        forest_adjacency.setdefault(edge.source, []).append(edge.target)
        forest_adjacency.setdefault(edge.target, []).append(edge.source)

    if start_id not in forest_adjacency:
        return [start_id]
    return depth_first_search(forest_adjacency, start_id)
