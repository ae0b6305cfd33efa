"""
Runs the whole algorithm suite over one built graph and bundles the results.

Pipeline:
    1. Adjacency index from nodes and edges.
    2. Connectivity and component count.
    3. DFS and BFS from the start node.
    4. Dijkstra from start to end over 1 / strength weights.
    5. Kruskal spanning forest and its visiting order from the start node.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from src.graph.adjacency import build_adjacency, build_weight_map
from src.graph.models import PathResult, SpanningEdge
from src.graph.shortest_path import shortest_path
from src.graph.spanning_tree import minimum_spanning_forest, mst_traversal_order
from src.graph.traversal import (
    breadth_first_search,
    connected_components,
    depth_first_search,
    is_connected,
)

logger = logging.getLogger(__name__)


@dataclass
class GraphAnalysis:
    start_id: Optional[str] = None
    end_id: Optional[str] = None
    connected: bool = False
    component_count: int = 0
    dfs: List[str] = field(default_factory=list)
    bfs: List[str] = field(default_factory=list)
    shortest_path: Optional[PathResult] = None
    spanning_forest: List[SpanningEdge] = field(default_factory=list)
    mst_order: List[str] = field(default_factory=list)


def pick_endpoints(adjacency, nodes, start_id=None, end_id=None):
    """
    Resolve the start and end nodes for an analysis.

    The start is the requested (selected) node when it exists, otherwise the first node.
    The end is the requested node when it exists, otherwise the first other node,
    falling back to the start itself for a single-node graph.

    Returns:
        tuple: (start_id, end_id)
    """
    if not nodes:
        return None, None

    start = start_id if start_id in adjacency else nodes[0].id
    if end_id in adjacency:
        return start, end_id

    others = [node_id for node_id in adjacency if node_id != start]
    return start, others[0] if others else start


def analyze_graph(nodes, edges, start_id=None, end_id=None) -> GraphAnalysis:
    """
    Analyze a built movie graph.

    Args:
        nodes: Sequence of MovieNode.
        edges: Sequence of MovieEdge.
        start_id: Preferred start node id (usually the selected movie).
        end_id: Preferred destination for the shortest path.

    Returns:
        GraphAnalysis: Empty report when the graph has no nodes or no edges.
    """
    if not nodes or not edges:
        return GraphAnalysis()

    adjacency = build_adjacency(nodes, edges)
    start, end = pick_endpoints(adjacency, nodes, start_id, end_id)

    weights = build_weight_map(edges)
    forest = minimum_spanning_forest(list(adjacency), edges)

    analysis = GraphAnalysis(
        start_id=start,
        end_id=end,
        connected=is_connected(adjacency),
        component_count=len(connected_components(adjacency)),
        dfs=depth_first_search(adjacency, start),
        bfs=breadth_first_search(adjacency, start),
        shortest_path=shortest_path(adjacency, weights, start, end),
        spanning_forest=forest,
        mst_order=mst_traversal_order(forest, start),
    )
    logger.debug(
        "Analyzed %d nodes from %s: connected=%s, %d component(s)",
        len(nodes), start, analysis.connected, analysis.component_count,
    )
    return analysis
