"""
Adjacency index and edge-weight lookup for the graph algorithms.
The graph is undirected for every algorithm: each edge is inserted in both directions.
"""

from typing import Dict, List

import networkx as nx


def build_adjacency(nodes, edges) -> Dict[str, List[str]]:
    """
    Build an undirected neighbour mapping.

    Every node appears as a key, isolated nodes included. Neighbour order follows
    edge order, which follows the input movie order. Edges touching an id
    outside the node set are skipped so the mapping stays symmetric.

    Args:
        nodes: Sequence of MovieNode.
        edges: Sequence of MovieEdge.

    Returns:
        dict: {node_id: [neighbour_id, ...]}
    """
    adjacency = {node.id: [] for node in nodes}

    for edge in edges:
        if edge.source not in adjacency or edge.target not in adjacency:
            continue
        adjacency[edge.source].append(edge.target)
        adjacency[edge.target].append(edge.source)

    return adjacency


def build_weight_map(edges) -> Dict[str, float]:
    """Map "source-target" to 1 / strength. Only the stored direction is registered."""
    weights = {}
    for edge in edges:
        weights[f'{edge.source}-{edge.target}'] = edge.weight
    return weights


def to_networkx(nodes, edges):
    """
    Export the graph to networkx.

    Returns:
        networkx.Graph: node attributes title/selected/recommended, edge attributes
        strength/weight/common_genres.
    """
    G = nx.Graph()
    for node in nodes:
        G.add_node(
            node.id,
            title=node.movie.title,
            selected=node.selected,
            recommended=node.recommended,
        )
    for edge in edges:
        G.add_edge(
            edge.source,
            edge.target,
            strength=edge.strength,
            weight=edge.weight,
            common_genres=list(edge.common_genres),
        )
    return G
