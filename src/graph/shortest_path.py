"""
Single-source single-target shortest path (Dijkstra).

Uses an O(V^2) scan for the closest unvisited node instead of a priority queue:
graphs here hold tens of movies, and the scan keeps tie-breaking tied to the
adjacency key order.
"""

import logging
import math
from typing import Dict, List

from src.graph.models import NodeState, PathResult

logger = logging.getLogger(__name__)


def edge_weight(weights: Dict[str, float], source_id: str, target_id: str) -> float:
    """Weight of an undirected edge, looked up as "a-b" then "b-a". Defaults to 1."""
    weight = weights.get(f'{source_id}-{target_id}')
    if weight is None:
        weight = weights.get(f'{target_id}-{source_id}')
    return 1.0 if weight is None else weight


def _closest_unvisited(states: Dict[str, NodeState]):
    # First strictly smaller distance wins, so ties go to the earlier key.
    closest = None
    best = math.inf
    for node_id, state in states.items():
        if not state.visited and state.distance < best:
            best = state.distance
            closest = node_id
    return closest


def _walk_back(states: Dict[str, NodeState], target_id: str) -> List[str]:
    path = []
    current = target_id
    while current is not None:
        path.append(current)
        current = states[current].predecessor
    path.reverse()
    return path


def shortest_path(adjacency, weights, source_id, target_id) -> PathResult:
    """
    Find the cheapest path between two nodes.

    Args:
        adjacency: {node_id: [neighbour_id, ...]} from build_adjacency.
        weights: {"source-target": weight} from build_weight_map.
        source_id: Start node id.
        target_id: Destination node id.

    Returns:
        PathResult: path from source to target inclusive and its total weight,
        or an empty path with infinite distance when the target is unreachable.
    """
    states = {node_id: NodeState() for node_id in adjacency}
    if source_id not in states or target_id not in states:
        return PathResult()

    states[source_id].distance = 0.0

    while True:
        current = _closest_unvisited(states)
        if current is None or current == target_id:
            break

        current_state = states[current]
        current_state.visited = True

        for neighbor in adjacency[current]:
            neighbor_state = states.get(neighbor)
            if neighbor_state is None or neighbor_state.visited:
                continue
            alt = current_state.distance + edge_weight(weights, current, neighbor)
            if alt < neighbor_state.distance:
                neighbor_state.distance = alt
                neighbor_state.predecessor = current

    distance = states[target_id].distance
    if distance == math.inf:
        logger.debug("No path from %s to %s", source_id, target_id)
        return PathResult()

    path = _walk_back(states, target_id)
    logger.debug("Shortest path %s -> %s: %s (%.3f)", source_id, target_id, path, distance)
    return PathResult(path=path, distance=distance)
