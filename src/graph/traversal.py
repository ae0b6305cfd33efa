"""
Traversals over an adjacency mapping: DFS, BFS, connectivity and components.
Results are deterministic for a fixed neighbour ordering.
"""

from collections import deque
from typing import Dict, List

Adjacency = Dict[str, List[str]]


def depth_first_search(adjacency: Adjacency, start_id: str) -> List[str]:
    """
    Pre-order depth-first visit from start_id.

    Neighbours are explored in list order and marked visited before descending,
    giving the same order as the recursive formulation without its depth limit.

    Returns:
        list[str]: Visited node ids, start first. Empty when start_id is unknown.
    """
    if start_id not in adjacency:
        return []

    visited = {start_id}
    order = [start_id]
    stack = [iter(adjacency[start_id])]

    while stack:
        for neighbor in stack[-1]:
            if neighbor not in visited and neighbor in adjacency:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append(iter(adjacency[neighbor]))
                break
        else:
            stack.pop()

    return order


def breadth_first_search(adjacency: Adjacency, start_id: str) -> List[str]:
    """
    Level-order visit from start_id. Nodes are marked on enqueue, so none is queued twice.

    Returns:
        list[str]: Visited node ids, start first. Empty when start_id is unknown.
    """
    if start_id not in adjacency:
        return []

    visited = {start_id}
    order = []
    queue = deque([start_id])

    while queue:
        node_id = queue.popleft()
        order.append(node_id)
        for neighbor in adjacency.get(node_id, []):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return order


def is_connected(adjacency: Adjacency) -> bool:
    """True when every node is reachable from the first key. An empty graph counts as connected."""
    if not adjacency:
        return True

    first = next(iter(adjacency))
    return len(depth_first_search(adjacency, first)) == len(adjacency)


def connected_components(adjacency: Adjacency) -> List[List[str]]:
    """Components in key order of their first member, each listed in DFS order."""
    seen = set()
    components = []
    for node_id in adjacency:
        if node_id in seen:
            continue
        component = depth_first_search(adjacency, node_id)
        seen.update(component)
        components.append(component)
    return components
