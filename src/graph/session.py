"""
Caller-side graph state: remembers node positions and skips rebuilds when inputs are unchanged.
"""

import logging

from src.graph.construction import build_graph, graph_signature

logger = logging.getLogger(__name__)


class MovieGraphSession:
    """
    Holds the nodes and edges of the current graph between interactions.

    The graph functions themselves are stateless; this class owns what the display
    layer needs to keep across rebuilds: the last memoization signature and the
    position of every node seen so far.
    """

    def __init__(self):
        self.positions = {}
        self.signature = None
        self.nodes = []
        self.edges = []

    def update(self, movies, selected_ids, recommended_ids):
        """
        Rebuild the graph if the movies, selection or recommendations changed.

        Returns:
            bool: True when a rebuild happened.
        """
        selected_ids = list(selected_ids)
        recommended_ids = list(recommended_ids)

        if not movies:
            self.nodes, self.edges = [], []
            self.signature = None
            return True

        signature = graph_signature(movies, selected_ids, recommended_ids)
        if signature == self.signature and self.nodes:
            return False

        self.nodes, self.edges = build_graph(movies, selected_ids, recommended_ids, self.positions)
        self.positions.update({node.id: node.position for node in self.nodes})
        self.signature = signature
        logger.info("Rebuilt graph: %d nodes, %d edges", len(self.nodes), len(self.edges))
        return True

    def move_node(self, node_id, position):
        """Record a position chosen by the user and apply it to the current node."""
        self.positions[node_id] = tuple(position)
        for node in self.nodes:
            if node.id == node_id:
                node.position = tuple(position)

    def reset(self):
        self.positions.clear()
        self.signature = None
        self.nodes, self.edges = [], []
