"""
Graph construction from a movie collection.
One node per movie; one edge per unordered pair of movies sharing at least one genre,
weighted by the number of shared genres.
"""

import logging
import math
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from config import EDGE_STYLES, LAYOUT_CENTER, LAYOUT_RADIUS
from src.graph.models import EdgeStyle, Movie, MovieEdge, MovieNode

logger = logging.getLogger(__name__)

Position = Tuple[float, float]


def edge_style(source_selected, source_recommended, target_selected, target_recommended):
    """
    Pick the presentation style of an edge from the flags of its two endpoints.

    Precedence: both selected > one selected and the other recommended >
    either recommended > either selected > default.

    Returns:
        EdgeStyle: colour, width and animation flag for the edge.
    """
    if source_selected and target_selected:
        category = 'both_selected'
    elif (source_selected and target_recommended) or (source_recommended and target_selected):
        category = 'selected_recommended'
    elif source_recommended or target_recommended:
        category = 'recommended'
    elif source_selected or target_selected:
        category = 'selected'
    else:
        category = 'default'

    color, width, animated = EDGE_STYLES[category]
    return EdgeStyle(category=category, color=color, width=width, animated=animated)


def circle_layout(movies: Sequence[Movie], radius=LAYOUT_RADIUS, center=LAYOUT_CENTER) -> Dict[str, Position]:
    """Place movies evenly on a circle, in input order."""
    positions = {}
    cx, cy = center
    for index, movie in enumerate(movies):
        angle = (index / len(movies)) * 2 * math.pi
        positions[str(movie.id)] = (cx + radius * math.cos(angle), cy + radius * math.sin(angle))
    return positions


def create_nodes(
    movies: Sequence[Movie],
    selected_ids: Iterable[int],
    recommended_ids: Iterable[int],
    previous_positions: Optional[Dict[str, Position]] = None,
) -> List[MovieNode]:
    """
    Create one node per movie.

    Args:
        movies: Ordered movie collection (unique ids).
        selected_ids: Ids of movies picked by the user.
        recommended_ids: Ids of related movies. Ignored for a movie that is also selected.
        previous_positions: Positions kept by the caller from a previous build, keyed by node id.

    Returns:
        list[MovieNode]: Nodes in input order.
    """
    if not movies:
        return []

    selected = set(selected_ids)
    recommended = set(recommended_ids)
    previous_positions = previous_positions or {}

    needs_layout = any(str(movie.id) not in previous_positions for movie in movies)
    fallback = circle_layout(movies) if needs_layout else {}

    nodes = []
    for movie in movies:
        node_id = str(movie.id)
        is_selected = movie.id in selected
        nodes.append(MovieNode(
            id=node_id,
            movie=movie,
            selected=is_selected,
            recommended=movie.id in recommended and not is_selected,
            position=previous_positions.get(node_id) or fallback[node_id],
        ))
    return nodes


def create_edges(
    movies: Sequence[Movie],
    selected_ids: Iterable[int],
    recommended_ids: Iterable[int],
) -> List[MovieEdge]:
    """
    Create an edge for every pair of movies sharing at least one genre.

    Pairs are visited as (i, j) with i < j in input order, so the source of an edge
    is always the earlier movie. Styling uses the raw flags of both endpoints.
    """
    selected = set(selected_ids)
    recommended = set(recommended_ids)
    edges = []

    for i, movie1 in enumerate(movies):
        movie1_selected = movie1.id in selected
        movie1_recommended = movie1.id in recommended

        for movie2 in movies[i + 1:]:
            genres2 = set(movie2.genre_ids)
            common_genres = [genre for genre in movie1.genre_ids if genre in genres2]
            if not common_genres:
                continue

            edges.append(MovieEdge(
                id=f'edge-{movie1.id}-{movie2.id}',
                source=str(movie1.id),
                target=str(movie2.id),
                common_genres=common_genres,
                strength=len(common_genres),
                style=edge_style(
                    movie1_selected, movie1_recommended,
                    movie2.id in selected, movie2.id in recommended,
                ),
            ))

    return edges


def build_graph(movies, selected_ids, recommended_ids, previous_positions=None):
    """
    Build the full node and edge sets for a movie collection.

    Returns:
        tuple: (nodes, edges)
    """
    selected_ids = list(selected_ids)
    recommended_ids = list(recommended_ids)
    nodes = create_nodes(movies, selected_ids, recommended_ids, previous_positions)
    edges = create_edges(movies, selected_ids, recommended_ids)
    logger.debug("Built graph with %d nodes and %d edges", len(nodes), len(edges))
    return nodes, edges


def graph_signature(movies, selected_ids, recommended_ids):
    """Memoization key for a build: sorted ids of the movies, the selection and the recommendations."""
    return (
        tuple(sorted(movie.id for movie in movies)),
        tuple(sorted(set(selected_ids))),
        tuple(sorted(set(recommended_ids))),
    )
