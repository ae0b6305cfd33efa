"""
Analyze the genre graph of a set of movies.

Usage:
    python analyze_graph.py --movie_ids 1 50 181
    python analyze_graph.py --movie_ids 1 50 181 --related 5 --start 50 --end 181
"""

import argparse
import logging
import math

import config
from src.data.loader import load_movies
from src.graph.analytics import analyze_graph
from src.graph.construction import build_graph
from src.models.content_based import RelatedMoviesRecommender


def format_report(analysis, titles):
    """Render a GraphAnalysis as printable lines."""
    def name(node_id):
        return titles.get(node_id, node_id)

    lines = []
    if analysis.start_id is None:
        lines.append("No connections between these movies.")
        return lines

    lines.append(f"Start: {name(analysis.start_id)}")
    connectivity = "connected" if analysis.connected else "disconnected"
    lines.append(f"Graph is {connectivity} ({analysis.component_count} component(s))")

    lines.append("\nDepth-first order:")
    lines.extend(f"{i:2d}. {name(node_id)}" for i, node_id in enumerate(analysis.dfs, 1))

    lines.append("\nBreadth-first order:")
    lines.extend(f"{i:2d}. {name(node_id)}" for i, node_id in enumerate(analysis.bfs, 1))

    result = analysis.shortest_path
    lines.append(f"\nShortest path to {name(analysis.end_id)}:")
    if result is not None and result.reachable:
        lines.append(f"Distance: {result.distance:.2f}")
        lines.extend(f"{i:2d}. {name(node_id)}" for i, node_id in enumerate(result.path, 1))
    else:
        lines.append(f"Distance: {math.inf}")
        lines.append("No path found")

    lines.append("\nMinimum spanning tree order:")
    lines.extend(f"{i:2d}. {name(node_id)}" for i, node_id in enumerate(analysis.mst_order, 1))
    return lines


def main():
    parser = argparse.ArgumentParser(description='Analyze the genre graph of selected movies')
    parser.add_argument('--movie_ids', type=int, nargs='+', required=True, help='Selected movie IDs')
    parser.add_argument('--related', type=int, default=0, help='Add this many related movies to the graph')
    parser.add_argument('--start', type=int, default=None, help='Start movie for traversals (must be in the graph)')
    parser.add_argument('--end', type=int, default=None, help='Destination movie for the shortest path (must be in the graph)')
    parser.add_argument('--data_dir', default=config.DATA_DIR, help='MovieLens directory')
    args = parser.parse_args()

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    print("Loading movies...")
    catalog = load_movies(args.data_dir)
    by_id = {movie.id: movie for movie in catalog}

    unknown = [movie_id for movie_id in args.movie_ids if movie_id not in by_id]
    if unknown:
        parser.error(f"unknown movie id(s): {', '.join(map(str, unknown))}")

    selected_ids = list(dict.fromkeys(args.movie_ids))
    related_ids = []
    if args.related > 0:
        recommender = RelatedMoviesRecommender(catalog)
        related_ids = recommender.related_to_selection(selected_ids, top_k=args.related)

    movies = [by_id[movie_id] for movie_id in selected_ids + related_ids]
    in_graph = {movie.id for movie in movies}
    for flag, movie_id in (('--start', args.start), ('--end', args.end)):
        if movie_id is not None and movie_id not in in_graph:
            parser.error(f"{flag} {movie_id} is not one of the movies in the graph")

    nodes, edges = build_graph(movies, selected_ids, related_ids)
    print(f"Graph: {len(nodes)} movies, {len(edges)} genre links")

    start_id = str(args.start) if args.start is not None else str(selected_ids[0])
    end_id = str(args.end) if args.end is not None else None
    analysis = analyze_graph(nodes, edges, start_id=start_id, end_id=end_id)

    titles = {str(movie.id): movie.title for movie in movies}
    print("-" * 60)
    for line in format_report(analysis, titles):
        print(line)


if __name__ == "__main__":
    main()
