"""
Content-Based Related Movies.
Ranks movies by genre-vector cosine similarity to a chosen movie; the result is the
"recommended" set shown next to the user's selection in the graph.
"""
# Script:
# python -m src.models.content_based

import time

import numpy as np
from sklearn.metrics.pairwise import cosine_similarity

from config import RELATED_TOP_K


class RelatedMoviesRecommender:
    """
    Finds movies whose genres align with a given movie.
    Genre vectors are built once on initialization over every genre id seen in the collection.
    """
    def __init__(self, movies):
        """
        Build the genre matrix.

        Args:
            movies: Sequence of Movie entities (unique ids).
        """
        self.movies = list(movies)
        self.genre_ids = sorted({genre for movie in self.movies for genre in movie.genre_ids})
        genre_index = {genre: column for column, genre in enumerate(self.genre_ids)}

        self.genre_matrix = np.zeros((len(self.movies), len(self.genre_ids)), dtype=np.float32)
        for row, movie in enumerate(self.movies):
            for genre in movie.genre_ids:
                self.genre_matrix[row, genre_index[genre]] = 1.0

        self.row_by_id = {movie.id: row for row, movie in enumerate(self.movies)}

    def related(self, movie_id, top_k=RELATED_TOP_K, exclude=()):
        """
        Return the ids of the movies most similar to movie_id.

        Args:
            movie_id: Id of the reference movie.
            top_k: Maximum number of ids to return.
            exclude: Ids that must not be returned (e.g. movies already selected).

        Returns:
            list[int]: Ids ordered by similarity, then higher score, then collection order.
            Empty for an unknown movie_id.
        """
        if movie_id not in self.row_by_id or not self.genre_ids:
            return []

        row = self.row_by_id[movie_id]
        similarities = cosine_similarity(self.genre_matrix[row:row + 1], self.genre_matrix)[0]
        excluded = set(exclude) | {movie_id}

        candidates = [
            (similarities[index], movie)
            for index, movie in enumerate(self.movies)
            if movie.id not in excluded and similarities[index] > 0
        ]
        # sorted() is stable, so equal keys keep collection order
        candidates = sorted(candidates, key=lambda item: (-item[0], -item[1].score))
        return [movie.id for _, movie in candidates[:top_k]]

    def related_to_selection(self, selected_ids, top_k=RELATED_TOP_K):
        """Related movies for the most recently selected movie, never returning a selected id."""
        selected_ids = list(selected_ids)
        if not selected_ids:
            return []
        return self.related(selected_ids[-1], top_k=top_k, exclude=selected_ids)


if __name__ == "__main__":
    from src.data.loader import load_movies

    movies = load_movies()
    recommender_engine = RelatedMoviesRecommender(movies)
    titles = {movie.id: movie.title for movie in movies}

    start_time = time.time()
    related_ids = recommender_engine.related(1)
    end_time = time.time()
    print(f"Time to find related movies: {end_time - start_time}")
    for related_id in related_ids:
        print(titles[related_id])
