"""
Module for loading MovieLens-100K data.
Reads movie metadata and ratings from the filesystem and turns them into Movie entities for the graph.
"""

import logging
import os
from typing import List, Optional

import pandas as pd # type:ignore

from config import DATA_DIR, GENRE_COLUMNS, MOVIES_FILE, RATINGS_FILE
from src.graph.models import Movie

logger = logging.getLogger(__name__)


def get_project_root():
    current_file_path = os.path.abspath(__file__)
    current_dir = os.path.dirname(current_file_path)
    current_dir = os.path.dirname(current_dir)
    current_dir = os.path.dirname(current_dir)
    return current_dir


def load_ratings_df(data_dir=DATA_DIR, file_name=RATINGS_FILE):
    """
    Load ratings from the MovieLens-100K dataset.

    Args:
        data_dir (str): Directory containing the dataset, relative to the project root or absolute.
        file_name (str): Name of the file to load (default: "u.data").

    Returns:
        pd.DataFrame: A DataFrame containing columns [user_id, item_id, rating, timestamp].
    """
    data_path = os.path.join(get_project_root(), data_dir, file_name)
    ratings_df = pd.read_csv(data_path, sep='\t', header=None, names=['user_id', 'item_id', 'rating', 'timestamp'])
    logger.info("Loaded %d ratings from %s", len(ratings_df), data_path)
    return ratings_df


def load_movies_df(data_dir=DATA_DIR, file_name=MOVIES_FILE):
    """
    Load movie metadata from the MovieLens-100K dataset.

    Args:
        data_dir (str): Directory containing the dataset.
        file_name (str): Name of the file (default: "u.item").

    Returns:
        pd.DataFrame: A DataFrame containing movie details and genre flags.
    """
    data_path = os.path.join(get_project_root(), data_dir, file_name)

    column_names = ['movie_id', 'movie_title', 'release_date', 'video_release_date', 'imdb_url'] + GENRE_COLUMNS

    movies_df = pd.read_csv(
        data_path,
        sep='|',
        header=None,
        names=column_names,
        encoding='latin-1')
    logger.info("Loaded %d movies from %s", len(movies_df), data_path)
    return movies_df


def get_movie_title(movie_id: int, movies_df: pd.DataFrame) -> Optional[str]:
    """
    Retrieve the title of a movie given its ID. Returns None for an unknown ID.
    """
    titles = movies_df.loc[movies_df['movie_id'] == movie_id, 'movie_title']
    if titles.empty:
        return None
    return titles.iloc[0]


def movies_from_df(movies_df: pd.DataFrame, ratings_df: Optional[pd.DataFrame] = None) -> List[Movie]:
    """
    Convert MovieLens rows into Movie entities.

    Genre ids are the positions of the set flags in GENRE_COLUMNS. The score is
    the movie's mean rating, or 0.0 when no ratings are given or the movie has none.

    Returns:
        list[Movie]: Movies in DataFrame order.
    """
    mean_ratings = {}
    if ratings_df is not None and not ratings_df.empty:
        mean_ratings = ratings_df.groupby('item_id')['rating'].mean().to_dict()

    genre_matrix = movies_df[GENRE_COLUMNS].fillna(0).astype(int).values

    movies = []
    for row, genre_flags in zip(movies_df.itertuples(index=False), genre_matrix):
        movie_id = int(row.movie_id)
        release_date = row.release_date if isinstance(row.release_date, str) else ''
        movies.append(Movie(
            id=movie_id,
            title=str(row.movie_title),
            genre_ids=[index for index, flag in enumerate(genre_flags) if flag],
            score=float(mean_ratings.get(movie_id, 0.0)),
            release_date=release_date,
        ))
    return movies


def load_movies(data_dir=DATA_DIR, with_scores=True) -> List[Movie]:
    """Load MovieLens movies as entities, scored by mean rating when with_scores is set."""
    movies_df = load_movies_df(data_dir)
    ratings_df = load_ratings_df(data_dir) if with_scores else None
    return movies_from_df(movies_df, ratings_df)


if __name__ == "__main__":
    print(get_project_root())
    movies_df = load_movies_df()
    print(movies_df)
    print(get_movie_title(1, movies_df))
    print(movies_from_df(movies_df)[:3])
