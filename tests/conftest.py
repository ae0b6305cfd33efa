import random

import pytest

from config import GENRE_COLUMNS
from src.graph.construction import build_graph
from src.graph.models import Movie


def make_movie(movie_id, genre_ids, score=0.0, title=None):
    return Movie(id=movie_id, title=title or f"Movie {movie_id}", genre_ids=list(genre_ids), score=score)


def random_movies(seed, count=12, n_genres=8, max_genres=3):
    rng = random.Random(seed)
    movies = []
    for movie_id in range(1, count + 1):
        genres = rng.sample(range(n_genres), rng.randint(0, max_genres))
        movies.append(make_movie(movie_id, genres))
    return movies


@pytest.fixture
def three_movies():
    """A{1,2}, B{2,3}, C{4}: A-B share one genre, C is isolated."""
    return [
        make_movie(1, [1, 2], title="A"),
        make_movie(2, [2, 3], title="B"),
        make_movie(3, [4], title="C"),
    ]


@pytest.fixture
def triangle_movies():
    """A-B share one genre, A-C and C-B share three each."""
    return [
        make_movie(1, [1, 2, 3, 7], title="A"),
        make_movie(2, [4, 5, 6, 7], title="B"),
        make_movie(3, [1, 2, 3, 4, 5, 6], title="C"),
    ]


@pytest.fixture
def clique_movies():
    return [make_movie(movie_id, [9]) for movie_id in range(1, 5)]


@pytest.fixture
def three_graph(three_movies):
    return build_graph(three_movies, [], [])


@pytest.fixture
def triangle_graph(triangle_movies):
    return build_graph(triangle_movies, [], [])


def _item_line(movie_id, title, release_date, genres):
    flags = ['1' if name in genres else '0' for name in GENRE_COLUMNS]
    return '|'.join([str(movie_id), title, release_date, '', 'http://example.com'] + flags)


@pytest.fixture
def data_dir(tmp_path):
    """A tiny MovieLens directory: u.item with three movies and u.data with three ratings."""
    items = [
        _item_line(1, 'Toy Story (1995)', '01-Jan-1995', {'Animation', 'Children', 'Comedy'}),
        _item_line(2, 'GoldenEye (1995)', '01-Jan-1995', {'Action', 'Adventure', 'Thriller'}),
        _item_line(3, 'Unknown Date', '', {'Drama'}),
    ]
    (tmp_path / 'u.item').write_text('\n'.join(items) + '\n', encoding='latin-1')
    ratings = [
        '196\t1\t3\t881250949',
        '186\t1\t5\t891717742',
        '22\t2\t1\t878887116',
    ]
    (tmp_path / 'u.data').write_text('\n'.join(ratings) + '\n')
    return str(tmp_path)
