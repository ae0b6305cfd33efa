"""
Data models for the movie genre graph.
Nodes and edges are rebuilt from scratch on every input change, never mutated in place.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class Movie:
    id: int
    title: str
    genre_ids: List[int]
    score: float = 0.0
    release_date: str = ''


@dataclass
class EdgeStyle:
    category: str
    color: str
    width: float
    animated: bool = False


@dataclass
class MovieNode:
    id: str
    movie: Movie
    selected: bool
    recommended: bool
    position: Tuple[float, float] = (0.0, 0.0)


@dataclass
class MovieEdge:
    id: str
    source: str
    target: str
    common_genres: List[int]
    strength: int
    style: Optional[EdgeStyle] = None

    @property
    def weight(self) -> float:
        """Inverse of the genre overlap: more shared genres, cheaper edge."""
        return 1 / self.strength if self.strength else 1.0


@dataclass
class SpanningEdge:
    source: str
    target: str
    weight: float


@dataclass
class PathResult:
    path: List[str] = field(default_factory=list)
    distance: float = float('inf')

    @property
    def reachable(self) -> bool:
        return bool(self.path)


@dataclass
class NodeState:
    """Per-node bookkeeping for a single Dijkstra run."""
    distance: float = float('inf')
    predecessor: Optional[str] = None
    visited: bool = False
