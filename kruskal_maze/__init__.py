"""Kruskal maze generation with steppable breadth-first / depth-first solving."""
from .config import MazeConfig
from .errors import ConfigurationError, InvalidCommandError, InvariantViolation, MazeError
from .generator import generate_maze, kruskal
from .grid import Edge, build_candidate_edges, build_grid
from .paths import reconstruct_path
from .search import MazeSearch, SearchKind, SearchStatus
from .session import MazeSession, MazeSnapshot
from .union_find import UnionFind
from .walls import WallLayout

__all__ = [
    "ConfigurationError",
    "Edge",
    "InvalidCommandError",
    "InvariantViolation",
    "MazeConfig",
    "MazeError",
    "MazeSearch",
    "MazeSession",
    "MazeSnapshot",
    "SearchKind",
    "SearchStatus",
    "UnionFind",
    "WallLayout",
    "build_candidate_edges",
    "build_grid",
    "generate_maze",
    "kruskal",
    "reconstruct_path",
]
