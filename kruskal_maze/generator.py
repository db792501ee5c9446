"""Maze generation with Kruskal's Minimum Spanning Tree algorithm."""
import logging
import random

from .errors import InvariantViolation
from .grid import build_candidate_edges, check_size, resolve_weight_distribution
from .union_find import UnionFind
from .walls import WallLayout

logger = logging.getLogger(__name__)


def kruskal(size, edges):
    """
    Runs Kruskal's algorithm over the candidate edges of a size x size grid.

    Algorithm:
      1. Sort all edges by weight, ascending. The sort is stable, so ties keep
         generation order; tie order changes the maze shape, never its validity.
      2. Initialize a Union-Find with every cell in its own component.
      3. For each edge in sorted order:
         a. Endpoints already in the same component -> the edge would close a
            cycle, so it stays a wall.
         b. Otherwise union the components and the edge becomes an open passage.
      4. Every candidate edge is processed; the rejected ones form the wall set.

    Mathematical property:
      - The accepted edges are a spanning tree: size * size - 1 passages, one
        unique simple path between any two cells.

    Returns:
      list[Edge]: the wall set, in the order the edges were rejected.
    """
    check_size(size)
    uf = UnionFind(size)
    walls = []
    passages = 0
    for edge in sorted(edges, key=lambda e: e.weight):
        if uf.union(edge.c1, edge.c2):
            passages += 1
        else:
            walls.append(edge)

    expected = size * size - 1
    if passages != expected or uf.components != 1:
        raise InvariantViolation(
            f"Kruskal produced {passages} passages and {uf.components} components "
            f"on a {size}x{size} grid (expected {expected} passages, 1 component)"
        )
    return walls


def generate_maze(size, weight_fn=None, rng=None, seed=None):
    """
    Builds a fresh perfect maze: grid -> weighted candidate edges -> Kruskal -> wall layout.

    A single random.Random drives every edge weight of the build; pass rng or
    seed to make the layout reproducible.
    """
    check_size(size)
    weight_fn = resolve_weight_distribution(weight_fn)
    if rng is None:
        rng = random.Random(seed)

    edges = build_candidate_edges(size, weight_fn, rng)
    walls = kruskal(size, edges)
    layout = WallLayout(size, walls)

    if layout.open_passage_count() != size * size - 1:
        raise InvariantViolation(
            f"Wall layout has {layout.open_passage_count()} open passages, expected {size * size - 1}"
        )
    logger.debug("Generated %dx%d maze: %d candidate edges, %d walls, %d passages",
                 size, size, len(edges), len(walls), size * size - 1)
    return layout
