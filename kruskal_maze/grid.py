"""
Grid and candidate-edge model.

Cells are plain ``(x, y)`` tuples where x is the column (0 to size-1, growing
rightwards) and y is the row (0 to size-1, growing downwards). Origin (0, 0) is
the top-left corner and doubles as the start cell; (size-1, size-1) is the goal.

A candidate edge joins two grid-adjacent cells and carries a random integer
weight. Each cell is joined to its East and South neighbour only, so every
adjacent pair appears exactly once: 2 * size * (size - 1) edges in total.
"""
import collections
import random

from .errors import ConfigurationError, InvalidCommandError

# (dx, dy, direction, opposite)
DIRECTIONS = [(0, -1, 'N', 'S'), (0, 1, 'S', 'N'), (-1, 0, 'W', 'E'), (1, 0, 'E', 'W')]
DELTAS = {direction: (dx, dy) for dx, dy, direction, _ in DIRECTIONS}
OPPOSITE = {direction: opposite for _, _, direction, opposite in DIRECTIONS}

# Order in which the search engine looks at neighbours: down, right, up, left.
SEARCH_ORDER = ('S', 'E', 'N', 'W')

DIRECTION_ALIASES = {
    'n': 'N', 'up': 'N', 'top': 'N', 'north': 'N',
    's': 'S', 'down': 'S', 'bottom': 'S', 'south': 'S',
    'w': 'W', 'left': 'W', 'west': 'W',
    'e': 'E', 'right': 'E', 'east': 'E',
}

Edge = collections.namedtuple('Edge', ['weight', 'c1', 'c2'])


def normalize_direction(direction):
    """Map 'up'/'down'/'left'/'right' (or N/S/W/E, any case) onto N/S/W/E."""
    if isinstance(direction, str):
        key = direction.strip().lower()
        if key in DIRECTION_ALIASES:
            return DIRECTION_ALIASES[key]
    raise InvalidCommandError(f"Unknown direction: {direction!r}")


def check_size(size):
    """Grid dimension must be an int >= 1."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise ConfigurationError(f"Grid size must be an integer, got {size!r}")
    if size < 1:
        raise ConfigurationError(f"Grid size must be at least 1, got {size}")
    return size


def in_bounds(cell, size):
    x, y = cell
    return 0 <= x < size and 0 <= y < size


def cell_index(cell, size):
    """Row-major arena index of a cell."""
    x, y = cell
    return y * size + x


def index_cell(index, size):
    return (index % size, index // size)


def step_cell(cell, direction):
    """The cell one step away in the given (normalized) direction; may be off-grid."""
    dx, dy = DELTAS[direction]
    return (cell[0] + dx, cell[1] + dy)


def is_horizontal(c1, c2):
    return c1[1] == c2[1]


def build_grid(size):
    """All cells of a size x size grid in row-major order."""
    check_size(size)
    return [(x, y) for y in range(size) for x in range(size)]


# --- Weight distributions ---
# Signature: weight_fn(c1, c2, rng) -> int. The rng is a single random.Random
# seeded once per maze build.

def horizontal_bias_weight(c1, c2, rng):
    """
    Axis-aware weighting: horizontal edges draw from a lower range than
    vertical ones. Kruskal's algorithm accepts light edges first, so horizontal
    passages are opened before vertical ones and the maze grows long
    left-to-right corridors. The ranges overlap so rows still branch.
    """
    if is_horizontal(c1, c2):
        return rng.randint(0, 9)
    return rng.randint(3, 12)


def uniform_weight(c1, c2, rng):
    """Unbiased weights: every spanning tree shape is equally favoured."""
    return rng.randrange(100)


def compressed_weight(c1, c2, rng):
    """Legacy low-range draw: 0 three times out of four, otherwise 1."""
    return rng.randrange(4) // 3


WEIGHT_DISTRIBUTIONS = {
    'horizontal': horizontal_bias_weight,
    'uniform': uniform_weight,
    'compressed': compressed_weight,
}
DEFAULT_WEIGHT_DISTRIBUTION = 'horizontal'


def resolve_weight_distribution(distribution):
    """Accept a registered name or any callable with the weight_fn signature."""
    if distribution is None:
        return WEIGHT_DISTRIBUTIONS[DEFAULT_WEIGHT_DISTRIBUTION]
    if callable(distribution):
        return distribution
    try:
        return WEIGHT_DISTRIBUTIONS[distribution]
    except (KeyError, TypeError):
        names = ", ".join(sorted(WEIGHT_DISTRIBUTIONS))
        raise ConfigurationError(
            f"Unknown weight distribution {distribution!r} (expected one of: {names})"
        ) from None


def build_candidate_edges(size, weight_fn=None, rng=None):
    """
    Creates every candidate edge of the grid with a random weight.

    Each cell is joined to its right neighbour (if x < size - 1) and its bottom
    neighbour (if y < size - 1), which avoids duplicates and out-of-bounds
    neighbours. A 1x1 grid yields an empty list.

    Parameters:
      size (int): grid dimension, >= 1
      weight_fn (callable): weight_fn(c1, c2, rng) -> int, defaults to the
                            horizontal-bias distribution
      rng (random.Random): shared generator for all weights of this build

    Returns:
      list[Edge]: edges in row-major generation order (unsorted)
    """
    check_size(size)
    weight_fn = resolve_weight_distribution(weight_fn)
    if rng is None:
        rng = random.Random()

    edges = []
    for y in range(size):
        for x in range(size):
            u = (x, y)
            # East neighbour
            if x < size - 1:
                v = (x + 1, y)
                edges.append(Edge(weight_fn(u, v, rng), u, v))
            # South neighbour
            if y < size - 1:
                v = (x, y + 1)
                edges.append(Edge(weight_fn(u, v, rng), u, v))
    return edges


def candidate_edge_count(size):
    return 2 * size * (size - 1)
