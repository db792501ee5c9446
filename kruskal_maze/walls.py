"""Wall / adjacency queries over a generated maze."""
import collections

from .errors import InvalidCommandError, InvariantViolation
from .grid import (
    OPPOSITE, SEARCH_ORDER, cell_index, check_size, in_bounds, index_cell, normalize_direction, step_cell,
)

# Slot of each direction inside a cell's wall array
WALL_SLOTS = {'N': 0, 'S': 1, 'W': 2, 'E': 3}


class WallLayout:
    """
    Answers "is there a wall between this cell and its neighbour in direction D".

    Representation:
      - self.walls is the wall set as given (the edges Kruskal rejected).
      - self._sides[i] is a fixed 4-slot list of booleans (N, S, W, E) for the
        cell with row-major index i, computed once from the wall set.
      - Boundary sides are always walls, whatever the wall set contains.
      - An interior side is a wall iff the wall set holds the edge joining the
        two cells; otherwise it is an open passage.

    Queries are O(1) and never mutate the layout.
    """
    def __init__(self, size, walls):
        self.size = check_size(size)
        self.walls = tuple(walls)
        self._sides = []
        for i in range(size * size):
            x, y = index_cell(i, size)
            self._sides.append([y == 0, y == size - 1, x == 0, x == size - 1])

        for edge in self.walls:
            c1, c2 = edge.c1, edge.c2
            direction = self._direction_between(c1, c2)
            self._sides[cell_index(c1, size)][WALL_SLOTS[direction]] = True
            self._sides[cell_index(c2, size)][WALL_SLOTS[OPPOSITE[direction]]] = True

    def _direction_between(self, c1, c2):
        if not (in_bounds(c1, self.size) and in_bounds(c2, self.size)):
            raise InvariantViolation(f"Wall {c1!r}-{c2!r} lies outside the grid")
        dx, dy = c2[0] - c1[0], c2[1] - c1[1]
        for direction in WALL_SLOTS:
            if step_cell(c1, direction) == c2:
                return direction
        raise InvariantViolation(f"Wall {c1!r}-{c2!r} does not join adjacent cells (dx={dx}, dy={dy})")

    def _check_cell(self, cell):
        if not in_bounds(cell, self.size):
            raise InvalidCommandError(f"Cell {cell!r} is outside the {self.size}x{self.size} grid")

    def has_wall(self, cell, direction):
        self._check_cell(cell)
        return self._sides[cell_index(cell, self.size)][WALL_SLOTS[normalize_direction(direction)]]

    def has_top_wall(self, cell):
        return self.has_wall(cell, 'N')

    def has_bottom_wall(self, cell):
        return self.has_wall(cell, 'S')

    def has_left_wall(self, cell):
        return self.has_wall(cell, 'W')

    def has_right_wall(self, cell):
        return self.has_wall(cell, 'E')

    def neighbor(self, cell, direction):
        """The cell reached by moving in direction, or None when a wall blocks it."""
        direction = normalize_direction(direction)
        if self.has_wall(cell, direction):
            return None
        return step_cell(cell, direction)

    def open_neighbors(self, cell, order=SEARCH_ORDER):
        """(direction, neighbour) pairs for every open side, in the given order."""
        self._check_cell(cell)
        walls = self._sides[cell_index(cell, self.size)]
        return [(d, step_cell(cell, d)) for d in order if not walls[WALL_SLOTS[d]]]

    def open_passages(self):
        """Every open passage once, as (cell, right-or-bottom neighbour)."""
        passages = []
        for i, walls in enumerate(self._sides):
            cell = index_cell(i, self.size)
            if not walls[WALL_SLOTS['E']]:
                passages.append((cell, step_cell(cell, 'E')))
            if not walls[WALL_SLOTS['S']]:
                passages.append((cell, step_cell(cell, 'S')))
        return passages

    def open_passage_count(self):
        return len(self.open_passages())

    def reachable_from(self, cell):
        """Set of cells reachable from cell through open passages."""
        seen = {cell}
        queue = collections.deque([cell])
        while queue:
            current = queue.popleft()
            for _, nxt in self.open_neighbors(current):
                if nxt not in seen:
                    seen.add(nxt)
                    queue.append(nxt)
        return seen

    def is_spanning_tree(self):
        """True when passages connect every cell with no cycle (a perfect maze)."""
        total = self.size * self.size
        return self.open_passage_count() == total - 1 and len(self.reachable_from((0, 0))) == total
