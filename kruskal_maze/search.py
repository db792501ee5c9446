"""Incremental breadth-first / depth-first search over a wall layout."""
import collections
import enum

from .errors import InvalidCommandError, InvariantViolation
from .paths import reconstruct_path


class SearchKind(enum.Enum):
    BREADTH_FIRST = 'breadth_first'
    DEPTH_FIRST = 'depth_first'

    @classmethod
    def parse(cls, value):
        """Accept a SearchKind, its value, or the short names 'bfs' / 'dfs'."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace('-', '_')
            key = {'bfs': 'breadth_first', 'dfs': 'depth_first'}.get(key, key)
            for kind in cls:
                if kind.value == key:
                    return kind
        raise InvalidCommandError(f"Unknown search kind: {value!r}")


class SearchStatus(enum.Enum):
    IDLE = 'idle'
    RUNNING = 'running'
    DONE = 'done'


class MazeSearch:
    """
    A single search pass from start to goal that advances one frontier pop per step().

    Search semantics:
      - Frontier: deque of discovered cells; always popped from the front.
        Breadth-first pushes new cells at the back (FIFO), depth-first at the
        front (LIFO).
      - Expansion looks at neighbours in the order down, right, up, left and
        skips walls and cells already visited.
      - came_from keeps the first predecessor recorded for each cell. In a
        perfect maze every cell has exactly one path to the start, so the first
        discovery is also the only one.
      - trace lists every cell pushed onto the frontier, in discovery order,
        for animation.

    Lifecycle: IDLE -> start() -> RUNNING -> step()... -> DONE. step() outside
    RUNNING does nothing. Cancelling a search is simply dropping the object.
    """
    def __init__(self, layout, start, goal, kind=SearchKind.BREADTH_FIRST):
        self.layout = layout
        self.kind = SearchKind.parse(kind)
        # Validates both endpoints against the grid
        layout.open_neighbors(start)
        layout.open_neighbors(goal)
        self.start_cell = start
        self.goal = goal
        self._reset()

    def _reset(self):
        self.status = SearchStatus.IDLE
        self.frontier = collections.deque()
        self.visited = set()
        self.came_from = {}
        self.trace = []
        self.steps = 0
        self.frontier_max = 0

    @property
    def is_running(self):
        return self.status is SearchStatus.RUNNING

    @property
    def is_done(self):
        return self.status is SearchStatus.DONE

    def start(self):
        """Discards any previous progress and seeds the frontier with the start cell."""
        self._reset()
        self.frontier.append(self.start_cell)
        self.frontier_max = 1
        self.status = SearchStatus.RUNNING
        return self

    def step(self):
        """
        Processes exactly one frontier pop.

        Returns:
          bool: False when the search is not running (IDLE or DONE), True otherwise.
        """
        if self.status is not SearchStatus.RUNNING:
            return False
        if not self.frontier:
            raise InvariantViolation(
                f"Frontier exhausted before reaching {self.goal!r}; the maze is not connected"
            )

        current = self.frontier.popleft()
        self.steps += 1

        if current in self.visited:
            return True

        if current == self.goal:
            self.visited.add(current)
            self.status = SearchStatus.DONE
            return True

        for _, neighbor in self.layout.open_neighbors(current):
            if neighbor in self.visited:
                continue
            if self.kind is SearchKind.BREADTH_FIRST:
                self.frontier.append(neighbor)
            else:
                self.frontier.appendleft(neighbor)
            if neighbor not in self.came_from:
                self.came_from[neighbor] = current
            self.trace.append(neighbor)

        self.visited.add(current)
        self.frontier_max = max(self.frontier_max, len(self.frontier))
        return True

    def run(self, max_steps=None):
        """Steps until DONE (or max_steps pops); starts the search first if IDLE."""
        if self.status is SearchStatus.IDLE:
            self.start()
        taken = 0
        while self.status is SearchStatus.RUNNING:
            if max_steps is not None and taken >= max_steps:
                break
            self.step()
            taken += 1
        return self.status

    def solution(self):
        """Start-to-goal path; only available once the search is DONE."""
        if self.status is not SearchStatus.DONE:
            raise InvariantViolation(f"No solution while the search is {self.status.value}")
        size = self.layout.size
        return reconstruct_path(self.came_from, self.start_cell, self.goal, limit=size * size)
