"""Single-owner controller tying maze generation, player movement and search together."""
import logging
import random
from dataclasses import dataclass
from typing import FrozenSet, Optional, Tuple

from .config import MazeConfig
from .generator import generate_maze
from .grid import normalize_direction
from .search import MazeSearch, SearchKind, SearchStatus
from .walls import WallLayout

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# Key name (lower case) -> (action, argument). Arrow names match Tk keysyms.
KEY_BINDINGS = {
    'up': ('move', 'N'),
    'down': ('move', 'S'),
    'left': ('move', 'W'),
    'right': ('move', 'E'),
    'b': ('search', SearchKind.BREADTH_FIRST),
    'd': ('search', SearchKind.DEPTH_FIRST),
    'n': ('new_maze', None),
}


@dataclass(frozen=True)
class MazeSnapshot:
    """Everything a presentation layer needs to draw one frame."""

    size: int
    layout: WallLayout
    start: Cell
    goal: Cell
    player: Cell
    player_trail: Tuple[Cell, ...]
    search_kind: Optional[SearchKind]
    search_status: SearchStatus
    frontier: Tuple[Cell, ...]
    visited: FrozenSet[Cell]
    trace: Tuple[Cell, ...]
    solution_path: Tuple[Cell, ...]
    won: bool


class MazeSession:
    """
    Owns one maze, the player on it and at most one search.

    The start cell is the top-left corner and the goal the bottom-right one.
    All mutation goes through new_maze(), move(), start_search() and tick();
    the object is not thread-safe and expects a single owner.
    """
    def __init__(self, config: Optional[MazeConfig] = None) -> None:
        self.config = config if config is not None else MazeConfig()
        self.size = self.config.grid_size
        self.start = (0, 0)
        self.goal = (self.size - 1, self.size - 1)
        # Seeded once per session; each maze build draws its own seed from it.
        self._rng = random.Random(self.config.seed)
        self.maze_seed = None
        self.layout = None
        self.player = self.start
        self.player_trail = []
        self.search = None
        self.solution_path = []
        self.new_maze()

    def new_maze(self) -> WallLayout:
        """Regenerates the maze, puts the player back on start and drops any search."""
        self.maze_seed = self._rng.randrange(2 ** 32)
        self.layout = generate_maze(self.size, self.config.weight_fn, seed=self.maze_seed)
        self.player = self.start
        self.player_trail = []
        self.search = None
        self.solution_path = []
        logger.info("New %dx%d maze (seed %d)", self.size, self.size, self.maze_seed)
        return self.layout

    def is_won(self) -> bool:
        return self.player == self.goal

    def move(self, direction) -> bool:
        """
        Moves the player one cell.

        Returns False (and changes nothing) when a wall blocks the way or the
        goal has already been reached. Unknown directions raise
        InvalidCommandError.
        """
        direction = normalize_direction(direction)
        if self.is_won():
            return False
        nxt = self.layout.neighbor(self.player, direction)
        if nxt is None:
            return False
        self.player_trail.append(self.player)
        self.player = nxt
        if self.is_won():
            logger.info("Player reached the goal after %d moves", len(self.player_trail))
        return True

    def start_search(self, kind) -> MazeSearch:
        """Replaces any current search with a fresh one seeded at the player's cell."""
        kind = SearchKind.parse(kind)
        self.search = MazeSearch(self.layout, self.player, self.goal, kind).start()
        self.solution_path = []
        logger.debug("Started %s search from %s", kind.value, self.player)
        return self.search

    @property
    def search_status(self) -> SearchStatus:
        if self.search is None:
            return SearchStatus.IDLE
        return self.search.status

    def tick(self) -> bool:
        """
        Advances the active search by one step.

        When the step reaches the goal the solution path is reconstructed and
        stored in solution_path. Returns False when there was nothing to do.
        """
        if self.search is None or not self.search.is_running:
            return False
        self.search.step()
        if self.search.is_done:
            self.solution_path = self.search.solution()
            logger.info("%s search finished in %d steps, path length %d",
                        self.search.kind.value, self.search.steps, len(self.solution_path) - 1)
        return True

    def handle_key(self, key) -> bool:
        """Dispatches a key press through KEY_BINDINGS; unbound keys return False."""
        binding = KEY_BINDINGS.get(str(key).lower())
        if binding is None:
            return False
        action, argument = binding
        if action == 'move':
            return self.move(argument)
        if action == 'search':
            self.start_search(argument)
        else:
            self.new_maze()
        return True

    def snapshot(self) -> MazeSnapshot:
        search = self.search
        return MazeSnapshot(
            size=self.size,
            layout=self.layout,
            start=self.start,
            goal=self.goal,
            player=self.player,
            player_trail=tuple(self.player_trail),
            search_kind=search.kind if search is not None else None,
            search_status=self.search_status,
            frontier=tuple(search.frontier) if search is not None else (),
            visited=frozenset(search.visited) if search is not None else frozenset(),
            trace=tuple(search.trace) if search is not None else (),
            solution_path=tuple(self.solution_path),
            won=self.is_won(),
        )
