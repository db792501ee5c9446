"""Default settings and the validated configuration object."""
from dataclasses import dataclass
from typing import Callable, Optional, Union

from .errors import ConfigurationError
from .grid import DEFAULT_WEIGHT_DISTRIBUTION, check_size, resolve_weight_distribution

# --- Configuration ---
GRID_SIZE = 20       # Cells per side
CELL_SIZE = 20       # GUI pixels per cell
TICK_DELAY_MS = 10   # GUI delay between search steps

# --- Color Scheme ---
BG_COLOR = "#2c3e50"
WALL_COLOR = "#bdc3c7"
CELL_COLOR = "#646464"
PLAYER_COLOR = "#2ecc71"
PLAYER_TRAIL_COLOR = "#96c8ff"
START_COLOR = "#96c8ff"
GOAL_COLOR = "#ff00ff"
SEARCH_AREA_COLOR = "#fa9696"
FINAL_PATH_COLOR = "#ffffff"


@dataclass
class MazeConfig:
    grid_size: int = GRID_SIZE
    weight_distribution: Union[str, Callable, None] = DEFAULT_WEIGHT_DISTRIBUTION
    seed: Optional[int] = None
    tick_delay_ms: int = TICK_DELAY_MS
    cell_size: int = CELL_SIZE

    def __post_init__(self) -> None:
        check_size(self.grid_size)
        # Fail at construction time rather than on the first maze build
        resolve_weight_distribution(self.weight_distribution)
        if self.tick_delay_ms < 0:
            raise ConfigurationError("tick_delay_ms must be non-negative")
        if self.cell_size <= 0:
            raise ConfigurationError("cell_size must be positive")

    @property
    def weight_fn(self) -> Callable:
        return resolve_weight_distribution(self.weight_distribution)
