"""Exception types raised by the maze engine."""


class MazeError(Exception):
    """Base class for every error raised by kruskal_maze."""


class ConfigurationError(MazeError, ValueError):
    """Rejected configuration (grid size < 1, unknown weight distribution, ...)."""


class InvalidCommandError(MazeError, ValueError):
    """Unknown direction, unknown search kind or a cell outside the grid."""


class InvariantViolation(MazeError, RuntimeError):
    """
    Raised when generation or search produced a structurally broken result.

    Examples: a predecessor chain that never reaches the start cell, a wall
    layout with the wrong number of open passages, a parent cycle inside the
    union-find arena, or a frontier that ran dry before the goal was found.
    These always point at a bug (or a hand-built, disconnected layout) and are
    never silently ignored.
    """
