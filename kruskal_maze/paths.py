"""Solution path reconstruction from a search's predecessor map."""
from .errors import InvariantViolation


def reconstruct_path(came_from, start, goal, limit=None):
    """
    Walks predecessor links from goal back to start.

    Parameters:
      came_from (dict): cell -> cell it was first discovered from
      start, goal (tuple): endpoints of the path
      limit (int): maximum number of links to follow; defaults to the number
                   of recorded predecessors, which any valid chain fits in

    Returns:
      list: cells ordered from start to goal (both included)

    Raises:
      InvariantViolation: a link is missing or the chain runs past the limit
                          without reaching start (a loop in the map).
    """
    if limit is None:
        limit = len(came_from)
    path = [goal]
    node = goal
    while node != start:
        if limit <= 0:
            raise InvariantViolation(f"Predecessor chain from {goal!r} did not reach {start!r}")
        try:
            node = came_from[node]
        except KeyError:
            raise InvariantViolation(f"Cell {node!r} has no recorded predecessor") from None
        path.append(node)
        limit -= 1
    path.reverse()
    return path
