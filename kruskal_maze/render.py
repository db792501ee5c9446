"""
Plain-text drawing of a maze snapshot.

The grid is drawn as (2 * size + 1) x (2 * size + 1) characters: cell (x, y)
sits at column 2x+1, row 2y+1 and the characters between cell centres are
walls ('#') or passages (' ').
"""
WALL = "#"
OPEN = " "
PLAYER = "@"
START = "S"
GOAL = "G"
PATH = "*"
SEARCHED = "."
TRAIL = ","


def maze_to_chars(layout):
    """Character grid of walls and passages, without any markers."""
    size = layout.size
    dim = 2 * size + 1
    chars = [[WALL] * dim for _ in range(dim)]
    for y in range(size):
        for x in range(size):
            cx, cy = 2 * x + 1, 2 * y + 1
            chars[cy][cx] = OPEN
            # Right and bottom sides are enough: every passage is seen once
            if not layout.has_right_wall((x, y)):
                chars[cy][cx + 1] = OPEN
            if not layout.has_bottom_wall((x, y)):
                chars[cy + 1][cx] = OPEN
    return chars


def _mark(chars, cell, symbol):
    x, y = cell
    chars[2 * y + 1][2 * x + 1] = symbol


def render_text(snapshot):
    """Draws walls, searched cells, the solution path, start/goal and the player."""
    chars = maze_to_chars(snapshot.layout)

    for cell in snapshot.player_trail:
        _mark(chars, cell, TRAIL)
    for cell in snapshot.visited:
        _mark(chars, cell, SEARCHED)

    prev = None
    for cell in snapshot.solution_path:
        _mark(chars, cell, PATH)
        if prev is not None:
            # Fill the passage between consecutive path cells
            chars[cell[1] + prev[1] + 1][cell[0] + prev[0] + 1] = PATH
        prev = cell

    _mark(chars, snapshot.start, START)
    _mark(chars, snapshot.goal, GOAL)
    _mark(chars, snapshot.player, PLAYER)
    return "\n".join("".join(row) for row in chars)
