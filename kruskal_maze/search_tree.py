"""Graphviz export of the tree a search discovered."""
from graphviz import Digraph

PATH_COLOR = "red"


def _node_id(cell):
    return str(cell)


def search_tree_graph(search, path=None):
    """
    Builds a Digraph with one edge per predecessor link (parent -> child).

    Cells on the solution path and the links between them are drawn in red.
    Uses the search's own solution when the search is done and no path is given.
    """
    if path is None and search.is_done:
        path = search.solution()
    on_path = set(path or ())
    path_links = set(zip(path or (), (path or ())[1:]))

    dot = Digraph(name=f"{search.kind.value}_tree")
    dot.node(_node_id(search.start_cell), shape="doublecircle")
    for child, parent in search.came_from.items():
        for cell in (parent, child):
            if cell in on_path:
                dot.node(_node_id(cell), color=PATH_COLOR)
            else:
                dot.node(_node_id(cell))
        if (parent, child) in path_links:
            dot.edge(_node_id(parent), _node_id(child), color=PATH_COLOR, penwidth="2")
        else:
            dot.edge(_node_id(parent), _node_id(child))
    return dot


def render_search_tree(search, filename, fmt="png", view=False):
    """Renders the tree to filename.<fmt> (needs the Graphviz 'dot' binary)."""
    dot = search_tree_graph(search)
    dot.format = fmt
    return dot.render(filename, view=view, cleanup=True)
