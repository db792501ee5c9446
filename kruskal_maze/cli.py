"""
Console entry point: build a maze, optionally solve it, print or animate it.

Usage:
    kruskal-maze --size 15 --seed 42 --search bfs --animate --delay 0.02
    kruskal-maze --size 10 --bias uniform --no-solve
    kruskal-maze --gui
"""
import argparse
import logging
import sys
import time

from graphviz import ExecutableNotFound

from .config import GRID_SIZE, TICK_DELAY_MS, MazeConfig
from .errors import ConfigurationError, MazeError
from .grid import DEFAULT_WEIGHT_DISTRIBUTION, WEIGHT_DISTRIBUTIONS
from .render import render_text
from .session import MazeSession

logger = logging.getLogger(__name__)


def clear():
    sys.stdout.write("\x1b[2J\x1b[H")
    sys.stdout.flush()


def parse_args(argv):
    p = argparse.ArgumentParser(description="Kruskal maze generator & BFS/DFS solver")
    p.add_argument("--size", "-n", type=int, default=GRID_SIZE, help="cells per side")
    p.add_argument("--seed", type=int, default=None, help="random seed for reproducibility")
    p.add_argument("--bias", choices=sorted(WEIGHT_DISTRIBUTIONS), default=DEFAULT_WEIGHT_DISTRIBUTION,
                   help="edge weight distribution")
    p.add_argument("--search", choices=["bfs", "dfs"], default="bfs", help="search used to solve the maze")
    p.add_argument("--no-solve", action="store_true", help="do not solve; just show the maze")
    p.add_argument("--animate", action="store_true", help="redraw after every search step")
    p.add_argument("--delay", type=float, default=TICK_DELAY_MS / 1000, help="animation delay seconds per step")
    p.add_argument("--graph", metavar="FILE", default=None,
                   help="also render the search tree with graphviz to FILE.png")
    p.add_argument("--gui", action="store_true", help="open the interactive tkinter window")
    p.add_argument("--verbose", "-v", action="store_true", help="debug logging")
    return p.parse_args(argv)


def solve(session, kind, animate=False, delay=0.0):
    session.start_search(kind)
    while session.tick():
        if animate:
            clear()
            print(render_text(session.snapshot()))
            time.sleep(delay)
    return session.solution_path


def main(argv=None):
    ns = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        if ns.delay < 0:
            raise ConfigurationError(f"Delay must be non-negative, got {ns.delay}")
        config = MazeConfig(grid_size=ns.size, weight_distribution=ns.bias, seed=ns.seed,
                            tick_delay_ms=int(ns.delay * 1000))
        if ns.gui:
            from .app import run_app
            run_app(config)
            return 0

        session = MazeSession(config)
        if ns.no_solve:
            print(render_text(session.snapshot()))
            return 0

        path = solve(session, ns.search, animate=ns.animate, delay=ns.delay)
        if not ns.animate:
            print(render_text(session.snapshot()))
        print(f"\n{session.search.kind.value}: {session.search.steps} steps, "
              f"{len(session.search.visited)} cells visited, path length {len(path) - 1}")

        if ns.graph:
            from .search_tree import render_search_tree
            out = render_search_tree(session.search, ns.graph)
            print(f"Search tree written to {out}")
    except MazeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except ExecutableNotFound as e:
        print(f"Error: cannot render search tree: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
