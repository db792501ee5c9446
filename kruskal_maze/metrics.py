"""Headless batch runs comparing breadth-first and depth-first search across weight distributions."""
import argparse
import collections
import csv
import logging
import os
import statistics
import time

from matplotlib.figure import Figure

from .config import GRID_SIZE, MazeConfig
from .errors import MazeError
from .grid import WEIGHT_DISTRIBUTIONS
from .search import SearchKind
from .session import MazeSession

logger = logging.getLogger(__name__)

DEFAULT_KINDS = [kind.value for kind in SearchKind]
DEFAULT_DISTRIBUTIONS = sorted(WEIGHT_DISTRIBUTIONS)

METRICS = [
    "elapsed_sec",
    "steps",
    "visited",
    "trace_length",
    "frontier_max",
    "path_length",
]


def run_single(size, distribution, kind, seed=None, max_ticks=None):
    """One maze, one search from the start cell, ticked until done or max_ticks."""
    session = MazeSession(MazeConfig(grid_size=size, weight_distribution=distribution, seed=seed))
    session.start_search(kind)
    if max_ticks is None:
        max_ticks = 4 * size * size

    t0 = time.perf_counter()
    ticks = 0
    while session.tick():
        ticks += 1
        if ticks >= max_ticks:
            break
    elapsed = time.perf_counter() - t0

    search = session.search
    return {
        "distribution": distribution,
        "kind": search.kind.value,
        "size": size,
        "seed": seed,
        "ticks": ticks,
        "elapsed_sec": elapsed,
        "steps": search.steps,
        "visited": len(search.visited),
        "trace_length": len(search.trace),
        "frontier_max": search.frontier_max,
        "path_length": max(0, len(session.solution_path) - 1),
        "finished": search.is_done,
    }


def describe_metric(metric, values):
    """avg/min/max/stdev of one metric, keyed as '<metric>_<stat>'."""
    spread = statistics.pstdev(values) if len(values) > 1 else 0
    return {
        f"{metric}_avg": statistics.mean(values),
        f"{metric}_min": min(values),
        f"{metric}_max": max(values),
        f"{metric}_stdev": spread,
    }


def aggregate_results(rows):
    """One summary row per (distribution, kind) pair, in first-seen order."""
    runs_by_pair = collections.OrderedDict()
    for row in rows:
        runs_by_pair.setdefault((row["distribution"], row["kind"]), []).append(row)

    summary = []
    for (distribution, kind), runs in runs_by_pair.items():
        entry = {"distribution": distribution, "kind": kind, "count": len(runs)}
        for metric in METRICS:
            entry.update(describe_metric(metric, [run[metric] for run in runs]))
        entry["finished_rate"] = sum(run["finished"] for run in runs) / len(runs)
        summary.append(entry)
    return summary


def _ensure_parent(path):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def write_csv(path, rows):
    """Writes rows (dicts sharing the first row's keys); nothing is written for an empty list."""
    if not rows:
        return
    _ensure_parent(path)
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0]))
        writer.writeheader()
        writer.writerows(rows)


def plot_metric(summary, metric_key, out_path):
    """Bar chart of one aggregated metric, one bar per (distribution, kind)."""
    labels = [f"{row['kind']}\n({row['distribution']})" for row in summary]
    values = [row.get(metric_key, 0) for row in summary]

    fig = Figure(figsize=(max(8, len(labels) * 0.6), 5))
    ax = fig.add_subplot(111)
    ax.bar(range(len(values)), values)
    ax.set_xticks(range(len(values)))
    ax.set_xticklabels(labels, rotation=45, ha="right")
    ax.set_ylabel(metric_key)
    fig.tight_layout()
    _ensure_parent(out_path)
    fig.savefig(out_path)


def run_batch(runs, size, distributions, kinds, seed_base=None):
    if seed_base is None:
        seed_base = int(time.time())
    rows = []
    for distribution in distributions:
        for kind in kinds:
            for i in range(runs):
                rows.append(run_single(size, distribution, kind, seed=seed_base + i))
            logger.debug("Finished %d runs of %s on %s mazes", runs, kind, distribution)
    return rows


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run repeated maze searches and plot metrics.")
    parser.add_argument("--runs", type=int, default=10, help="Runs per (distribution, search) pair")
    parser.add_argument("--size", type=int, default=GRID_SIZE)
    parser.add_argument("--distributions", nargs="*", default=DEFAULT_DISTRIBUTIONS)
    parser.add_argument("--kinds", nargs="*", default=DEFAULT_KINDS)
    parser.add_argument("--seed", type=int, default=None, help="First seed; run i uses seed + i")
    parser.add_argument("--out_dir", default="metrics_output")
    parser.add_argument("--no-charts", action="store_true", help="Only write the CSV files")
    parser.add_argument("--verbose", "-v", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        rows = run_batch(args.runs, args.size, args.distributions, args.kinds, seed_base=args.seed)
    except MazeError as e:
        parser.exit(2, f"Error: {e}\n")

    os.makedirs(args.out_dir, exist_ok=True)
    write_csv(os.path.join(args.out_dir, "raw_results.csv"), rows)
    summary = aggregate_results(rows)
    write_csv(os.path.join(args.out_dir, "summary.csv"), summary)

    if not args.no_charts:
        for metric in METRICS:
            key = f"{metric}_avg"
            plot_metric(summary, key, os.path.join(args.out_dir, f"{key}.png"))

    print(f"Wrote results to {args.out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
