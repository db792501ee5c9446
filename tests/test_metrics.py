import csv
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from io import StringIO

from kruskal_maze import metrics


class MetricsTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.root = self.tmpdir.name

    def tearDown(self) -> None:
        self.tmpdir.cleanup()

    def test_run_single(self) -> None:
        row = metrics.run_single(5, "uniform", "bfs", seed=1)
        self.assertTrue(row["finished"])
        self.assertEqual(row["kind"], "breadth_first")
        self.assertGreaterEqual(row["path_length"], 8)
        self.assertLessEqual(row["steps"], 25)
        self.assertLessEqual(row["visited"], 25)

    def test_aggregate_results(self) -> None:
        rows = metrics.run_batch(3, 4, ["horizontal"], ["bfs", "dfs"], seed_base=10)
        self.assertEqual(len(rows), 6)
        summary = metrics.aggregate_results(rows)
        self.assertEqual(len(summary), 2)
        for entry in summary:
            self.assertEqual(entry["count"], 3)
            self.assertEqual(entry["finished_rate"], 1.0)
            self.assertLessEqual(entry["steps_min"], entry["steps_avg"])
            self.assertLessEqual(entry["steps_avg"], entry["steps_max"])

    def test_describe_metric(self) -> None:
        stats = metrics.describe_metric("steps", [2, 4, 6])
        self.assertEqual(stats["steps_avg"], 4)
        self.assertEqual(stats["steps_min"], 2)
        self.assertEqual(stats["steps_max"], 6)
        self.assertAlmostEqual(stats["steps_stdev"], (8 / 3) ** 0.5)
        self.assertEqual(metrics.describe_metric("visited", [7])["visited_stdev"], 0)

    def test_summary_keeps_first_seen_pair_order(self) -> None:
        rows = metrics.run_batch(1, 3, ["uniform", "horizontal"], ["dfs", "bfs"], seed_base=3)
        summary = metrics.aggregate_results(rows)
        pairs = [(entry["distribution"], entry["kind"]) for entry in summary]
        self.assertEqual(pairs, [("uniform", "depth_first"), ("uniform", "breadth_first"),
                                 ("horizontal", "depth_first"), ("horizontal", "breadth_first")])

    def test_same_seed_same_path_length_for_both_kinds(self) -> None:
        bfs = metrics.run_single(6, "horizontal", "bfs", seed=4)
        dfs = metrics.run_single(6, "horizontal", "dfs", seed=4)
        self.assertEqual(bfs["path_length"], dfs["path_length"])

    def test_write_csv_and_plot(self) -> None:
        rows = metrics.run_batch(2, 3, ["uniform"], ["bfs"], seed_base=1)
        csv_path = os.path.join(self.root, "out", "raw.csv")
        metrics.write_csv(csv_path, rows)
        with open(csv_path, newline="", encoding="utf-8") as f:
            read_back = list(csv.DictReader(f))
        self.assertEqual(len(read_back), 2)
        self.assertEqual(read_back[0]["kind"], "breadth_first")

        png_path = os.path.join(self.root, "charts", "steps_avg.png")
        metrics.plot_metric(metrics.aggregate_results(rows), "steps_avg", png_path)
        self.assertTrue(os.path.getsize(png_path) > 0)

    def test_main(self) -> None:
        out = StringIO()
        with redirect_stdout(out):
            code = metrics.main(["--runs", "1", "--size", "3", "--seed", "1",
                                 "--out_dir", self.root, "--no-charts"])
        self.assertEqual(code, 0)
        self.assertTrue(os.path.exists(os.path.join(self.root, "raw_results.csv")))
        self.assertTrue(os.path.exists(os.path.join(self.root, "summary.csv")))
        self.assertIn("Wrote results to", out.getvalue())


if __name__ == "__main__":
    unittest.main()
