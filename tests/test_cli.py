import unittest
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from unittest import mock

from graphviz import ExecutableNotFound

from kruskal_maze import cli


class CliTestCase(unittest.TestCase):
    def run_cli(self, *argv):
        out, err = StringIO(), StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = cli.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_no_solve_prints_maze(self) -> None:
        code, out, _ = self.run_cli("--size", "4", "--seed", "1", "--no-solve")
        self.assertEqual(code, 0)
        lines = out.splitlines()
        self.assertEqual(len(lines), 9)
        self.assertTrue(lines[1].startswith("#@"))

    def test_solve_reports_path(self) -> None:
        code, out, _ = self.run_cli("--size", "5", "--seed", "2", "--search", "dfs")
        self.assertEqual(code, 0)
        self.assertIn("depth_first:", out)
        self.assertIn("path length", out)
        self.assertIn("*", out)

    def test_invalid_size_exits_with_error(self) -> None:
        code, _, err = self.run_cli("--size", "0")
        self.assertEqual(code, 2)
        self.assertIn("Grid size", err)

    def test_negative_delay_is_rejected(self) -> None:
        code, out, err = self.run_cli("--size", "3", "--seed", "1", "--animate", "--delay", "-1")
        self.assertEqual(code, 2)
        self.assertIn("Delay must be non-negative", err)
        self.assertEqual(out, "")

    def test_negative_delay_is_rejected_without_animation(self) -> None:
        code, _, err = self.run_cli("--size", "3", "--delay", "-0.5", "--no-solve")
        self.assertEqual(code, 2)
        self.assertIn("Delay", err)

    def test_missing_graphviz_binary_is_reported(self) -> None:
        with mock.patch("kruskal_maze.search_tree.render_search_tree",
                        side_effect=ExecutableNotFound(["dot", "-Tpng"])):
            code, out, err = self.run_cli("--size", "3", "--seed", "1", "--graph", "tree")
        self.assertEqual(code, 1)
        self.assertIn("path length", out)
        self.assertIn("cannot render search tree", err)


if __name__ == "__main__":
    unittest.main()
