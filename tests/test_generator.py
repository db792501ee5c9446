import random
import unittest

from kruskal_maze.errors import ConfigurationError, InvariantViolation
from kruskal_maze.generator import generate_maze, kruskal
from kruskal_maze.grid import WEIGHT_DISTRIBUTIONS, Edge, build_candidate_edges


class KruskalTestCase(unittest.TestCase):
    def test_two_by_two_rejects_heaviest_edge(self) -> None:
        edges = [
            Edge(3, (0, 1), (1, 1)),
            Edge(0, (0, 0), (1, 0)),
            Edge(1, (0, 0), (0, 1)),
            Edge(2, (1, 0), (1, 1)),
        ]
        self.assertEqual(kruskal(2, edges), [Edge(3, (0, 1), (1, 1))])

    def test_two_by_two_counts(self) -> None:
        edges = build_candidate_edges(2, rng=random.Random(5))
        walls = kruskal(2, edges)
        self.assertEqual(len(edges), 4)
        self.assertEqual(len(walls), 1)
        self.assertEqual(len(edges) - len(walls), 3)

    def test_missing_edges_fail_loudly(self) -> None:
        edges = [Edge(0, (0, 0), (1, 0)), Edge(0, (0, 0), (0, 1))]
        with self.assertRaises(InvariantViolation):
            kruskal(2, edges)

    def test_single_cell(self) -> None:
        self.assertEqual(kruskal(1, []), [])


class GenerateMazeTestCase(unittest.TestCase):
    def test_spanning_tree_for_all_sizes_and_distributions(self) -> None:
        for name in WEIGHT_DISTRIBUTIONS:
            for size in range(1, 9):
                with self.subTest(distribution=name, size=size):
                    layout = generate_maze(size, name, seed=size)
                    self.assertEqual(layout.open_passage_count(), size * size - 1)
                    self.assertEqual(len(layout.walls), 2 * size * (size - 1) - (size * size - 1))
                    self.assertTrue(layout.is_spanning_tree())

    def test_four_by_four(self) -> None:
        layout = generate_maze(4, seed=11)
        self.assertEqual(layout.open_passage_count(), 15)
        self.assertEqual(len(layout.walls), 24 - 15)

    def test_same_seed_same_layout(self) -> None:
        self.assertEqual(generate_maze(6, "uniform", seed=3).walls, generate_maze(6, "uniform", seed=3).walls)

    def test_shared_rng_gives_distinct_valid_mazes(self) -> None:
        rng = random.Random(9)
        first = generate_maze(10, "uniform", rng=rng)
        second = generate_maze(10, "uniform", rng=rng)
        self.assertTrue(first.is_spanning_tree())
        self.assertTrue(second.is_spanning_tree())
        self.assertNotEqual(set(first.walls), set(second.walls))

    def test_invalid_configuration(self) -> None:
        with self.assertRaises(ConfigurationError):
            generate_maze(0)
        with self.assertRaises(ConfigurationError):
            generate_maze(3, "spiral")


if __name__ == "__main__":
    unittest.main()
