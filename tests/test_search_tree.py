import unittest

from kruskal_maze.generator import generate_maze
from kruskal_maze.search import MazeSearch
from kruskal_maze.search_tree import search_tree_graph

from tests.helpers import two_by_two_layout


class SearchTreeGraphTestCase(unittest.TestCase):
    def test_edges_follow_predecessors(self) -> None:
        search = MazeSearch(two_by_two_layout(), (0, 0), (1, 1), "bfs")
        search.run()
        source = search_tree_graph(search).source
        self.assertIn("digraph breadth_first_tree", source)
        self.assertIn('"(0, 0)" -> "(1, 0)"', source)
        self.assertIn('"(0, 0)" -> "(0, 1)"', source)
        self.assertIn('"(1, 0)" -> "(1, 1)"', source)
        self.assertEqual(source.count("->"), len(search.came_from))

    def test_path_is_highlighted(self) -> None:
        search = MazeSearch(generate_maze(5, seed=2), (0, 0), (4, 4), "dfs")
        search.run()
        source = search_tree_graph(search).source
        highlighted = [line for line in source.splitlines() if "->" in line and "color=red" in line]
        self.assertEqual(len(highlighted), len(search.solution()) - 1)

    def test_running_search_has_no_highlight(self) -> None:
        search = MazeSearch(generate_maze(5, seed=2), (0, 0), (4, 4)).start()
        search.step()
        source = search_tree_graph(search).source
        self.assertNotIn("color=red", source)


if __name__ == "__main__":
    unittest.main()
