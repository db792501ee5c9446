from kruskal_maze.grid import Edge
from kruskal_maze.walls import WallLayout


def two_by_two_layout():
    """2x2 maze whose only wall separates (0, 1) from (1, 1)."""
    return WallLayout(2, [Edge(0, (0, 1), (1, 1))])


def assert_valid_path(testcase, layout, path, start, goal):
    testcase.assertEqual(path[0], start)
    testcase.assertEqual(path[-1], goal)
    for a, b in zip(path, path[1:]):
        opened = [nxt for _, nxt in layout.open_neighbors(a)]
        testcase.assertIn(b, opened, f"{a} -> {b} crosses a wall")
