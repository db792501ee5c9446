"""Disjoint Set Union (Union-Find) over the cells of a square grid."""
from .grid import cell_index, check_size, in_bounds, index_cell
from .errors import InvalidCommandError, InvariantViolation


class UnionFind:
    """
    Tracks connected components of cells while Kruskal's algorithm runs.

    Representation:
      - Arena-indexed: self.parent[i] is the parent index of the cell with
        row-major index i. A root is an index that is its own parent.
      - Initially every cell is its own component (size * size roots).

    Merge policy:
      - union(c1, c2) attaches the root of c1 under the root of c2 (directed
        merge, no rank). find() compresses the path it walked, which only
        shortens later lookups and never changes which root is reported.
    """
    def __init__(self, size):
        self.size = check_size(size)
        self.parent = list(range(size * size))
        self.components = size * size

    def _index(self, cell):
        if not in_bounds(cell, self.size):
            raise InvalidCommandError(f"Cell {cell!r} is outside the {self.size}x{self.size} grid")
        return cell_index(cell, self.size)

    def _find_root(self, i):
        # A chain longer than the number of cells means the parent links loop.
        limit = len(self.parent)
        root = i
        while self.parent[root] != root:
            root = self.parent[root]
            limit -= 1
            if limit < 0:
                raise InvariantViolation(f"Union-find parent cycle reached from index {i}")
        # Path compression
        while self.parent[i] != root:
            self.parent[i], i = root, self.parent[i]
        return root

    def find(self, cell):
        """Representative cell of the component containing cell."""
        return index_cell(self._find_root(self._index(cell)), self.size)

    def union(self, c1, c2):
        """
        Makes find(c2) the representative of find(c1).

        Returns:
          bool: True if two components were merged, False if c1 and c2 were
                already connected (the edge would close a cycle).
        """
        r1 = self._find_root(self._index(c1))
        r2 = self._find_root(self._index(c2))
        if r1 == r2:
            return False
        self.parent[r1] = r2
        self.components -= 1
        return True

    def connected(self, c1, c2):
        return self._find_root(self._index(c1)) == self._find_root(self._index(c2))
