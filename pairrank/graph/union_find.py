"""
Disjoint-set forest over entity indices.

Used to answer "which entities are already linked" questions about the
comparison graph without walking its edge list repeatedly.
"""

from typing import Dict, Iterable, List, Tuple


class UnionFind:
    """
    Union-find with path compression and union by size.

    Elements are the integers 0..size-1.
    """

    def __init__(self, size: int):
        if size < 0:
            raise ValueError("UnionFind size must be non-negative")
        self._parent = list(range(size))
        self._size = [1] * size
        self._components = size

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def component_count(self) -> int:
        return self._components

    def find(self, item: int) -> int:
        """Return the root of `item`, compressing the path on the way up."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: int, b: int) -> bool:
        """
        Merge the sets containing `a` and `b`.

        Returns:
            True if two distinct sets were merged
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size[root_b]
        self._components -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def members(self, item: int) -> List[int]:
        """All elements in the same set as `item`, ascending."""
        root = self.find(item)
        return [i for i in range(len(self._parent)) if self.find(i) == root]

    def groups(self) -> List[List[int]]:
        """Partition of all elements, each group ascending, ordered by smallest member."""
        by_root: Dict[int, List[int]] = {}
        for i in range(len(self._parent)):
            by_root.setdefault(self.find(i), []).append(i)
        return sorted(by_root.values(), key=lambda group: group[0])

    @classmethod
    def from_edges(cls, size: int, edges: Iterable[Tuple[int, int]]) -> "UnionFind":
        uf = cls(size)
        for a, b in edges:
            uf.union(a, b)
        return uf
