from bisect import bisect_left
from typing import Generic, List, Optional, Tuple, TypeVar

T = TypeVar('T')


class Tree(Generic[T]):
    """
    An append-only tree using indexes as "pointers" to the parent node.
    Node 0 is the root and is its own parent.
    """

    __slots__ = ('nodes',)

    def __init__(self, root: T):
        self.nodes: List[Tuple[T, int]] = [(root, 0)]

    @classmethod
    def from_nodes(cls, nodes: List[Tuple[T, int]]) -> "Tree[T]":
        tree = cls.__new__(cls)
        tree.nodes = nodes
        return tree

    def __len__(self) -> int:
        return len(self.nodes)

    def get(self, idx: int) -> Optional[T]:
        """Get the value in the node at idx."""
        if 0 <= idx < len(self.nodes):
            return self.nodes[idx][0]
        return None

    def append(self, value: T, parent: int) -> int:
        """Append a new node under the node at parent, returning its index."""
        if not 0 <= parent < len(self.nodes):
            raise IndexError(f"Parent node {parent} does not exist")
        self.nodes.append((value, parent))
        return len(self.nodes) - 1

    def parent(self, idx: int) -> Optional[int]:
        """Get the parent of the node at idx, None for the root node."""
        if not 0 <= idx < len(self.nodes):
            return None

        parent = self.nodes[idx][1]
        return None if parent == idx else parent

    def search(self, value: T) -> Optional[int]:
        """Index of the first-inserted node holding value (linear scan)."""
        for idx, (v, _) in enumerate(self.nodes):
            if v == value:
                return idx
        return None

    def values(self) -> List[T]:
        return [v for v, _ in self.nodes]


class SortedTree(Generic[T]):
    """
    A binary search-able Tree. Nodes are ordered by value and every parent
    index is moved to the new position of the original parent.
    """

    __slots__ = ('inner', '_keys')

    def __init__(self, tree: Tree[T]):
        order = sorted(range(len(tree.nodes)), key=lambda i: tree.nodes[i][0])

        relocations = [0] * len(order)
        for new_idx, old_idx in enumerate(order):
            relocations[old_idx] = new_idx

        nodes = [(tree.nodes[i][0], relocations[tree.nodes[i][1]]) for i in order]
        self.inner = Tree.from_nodes(nodes)
        self._keys = [v for v, _ in nodes]

    def __len__(self) -> int:
        return len(self.inner)

    def get(self, idx: int) -> Optional[T]:
        return self.inner.get(idx)

    def parent(self, idx: int) -> Optional[int]:
        return self.inner.parent(idx)

    def search(self, value: T) -> Optional[int]:
        """
        Binary search for a node holding value. With duplicate values an
        arbitrary match is returned.
        """
        idx = bisect_left(self._keys, value)
        if idx < len(self._keys) and self._keys[idx] == value:
            return idx
        return None

    def values(self) -> List[T]:
        return list(self._keys)
