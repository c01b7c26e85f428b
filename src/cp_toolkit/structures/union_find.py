"""Disjoint Set Union (Union-Find) with path compression and union by size.

Elements are the integers ``0 .. n-1``. Parent and size links live in two
plain lists indexed by element, so a root is simply an index that points at
itself.
"""

from numbers import Integral


class IndexOutOfRangeError(IndexError):
    """Raised when an element index falls outside ``[0, n)``."""

    def __init__(self, index: object, n: int) -> None:
        self.index = index
        self.n = n
        super().__init__(f"index {index!r} out of range for DisjointSetUnion of size {n}")


class DisjointSetUnion:
    """Union-Find over a fixed universe of ``n`` integer elements.

    Attributes:
        parent: parent[i] is the parent of element i; roots point at themselves.
        size: size[r] is the number of elements in the set rooted at r.
            Only meaningful while r is a root.
    """

    def __init__(self, n: int) -> None:
        """Create n singleton sets.

        Args:
            n: Number of elements in the universe.

        Raises:
            ValueError: If n is negative.
        """
        if n < 0:
            raise ValueError(f"DisjointSetUnion size must be non-negative, got {n}")
        self.parent: list[int] = list(range(n))
        self.size: list[int] = [1] * n

    def __len__(self) -> int:
        return len(self.parent)

    def __repr__(self) -> str:
        return f"DisjointSetUnion(n={len(self)}, groups={self.num_groups()})"

    def _check(self, x: int) -> None:
        # bool is an int subclass but never a valid element
        if isinstance(x, bool) or not isinstance(x, Integral) or not 0 <= x < len(self.parent):
            raise IndexOutOfRangeError(x, len(self.parent))

    def find(self, x: int) -> int:
        """Find root of element x with path compression.

        Every node on the path from x to its root is repointed directly at the
        root. The walk is iterative so long chains never hit the recursion limit.

        Args:
            x: Element to find the root of.

        Returns:
            The root element of the set containing x.

        Raises:
            IndexOutOfRangeError: If x is not in ``[0, n)``.
        """
        self._check(x)
        parent = self.parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets containing x and y.

        The smaller set is attached under the root of the larger one. When both
        sets have the same size, root(y) is attached under root(x).

        Args:
            x: Element from first set.
            y: Element from second set.

        Returns:
            True if two distinct sets were merged, False if x and y were
            already in the same set.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self.size[root_x] < self.size[root_y]:
            root_x, root_y = root_y, root_x
        self.parent[root_y] = root_x
        self.size[root_x] += self.size[root_y]
        return True

    def same(self, x: int, y: int) -> bool:
        """Check if x and y are in the same set."""
        return self.find(x) == self.find(y)

    def set_size(self, x: int) -> int:
        """Number of elements in the set containing x."""
        return self.size[self.find(x)]

    def roots(self) -> list[int]:
        """Sorted list of current roots."""
        return [i for i, p in enumerate(self.parent) if i == p]

    def num_groups(self) -> int:
        """Get number of distinct sets."""
        return len(self.roots())

    def groups(self) -> dict[int, list[int]]:
        """Get all sets as {root: [members]}.

        Returns:
            Dictionary mapping each root to the ascending list of elements
            in its set.
        """
        groups: dict[int, list[int]] = {}
        for node in range(len(self.parent)):
            groups.setdefault(self.find(node), []).append(node)
        return groups
