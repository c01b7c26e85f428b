"""Connected component detection over edge lists using DisjointSetUnion."""

from dataclasses import dataclass
import logging
from pathlib import Path
import re

import pandas as pd

from cp_toolkit.structures.union_find import DisjointSetUnion

logger = logging.getLogger(__name__)

_NUMERIC_LABEL = re.compile(r"-?\d+(\.\d+)?")


@dataclass
class Component:
    """A connected component of an undirected graph."""

    root: int  # Representative vertex
    members: list[int]
    edge_count: int  # Input edges, duplicates and self-loops included
    distinct_edge_count: int  # Distinct undirected pairs u != v

    @property
    def size(self) -> int:
        """Number of vertices in the component."""
        return len(self.members)

    @property
    def is_singleton(self) -> bool:
        """True if the component is a single vertex."""
        return self.size == 1

    @property
    def density(self) -> float:
        """Graph density: distinct_edges / possible_edges, in [0, 1]."""
        if self.size <= 1:
            return 0.0
        possible_edges = self.size * (self.size - 1) // 2
        return self.distinct_edge_count / possible_edges


def read_edge_list(path: Path) -> pd.DataFrame:
    """Read an edge list CSV, with or without a header row.

    A first row made only of numbers is treated as an edge, not a header.

    Args:
        path: CSV file path

    Returns:
        DataFrame with the edges
    """
    edges = pd.read_csv(path)
    if len(edges.columns) and all(_NUMERIC_LABEL.fullmatch(str(c)) for c in edges.columns):
        edges = pd.read_csv(path, header=None)
    return edges


class ComponentDetector:
    """Detects connected components of a graph with vertices 0..n-1."""

    def detect(self, n: int, edges: pd.DataFrame) -> dict[int, Component]:
        """
        Detect connected components.

        Args:
            n: Number of vertices
            edges: DataFrame of undirected edges (columns: u, v)

        Returns:
            Dictionary mapping root -> Component, isolated vertices included

        Raises:
            IndexOutOfRangeError: If an edge endpoint is outside [0, n)
            ValueError: If the edge list lacks two columns or holds non-integer endpoints
        """
        dsu = DisjointSetUnion(n)

        pairs: list[tuple[int, int]] = []
        if len(edges) > 0:
            if len(edges.columns) < 2:
                raise ValueError("Edge list needs two columns (u, v)")
            # Support both named and positional columns
            u_col = "u" if "u" in edges.columns else edges.columns[0]
            v_col = "v" if "v" in edges.columns else edges.columns[1]
            for col in (u_col, v_col):
                if not pd.api.types.is_integer_dtype(edges[col]):
                    raise ValueError(
                        f"Edge column '{col}' must hold integers, got {edges[col].dtype}"
                    )
            pairs = [(int(u), int(v)) for u, v in zip(edges[u_col], edges[v_col])]

        for u, v in pairs:
            dsu.union(u, v)

        edge_counts: dict[int, int] = {}
        distinct_pairs: dict[int, set[tuple[int, int]]] = {}
        for u, v in pairs:
            root = dsu.find(u)
            edge_counts[root] = edge_counts.get(root, 0) + 1
            if u != v:
                distinct_pairs.setdefault(root, set()).add((min(u, v), max(u, v)))

        result = {
            root: Component(
                root=root,
                members=members,
                edge_count=edge_counts.get(root, 0),
                distinct_edge_count=len(distinct_pairs.get(root, ())),
            )
            for root, members in dsu.groups().items()
        }
        logger.debug(f"Detected {len(result)} components from {len(pairs)} edges over {n} vertices")
        return result


def components_to_frame(components: dict[int, Component]) -> pd.DataFrame:
    """Convert components to a DataFrame sorted by size (desc) then root.

    Args:
        components: Output of ComponentDetector.detect

    Returns:
        DataFrame with columns root, size, edge_count, members
        (members as a space-separated string)
    """
    rows = [
        {
            "root": c.root,
            "size": c.size,
            "edge_count": c.edge_count,
            "members": " ".join(str(m) for m in c.members),
        }
        for c in components.values()
    ]
    df = pd.DataFrame(rows, columns=["root", "size", "edge_count", "members"])
    if df.empty:
        return df
    return df.sort_values(["size", "root"], ascending=[False, True]).reset_index(drop=True)
