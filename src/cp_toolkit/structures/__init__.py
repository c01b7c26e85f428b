"""Data structures for competitive programming.

This package provides:
- DisjointSetUnion (Union-Find) with path compression and union by size
- Connected component detection over edge lists
"""

from cp_toolkit.structures.component_detector import (
    Component,
    ComponentDetector,
    components_to_frame,
)
from cp_toolkit.structures.union_find import DisjointSetUnion, IndexOutOfRangeError

__all__ = [
    "DisjointSetUnion",
    "IndexOutOfRangeError",
    "Component",
    "ComponentDetector",
    "components_to_frame",
]
