"""Lightweight representation of a single shortest path.

The ``Path`` dataclass stores a source-to-target sequence of steps, each a
``(node, edge)`` pair where the edge leaves that node toward the next one,
plus the total cost. Cached properties expose derived node and edge
sequences.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, FrozenSet, Iterator, Tuple

from spforest.types.base import Cost, EdgeID, NodeID, Step


@dataclass(frozen=True)
class Path:
    """Represents a single path from ``src_node`` to ``dst_node``.

    Attributes:
        src_node: First node of the path.
        dst_node: Last node of the path.
        steps: Sequence of ``(node, edge)`` pairs in travel order. Empty when
            ``src_node == dst_node``.
        cost: Total numeric cost of the path.
    """

    src_node: NodeID
    dst_node: NodeID
    steps: Tuple[Step, ...]
    cost: Cost

    def __getitem__(self, idx: int) -> Step:
        return self.steps[idx]

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def __len__(self) -> int:
        """Return the number of steps (edges) in the path."""
        return len(self.steps)

    def __lt__(self, other: Any) -> bool:
        """Order paths by cost, then by hop count."""
        if not isinstance(other, Path):
            return NotImplemented
        return (self.cost, len(self.steps)) < (other.cost, len(other.steps))

    @property
    def hop_count(self) -> int:
        return len(self.steps)

    @cached_property
    def edges_seq(self) -> Tuple[EdgeID, ...]:
        """Edges in travel order."""
        return tuple(edge for _, edge in self.steps)

    @cached_property
    def nodes_seq(self) -> Tuple[NodeID, ...]:
        """Nodes in travel order, from ``src_node`` to ``dst_node`` inclusive."""
        return tuple(node for node, _ in self.steps) + (self.dst_node,)

    @cached_property
    def edges(self) -> FrozenSet[EdgeID]:
        return frozenset(self.edges_seq)

    @cached_property
    def nodes(self) -> FrozenSet[NodeID]:
        return frozenset(self.nodes_seq)
