"""Path reconstruction over a settled shortest-path DAG.

The parent-edge map produced by the engine records, for every reached node,
each edge that achieves its minimal distance. Walking it backward from a
target toward the source gives:

- a canonical path (always the first-recorded parent edge),
- the union of all edges lying on any shortest path,
- every distinct shortest path, enumerated lazily.

All traversals use explicit stacks, so path length is not bounded by the
interpreter's recursion limit.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Mapping, Sequence, Set

from spforest.errors import UnreachableError
from spforest.paths.path import Path
from spforest.types.base import Cost, EdgeID, NodeID, Step


class PathReconstructor:
    """Read-only path queries over settled engine state.

    Args:
        source: The source node of the run.
        parent_edges: Map of each reached node to its parent edges, in
            discovery order. The source maps to an empty sequence.
        distances: Map of each reached node to its final distance.
        opposite: ``opposite(edge, node)`` returning the other endpoint.
    """

    def __init__(
        self,
        source: NodeID,
        parent_edges: Mapping[NodeID, Sequence[EdgeID]],
        distances: Mapping[NodeID, Cost],
        opposite: Callable[[EdgeID, NodeID], NodeID],
    ) -> None:
        self.source = source
        self._parent_edges = parent_edges
        self._distances = distances
        self._opposite = opposite

    def _require_reached(self, node: NodeID) -> None:
        if node not in self._parent_edges:
            raise UnreachableError(self.source, node)

    def canonical_path(self, node: NodeID) -> Path:
        """Return the path that always follows the first-recorded parent edge.

        Raises:
            UnreachableError: If ``node`` was not reached.
        """
        self._require_reached(node)
        steps: List[Step] = []
        current = node
        while current != self.source:
            edge = self._parent_edges[current][0]
            current = self._opposite(edge, current)
            steps.append((current, edge))
        steps.reverse()
        return Path(self.source, node, tuple(steps), self._distances[node])

    def all_shortest_path_edges(self, node: NodeID) -> Set[EdgeID]:
        """Return every edge that lies on at least one shortest path to ``node``.

        Each node of the DAG is expanded at most once.

        Raises:
            UnreachableError: If ``node`` was not reached.
        """
        self._require_reached(node)
        edges: Set[EdgeID] = set()
        visited = {node}
        stack = [node]
        while stack:
            current = stack.pop()
            for edge in self._parent_edges[current]:
                edges.add(edge)
                prev_node = self._opposite(edge, current)
                if prev_node not in visited:
                    visited.add(prev_node)
                    stack.append(prev_node)
        return edges

    def count_shortest_paths(self, node: NodeID) -> int:
        """Return how many distinct shortest paths lead to ``node``.

        Counts without enumerating, in time linear in the size of the DAG
        below ``node``.

        Raises:
            UnreachableError: If ``node`` was not reached.
        """
        self._require_reached(node)
        counts: Dict[NodeID, int] = {self.source: 1}
        # Post-order over the DAG: a node is counted once all its parents are.
        stack = [(node, False)]
        while stack:
            current, expanded = stack.pop()
            if current in counts:
                continue
            parents = [
                self._opposite(edge, current) for edge in self._parent_edges[current]
            ]
            if expanded:
                counts[current] = sum(counts[p] for p in parents)
                continue
            stack.append((current, True))
            stack.extend((p, False) for p in parents if p not in counts)
        return counts[node]

    def all_shortest_paths(self, node: NodeID) -> Iterator[Path]:
        """Enumerate every distinct shortest path from the source to ``node``.

        The result is a lazy, finite, single-use iterator. Paths through
        earlier-recorded parent edges come first. The number of paths can grow
        exponentially with the number of ties; use ``count_shortest_paths`` to
        check before exhausting it.

        Raises:
            UnreachableError: If ``node`` was not reached. Raised immediately,
                not on first iteration.
        """
        self._require_reached(node)
        return self._iter_paths(node)

    def _iter_paths(self, node: NodeID) -> Iterator[Path]:
        cost = self._distances[node]
        # Each frame: [node, index of the next parent edge to try].
        # chosen[i] is the step taken from frame i + 1 back to frame i.
        stack: List[list] = [[node, 0]]
        chosen: List[Step] = []

        while stack:
            current, parent_idx = stack[-1]
            if current == self.source:
                yield Path(self.source, node, tuple(reversed(chosen)), cost)
                stack.pop()
                if chosen:
                    chosen.pop()
                continue

            parents = self._parent_edges[current]
            if parent_idx < len(parents):
                stack[-1][1] = parent_idx + 1
                edge = parents[parent_idx]
                prev_node = self._opposite(edge, current)
                chosen.append((prev_node, edge))
                stack.append([prev_node, 0])
            else:
                # backtrack
                stack.pop()
                if chosen:
                    chosen.pop()
