"""Read-only graph interface consumed by the shortest-path engine.

Any object providing the four `GraphView` methods can be searched; the engine
never mutates it and never stores algorithm state on it.

`get_attribute(element, name)` is asked about edges and nodes alike. Graphs
whose node IDs may coincide with edge keys can also implement
`NodeAttributeView`; node-valued weights are then read through
`get_node_attribute` so the two namespaces never mix.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Protocol, runtime_checkable

from spforest.types.base import EdgeID, NodeID


@runtime_checkable
class GraphView(Protocol):
    """Minimal read interface a graph must expose to the engine."""

    def node_set(self) -> Iterable[NodeID]:
        """Return every node in the graph."""
        ...

    def outgoing_edges(self, node: NodeID) -> Iterable[EdgeID]:
        """Return the edges that can be traversed away from ``node``.

        Directed graphs return successor edges; undirected graphs return every
        incident edge. Iteration order must be stable for a fixed graph.
        """
        ...

    def opposite(self, edge: EdgeID, node: NodeID) -> NodeID:
        """Return the endpoint of ``edge`` that is not ``node``."""
        ...

    def get_attribute(self, element: Any, name: str) -> Optional[Any]:
        """Return attribute ``name`` of an edge or node, or None if absent."""
        ...


@runtime_checkable
class NodeAttributeView(Protocol):
    """Optional extension for graphs with a separate node attribute lookup."""

    def get_node_attribute(self, node: NodeID, name: str) -> Optional[Any]:
        """Return attribute ``name`` of ``node``, or None if absent."""
        ...
