"""Strict multigraphs with validation, unique edge keys and a GraphView API.

`StrictMultiDiGraph` and `StrictMultiGraph` extend the NetworkX multigraphs to
enforce explicit node management, graph-unique edge keys and predictable error
handling. Both implement the read interface of
:class:`spforest.graph.view.GraphView`, so they can be searched directly.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Iterator, List, Optional, Tuple

import networkx as nx

from spforest.types.base import EdgeID, NodeID

AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


class _StrictGraphMixin:
    """Strictness rules and the edge-key registry shared by both graph kinds.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raises ValueError on duplicates).
      - No duplicate edges by key (raises ValueError on duplicates).
      - Removing non-existent nodes or edges raises ValueError.
      - Each edge key is unique across the whole graph; by default, a
        monotonically increasing integer is assigned if none is provided.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        # Removed edges do not give their IDs back.
        self._next_edge_id: int = 0

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:
        """Return a new unique integer edge ID.

        Signature matches NetworkX's ``new_edge_key(self, u, v)``; the optional
        ``key`` suggestion is ignored.
        """
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return int(next_edge_id)

    def copy(self, as_view: bool = False, pickle: bool = True):
        """Create a copy of this graph.

        By default, use pickle-based deep copying. If ``pickle=False``,
        call the parent class's copy, which supports views.

        Args:
            as_view: If True, return a view instead of a full copy; only used
                if ``pickle=False``.
            pickle: If True, perform a pickle-based deep copy.

        Returns:
            A new instance (or view) of the graph.
        """
        if not pickle:
            return super().copy(as_view=as_view)
        return loads(dumps(self))

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a single node, disallowing duplicates.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def remove_node(self, n: NodeID) -> None:
        """Remove a single node and all incident edges.

        Raises:
            ValueError: If the node does not exist in the graph.
        """
        if n not in self:
            raise ValueError(f"Node '{n}' does not exist.")
        to_delete = [
            e_id for e_id, (s, t, _, _) in self._edges.items() if s == n or t == n
        ]
        for e_id in to_delete:
            del self._edges[e_id]

        super().remove_node(n)

    #
    # Edge management
    #
    def add_edge(
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add an edge between two existing nodes.

        If no key is provided, a new integer key is assigned via
        ``new_edge_key``. When an explicit integer key is provided, the
        internal counter is advanced past it to avoid future collisions.

        Args:
            u_for_edge: The source (or first) node. Must exist in the graph.
            v_for_edge: The target (or second) node. Must exist in the graph.
            key: The unique edge key. Must not already be in use if provided.
            **attr: Arbitrary edge attributes.

        Returns:
            EdgeID: The key associated with this new edge.

        Raises:
            ValueError: If either node does not exist, or if the key is already in use.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if key in self._edges:
                raise ValueError(f"Edge with id '{key}' already exists.")
            if isinstance(key, int) and key >= self._next_edge_id:
                self._next_edge_id = key + 1

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self._adj[u_for_edge][v_for_edge][key],
        )
        return key

    def remove_edge(
        self,
        u: NodeID,
        v: NodeID,
        key: Optional[EdgeID] = None,
    ) -> None:
        """Remove an edge (or all edges) between nodes u and v.

        Raises:
            ValueError: If the nodes do not exist, or if the specified edge key
                does not exist, or if no edges are found between u and v.
        """
        if u not in self:
            raise ValueError(f"Source node '{u}' does not exist.")
        if v not in self:
            raise ValueError(f"Target node '{v}' does not exist.")

        if key is not None:
            if key not in self._edges:
                raise ValueError(f"No edge with id='{key}' found from {u} to {v}.")
            src_node, dst_node, _, _ = self._edges[key]
            if not self._endpoints_match(src_node, dst_node, u, v):
                raise ValueError(
                    f"Edge with id='{key}' is actually from {src_node} to {dst_node}, "
                    f"not from {u} to {v}."
                )
            self.remove_edge_by_id(key)
        else:
            edge_ids = tuple(self._adj[u].get(v, ()))
            if not edge_ids:
                raise ValueError(f"No edges from '{u}' to '{v}' to remove.")
            for e_id in edge_ids:
                self.remove_edge_by_id(e_id)

    def remove_edge_by_id(self, key: EdgeID) -> None:
        """Remove an edge by its unique key.

        Raises:
            ValueError: If no edge with this key exists in the graph.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        src_node, dst_node, _, _ = self._edges.pop(key)
        super().remove_edge(src_node, dst_node, key=key)

    def _endpoints_match(
        self, src_node: NodeID, dst_node: NodeID, u: NodeID, v: NodeID
    ) -> bool:
        if self.is_directed():
            return src_node == u and dst_node == v
        return (src_node, dst_node) in ((u, v), (v, u))

    #
    # Convenience methods
    #
    def get_nodes(self) -> Dict[NodeID, AttrDict]:
        """Retrieve all nodes and their attributes as a dictionary."""
        return dict(self.nodes(data=True))

    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """Retrieve all edges by key.

        Returns:
            Dict[EdgeID, EdgeTuple]: A mapping of edge key to
                ``(source_node, target_node, edge_key, edge_attributes)``.
        """
        return self._edges

    def get_edge_attr(self, key: EdgeID) -> AttrDict:
        """Retrieve the attribute dictionary of a specific edge.

        Raises:
            ValueError: If no edge with this key is found.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        return self._edges[key][3]

    def has_edge_by_id(self, key: EdgeID) -> bool:
        """Check whether an edge with the given key exists."""
        return key in self._edges

    def edges_between(self, u: NodeID, v: NodeID) -> List[EdgeID]:
        """List all edge keys from node u to node v (either way if undirected)."""
        if u not in self._adj or v not in self._adj[u]:
            return []
        return list(self._adj[u][v].keys())

    def update_edge_attr(self, key: EdgeID, **attr: Any) -> None:
        """Update attributes on an existing edge by key.

        Raises:
            ValueError: If the edge with the given key does not exist.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        self._edges[key][3].update(attr)

    #
    # GraphView interface
    #
    def node_set(self) -> Iterator[NodeID]:
        """Iterate over all nodes in insertion order."""
        return iter(self._node)

    def outgoing_edges(self, node: NodeID) -> Iterator[EdgeID]:
        """Iterate over edge keys traversable away from ``node``.

        For directed graphs these are the successor edges; for undirected
        graphs every incident edge, self-loops included once.

        Raises:
            ValueError: If the node does not exist.
        """
        if node not in self._adj:
            raise ValueError(f"Node '{node}' does not exist.")
        for edges_map in self._adj[node].values():
            yield from edges_map

    def opposite(self, edge: EdgeID, node: NodeID) -> NodeID:
        """Return the endpoint of ``edge`` opposite to ``node``.

        Raises:
            ValueError: If the edge does not exist or ``node`` is not one of
                its endpoints.
        """
        if edge not in self._edges:
            raise ValueError(f"Edge with id='{edge}' not found.")
        src_node, dst_node, _, _ = self._edges[edge]
        if node == src_node:
            return dst_node
        if node == dst_node:
            return src_node
        raise ValueError(f"Node '{node}' is not an endpoint of edge '{edge}'.")

    def get_attribute(self, element: Any, name: str) -> Optional[Any]:
        """Return attribute ``name`` of an edge or node, or None if absent.

        ``element`` is looked up as an edge key first, then as a node. Use
        ``get_node_attribute`` when a node ID may also be an edge key.

        Raises:
            ValueError: If ``element`` is neither an edge key nor a node.
        """
        if element in self._edges:
            return self._edges[element][3].get(name)
        if element in self._node:
            return self._node[element].get(name)
        raise ValueError(f"No edge or node '{element}' in this graph.")

    def get_node_attribute(self, node: NodeID, name: str) -> Optional[Any]:
        """Return attribute ``name`` of ``node``, or None if absent.

        Raises:
            ValueError: If the node does not exist.
        """
        if node not in self._node:
            raise ValueError(f"Node '{node}' does not exist.")
        return self._node[node].get(name)


class StrictMultiDiGraph(_StrictGraphMixin, nx.MultiDiGraph):
    """A directed multigraph with strict rules and unique edge IDs.

    Inherits from:
        networkx.MultiDiGraph
    """


class StrictMultiGraph(_StrictGraphMixin, nx.MultiGraph):
    """An undirected multigraph with strict rules and unique edge IDs.

    Edge keys are unique across the whole graph, so an edge has the same
    identity whichever endpoint it is traversed from.

    Inherits from:
        networkx.MultiGraph
    """
