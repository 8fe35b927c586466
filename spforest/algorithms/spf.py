"""Single-source shortest-path-first (SPF) engine.

Implements Dijkstra relaxation that keeps *every* tying parent edge per node,
so the settled state describes the full shortest-path DAG rooted at the
source rather than a single tree.

Notes:
    The whole run happens inside ``ShortestPathEngine.__init__``. A weight
    error (missing, non-numeric or negative attribute) aborts construction,
    so no partially settled engine is ever observable.

    Which offending element is reported first follows frontier discovery
    order and the graph's edge iteration order. This is deterministic for a
    fixed graph but not otherwise guaranteed. Steps into already settled
    nodes are skipped before their weight is resolved, so bad data on such
    edges is never reported.

    Complexity is O(E + V log V) for settlement. Enumerating all shortest
    paths is opt-in and may be exponential in the number of ties.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Set, Tuple

from spforest.algorithms.frontier import PriorityFrontier
from spforest.algorithms.paths import PathReconstructor
from spforest.algorithms.weight import WeightResolver
from spforest.config import UNWEIGHTED, WeightConfig
from spforest.errors import NodeNotFoundError, UnreachableError, WeightError
from spforest.graph.view import GraphView
from spforest.logging import get_logger
from spforest.paths.path import Path
from spforest.types.base import Cost, EdgeID, ElementKind, NodeID

logger = get_logger(__name__)


class ShortestPathEngine:
    """Shortest paths from one source, with all equal-cost parents recorded.

    Args:
        graph: Graph exposing the GraphView interface. Must not be mutated
            during construction.
        weight_config: Already validated weight configuration. None means
            unweighted (hop count).
        source: The source node.

    Raises:
        NodeNotFoundError: If ``source`` is not in the graph.
        MissingAttributeError: A traversed element lacks the weight attribute.
        InvalidAttributeTypeError: A weight value is not a usable number.
        NegativeWeightError: A weight value is negative.
    """

    def __init__(
        self,
        graph: GraphView,
        weight_config: Optional[WeightConfig],
        source: NodeID,
    ) -> None:
        self.graph = graph
        self.weight_config = weight_config if weight_config is not None else UNWEIGHTED
        self.source = source

        self._distances: Dict[NodeID, Cost] = {}
        self._hop_lengths: Dict[NodeID, int] = {}
        self._parent_edges: Dict[NodeID, List[EdgeID]] = {}
        self._settled: Dict[NodeID, None] = {}  # insertion-ordered set

        if source not in set(graph.node_set()):
            raise NodeNotFoundError(f"Source node '{source}' is not in the graph.")

        self._run(WeightResolver(graph, self.weight_config))
        self._reconstructor = PathReconstructor(
            source, self._parent_edges, self._distances, graph.opposite
        )

    def _run(self, resolver: WeightResolver) -> None:
        source = self.source
        distances = self._distances
        hop_lengths = self._hop_lengths
        parent_edges = self._parent_edges
        settled = self._settled

        distances[source] = 0
        hop_lengths[source] = 0
        parent_edges[source] = []
        frontier = PriorityFrontier()
        frontier.insert(source, 0)

        logger.debug(
            "SPF from '%s' started (attribute=%s, element=%s)",
            source,
            self.weight_config.attribute,
            self.weight_config.element_kind.name,
        )
        relaxed = 0
        ties = 0

        while not frontier.is_empty():
            node = frontier.pop_min()
            settled[node] = None
            node_cost = distances[node]

            for edge in self.graph.outgoing_edges(node):
                neighbor = self.graph.opposite(edge, node)
                if neighbor in settled:
                    continue

                try:
                    edge_cost = resolver.weight(edge, node)
                except WeightError as exc:
                    logger.debug("SPF from '%s' aborted: %s", source, exc)
                    raise
                relaxed += 1
                new_cost = node_cost + edge_cost

                if neighbor not in distances:
                    frontier.insert(neighbor, new_cost)
                    distances[neighbor] = new_cost
                    hop_lengths[neighbor] = hop_lengths[node] + 1
                    parent_edges[neighbor] = [edge]
                elif new_cost == distances[neighbor]:
                    parent_edges[neighbor].append(edge)
                    ties += 1
                elif new_cost < distances[neighbor]:
                    distances[neighbor] = new_cost
                    hop_lengths[neighbor] = hop_lengths[node] + 1
                    parent_edges[neighbor] = [edge]
                    frontier.decrease_priority(neighbor, new_cost)

        logger.debug(
            "SPF from '%s' settled %d nodes, relaxed %d steps, recorded %d ties",
            source,
            len(settled),
            relaxed,
            ties,
        )

    #
    # Settled-state views
    #
    @property
    def distances(self) -> Mapping[NodeID, Cost]:
        """Read-only map of every reached node to its distance."""
        return MappingProxyType(self._distances)

    @property
    def hop_lengths(self) -> Mapping[NodeID, int]:
        """Read-only map of every reached node to its hop count."""
        return MappingProxyType(self._hop_lengths)

    def reachable_nodes(self) -> List[NodeID]:
        """Return reached nodes in settlement order, source first."""
        return list(self._settled)

    def is_reachable(self, node: NodeID) -> bool:
        return node in self._settled

    def _require_reached(self, node: NodeID) -> None:
        if node not in self._settled:
            raise UnreachableError(self.source, node)

    def distance_to(self, node: NodeID) -> Cost:
        """Return the shortest distance from the source to ``node``.

        Raises:
            UnreachableError: If ``node`` was not reached.
        """
        self._require_reached(node)
        return self._distances[node]

    def hop_count_to(self, node: NodeID) -> int:
        """Return the number of edges on the canonical shortest path to ``node``.

        Raises:
            UnreachableError: If ``node`` was not reached.
        """
        self._require_reached(node)
        return self._hop_lengths[node]

    def parent_edges_of(self, node: NodeID) -> Tuple[EdgeID, ...]:
        """Return the edges achieving ``node``'s minimal distance, in discovery order.

        Raises:
            UnreachableError: If ``node`` was not reached.
        """
        self._require_reached(node)
        return tuple(self._parent_edges[node])

    #
    # Path reconstruction
    #
    def canonical_path(self, node: NodeID) -> Path:
        """Shortest path following the first-recorded parent edge at each node."""
        return self._reconstructor.canonical_path(node)

    def all_shortest_path_edges(self, node: NodeID) -> Set[EdgeID]:
        """Union of edges over all shortest paths to ``node``."""
        return self._reconstructor.all_shortest_path_edges(node)

    def count_shortest_paths(self, node: NodeID) -> int:
        """Number of distinct shortest paths to ``node``."""
        return self._reconstructor.count_shortest_paths(node)

    def all_shortest_paths(self, node: NodeID) -> Iterator[Path]:
        """Lazily enumerate every distinct shortest path to ``node``.

        Potentially exponential in the number of ties.
        """
        return self._reconstructor.all_shortest_paths(node)


def spf(
    graph: GraphView,
    src_node: NodeID,
    attribute: Optional[str] = None,
    element_kind: ElementKind = ElementKind.EDGE,
) -> Tuple[Dict[NodeID, Cost], Dict[NodeID, List[EdgeID]]]:
    """Compute shortest paths from ``src_node`` and return plain dicts.

    Args:
        graph: Graph exposing the GraphView interface.
        src_node: The source node.
        attribute: Weight attribute name; None for hop count.
        element_kind: Element the attribute is read from.

    Returns:
        A tuple of (costs, parent_edges):
          - costs: Maps each reachable node to its minimal cost.
          - parent_edges: Maps each reachable node to the list of edges that
            achieve that cost, in discovery order. The source maps to ``[]``.
    """
    engine = ShortestPathEngine(graph, WeightConfig(attribute, element_kind), src_node)
    return (
        dict(engine.distances),
        {node: list(engine.parent_edges_of(node)) for node in engine.reachable_nodes()},
    )
