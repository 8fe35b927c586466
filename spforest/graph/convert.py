"""Conversion from arbitrary NetworkX graphs to strict multigraphs.

Directed inputs become `StrictMultiDiGraph`, undirected inputs become
`StrictMultiGraph`. Node and edge attribute dictionaries are copied so the
result does not share mutable state with the input.
"""

from __future__ import annotations

from typing import Union

import networkx as nx

from spforest.graph.strict import StrictMultiDiGraph, StrictMultiGraph

NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]


def from_networkx(nx_graph: NxGraph) -> Union[StrictMultiDiGraph, StrictMultiGraph]:
    """Convert a NetworkX graph into the matching strict multigraph.

    Multigraph edge keys are preserved when they are unique across the whole
    graph. NetworkX keys are only unique per node pair, so if any key repeats
    every edge gets a fresh integer key instead, assigned in the input's
    edge iteration order.

    Args:
        nx_graph: Any NetworkX graph.

    Returns:
        A StrictMultiDiGraph for directed input, otherwise a StrictMultiGraph.

    Example:
        >>> g = nx.Graph()
        >>> g.add_edge("A", "B", weight=2)
        >>> strict = from_networkx(g)
        >>> strict.get_edges()
        {0: ('A', 'B', 0, {'weight': 2})}
    """
    graph = StrictMultiDiGraph() if nx_graph.is_directed() else StrictMultiGraph()
    graph.graph.update(nx_graph.graph)
    for node, data in nx_graph.nodes(data=True):
        graph.add_node(node, **dict(data))

    if nx_graph.is_multigraph():
        edges = list(nx_graph.edges(keys=True, data=True))
        keys = [key for _, _, key, _ in edges]
        keep_keys = len(set(keys)) == len(keys)
        for u, v, key, data in edges:
            graph.add_edge(u, v, key=key if keep_keys else None, **dict(data))
    else:
        for u, v, data in nx_graph.edges(data=True):
            graph.add_edge(u, v, **dict(data))
    return graph
