"""spforest: single-source shortest paths with every equal-cost parent kept.

Primary API:
    ShortestPathEngine - run Dijkstra from one source and query the result
    spf() - one-shot helper returning plain distance and parent-edge dicts
    WeightConfig - which attribute weights a step, and where it lives
    StrictMultiDiGraph, StrictMultiGraph - graph types the engine can search
    from_networkx() - convert any NetworkX graph into a strict graph

Example:
    from spforest import ShortestPathEngine, StrictMultiGraph, WeightConfig

    g = StrictMultiGraph()
    for n in "ABC":
        g.add_node(n)
    g.add_edge("A", "B", cost=2)
    g.add_edge("B", "C", cost=2)
    g.add_edge("A", "C", cost=5)

    engine = ShortestPathEngine(g, WeightConfig("cost"), "A")
    engine.distance_to("C")            # 4
    engine.canonical_path("C").nodes_seq  # ('A', 'B', 'C')
"""

from __future__ import annotations

from spforest import logging
from spforest.algorithms.spf import ShortestPathEngine, spf
from spforest.config import WeightConfig
from spforest.errors import (
    InvalidAttributeTypeError,
    MissingAttributeError,
    NegativeWeightError,
    NodeNotFoundError,
    SpForestError,
    UnreachableError,
)
from spforest.graph import GraphView, StrictMultiDiGraph, StrictMultiGraph, from_networkx
from spforest.paths import Path
from spforest.types import ElementKind

__version__ = "0.1.0"

__all__ = [
    "ElementKind",
    "GraphView",
    "InvalidAttributeTypeError",
    "MissingAttributeError",
    "NegativeWeightError",
    "NodeNotFoundError",
    "Path",
    "ShortestPathEngine",
    "SpForestError",
    "StrictMultiDiGraph",
    "StrictMultiGraph",
    "UnreachableError",
    "WeightConfig",
    "from_networkx",
    "logging",
    "spf",
]
