"""Graph primitives and helpers.

This package provides the `GraphView` read protocol consumed by the engine,
the strict multigraph types `StrictMultiDiGraph` and `StrictMultiGraph` that
implement it, and conversion from NetworkX graphs (`convert`).
"""

from spforest.graph.convert import from_networkx
from spforest.graph.strict import StrictMultiDiGraph, StrictMultiGraph
from spforest.graph.view import GraphView

__all__ = ["GraphView", "StrictMultiDiGraph", "StrictMultiGraph", "from_networkx"]
