"""Per-step weight resolution.

`WeightResolver` turns a traversal step (an edge taken away from a node) into
a non-negative cost according to a `WeightConfig`. Without an attribute every
step costs 1, which makes the engine a breadth-first search.
"""

from __future__ import annotations

import math
from numbers import Real

from spforest.config import WeightConfig
from spforest.errors import (
    InvalidAttributeTypeError,
    MissingAttributeError,
    NegativeWeightError,
)
from spforest.graph.view import GraphView, NodeAttributeView
from spforest.types.base import Cost, EdgeID, ElementKind, NodeID


class WeightResolver:
    """Resolve the cost of traversal steps on one graph.

    Args:
        graph: Graph exposing the GraphView interface.
        config: Which attribute to read and from which kind of element.
    """

    def __init__(self, graph: GraphView, config: WeightConfig) -> None:
        self.graph = graph
        self.config = config
        self._node_lookup = (
            graph.get_node_attribute
            if isinstance(graph, NodeAttributeView)
            else graph.get_attribute
        )

    def weight(self, edge: EdgeID, from_node: NodeID) -> Cost:
        """Return the cost of traversing ``edge`` away from ``from_node``.

        Raises:
            MissingAttributeError: The attribute is absent on the element.
            InvalidAttributeTypeError: The value is not a real number, is a
                bool, or is NaN.
            NegativeWeightError: The value is negative.
        """
        attribute = self.config.attribute
        if attribute is None:
            return 1

        if self.config.element_kind == ElementKind.EDGE:
            element = edge
            label = f"edge '{edge}'"
            value = self.graph.get_attribute(edge, attribute)
        else:
            element = self.graph.opposite(edge, from_node)
            label = f"node '{element}'"
            value = self._node_lookup(element, attribute)

        if value is None:
            raise MissingAttributeError(
                f"Attribute '{attribute}' is missing on {label}.", attribute, element
            )
        if (
            not isinstance(value, Real)
            or isinstance(value, bool)
            or (isinstance(value, float) and math.isnan(value))
        ):
            raise InvalidAttributeTypeError(
                f"Attribute '{attribute}' on {label} is not a number: {value!r}.",
                attribute,
                element,
                value,
            )
        if value < 0:
            raise NegativeWeightError(
                f"Attribute '{attribute}' has a negative value on {label}: {value}.",
                attribute,
                element,
                value,
            )
        return value
