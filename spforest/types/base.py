"""Base type aliases and enums shared by the graph and algorithm layers."""

from __future__ import annotations

from enum import IntEnum
from typing import Hashable, Tuple, Union

#: Represents numeric cost along a path (distance, latency, etc.).
Cost = Union[int, float]

#: Any hashable node identifier.
NodeID = Hashable

#: Graph-unique, hashable edge identifier (the edge key).
EdgeID = Hashable

#: A single path step: the node the step leaves from and the edge it takes.
Step = Tuple[NodeID, EdgeID]


class ElementKind(IntEnum):
    """Kind of graph element a weight attribute is read from."""

    #: Read the attribute from the traversed edge.
    EDGE = 1
    #: Read the attribute from the node the traversal step arrives at.
    OPPOSITE_NODE = 2

    @classmethod
    def from_string(cls, value: str) -> "ElementKind":
        """Parse a string into an ElementKind.

        ``"node"`` is accepted as a synonym for ``OPPOSITE_NODE``.

        Args:
            value: Case-insensitive name (e.g. "edge", "opposite_node", "node").

        Returns:
            The corresponding ElementKind member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        name = value.strip().upper()
        if name == "NODE":
            return cls.OPPOSITE_NODE
        try:
            return cls[name]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid element kind '{value}'. Valid values are: {valid}"
            ) from None
