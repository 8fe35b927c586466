"""Shared typing constructs for spforest.

Public aliases for node and edge identifiers, path steps and costs, and the
``ElementKind`` enum used by weight configuration. Contains no algorithm logic.
"""

from spforest.types.base import Cost, EdgeID, ElementKind, NodeID, Step

__all__ = ["Cost", "EdgeID", "ElementKind", "NodeID", "Step"]
