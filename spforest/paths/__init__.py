"""Path primitives for representing reconstructed shortest paths.

``Path`` models a single source-to-target sequence of ``(node, edge)`` steps
with its total cost.
"""

from spforest.paths.path import Path

__all__ = ["Path"]
