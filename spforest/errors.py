"""Exception types raised by spforest.

Weight errors abort engine construction, so a failed run never leaves a
queryable engine behind. ``UnreachableError`` is the normal "no path" answer
for queries about nodes outside the source's component.
"""

from __future__ import annotations

from typing import Any, Hashable, Optional


class SpForestError(Exception):
    """Base class for all package-specific errors."""


class WeightError(SpForestError, ValueError):
    """Raised when a traversal step cannot be given a valid weight.

    Attributes:
        attribute: Name of the weight attribute being resolved.
        element: The edge or node the attribute was read from.
    """

    def __init__(self, message: str, attribute: Optional[str], element: Any) -> None:
        super().__init__(message)
        self.attribute = attribute
        self.element = element


class MissingAttributeError(WeightError):
    """Raised when the weight attribute is absent on an element."""


class InvalidAttributeTypeError(WeightError):
    """Raised when the weight attribute is not a usable number."""

    def __init__(
        self, message: str, attribute: Optional[str], element: Any, value: Any
    ) -> None:
        super().__init__(message, attribute, element)
        self.value = value


class NegativeWeightError(WeightError):
    """Raised when the weight attribute resolves to a negative number."""

    def __init__(
        self, message: str, attribute: Optional[str], element: Any, value: Any
    ) -> None:
        super().__init__(message, attribute, element)
        self.value = value


class EmptyFrontierError(SpForestError, IndexError):
    """Raised by ``pop_min`` on an empty frontier. Seeing it means an engine bug."""


class UnreachableError(SpForestError, LookupError):
    """Raised when a query targets a node the source never reached."""

    def __init__(self, source: Hashable, node: Hashable) -> None:
        super().__init__(f"Node '{node}' is not reachable from source '{source}'.")
        self.source = source
        self.node = node


class NodeNotFoundError(SpForestError, KeyError):
    """Raised when the requested source node is not in the graph."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class ParameterError(SpForestError, ValueError):
    """Base class for configuration parameter errors."""


class InvalidParameterError(ParameterError):
    """Raised for unknown parameters or values failing validation."""


class MissingParameterError(ParameterError):
    """Raised when a required parameter is not supplied."""


__all__ = [
    "SpForestError",
    "WeightError",
    "MissingAttributeError",
    "InvalidAttributeTypeError",
    "NegativeWeightError",
    "EmptyFrontierError",
    "UnreachableError",
    "NodeNotFoundError",
    "ParameterError",
    "InvalidParameterError",
    "MissingParameterError",
]
