"""Priority frontier of discovered, unsettled nodes.

A binary heap (``heapq``) of ``[priority, sequence, node]`` entries. Removal
is lazy: the entry is marked dead and skipped when it reaches the top. The
insertion sequence breaks priority ties, so among equal priorities the node
inserted first is popped first, independent of heap internals.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, Iterator, List

from spforest.errors import EmptyFrontierError
from spforest.types.base import Cost, NodeID

# Marks an entry whose node was removed or re-prioritized.
_REMOVED = object()


class PriorityFrontier:
    """Min-priority queue over nodes with stable ties and decrease-key."""

    def __init__(self) -> None:
        self._heap: List[list] = []
        self._entries: Dict[NodeID, list] = {}
        self._sequence: Iterator[int] = count()

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, node: NodeID) -> bool:
        return node in self._entries

    def is_empty(self) -> bool:
        return not self._entries

    def contains(self, node: NodeID) -> bool:
        return node in self._entries

    def priority(self, node: NodeID) -> Cost:
        """Return the current priority of ``node``.

        Raises:
            KeyError: If the node is not in the frontier.
        """
        return self._entries[node][0]

    def insert(self, node: NodeID, priority: Cost) -> None:
        """Add ``node`` with ``priority``.

        Raises:
            ValueError: If the node is already in the frontier.
        """
        if node in self._entries:
            raise ValueError(f"Node '{node}' is already in the frontier.")
        entry = [priority, next(self._sequence), node]
        self._entries[node] = entry
        heappush(self._heap, entry)

    def remove(self, node: NodeID) -> None:
        """Remove ``node`` from the frontier.

        Raises:
            KeyError: If the node is not in the frontier.
        """
        entry = self._entries.pop(node)
        entry[-1] = _REMOVED

    def pop_min(self) -> NodeID:
        """Remove and return the node with the smallest priority.

        Raises:
            EmptyFrontierError: If the frontier is empty.
        """
        while self._heap:
            _, _, node = heappop(self._heap)
            if node is not _REMOVED:
                del self._entries[node]
                return node
        raise EmptyFrontierError("pop_min() called on an empty frontier.")

    def decrease_priority(self, node: NodeID, new_priority: Cost) -> None:
        """Lower the priority of ``node``.

        Equivalent to ``remove`` followed by ``insert``: the node takes a new
        insertion sequence, so it ranks after nodes already waiting at
        ``new_priority``.

        Raises:
            KeyError: If the node is not in the frontier.
            ValueError: If ``new_priority`` is greater than the current one.
        """
        current = self._entries[node][0]
        if new_priority > current:
            raise ValueError(
                f"Cannot raise priority of '{node}' from {current} to {new_priority}."
            )
        self.remove(node)
        self.insert(node, new_priority)
