"""Shortest-path algorithms.

- ``weight``: per-step cost resolution from a `WeightConfig`.
- ``frontier``: stable min-priority queue with decrease-key.
- ``spf``: the `ShortestPathEngine` relaxation loop and query surface.
- ``paths``: path reconstruction over the settled shortest-path DAG.
"""
