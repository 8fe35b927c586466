"""Global pytest configuration.

Registers the fixture plugin `tests.algorithms.sample_graphs` so every test
package can request the sample graphs by name. Registering it as a plugin
rather than importing it here lets pytest apply assertion rewriting.
"""

from __future__ import annotations

pytest_plugins: list[str] = ["tests.algorithms.sample_graphs"]
