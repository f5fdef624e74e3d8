"""Trail tracking for role traversals.

Records the order in which roles are first discovered, together with the hop
count that reached them.
"""

from __future__ import annotations

from typing import List, Tuple


class TrailTracker:
    """Tracks traversal steps in discovery order."""

    def __init__(self) -> None:
        self._trail: List[Tuple[str, int]] = []

    def record_step(self, name: str, depth: int) -> None:
        """Record a step in the traversal trail.

        Args:
            name: Name of the role reached
            depth: Hop count at which the role was reached
        """
        self._trail.append((name, depth))

    def get_names(self) -> List[str]:
        """Get role names in discovery order."""
        return [name for name, _depth in self._trail]
