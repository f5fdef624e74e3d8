"""Queue management for role graph traversals.

This module provides the breadth-first frontier used by role traversals.
Entries pair an arena slot with the hop count at which it was discovered.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Tuple

# (role id, hop count)
QueueEntry = Tuple[int, int]


class RoleQueue:
    """Unbounded FIFO frontier of a role traversal.

    Hop limits are enforced by the traversal itself, so every entry handed to
    :meth:`visit` is kept.
    """

    def __init__(self) -> None:
        self._backing: Deque[QueueEntry] = deque()

    def visit(self, entries: Iterable[QueueEntry]) -> None:
        """Append entries to the back of the queue."""
        self._backing.extend(entries)

    def next(self) -> QueueEntry:
        """Pop the oldest entry.

        Raises:
            IndexError: If the queue is empty
        """
        return self._backing.popleft()

    def __len__(self) -> int:
        return len(self._backing)

    def __bool__(self) -> bool:
        return bool(self._backing)
