"""Traversal helpers shared by role graph queries."""

from .queue_manager import QueueEntry, RoleQueue
from .trail_tracker import TrailTracker

__all__ = ["QueueEntry", "RoleQueue", "TrailTracker"]
