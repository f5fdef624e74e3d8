"""Unit tests for traversal queue and trail helpers."""

import pytest

from rolegraph.core.walker import RoleQueue, TrailTracker


class TestRoleQueue:
    """Test RoleQueue operations."""

    def test_fifo_order(self) -> None:
        """Test entries come out in insertion order."""
        queue = RoleQueue()
        queue.visit([(0, 0), (1, 1)])
        queue.visit([(2, 1)])
        assert len(queue) == 3
        assert [queue.next(), queue.next(), queue.next()] == [(0, 0), (1, 1), (2, 1)]
        assert not queue

    def test_next_on_empty_queue(self) -> None:
        """Test popping an empty queue."""
        with pytest.raises(IndexError):
            RoleQueue().next()

    def test_wide_frontier_is_kept(self) -> None:
        """Test no entry is dropped however wide the frontier grows."""
        queue = RoleQueue()
        queue.visit((role_id, 1) for role_id in range(1000))
        assert len(queue) == 1000
        assert queue.next() == (0, 1)


class TestTrailTracker:
    """Test TrailTracker operations."""

    def test_record_and_read(self) -> None:
        """Test names are reported in discovery order."""
        trail = TrailTracker()
        trail.record_step("admin", 1)
        trail.record_step("root", 2)
        assert trail.get_names() == ["admin", "root"]

    def test_empty_trail(self) -> None:
        """Test a fresh trail has no names."""
        assert TrailTracker().get_names() == []
