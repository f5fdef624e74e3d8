"""Thread-safe role manager wrapper.

:class:`RoleManager` assumes a single caller at a time. This module makes that
discipline explicit: :class:`SynchronizedRoleManager` holds the manager behind
one re-entrant lock that every public call takes.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from .manager import RoleManager
from .matching import MatchingFunc


class SynchronizedRoleManager:
    """Serializes access to a wrapped :class:`RoleManager`.

    Args:
        manager: Manager to guard; a new one is created if omitted
        max_hierarchy_level: Hop bound for the created manager
    """

    def __init__(
        self,
        manager: Optional[RoleManager] = None,
        max_hierarchy_level: Optional[int] = None,
    ) -> None:
        if manager is None:
            manager = (
                RoleManager(max_hierarchy_level)
                if max_hierarchy_level is not None
                else RoleManager()
            )
        self._manager = manager
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[RoleManager]:
        """Hold the lock across several calls and yield the raw manager."""
        with self._lock:
            yield self._manager

    def add_matching_func(self, fn: MatchingFunc, name: Optional[str] = None) -> None:
        with self._lock:
            self._manager.add_matching_func(fn, name)

    def add_domain_matching_func(
        self, fn: MatchingFunc, name: Optional[str] = None
    ) -> None:
        with self._lock:
            self._manager.add_domain_matching_func(fn, name)

    def clear(self) -> None:
        with self._lock:
            self._manager.clear()

    def add_link(self, name1: str, name2: str, *domain: str) -> None:
        with self._lock:
            self._manager.add_link(name1, name2, *domain)

    def delete_link(self, name1: str, name2: str, *domain: str) -> None:
        with self._lock:
            self._manager.delete_link(name1, name2, *domain)

    def has_link(self, name1: str, name2: str, *domain: str) -> bool:
        with self._lock:
            return self._manager.has_link(name1, name2, *domain)

    def get_roles(self, name: str, *domain: str) -> List[str]:
        with self._lock:
            return self._manager.get_roles(name, *domain)

    def get_users(self, name: str, *domain: str) -> List[str]:
        with self._lock:
            return self._manager.get_users(name, *domain)

    def get_domains(self, name: str) -> List[str]:
        with self._lock:
            return self._manager.get_domains(name)

    def get_all_domains(self) -> List[str]:
        with self._lock:
            return self._manager.get_all_domains()

    def print_roles(self) -> str:
        with self._lock:
            return self._manager.print_roles()

    def __repr__(self) -> str:
        return f"SynchronizedRoleManager({self._manager!r})"


__all__ = ["SynchronizedRoleManager"]
