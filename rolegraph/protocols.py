"""Type protocols for rolegraph interfaces.

This module defines the contract a policy evaluator relies on when it expands
role-aware rules such as ``g(alice, admin)``.
"""

from typing import Callable, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class RoleManagerProtocol(Protocol):
    """Protocol for role managers.

    Both :class:`~rolegraph.core.manager.RoleManager` and
    :class:`~rolegraph.core.synchronized.SynchronizedRoleManager` satisfy it.
    Domain-scoped operations take zero or one domain token.
    """

    def clear(self) -> None:
        """Clear all stored data and reset to the initial state."""
        ...

    def add_link(self, name1: str, name2: str, *domain: str) -> None:
        """Add the inheritance link ``name1`` -> ``name2``."""
        ...

    def delete_link(self, name1: str, name2: str, *domain: str) -> None:
        """Delete the inheritance link ``name1`` -> ``name2``."""
        ...

    def has_link(self, name1: str, name2: str, *domain: str) -> bool:
        """Determine whether ``name1`` inherits ``name2``."""
        ...

    def get_roles(self, name: str, *domain: str) -> List[str]:
        """Get the roles that ``name`` inherits."""
        ...

    def get_users(self, name: str, *domain: str) -> List[str]:
        """Get the users that directly inherit ``name``."""
        ...

    def print_roles(self) -> str:
        """Print all the roles to the log."""
        ...

    def add_matching_func(
        self, fn: Callable[[str, str], bool], name: Optional[str] = None
    ) -> None:
        """Install a role name matching function."""
        ...

    def add_domain_matching_func(
        self, fn: Callable[[str, str], bool], name: Optional[str] = None
    ) -> None:
        """Install a domain name matching function."""
        ...
