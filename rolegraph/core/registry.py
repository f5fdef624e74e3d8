"""Per-domain role registry.

A :class:`Roles` registry owns every :class:`Role` it creates. Roles live in
an arena list and are indexed by name; edges between roles are arena slots,
so the whole graph, cycles included, is released by dropping the registry.
"""

from typing import Callable, Dict, Iterator, List, Optional

from rolegraph.exceptions import InvalidArgumentError

from .matching import MatchingStrategy, as_strategy
from .role import Role


class Roles:
    """Collection of roles for a single domain, in insertion order."""

    def __init__(self) -> None:
        self._arena: List[Role] = []
        self._index: Dict[str, int] = {}  # name to arena slot

    def role(self, role_id: int) -> Role:
        """Dereference an arena slot."""
        return self._arena[role_id]

    def load(self, name: str) -> Optional[Role]:
        """Get a role by exact name, or None."""
        role_id = self._index.get(name)
        if role_id is None:
            return None
        return self._arena[role_id]

    def load_or_store(self, name: str, role: Optional[Role] = None) -> Role:
        """Get a role by exact name, storing ``role`` (or a new one) if absent.

        Args:
            name: Role name
            role: Detached role to adopt when ``name`` is new

        Returns:
            The stored role for ``name``

        Raises:
            InvalidArgumentError: If ``role`` is adopted under another name, or
                already belongs to a registry
        """
        existing = self.load(name)
        if existing is not None:
            return existing

        if role is None:
            role = Role(name=name)
        elif role.name != name:
            raise InvalidArgumentError(
                f"Cannot store role '{role.name}' under name '{name}'",
                details={"name": name, "role_name": role.name},
            )
        elif role.is_attached or role.id != -1 or role.edge_ids:
            raise InvalidArgumentError(
                f"Role '{role.name}' already belongs to a registry",
                details={"role_name": role.name, "role_id": role.id},
            )
        role.attach(self, len(self._arena))
        self._arena.append(role)
        self._index[name] = role.id
        return role

    def create_role(
        self, name: str, matching: Optional[MatchingStrategy] = None
    ) -> Role:
        """Get or create a role, linking it to pattern-equivalent roles.

        With a pattern strategy, a newly created role gets edges in both
        directions to every existing role whose name matches it under the
        strategy (in either argument order). Pattern-equivalent names thereby
        become connected in the graph rather than merely equal on lookup.

        Args:
            name: Role name
            matching: Strategy for role names; exact when omitted

        Returns:
            The stored role for ``name``
        """
        strategy = as_strategy(matching)
        if name in self._index:
            return self._arena[self._index[name]]

        role = self.load_or_store(name)
        if strategy.is_pattern:
            for other in self._arena:
                if other.id == role.id:
                    continue
                if strategy.match(other.name, name) or strategy.match(
                    name, other.name
                ):
                    role.add_role(other)
                    other.add_role(role)
        return role

    def has_role(self, name: str, matching: Optional[MatchingStrategy] = None) -> bool:
        """Check for ``name`` exactly, or for any role matching it under ``matching``.

        Like :meth:`create_role`, the strategy is tried with the stored name in
        either argument position, so both concrete and pattern queries resolve.
        """
        if name in self._index:
            return True

        strategy = as_strategy(matching)
        if not strategy.is_pattern:
            return False
        return any(
            strategy.match(role.name, name) or strategy.match(name, role.name)
            for role in self._arena
        )

    def range_roles(self, fn: Callable[[str, Role], bool]) -> None:
        """Call ``fn(name, role)`` for each role until it returns False."""
        for role in list(self._arena):
            if fn(role.name, role) is False:
                break

    def to_array(self) -> List[Role]:
        """Get all roles in insertion order."""
        return list(self._arena)

    def __iter__(self) -> Iterator[Role]:
        return iter(list(self._arena))

    def __len__(self) -> int:
        return len(self._arena)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"Roles({list(self._index)!r})"
