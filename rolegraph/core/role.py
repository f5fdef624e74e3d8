"""Role class for rolegraph role hierarchies."""

from typing import TYPE_CHECKING, Iterator, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from rolegraph.exceptions import InvalidArgumentError

from .matching import MatchingStrategy, as_strategy
from .walker import RoleQueue, TrailTracker

if TYPE_CHECKING:
    from .registry import Roles


class Role(BaseModel):
    """Graph vertex for a role, user or group.

    Edges are arena slots into the owning :class:`~rolegraph.core.registry.Roles`
    registry, so a role only ever points at siblings from the same registry.

    Attributes:
        name: Role name, unique within its registry
        id: Arena slot assigned by the owning registry (-1 while detached)
        edge_ids: Slots of directly inherited roles, in insertion order
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    id: int = -1
    edge_ids: List[int] = Field(default_factory=list)
    _registry: Optional["Roles"] = PrivateAttr(default=None)

    @field_validator("id")
    @classmethod
    def _check_detached_id(cls, value: int) -> int:
        if value != -1:
            raise ValueError("id is assigned by the owning registry")
        return value

    @field_validator("edge_ids")
    @classmethod
    def _check_detached_edges(cls, value: List[int]) -> List[int]:
        if value:
            raise ValueError("edges can only be added once the role is stored")
        return value

    @property
    def is_attached(self: "Role") -> bool:
        return self._registry is not None

    def attach(self: "Role", registry: "Roles", role_id: int) -> None:
        """Bind this role to a registry slot."""
        self._registry = registry
        self.id = role_id

    @property
    def registry(self: "Role") -> "Roles":
        """Get the registry that owns this role.

        Raises:
            InvalidArgumentError: If the role was never stored in a registry
        """
        if self._registry is None:
            raise InvalidArgumentError(
                f"Role '{self.name}' is not attached to a registry",
                details={"role_name": self.name},
            )
        return self._registry

    @property
    def roles(self: "Role") -> List["Role"]:
        """Directly inherited roles."""
        registry = self.registry
        return [registry.role(role_id) for role_id in self.edge_ids]

    def add_role(self: "Role", other: "Role") -> None:
        """Add an inheritance edge to ``other``; no-op if it already exists."""
        if other._registry is not self._registry or other.id < 0:
            raise InvalidArgumentError(
                f"Cannot link '{self.name}' to '{other.name}' across registries",
                details={"source": self.name, "target": other.name},
            )
        if other.id not in self.edge_ids:
            self.edge_ids.append(other.id)

    def delete_role(self: "Role", other: "Role") -> None:
        """Remove the inheritance edge to ``other`` if present."""
        if other._registry is self._registry and other.id in self.edge_ids:
            self.edge_ids.remove(other.id)

    def has_direct_role(self: "Role", name: str) -> bool:
        """Check whether ``name`` is one hop away."""
        return any(role.name == name for role in self.roles)

    def get_direct_roles(self: "Role") -> List[str]:
        """Get names of directly inherited roles."""
        return [role.name for role in self.roles]

    def walk(self: "Role", hierarchy_level: int) -> Iterator[Tuple["Role", int]]:
        """Breadth-first traversal of inherited roles.

        Each reachable role is yielded once, at the hop count of its shortest
        path, for hops ``1..hierarchy_level``. The start role itself is never
        yielded, even when a cycle leads back to it.

        Args:
            hierarchy_level: Maximum number of hops to follow

        Yields:
            ``(role, depth)`` pairs in first-discovery order
        """
        registry = self.registry
        visited: Set[int] = {self.id}
        queue = RoleQueue()
        queue.visit([(self.id, 0)])

        while queue:
            role_id, depth = queue.next()
            if depth >= hierarchy_level:
                continue
            for edge_id in registry.role(role_id).edge_ids:
                if edge_id in visited:
                    continue
                visited.add(edge_id)
                yield registry.role(edge_id), depth + 1
                queue.visit([(edge_id, depth + 1)])

    def has_role(
        self: "Role",
        name: str,
        hierarchy_level: int,
        matching: Optional[MatchingStrategy] = None,
    ) -> bool:
        """Check whether this role reaches ``name`` within ``hierarchy_level`` hops.

        Args:
            name: Target role name
            hierarchy_level: Maximum number of hops to follow
            matching: Strategy used to compare candidate names with ``name``

        Returns:
            True if this role or any role within the hop bound matches ``name``

        Note:
            The strategy also applies to this role at hop 0, so a role whose own
            name matches a pattern target reaches it without following an edge.
            Inside a merged registry the same role would be linked to the
            pattern node anyway.
        """
        strategy = as_strategy(matching)
        if self.name == name or strategy.match(self.name, name):
            return True

        for role, _depth in self.walk(hierarchy_level):
            if role.name == name or strategy.match(role.name, name):
                return True
        return False

    def get_roles(self: "Role", hierarchy_level: int = 1) -> List[str]:
        """Get all role names reachable within ``hierarchy_level`` hops.

        Names are unique and listed in first-discovery order, so a role that is
        reachable along several paths appears at its shortest-path position.
        """
        trail = TrailTracker()
        for role, depth in self.walk(hierarchy_level):
            trail.record_step(role.name, depth)
        return trail.get_names()

    def to_string(self: "Role") -> str:
        """Render as ``"name > r1,r2"``, or an empty string without edges."""
        if not self.edge_ids:
            return ""
        return f"{self.name} > {','.join(self.get_direct_roles())}"

    def __str__(self: "Role") -> str:
        return self.to_string()

    def __repr__(self: "Role") -> str:
        roles = self.get_direct_roles() if self._registry is not None else []
        return f"Role(name={self.name!r}, roles={roles!r})"
