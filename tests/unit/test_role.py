"""Unit tests for basic Role functionality."""

import pytest
from pydantic import ValidationError

from rolegraph.core import PredicateMatch, Role, Roles
from rolegraph.exceptions import InvalidArgumentError


def build_chain(roles: Roles, names):
    """Link names[0] -> names[1] -> ... and return the stored roles."""
    nodes = [roles.load_or_store(name) for name in names]
    for source, target in zip(nodes, nodes[1:]):
        source.add_role(target)
    return nodes


class TestRole:
    """Test Role edge management."""

    def test_role_creation(self: "TestRole") -> None:
        """Test a detached role has no slot and no edges."""
        role = Role(name="alice")
        assert role.name == "alice"
        assert role.id == -1
        assert role.edge_ids == []

    @pytest.mark.parametrize("fields", [{"edge_ids": [99]}, {"id": 3}])
    def test_role_rejects_preset_slots(self: "TestRole", fields) -> None:
        """Test slots and edges cannot be given before the role is stored."""
        with pytest.raises(ValidationError):
            Role(name="alice", **fields)

    def test_detached_role_has_no_registry(self: "TestRole") -> None:
        """Test accessing the registry of a detached role fails."""
        role = Role(name="alice")
        with pytest.raises(InvalidArgumentError):
            _ = role.registry

    def test_add_role_is_idempotent(self: "TestRole") -> None:
        """Test adding the same edge twice keeps one edge."""
        roles = Roles()
        alice, admin = build_chain(roles, ["alice", "admin"])
        alice.add_role(admin)
        assert alice.edge_ids == [admin.id]
        assert alice.get_direct_roles() == ["admin"]

    def test_add_role_across_registries_fails(self: "TestRole") -> None:
        """Test edges never point into another registry."""
        alice = Roles().load_or_store("alice")
        admin = Roles().load_or_store("admin")
        with pytest.raises(InvalidArgumentError):
            alice.add_role(admin)

    def test_delete_role(self: "TestRole") -> None:
        """Test deleting an edge and deleting a missing edge."""
        roles = Roles()
        alice, admin = build_chain(roles, ["alice", "admin"])
        alice.delete_role(admin)
        assert alice.edge_ids == []
        # No edge left, still no error
        alice.delete_role(admin)
        assert alice.edge_ids == []

    def test_has_direct_role(self: "TestRole") -> None:
        """Test direct role lookup only looks one hop away."""
        roles = Roles()
        a, b, c = build_chain(roles, ["a", "b", "c"])
        assert a.has_direct_role("b")
        assert not a.has_direct_role("c")
        assert not a.has_direct_role("a")

    def test_to_string(self: "TestRole") -> None:
        """Test role descriptors."""
        roles = Roles()
        alice = roles.load_or_store("alice")
        assert alice.to_string() == ""
        alice.add_role(roles.load_or_store("admin"))
        alice.add_role(roles.load_or_store("staff"))
        assert alice.to_string() == "alice > admin,staff"
        assert str(alice) == "alice > admin,staff"


class TestRoleTraversal:
    """Test bounded breadth-first traversal."""

    def test_has_role_self(self: "TestRoleTraversal") -> None:
        """Test a role always reaches itself at hop 0."""
        roles = Roles()
        alice = roles.load_or_store("alice")
        assert alice.has_role("alice", 1)

    @pytest.mark.parametrize(
        "level,expected", [(1, False), (2, False), (3, True), (4, True)]
    )
    def test_has_role_respects_hierarchy_level(
        self: "TestRoleTraversal", level: int, expected: bool
    ) -> None:
        """Test a chain of four roles needs three hops."""
        roles = Roles()
        a1, _a2, _a3, _a4 = build_chain(roles, ["a1", "a2", "a3", "a4"])
        assert a1.has_role("a4", level) is expected

    def test_has_role_terminates_on_cycle(self: "TestRoleTraversal") -> None:
        """Test cycles are tolerated for any hop bound."""
        roles = Roles()
        a, b, c = build_chain(roles, ["a", "b", "c"])
        c.add_role(a)
        assert a.has_role("c", 1000)
        assert not a.has_role("missing", 1000)

    def test_has_role_with_matching(self: "TestRoleTraversal") -> None:
        """Test target comparison goes through the strategy."""
        roles = Roles()
        alice, _admin = build_chain(roles, ["alice", "admin_us"])
        prefix = PredicateMatch(
            lambda candidate, target: candidate.startswith(target.rstrip("*"))
        )
        assert not alice.has_role("admin*", 10)
        assert alice.has_role("admin*", 10, prefix)

    def test_has_role_matches_own_name(self: "TestRoleTraversal") -> None:
        """Test the strategy is applied to the start role at hop 0."""
        roles = Roles()
        admin_us = roles.load_or_store("admin_us")
        prefix = PredicateMatch(
            lambda candidate, target: candidate.startswith(target.rstrip("*"))
        )
        assert not admin_us.has_role("admin*", 1)
        assert admin_us.has_role("admin*", 1, prefix)

    def test_walk_wide_fan_out(self: "TestRoleTraversal") -> None:
        """Test every child of a wide role is visited and walked further."""
        roles = Roles()
        root = roles.load_or_store("root")
        leaf = roles.load_or_store("leaf")
        for i in range(500):
            child = roles.load_or_store(f"child{i}")
            root.add_role(child)
        child.add_role(leaf)
        assert len(root.get_roles(1)) == 500
        assert root.get_roles(2)[-1] == "leaf"
        assert root.has_role("leaf", 2)

    def test_get_roles_first_discovery_order(self: "TestRoleTraversal") -> None:
        """Test reachable names are unique and ordered by shortest path."""
        roles = Roles()
        a = roles.load_or_store("a")
        b = roles.load_or_store("b")
        c = roles.load_or_store("c")
        d = roles.load_or_store("d")
        a.add_role(b)
        a.add_role(c)
        b.add_role(d)
        c.add_role(d)
        d.add_role(a)
        assert a.get_roles(10) == ["b", "c", "d"]

    def test_get_roles_bounded(self: "TestRoleTraversal") -> None:
        """Test the hop bound limits listed roles."""
        roles = Roles()
        a1, _a2, _a3 = build_chain(roles, ["a1", "a2", "a3"])
        assert a1.get_roles() == ["a2"]
        assert a1.get_roles(2) == ["a2", "a3"]

    def test_walk_depths(self: "TestRoleTraversal") -> None:
        """Test walk reports the hop count of each discovered role."""
        roles = Roles()
        a1, _a2, _a3 = build_chain(roles, ["a1", "a2", "a3"])
        assert [(role.name, depth) for role, depth in a1.walk(5)] == [
            ("a2", 1),
            ("a3", 2),
        ]
