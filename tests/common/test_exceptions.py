"""Tests for the rolegraph exception hierarchy."""

from rolegraph.exceptions import (
    InvalidArgumentError,
    InvalidConfigurationError,
    RoleGraphError,
    RoleNotFoundError,
)


class TestExceptions:
    """Test exception attributes and inheritance."""

    def test_base_error(self) -> None:
        """Test message and details."""
        error = RoleGraphError("boom", details={"key": "value"})
        assert str(error) == "boom"
        assert error.message == "boom"
        assert error.details == {"key": "value"}
        assert RoleGraphError("plain").details == {}

    def test_invalid_argument(self) -> None:
        """Test InvalidArgumentError is also a ValueError."""
        error = InvalidArgumentError("bad")
        assert isinstance(error, RoleGraphError)
        assert isinstance(error, ValueError)

    def test_role_not_found(self) -> None:
        """Test RoleNotFoundError carries the role and domain."""
        error = RoleNotFoundError("bob", "tenant1", details={"op": "delete_link"})
        assert isinstance(error, LookupError)
        assert error.role_name == "bob"
        assert error.domain == "tenant1"
        assert "bob" in str(error) and "tenant1" in str(error)
        assert error.details == {
            "role_name": "bob",
            "domain": "tenant1",
            "op": "delete_link",
        }

    def test_invalid_configuration(self) -> None:
        """Test InvalidConfigurationError carries the key and value."""
        error = InvalidConfigurationError("max_hierarchy_level", "0", "too small")
        assert error.config_key == "max_hierarchy_level"
        assert error.config_value == "0"
        assert error.reason == "too small"
        assert "too small" in str(error)
