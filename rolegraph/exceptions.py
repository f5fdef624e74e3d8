"""Exception hierarchy for rolegraph.

All errors raised by the library derive from :class:`RoleGraphError`, which
carries a human readable message and an optional ``details`` dictionary with
structured context about the failure.

Query operations (``has_link``, ``get_roles``, ``get_users``) never raise for
missing names; only mutations and malformed calls do.
"""

from typing import Any, Dict, Optional


class RoleGraphError(Exception):
    """Base exception for all rolegraph errors.

    Attributes:
        message: Human readable error message
        details: Structured context about the error
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details or {}

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(RoleGraphError, ValueError):
    """Raised when an operation receives malformed arguments.

    The most common cause is passing more than one domain token to a
    domain-scoped role manager operation.
    """


class RoleNotFoundError(RoleGraphError, LookupError):
    """Raised when a mutation targets a role that does not exist."""

    def __init__(
        self,
        role_name: str,
        domain: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.role_name = role_name
        self.domain = domain
        message = f"Role '{role_name}' does not exist in domain '{domain}'"
        merged = {"role_name": role_name, "domain": domain}
        merged.update(details or {})
        super().__init__(message, details=merged)


class InvalidConfigurationError(RoleGraphError):
    """Raised when a configuration value cannot be used."""

    def __init__(
        self,
        config_key: str,
        config_value: Any,
        reason: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.config_key = config_key
        self.config_value = config_value
        self.reason = reason
        message = (
            f"Invalid configuration for '{config_key}' ({config_value!r}): {reason}"
        )
        merged = {"config_key": config_key, "config_value": config_value}
        merged.update(details or {})
        super().__init__(message, details=merged)


__all__ = [
    "RoleGraphError",
    "InvalidArgumentError",
    "RoleNotFoundError",
    "InvalidConfigurationError",
]
