"""Configuration for rolegraph role managers.

This module provides the configuration model used to build role managers and
a loader that reads it from environment variables.
"""

import logging
import os
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from rolegraph.constants import DEFAULT_DOMAIN, DEFAULT_MAX_HIERARCHY_LEVEL, EnvVars
from rolegraph.exceptions import InvalidConfigurationError

# Registers the ROLES level so it is accepted below
from rolegraph.logging import custom_levels  # noqa: F401

logger = logging.getLogger(__name__)


class RoleManagerConfig(BaseModel):
    """Configuration model for a role manager.

    Attributes:
        max_hierarchy_level: Maximum number of inheritance hops followed by queries
        default_domain: Domain used when no domain token is supplied (read-only)
        log_enabled: Whether ``print_roles`` output is emitted
        log_level: Level name ``print_roles`` output is emitted at
    """

    model_config = ConfigDict(frozen=True)

    max_hierarchy_level: int = Field(default=DEFAULT_MAX_HIERARCHY_LEVEL, ge=1)
    default_domain: str = Field(default=DEFAULT_DOMAIN, frozen=True)
    log_enabled: bool = False
    log_level: str = "INFO"

    @field_validator("default_domain")
    @classmethod
    def _check_default_domain(cls, value: str) -> str:
        if value != DEFAULT_DOMAIN:
            raise ValueError(f"default_domain is reserved as '{DEFAULT_DOMAIN}'")
        return value

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


def get_role_manager_config(
    overrides: Optional[Dict[str, Any]] = None,
) -> RoleManagerConfig:
    """Build role manager configuration from environment variables and defaults.

    Args:
        overrides: Values that take precedence over the environment

    Returns:
        Validated configuration

    Raises:
        InvalidConfigurationError: If a value fails validation

    Environment Variables:
        ROLEGRAPH_MAX_HIERARCHY_LEVEL: Maximum inheritance hops (default: 10)
        ROLEGRAPH_LOG_ENABLED: Enable/disable role dump output (default: "false")
        ROLEGRAPH_LOG_LEVEL: Level name for role dump output (default: "INFO")
    """
    values: Dict[str, Any] = {}

    max_level = os.getenv(EnvVars.MAX_HIERARCHY_LEVEL)
    if max_level is not None:
        values["max_hierarchy_level"] = max_level

    log_enabled = os.getenv(EnvVars.LOG_ENABLED)
    if log_enabled is not None:
        values["log_enabled"] = log_enabled.strip().lower() == "true"

    log_level = os.getenv(EnvVars.LOG_LEVEL)
    if log_level is not None:
        values["log_level"] = log_level

    values.update(overrides or {})

    try:
        config = RoleManagerConfig(**values)
    except ValidationError as e:
        error = e.errors()[0]
        key = str(error["loc"][0]) if error.get("loc") else "config"
        raise InvalidConfigurationError(
            key,
            values.get(key),
            error["msg"],
            details={"errors": e.errors(include_url=False)},
        ) from e

    logger.debug(f"Role manager configuration loaded: {config.model_dump()}")
    return config


__all__ = [
    "RoleManagerConfig",
    "get_role_manager_config",
]
