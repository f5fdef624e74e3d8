"""Default role manager.

The role manager keeps one :class:`~rolegraph.core.registry.Roles` registry per
domain and answers role inheritance questions against them. When a role or
domain matching function is installed, every query runs against a registry
synthesized for that query alone (see :meth:`RoleManager.generate_temp_roles`).
"""

import logging
from typing import Dict, List, Optional, Tuple

from rolegraph.config import RoleManagerConfig
from rolegraph.constants import DEFAULT_DOMAIN, DEFAULT_MAX_HIERARCHY_LEVEL
from rolegraph.exceptions import InvalidArgumentError, RoleNotFoundError
from rolegraph.logging import DefaultLogger, Logger, log_print

from .matching import EXACT_MATCH, MatchingFunc, MatchingStrategy, PredicateMatch
from .registry import Roles

logger = logging.getLogger(__name__)


class RoleManager:
    """In-memory role hierarchy with optional pattern matching.

    The manager does no locking of its own. Share an instance between threads
    only through :class:`~rolegraph.core.synchronized.SynchronizedRoleManager`.

    Attributes:
        all_domains: Registry per domain, in creation order
    """

    DEFAULT_DOMAIN = DEFAULT_DOMAIN

    def __init__(
        self,
        max_hierarchy_level: int = DEFAULT_MAX_HIERARCHY_LEVEL,
        logger: Optional[Logger] = None,
    ) -> None:
        """Initialize the role manager.

        Args:
            max_hierarchy_level: Maximum number of inheritance hops followed
            logger: Sink for ``print_roles``; the process-wide logger if omitted

        Raises:
            InvalidArgumentError: If ``max_hierarchy_level`` is below 1
        """
        if (
            isinstance(max_hierarchy_level, bool)
            or not isinstance(max_hierarchy_level, int)
            or max_hierarchy_level < 1
        ):
            raise InvalidArgumentError(
                "max_hierarchy_level must be a positive integer",
                details={"max_hierarchy_level": max_hierarchy_level},
            )

        self.all_domains: Dict[str, Roles] = {DEFAULT_DOMAIN: Roles()}
        self._max_hierarchy_level = max_hierarchy_level
        self._logger = logger
        self._matching: MatchingStrategy = EXACT_MATCH
        self._domain_matching: MatchingStrategy = EXACT_MATCH

    @classmethod
    def from_config(cls, config: RoleManagerConfig) -> "RoleManager":
        """Create a role manager from a configuration model."""
        return cls(
            config.max_hierarchy_level,
            logger=DefaultLogger(enabled=config.log_enabled, level=config.log_level),
        )

    @property
    def max_hierarchy_level(self) -> int:
        return self._max_hierarchy_level

    @property
    def matching(self) -> MatchingStrategy:
        """Strategy used to compare role names."""
        return self._matching

    @property
    def domain_matching(self) -> MatchingStrategy:
        """Strategy used to compare domain names."""
        return self._domain_matching

    @property
    def has_pattern(self) -> bool:
        return self._matching.is_pattern

    @property
    def has_domain_pattern(self) -> bool:
        return self._domain_matching.is_pattern

    def add_matching_func(self, fn: MatchingFunc, name: Optional[str] = None) -> None:
        """Install a role name matching function, e.g. to support patterns in ``g``.

        Args:
            fn: Predicate ``(candidate, target) -> bool``
            name: Optional label for the function
        """
        self._matching = PredicateMatch(fn, name)
        logger.debug(f"Role matching function installed: {name or fn!r}")

    def add_domain_matching_func(
        self, fn: MatchingFunc, name: Optional[str] = None
    ) -> None:
        """Install a domain name matching function.

        Args:
            fn: Predicate ``(queried_domain, stored_domain) -> bool``
            name: Optional label for the function
        """
        self._domain_matching = PredicateMatch(fn, name)
        logger.debug(f"Domain matching function installed: {name or fn!r}")

    def clear(self) -> None:
        """Clear all stored data and reset to the initial state."""
        self.all_domains = {}
        self.load_or_store_roles(DEFAULT_DOMAIN)

    def add_link(self, name1: str, name2: str, *domain: str) -> None:
        """Add the inheritance link ``name1`` -> ``name2``.

        Both roles are created in the domain registry if missing.

        Raises:
            InvalidArgumentError: If more than one domain is given
        """
        domain_name = self._get_domain(domain)
        all_roles = self.load_or_store_roles(domain_name)

        role1 = all_roles.load_or_store(name1)
        role2 = all_roles.load_or_store(name2)
        role1.add_role(role2)
        logger.debug(f"Link added: {name1} -> {name2} (domain={domain_name})")

    def delete_link(self, name1: str, name2: str, *domain: str) -> None:
        """Delete the inheritance link ``name1`` -> ``name2``.

        A missing link is not an error, but both roles must exist.

        Raises:
            InvalidArgumentError: If more than one domain is given
            RoleNotFoundError: If ``name1`` or ``name2`` does not exist
        """
        domain_name = self._get_domain(domain)
        all_roles = self.load_or_store_roles(domain_name)

        role1 = all_roles.load(name1)
        if role1 is None:
            raise RoleNotFoundError(name1, domain_name)
        role2 = all_roles.load(name2)
        if role2 is None:
            raise RoleNotFoundError(name2, domain_name)

        role1.delete_role(role2)
        logger.debug(f"Link deleted: {name1} -> {name2} (domain={domain_name})")

    def has_link(self, name1: str, name2: str, *domain: str) -> bool:
        """Determine whether ``name1`` inherits ``name2``.

        Raises:
            InvalidArgumentError: If more than one domain is given
        """
        domain_name = self._get_domain(domain)
        if name1 == name2:
            return True

        all_roles = self._get_effective_roles(domain_name)
        if not all_roles.has_role(name1, self._matching) or not all_roles.has_role(
            name2, self._matching
        ):
            return False

        role1 = all_roles.create_role(name1, self._matching)
        return role1.has_role(name2, self._max_hierarchy_level, self._matching)

    def get_roles(self, name: str, *domain: str) -> List[str]:
        """Get the roles that ``name`` inherits, nearest first.

        Raises:
            InvalidArgumentError: If more than one domain is given
        """
        domain_name = self._get_domain(domain)
        all_roles = self._get_effective_roles(domain_name)
        if not all_roles.has_role(name, self._matching):
            return []

        role = all_roles.create_role(name, self._matching)
        return role.get_roles(self._max_hierarchy_level)

    def get_users(self, name: str, *domain: str) -> List[str]:
        """Get the roles and users that directly inherit ``name``.

        The existence check for ``name`` goes through the domain matching
        strategy, not the role one.

        Raises:
            InvalidArgumentError: If more than one domain is given
        """
        domain_name = self._get_domain(domain)
        all_roles = self._get_effective_roles(domain_name)
        if not all_roles.has_role(name, self._domain_matching):
            return []

        return [
            role.name for role in all_roles.to_array() if role.has_direct_role(name)
        ]

    def get_domains(self, name: str) -> List[str]:
        """Get the domains in which ``name`` directly inherits at least one role.

        The default domain is not reported.
        """
        domains = []
        for domain_name, roles in self.all_domains.items():
            if domain_name == DEFAULT_DOMAIN:
                continue
            role = roles.load(name)
            if role is not None and role.edge_ids:
                domains.append(domain_name)
        return domains

    def get_all_domains(self) -> List[str]:
        """Get every stored domain, the default one included."""
        return list(self.all_domains)

    def print_roles(self) -> str:
        """Print all the roles to the log.

        Returns:
            The line that was written
        """
        lines = []
        for roles in self.all_domains.values():
            for role in roles.to_array():
                text = role.to_string()
                if text:
                    lines.append(text)

        line = ", ".join(lines)
        if self._logger is not None:
            self._logger.write(line)
        else:
            log_print(line)
        return line

    def load_or_store_roles(self, domain: str, roles: Optional[Roles] = None) -> Roles:
        """Get the registry for ``domain``, storing ``roles`` if it is new."""
        if domain not in self.all_domains:
            self.all_domains[domain] = roles if roles is not None else Roles()
        return self.all_domains[domain]

    def generate_temp_roles(self, domain: str) -> Roles:
        """Build a merged registry for a single pattern-mode query.

        The queried domain comes first, followed by every stored domain that
        the domain matching function maps it to. Each role and each of its
        direct links is recreated in a fresh registry through
        :meth:`Roles.create_role`, so roles that are pattern-equivalent end up
        linked to each other. Source registries are never modified.

        The result is rebuilt on every call; its cost grows with the number of
        roles in all matching domains.
        """
        self.load_or_store_roles(domain)

        pattern_domains = [domain]
        if self.has_domain_pattern:
            for key in self.all_domains:
                if key not in pattern_domains and self._domain_matching.match(
                    domain, key
                ):
                    pattern_domains.append(key)

        all_roles = Roles()
        for domain_name in pattern_domains:
            roles = self.load_or_store_roles(domain_name)
            for source in roles.to_array():
                role1 = all_roles.create_role(source.name, self._matching)
                for target in source.get_direct_roles():
                    role2 = all_roles.create_role(target, self._matching)
                    role1.add_role(role2)

        logger.debug(
            f"Temporary roles generated for domain {domain}: "
            f"{len(all_roles)} roles from {pattern_domains}"
        )
        return all_roles

    def _get_effective_roles(self, domain: str) -> Roles:
        if self.has_domain_pattern or self.has_pattern:
            return self.generate_temp_roles(domain)
        return self.load_or_store_roles(domain)

    @staticmethod
    def _get_domain(domain: Tuple[str, ...]) -> str:
        if len(domain) > 1:
            raise InvalidArgumentError(
                "error: domain should be 1 parameter",
                details={"domain": list(domain)},
            )
        return domain[0] if domain else DEFAULT_DOMAIN

    def __repr__(self) -> str:
        return (
            f"RoleManager(max_hierarchy_level={self._max_hierarchy_level}, "
            f"domains={list(self.all_domains)!r})"
        )


__all__ = ["RoleManager"]
