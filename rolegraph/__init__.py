"""
rolegraph - Role hierarchy resolution for RBAC policy engines.

rolegraph answers role inheritance questions for a higher-level policy
evaluator: does A inherit role B, which roles does A inherit, and who holds
role B directly. Roles can be scoped to tenant domains, and role or domain
names can be matched through caller-supplied pattern predicates.

Key Features:
- Per-domain role graphs with cycle-safe, depth-bounded traversal
- Deterministic, breadth-first result ordering
- Pattern matching for role and domain names
- Lock-guarded wrapper for shared use across threads

Main Exports (Import from top level):
    Core:
        - RoleManager: Default role manager
        - SynchronizedRoleManager: Thread-safe wrapper
        - Role / Roles: Graph node and per-domain registry
        - RoleManagerProtocol: Interface consumed by policy evaluators

    Matching:
        - key_match, key_match2, regex_match, glob_match: built-in predicates

    Configuration:
        - RoleManagerConfig / get_role_manager_config

Example:
    >>> from rolegraph import RoleManager
    >>>
    >>> rm = RoleManager(10)
    >>> rm.add_link("alice", "admin")
    >>> rm.has_link("alice", "admin")
    True
"""

__version__ = "0.1.0"

# Modules
from . import exceptions

# Configuration
from .config import RoleManagerConfig, get_role_manager_config
from .constants import DEFAULT_DOMAIN

# Core
from .core import (
    ExactMatch,
    MatchingStrategy,
    PredicateMatch,
    Role,
    RoleManager,
    Roles,
    SynchronizedRoleManager,
)
from .protocols import RoleManagerProtocol

# Utilities
from .utils import glob_match, key_match, key_match2, regex_match

__all__ = [
    # Version
    "__version__",
    # Core
    "RoleManager",
    "SynchronizedRoleManager",
    "Role",
    "Roles",
    "RoleManagerProtocol",
    "DEFAULT_DOMAIN",
    # Matching
    "MatchingStrategy",
    "ExactMatch",
    "PredicateMatch",
    "key_match",
    "key_match2",
    "regex_match",
    "glob_match",
    # Configuration
    "RoleManagerConfig",
    "get_role_manager_config",
    # Modules
    "exceptions",
]
