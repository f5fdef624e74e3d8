"""Core package for rolegraph role hierarchies.

Provides the role graph (Role, Roles), name matching strategies and the role
managers built on top of them.
"""

from .manager import RoleManager
from .matching import (
    EXACT_MATCH,
    ExactMatch,
    MatchingFunc,
    MatchingStrategy,
    PredicateMatch,
)
from .registry import Roles
from .role import Role
from .synchronized import SynchronizedRoleManager

__all__ = [
    # Graph
    "Role",
    "Roles",
    # Managers
    "RoleManager",
    "SynchronizedRoleManager",
    # Matching
    "MatchingFunc",
    "MatchingStrategy",
    "ExactMatch",
    "PredicateMatch",
    "EXACT_MATCH",
]
