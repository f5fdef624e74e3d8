"""
Role Hierarchy Demonstration for rolegraph

Shows plain role inheritance, tenant domains, wildcard roles and domains, and
error handling for link deletion.
"""

import logging

from rolegraph import RoleManager, glob_match, key_match
from rolegraph.logging import DefaultLogger
from rolegraph.exceptions import RoleNotFoundError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def plain_hierarchy() -> None:
    rm = RoleManager(10, logger=DefaultLogger(enabled=True))
    rm.add_link("alice", "admin")
    rm.add_link("admin", "staff")
    rm.add_link("bob", "staff")

    logger.info(f"alice inherits staff: {rm.has_link('alice', 'staff')}")
    logger.info(f"alice roles: {rm.get_roles('alice')}")
    logger.info(f"staff members: {rm.get_users('staff')}")
    rm.print_roles()

    try:
        rm.delete_link("carol", "staff")
    except RoleNotFoundError as e:
        logger.warning(f"Cannot delete link: {e} ({e.details})")


def tenant_domains() -> None:
    rm = RoleManager(10)
    rm.add_domain_matching_func(glob_match)
    rm.add_link("alice", "admin", "tenant*")
    rm.add_link("bob", "admin", "tenant1")

    for domain in ("tenant1", "tenant2", "other"):
        logger.info(f"admins in {domain}: {rm.get_users('admin', domain)}")


def wildcard_roles() -> None:
    rm = RoleManager(10)
    rm.add_matching_func(key_match)
    rm.add_link("alice", "admin_us")
    rm.add_link("bob", "admin_eu")

    for user in ("alice", "bob", "carol"):
        logger.info(f"{user} is some admin: {rm.has_link(user, 'admin_*')}")


if __name__ == "__main__":
    plain_hierarchy()
    tenant_domains()
    wildcard_roles()
