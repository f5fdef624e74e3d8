"""Built-in name matching predicates.

Each predicate takes ``(key1, key2)`` where ``key1`` is a concrete name and
``key2`` is a pattern, and returns whether ``key1`` matches ``key2``. They can
be installed on a role manager with ``add_matching_func`` or
``add_domain_matching_func``.
"""

import fnmatch
import re

KEY_MATCH2_PATTERN = re.compile(r"(.*?):[^/]+(.*?)")


def key_match(key1: str, key2: str) -> bool:
    """Match ``key1`` against ``key2``, where ``key2`` may end with ``*``.

    Example:
        ``key_match("/foo/bar", "/foo/*")`` is True.
    """
    i = key2.find("*")
    if i == -1:
        return key1 == key2

    if len(key1) > i:
        return key1[:i] == key2[:i]
    return key1 == key2[:i]


def key_match2(key1: str, key2: str) -> bool:
    """Match ``key1`` against ``key2`` with ``*`` and ``:param`` segments.

    Example:
        ``key_match2("/resource1/alice", "/resource1/:user")`` is True.
    """
    key2 = key2.replace("/*", "/.*")
    key2 = KEY_MATCH2_PATTERN.sub(r"\g<1>[^/]+\g<2>", key2, 0)

    if key2 == "*":
        key2 = "(.*)"

    return regex_match(key1, "^" + key2 + "$")


def regex_match(key1: str, key2: str) -> bool:
    """Match ``key1`` against the regular expression ``key2``."""
    return re.match(key2, key1) is not None


def glob_match(key1: str, key2: str) -> bool:
    """Match ``key1`` against the shell-style glob ``key2``."""
    return fnmatch.fnmatchcase(key1, key2)


__all__ = [
    "key_match",
    "key_match2",
    "regex_match",
    "glob_match",
]
