"""Utility predicates for rolegraph."""

from .builtin_operators import glob_match, key_match, key_match2, regex_match

__all__ = [
    "glob_match",
    "key_match",
    "key_match2",
    "regex_match",
]
