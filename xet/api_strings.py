"""Codepoint-aware string predicates."""

from .main import xet


def str_has_prefix(haystack, needle) -> bool:
    return xet.str_has_prefix(haystack, needle)


def str_has_suffix(haystack, needle) -> bool:
    return xet.str_has_suffix(haystack, needle)


def str_contains(haystack, needle) -> bool:
    return xet.str_contains(haystack, needle)


__all__ = ["str_contains", "str_has_prefix", "str_has_suffix"]
