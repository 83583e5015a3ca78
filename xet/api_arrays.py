"""Nested lookup and boolean reductions over sequences."""

from .main import xet


def array_at(root, path, default=None, delimiter: str | None = None):
    return xet.array_at(root, path, default, delimiter)


def array_any(values, predicate=None) -> bool:
    return xet.array_any(values, predicate)


def array_every(values, predicate=None) -> bool:
    return xet.array_every(values, predicate)


def is_truthy(value) -> bool:
    return xet.is_truthy(value)


__all__ = ["array_any", "array_at", "array_every", "is_truthy"]
