"""Context snapshot and lookup indexes."""

from .loader import ContextSnapshot, LookupIndexes, build_indexes

__all__ = [
    "ContextSnapshot",
    "LookupIndexes",
    "build_indexes",
]
