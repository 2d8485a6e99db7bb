"""Account resolution for SMS transactions."""

from .resolver import AccountResolver, AccountInfo, AccountType

__all__ = [
    "AccountResolver",
    "AccountInfo",
    "AccountType",
]
