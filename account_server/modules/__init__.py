"""Feature modules and shared exports."""

from . import accounts, common, transactions

__all__ = [
    "accounts",
    "common",
    "transactions",
]
