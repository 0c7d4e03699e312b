"""Shared building blocks for the feature modules."""

from .exceptions import AccountException, ErrorCode
from .generators import as_utc, generate_transaction_id, utcnow

__all__ = ["AccountException", "ErrorCode", "as_utc", "generate_transaction_id", "utcnow"]
