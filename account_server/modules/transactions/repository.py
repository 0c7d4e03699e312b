"""Repository protocol for balance transactions."""

from __future__ import annotations

from typing import Protocol

from .models import Transaction


class TransactionRepository(Protocol):
    async def find_by_transaction_id(self, transaction_id: str) -> Transaction | None:
        ...

    async def find_cancel_of(self, transaction_id: str) -> Transaction | None:
        """Return the successful cancel that reversed ``transaction_id``, if any."""
        ...

    async def save(self, transaction: Transaction) -> Transaction:
        """Persist a new record and return it with store-assigned fields filled in."""
        ...
