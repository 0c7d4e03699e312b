"""Domain models for balance transactions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from account_server.modules.accounts.models import Account


class TransactionType(str, Enum):
    USE = "USE"
    CANCEL = "CANCEL"


class TransactionResultType(str, Enum):
    SUCCESS = "S"
    FAIL = "F"


@dataclass(slots=True)
class Transaction:
    """One attempted use or cancel; records are append-only."""

    account: Account
    transaction_type: TransactionType
    transaction_result_type: TransactionResultType
    amount: int
    balance_snapshot: int
    transaction_id: str
    transacted_at: datetime
    id: Optional[int] = None
    # Set on successful cancels: the use record they reverse
    cancelled_transaction_id: Optional[str] = None


@dataclass(slots=True)
class TransactionResult:
    account_number: str
    transaction_type: TransactionType
    transaction_result: TransactionResultType
    transaction_id: str
    amount: int
    balance_snapshot: int
    transacted_at: datetime

    @classmethod
    def from_transaction(cls, transaction: Transaction) -> "TransactionResult":
        return cls(
            account_number=transaction.account.account_number,
            transaction_type=transaction.transaction_type,
            transaction_result=transaction.transaction_result_type,
            transaction_id=transaction.transaction_id,
            amount=transaction.amount,
            balance_snapshot=transaction.balance_snapshot,
            transacted_at=transaction.transacted_at,
        )
