"""Builders and in-memory stores shared by the test modules."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from account_server.modules.accounts.models import Account, AccountStatus, AccountUser
from account_server.modules.transactions.models import (
    Transaction,
    TransactionResultType,
    TransactionType,
)

FIXED_NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)


def make_user(user_id: int = 12, name: str = "Pobi") -> AccountUser:
    return AccountUser(id=user_id, name=name)


def make_account(
    account_user: AccountUser | None = None,
    *,
    account_id: int = 1,
    account_number: str = "1000000012",
    balance: int = 10000,
    status: AccountStatus = AccountStatus.IN_USE,
) -> Account:
    return Account(
        id=account_id,
        account_user=account_user or make_user(),
        account_number=account_number,
        account_status=status,
        balance=balance,
        registered_at=FIXED_NOW,
    )


def make_transaction(
    account: Account,
    *,
    amount: int = 200,
    balance_snapshot: int = 8000,
    transaction_id: str = "transactionId",
    transaction_type: TransactionType = TransactionType.USE,
    result_type: TransactionResultType = TransactionResultType.SUCCESS,
    transacted_at: datetime = FIXED_NOW,
) -> Transaction:
    return Transaction(
        account=account,
        transaction_type=transaction_type,
        transaction_result_type=result_type,
        amount=amount,
        balance_snapshot=balance_snapshot,
        transaction_id=transaction_id,
        transacted_at=transacted_at,
    )


class InMemoryAccountRepository:
    def __init__(self) -> None:
        self.users: dict[int, AccountUser] = {}
        self.accounts: dict[str, Account] = {}
        self.saved: list[Account] = []

    def add(self, account: Account) -> Account:
        self.users[account.account_user.id] = account.account_user
        self.accounts[account.account_number] = account
        return account

    async def find_account_user_by_id(self, user_id: int) -> AccountUser | None:
        return self.users.get(user_id)

    async def find_by_account_number(self, account_number: str) -> Account | None:
        return self.accounts.get(account_number)

    async def save(self, account: Account) -> Account:
        self.saved.append(account)
        self.accounts[account.account_number] = account
        return account

    async def create_account_user(self, name: str) -> AccountUser:
        user = AccountUser(id=len(self.users) + 1, name=name)
        self.users[user.id] = user
        return user

    async def create_account(
        self,
        *,
        account_user: AccountUser,
        account_number: str,
        account_status: AccountStatus,
        balance: int,
        registered_at: datetime,
    ) -> Account:
        account = Account(
            id=len(self.accounts) + 1,
            account_user=account_user,
            account_number=account_number,
            account_status=account_status,
            balance=balance,
            registered_at=registered_at,
        )
        self.accounts[account_number] = account
        return account

    async def count_by_account_user(self, user_id: int) -> int:
        return sum(1 for account in self.accounts.values() if account.account_user.id == user_id)

    async def find_latest_account_number(self) -> str | None:
        if not self.accounts:
            return None
        return max(self.accounts.values(), key=lambda account: account.id).account_number

    async def list_by_account_user(self, user_id: int) -> Sequence[Account]:
        return [account for account in self.accounts.values() if account.account_user.id == user_id]


class InMemoryTransactionRepository:
    def __init__(self) -> None:
        self.records: list[Transaction] = []

    def add(self, transaction: Transaction) -> Transaction:
        self.records.append(transaction)
        return transaction

    async def find_by_transaction_id(self, transaction_id: str) -> Transaction | None:
        for record in self.records:
            if record.transaction_id == transaction_id:
                return record
        return None

    async def save(self, transaction: Transaction) -> Transaction:
        transaction.id = len(self.records) + 1
        self.records.append(transaction)
        return transaction

    async def find_cancel_of(self, transaction_id: str) -> Transaction | None:
        for record in self.records:
            if (
                record.cancelled_transaction_id == transaction_id
                and record.transaction_type is TransactionType.CANCEL
                and record.transaction_result_type is TransactionResultType.SUCCESS
            ):
                return record
        return None
