"""Balance transaction service.

Sequences store lookups, runs the validation rules, mutates the account
balance and appends the resulting transaction record. Validation failures are
raised to the caller untouched; recording them through
:meth:`TransactionService.save_failed_use_transaction` and
:meth:`TransactionService.save_failed_cancel_transaction` is the caller's job.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from account_server.modules.accounts.models import Account, AccountUser
from account_server.modules.accounts.repository import AccountRepository
from account_server.modules.common import AccountException, ErrorCode, generate_transaction_id, utcnow

from .models import Transaction, TransactionResult, TransactionResultType, TransactionType
from .repository import TransactionRepository
from .validators import validate_amount, validate_cancel_balance, validate_use_balance

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransactionService:
    account_repository: AccountRepository
    transaction_repository: TransactionRepository
    id_generator: Callable[[], str] = generate_transaction_id
    clock: Callable[[], datetime] = utcnow

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TransactionService":
        # Deferred: the SQL repositories import this package's models
        from account_server.infrastructure.database.repositories import (
            SqlAccountRepository,
            SqlTransactionRepository,
        )

        return cls(SqlAccountRepository(session), SqlTransactionRepository(session))

    async def use_balance(self, user_id: int, account_number: str, amount: int) -> TransactionResult:
        validate_amount(amount)
        account_user = await self._get_account_user(user_id)
        account = await self._get_account(account_number)

        try:
            validate_use_balance(account_user, account, amount)
        except AccountException as exc:
            logger.warning(
                "Use of %s on account %s rejected: %s", amount, account_number, exc.error_code.value
            )
            raise

        account.balance -= amount
        await self.account_repository.save(account)

        transaction = await self._save_transaction(
            account, TransactionType.USE, TransactionResultType.SUCCESS, amount
        )
        logger.info(
            "Used %s on account %s, balance now %s (transaction %s)",
            amount,
            account_number,
            account.balance,
            transaction.transaction_id,
        )
        return TransactionResult.from_transaction(transaction)

    async def save_failed_use_transaction(self, account_number: str, amount: int) -> None:
        account = await self._get_account(account_number)
        await self._save_transaction(account, TransactionType.USE, TransactionResultType.FAIL, amount)

    async def cancel_balance(self, transaction_id: str, account_number: str, amount: int) -> TransactionResult:
        validate_amount(amount)
        transaction = await self._get_transaction(transaction_id)
        account = await self._get_account(account_number)
        cancellation = await self.transaction_repository.find_cancel_of(transaction.transaction_id)

        try:
            validate_cancel_balance(
                transaction, account, amount, self.clock(), already_cancelled=cancellation is not None
            )
        except AccountException as exc:
            logger.warning(
                "Cancel of transaction %s on account %s rejected: %s",
                transaction_id,
                account_number,
                exc.error_code.value,
            )
            raise

        account.balance += amount
        await self.account_repository.save(account)

        cancelled = await self._save_transaction(
            account,
            TransactionType.CANCEL,
            TransactionResultType.SUCCESS,
            amount,
            cancelled_transaction_id=transaction.transaction_id,
        )
        logger.info(
            "Cancelled transaction %s on account %s, balance now %s (transaction %s)",
            transaction_id,
            account_number,
            account.balance,
            cancelled.transaction_id,
        )
        return TransactionResult.from_transaction(cancelled)

    async def save_failed_cancel_transaction(self, account_number: str, amount: int) -> None:
        account = await self._get_account(account_number)
        await self._save_transaction(account, TransactionType.CANCEL, TransactionResultType.FAIL, amount)

    async def query_transaction(self, transaction_id: str) -> TransactionResult:
        transaction = await self._get_transaction(transaction_id)
        return TransactionResult.from_transaction(transaction)

    async def _get_account_user(self, user_id: int) -> AccountUser:
        account_user = await self.account_repository.find_account_user_by_id(user_id)
        if account_user is None:
            raise AccountException(ErrorCode.USER_NOT_FOUND)
        return account_user

    async def _get_account(self, account_number: str) -> Account:
        account = await self.account_repository.find_by_account_number(account_number)
        if account is None:
            raise AccountException(ErrorCode.ACCOUNT_NOT_FOUND)
        return account

    async def _get_transaction(self, transaction_id: str) -> Transaction:
        transaction = await self.transaction_repository.find_by_transaction_id(transaction_id)
        if transaction is None:
            raise AccountException(ErrorCode.TRANSACTION_NOT_FOUND)
        return transaction

    async def _save_transaction(
        self,
        account: Account,
        transaction_type: TransactionType,
        result_type: TransactionResultType,
        amount: int,
        cancelled_transaction_id: str | None = None,
    ) -> Transaction:
        # Snapshot is whatever the balance is now: post-change on success, untouched on failure
        return await self.transaction_repository.save(
            Transaction(
                account=account,
                transaction_type=transaction_type,
                transaction_result_type=result_type,
                amount=amount,
                balance_snapshot=account.balance,
                transaction_id=self.id_generator(),
                transacted_at=self.clock(),
                cancelled_transaction_id=cancelled_transaction_id,
            )
        )
