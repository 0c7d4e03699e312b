"""SQLAlchemy implementation of the transaction repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from account_server.db.models import Account as AccountModel, Transaction as TransactionModel
from account_server.modules.accounts.models import Account
from account_server.modules.common import as_utc
from account_server.modules.transactions.models import (
    Transaction,
    TransactionResultType,
    TransactionType,
)
from account_server.modules.transactions.repository import TransactionRepository

from .account_repository import SqlAccountRepository


class SqlTransactionRepository(TransactionRepository):
    """Append-only transaction store; rows are inserted, never updated."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_transaction_id(self, transaction_id: str) -> Transaction | None:
        return await self._find_one(TransactionModel.transaction_id == transaction_id)

    async def find_cancel_of(self, transaction_id: str) -> Transaction | None:
        return await self._find_one(
            TransactionModel.cancelled_transaction_id == transaction_id,
            TransactionModel.transaction_type == TransactionType.CANCEL.value,
            TransactionModel.transaction_result_type == TransactionResultType.SUCCESS.value,
        )

    async def save(self, transaction: Transaction) -> Transaction:
        model = TransactionModel(
            account_id=transaction.account.id,
            transaction_type=transaction.transaction_type.value,
            transaction_result_type=transaction.transaction_result_type.value,
            amount=transaction.amount,
            balance_snapshot=transaction.balance_snapshot,
            transaction_id=transaction.transaction_id,
            transacted_at=transaction.transacted_at,
            cancelled_transaction_id=transaction.cancelled_transaction_id,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_domain(model, transaction.account)

    async def _find_one(self, *criteria) -> Transaction | None:
        stmt = (
            select(TransactionModel)
            .options(selectinload(TransactionModel.account).selectinload(AccountModel.account_user))
            .where(*criteria)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return self._to_domain(model, SqlAccountRepository.to_domain(model.account))

    @staticmethod
    def _to_domain(model: TransactionModel, account: Account) -> Transaction:
        return Transaction(
            id=model.id,
            account=account,
            transaction_type=TransactionType(model.transaction_type),
            transaction_result_type=TransactionResultType(model.transaction_result_type),
            amount=int(model.amount),
            balance_snapshot=int(model.balance_snapshot),
            transaction_id=model.transaction_id,
            transacted_at=as_utc(model.transacted_at),
            cancelled_transaction_id=model.cancelled_transaction_id,
        )
