"""Transaction related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from account_server.modules.transactions.service import TransactionService

from .database import get_db_session


def get_transaction_service(db: AsyncSession = Depends(get_db_session)) -> TransactionService:
    return TransactionService.with_session(db)


__all__ = ["get_transaction_service"]
