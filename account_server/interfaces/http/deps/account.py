"""Account related dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from account_server.core.config import Settings, get_settings
from account_server.infrastructure.database.repositories.account_repository import SqlAccountRepository
from account_server.modules.accounts.service import AccountService

from .database import get_db_session


def get_account_repository(db: AsyncSession = Depends(get_db_session)) -> SqlAccountRepository:
    return SqlAccountRepository(db)


def get_account_service(
    repository: SqlAccountRepository = Depends(get_account_repository),
    settings: Settings = Depends(get_settings),
) -> AccountService:
    return AccountService(repository, max_accounts_per_user=settings.max_accounts_per_user)


__all__ = [
    "get_account_repository",
    "get_account_service",
]
