"""Domain services for opening and listing accounts."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from account_server.modules.common import AccountException, ErrorCode, utcnow

from .models import AccountInfo, AccountResult, AccountStatus, AccountUser
from .repository import AccountRepository

logger = logging.getLogger(__name__)

FIRST_ACCOUNT_NUMBER = "1000000000"


class AccountService:
    """Encapsulates account opening and lookup use cases."""

    def __init__(
        self,
        repository: AccountRepository,
        *,
        max_accounts_per_user: int = 10,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._repository = repository
        self._max_accounts_per_user = max_accounts_per_user
        self._clock = clock

    @classmethod
    def with_session(cls, session: AsyncSession, **kwargs) -> "AccountService":
        # Deferred: the SQL repository imports this module's models
        from account_server.infrastructure.database.repositories.account_repository import SqlAccountRepository

        return cls(SqlAccountRepository(session), **kwargs)

    async def create_account_user(self, name: str) -> AccountUser:
        return await self._repository.create_account_user(name)

    async def find_account_user(self, user_id: int) -> AccountUser | None:
        return await self._repository.find_account_user_by_id(user_id)

    async def create_account(self, user_id: int, initial_balance: int) -> AccountResult:
        if initial_balance is None or isinstance(initial_balance, bool) or initial_balance < 0:
            raise AccountException(ErrorCode.INVALID_REQUEST)

        account_user = await self._get_account_user(user_id)
        if await self._repository.count_by_account_user(account_user.id) >= self._max_accounts_per_user:
            raise AccountException(ErrorCode.MAX_ACCOUNT_PER_USER_10)

        latest = await self._repository.find_latest_account_number()
        account_number = str(int(latest) + 1) if latest else FIRST_ACCOUNT_NUMBER

        account = await self._repository.create_account(
            account_user=account_user,
            account_number=account_number,
            account_status=AccountStatus.IN_USE,
            balance=initial_balance,
            registered_at=self._clock(),
        )
        logger.info("Opened account %s for user %s", account.account_number, account_user.id)
        return AccountResult(
            user_id=account_user.id,
            account_number=account.account_number,
            registered_at=account.registered_at,
        )

    async def get_accounts_by_user_id(self, user_id: int) -> list[AccountInfo]:
        account_user = await self._get_account_user(user_id)
        accounts = await self._repository.list_by_account_user(account_user.id)
        return [
            AccountInfo(account_number=account.account_number, balance=account.balance)
            for account in accounts
        ]

    async def _get_account_user(self, user_id: int) -> AccountUser:
        account_user = await self._repository.find_account_user_by_id(user_id)
        if account_user is None:
            raise AccountException(ErrorCode.USER_NOT_FOUND)
        return account_user
