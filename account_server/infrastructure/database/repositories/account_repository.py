"""SQLAlchemy implementation of the account repository."""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from account_server.db.models import Account as AccountModel, AccountUser as AccountUserModel
from account_server.modules.accounts.models import Account, AccountStatus, AccountUser
from account_server.modules.accounts.repository import AccountRepository
from account_server.modules.common import AccountException, ErrorCode


class SqlAccountRepository(AccountRepository):
    """Account repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_account_user_by_id(self, user_id: int) -> AccountUser | None:
        model = await self._session.get(AccountUserModel, user_id)
        return self.to_user_domain(model) if model is not None else None

    async def find_by_account_number(self, account_number: str) -> Account | None:
        stmt = (
            select(AccountModel)
            .options(selectinload(AccountModel.account_user))
            .where(AccountModel.account_number == account_number)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self.to_domain(model) if model is not None else None

    async def save(self, account: Account) -> Account:
        model = await self._session.get(AccountModel, account.id)
        if model is None:
            raise AccountException(ErrorCode.ACCOUNT_NOT_FOUND)

        model.balance = account.balance
        model.account_status = account.account_status.value
        model.unregistered_at = account.unregistered_at
        await self._session.flush()
        return account

    async def create_account_user(self, name: str) -> AccountUser:
        model = AccountUserModel(name=name)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self.to_user_domain(model)

    async def create_account(
        self,
        *,
        account_user: AccountUser,
        account_number: str,
        account_status: AccountStatus,
        balance: int,
        registered_at: datetime,
    ) -> Account:
        model = AccountModel(
            account_user_id=account_user.id,
            account_number=account_number,
            account_status=account_status.value,
            balance=balance,
            registered_at=registered_at,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model, attribute_names=["id", "created_at"])
        return Account(
            id=model.id,
            account_user=account_user,
            account_number=model.account_number,
            account_status=account_status,
            balance=model.balance,
            registered_at=model.registered_at,
            created_at=model.created_at,
        )

    async def count_by_account_user(self, user_id: int) -> int:
        stmt = select(func.count()).select_from(AccountModel).where(AccountModel.account_user_id == user_id)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def find_latest_account_number(self) -> str | None:
        stmt = select(AccountModel.account_number).order_by(AccountModel.id.desc()).limit(1)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_account_user(self, user_id: int) -> Sequence[Account]:
        stmt = (
            select(AccountModel)
            .options(selectinload(AccountModel.account_user))
            .where(AccountModel.account_user_id == user_id)
            .order_by(AccountModel.id)
        )
        result = await self._session.execute(stmt)
        return [self.to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def to_user_domain(model: AccountUserModel) -> AccountUser:
        return AccountUser(
            id=model.id,
            name=model.name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @classmethod
    def to_domain(cls, model: AccountModel) -> Account:
        return Account(
            id=model.id,
            account_user=cls.to_user_domain(model.account_user),
            account_number=model.account_number,
            account_status=AccountStatus(model.account_status),
            balance=int(model.balance),
            registered_at=model.registered_at,
            unregistered_at=model.unregistered_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
