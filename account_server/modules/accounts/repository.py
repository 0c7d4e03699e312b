"""Repository protocol for account users and accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .models import Account, AccountStatus, AccountUser


class AccountRepository(Protocol):
    """Abstract repository interface for account persistence.

    Lookups return ``None`` when nothing matches; turning that into a
    failure is the service's job.
    """

    async def find_account_user_by_id(self, user_id: int) -> AccountUser | None:
        ...

    async def find_by_account_number(self, account_number: str) -> Account | None:
        ...

    async def save(self, account: Account) -> Account:
        ...

    async def create_account_user(self, name: str) -> AccountUser:
        ...

    async def create_account(
        self,
        *,
        account_user: AccountUser,
        account_number: str,
        account_status: AccountStatus,
        balance: int,
        registered_at: datetime,
    ) -> Account:
        ...

    async def count_by_account_user(self, user_id: int) -> int:
        ...

    async def find_latest_account_number(self) -> str | None:
        ...

    async def list_by_account_user(self, user_id: int) -> Sequence[Account]:
        ...
