"""Domain models for account users and accounts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class AccountStatus(str, Enum):
    IN_USE = "IN_USE"
    UNREGISTERED = "UNREGISTERED"


@dataclass(slots=True)
class AccountUser:
    id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class Account:
    id: int
    account_user: AccountUser
    account_number: str
    account_status: AccountStatus
    balance: int
    registered_at: Optional[datetime] = None
    unregistered_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_in_use(self) -> bool:
        return self.account_status == AccountStatus.IN_USE


@dataclass(slots=True)
class AccountResult:
    user_id: int
    account_number: str
    registered_at: Optional[datetime]


@dataclass(slots=True)
class AccountInfo:
    account_number: str
    balance: int
