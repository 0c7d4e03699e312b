"""Account domain services and models."""

from .models import Account, AccountInfo, AccountResult, AccountStatus, AccountUser
from .repository import AccountRepository
from .service import AccountService

__all__ = [
    "Account",
    "AccountInfo",
    "AccountRepository",
    "AccountResult",
    "AccountService",
    "AccountStatus",
    "AccountUser",
]
