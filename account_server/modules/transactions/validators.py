"""Validation rules for balance use and cancel requests.

Every check is a pure function: it reads its arguments, raises
:class:`AccountException` with the matching :class:`ErrorCode` on the first
violated rule, and returns ``None`` otherwise. Nothing here touches a store.
"""

from __future__ import annotations

from datetime import datetime

from account_server.modules.accounts.models import Account, AccountUser
from account_server.modules.common import AccountException, ErrorCode, as_utc

from .models import Transaction, TransactionResultType, TransactionType


def validate_amount(amount: object) -> None:
    """Amounts must be positive integers; bool is rejected even though it subclasses int."""
    if amount is None or isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        raise AccountException(ErrorCode.INVALID_REQUEST)


def validate_use_balance(account_user: AccountUser, account: Account, amount: int) -> None:
    if account.account_user.id != account_user.id:
        raise AccountException(ErrorCode.USER_ACCOUNT_UN_MATCH)
    if not account.is_in_use():
        raise AccountException(ErrorCode.ACCOUNT_ALREADY_UNREGISTERED)
    if amount > account.balance:
        raise AccountException(ErrorCode.AMOUNT_EXCEED_BALANCE)


def validate_cancel_balance(
    transaction: Transaction,
    account: Account,
    amount: int,
    now: datetime,
    *,
    already_cancelled: bool = False,
) -> None:
    """Only a successful, not yet cancelled use on this account may be reversed, in full."""
    if transaction.account.id != account.id:
        raise AccountException(ErrorCode.TRANSACTION_ACCOUNT_UN_MATCH)
    if (
        transaction.transaction_type is not TransactionType.USE
        or transaction.transaction_result_type is not TransactionResultType.SUCCESS
    ):
        raise AccountException(ErrorCode.TRANSACTION_NOT_CANCELABLE)
    if already_cancelled:
        raise AccountException(ErrorCode.TRANSACTION_ALREADY_CANCELED)
    if transaction.amount != amount:
        raise AccountException(ErrorCode.CANCEL_MUST_FULLY)
    if as_utc(transaction.transacted_at) < one_year_before(as_utc(now)):
        raise AccountException(ErrorCode.TOO_OLD_ORDER_TO_CANCEL)


def one_year_before(moment: datetime) -> datetime:
    """Same wall-clock instant one calendar year earlier; Feb 29 maps to Feb 28."""
    try:
        return moment.replace(year=moment.year - 1)
    except ValueError:
        return moment.replace(year=moment.year - 1, day=28)


__all__ = [
    "one_year_before",
    "validate_amount",
    "validate_cancel_balance",
    "validate_use_balance",
]
