"""Error taxonomy shared by the account and transaction modules."""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Failure kinds surfaced to callers, each with a fixed message."""

    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR", "An internal server error occurred."
    INVALID_REQUEST = "INVALID_REQUEST", "The request is invalid."
    USER_NOT_FOUND = "USER_NOT_FOUND", "User not found."
    ACCOUNT_NOT_FOUND = "ACCOUNT_NOT_FOUND", "Account not found."
    TRANSACTION_NOT_FOUND = "TRANSACTION_NOT_FOUND", "Transaction not found."
    AMOUNT_EXCEED_BALANCE = "AMOUNT_EXCEED_BALANCE", "Transaction amount exceeds the account balance."
    TRANSACTION_ACCOUNT_UN_MATCH = "TRANSACTION_ACCOUNT_UN_MATCH", "The transaction does not belong to this account."
    TRANSACTION_NOT_CANCELABLE = "TRANSACTION_NOT_CANCELABLE", "Only successful use transactions can be cancelled."
    TRANSACTION_ALREADY_CANCELED = "TRANSACTION_ALREADY_CANCELED", "The transaction has already been cancelled."
    CANCEL_MUST_FULLY = "CANCEL_MUST_FULLY", "Partial cancellation is not allowed."
    TOO_OLD_ORDER_TO_CANCEL = "TOO_OLD_ORDER_TO_CANCEL", "Transactions older than one year cannot be cancelled."
    USER_ACCOUNT_UN_MATCH = "USER_ACCOUNT_UN_MATCH", "The account does not belong to this user."
    ACCOUNT_ALREADY_UNREGISTERED = "ACCOUNT_ALREADY_UNREGISTERED", "The account is already unregistered."
    MAX_ACCOUNT_PER_USER_10 = "MAX_ACCOUNT_PER_USER_10", "A user may own at most 10 accounts."

    def __new__(cls, value: str, description: str) -> "ErrorCode":
        member = str.__new__(cls, value)
        member._value_ = value
        member.description = description
        return member


class AccountException(Exception):
    """Raised by the service layer when a request is rejected."""

    def __init__(self, error_code: ErrorCode, message: str | None = None) -> None:
        self.error_code = error_code
        self.error_message = message or error_code.description
        super().__init__(self.error_message)

    def __repr__(self) -> str:
        return f"AccountException({self.error_code.value!r})"
