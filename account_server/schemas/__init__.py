"""Pydantic schemas used by the HTTP layer."""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from account_server.modules.transactions.models import TransactionResultType, TransactionType


class CreateAccountRequest(BaseModel):
    user_id: int = Field(..., ge=1)
    initial_balance: int = Field(..., ge=0)


class CreateAccountResponse(BaseModel):
    user_id: int
    account_number: str
    registered_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AccountInfoResponse(BaseModel):
    account_number: str
    balance: int

    model_config = ConfigDict(from_attributes=True)


class UseBalanceRequest(BaseModel):
    user_id: int = Field(..., ge=1)
    account_number: str = Field(..., min_length=10, max_length=10)
    amount: int = Field(..., gt=0)


class CancelBalanceRequest(BaseModel):
    transaction_id: str = Field(..., min_length=1)
    account_number: str = Field(..., min_length=10, max_length=10)
    amount: int = Field(..., gt=0)


class TransactionResponse(BaseModel):
    account_number: str
    transaction_type: TransactionType
    transaction_result: TransactionResultType
    transaction_id: str
    amount: int
    balance_snapshot: int
    transacted_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    error_code: str
    error_message: str
