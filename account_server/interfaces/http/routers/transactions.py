"""Balance use, cancel and lookup endpoints.

Rejected use/cancel attempts are written to the audit log here: the service
raises, the handler rolls back whatever the attempt touched, stores a FAIL
record against the account and re-raises the original error. Only rejections
raised after the account was resolved are recorded; unknown users,
transactions and accounts, or a malformed amount, leave no record.
"""
from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from account_server.interfaces.http.deps import get_db_session, get_transaction_service
from account_server.modules.common import AccountException, ErrorCode
from account_server.modules.transactions import TransactionService
from account_server.schemas import CancelBalanceRequest, TransactionResponse, UseBalanceRequest

logger = logging.getLogger(__name__)

router = APIRouter()

RECORDED_USE_FAILURES = frozenset(
    {
        ErrorCode.USER_ACCOUNT_UN_MATCH,
        ErrorCode.ACCOUNT_ALREADY_UNREGISTERED,
        ErrorCode.AMOUNT_EXCEED_BALANCE,
    }
)
RECORDED_CANCEL_FAILURES = frozenset(
    {
        ErrorCode.TRANSACTION_ACCOUNT_UN_MATCH,
        ErrorCode.TRANSACTION_NOT_CANCELABLE,
        ErrorCode.TRANSACTION_ALREADY_CANCELED,
        ErrorCode.CANCEL_MUST_FULLY,
        ErrorCode.TOO_OLD_ORDER_TO_CANCEL,
    }
)


async def _record_failure(
    db: AsyncSession,
    save_failed: Callable[[str, int], Awaitable[None]],
    account_number: str,
    amount: int,
) -> None:
    await db.rollback()
    await save_failed(account_number, amount)
    await db.commit()


@router.post("/use", response_model=TransactionResponse, summary="Use account balance")
async def use_balance(
    payload: UseBalanceRequest,
    db: AsyncSession = Depends(get_db_session),
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    try:
        result = await service.use_balance(payload.user_id, payload.account_number, payload.amount)
    except AccountException as exc:
        logger.warning("Failed to use balance on %s: %s", payload.account_number, exc.error_code.value)
        if exc.error_code in RECORDED_USE_FAILURES:
            await _record_failure(db, service.save_failed_use_transaction, payload.account_number, payload.amount)
        raise
    return TransactionResponse.model_validate(result)


@router.post("/cancel", response_model=TransactionResponse, summary="Cancel a balance use")
async def cancel_balance(
    payload: CancelBalanceRequest,
    db: AsyncSession = Depends(get_db_session),
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    try:
        result = await service.cancel_balance(payload.transaction_id, payload.account_number, payload.amount)
    except AccountException as exc:
        logger.warning(
            "Failed to cancel transaction %s on %s: %s",
            payload.transaction_id,
            payload.account_number,
            exc.error_code.value,
        )
        if exc.error_code in RECORDED_CANCEL_FAILURES:
            await _record_failure(
                db, service.save_failed_cancel_transaction, payload.account_number, payload.amount
            )
        raise
    return TransactionResponse.model_validate(result)


@router.get("/{transaction_id}", response_model=TransactionResponse, summary="Look up a transaction")
async def query_transaction(
    transaction_id: str = Path(..., description="Transaction identifier"),
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionResponse:
    result = await service.query_transaction(transaction_id)
    return TransactionResponse.model_validate(result)
