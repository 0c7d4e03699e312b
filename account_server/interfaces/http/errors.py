"""Translate domain and infrastructure failures into JSON error responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from account_server.modules.common import AccountException, ErrorCode
from account_server.schemas import ErrorResponse

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error_code: ErrorCode, message: str | None = None) -> JSONResponse:
    body = ErrorResponse(error_code=error_code.value, error_message=message or error_code.description)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def handle_account_exception(request: Request, exc: AccountException) -> JSONResponse:
    logger.info("%s %s -> %s", request.method, request.url.path, exc.error_code.value)
    return _error_response(status.HTTP_400_BAD_REQUEST, exc.error_code, exc.error_message)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Invalid request to %s: %s", request.url.path, exc.errors())
    return _error_response(status.HTTP_400_BAD_REQUEST, ErrorCode.INVALID_REQUEST)


async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, ErrorCode.INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AccountException, handle_account_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)


__all__ = ["register_exception_handlers"]
