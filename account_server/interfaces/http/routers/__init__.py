from fastapi import APIRouter

from account_server.interfaces.http.routers import accounts, transactions


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(accounts.router, prefix="/account", tags=["accounts"])
    router.include_router(transactions.router, prefix="/transaction", tags=["transactions"])
    return router


__all__ = [
    "create_api_router",
]
