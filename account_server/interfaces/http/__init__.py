"""HTTP adapter: routers, dependency providers and error handlers."""

from .errors import register_exception_handlers
from .routers import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]
