from contextlib import asynccontextmanager

from fastapi import FastAPI

from account_server import __version__
from account_server.core.config import get_settings
from account_server.core.logging import setup_logging
from account_server.infrastructure.database.session import dispose_engine, init_db
from account_server.interfaces.http import create_api_router, register_exception_handlers

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings)
    await init_db()
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.project_name,
        description="Account balance use and cancel service",
        version=__version__,
        lifespan=lifespan,
    )

    register_exception_handlers(app)
    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", summary="Liveness probe")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "account_server.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )
