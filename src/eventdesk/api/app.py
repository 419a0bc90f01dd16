"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from eventdesk.domain.exceptions import NotFoundError, ProviderError, ValidationError
from eventdesk.logging import logger, setup_logging


def create_app() -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging()
        from eventdesk.infra.db.engine import engine  # triggers WAL pragma + mapper registration
        from eventdesk.db import init_db
        init_db(engine)
        yield

    app = FastAPI(
        title="EventDesk API",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from eventdesk.api.routers.dashboard import router as dashboard_router
    from eventdesk.api.routers.tools import router as tools_router

    app.include_router(dashboard_router)
    app.include_router(tools_router)

    @app.exception_handler(NotFoundError)
    def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(ValidationError)
    def _invalid(request: Request, exc: ValidationError) -> JSONResponse:
        # Bad output is a server fault, not the caller's.
        status = 422 if exc.stage == "input" else 500
        if status == 500:
            logger.error("Output validation failed on %s: %s", request.url.path, exc.message)
        return JSONResponse(status_code=status, content={"detail": exc.message, "errors": exc.errors})

    @app.exception_handler(ProviderError)
    def _provider(request: Request, exc: ProviderError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
