from __future__ import annotations

"""
Entry point for the Dating App HTTP API.

This module creates the FastAPI application, wires up middleware and error
handlers, and mounts the routers under ``/api``.

Intended usage:
    uvicorn dating_api.main:app --host 0.0.0.0 --port 5001
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dating_api.config import Settings, get_settings
from dating_api.container import Container
from dating_api.db.session import create_db_engine, create_session_factory, init_db
from dating_api.exceptions import DomainError
from dating_api.logging import get_logger
from dating_api.logging.config import configure_logging
from dating_api.routers import account, members
from dating_api.schemas.common import error_body, field_errors

API_ROOT = "/api"

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Error handlers
# ---------------------------------------------------------------------------


def _register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """
        Malformed or incomplete bodies are a 400 with field-level details.
        """
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(
                "validation_error",
                "One or more fields are invalid.",
                field_errors(list(exc.errors())),
            ),
        )

    @app.exception_handler(DomainError)
    async def domain_exception_handler(
        request: Request, exc: DomainError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.code, exc.message, exc.details),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body("http_error", str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """
        Catches unhandled exceptions so stack traces never leak outside DEBUG.
        """
        log.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            exc_info=exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(
                "internal_error",
                str(exc) if settings.DEBUG else "Internal Server Error",
            ),
        )


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[Container] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    container = container or Container()
    container.settings.override(settings)

    engine = create_db_engine(settings.DATABASE_URL, echo=settings.DEBUG)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        init_db(engine)
        log.info(
            "api_starting",
            app_name=settings.APP_NAME,
            app_env=settings.APP_ENV.value,
            cors_origins=settings.cors_origin_list,
        )
        yield
        engine.dispose()
        log.info("api_stopping")

    app = FastAPI(
        title="Dating App API",
        version="1.0.0",
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.container = container
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # CORS: explicit origins; a wildcard is a development convenience and
    # never combined with credentials.
    if settings.allow_any_origin:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=False,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origin_list,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    _register_exception_handlers(app, settings)

    @app.get("/health", tags=["system"])
    async def health() -> dict:
        return {"status": "ok", "version": app.version}

    app.include_router(account.router, prefix=API_ROOT)
    app.include_router(members.router, prefix=API_ROOT)

    return app


# Default application instance
app = create_app()


# ---------------------------------------------------------------------------
# Local development entry point
# ---------------------------------------------------------------------------


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "dating_api.main:app",
        host=_settings.HOST,
        port=_settings.PORT,
        reload=_settings.DEBUG,
    )
