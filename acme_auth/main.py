"""FastAPI application factory. No business logic; only wiring, middleware and error responses."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from acme_auth.api import router
from acme_auth.core.config import Settings, get_settings
from acme_auth.core.database import create_db_engine, make_session_factory
from acme_auth.core.errors import AppError, ErrorKind
from acme_auth.models import Base

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%SZ",
    )


def _error_body(message: str) -> dict[str, str]:
    return {"error": message}


def register_error_handlers(app: FastAPI) -> None:
    """Every failure is logged and answered with {"error": message}."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        log_extra = {
            "path": request.url.path,
            "error_kind": exc.kind.value,
            "status_code": exc.status_code,
        }
        if exc.kind is ErrorKind.AUTH:
            logger.warning("Request rejected: %s", exc.message, extra=log_extra)
        else:
            logger.error("Request failed: %s", exc.message, extra=log_extra)
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        logger.info(
            "HTTP error %s on %s", exc.status_code, request.url.path
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_body(str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        message = str(errors[0].get("msg")) if errors else "Invalid request"
        logger.info("Invalid request on %s: %s", request.url.path, message)
        return JSONResponse(status_code=422, content=_error_body(message))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error on %s",
            request.url.path,
            extra={"error_kind": ErrorKind.UNHANDLED.value},
        )
        return JSONResponse(
            status_code=ErrorKind.UNHANDLED.status_code,
            content=_error_body(str(exc) or type(exc).__name__),
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application around one Settings instance and one database engine."""
    if settings is None:
        settings = get_settings()
    configure_logging(settings)
    engine = create_db_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.DB_CREATE_ALL:
            Base.metadata.create_all(engine)
        logger.info(
            "Acme Auth started",
            extra={"environment": settings.APP_ENV, "port": settings.PORT},
        )
        yield
        engine.dispose()

    app = FastAPI(
        title="Acme Auth",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = make_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.APP_ENV == "dev" else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router)
    return app
