# users_api/main.py
"""
Entry point for the Users HTTP API.

Intended usage:
    uvicorn users_api.main:app --host 0.0.0.0 --port 5000
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.adapters.api.routers import health, users
from users_api.core.domain.exceptions import (
    InvalidUserRequestError,
    PatchOperationError,
    UserNotFoundError,
    UserValidationError,
)
from users_api.shared.config import settings
from users_api.shared.container import container
from users_api.shared.logging_config import configure_logging
from users_api.shared.telemetry import instrument_fastapi, setup_telemetry

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application Lifecycle Manager.
    Handles startup (telemetry) and shutdown.
    """
    setup_telemetry(settings.OTEL_SERVICE_NAME)
    logger.info("app_startup", env=settings.APP_ENV.value, api_prefix=settings.API_PREFIX)

    yield

    logger.info("app_shutdown")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Maps domain errors onto HTTP responses.

    Not-found and structural errors carry no body; validation errors carry
    a ``{field: [messages]}`` mapping.
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # Unparseable JSON or wrongly typed values: a malformed request, not a field rule.
        logger.info("request_malformed", path=request.url.path, errors=len(exc.errors()))
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(InvalidUserRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidUserRequestError):
        logger.info("request_invalid", path=request.url.path, reason=exc.message)
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(UserNotFoundError)
    async def not_found_handler(request: Request, exc: UserNotFoundError):
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(UserValidationError)
    async def validation_handler(request: Request, exc: UserValidationError):
        return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=exc.to_dict())

    @app.exception_handler(PatchOperationError)
    async def patch_operation_handler(request: Request, exc: PatchOperationError):
        return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=exc.to_dict())

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """
        Standardizes framework HTTP errors (unknown routes, wrong methods).
        """
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "status": "error",
                "code": exc.status_code,
                "message": exc.detail,
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions (store faults included) without leaking stack traces in Prod.
        """
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": 500,
                "message": "Internal Server Error" if not settings.DEBUG else str(exc),
            },
        )


def create_app() -> FastAPI:
    """
    Factory function to create the FastAPI application.
    """
    configure_logging()

    # Routers resolve use cases through these providers.
    container.wire(modules=["users_api.adapters.api.dependencies"])

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Resource-oriented HTTP API for User records",
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", "X-Pagination", "Allow"],
    )

    instrument_fastapi(app)
    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(users.router, prefix=settings.API_PREFIX)

    return app


# Entry point for Uvicorn
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("users_api.main:app", host=settings.HOST, port=settings.PORT)
