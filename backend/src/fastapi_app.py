"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Endpoints:
- /dm       DM channels (create, block, unblock) and the DM inbox
- /friends  friend requests and friend lists
- /health, /metrics
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from src.config.logging_config import NO_CORRELATION_ID, correlation_id_var, setup_logging
from src.config.settings import Config
from src.observability.metrics import increment_error, observe_request_latency
from src.presentation.api import dm_router, friends_router, metrics_router
from src.presentation.errors import INTERNAL_ERROR_MESSAGE, ErrorCode, error_body
from src.setup.ioc.container import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH or None)

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers["X-Correlation-ID"] = correlation_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records request latency per route template."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        observe_request_latency(
            request.method,
            getattr(route, "path", request.url.path),
            response.status_code,
            time.perf_counter() - start,
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: container and Dishka are already set up by the factory
    - Shutdown: close the DI container (releases app-scoped clients)
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; defaults to the Firestore-backed one

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Team Chat API",
        description="Friends and direct-message backend",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.add_middleware(MetricsMiddleware)
    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.info("Request validation failed: %s", errors)
        return JSONResponse(
            status_code=400,
            content={
                "error": error_body(
                    ErrorCode.INVALID_ARGUMENT, "Validation error", {"errors": errors}
                )
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        detail = exc.detail
        if not isinstance(detail, dict):
            # Framework errors such as 404 for unknown routes
            code = ErrorCode.NOT_FOUND if exc.status_code == 404 else ErrorCode.INVALID_ARGUMENT
            detail = error_body(code, str(detail))
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        increment_error(type(exc).__name__)
        return JSONResponse(
            status_code=500,
            content={"error": error_body(ErrorCode.INTERNAL, INTERNAL_ERROR_MESSAGE)},
        )

    # Health check routes
    @app.get("/", tags=["health"])
    async def root():
        return {"message": "FastAPI server is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(dm_router)
    app.include_router(friends_router)
    app.include_router(metrics_router)

    return app


# Create the app instance
app = create_fastapi_app()
