"""
Campus Placement Portal API - FastAPI Application Entry Point.

Serves the portal's mock data store (jobs, applications, companies,
users, mentorships, alumni referrals, analytics) to the web client.
"""
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from placement_portal.core.config import settings
from placement_portal.core.exceptions import APIException, ValidationException
from placement_portal.core.logging import RequestIDMiddleware, get_logger, setup_logging
from placement_portal.core.store import PortalStore
from placement_portal.schemas.base import ErrorResponse
from placement_portal.api.routes import api_router

logger = get_logger(__name__)


def create_app(store: Optional[PortalStore] = None) -> FastAPI:
    """
    Build the application. A store may be injected (tests); otherwise one
    is built from settings at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the store on startup, close it on shutdown."""
        setup_logging()
        logger.info(
            "starting_app",
            app_name=settings.app_name,
            env=settings.environment,
            storage=settings.storage_backend,
        )
        portal_store = store or PortalStore.from_settings(settings)
        await portal_store.initialize()
        app.state.store = portal_store
        logger.info("store_initialized")

        yield

        logger.info("shutting_down")
        await portal_store.close()

    app = FastAPI(
        title=settings.app_name,
        description="Campus placement portal: jobs, applications, mentorships and referrals",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # Request ID correlation
    app.add_middleware(RequestIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    @app.exception_handler(APIException)
    async def api_exception_handler(request: Request, exc: APIException):
        """Handle portal exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=exc.code, message=exc.message, details=exc.details
            ).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Malformed body, path or query: same shape as ValidationException."""
        error = ValidationException(
            message="Invalid request", details=jsonable_encoder(exc.errors())
        )
        return await api_exception_handler(request, error)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        """Log full detail, return a sanitized message."""
        logger.error(
            "unhandled_exception",
            exc_type=type(exc).__name__,
            exc_message=str(exc),
            path=request.url.path,
            exc_info=True,
        )

        return JSONResponse(
            status_code=500,
            content=ErrorResponse(
                error="internal_error",
                message=str(exc) if settings.debug else "An unexpected error occurred",
            ).model_dump(),
        )

    app.include_router(api_router, prefix=settings.api_prefix)

    @app.get("/")
    async def root():
        """Root endpoint - API info."""
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs" if settings.debug else None,
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "placement_portal.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
