"""Portfolio Service - FastAPI Application."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .database import MongoDatabase
from .errors import RequestTimeout, register_error_handlers
from .routers import (
    about_router,
    projects_router,
    skills_router,
    contact_router,
    pages_router,
    admin_router,
)

logger = logging.getLogger("portfolio_service")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    The store connection is opened by the first request that needs it.
    """
    settings = get_settings()
    logger.info(f"🚀 Starting {settings.service_name} v{settings.service_version}")

    yield

    await MongoDatabase.disconnect()
    logger.info("👋 Shut down")


def create_app() -> FastAPI:
    """Build the application with routers, error handlers and middleware."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app = FastAPI(
        title="Portfolio Service",
        description="Personal portfolio site with a content API backed by MongoDB",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_timeout(request: Request, call_next):
        try:
            return await asyncio.wait_for(
                call_next(request), timeout=settings.request_timeout_seconds
            )
        except asyncio.TimeoutError:
            logger.warning(f"Request timed out: {request.method} {request.url.path}")
            error = RequestTimeout("Request timed out, please retry")
            return JSONResponse(
                error.to_dict(),
                status_code=error.status_code,
                headers={"Retry-After": "1"},
            )

    register_error_handlers(app)

    # Routers
    app.include_router(about_router, prefix="/api")
    app.include_router(projects_router, prefix="/api")
    app.include_router(skills_router, prefix="/api")
    app.include_router(contact_router, prefix="/api")
    app.include_router(admin_router)
    app.include_router(pages_router)

    @app.get("/health")
    async def health() -> dict:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "portfolio_service.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
