"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, blog_engine.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog_engine.api.deps.dependencies import get_service_cache
from blog_engine.configs import get_settings
from blog_engine.observability.logger import configure_logging
from blog_engine.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import health_router, render_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Pre-warms the render service on startup and clears it on shutdown.
    """
    logger = logging.getLogger("uvicorn")

    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    _ = cache.render_service
    if not cache.diagram_renderer.is_available():
        logger.warning("Diagram renderer unavailable; mermaid blocks will render as code")
    logger.info("Service cache pre-warmed")

    yield

    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Blog Engine Render API",
        description="Markdown rendering with inline Mermaid diagrams",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Correlation is added last so it wraps request logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(render_router, prefix="/api/v1")

    return app


app = create_app()


def run() -> None:
    """Launch uvicorn with SERVER_* settings."""
    settings = get_settings()
    uvicorn.run(
        "blog_engine.api.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
