"""API routers."""

from .health import router as health_router
from .render import router as render_router

__all__ = ["health_router", "render_router"]
