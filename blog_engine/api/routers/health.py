"""
Health check API endpoints.

Routes: GET /health, GET /health/renderer

Dependencies: blog_engine.application.services
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from blog_engine.api.deps.dependencies import get_render_service
from blog_engine.application.services import RenderService


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/renderer", response_model=HealthResponse)
async def health_check_renderer(
    render_service: RenderService = Depends(get_render_service),
) -> HealthResponse:
    """Diagram renderer health check; degraded when the mermaid CLI is missing."""
    if render_service.renderer_available():
        return HealthResponse(status="healthy", message="Diagram renderer available")
    return HealthResponse(status="degraded", message="Diagram renderer unavailable")
