"""
Render API endpoints.

Routes:
- POST /render - Render markdown to HTML
- POST /render/diagram - Render one Mermaid diagram to SVG

Dependencies: blog_engine.application.services, blog_engine.models
System role: Rendering HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Response

from blog_engine.api.deps.dependencies import get_render_service, get_settings_dependency
from blog_engine.application.services import RenderService
from blog_engine.configs import Settings
from blog_engine.models.common import ErrorResponse
from blog_engine.models.render import DiagramRequest, RenderRequest, RenderResponse

from .render_error_handling import handle_render_errors
from .render_validators import validate_diagram_request, validate_render_request

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/render", tags=["render"])

SVG_MEDIA_TYPE = "image/svg+xml"


@router.post(
    "",
    response_model=RenderResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
@handle_render_errors
async def render_markdown(
    request: RenderRequest,
    render_service: RenderService = Depends(get_render_service),
    settings: Settings = Depends(get_settings_dependency),
) -> RenderResponse:
    """
    Render markdown to HTML with inline diagrams.

    Args:
        request: RenderRequest with markdown content
        render_service: Injected RenderService
        settings: Injected application settings

    Returns:
        RenderResponse: HTML and diagram counts

    Raises:
        HTTPException(400): Content too large
        HTTPException(500): Markdown conversion failed
    """
    validate_render_request(request, settings.server.max_content_bytes)

    logger.info("Rendering markdown", extra={"content_length": len(request.content)})

    result = await render_service.render_markdown(request.content)
    return RenderResponse(
        html=result.html,
        diagram_count=result.diagram_count,
        diagrams_rendered=result.diagrams_rendered,
        processing_time_ms=result.processing_time_ms,
    )


@router.post(
    "/diagram",
    response_class=Response,
    responses={
        200: {"content": {SVG_MEDIA_TYPE: {}}},
        400: {"model": ErrorResponse},
        422: {"model": ErrorResponse},
    },
)
@handle_render_errors
async def render_diagram(
    request: DiagramRequest,
    render_service: RenderService = Depends(get_render_service),
) -> Response:
    """
    Render a single Mermaid diagram.

    Args:
        request: DiagramRequest with diagram code
        render_service: Injected RenderService

    Returns:
        Response: SVG document

    Raises:
        HTTPException(400): Empty diagram code
        HTTPException(422): Diagram tool failed
    """
    validate_diagram_request(request)

    svg = await render_service.render_diagram(request.code)
    return Response(content=svg, media_type=SVG_MEDIA_TYPE)
