"""
Diagram renderer factory.

Selects the renderer implementation from configuration.

Dependencies: blog_engine.configs, blog_engine.boundary.diagrams
System role: Wiring point for diagram rendering
"""

import logging

from blog_engine.boundary.diagrams.base import DiagramRenderer, StaticDiagramRenderer
from blog_engine.boundary.diagrams.mermaid_cli import MermaidCLIRenderer
from blog_engine.configs import RendererSettings, get_settings

logger = logging.getLogger(__name__)


def get_diagram_renderer(settings: RendererSettings | None = None) -> DiagramRenderer:
    """
    Get diagram renderer based on configuration.

    Uses MERMAID_USE_STATIC_RENDERER to pick the static renderer;
    otherwise the Mermaid CLI renderer is built from MERMAID_* settings.

    Args:
        settings: Renderer settings (defaults to application settings)

    Returns:
        DiagramRenderer: Configured renderer instance
    """
    settings = settings or get_settings().renderer

    if settings.use_static_renderer:
        logger.info("Using static diagram renderer")
        return StaticDiagramRenderer()

    logger.info(
        "Using mermaid CLI renderer",
        extra={"cli_path": settings.cli_path, "timeout_seconds": settings.timeout_seconds},
    )
    return MermaidCLIRenderer(
        cli_path=settings.cli_path,
        background_color=settings.background_color,
        timeout_seconds=settings.timeout_seconds,
        tmp_dir=settings.tmp_dir,
    )
