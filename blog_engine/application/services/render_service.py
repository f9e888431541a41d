"""
Render service orchestrator.

Runs the blocking markdown pipeline and diagram renderer off the event
loop so concurrent requests are served in parallel.

Dependencies: fastapi.concurrency, blog_engine.core.markdown, blog_engine.boundary.diagrams
System role: Rendering use case orchestration
"""

import logging
import time
from dataclasses import dataclass

from fastapi.concurrency import run_in_threadpool

from blog_engine.boundary.diagrams.base import DiagramRenderer
from blog_engine.core.markdown import MarkdownRenderer

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Outcome of a markdown render."""

    html: str
    diagram_count: int
    diagrams_rendered: int
    processing_time_ms: float


class RenderService:
    """Render service orchestrator."""

    def __init__(self, markdown_renderer: MarkdownRenderer, diagram_renderer: DiagramRenderer) -> None:
        """
        Initialize render service.

        Args:
            markdown_renderer: Markdown pipeline
            diagram_renderer: Renderer for standalone diagram requests
        """
        self.markdown_renderer = markdown_renderer
        self.diagram_renderer = diagram_renderer

    async def render_markdown(self, content: str) -> RenderResult:
        """
        Render a markdown document to HTML.

        Args:
            content: Markdown source

        Returns:
            RenderResult: HTML plus diagram counts and timing

        Raises:
            MarkdownRenderError: If the markdown engine fails
        """
        start_time = time.perf_counter()
        document = await run_in_threadpool(self.markdown_renderer.render_document, content)
        elapsed_ms = round((time.perf_counter() - start_time) * 1000, 2)

        logger.info(
            "Markdown rendered",
            extra={
                "content_length": len(content),
                "diagrams_found": document.diagrams_found,
                "diagrams_rendered": document.diagrams_rendered,
                "processing_time_ms": elapsed_ms,
            },
        )
        return RenderResult(
            html=document.html,
            diagram_count=document.diagrams_found,
            diagrams_rendered=document.diagrams_rendered,
            processing_time_ms=elapsed_ms,
        )

    async def render_diagram(self, code: str) -> str:
        """
        Render a single diagram to SVG.

        Args:
            code: Mermaid diagram source

        Returns:
            str: SVG markup

        Raises:
            EmptyInputError: If code is empty
            DiagramRenderError: If the renderer fails
        """
        try:
            svg = await run_in_threadpool(self.diagram_renderer.render_to_svg, code)
        except Exception as e:
            logger.error(
                "Failed to render diagram",
                extra={"error": str(e), "code_length": len(code)},
            )
            raise

        logger.info("Diagram rendered", extra={"code_length": len(code), "svg_length": len(svg)})
        return svg

    def renderer_available(self) -> bool:
        """Report whether the diagram renderer can currently produce output."""
        return self.diagram_renderer.is_available()
