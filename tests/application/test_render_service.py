"""
Test suite for RenderService.

Tests markdown and diagram rendering orchestration with the static
diagram renderer and failing doubles.

System role: Verification of render service orchestration layer
"""

import asyncio
from unittest.mock import MagicMock

import pytest

from blog_engine.application.services import RenderService
from blog_engine.boundary.diagrams import STATIC_DIAGRAM_SVG
from blog_engine.core.exceptions import DiagramRenderError, EmptyInputError
from blog_engine.core.markdown import MarkdownRenderer


class TestRenderMarkdown:
    """Test suite for RenderService.render_markdown()."""

    @pytest.mark.asyncio
    async def test_render_markdown_should_return_html_and_counts(self, render_service: RenderService) -> None:
        # Act
        result = await render_service.render_markdown("# Title\n\n```mermaid\ngraph TD\n```\n")

        # Assert
        assert "<h1" in result.html
        assert STATIC_DIAGRAM_SVG in result.html
        assert result.diagram_count == 1
        assert result.diagrams_rendered == 1
        assert result.processing_time_ms >= 0

    @pytest.mark.asyncio
    async def test_render_markdown_should_count_failed_diagrams(self, failing_renderer) -> None:
        # Arrange
        service = RenderService(MarkdownRenderer(failing_renderer), failing_renderer)

        # Act
        result = await service.render_markdown("```mermaid\ngraph TD\n```\n")

        # Assert
        assert result.diagram_count == 1
        assert result.diagrams_rendered == 0
        assert "<pre><code" in result.html

    @pytest.mark.asyncio
    async def test_render_markdown_should_handle_empty_content(self, render_service: RenderService) -> None:
        result = await render_service.render_markdown("")

        assert result.html == ""
        assert result.diagram_count == 0

    @pytest.mark.asyncio
    async def test_concurrent_renders_should_not_interfere(self, echo_renderer) -> None:
        # Arrange
        service = RenderService(MarkdownRenderer(echo_renderer), echo_renderer)
        documents = [f"```mermaid\ngraph TD{i}\n```\n" for i in range(10)]

        # Act
        results = await asyncio.gather(*(service.render_markdown(doc) for doc in documents))

        # Assert
        for i, result in enumerate(results):
            assert f"<svg><text>graph TD{i}</text></svg>" in result.html


class TestRenderDiagram:
    """Test suite for RenderService.render_diagram()."""

    @pytest.mark.asyncio
    async def test_render_diagram_should_return_svg(self, render_service: RenderService) -> None:
        svg = await render_service.render_diagram("graph TD")

        assert svg == STATIC_DIAGRAM_SVG

    @pytest.mark.asyncio
    async def test_render_diagram_should_propagate_empty_input(self, render_service: RenderService) -> None:
        with pytest.raises(EmptyInputError):
            await render_service.render_diagram("")

    @pytest.mark.asyncio
    async def test_render_diagram_should_propagate_renderer_failure(self, failing_renderer) -> None:
        service = RenderService(MarkdownRenderer(failing_renderer), failing_renderer)

        with pytest.raises(DiagramRenderError) as exc_info:
            await service.render_diagram("graph ???")

        assert "Parse error" in exc_info.value.stderr

    def test_renderer_available_should_delegate(self) -> None:
        diagram_renderer = MagicMock()
        diagram_renderer.is_available.return_value = False
        service = RenderService(MagicMock(), diagram_renderer)

        assert service.renderer_available() is False
