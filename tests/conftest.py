"""
Shared test fixtures and configuration for entire test suite.

Provides: Diagram renderer doubles, markdown renderer, render service, API client
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

import pytest
from fastapi.testclient import TestClient

from blog_engine.application.services import RenderService
from blog_engine.boundary.diagrams import DiagramRenderer, StaticDiagramRenderer
from blog_engine.configs import get_settings
from blog_engine.core.exceptions import DiagramRenderError, EmptyInputError
from blog_engine.core.markdown import MarkdownRenderer


class FailingDiagramRenderer(DiagramRenderer):
    """Diagram renderer that always fails like a broken mmdc run."""

    def __init__(self, stderr: str = "Error: Parse error on line 1") -> None:
        self.stderr = stderr
        self.calls: list[str] = []

    def render_to_svg(self, diagram_code: str) -> str:
        self.calls.append(diagram_code)
        raise DiagramRenderError("mermaid CLI failed with exit code 1", stderr=self.stderr, returncode=1)

    def is_available(self) -> bool:
        return False


class EchoDiagramRenderer(DiagramRenderer):
    """Diagram renderer whose output embeds the diagram source."""

    def render_to_svg(self, diagram_code: str) -> str:
        if not diagram_code:
            raise EmptyInputError()
        return f"<svg><text>{diagram_code.strip()}</text></svg>"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings so env changes in one test do not leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def static_renderer() -> StaticDiagramRenderer:
    """Provide static diagram renderer."""
    return StaticDiagramRenderer()


@pytest.fixture
def failing_renderer() -> FailingDiagramRenderer:
    """Provide diagram renderer that always fails."""
    return FailingDiagramRenderer()


@pytest.fixture
def echo_renderer() -> EchoDiagramRenderer:
    """Provide diagram renderer producing input-dependent SVG."""
    return EchoDiagramRenderer()


@pytest.fixture
def markdown_renderer(static_renderer: StaticDiagramRenderer) -> MarkdownRenderer:
    """Provide markdown renderer backed by the static diagram renderer."""
    return MarkdownRenderer(diagram_renderer=static_renderer)


@pytest.fixture
def render_service(markdown_renderer: MarkdownRenderer, static_renderer: StaticDiagramRenderer) -> RenderService:
    """Provide render service without external processes."""
    return RenderService(markdown_renderer=markdown_renderer, diagram_renderer=static_renderer)


@pytest.fixture
def client():
    """Provide API test client with dependency overrides cleared afterwards."""
    from blog_engine.api.main import create_app

    app = create_app()
    yield TestClient(app)
    app.dependency_overrides.clear()
