"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: blog_engine.configs, blog_engine.application, blog_engine.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from blog_engine.application.services import RenderService
from blog_engine.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._diagram_renderer = None
        self._markdown_renderer = None
        self._render_service = None

    @property
    def diagram_renderer(self):
        """Get cached diagram renderer."""
        if self._diagram_renderer is None:
            from blog_engine.boundary.diagrams import get_diagram_renderer
            self._diagram_renderer = get_diagram_renderer(get_settings().renderer)
        return self._diagram_renderer

    @property
    def markdown_renderer(self):
        """Get cached markdown renderer."""
        if self._markdown_renderer is None:
            from blog_engine.core.markdown import MarkdownRenderer
            self._markdown_renderer = MarkdownRenderer(
                diagram_renderer=self.diagram_renderer,
                fence_language=get_settings().renderer.fence_language,
            )
        return self._markdown_renderer

    @property
    def render_service(self):
        """Get cached render service."""
        if self._render_service is None:
            self._render_service = RenderService(
                markdown_renderer=self.markdown_renderer,
                diagram_renderer=self.diagram_renderer,
            )
        return self._render_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._diagram_renderer = None
        self._markdown_renderer = None
        self._render_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_render_service() -> RenderService:
    """
    Get render service instance.

    Returns:
        RenderService: Shared render service built from MERMAID_* settings
    """
    return get_service_cache().render_service
