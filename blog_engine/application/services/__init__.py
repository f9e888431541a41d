"""Service orchestrators."""

from .render_service import RenderResult, RenderService

__all__ = ["RenderResult", "RenderService"]
