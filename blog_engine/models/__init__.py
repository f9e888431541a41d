"""API request and response models."""

from blog_engine.models.common import ErrorResponse
from blog_engine.models.render import DiagramRequest, RenderRequest, RenderResponse

__all__ = ["DiagramRequest", "ErrorResponse", "RenderRequest", "RenderResponse"]
