"""
Render request validation utilities.

Checks not covered by the Pydantic models.

Dependencies: blog_engine.models.render
System role: Render request validation
"""

from blog_engine.models.render import DiagramRequest, RenderRequest


class RenderValidationError(ValueError):
    """Raised when a render request is rejected before rendering."""


def validate_render_request(request: RenderRequest, max_bytes: int) -> None:
    """
    Validate markdown render request.

    Args:
        request: RenderRequest with markdown content
        max_bytes: Largest accepted body in UTF-8 bytes

    Raises:
        RenderValidationError: If content exceeds the size limit
    """
    size = len(request.content.encode("utf-8"))
    if size > max_bytes:
        raise RenderValidationError(f"Content too large: {size} bytes exceeds limit of {max_bytes}")


def validate_diagram_request(request: DiagramRequest) -> None:
    """
    Validate diagram render request.

    Raises:
        RenderValidationError: If the diagram code is empty or whitespace-only
    """
    if not request.code or not request.code.strip():
        raise RenderValidationError("Diagram code cannot be empty or whitespace-only")
