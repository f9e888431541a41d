"""
Render request/response models.

Dependencies: pydantic
System role: Render API schemas
"""

from pydantic import BaseModel, Field


class RenderRequest(BaseModel):
    """Markdown render request."""

    content: str = Field(description="Markdown source; may be empty")


class DiagramRequest(BaseModel):
    """Single diagram render request."""

    code: str = Field(description="Mermaid diagram source")


class RenderResponse(BaseModel):
    """Markdown render response."""

    html: str
    diagram_count: int = Field(description="Fenced diagram blocks found in the source")
    diagrams_rendered: int = Field(description="Diagram blocks successfully inlined as SVG")
    processing_time_ms: float
