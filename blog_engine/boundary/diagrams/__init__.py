"""Diagram rendering adapters."""

from blog_engine.boundary.diagrams.base import (
    STATIC_DIAGRAM_SVG,
    DiagramRenderer,
    StaticDiagramRenderer,
)
from blog_engine.boundary.diagrams.factory import get_diagram_renderer
from blog_engine.boundary.diagrams.mermaid_cli import MermaidCLIRenderer

__all__ = [
    "STATIC_DIAGRAM_SVG",
    "DiagramRenderer",
    "MermaidCLIRenderer",
    "StaticDiagramRenderer",
    "get_diagram_renderer",
]
