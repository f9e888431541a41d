"""
Diagram renderer interface.

Defines the contract the markdown pipeline depends on, plus a static
implementation that never spawns a process.

Dependencies: abc (stdlib)
System role: Port between the markdown pipeline and diagram tooling
"""

from abc import ABC, abstractmethod

from blog_engine.core.exceptions import EmptyInputError

STATIC_DIAGRAM_SVG = "<svg><text>Mermaid diagram</text></svg>"


class DiagramRenderer(ABC):
    """Converts diagram source text into a standalone SVG fragment."""

    @abstractmethod
    def render_to_svg(self, diagram_code: str) -> str:
        """
        Render diagram text to SVG markup.

        Args:
            diagram_code: Mermaid diagram source

        Returns:
            str: Self-contained <svg>...</svg> markup

        Raises:
            EmptyInputError: If diagram_code is empty
            DiagramRenderError: If the diagram could not be rendered
        """

    def is_available(self) -> bool:
        """Report whether the renderer can currently produce output."""
        return True


class StaticDiagramRenderer(DiagramRenderer):
    """Returns a fixed SVG for every non-empty input."""

    def __init__(self, svg: str = STATIC_DIAGRAM_SVG) -> None:
        self.svg = svg

    def render_to_svg(self, diagram_code: str) -> str:
        if not diagram_code:
            raise EmptyInputError()
        return self.svg
