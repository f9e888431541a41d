"""
Markdown rendering pipeline.

Converts article markdown to HTML. Fenced diagram blocks are rendered to
SVG first, swapped for opaque placeholder tokens, and spliced back into
the converted HTML so the engine never sees (or escapes) the SVG.

Dependencies: markdown_it, mdit_py_plugins, linkify_it
System role: Core article rendering logic
"""

import logging
import re
from dataclasses import dataclass

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml
from mdit_py_plugins.anchors import anchors_plugin
from mdit_py_plugins.tasklists import tasklists_plugin

from blog_engine.boundary.diagrams.base import DiagramRenderer
from blog_engine.core.exceptions import EmptyInputError, MarkdownRenderError, RenderFailedError
from blog_engine.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

PLACEHOLDER_PREFIX = "BLOGENGINEDIAGRAM"
PLACEHOLDER_SUFFIX = "END"


def make_placeholder(index: int, fragment: str) -> str:
    """
    Build the placeholder token for one rendered diagram.

    Only ASCII letters and digits are used so the markdown engine passes
    the token through as plain text. The fixed suffix keeps one token from
    being a prefix of another.

    Args:
        index: Call-local diagram counter
        fragment: Rendered SVG fragment

    Returns:
        str: Placeholder token
    """
    return f"{PLACEHOLDER_PREFIX}{index}L{len(fragment.encode('utf-8'))}{PLACEHOLDER_SUFFIX}"


def build_engine() -> MarkdownIt:
    """Create the markdown-it engine with GFM-style extensions and raw HTML escaped."""
    md = MarkdownIt(
        "commonmark",
        {"html": False, "linkify": True, "breaks": True},
    ).enable(["table", "strikethrough", "linkify"])
    md.use(tasklists_plugin)
    md.use(anchors_plugin, min_level=1, max_level=6)
    return md


@dataclass
class RenderedDocument:
    """Result of rendering one markdown document."""

    html: str
    diagrams_found: int = 0
    diagrams_rendered: int = 0


class MarkdownRenderer:
    """Renders markdown to HTML with embedded diagram support."""

    def __init__(self, diagram_renderer: DiagramRenderer, fence_language: str = "mermaid") -> None:
        """
        Initialize renderer.

        Args:
            diagram_renderer: Renderer used for fenced diagram blocks
            fence_language: Info-string tag that marks a diagram fence
        """
        self.diagram_renderer = diagram_renderer
        self.fence_language = fence_language
        self._md = build_engine()
        self._diagram_pattern = re.compile(
            r"```" + re.escape(fence_language) + r"\s*\n(.*?)```",
            re.DOTALL,
        )

    def render(self, source: str) -> str:
        """
        Render markdown to HTML.

        Args:
            source: Markdown text

        Returns:
            str: HTML with rendered diagrams inlined

        Raises:
            MarkdownRenderError: If the markdown engine fails
        """
        return self.render_document(source).html

    def render_document(self, source: str) -> RenderedDocument:
        """Render markdown and report how many diagram blocks were found and rendered."""
        if not source:
            return RenderedDocument(html="")

        substituted, placeholders, found = self._extract(source)

        try:
            html = self._md.render(substituted)
        except Exception as e:
            logger.error(
                "Markdown conversion failed",
                extra={"error_type": type(e).__name__, "source_length": len(source)},
            )
            raise MarkdownRenderError(f"failed to convert markdown: {e}") from e

        html = self._splice(html, placeholders)
        return RenderedDocument(
            html=html,
            diagrams_found=found,
            diagrams_rendered=len(placeholders),
        )

    def extract_diagrams(self, source: str) -> tuple[str, dict[str, str]]:
        """
        Replace renderable diagram blocks with placeholders.

        Args:
            source: Markdown text

        Returns:
            tuple: Substituted source and placeholder -> SVG mapping in source order
        """
        substituted, placeholders, _ = self._extract(source)
        return substituted, placeholders

    def _extract(self, source: str) -> tuple[str, dict[str, str], int]:
        placeholders: dict[str, str] = {}
        found = 0

        def substitute(match: re.Match) -> str:
            nonlocal found
            found += 1
            try:
                fragment = self.diagram_renderer.render_to_svg(match.group(1))
            except (RenderFailedError, EmptyInputError) as e:
                log_exception_with_context(
                    logger,
                    "Diagram rendering failed, leaving block as code",
                    e,
                    level=logging.WARNING,
                    diagram_index=found - 1,
                )
                return match.group(0)

            placeholder = make_placeholder(len(placeholders), fragment)
            placeholders[placeholder] = fragment
            return placeholder

        substituted = self._diagram_pattern.sub(substitute, source)
        return substituted, placeholders, found

    @staticmethod
    def _splice(html: str, placeholders: dict[str, str]) -> str:
        if not placeholders:
            return html

        # Match the placeholder as the engine emitted it in text content
        fragments = {escapeHtml(token): fragment for token, fragment in placeholders.items()}
        pattern = re.compile("|".join(re.escape(token) for token in fragments))
        return pattern.sub(lambda m: fragments[m.group(0)], html)
