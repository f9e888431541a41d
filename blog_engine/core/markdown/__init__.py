"""Markdown to HTML rendering with diagram placeholder substitution."""

from blog_engine.core.markdown.pipeline import (
    MarkdownRenderer,
    RenderedDocument,
    build_engine,
    make_placeholder,
)

__all__ = ["MarkdownRenderer", "RenderedDocument", "build_engine", "make_placeholder"]
