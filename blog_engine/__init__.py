"""
Blog engine rendering backend.

Markdown-to-HTML rendering with embedded Mermaid diagram support,
served through a FastAPI application.
"""

__version__ = "0.1.0"
