"""
Render router package.

Exports the router for markdown and diagram rendering endpoints.
"""

from .render_router import router

__all__ = ["router"]
