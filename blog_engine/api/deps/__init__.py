"""FastAPI dependency providers."""

from .dependencies import (
    ServiceCache,
    get_render_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = ["ServiceCache", "get_render_service", "get_service_cache", "get_settings_dependency"]
