"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from blog_engine.configs.renderer import RendererSettings
from blog_engine.configs.server import ServerSettings
from blog_engine.configs.settings import Settings, get_settings

__all__ = ["RendererSettings", "ServerSettings", "Settings", "get_settings"]
