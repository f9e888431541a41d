"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Uvicorn bind address configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from blog_engine.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """Uvicorn server configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SERVER_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8080, description="Bind port")
    max_content_bytes: int = Field(
        default=1024 * 1024,
        description="Largest markdown body accepted by the render endpoint",
    )
