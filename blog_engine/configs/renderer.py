"""
Diagram and markdown rendering configuration.

Controls how the Mermaid CLI is invoked and which diagram renderer
implementation the application wires in.

Dependencies: pydantic, pydantic_settings
System role: Rendering pipeline configuration
"""

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from blog_engine.configs.base import BaseSettings


class RendererSettings(BaseSettings):
    """Mermaid CLI and markdown pipeline configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MERMAID_",
        case_sensitive=False,
        extra="ignore",
    )

    cli_path: str = Field(default="mmdc", description="Mermaid CLI executable name or path")
    background_color: str = Field(
        default="transparent",
        description="Background color passed to mmdc via -b",
    )
    timeout_seconds: float | None = Field(
        default=None,
        description="Deadline for one mmdc run; None waits indefinitely",
    )
    tmp_dir: str | None = Field(
        default=None,
        description="Parent directory for per-render temp dirs (system default if unset)",
    )
    use_static_renderer: bool = Field(
        default=False,
        description="Render diagrams as fixed placeholder SVG instead of calling mmdc",
    )
    fence_language: str = Field(
        default="mermaid",
        description="Fenced code block language tag treated as a diagram",
    )

    @field_validator("timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Reject non-positive deadlines."""
        if v is not None and v <= 0:
            raise ValueError("timeout_seconds must be positive")
        return v

    @field_validator("fence_language")
    @classmethod
    def validate_fence_language(cls, v: str) -> str:
        """Fence tag must be a single non-empty word."""
        v = v.strip()
        if not v or any(ch.isspace() for ch in v):
            raise ValueError("fence_language must be a single word")
        return v
