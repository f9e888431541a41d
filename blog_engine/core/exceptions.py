"""
Exception hierarchy for the blog engine.

Provides layered exception structure for rendering errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class BlogEngineException(Exception):
    """Base exception for all blog engine errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class EmptyInputError(BlogEngineException):
    """Raised when a renderer receives empty input where content is required."""

    def __init__(self, message: str = "mermaid code cannot be empty", details: dict[str, Any] | None = None) -> None:
        super().__init__(message, details)


class RenderFailedError(BlogEngineException):
    """Base exception for rendering failures."""


class DiagramRenderError(RenderFailedError):
    """Raised when the external diagram tool fails or produces no output."""

    def __init__(
        self,
        message: str,
        stderr: str | None = None,
        returncode: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize diagram render error.

        Args:
            message: Error message
            stderr: Diagnostic text emitted by the tool, if any
            returncode: Process exit status, if the process ran
            details: Additional context
        """
        details = details or {}
        self.stderr = stderr or ""
        self.returncode = returncode
        if stderr:
            details["stderr"] = stderr
        if returncode is not None:
            details["returncode"] = returncode
        super().__init__(message, details)


class MarkdownRenderError(RenderFailedError):
    """Raised when the markdown engine fails to convert a document."""
