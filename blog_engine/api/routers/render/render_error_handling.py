"""
Render error handling utilities.

Provides a decorator that maps rendering exceptions to HTTP errors
consistently across render endpoints.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from blog_engine.core.exceptions import DiagramRenderError, EmptyInputError, MarkdownRenderError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_render_errors(func: F) -> F:
    """
    Decorator to transform rendering errors into HTTPExceptions.

    Mapping:
    - EmptyInputError, ValueError -> 400
    - DiagramRenderError -> 422 with the tool's diagnostic text
    - MarkdownRenderError and anything unexpected -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except EmptyInputError as e:
            logger.warning("Empty render input", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except DiagramRenderError as e:
            logger.warning(
                "Diagram rendering failed",
                extra={"error": e.message, "returncode": e.returncode},
            )
            detail = f"{e.message}: {e.stderr}" if e.stderr else e.message
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=detail)

        except MarkdownRenderError as e:
            logger.error("Markdown rendering failed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=e.message,
            )

        except ValueError as e:
            logger.warning("Invalid render request", extra={"error": str(e)})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        except Exception as e:
            logger.exception("Unexpected failure in render operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred during rendering: {e}",
            )

    return wrapper  # type: ignore
