"""
Validation error handling utilities.

Provides a decorator that turns service-layer exceptions into the JSON
verdict bodies returned by POST /validate.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mermaid_validation.core.exceptions import (
    DiagramRenderError,
    InvalidCodeError,
    MissingCodeError,
)
from mermaid_validation.models import ValidationResult

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

INTERNAL_ERROR_MESSAGE = "Internal server error"
INVALID_BODY_MESSAGE = "Invalid request body"


def _verdict(status_code: int, result: ValidationResult) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=result.to_body())


def handle_validation_errors(func: F) -> F:
    """
    Decorator to map validation errors onto verdict responses.

    - MissingCodeError: 400 with the fixed missing-field message
    - InvalidCodeError: 400 invalid request body
    - DiagramRenderError: 400 with headline and full diagnostic
    - anything else: 500 with the exception text
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except MissingCodeError as e:
            logger.info("Validation request without code")
            return _verdict(
                status.HTTP_400_BAD_REQUEST,
                ValidationResult(valid=False, error=e.message),
            )

        except InvalidCodeError as e:
            logger.info("Validation request with non-string code", extra=e.details)
            return _verdict(
                status.HTTP_400_BAD_REQUEST,
                ValidationResult(valid=False, error=INVALID_BODY_MESSAGE, details=e.message),
            )

        except DiagramRenderError as e:
            return _verdict(
                status.HTTP_400_BAD_REQUEST,
                ValidationResult(valid=False, error=e.headline, details=e.diagnostic),
            )

        except Exception as e:
            logger.exception(
                "Unexpected failure during validation",
                extra={"error": str(e)},
            )
            return _verdict(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                ValidationResult(valid=False, error=INTERNAL_ERROR_MESSAGE, details=str(e)),
            )

    return wrapper  # type: ignore


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed request bodies with a verdict instead of FastAPI's 422."""
    logger.info("Malformed request body", extra={"path": request.url.path})
    return _verdict(
        status.HTTP_400_BAD_REQUEST,
        ValidationResult(valid=False, error=INVALID_BODY_MESSAGE, details=str(exc.errors())),
    )
