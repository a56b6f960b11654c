"""
Exception hierarchy for the Mermaid validation service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


MISSING_CODE_MESSAGE = "Missing required field: code"


class MermaidValidationException(Exception):
    """Base exception for all validation service errors."""

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


class MissingCodeError(MermaidValidationException):
    """Raised when a request carries no diagram source."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["field"] = "code"
        super().__init__(MISSING_CODE_MESSAGE, details)


class InvalidCodeError(MermaidValidationException):
    """Raised when `code` is present but is not a string."""

    def __init__(self, value: Any, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["field"] = "code"
        details["type"] = type(value).__name__
        super().__init__("Field code must be a string", details)


class DiagramRenderError(MermaidValidationException):
    """Raised when the renderer rejects a diagram."""

    def __init__(
        self,
        headline: str,
        diagnostic: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize render error.

        Args:
            headline: Single line judged most relevant to the caller
            diagnostic: Full diagnostic text the headline was taken from
            details: Additional context
        """
        self.headline = headline
        self.diagnostic = diagnostic
        super().__init__(headline, details)


class RendererError(MermaidValidationException):
    """Base exception for renderer process failures."""

    def __init__(
        self,
        message: str,
        stderr: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize renderer error.

        Args:
            message: Description of how the process failed
            stderr: Captured standard error, empty if none was captured
            details: Additional context
        """
        self.stderr = stderr
        super().__init__(message, details)


class RendererExitError(RendererError):
    """Raised when the renderer exits with a non-zero status."""

    def __init__(
        self,
        returncode: int,
        command: str,
        stderr: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.returncode = returncode
        details = details or {}
        details["returncode"] = returncode
        super().__init__(
            f"Command failed with exit code {returncode}: {command}",
            stderr,
            details,
        )


class RendererTimeoutError(RendererError):
    """Raised when the renderer exceeds its wall-clock budget."""

    def __init__(
        self,
        timeout: float,
        stderr: str = "",
        details: dict[str, Any] | None = None,
    ) -> None:
        self.timeout = timeout
        details = details or {}
        details["timeout_seconds"] = timeout
        super().__init__(f"Renderer timed out after {timeout:g} seconds", stderr, details)


class RendererSpawnError(RendererError):
    """Raised when the renderer process cannot be started."""

    def __init__(self, error: OSError, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Failed to start renderer: {error}", "", details)
