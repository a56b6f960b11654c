"""Pydantic request/response models."""

from mermaid_validation.models.validation import (
    HealthResponse,
    ValidationRequest,
    ValidationResult,
)

__all__ = ["HealthResponse", "ValidationRequest", "ValidationResult"]
