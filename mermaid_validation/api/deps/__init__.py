"""FastAPI dependencies."""

from mermaid_validation.api.deps.dependencies import get_validation_service

__all__ = ["get_validation_service"]
