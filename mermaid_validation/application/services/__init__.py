"""Application service layer."""

from mermaid_validation.application.services.validation_service import ValidationService

__all__ = ["ValidationService"]
