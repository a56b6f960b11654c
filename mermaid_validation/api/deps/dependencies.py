"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: fastapi, mermaid_validation.application
System role: DI container for service injection
"""

from fastapi import Request

from mermaid_validation.application.services import ValidationService


def get_validation_service(request: Request) -> ValidationService:
    """
    Get the validation service built for this application.

    The service is created once in create_app and stored on app.state.

    Args:
        request: Incoming request

    Returns:
        ValidationService: Shared service instance
    """
    return request.app.state.validation_service
