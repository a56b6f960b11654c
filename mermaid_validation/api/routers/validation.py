"""
Diagram validation API endpoints.

Routes: POST /validate

Dependencies: mermaid_validation.application.services
System role: Validation HTTP API
"""

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from mermaid_validation.api.deps import get_validation_service
from mermaid_validation.api.routers.error_handling import handle_validation_errors
from mermaid_validation.application.services import ValidationService
from mermaid_validation.models import ValidationRequest, ValidationResult

router = APIRouter(prefix="/validate", tags=["validation"])


@router.post(
    "",
    response_model=ValidationResult,
    responses={
        400: {"model": ValidationResult, "description": "Missing code or invalid diagram"},
        500: {"model": ValidationResult, "description": "Internal server error"},
    },
)
@handle_validation_errors
async def validate_diagram(
    payload: ValidationRequest | None = Body(default=None),
    service: ValidationService = Depends(get_validation_service),
) -> JSONResponse:
    """
    Render a Mermaid diagram and report whether it is valid.

    Args:
        payload: Body holding the diagram source
        service: Injected ValidationService

    Returns:
        JSONResponse: {valid: true, error: null} on success
    """
    await service.validate(payload.code if payload else None)
    return JSONResponse(content=ValidationResult(valid=True, error=None).to_body())
