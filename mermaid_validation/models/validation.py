"""
Validation API models.

Request and response schemas for diagram validation and health.

Dependencies: pydantic
System role: API schema definitions
"""

from typing import Any

from pydantic import BaseModel, Field


class ValidationRequest(BaseModel):
    """
    Request body for POST /validate.

    `code` is left untyped so any falsy value reaches the missing-field
    check; non-string values are rejected by the service.
    """

    code: Any = Field(
        default=None,
        description="Mermaid diagram source",
        examples=["graph TD; A-->B"],
    )


class ValidationResult(BaseModel):
    """
    Validation verdict.

    `details` is left unset on success and on missing input so that it is
    omitted from the serialized body.
    """

    valid: bool
    error: str | None = Field(default=None, description="Headline error message")
    details: str | None = Field(default=None, description="Full diagnostic text")

    def to_body(self) -> dict:
        """Serialize, dropping fields that were never set."""
        return self.model_dump(exclude_unset=True)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
