"""Core domain logic: diagnostic parsing and exception hierarchy."""

from mermaid_validation.core.diagnostics import (
    DEFAULT_DIAGNOSTIC,
    extract_headline,
    resolve_diagnostic,
)

__all__ = ["DEFAULT_DIAGNOSTIC", "extract_headline", "resolve_diagnostic"]
