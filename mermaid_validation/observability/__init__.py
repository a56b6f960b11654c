"""
Observability module.

Provides logging configuration, request logging and correlation ID tracking.
"""

from mermaid_validation.observability.correlation import get_correlation_id
from mermaid_validation.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_correlation_id", "get_logger"]
