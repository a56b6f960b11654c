"""Allow running with `python -m mermaid_validation`."""

from mermaid_validation.main import run

run()
