"""
Unit tests for the exception hierarchy.

Dependencies: pytest, mermaid_validation.core.exceptions
System role: Error message and context validation
"""

from mermaid_validation.core.exceptions import (
    DiagramRenderError,
    InvalidCodeError,
    MermaidValidationException,
    MissingCodeError,
    RendererError,
    RendererExitError,
    RendererSpawnError,
    RendererTimeoutError,
)


def test_missing_code_message_is_fixed():
    error = MissingCodeError()
    assert error.message == "Missing required field: code"
    assert error.details == {"field": "code"}
    assert isinstance(error, MermaidValidationException)


def test_str_includes_details():
    error = MermaidValidationException("boom", {"k": "v"})
    assert str(error) == "boom | Details: {'k': 'v'}"
    assert str(MermaidValidationException("plain")) == "plain"


def test_exit_error_carries_stderr_and_returncode():
    error = RendererExitError(1, "mmdc -i a.mmd", "Error: bad")
    assert isinstance(error, RendererError)
    assert error.returncode == 1
    assert error.stderr == "Error: bad"
    assert error.message == "Command failed with exit code 1: mmdc -i a.mmd"


def test_timeout_error_message():
    error = RendererTimeoutError(10.0)
    assert error.message == "Renderer timed out after 10 seconds"
    assert error.stderr == ""
    assert error.details["timeout_seconds"] == 10.0


def test_spawn_error_wraps_os_error():
    error = RendererSpawnError(FileNotFoundError(2, "No such file or directory", "mmdc"))
    assert error.message.startswith("Failed to start renderer: ")
    assert "No such file or directory" in error.message


def test_render_error_keeps_headline_and_diagnostic():
    error = DiagramRenderError("Error: x", "prefix\nError: x\nsuffix")
    assert error.headline == "Error: x"
    assert error.diagnostic == "prefix\nError: x\nsuffix"


def test_invalid_code_records_type():
    error = InvalidCodeError(42)
    assert error.message == "Field code must be a string"
    assert error.details == {"field": "code", "type": "int"}


def test_timeout_error_keeps_partial_stderr():
    error = RendererTimeoutError(2.0, "Error: Lexical error\n")
    assert error.stderr == "Error: Lexical error\n"
    assert error.message == "Renderer timed out after 2 seconds"
