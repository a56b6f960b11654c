"""
Renderer diagnostic parsing.

Reduces mmdc's standard error output to a single headline line. The
line-scan is a heuristic tied to mermaid-cli's message format; it is kept
literal rather than hardened into a parser.

Dependencies: None
System role: Pure error-text extraction
"""

DEFAULT_DIAGNOSTIC = "Invalid Mermaid diagram"

HEADLINE_MARKERS = ("Error", "error", "Parse")


def resolve_diagnostic(stderr: str | None, message: str | None) -> str:
    """
    Pick the best available diagnostic text.

    Args:
        stderr: Captured renderer standard error
        message: Generic failure message from the process machinery

    Returns:
        str: stderr if non-empty, else message, else the default text
    """
    return stderr or message or DEFAULT_DIAGNOSTIC


def extract_headline(diagnostic: str) -> str:
    """
    Select the headline error from diagnostic text.

    Scans lines in order and returns the first one containing any of
    HEADLINE_MARKERS (case-sensitive). Falls back to the whole text.

    Args:
        diagnostic: Full diagnostic text

    Returns:
        str: Headline error line
    """
    for line in diagnostic.split("\n"):
        if any(marker in line for marker in HEADLINE_MARKERS):
            return line
    return diagnostic
