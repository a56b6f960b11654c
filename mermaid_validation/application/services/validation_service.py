"""
Validation service.

Writes diagram source to a scratch file, renders it with mmdc and turns
the outcome into a verdict. Scratch files are removed on every path.

Dependencies: mermaid_validation.boundary, mermaid_validation.core
System role: Orchestration for POST /validate
"""

import asyncio
import logging
from contextlib import nullcontext
from typing import Any

from mermaid_validation.boundary.renderer import MermaidRenderer
from mermaid_validation.boundary.scratch import ScratchFilePair, ScratchSpace
from mermaid_validation.configs.renderer import RendererSettings
from mermaid_validation.core.diagnostics import extract_headline, resolve_diagnostic
from mermaid_validation.core.exceptions import (
    DiagramRenderError,
    InvalidCodeError,
    MissingCodeError,
    RendererError,
    RendererTimeoutError,
)

logger = logging.getLogger(__name__)


class ValidationService:
    """Business logic for checking Mermaid diagram source."""

    def __init__(
        self,
        renderer: MermaidRenderer,
        scratch: ScratchSpace,
        max_concurrent: int | None = None,
    ) -> None:
        """
        Initialize validation service.

        Args:
            renderer: Runner for the external mmdc process
            scratch: Shared scratch directory for per-request files
            max_concurrent: Optional cap on simultaneous renderer runs
        """
        self.renderer = renderer
        self.scratch = scratch
        self._slots = asyncio.Semaphore(max_concurrent) if max_concurrent else None

    @classmethod
    def from_settings(cls, settings: RendererSettings) -> "ValidationService":
        """Build a service wired to the configured renderer and scratch dir."""
        return cls(
            renderer=MermaidRenderer(
                command=settings.command,
                puppeteer_config=settings.puppeteer_config,
                timeout=settings.timeout_seconds,
            ),
            scratch=ScratchSpace(settings.scratch_dir),
            max_concurrent=settings.max_concurrent,
        )

    async def validate(self, code: Any) -> None:
        """
        Validate diagram source by rendering it.

        Returns normally when the renderer accepts the diagram.

        Args:
            code: Mermaid diagram source

        Raises:
            MissingCodeError: code is absent or falsy
            InvalidCodeError: code is truthy but not a string
            DiagramRenderError: Renderer rejected the diagram, timed out or could not start
        """
        if not code:
            raise MissingCodeError()
        if not isinstance(code, str):
            raise InvalidCodeError(code)

        pair: ScratchFilePair | None = None
        try:
            self.scratch.ensure()
            pair = self.scratch.allocate()
            pair.input_path.write_text(code, encoding="utf-8")

            async with self._slots or nullcontext():
                await self.renderer.render(pair.input_path, pair.output_path)

            logger.info("Diagram valid", extra={"scratch_id": pair.scratch_id})

        except RendererError as e:
            diagnostic = resolve_diagnostic(e.stderr, e.message)
            headline = extract_headline(diagnostic)
            log = logger.warning if isinstance(e, RendererTimeoutError) else logger.info
            log(
                "Diagram rejected",
                extra={
                    "scratch_id": pair.scratch_id if pair else None,
                    "error_type": type(e).__name__,
                    "headline": headline,
                },
            )
            raise DiagramRenderError(headline, diagnostic, details=e.details) from e

        finally:
            self.scratch.release(pair)
