"""
Renderer configuration settings.

Settings for the external mmdc process, its browser config and the
scratch directory used for per-request input/output files.

Dependencies: pydantic_settings
System role: Renderer invocation configuration
"""

import tempfile
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

from mermaid_validation.configs.base import env_config


def _default_scratch_dir() -> Path:
    return Path(tempfile.gettempdir()) / "mermaid-validation"


class RendererSettings(BaseSettings):
    """mermaid-cli invocation settings."""

    model_config = env_config("RENDERER_")

    command: list[str] = Field(
        default=["./node_modules/.bin/mmdc"],
        description="Renderer executable plus any leading arguments",
    )
    puppeteer_config: Path = Field(
        default=Path("puppeteer-config.json"),
        description="Puppeteer config file passed to mmdc with -p",
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Wall-clock budget for one renderer run",
    )
    scratch_dir: Path = Field(
        default_factory=_default_scratch_dir,
        description="Directory holding per-request scratch files",
    )
    max_concurrent: int | None = Field(
        default=None,
        ge=1,
        description="Upper bound on simultaneous renderer processes (unbounded if unset)",
    )
