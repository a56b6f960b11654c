"""
Shared test fixtures and configuration for entire test suite.

Provides: Renderer settings pointing at a fake mmdc, scratch directory,
service and app factories
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from mermaid_validation.application.services import ValidationService
from mermaid_validation.boundary import MermaidRenderer, ScratchSpace
from mermaid_validation.configs import Settings
from mermaid_validation.configs.renderer import RendererSettings

FAKE_MMDC = Path(__file__).parent / "fixtures" / "fake_mmdc.py"
PUPPETEER_CONFIG = Path(__file__).resolve().parents[1] / "puppeteer-config.json"


@pytest.fixture
def scratch_dir(tmp_path):
    """
    Scratch directory path that does not exist yet.

    Returns:
        Path: Location the service should create on demand
    """
    return tmp_path / "mermaid-validation"


@pytest.fixture
def renderer_settings(scratch_dir):
    """Renderer settings wired to the fake mmdc with a short timeout."""
    return RendererSettings(
        command=[sys.executable, str(FAKE_MMDC)],
        puppeteer_config=PUPPETEER_CONFIG,
        timeout_seconds=2.0,
        scratch_dir=scratch_dir,
    )


@pytest.fixture
def settings(renderer_settings):
    """Application settings using the fake renderer."""
    return Settings(renderer=renderer_settings)


@pytest.fixture
def fake_renderer(renderer_settings):
    """MermaidRenderer running the fake mmdc."""
    return MermaidRenderer(
        command=renderer_settings.command,
        puppeteer_config=renderer_settings.puppeteer_config,
        timeout=renderer_settings.timeout_seconds,
    )


@pytest.fixture
def validation_service(fake_renderer, scratch_dir):
    """ValidationService backed by the fake renderer."""
    return ValidationService(renderer=fake_renderer, scratch=ScratchSpace(scratch_dir))


@pytest.fixture
def client(settings):
    """TestClient for an app built from the test settings."""
    from mermaid_validation.main import create_app

    app = create_app(settings)
    return TestClient(app)
