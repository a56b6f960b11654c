"""Boundary adapters: filesystem scratch space and the mmdc process."""

from mermaid_validation.boundary.renderer import MermaidRenderer
from mermaid_validation.boundary.scratch import ScratchFilePair, ScratchSpace

__all__ = ["MermaidRenderer", "ScratchFilePair", "ScratchSpace"]
