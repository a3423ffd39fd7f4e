"""Renderer-facing contract, session lifecycle and HTML export."""

from .html import HtmlRenderer, generate_html, write_html
from .session import (
    RenderBundle,
    Renderer,
    ResizeEvents,
    ResizeSource,
    VisualizationSession,
    build_bundle,
)

__all__ = [
    "HtmlRenderer",
    "RenderBundle",
    "Renderer",
    "ResizeEvents",
    "ResizeSource",
    "VisualizationSession",
    "build_bundle",
    "generate_html",
    "write_html",
]
