"""Renderers for audit reports, summaries and schemas."""

from image_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext
from image_audit.renderers.json import JSONLRenderer, JSONRenderer, audit_document
from image_audit.renderers.terminal import TerminalRenderer

_RENDERERS: dict[OutputFormat, type[BaseRenderer]] = {
    OutputFormat.TERMINAL: TerminalRenderer,
    OutputFormat.JSON: JSONRenderer,
    OutputFormat.JSONL: JSONLRenderer,
}


def get_renderer(format: OutputFormat | str) -> BaseRenderer:
    """Create the renderer for an output format.

    Raises:
        ValueError: If the format name is unknown
    """
    return _RENDERERS[OutputFormat(format)]()


__all__ = [
    "BaseRenderer",
    "OutputFormat",
    "RenderContext",
    "JSONRenderer",
    "JSONLRenderer",
    "TerminalRenderer",
    "audit_document",
    "get_renderer",
]
