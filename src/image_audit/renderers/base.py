"""Output formats and the shared renderer base."""

from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class OutputFormat(str, Enum):
    """Report formats understood by the CLI."""

    TERMINAL = "terminal"
    JSON = "json"
    JSONL = "jsonl"


class RenderContext(BaseModel):
    """Options for one rendering call."""

    model_config = {"frozen": True}

    format: OutputFormat = Field(default=OutputFormat.TERMINAL, description="Output format")
    output_path: Path | None = Field(default=None, description="Write here instead of stdout")
    color: bool = Field(default=True, description="Keep terminal styles (ignored by JSON formats)")
    indent: int = Field(default=2, description="JSON indentation, 0 for compact")


class BaseRenderer:
    """Turns reports, summaries and schemas into text.

    Subclasses provide ``format`` and ``render``; writing to a file is
    shared.
    """

    @property
    def format(self) -> OutputFormat:
        raise NotImplementedError

    def render(self, data: Any, context: RenderContext) -> str:
        raise NotImplementedError

    def render_to_file(self, data: Any, context: RenderContext) -> None:
        """Render into ``context.output_path``.

        Raises:
            ValueError: If the context has no output path
        """
        if context.output_path is None:
            raise ValueError("RenderContext.output_path is required to render to a file")

        context.output_path.write_text(self.render(data, context), encoding="utf-8")
