"""JSON renderers for image-audit output."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel

from image_audit.models.outcome import AuditReport, AuditSummary
from image_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext


def _dump(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, (list, tuple)):
        return [_dump(item) for item in data]
    return data


class JSONRenderer(BaseRenderer):
    """Renderer for a single JSON document.

    Example:
        renderer = JSONRenderer()
        json_str = renderer.render(audit_document(reports, summary), context)
    """

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.JSON

    def render(self, data: Any, context: RenderContext) -> str:
        return json.dumps(
            _dump(data),
            indent=context.indent if context.indent else None,
            ensure_ascii=False,
            default=str,
        )


class JSONLRenderer(BaseRenderer):
    """Renderer for JSON Lines output: one object per image."""

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.JSONL

    def render(self, data: Any, context: RenderContext) -> str:
        if not isinstance(data, (list, tuple)):
            data = [data]

        return "\n".join(
            json.dumps(_dump(item), ensure_ascii=False, default=str) for item in data
        )


def audit_document(
    reports: Sequence[AuditReport],
    summary: AuditSummary,
    schema_version: str,
) -> dict[str, Any]:
    """Assemble the JSON document for a whole audit run."""
    return {
        "schema_version": schema_version,
        "images": [_dump(report) for report in reports],
        "summary": _dump(summary),
    }
