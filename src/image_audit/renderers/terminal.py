"""Terminal renderer for image-audit output."""

from __future__ import annotations

import io
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from image_audit.models.outcome import AuditReport, AuditSummary, ExtractedFields, NonConforming
from image_audit.models.schema import Schema
from image_audit.renderers.base import BaseRenderer, OutputFormat, RenderContext
from image_audit.schemas import DOCUMENTATION_URL


def _value(value: Any) -> str:
    # Absent optional fields print as an empty value, never elided.
    return "" if value is None else escape(str(value))


class TerminalRenderer(BaseRenderer):
    """Renderer for terminal output.

    Each image is printed as a YAML-like block so that the whole audit
    stream stays readable and greppable.

    Example:
        renderer = TerminalRenderer()
        for report in auditor.audit(images):
            renderer.render(report, context)
    """

    def __init__(self, console: Console | None = None) -> None:
        """Initialize the terminal renderer.

        Args:
            console: Rich console to use. Creates a new one if None.
        """
        self._console = console or Console(highlight=False, emoji=False)

    @property
    def format(self) -> OutputFormat:
        return OutputFormat.TERMINAL

    def render(self, data: Any, context: RenderContext) -> str:
        """Render data to the terminal.

        Note: This method prints to the console and returns an empty string.
        For capturing output, use Console.capture().
        """
        if isinstance(data, (list, tuple)):
            for item in data:
                self.render(item, context)
        elif isinstance(data, AuditReport):
            self._render_report(data)
        elif isinstance(data, AuditSummary):
            self._render_summary(data)
        elif isinstance(data, Schema):
            self._render_schema(data)
        else:
            self._console.print(data)

        return ""

    def render_to_file(self, data: Any, context: RenderContext) -> None:
        """Render data to a file, without color codes unless requested."""
        if context.output_path is None:
            raise ValueError("RenderContext.output_path is required to render to a file")

        file_console = Console(
            record=True,
            file=io.StringIO(),
            force_terminal=context.color,
            highlight=False,
            emoji=False,
        )
        original_console = self._console
        self._console = file_console

        try:
            self.render(data, context)
            output = file_console.export_text(styles=context.color)
            context.output_path.write_text(output, encoding="utf-8")
        finally:
            self._console = original_console

    def _print(self, text: str) -> None:
        self._console.print(text, soft_wrap=True, emoji=False)

    def _render_report(self, report: AuditReport) -> None:
        image = report.image
        created = image.created_at.isoformat() if image.created_at else ""

        self._print("---")
        self._print(f"id: {_value(image.id)}")
        self._print(f"name: {_value(image.name)}")
        self._print(f"createdAt: {created}")
        self._print(f"sizeGiB: {image.size_gib}")

        if isinstance(report.outcome, NonConforming):
            self._render_defects(report.outcome, report.schema_version)
        else:
            self._render_fields(report.outcome.fields)

    def _render_defects(self, outcome: NonConforming, version: str) -> None:
        self._print("error:")
        self._print(f"  message: [bold red]Image does not match Unikorn Schema {version.upper()}[/bold red]")
        self._print(f"  documentation: See {DOCUMENTATION_URL}")
        self._print("  detail:")

        for defect in outcome.defects:
            self._print(f"  - message: {defect.message}")
            self._print("    properties: " + escape("[" + " ".join(defect.keys) + "]"))

    def _render_fields(self, fields: ExtractedFields) -> None:
        for title, group in (("os", fields.os), ("package", fields.package), ("gpu", fields.gpu)):
            self._print(f"{title}:")
            for name in type(group).KEYS:
                self._print(f"  {name}: {_value(getattr(group, name))}")

        self._print(f"virtualization: {_value(fields.platform.virtualization)}")
        self._print(f"digest: {_value(fields.platform.digest)}")

    def _render_summary(self, summary: AuditSummary) -> None:
        self._console.print()
        table = Table(title="Summary", show_header=False)
        table.add_column("Metric", style="bold")
        table.add_column("Count")
        table.add_row("Audited", str(summary.total))
        table.add_row("Conforming", f"[green]{summary.conforming}[/green]")
        table.add_row("Non-conforming", f"[red]{summary.non_conforming}[/red]")
        table.add_row("Skipped", f"[dim]{summary.skipped}[/dim]")
        self._console.print(table)

    def _render_schema(self, schema: Schema) -> None:
        table = Table(title=f"Schema {schema.version}")
        table.add_column("Key", style="bold")
        table.add_column("Required")
        table.add_column("Constraint")

        # Keys such as unikorn:package:slurmd must not go through markup or
        # emoji substitution.
        for key, constraint in schema.constraints.items():
            table.add_row(
                Text(key),
                "[green]yes[/green]" if schema.is_required(key) else "[dim]no[/dim]",
                Text(constraint.describe()),
            )

        self._console.print(table)

