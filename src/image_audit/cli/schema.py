"""CLI command for showing a schema."""

from typing import Optional

import typer

from image_audit.cli.utils import console, fail
from image_audit.renderers.base import OutputFormat, RenderContext
from image_audit.utils.errors import ImageAuditError


def schema_cmd(
    schema_version: Optional[str] = typer.Option(
        None,
        "--schema-version",
        help="Schema version to show (default: v2)",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TERMINAL,
        "--format",
        "-f",
        help="Output format (terminal, json)",
    ),
    list_versions: bool = typer.Option(
        False,
        "--list",
        help="List available schema versions",
    ),
) -> None:
    """
    Show the keys, requirements and constraints of a schema.

    Example:
        image-audit schema --schema-version v2
    """
    from image_audit.core.registry import default_registry
    from image_audit.renderers import get_renderer
    from image_audit.renderers.terminal import TerminalRenderer
    from image_audit.schemas import DEFAULT_VERSION

    registry = default_registry()

    if list_versions:
        for version in registry.versions():
            console.print(version)
        return

    try:
        schema = registry.get(schema_version or DEFAULT_VERSION)
    except ImageAuditError as e:
        fail(e, format)

    context = RenderContext(format=format)
    if format == OutputFormat.TERMINAL:
        TerminalRenderer(console).render(schema, context)
    else:
        typer.echo(get_renderer(format).render(schema, context))
