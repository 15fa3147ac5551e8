"""CLI command for checking a single property bag."""

from pathlib import Path
from typing import Optional

import typer

from image_audit.cli.utils import console, fail, get_config
from image_audit.renderers.base import OutputFormat, RenderContext
from image_audit.utils.errors import ImageAuditError


def check_cmd(
    path: Path = typer.Argument(..., help="YAML/JSON file holding one image's properties"),
    schema_version: Optional[str] = typer.Option(
        None,
        "--schema-version",
        help="Schema version to validate against (default: v2)",
    ),
    format: OutputFormat = typer.Option(
        OutputFormat.TERMINAL,
        "--format",
        "-f",
        help="Output format (terminal, json)",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to configuration file",
    ),
) -> None:
    """
    Check one image's properties before publishing it.

    The file holds either the property mapping itself or a full image
    document with a properties mapping. Exits with status 1 when the
    properties do not conform.

    Example:
        image-audit check ubuntu-22.04.yaml
    """
    from image_audit.catalog.file import load_document
    from image_audit.catalog.glance import parse_glance_image
    from image_audit.core.audit import ImageAuditor
    from image_audit.core.classifier import is_eligible
    from image_audit.core.registry import default_registry
    from image_audit.renderers import get_renderer
    from image_audit.renderers.terminal import TerminalRenderer

    config = get_config(config_path)
    prefix = config.validation.prefix

    try:
        schema = default_registry().get(schema_version or config.validation.version)
        data = load_document(path)
        if not isinstance(data, dict):
            fail(f"{path} must contain a mapping of properties", format)
        if "properties" not in data:
            data = {"id": path.stem, "name": path.name, "properties": data}
        record = parse_glance_image(data)
    except ImageAuditError as e:
        fail(e, format)

    if not is_eligible(record.properties, prefix):
        console.print(f"[yellow]Skipped:[/yellow] no {prefix} properties in {path}")
        return

    report = ImageAuditor(schema, prefix=prefix).audit_one(record)
    context = RenderContext(format=format, color=config.output.color)

    if format == OutputFormat.TERMINAL:
        TerminalRenderer(console).render(report, context)
    else:
        typer.echo(get_renderer(format).render(report, context))

    if not report.conforming:
        raise typer.Exit(1)
