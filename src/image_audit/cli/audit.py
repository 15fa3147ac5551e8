"""CLI command for auditing an image catalog."""

from pathlib import Path
from typing import Optional

import typer

from image_audit.cli.utils import build_catalog, console, err_console, fail, get_config
from image_audit.renderers.base import OutputFormat, RenderContext
from image_audit.utils.errors import ImageAuditError


def audit_cmd(
    cloud: Optional[str] = typer.Option(
        None,
        "--cloud",
        "-c",
        help="Cloud name in clouds.yaml (defaults to OS_CLOUD)",
    ),
    endpoint: Optional[str] = typer.Option(
        None,
        "--endpoint",
        help="Glance endpoint URL, bypassing clouds.yaml",
    ),
    token: Optional[str] = typer.Option(
        None,
        "--token",
        envvar="OS_TOKEN",
        help="Keystone token for --endpoint",
    ),
    from_file: Optional[Path] = typer.Option(
        None,
        "--from-file",
        help="Audit images from a saved YAML/JSON listing",
    ),
    visibility: Optional[str] = typer.Option(
        None,
        "--visibility",
        help="Image visibility to list (default: public)",
    ),
    schema_version: Optional[str] = typer.Option(
        None,
        "--schema-version",
        help="Schema version to validate against (default: v2)",
    ),
    format: Optional[OutputFormat] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format (terminal, json, jsonl)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path",
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        help="Print counts after the report",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Exit with status 1 if any image does not conform",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="Path to configuration file",
    ),
) -> None:
    """
    Audit image metadata against the Unikorn schema.

    Lists images from the catalog, skips those without any unikorn:
    property, and reports each remaining image as conforming (with its
    extracted fields) or non-conforming (with the offending properties).

    Example:
        image-audit audit --cloud production
    """
    from image_audit.core.audit import ImageAuditor, summarize
    from image_audit.core.registry import default_registry
    from image_audit.renderers import audit_document, get_renderer
    from image_audit.renderers.terminal import TerminalRenderer

    config = get_config(config_path)
    format = format or OutputFormat(config.output.default_format)
    version = schema_version or config.validation.version

    try:
        schema = default_registry().get(version)
    except ImageAuditError as e:
        fail(e, format)

    catalog = build_catalog(config, cloud, endpoint, token, from_file, visibility)

    with err_console.status("Listing images..."):
        try:
            records = catalog.list_images()
        except ImageAuditError as e:
            fail(e, format)

    auditor = ImageAuditor(schema, prefix=config.validation.prefix)
    context = RenderContext(format=format, output_path=output, color=config.output.color)
    show_summary = summary or config.output.summary

    if format == OutputFormat.TERMINAL and output is None:
        renderer = TerminalRenderer(console)
    else:
        renderer = get_renderer(format)
    streaming = output is None and format != OutputFormat.JSON

    reports = []
    for report in auditor.audit(records):
        reports.append(report)
        if streaming and format == OutputFormat.TERMINAL:
            renderer.render(report, context)
        elif streaming:
            typer.echo(renderer.render(report, context))

    result = summarize(reports, skipped=auditor.skipped)

    if format == OutputFormat.JSON:
        data = audit_document(reports, result, schema.version)
    elif format == OutputFormat.TERMINAL and show_summary:
        data = reports + [result]
    else:
        data = reports

    if output:
        renderer.render_to_file(data, context)
        err_console.print(f"Report written to {output}")
    elif format == OutputFormat.JSON:
        typer.echo(renderer.render(data, context))
    elif format == OutputFormat.TERMINAL and show_summary:
        renderer.render(result, context)

    if strict and not result.passed:
        raise typer.Exit(1)
