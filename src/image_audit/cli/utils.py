"""Shared utilities for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console

from image_audit.catalog.base import ImageCatalog
from image_audit.models.common import AuditError
from image_audit.renderers.base import OutputFormat
from image_audit.utils.config import AuditConfig, load_config
from image_audit.utils.errors import ImageAuditError

# Reports go to stdout, progress and errors to stderr.
console = Console(highlight=False, emoji=False)
err_console = Console(stderr=True, highlight=False, emoji=False)


def fail(error: ImageAuditError | str, format: OutputFormat | None = None) -> NoReturn:
    """Print a fatal error and exit with status 1.

    For JSON formats the error is also written to stdout as an
    ``{"error": ...}`` document, so consumers never see an empty stream.
    """
    message = error.message if isinstance(error, ImageAuditError) else error
    err_console.print(f"[red]Error:[/red] {message}")

    if format in (OutputFormat.JSON, OutputFormat.JSONL):
        if isinstance(error, ImageAuditError):
            payload = error.to_audit_error()
        else:
            payload = AuditError(code="UNKNOWN_ERROR", message=message)
        typer.echo(json.dumps({"error": payload.model_dump(mode="json")}))

    raise typer.Exit(1)


def get_config(config_path: Path | None) -> AuditConfig:
    """Load configuration, exiting on invalid files."""
    try:
        return load_config(config_path)
    except ImageAuditError as e:
        fail(e)


def build_catalog(
    config: AuditConfig,
    cloud: str | None = None,
    endpoint: str | None = None,
    token: str | None = None,
    from_file: Path | None = None,
    visibility: str | None = None,
) -> ImageCatalog:
    """Choose the image catalog from CLI flags, falling back to config.

    Precedence: an export file, then an explicit Glance endpoint, then
    openstacksdk with the named (or default) cloud.
    """
    catalog_config = config.catalog
    visibility = visibility or catalog_config.visibility

    if from_file is not None:
        from image_audit.catalog.file import FileCatalog

        return FileCatalog(from_file)

    endpoint = endpoint or catalog_config.endpoint
    if endpoint:
        from image_audit.catalog.glance import GlanceCatalog

        return GlanceCatalog(
            endpoint,
            token=token or catalog_config.token,
            visibility=visibility,
            timeout=catalog_config.timeout,
            max_retries=catalog_config.max_retries,
        )

    from image_audit.catalog.openstack import OpenStackCatalog

    return OpenStackCatalog(
        cloud=cloud or catalog_config.cloud,
        visibility=visibility,
        timeout=catalog_config.timeout,
    )
