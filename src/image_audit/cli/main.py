"""Entry point for the image-audit command line."""

import typer

from image_audit.cli import audit, check, schema
from image_audit.cli.utils import console

app = typer.Typer(
    name="image-audit",
    help="Audit cloud image metadata against the Unikorn image schema.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command(name="audit")(audit.audit_cmd)
app.command(name="check")(check.check_cmd)
app.command(name="schema")(schema.schema_cmd)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress and client requests"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    structured_logs: bool = typer.Option(
        False,
        "--structured-logs",
        help="Prefix log lines with timestamp and logger name",
    ),
) -> None:
    """
    Audit cloud image metadata against the Unikorn image schema.

    - [bold]audit[/bold]: Validate every image in a catalog
    - [bold]check[/bold]: Validate one image's properties from a file
    - [bold]schema[/bold]: Show a schema's keys and constraints
    """
    from image_audit.utils.logging import configure_logging

    level = "DEBUG" if verbose else "ERROR" if quiet else "WARNING"
    configure_logging(level=level, structured=structured_logs)


@app.command()
def version() -> None:
    """Show the image-audit version."""
    from image_audit import __version__

    console.print(f"image-audit version {__version__}")


if __name__ == "__main__":
    app()
