"""Main Typer application for the SendGrid template exporter.

This module contains the Typer app and the ``sendgridman`` command. It
validates options, lists the dynamic templates of the account, fetches
each one and writes its versions to the base directory.

A failure to list or fetch templates aborts the run with exit code 1.
A template that cannot be stored is reported and the run continues.
"""

import functools
import sys
from typing import Any, Dict, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.traceback import install

from . import __version__
from .client import SENDGRID_HOST, SendGridClient
from .config import ExportSettings
from .exceptions import (
    ConfigError,
    EmptyTemplateError,
    SendgridmanError,
    StoreError,
    WorkingDirectoryError,
)
from .render import FORMATS, OutputFormatter
from .store import TemplateFileStore
from .utils.exceptions import format_error_for_user

# Locals would include the API key
install(show_locals=False)

app = typer.Typer(
    name="sendgridman",
    help="Export SendGrid dynamic transactional templates to local files",
    context_settings={"help_option_names": ["-h", "--help"]},
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"sendgridman {__version__}")
        raise typer.Exit()


def validate_api_key_callback(value: str) -> str:
    """Reject blank API keys before any request is made."""
    if not value or not value.strip():
        raise typer.BadParameter("must be not empty and starts with 'SG.'")
    return value


def validate_format_callback(value: str) -> str:
    """Validate the report format."""
    if value.lower() not in FORMATS:
        raise typer.BadParameter(f"must be one of: {', '.join(FORMATS)}")
    return value.lower()


def handle_exceptions(func):
    """Decorator converting exporter errors to exit codes."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        debug = kwargs.get("debug", False)
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except SendgridmanError as e:
            console.print(f"[red]{escape(format_error_for_user(e, debug))}[/red]")
            if not debug:
                console.print("[dim]Use --debug for more details[/dim]")
            raise typer.Exit(1)
        except KeyboardInterrupt:
            console.print("\n[yellow]Operation cancelled by user[/yellow]")
            raise typer.Exit(130)
        except Exception as e:
            if debug:
                console.print_exception(show_locals=False)
            else:
                console.print(f"[red]Unexpected error: {escape(str(e))}[/red]")
                console.print("[dim]Use --debug for more details[/dim]")
            raise typer.Exit(1)
    return wrapper


def _report_row(template_id: str, name: str, status: str, written=None, skipped=None) -> Dict[str, Any]:
    return {
        "template_id": template_id,
        "name": name,
        "status": status,
        "written": list(written or []),
        "skipped": list(skipped or []),
    }


@handle_exceptions
def run_export(settings: ExportSettings, output_format: str = "table", debug: bool = False) -> List[Dict[str, Any]]:
    """Export every dynamic template of the account.

    Args:
        settings: Effective run settings
        output_format: Format of the final report
        debug: Print request diagnostics

    Returns:
        One report row per template
    """
    formatter = OutputFormatter(console)
    formatter.render_settings(settings)

    store = TemplateFileStore(settings.base_dir, console=console)
    policy = settings.store_policy()
    report: List[Dict[str, Any]] = []

    with SendGridClient(
        settings.api_key,
        host=settings.host,
        timeout=settings.timeout,
        debug=debug,
    ) as client:
        templates = client.list_templates()
        console.print(f"Found {len(templates)} dynamic templates")

        console.print("Retrieve templates data")
        for i, summary in enumerate(templates):
            detail = client.get_template(summary.id)
            console.print(f"{i}. Template ID={summary.id} '{summary.name}'", markup=False)

            try:
                result = store.store(detail, policy)
            except (EmptyTemplateError, StoreError) as e:
                console.print(
                    f"ERROR: failed to store template ID={summary.id} to file, "
                    f"{format_error_for_user(e, debug)}",
                    style="red",
                    markup=False,
                )
                status = "empty" if isinstance(e, EmptyTemplateError) else "failed"
                report.append(_report_row(summary.id, summary.name, status))
                continue

            report.append(_report_row(summary.id, summary.name, "stored", result.written, result.skipped))

    formatter.render(report, format=output_format, title="Exported templates")
    console.print("[green]Retrieve templates data: OK[/green]")
    return report


@app.command()
def export(
    apikey: str = typer.Option(
        ...,
        "--apikey",
        help="SendGrid API key (not API Key ID!) to access the service",
        callback=validate_api_key_callback,
    ),
    basedir: str = typer.Option(
        "",
        "--basedir",
        help="Base dir where templates are stored (defaults to the current directory)",
    ),
    include_plain: bool = typer.Option(
        False,
        "--include_plain",
        help="Also store the plain-text content of each version",
    ),
    overwrite: bool = typer.Option(
        False,
        "--overwrite",
        help="Overwrite existing files",
    ),
    all_versions: bool = typer.Option(
        False,
        "--all",
        help="Store every version, not only the active one",
    ),
    host: str = typer.Option(
        SENDGRID_HOST,
        "--host",
        help="SendGrid API base URL",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Request timeout in seconds (default: no timeout)",
    ),
    output_format: str = typer.Option(
        "table",
        "--format",
        "-o",
        help="Report format (table, json, yaml)",
        callback=validate_format_callback,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Export SendGrid dynamic templates to HTML and plain-text files.

    Examples:
        # Export the active version of every template to the current directory
        sendgridman --apikey SG.xxxx

        # Export every version, including plain text, overwriting old files
        sendgridman --apikey SG.xxxx --basedir ./templates --all --include_plain --overwrite
    """
    try:
        settings = ExportSettings.from_options(
            api_key=apikey,
            base_dir=basedir,
            host=host,
            timeout=timeout,
            include_plain=include_plain,
            overwrite=overwrite,
            all_versions=all_versions,
        )
    except WorkingDirectoryError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        raise typer.Exit(1)
    except ConfigError as e:
        raise typer.BadParameter(e.message)

    run_export(settings, output_format=output_format, debug=debug)


def cli():
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    cli()
