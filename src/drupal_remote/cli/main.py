"""drupal-remote CLI - maintenance tasks on a remote Drupal site.

Connection settings come from ``DRUPAL_REMOTE_*`` environment variables
(or a ``.env`` file).
"""

import os
from typing import Annotated

import typer
from rich.panel import Panel
from rich.table import Table

import drupal_remote
from drupal_remote import console as dr_console
from drupal_remote.client import Client
from drupal_remote.config import get_settings
from drupal_remote.driver import RemoteDriver
from drupal_remote.exceptions import DrupalRemoteError
from drupal_remote.logging import configure_logging, get_logger

# Configure logging early using env vars directly; -v/-vv and --log-format
# in main_callback() may reconfigure later.
configure_logging(
    level=os.environ.get("DRUPAL_REMOTE_LOG_LEVEL", "WARNING"),
    json_output=os.environ.get("DRUPAL_REMOTE_LOG_FORMAT", "console") == "json",
)

LOG = get_logger(__name__)

app = typer.Typer(
    name="drupal-remote",
    help="Drive a remote Drupal site through its HTTP API.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            count=True,
            help="Increase verbosity (-v for info, -vv for debug)",
        ),
    ] = 0,
    log_format: Annotated[
        str | None,
        typer.Option(
            "--log-format",
            help="Log output format: console (human-readable) or json (structured)",
        ),
    ] = None,
    log_requests: Annotated[
        bool,
        typer.Option(
            "--log-requests",
            help="Log every HTTP request/response (needs -vv to be visible)",
        ),
    ] = False,
) -> None:
    """drupal-remote - drive a remote Drupal site."""
    settings = get_settings()
    json_output = (log_format or settings.log_format) == "json"

    # Reconfigure logging if -v flags or --log-format override the settings default
    if verbose >= 2:
        configure_logging(level="DEBUG", json_output=json_output)
    elif verbose >= 1:
        configure_logging(level="INFO", json_output=json_output)
    elif log_format is not None:
        configure_logging(level=settings.log_level, json_output=json_output)

    ctx.obj = {"log_requests": log_requests}


def _build_driver(ctx: typer.Context) -> RemoteDriver:
    """Build a driver from settings, exiting with status 1 when misconfigured."""
    try:
        driver = RemoteDriver.from_settings(get_settings())
    except DrupalRemoteError as exc:
        dr_console.error(str(exc))
        raise typer.Exit(1) from exc

    if (ctx.obj or {}).get("log_requests"):
        driver.bootstrap()
        client = driver.client
        if isinstance(client, Client):
            client.enable_logging()
    return driver


def _fail(exc: RuntimeError) -> typer.Exit:
    dr_console.error(str(exc))
    return typer.Exit(1)


@app.command("version")
def version() -> None:
    """Show drupal-remote version."""
    dr_console.out_console.print(
        Panel(
            f"[bold cyan]drupal-remote[/bold cyan] v{drupal_remote.__version__}",
            title="Remote Drupal driver",
            border_style="cyan",
        )
    )


@app.command("config")
def config() -> None:
    """Show the connection settings in effect."""
    settings = get_settings()
    table = Table(title="drupal-remote settings", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("base_url", settings.base_url or "[dim](unset)[/dim]")
    table.add_row("username", settings.username or "[dim](unset)[/dim]")
    table.add_row("password", "********" if settings.password else "[dim](unset)[/dim]")
    table.add_row("request_cookie", "********" if settings.request_cookie else "[dim](unset)[/dim]")
    table.add_row("timeout", str(settings.timeout))
    table.add_row("api_version", settings.api_version)
    table.add_row("verify_ssl", str(settings.verify_ssl))
    table.add_row("log_level", settings.log_level)
    dr_console.out_console.print(table)


@app.command("cache-clear")
def cache_clear(
    ctx: typer.Context,
    type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Cache bin to clear (default: all)"),
    ] = None,
) -> None:
    """Clear caches on the remote site."""
    driver = _build_driver(ctx)
    try:
        driver.clear_cache(type)
    except RuntimeError as exc:
        raise _fail(exc) from exc
    dr_console.success("Caches cleared")


@app.command("cron")
def cron(ctx: typer.Context) -> None:
    """Run cron on the remote site."""
    driver = _build_driver(ctx)
    try:
        driver.run_cron()
    except RuntimeError as exc:
        raise _fail(exc) from exc
    dr_console.success("Cron run complete")


@app.command("watchdog")
def watchdog(
    ctx: typer.Context,
    count: Annotated[int, typer.Option("--count", "-n", help="Number of entries")] = 10,
    type: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Only entries of this type (e.g. php)"),
    ] = None,
    severity: Annotated[
        str | None,
        typer.Option("--severity", "-s", help="Only entries of this severity"),
    ] = None,
) -> None:
    """Show recent watchdog log entries."""
    driver = _build_driver(ctx)
    try:
        entries = driver.fetch_watchdog(count, type, severity)
    except RuntimeError as exc:
        raise _fail(exc) from exc

    if not entries:
        dr_console.out_console.print("[dim]No log entries.[/dim]")
        return
    dr_console.out_console.print(entries, markup=False, highlight=False)
