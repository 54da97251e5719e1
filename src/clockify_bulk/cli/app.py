"""Command-line interface for clockify-bulk."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console

from clockify_bulk.cli import flows
from clockify_bulk.cli.flows import FlowOptions
from clockify_bulk.config import (
    ConfigError,
    Configurator,
    SettingsOverrides,
    get_config_path,
    resolve_settings,
)
from clockify_bulk.models import MAX_HOUR, MIN_HOUR
from clockify_bulk.timing import validate_month
from clockify_bulk.utils.env import get_cache_dir, get_today
from clockify_bulk.utils.logging import setup_logging

logger = logging.getLogger(__name__)

HOUR_TYPE = click.IntRange(MIN_HOUR, MAX_HOUR)


def _get_log_file() -> Path:
    """Get the path to the log file."""
    return get_cache_dir() / "clockify-bulk.log"


def _is_interactive() -> bool:
    """Whether prompts can be shown (stdin is a terminal)."""
    return sys.stdin.isatty()


def _setup_logging() -> None:
    """Setup logging to user's cache directory.

    Truncates log file on each run to keep it manageable.
    """
    log_file = _get_log_file()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    setup_logging(log_file)


@click.command()
@click.version_option(package_name="clockify-bulk")
@click.argument("month", type=int, required=False)
@click.argument("year", type=int, required=False)
@click.option("--description", "-d", help="Description of the time entries")
@click.option("--start-hour", type=HOUR_TYPE, help="Override start hour (0-23)")
@click.option("--end-hour", type=HOUR_TYPE, help="Override end hour (0-23)")
@click.option(
    "--lunch-break/--no-lunch-break",
    default=None,
    help="Split each day around a random 1-hour lunch break",
)
@click.option(
    "--save-defaults",
    is_flag=True,
    help="Remember the given description, hours and lunch mode",
)
@click.option(
    "--simulate", is_flag=True, help="Simulate mode - don't actually create entries"
)
@click.option(
    "--configure",
    is_flag=True,
    help="Prompt for all settings, prefilled with the stored ones",
)
@click.option("--config-path", is_flag=True, help="Show path to configuration file")
@click.option(
    "--timeout", type=float, help="Request timeout in seconds (default: no timeout)"
)
def cli(  # noqa: PLR0913  # CLI command needs many options for flexibility
    month: int | None,
    year: int | None,
    description: str | None,
    start_hour: int | None,
    end_hour: int | None,
    lunch_break: bool | None,
    save_defaults: bool,
    simulate: bool,
    configure: bool,
    config_path: bool,
    timeout: float | None,
) -> None:
    """Create Clockify time entries for every working day of MONTH (1-12)
    in YEAR.

    MONTH and YEAR default to the current month and year.
    """
    if config_path:
        click.echo(str(get_config_path()))
        return

    console = Console()
    today = get_today()
    month = month if month is not None else today.month
    year = year if year is not None else today.year

    interactive = _is_interactive()

    try:
        validate_month(month)
        if configure and not interactive:
            raise ConfigError("--configure needs an interactive terminal")
        console.print("[cyan]🕒[/cyan] Starting Clockify bulk time entry")
        settings = resolve_settings(
            Configurator(),
            SettingsOverrides(
                description=description,
                start_hour=start_hour,
                end_hour=end_hour,
                lunch_break=lunch_break,
            ),
            interactive=interactive,
            reconfigure=configure,
            save_defaults=save_defaults,
        )

        # Partial failures are reported but do not change the exit status
        flows.bulk_flow(
            console,
            settings,
            year,
            month,
            options=FlowOptions(simulate=simulate, timeout=timeout),
        )

    except ConfigError as e:
        logger.error("Configuration error: %s", e)  # noqa: TRY400
        click.secho(f"Configuration error: {e}", fg="red", err=True)
        click.echo("\nRun 'clockify-bulk --configure' to configure the application.")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n\n[yellow]Operation cancelled[/yellow]")
        sys.exit(1)


def main() -> None:
    """Main entry point for the CLI.

    Sets up logging and provides a generic catch-all error handler
    for unexpected errors.
    """
    _setup_logging()
    try:
        cli()
    except Exception:
        # Log the full traceback to the log file (details only in log)
        logger.exception("Fatal error occurred")

        # Show user-friendly error message (no exception details)
        click.secho(
            "\nFatal error occurred.",
            fg="red",
            err=True,
        )
        click.secho(
            f"Check logs for details: {_get_log_file()}",
            fg="yellow",
            err=True,
        )

        sys.exit(1)


if __name__ == "__main__":
    main()
