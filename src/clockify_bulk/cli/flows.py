"""Reusable CLI flows for business logic."""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

from clockify_bulk.clockify import (
    ClockifyClient,
    SubmissionError,
    TimeEntrySubmitter,
)
from clockify_bulk.models import RunResult, Settings
from clockify_bulk.timing import RandomSource, get_working_days, validate_month

from .elements import (
    display_run_header,
    display_simulate_hint,
    display_simulation_table,
    display_summary,
)

logger = logging.getLogger(__name__)


@dataclass
class FlowOptions:
    """Options for flow execution."""

    simulate: bool = False
    timeout: float | None = None


def run_flow(
    console: Console,
    settings: Settings,
    year: int,
    month: int,
    submitter: TimeEntrySubmitter,
) -> RunResult:
    """Submit the entries of every working day of a month, one day at a time.

    A failed day is reported and counted; the next day is attempted anyway.

    Args:
        console: Rich console for output
        settings: Run settings
        year: Target year
        month: Target month (1-12)
        submitter: Submitter used for each day

    Returns:
        Success and failure counts
    """
    working_days = get_working_days(year, month)
    console.print(f"Found [bold]{len(working_days)}[/bold] working days")
    logger.info(
        "Processing %d working days of %04d-%02d", len(working_days), year, month
    )

    result = RunResult()
    for day in working_days:
        try:
            submission = submitter.submit(settings, day)
        except SubmissionError as e:
            result.record_failure(day, str(e))
            logger.error("Failed to submit entries for %s: %s", day, e)  # noqa: TRY400
            action = "simulate" if submitter.simulate else "create"
            console.print(
                f"[red]✗[/red] Failed to {action} entries for "
                f"{day.isoformat()}: {escape(str(e))}"
            )
            continue

        result.record_success(submission)
        if not submission.simulated:
            console.print(
                f"[green]✓[/green] Created entries for {day.isoformat()} "
                f"({result.success}/{len(working_days)})"
            )

    logger.info("Run finished: %d succeeded, %d failed", result.success, result.failed)
    return result


def bulk_flow(
    console: Console,
    settings: Settings,
    year: int,
    month: int,
    *,
    options: FlowOptions | None = None,
    rng: RandomSource | None = None,
    client_factory: Callable[..., ClockifyClient] = ClockifyClient,
) -> RunResult:
    """Run a whole month: header, submissions, summary.

    Opens a Clockify client for live runs only; simulated runs never touch
    the network.

    Args:
        console: Rich console for output
        settings: Run settings
        year: Target year
        month: Target month (1-12)
        options: Flow options (simulate, request timeout)
        rng: Source of the lunch break draws (unseeded if None)
        client_factory: Builds the HTTP client from base URL and token

    Returns:
        Success and failure counts

    Raises:
        ConfigError: If the month is out of range
    """
    options = options or FlowOptions()
    validate_month(month)

    display_run_header(console, settings, year, month, simulate=options.simulate)

    if options.simulate:
        submitter = TimeEntrySubmitter(None, rng, simulate=True)
        result = run_flow(console, settings, year, month, submitter)
        display_simulation_table(
            console, result.submissions, lunch_break=settings.lunch_break
        )
    else:
        with client_factory(
            settings.api_base_url, settings.auth_token, timeout=options.timeout
        ) as client:
            submitter = TimeEntrySubmitter(client, rng)
            result = run_flow(console, settings, year, month, submitter)

    display_summary(console, result, simulate=options.simulate)
    if options.simulate and result.success > 0:
        display_simulate_hint(console, year, month)

    return result
