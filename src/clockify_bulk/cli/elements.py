"""Reusable CLI elements for displaying output."""

from datetime import date, datetime

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from clockify_bulk.models import DaySubmission, RunResult, Settings


def format_time(value: datetime) -> str:
    """Format a datetime as HH:MM in its own timezone."""
    return value.strftime("%H:%M")


def format_month(year: int, month: int) -> str:
    """Format a month for display (e.g., "October 2024")."""
    return date(year, month, 1).strftime("%B %Y")


def display_run_header(
    console: Console,
    settings: Settings,
    year: int,
    month: int,
    *,
    simulate: bool,
) -> None:
    """Display what the run is about to do."""
    if simulate:
        console.print("[yellow]SIMULATION MODE: No entries will be created[/yellow]")

    action = "Simulating" if simulate else "Creating"
    console.print(
        f"{action} entries for [cyan]{format_month(year, month)}[/cyan] "
        f'with description "[green]{escape(settings.description)}[/green]"'
    )
    if settings.lunch_break:
        console.print("Each day will include a random 1-hour lunch break")
    else:
        console.print(
            f"Each day is a single entry from {settings.start_hour:02d}:00 "
            f"to {settings.end_hour:02d}:00"
        )


def display_simulation_table(
    console: Console,
    submissions: list[DaySubmission],
    *,
    lunch_break: bool,
) -> None:
    """Display the simulated entries of each day.

    Args:
        console: Rich console for output
        submissions: Simulated days, in order
        lunch_break: Whether days are split (Morning/Lunch/Afternoon columns)
            or single (Work column)
    """
    if not submissions:
        return

    table = Table(title="Simulated time entries")
    table.add_column("Date", style="cyan")
    if lunch_break:
        table.add_column("Morning", style="green")
        table.add_column("Lunch", style="yellow")
        table.add_column("Afternoon", style="green")
    else:
        table.add_column("Work", style="green")
    table.add_column("Description", style="magenta")

    for submission in submissions:
        entries = submission.entries
        spans = [
            f"{format_time(entry.start)} - {format_time(entry.end)}"
            for entry in entries
        ]
        description = escape(entries[0].description) if entries else ""
        if lunch_break and len(entries) == 2:  # noqa: PLR2004  # morning+afternoon
            lunch = f"{format_time(entries[0].end)} - {format_time(entries[1].start)}"
            table.add_row(
                submission.day.isoformat(), spans[0], lunch, spans[1], description
            )
        else:
            table.add_row(submission.day.isoformat(), *spans, description)

    console.print(table)


def display_summary(console: Console, result: RunResult, *, simulate: bool) -> None:
    """Display success and failure counts after a run."""
    done = "simulated" if simulate else "created"
    if result.success > 0:
        console.print(
            f"[green]✓[/green] Successfully {done} [green]{result.success}[/green] "
            "days of time entries"
        )
    if result.failed > 0:
        action = "simulate" if simulate else "create"
        console.print(
            f"[red]✗[/red] Failed to {action} [red]{result.failed}[/red] "
            "days of time entries"
        )
        for day, message in result.failures:
            console.print(f"  [dim]{day.isoformat()}[/dim]: {escape(message)}")
    if result.total == 0:
        console.print("[yellow]No working days to process[/yellow]")


def display_simulate_hint(console: Console, year: int, month: int) -> None:
    """Tell the user how to run the simulated month for real."""
    console.print(
        "\n[cyan]To create these entries for real, run the same command "
        "without the --simulate flag:[/cyan]"
    )
    console.print(f"[green]clockify-bulk {month} {year}[/green]")
