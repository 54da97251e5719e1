"""Time entry submission for a single working day."""

from __future__ import annotations

import logging
from datetime import date

from clockify_bulk.clockify.models import SubmissionError
from clockify_bulk.clockify.protocols import TimeEntryClient
from clockify_bulk.models import DaySubmission, Settings, TimeEntry
from clockify_bulk.timing import (
    RandomSource,
    build_intervals,
    default_random_source,
    draw_lunch_start,
)

logger = logging.getLogger(__name__)

SPLIT_LABELS = ("morning", "afternoon")
SINGLE_LABEL = "day"


def entry_labels(entries: list[TimeEntry]) -> list[str]:
    """Human-readable names of a day's entries, in order."""
    if len(entries) == len(SPLIT_LABELS):
        return list(SPLIT_LABELS)
    return [SINGLE_LABEL] * len(entries)


class TimeEntrySubmitter:
    """Computes and submits the time entries of a working day.

    In simulate mode the client is never called; the computed entries are
    returned for inspection instead.
    """

    def __init__(
        self,
        client: TimeEntryClient | None,
        rng: RandomSource | None = None,
        *,
        simulate: bool = False,
    ) -> None:
        """Initialize TimeEntrySubmitter.

        Args:
            client: Client used to create entries (may be None when simulating)
            rng: Source of the lunch break draw (unseeded if None)
            simulate: Compute entries without sending them

        Raises:
            ValueError: If no client is given outside simulate mode
        """
        if client is None and not simulate:
            raise ValueError("A client is required unless simulating")
        self.client = client
        self.rng = rng or default_random_source()
        self.simulate = simulate

    def plan(self, settings: Settings, day: date) -> list[TimeEntry]:
        """Compute the entries for a day without submitting them.

        Draws a new lunch break on every call when lunch_break is enabled.
        """
        lunch_start = draw_lunch_start(self.rng) if settings.lunch_break else None
        intervals = build_intervals(
            day, settings.start_hour, settings.end_hour, lunch_start
        )
        return [TimeEntry.from_interval(interval, settings) for interval in intervals]

    def submit(self, settings: Settings, day: date) -> DaySubmission:
        """Compute and submit the entries for a day.

        Entries are sent one by one. A failed entry stops the day, but
        entries already created are not rolled back.

        Args:
            settings: Run settings
            day: The working day

        Returns:
            The submitted (or simulated) entries and the service responses

        Raises:
            SubmissionError: If an entry could not be created
        """
        entries = self.plan(settings, day)

        if self.simulate:
            logger.debug("Simulated %d entries for %s", len(entries), day)
            return DaySubmission(day=day, entries=entries, simulated=True)

        # Checked in __init__
        assert self.client is not None

        responses = []
        for label, entry in zip(entry_labels(entries), entries, strict=True):
            try:
                responses.append(
                    self.client.create_time_entry(settings.workspace_id, entry)
                )
            except SubmissionError as e:
                raise SubmissionError(
                    f"Failed to create {label} time entry: {e}",
                    status_code=e.status_code,
                    status_text=e.status_text,
                ) from e
            logger.info("Created %s time entry for %s", label, day)

        return DaySubmission(day=day, entries=entries, responses=responses)
