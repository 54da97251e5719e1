"""Client protocol for time entry submission.

Lets the submitter work with the real HTTP client in production and with
fakes in tests.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from clockify_bulk.models import TimeEntry


@runtime_checkable
class TimeEntryClient(Protocol):
    """Protocol for creating time entries in a workspace."""

    def create_time_entry(
        self, workspace_id: str, entry: TimeEntry
    ) -> dict[str, Any]:
        """Create one time entry.

        Args:
            workspace_id: Clockify workspace ID
            entry: The entry to create

        Returns:
            The created entry as returned by the service

        Raises:
            SubmissionError: If the entry could not be created
        """
        ...
