"""Clockify HTTP client for creating time entries."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import requests

from clockify_bulk.clockify.models import SubmissionError
from clockify_bulk.models import TimeEntry, to_utc_iso

logger = logging.getLogger(__name__)


class ClockifyClient:
    """Client for the Clockify time entries API.

    One POST per entry, sequentially. There is no timeout unless one is
    given, so a hanging server blocks the run.

    Examples:
        with ClockifyClient(settings.api_base_url, settings.auth_token) as client:
            client.create_time_entry(settings.workspace_id, entry)
    """

    def __init__(
        self,
        base_url: str,
        auth_token: str,
        *,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize ClockifyClient.

        Args:
            base_url: Regional API base URL (e.g., https://eu-central-1.api.clockify.me)
            auth_token: Clockify API token
            session: HTTP session to use (a new one is created if None)
            timeout: Per-request timeout in seconds (None waits forever)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(
            {
                "accept": "application/json",
                "content-type": "application/json",
                "x-auth-token": auth_token,
            }
        )

    def __enter__(self) -> ClockifyClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.session.close()

    def time_entries_url(self, workspace_id: str) -> str:
        """URL of the "create full time entry" endpoint of a workspace."""
        return f"{self.base_url}/workspaces/{workspace_id}/timeEntries/full"

    def create_time_entry(
        self, workspace_id: str, entry: TimeEntry
    ) -> dict[str, Any]:
        """Create one time entry.

        Args:
            workspace_id: Clockify workspace ID
            entry: The entry to create

        Returns:
            The created entry as returned by Clockify

        Raises:
            SubmissionError: On a non-2xx response or a network failure
        """
        url = self.time_entries_url(workspace_id)
        logger.debug(
            "Creating time entry %s - %s in workspace %s",
            to_utc_iso(entry.start),
            to_utc_iso(entry.end),
            workspace_id,
        )

        try:
            response = self.session.post(
                url, json=entry.to_payload(), timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise SubmissionError(f"Request failed: {e}") from e

        if not response.ok:
            logger.warning(
                "Clockify returned %s %s: %s",
                response.status_code,
                response.reason,
                response.text,
            )
            raise SubmissionError(
                f"{response.status_code} {response.reason}",
                status_code=response.status_code,
                status_text=response.reason,
            )

        try:
            return response.json()
        except ValueError:
            # Created, but the body is not JSON; nothing else to report
            logger.debug("Non-JSON response body for created entry")
            return {}
