"""Clockify exceptions."""

from __future__ import annotations


class ClockifyError(Exception):
    """Base exception for Clockify errors."""

    pass


class SubmissionError(ClockifyError):
    """Creating a time entry failed.

    Raised for a non-2xx response (status code and status text are kept)
    and for network failures (no status code).
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        status_text: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status_text = status_text
