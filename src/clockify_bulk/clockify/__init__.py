"""Clockify integration package for creating time entries."""

from clockify_bulk.clockify.client import ClockifyClient
from clockify_bulk.clockify.models import ClockifyError, SubmissionError
from clockify_bulk.clockify.protocols import TimeEntryClient
from clockify_bulk.clockify.submitter import TimeEntrySubmitter, entry_labels

__all__ = [
    "ClockifyClient",
    "ClockifyError",
    "SubmissionError",
    "TimeEntryClient",
    "TimeEntrySubmitter",
    "entry_labels",
]
