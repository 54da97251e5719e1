"""Pydantic data models for clockify-bulk configuration and time entries.

This module defines all data models used throughout the clockify-bulk
application, including configuration settings, time intervals and the
time entry payload sent to Clockify.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    model_validator,
)
from pydantic.fields import FieldInfo


class Fields:
    """Proxy class for accessing Pydantic model field info via attributes.

    Enables syntax like `Fields(StoredDefaults).start_hour.default` instead of
    `StoredDefaults.model_fields["start_hour"].default`.

    This avoids conflicts with Pydantic's metaclass which intercepts
    class-level attribute access.
    """

    def __init__(self, model_class: type[BaseModel]) -> None:
        """Initialize the accessor with a Pydantic model class."""
        self._model_class = model_class

    def __getattr__(self, name: str) -> FieldInfo:
        """Provide access to field info via attribute access."""
        return self._model_class.model_fields[name]


# Constants
MIN_HOUR = 0
MAX_HOUR = 23
DEFAULT_START_HOUR = 9
DEFAULT_END_HOUR = 17
DEFAULT_REGION = "eu-central-1"

# Lunch break window, in hours since midnight
LUNCH_EARLIEST_START = 11.5
LUNCH_LATEST_START = 13.0
LUNCH_DURATION_HOURS = 1.0
LUNCH_LATEST_END = LUNCH_LATEST_START + LUNCH_DURATION_HOURS

# Wire format of Clockify timestamps (matches JavaScript's toISOString)
ISO_UTC_FORMAT = "%Y-%m-%dT%H:%M:%S.000Z"


def _validate_not_empty_string(v: str) -> str:
    """Validate string is not empty or whitespace only."""
    if not v or not v.strip():
        raise ValueError("Field cannot be empty")
    return v.strip()


NonEmptyStr = Annotated[str, BeforeValidator(_validate_not_empty_string)]

Hour = Annotated[int, Field(ge=MIN_HOUR, le=MAX_HOUR)]


class Settings(BaseModel):
    """Configuration for a single bulk run.

    Combines the persisted defaults with command-line overrides and
    interactive answers. Frozen: the same settings are used for every day
    of the run.
    """

    model_config = ConfigDict(frozen=True)

    workspace_id: NonEmptyStr = Field(
        ...,
        description="Clockify workspace ID",
    )
    project_id: NonEmptyStr = Field(
        ...,
        description="Clockify project ID the entries are booked on",
    )
    auth_token: NonEmptyStr = Field(
        ...,
        description="Clockify API token sent as x-auth-token",
        repr=False,
    )
    description: str = Field(
        default="",
        description="Description attached to every time entry",
    )
    start_hour: Hour = Field(
        default=DEFAULT_START_HOUR,
        description=f"Hour the working day starts ({MIN_HOUR}-{MAX_HOUR})",
    )
    end_hour: Hour = Field(
        default=DEFAULT_END_HOUR,
        description=f"Hour the working day ends ({MIN_HOUR}-{MAX_HOUR})",
    )
    lunch_break: bool = Field(
        default=True,
        description="Split each day around a random one-hour lunch break",
    )
    region: NonEmptyStr = Field(
        default=DEFAULT_REGION,
        description="Clockify API region (e.g., 'eu-central-1')",
    )

    @model_validator(mode="after")
    def validate_hours(self) -> "Settings":
        """Validate the working hours leave room for the entries of a day.

        With a lunch break, the morning must start before the earliest
        possible lunch and the afternoon must end after the latest possible
        one, otherwise some draws would produce inverted entries.
        """
        if self.end_hour <= self.start_hour:
            raise ValueError(
                f"end_hour ({self.end_hour}) must be after "
                f"start_hour ({self.start_hour})"
            )
        if self.lunch_break:
            if self.start_hour >= LUNCH_EARLIEST_START:
                raise ValueError(
                    f"start_hour ({self.start_hour}) must be before the "
                    "lunch break window (11:30) when lunch_break is enabled"
                )
            if self.end_hour <= LUNCH_LATEST_END:
                raise ValueError(
                    f"end_hour ({self.end_hour}) must be after the "
                    "lunch break window (14:00) when lunch_break is enabled"
                )
        return self

    @property
    def api_base_url(self) -> str:
        """Base URL of the regional Clockify API."""
        return f"https://{self.region}.api.clockify.me"


class StoredDefaults(BaseModel):
    """Persisted defaults, loaded from ~/.config/clockify-bulk/settings.yaml.

    Every field is optional: a fresh installation has no stored
    workspace, project or token yet.
    """

    workspace_id: str | None = None
    project_id: str | None = None
    auth_token: str | None = Field(default=None, repr=False)
    description: str = ""
    start_hour: Hour = DEFAULT_START_HOUR
    end_hour: Hour = DEFAULT_END_HOUR
    lunch_break: bool = True
    region: str = DEFAULT_REGION

    def missing_required(self) -> list[str]:
        """Names of required fields that are not set (or blank)."""
        required = ("workspace_id", "project_id", "auth_token")
        return [name for name in required if not (getattr(self, name) or "").strip()]

    @classmethod
    def from_settings(cls, settings: Settings) -> "StoredDefaults":
        """Create stored defaults from a complete settings object."""
        return cls(**settings.model_dump())

    @classmethod
    def from_yaml_file(cls, path: Path) -> "StoredDefaults":
        """Load stored defaults from a YAML file.

        Raises:
            FileNotFoundError: If the settings file doesn't exist
            TypeError: If the YAML document is not a mapping
            ValueError: If validation fails
        """
        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise TypeError(
                f"Invalid settings file format in {path}: expected a mapping"
            )

        return cls(**data)

    def to_yaml_file(self, path: Path) -> None:
        """Save stored defaults to a YAML file readable by the owner only."""
        path.parent.mkdir(parents=True, exist_ok=True)

        data = self.model_dump(mode="python", exclude_none=True)

        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(
                data,
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )

        # The file holds the auth token
        path.chmod(0o600)


@dataclass(frozen=True)
class TimeInterval:
    """A time range within a single working day.

    Both ends are timezone-aware datetimes in the system local timezone.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        """Reject empty or inverted intervals."""
        if self.start >= self.end:
            raise ValueError(
                f"Interval start {self.start.isoformat()} must be before "
                f"end {self.end.isoformat()}"
            )


def to_utc_iso(value: datetime) -> str:
    """Format a timezone-aware datetime as a Clockify UTC timestamp."""
    return value.astimezone(UTC).strftime(ISO_UTC_FORMAT)


class TimeEntry(BaseModel):
    """A billable time entry to be created in Clockify."""

    model_config = ConfigDict(frozen=True)

    billable: bool = True
    description: str = ""
    project_id: str = Field(..., description="Clockify project ID")
    start: datetime = Field(..., description="Entry start (timezone-aware)")
    end: datetime = Field(..., description="Entry end (timezone-aware)")

    @classmethod
    def from_interval(
        cls, interval: TimeInterval, settings: Settings
    ) -> "TimeEntry":
        """Build an entry for the given interval using the run's settings."""
        return cls(
            description=settings.description,
            project_id=settings.project_id,
            start=interval.start,
            end=interval.end,
        )

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body for the Clockify "create time entry" call."""
        return {
            "billable": self.billable,
            "description": self.description,
            "projectId": self.project_id,
            "taskId": None,
            "tagIds": None,
            "customFields": [],
            "start": to_utc_iso(self.start),
            "end": to_utc_iso(self.end),
        }


@dataclass
class DaySubmission:
    """Outcome of submitting (or simulating) the entries of one working day."""

    day: date
    entries: list[TimeEntry]
    simulated: bool = False
    responses: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class RunResult:
    """Success and failure counters accumulated across a run."""

    success: int = 0
    failed: int = 0
    failures: list[tuple[date, str]] = field(default_factory=list)
    submissions: list[DaySubmission] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of days attempted."""
        return self.success + self.failed

    def record_success(self, submission: DaySubmission) -> None:
        """Count a day whose entries were all created (or simulated)."""
        self.success += 1
        self.submissions.append(submission)

    def record_failure(self, day: date, message: str) -> None:
        """Count a day that failed, keeping the error message."""
        self.failed += 1
        self.failures.append((day, message))
