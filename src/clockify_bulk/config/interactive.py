"""Interactive configuration wizard for clockify-bulk.

This module handles the interactive questionnaire-based configuration setup,
separated from the core configuration management logic.
"""

from collections.abc import Callable

import questionary

from clockify_bulk.models import (
    LUNCH_EARLIEST_START,
    LUNCH_LATEST_END,
    MAX_HOUR,
    MIN_HOUR,
    Fields,
    StoredDefaults,
)

# All prompts use unsafe_ask() so Ctrl+C raises KeyboardInterrupt
# instead of returning None


def _not_empty(message: str) -> Callable[[str], bool | str]:
    """Build a questionary validator rejecting blank answers."""
    return lambda x: len(x.strip()) > 0 or message


def _is_hour(value: str) -> bool:
    return value.strip().isdigit() and MIN_HOUR <= int(value) <= MAX_HOUR


def _check_start_hour(value: str, *, lunch_break: bool) -> bool | str:
    """Validate a start hour, leaving room for the morning entry."""
    if not _is_hour(value):
        return f"Hour must be between {MIN_HOUR} and {MAX_HOUR}"
    if lunch_break and int(value) >= LUNCH_EARLIEST_START:
        return "With a lunch break the day must start before 11:30"
    return True


def _check_end_hour(value: str, start_hour: int, *, lunch_break: bool) -> bool | str:
    """Validate an end hour, leaving room for the afternoon entry."""
    if not _is_hour(value) or int(value) <= start_hour:
        return f"Hour must be between {start_hour + 1} and {MAX_HOUR}"
    if lunch_break and int(value) <= LUNCH_LATEST_END:
        return "With a lunch break the day must end after 14:00"
    return True


def _fits_lunch_window(start_hour: int, end_hour: int) -> bool:
    return start_hour < LUNCH_EARLIEST_START and end_hour > LUNCH_LATEST_END


def run_interactive_wizard(defaults: StoredDefaults) -> StoredDefaults:
    """Run interactive configuration wizard.

    Every prompt is prefilled with the stored (or overridden) value.

    Args:
        defaults: Current defaults to prefill the prompts with

    Returns:
        Defaults updated with the user's answers
    """
    questionary.print("Clockify configuration:", style="bold")

    workspace_id = questionary.text(
        "Enter your Clockify workspace ID:",
        default=defaults.workspace_id or "",
        validate=_not_empty("Workspace ID is required"),
    ).unsafe_ask()

    project_id = questionary.text(
        "Enter your Clockify project ID:",
        default=defaults.project_id or "",
        validate=_not_empty("Project ID is required"),
    ).unsafe_ask()
    auth_token = questionary.password(
        "Enter your Clockify auth token:",
        default=defaults.auth_token or "",
        validate=_not_empty("Auth token is required"),
    ).unsafe_ask()

    description = questionary.text(
        "Time entry description:",
        default=defaults.description,
    ).unsafe_ask()

    questionary.print("\nWorking Hours:", style="bold")

    # Asked first: it narrows the hours that are accepted below
    lunch_break = questionary.confirm(
        "Split each day around a random 1-hour lunch break?",
        default=defaults.lunch_break,
    ).unsafe_ask()

    start_default, end_default = defaults.start_hour, defaults.end_hour
    if lunch_break and not _fits_lunch_window(start_default, end_default):
        start_default = Fields(StoredDefaults).start_hour.default
        end_default = Fields(StoredDefaults).end_hour.default

    start_hour = questionary.text(
        f"Enter start hour ({MIN_HOUR}-{MAX_HOUR}):",
        default=str(start_default),
        validate=lambda x: _check_start_hour(x, lunch_break=lunch_break),
    ).unsafe_ask()

    end_hour = questionary.text(
        f"Enter end hour ({MIN_HOUR}-{MAX_HOUR}):",
        default=str(end_default),
        validate=lambda x: _check_end_hour(
            x, int(start_hour), lunch_break=lunch_break
        ),
    ).unsafe_ask()

    return defaults.model_copy(
        update={
            "workspace_id": workspace_id.strip(),
            "project_id": project_id.strip(),
            "auth_token": auth_token.strip(),
            "description": description,
            "start_hour": int(start_hour),
            "end_hour": int(end_hour),
            "lunch_break": lunch_break,
        }
    )
