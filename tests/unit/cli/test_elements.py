"""Tests for CLI elements module."""

from datetime import date, datetime

import pytest

from clockify_bulk.cli import elements
from clockify_bulk.clockify import TimeEntrySubmitter
from clockify_bulk.models import DaySubmission, RunResult, Settings
from tests.unit.clockify.fakes import FixedRandom


def _settings(**overrides) -> Settings:
    data = {
        "workspace_id": "ws-1",
        "project_id": "proj-1",
        "auth_token": "token-1",
        "description": "dev work",
    }
    data.update(overrides)
    return Settings(**data)


def _simulated(settings: Settings, *days: date) -> list[DaySubmission]:
    submitter = TimeEntrySubmitter(None, FixedRandom(0.0), simulate=True)
    return [submitter.submit(settings, day) for day in days]


class TestFormatting:
    """Tests for formatting helpers."""

    @pytest.mark.unit
    def test_format_time(self):
        """Test times are shown as HH:MM."""
        assert elements.format_time(datetime(2024, 6, 3, 9, 5)) == "09:05"

    @pytest.mark.unit
    def test_format_month(self):
        """Test months are shown by name."""
        assert elements.format_month(2024, 10) == "October 2024"


class TestDisplayRunHeader:
    """Tests for display_run_header function."""

    @pytest.mark.unit
    def test_live_run_with_lunch(self, console, console_output):
        """Test live header mentions the lunch break."""
        elements.display_run_header(console, _settings(), 2024, 6, simulate=False)

        output = console_output()
        assert 'Creating entries for June 2024 with description "dev work"' in output
        assert "random 1-hour lunch break" in output
        assert "SIMULATION MODE" not in output

    @pytest.mark.unit
    def test_simulated_single_mode(self, console, console_output):
        """Test simulation header shows the single work span."""
        settings = _settings(start_hour=8, end_hour=16, lunch_break=False)

        elements.display_run_header(console, settings, 2024, 6, simulate=True)

        output = console_output()
        assert "SIMULATION MODE: No entries will be created" in output
        assert "Simulating entries for June 2024" in output
        assert "single entry from 08:00 to 16:00" in output


class TestDisplaySimulationTable:
    """Tests for display_simulation_table function."""

    @pytest.mark.unit
    def test_split_columns(self, console, console_output):
        """Test split days show morning, lunch and afternoon."""
        submissions = _simulated(_settings(), date(2024, 6, 3), date(2024, 6, 4))

        elements.display_simulation_table(console, submissions, lunch_break=True)

        output = console_output()
        assert "Simulated time entries" in output
        for header in ("Date", "Morning", "Lunch", "Afternoon", "Description"):
            assert header in output
        assert "2024-06-03" in output
        assert "2024-06-04" in output
        assert "09:00 - 11:30" in output
        assert "11:30 - 12:30" in output
        assert "12:30 - 17:00" in output
        assert "dev work" in output

    @pytest.mark.unit
    def test_single_columns(self, console, console_output):
        """Test single days show one work span."""
        settings = _settings(lunch_break=False)
        submissions = _simulated(settings, date(2024, 6, 3))

        elements.display_simulation_table(console, submissions, lunch_break=False)

        output = console_output()
        assert "Work" in output
        assert "Lunch" not in output
        assert "09:00 - 17:00" in output

    @pytest.mark.unit
    def test_nothing_to_show(self, console, console_output):
        """Test no table is printed without submissions."""
        elements.display_simulation_table(console, [], lunch_break=True)

        assert console_output() == ""


class TestDisplaySummary:
    """Tests for display_summary function."""

    @pytest.mark.unit
    def test_success_only(self, console, console_output):
        """Test only the success line is shown when nothing failed."""
        result = RunResult()
        result.record_success(DaySubmission(day=date(2024, 6, 3), entries=[]))

        elements.display_summary(console, result, simulate=False)

        output = console_output()
        assert "Successfully created 1 days of time entries" in output
        assert "Failed" not in output

    @pytest.mark.unit
    def test_failures_listed(self, console, console_output):
        """Test failed days are listed with their errors."""
        result = RunResult()
        result.record_failure(date(2024, 6, 5), "Failed to create morning time entry")

        elements.display_summary(console, result, simulate=False)

        output = console_output()
        assert "Failed to create 1 days of time entries" in output
        assert "2024-06-05: Failed to create morning time entry" in output
        assert "Successfully" not in output

    @pytest.mark.unit
    def test_empty_run(self, console, console_output):
        """Test a run without working days says so."""
        elements.display_summary(console, RunResult(), simulate=True)

        assert "No working days to process" in console_output()


@pytest.mark.unit
def test_display_simulate_hint(console, console_output):
    """Test the hint shows the command for a real run."""
    elements.display_simulate_hint(console, 2024, 6)

    output = console_output()
    assert "without the --simulate flag" in output
    assert "clockify-bulk 6 2024" in output


class TestBracketedText:
    """Test user and error text is shown literally, not as rich markup."""

    @pytest.mark.unit
    @pytest.mark.parametrize("description", ["fix [/api] routes", "ticket [bold] x"])
    def test_header_keeps_brackets(self, console, console_output, description):
        """Test descriptions with brackets are printed as typed."""
        settings = _settings(description=description)

        elements.display_run_header(console, settings, 2024, 6, simulate=True)

        assert f'with description "{description}"' in console_output()

    @pytest.mark.unit
    def test_table_keeps_brackets(self, console, console_output):
        """Test the simulation table shows bracketed descriptions."""
        settings = _settings(description="ticket [bold] x")
        submissions = _simulated(settings, date(2024, 6, 3))

        elements.display_simulation_table(console, submissions, lunch_break=True)

        assert "ticket [bold] x" in console_output()

    @pytest.mark.unit
    def test_summary_keeps_brackets(self, console, console_output):
        """Test failure messages with brackets are listed as received."""
        result = RunResult()
        result.record_failure(date(2024, 6, 5), "Request failed: [/errno 111]")

        elements.display_summary(console, result, simulate=False)

        assert "2024-06-05: Request failed: [/errno 111]" in console_output()
