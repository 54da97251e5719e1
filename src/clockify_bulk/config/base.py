"""Configuration management for clockify-bulk.

This module handles loading and saving the persisted defaults, and resolving
them together with command-line overrides and interactive answers into the
settings used for a run.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import ValidationError

from clockify_bulk.config.interactive import run_interactive_wizard
from clockify_bulk.models import Settings, StoredDefaults
from clockify_bulk.utils.env import get_config_dir

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Configuration-related error."""

    pass


class ConfigRepository(Protocol):
    """Storage of the defaults remembered between runs."""

    def load(self) -> StoredDefaults:
        """Load stored defaults (possibly incomplete)."""
        ...

    def save(self, settings: Settings) -> None:
        """Remember the given settings as the new defaults."""
        ...


class Configurator:
    """YAML-file backed configuration repository.

    Examples:
        # Use default path
        config = Configurator()
        defaults = config.load()

        # Use custom path (useful for testing)
        config = Configurator(settings_path="/tmp/test-settings.yaml")
        config.save(settings)
    """

    def __init__(self, settings_path: Path | str | None = None) -> None:
        """Initialize configuration manager.

        Args:
            settings_path: Path to settings.yaml. If None, uses default
                location (~/.config/clockify-bulk/settings.yaml
                or $XDG_CONFIG_HOME/clockify-bulk/settings.yaml)
        """
        self.settings_path = (
            Path(settings_path) if settings_path else self._get_default_settings_path()
        )

    @staticmethod
    def _get_default_settings_path() -> Path:
        """Get default path for settings.yaml.

        Respects XDG_CONFIG_HOME and HOME environment variables.
        """
        return get_config_dir() / "settings.yaml"

    def load(self) -> StoredDefaults:
        """Load stored defaults from the settings file.

        A missing file is not an error: it yields empty defaults.

        Returns:
            Validated StoredDefaults instance

        Raises:
            ConfigError: If the settings file is invalid
        """
        if not self.settings_path.exists():
            logger.info("No settings file at %s, using defaults", self.settings_path)
            return StoredDefaults()

        try:
            return StoredDefaults.from_yaml_file(self.settings_path)
        except yaml.YAMLError as e:
            raise ConfigError(
                f"Invalid YAML in configuration file:\n{e}\n\n"
                f"Please check {self.settings_path} for syntax errors."
            ) from e
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"Invalid configuration:\n{e}\n\n"
                "Please run 'clockify-bulk --configure' to update your "
                "configuration."
            ) from e

    def save(self, settings: Settings) -> None:
        """Save settings as the new stored defaults.

        Raises:
            ConfigError: If the settings file cannot be written
        """
        try:
            StoredDefaults.from_settings(settings).to_yaml_file(self.settings_path)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration: {e}") from e
        logger.info("Saved configuration to %s", self.settings_path)


@dataclass
class SettingsOverrides:
    """Command-line values that take precedence over stored defaults."""

    description: str | None = None
    start_hour: int | None = None
    end_hour: int | None = None
    lunch_break: bool | None = None

    def apply(self, defaults: StoredDefaults) -> StoredDefaults:
        """Return a copy of the defaults with the overrides applied."""
        update = {
            name: value
            for name, value in (
                ("description", self.description),
                ("start_hour", self.start_hour),
                ("end_hour", self.end_hour),
                ("lunch_break", self.lunch_break),
            )
            if value is not None
        }
        return defaults.model_copy(update=update)

    def is_empty(self) -> bool:
        """Whether no override was given."""
        return all(
            value is None
            for value in (
                self.description,
                self.start_hour,
                self.end_hour,
                self.lunch_break,
            )
        )


def _build_settings(defaults: StoredDefaults) -> Settings:
    """Validate stored defaults into complete settings.

    Raises:
        ConfigError: If a required field is missing or a value is invalid
    """
    missing = defaults.missing_required()
    if missing:
        raise ConfigError(
            f"Missing required configuration: {', '.join(missing)}\n\n"
            "Run 'clockify-bulk --configure' in a terminal to set them."
        )
    try:
        return Settings(**defaults.model_dump())
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration:\n{e}") from e


def resolve_settings(
    repository: ConfigRepository,
    overrides: SettingsOverrides | None = None,
    *,
    interactive: bool = True,
    reconfigure: bool = False,
    save_defaults: bool = False,
) -> Settings:
    """Resolve the settings for a run.

    Stored defaults are loaded, command-line overrides applied on top, and
    the user is prompted when asked to reconfigure or when a required field
    is missing. Interactively collected settings are saved back, as are
    overrides when save_defaults is set.

    Args:
        repository: Where defaults are loaded from and saved to
        overrides: Command-line overrides
        interactive: Whether prompting is possible (stdin is a terminal)
        reconfigure: Prompt for every field even if all are stored
        save_defaults: Persist the overrides as new defaults

    Returns:
        Validated settings

    Raises:
        ConfigError: If required fields are missing and cannot be prompted
            for, or any value is invalid
    """
    overrides = overrides or SettingsOverrides()
    defaults = overrides.apply(repository.load())

    prompted = interactive and (reconfigure or bool(defaults.missing_required()))
    if prompted:
        defaults = run_interactive_wizard(defaults)

    # Non-interactive runs with missing fields fail here, before any request
    settings = _build_settings(defaults)

    if prompted or (save_defaults and not overrides.is_empty()):
        repository.save(settings)

    return settings


# Convenience functions that use default paths


def get_config_path() -> Path:
    """Return path to default settings.yaml file.

    Returns:
        Path to the settings.yaml file (may not exist yet)
    """
    return Configurator._get_default_settings_path()
