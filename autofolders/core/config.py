"""
Configuration for the journal organizer.

Two layers:

- ``AppSettings``: process settings from the environment (``AUTOFOLDERS_*``)
  or a ``.env`` file - where the vault and its settings file live.
- ``JournalSettings``: the organizer's own settings, persisted as JSON in
  the vault with camelCase keys and merged over defaults on load.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .dates import is_valid_format

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a setting is unknown or its value is not acceptable."""


class PlacementCheck(str, Enum):
    """How to decide that a file already sits in its target folder."""

    PREFIX = "prefix"  # textual startswith, "j/2025/1" matches "j/2025/10/x"
    SEGMENT = "segment"  # whole path segments only


class JournalSettings(BaseModel):
    """Snapshot of the organizer settings."""

    base_journal_folder: str = Field(
        default="1 - journal",
        description="Folder where yearly and monthly folders are created",
    )
    create_year_folders: bool = Field(
        default=True,
        description="Create folders for each year (folders are currently always created)",
    )
    create_month_folders: bool = Field(
        default=True,
        description="Create folders for each month (folders are currently always created)",
    )
    daily_note_format: str = Field(
        default="YYYY-MM-DD",
        description="Format of daily note file names",
    )
    monthly_folder_format: str = Field(
        default="MM-YYYY",
        description="Format of monthly folder names",
    )
    yearly_folder_format: str = Field(
        default="YYYY",
        description="Format of yearly folder names",
    )
    placement_check: PlacementCheck = Field(
        default=PlacementCheck.PREFIX,
        description="How an already filed note is recognised",
    )

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator(
        "base_journal_folder",
        "daily_note_format",
        "monthly_folder_format",
        "yearly_folder_format",
    )
    @classmethod
    def strip_whitespace(cls, value: str) -> str:
        return value.strip()

    @field_validator("base_journal_folder")
    @classmethod
    def strip_slashes(cls, value: str) -> str:
        return value.strip("/")

    @field_validator("base_journal_folder")
    @classmethod
    def stay_inside_vault(cls, value: str) -> str:
        if ".." in value.split("/"):
            raise ValueError("Base journal folder must stay inside the vault")
        return value

    def invalid_formats(self) -> Dict[str, str]:
        """Return the format fields whose pattern cannot be used."""
        return {
            name: getattr(self, name)
            for name in FORMAT_FIELDS
            if not is_valid_format(getattr(self, name))
        }


FORMAT_FIELDS = ("daily_note_format", "monthly_folder_format", "yearly_folder_format")


class AppSettings(BaseSettings):
    """Process settings loaded from environment variables."""

    vault_path: Path = Path(".")
    settings_file: Path = Path(".autofolders.json")
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="AUTOFOLDERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def settings_path(self, vault_path: Optional[Path] = None) -> Path:
        """Resolve the settings file, relative paths being inside the vault."""
        if self.settings_file.is_absolute():
            return self.settings_file
        return Path(vault_path or self.vault_path) / self.settings_file


def resolve_field(key: str) -> str:
    """
    Map a persisted (camelCase) or python (snake_case) key to a field name.

    Raises:
        ConfigurationError: If the key names no setting
    """
    for name, field in JournalSettings.model_fields.items():
        if key in (name, field.alias):
            return name
    raise ConfigurationError(f"Unknown setting: {key}")


def describe_change(name: str, value: Any) -> str:
    """Human readable notice for a changed setting."""
    if name == "create_year_folders":
        return f"Yearly folder creation: {'Enabled' if value else 'Disabled'}"
    if name == "create_month_folders":
        return f"Monthly folder creation: {'Enabled' if value else 'Disabled'}"
    if isinstance(value, Enum):
        value = value.value
    label = name.replace("_", " ").capitalize()
    return f"{label} set to: {value}"


class SettingsStore:
    """Loads and persists ``JournalSettings`` as a JSON file."""

    def __init__(self, path: Path):
        """
        Initialize settings store.

        Args:
            path: JSON settings file (need not exist yet)
        """
        self.path = Path(path)

    def load(self) -> JournalSettings:
        """
        Load settings merged over defaults.

        Missing files, missing keys and invalid values fall back to the
        defaults; unknown keys are ignored.

        Returns:
            Settings snapshot
        """
        if not self.path.exists():
            logger.debug(f"No settings file at {self.path}, using defaults")
            return JournalSettings()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read settings from {self.path}: {e}")
            return JournalSettings()

        if not isinstance(data, dict):
            logger.warning(f"Settings file {self.path} is not a JSON object, ignoring")
            return JournalSettings()

        merged: Dict[str, Any] = {}
        for name, field in JournalSettings.model_fields.items():
            if field.alias in data:
                value = data[field.alias]
            elif name in data:
                value = data[name]
            else:
                continue

            try:
                JournalSettings.model_validate({name: value})
            except ValidationError:
                logger.warning(f"Ignoring invalid value for {field.alias}: {value!r}")
                continue
            merged[name] = value

        settings = JournalSettings.model_validate(merged)

        # Kept as is: an unusable pattern only makes every parse fail
        for name, pattern in settings.invalid_formats().items():
            logger.warning(f"Invalid date format for {name}: {pattern!r}")

        return settings

    def save(self, settings: JournalSettings) -> None:
        """Persist the full settings object."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = settings.model_dump(by_alias=True, mode="json")
        self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")

    def update(self, settings: JournalSettings, key: str, value: Any) -> JournalSettings:
        """
        Change one setting, persist the result and return the new snapshot.

        Args:
            settings: Current snapshot
            key: Setting name (camelCase or snake_case)
            value: New value; strings are coerced to the field type

        Returns:
            New settings snapshot

        Raises:
            ConfigurationError: If the key is unknown or the value invalid
        """
        name = resolve_field(key)

        try:
            updated = JournalSettings.model_validate(
                {**settings.model_dump(), name: value}
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid value for {key}: {value!r}") from e

        if name in FORMAT_FIELDS and not is_valid_format(getattr(updated, name)):
            raise ConfigurationError(
                f"Invalid date format for {key}: {getattr(updated, name)!r}"
            )

        self.save(updated)
        logger.info(describe_change(name, getattr(updated, name)))
        return updated
