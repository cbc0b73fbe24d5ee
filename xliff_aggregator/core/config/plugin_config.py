"""
Plugin configuration management.

Loads plugin settings from YAML files into Pydantic models and provides
a builder for programmatic configuration (tests, embedding hosts).
"""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from xliff_aggregator.core.models import Project
from xliff_aggregator.utils.validation import (
    ValidationError as InputValidationError,
    validate_file_path,
    validate_locale_spec,
)

DEFAULT_CANONICAL_FILE = "en-US.xliff"
DEFAULT_IMPORTER_EXECUTABLE = "xcodebuild"


class ConfigurationError(ValueError):
    """Raised when the plugin configuration is missing or invalid."""
    pass


class ProjectSettings(BaseModel):
    """Project the plugin serves."""

    id: str = Field(..., min_length=1)
    source_locale: str = "en-US"
    root_dir: str = "."

    @field_validator("source_locale")
    @classmethod
    def check_source_locale(cls, v):
        try:
            return validate_locale_spec(v, "source_locale")
        except InputValidationError as e:
            raise ValueError(str(e)) from e


class ImporterSettings(BaseModel):
    """
    External importer settings.

    localization_path and project_container are filled in from the
    canonical file name and the project id when left empty.
    """

    enabled: bool = True
    executable: str = DEFAULT_IMPORTER_EXECUTABLE
    localization_path: str | None = None
    project_container: str | None = None


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "text"] = "json"


class PluginSettings(BaseModel):
    """
    Complete plugin configuration.

    Attributes:
        project: Project id, source locale and root directory
        canonical_file: The single file name the plugin claims
        importer: External importer settings
        logging: Log level and format
    """

    project: ProjectSettings
    canonical_file: str = DEFAULT_CANONICAL_FILE
    importer: ImporterSettings = Field(default_factory=ImporterSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("canonical_file")
    @classmethod
    def check_canonical_file(cls, v):
        try:
            return validate_file_path(v, "canonical_file")
        except InputValidationError as e:
            raise ValueError(str(e)) from e

    class Config:
        json_schema_extra = {
            "example": {
                "project": {"id": "feelgood", "source_locale": "en-US", "root_dir": "."},
                "canonical_file": "en-US.xliff",
                "importer": {
                    "enabled": True,
                    "executable": "xcodebuild",
                    "localization_path": "./en-US.xliff",
                    "project_container": "feelgood.xcodeproj"
                },
                "logging": {"level": "INFO", "format": "json"}
            }
        }

    def to_project(self) -> Project:
        return Project(
            project_id=self.project.id,
            source_locale=self.project.source_locale,
            root_dir=self.project.root_dir,
        )

    @property
    def localization_path(self) -> str:
        return self.importer.localization_path or f"./{os.path.normpath(self.canonical_file)}"

    @property
    def project_container(self) -> str:
        return self.importer.project_container or f"{self.project.id}.xcodeproj"


class PluginConfigLoader:
    """
    Loads plugin settings from YAML configuration files.

    Expected YAML format:
    ```yaml
    project:
      id: feelgood
      source_locale: en-US
      root_dir: .

    canonical_file: en-US.xliff

    importer:
      enabled: true
      executable: xcodebuild
      localization_path: ./en-US.xliff
      project_container: feelgood.xcodeproj

    logging:
      level: INFO
      format: json
    ```

    The XCODEBUILD_PATH environment variable overrides importer.executable.
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the plugin config loader.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            ConfigurationError: If the file does not exist
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise ConfigurationError(f"Plugin configuration file not found: {config_path}")

    def load(self) -> PluginSettings:
        """
        Load and validate plugin settings.

        Returns:
            Validated PluginSettings

        Raises:
            ConfigurationError: If YAML is invalid or settings fail validation
        """
        try:
            with open(self.config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {self.config_path}: {e}") from e

        if not isinstance(config, dict) or "project" not in config:
            raise ConfigurationError("Configuration file must contain a 'project' section")

        return self.from_dict(config)

    @staticmethod
    def from_dict(config: dict[str, Any]) -> PluginSettings:
        """
        Build settings from an already-parsed mapping, applying env overrides.

        Raises:
            ConfigurationError: If settings fail validation
        """
        executable = os.getenv("XCODEBUILD_PATH")
        if executable:
            importer = dict(config.get("importer") or {})
            importer["executable"] = executable
            config = {**config, "importer": importer}

        try:
            return PluginSettings.model_validate(config)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid plugin configuration: {e}") from e


class PluginConfigBuilder:
    """
    Programmatically build plugin settings (for testing or embedding hosts).
    """

    def __init__(self, project_id: str, source_locale: str = "en-US"):
        self.config: dict[str, Any] = {
            "project": {"id": project_id, "source_locale": source_locale},
        }

    def with_root_dir(self, root_dir: str) -> "PluginConfigBuilder":
        self.config["project"]["root_dir"] = root_dir
        return self

    def with_canonical_file(self, canonical_file: str) -> "PluginConfigBuilder":
        self.config["canonical_file"] = canonical_file
        return self

    def with_importer(
        self,
        enabled: bool = True,
        executable: str | None = None,
        localization_path: str | None = None,
        project_container: str | None = None,
    ) -> "PluginConfigBuilder":
        """Set importer options; None leaves the default in place."""
        importer: dict[str, Any] = {"enabled": enabled}
        if executable:
            importer["executable"] = executable
        if localization_path:
            importer["localization_path"] = localization_path
        if project_container:
            importer["project_container"] = project_container
        self.config["importer"] = importer
        return self

    def build(self) -> PluginSettings:
        return PluginConfigLoader.from_dict(self.config)
