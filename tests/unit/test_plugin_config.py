"""
Unit tests for plugin configuration loading.
"""

import pytest

from xliff_aggregator.core.config import (
    ConfigurationError,
    PluginConfigBuilder,
    PluginConfigLoader,
)

VALID_CONFIG = """
project:
  id: feelgood
  source_locale: en-GB
  root_dir: /src/feelgood

canonical_file: Localizations/en-GB.xliff

importer:
  enabled: true
  executable: /usr/bin/xcodebuild
  localization_path: ./Localizations/en-GB.xliff
  project_container: Feelgood.xcodeproj

logging:
  level: DEBUG
  format: text
"""


@pytest.fixture(autouse=True)
def no_env_override(monkeypatch):
    monkeypatch.delenv("XCODEBUILD_PATH", raising=False)


class TestPluginConfigLoader:
    """Tests for PluginConfigLoader"""

    def test_load_full_config(self, tmp_path):
        path = tmp_path / "plugin.yaml"
        path.write_text(VALID_CONFIG)

        settings = PluginConfigLoader(path).load()

        assert settings.project.id == "feelgood"
        assert settings.project.source_locale == "en-GB"
        assert settings.canonical_file == "Localizations/en-GB.xliff"
        assert settings.importer.executable == "/usr/bin/xcodebuild"
        assert settings.localization_path == "./Localizations/en-GB.xliff"
        assert settings.project_container == "Feelgood.xcodeproj"
        assert settings.logging.level == "DEBUG"
        assert settings.logging.format == "text"

    def test_defaults(self, tmp_path):
        path = tmp_path / "plugin.yaml"
        path.write_text("project:\n  id: feelgood\n")

        settings = PluginConfigLoader(path).load()

        assert settings.canonical_file == "en-US.xliff"
        assert settings.project.source_locale == "en-US"
        assert settings.importer.enabled is True
        assert settings.importer.executable == "xcodebuild"
        assert settings.localization_path == "./en-US.xliff"
        assert settings.project_container == "feelgood.xcodeproj"
        assert settings.logging.format == "json"

    def test_default_localization_path_is_normalized(self, tmp_path):
        path = tmp_path / "plugin.yaml"
        path.write_text("project:\n  id: feelgood\ncanonical_file: ./Localizations/./en-US.xliff\n")

        settings = PluginConfigLoader(path).load()

        assert settings.localization_path == "./Localizations/en-US.xliff"

    def test_to_project(self, tmp_path):
        path = tmp_path / "plugin.yaml"
        path.write_text(VALID_CONFIG)

        project = PluginConfigLoader(path).load().to_project()

        assert project.project_id == "feelgood"
        assert project.source_locale == "en-GB"
        assert project.root_dir == "/src/feelgood"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            PluginConfigLoader(tmp_path / "missing.yaml")

    def test_missing_project_section(self, tmp_path):
        path = tmp_path / "plugin.yaml"
        path.write_text("canonical_file: en-US.xliff\n")

        with pytest.raises(ConfigurationError, match="'project' section"):
            PluginConfigLoader(path).load()

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "plugin.yaml"
        path.write_text("project: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            PluginConfigLoader(path).load()

    def test_invalid_source_locale(self, tmp_path):
        path = tmp_path / "plugin.yaml"
        path.write_text("project:\n  id: feelgood\n  source_locale: en_US\n")

        with pytest.raises(ConfigurationError, match="source_locale"):
            PluginConfigLoader(path).load()

    def test_canonical_file_traversal_rejected(self, tmp_path):
        path = tmp_path / "plugin.yaml"
        path.write_text("project:\n  id: feelgood\ncanonical_file: ../en-US.xliff\n")

        with pytest.raises(ConfigurationError, match="path traversal"):
            PluginConfigLoader(path).load()

    def test_env_overrides_executable(self, tmp_path, monkeypatch):
        path = tmp_path / "plugin.yaml"
        path.write_text(VALID_CONFIG)
        monkeypatch.setenv("XCODEBUILD_PATH", "/opt/xcode/bin/xcodebuild")

        settings = PluginConfigLoader(path).load()

        assert settings.importer.executable == "/opt/xcode/bin/xcodebuild"
        assert settings.importer.project_container == "Feelgood.xcodeproj"

    def test_shipped_config_loads(self):
        from pathlib import Path

        shipped = Path(__file__).resolve().parents[2] / "config" / "xliff_plugin.yaml"

        settings = PluginConfigLoader(shipped).load()

        assert settings.canonical_file == "en-US.xliff"


class TestPluginConfigBuilder:
    """Tests for PluginConfigBuilder"""

    def test_builder(self):
        settings = (
            PluginConfigBuilder("feelgood", source_locale="fr-FR")
            .with_root_dir("/src")
            .with_canonical_file("fr-FR.xliff")
            .with_importer(enabled=False)
            .build()
        )

        assert settings.project.source_locale == "fr-FR"
        assert settings.project.root_dir == "/src"
        assert settings.canonical_file == "fr-FR.xliff"
        assert settings.importer.enabled is False

    def test_builder_validates(self):
        with pytest.raises(ConfigurationError):
            PluginConfigBuilder("").build()
