"""
Pytest configuration and fixtures for xliff-aggregator tests

This module provides shared fixtures for unit, integration, and E2E tests.
"""
import pytest

from tests.fakes import FakeImporter
from xliff_aggregator.core.config import PluginConfigBuilder, PluginSettings
from xliff_aggregator.core.models import Project, ResourceRecord


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests that don't touch the file system or processes"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that write real files"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests that drive the command-line interface"
    )
    config.addinivalue_line(
        "markers", "slow: Tests that take more than 5 seconds to run"
    )


# =======================
# MODEL FIXTURES
# =======================

@pytest.fixture
def project() -> Project:
    return Project(project_id="feelgood", source_locale="en-US", root_dir=".")


@pytest.fixture
def settings() -> PluginSettings:
    return (
        PluginConfigBuilder("feelgood")
        .with_importer(project_container="feelgood.xcodeproj")
        .build()
    )


@pytest.fixture
def make_record():
    """
    Factory for ResourceRecords with sensible defaults

    Usage:
        record = make_record("greeting", source="Hello")
    """

    def _make(reskey: str, source: str | None = None, **fields) -> ResourceRecord:
        defaults = {
            "source": source if source is not None else f"Source for {reskey}",
            "project": "feelgood",
            "source_locale": "en-US",
            "path_name": "Feelgood/Base.lproj/Main.strings",
            "datatype": "x-strings",
        }
        defaults.update(fields)
        return ResourceRecord(reskey=reskey, **defaults)

    return _make


@pytest.fixture
def fake_importer() -> FakeImporter:
    return FakeImporter()


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture
def xliff_path(tmp_path) -> str:
    """Path to a not-yet-existing aggregate xliff file in a temp dir"""
    return str(tmp_path / "en-US.xliff")
