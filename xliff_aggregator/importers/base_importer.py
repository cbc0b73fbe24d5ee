"""
Base importer interface for external build-tool imports.

All importers must inherit from BaseImporter and implement run().
"""

from abc import ABC, abstractmethod

from xliff_aggregator.core.models import ImportResult


class BaseImporter(ABC):
    """
    Abstract base class for importers.

    An importer ingests a persisted exchange file into a target project and
    reports the exit status and captured output. Implementations are
    synchronous: run() returns only after the import has finished.
    """

    def __init__(self, localization_path: str, project_container: str):
        """
        Initialize importer.

        Args:
            localization_path: Path of the exchange file to import
            project_container: Target project container identifier
        """
        self.localization_path = localization_path
        self.project_container = project_container

    @property
    @abstractmethod
    def command(self) -> list[str]:
        """Return the argument list this importer executes."""
        pass

    @abstractmethod
    def run(self) -> ImportResult:
        """
        Run the import.

        Returns:
            ImportResult with status and captured output. A failed import is
            reported through the status, not raised.
        """
        pass

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(path={self.localization_path}, "
            f"project={self.project_container})"
        )
