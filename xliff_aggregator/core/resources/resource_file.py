"""
Base interface for resource files that aggregate translation sets.

All resource files must inherit from ResourceFile and implement write().
"""

from abc import ABC, abstractmethod

from xliff_aggregator.core.models import PersistResult, Project, ResourceRecord

from .translation_set import TranslationSet


class ResourceFile(ABC):
    """
    Abstract base class for a single on-disk resource file.

    Each resource file owns exactly one path and one TranslationSet that
    accumulates the resources to be persisted there.
    """

    def __init__(self, project: Project, path_name: str, source_locale: str | None = None):
        """
        Initialize resource file.

        Args:
            project: Project the file belongs to
            path_name: Path of the file on disk
            source_locale: Source locale (defaults to the project's)
        """
        self.project = project
        self.path_name = path_name
        self.source_locale = source_locale or project.source_locale
        self.set = TranslationSet(self.source_locale)

    def add_resource(self, record: ResourceRecord) -> None:
        self.set.add(record)

    def add_set(self, translation_set: TranslationSet) -> None:
        self.set.add_set(translation_set)

    def get_translation_set(self) -> TranslationSet:
        """Return the set whose contents this file persists."""
        return self.set

    @abstractmethod
    def write(self) -> PersistResult:
        """
        Persist the file to disk.

        Returns:
            PersistResult whose `changed` flag reports whether new content
            was written

        Raises:
            OSError: If the file cannot be written
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path_name}, resources={self.set.size()})"
