"""
Base file type interface for extraction plugins.

All file type plugins must inherit from FileType and implement handles(),
name() and write().
"""

from abc import ABC, abstractmethod
from typing import Any

from xliff_aggregator.core.models import Project
from xliff_aggregator.core.resources import TranslationSet


class FileType(ABC):
    """
    Abstract base class for all file type plugins.

    A file type owns three accumulation sets for the whole run: extracted
    resources, new resources and pseudo-localized resources. The sets are
    created here and never reset.
    """

    def __init__(self, project: Project):
        """
        Initialize file type.

        Args:
            project: Project this plugin instance serves
        """
        self.project = project
        self.type: str | None = None
        self.datatype: str | None = None
        self.extensions: list[str] = []

        self.extracted = TranslationSet(project.source_locale)
        self.newres = TranslationSet(project.source_locale)
        self.pseudo = TranslationSet(project.source_locale)

    @abstractmethod
    def handles(self, path_name: str) -> bool:
        """Return True if this plugin is responsible for the given file."""
        pass

    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def write(self) -> Any:
        """Write out the aggregated resources for this file type."""
        pass

    def get_data_type(self) -> str | None:
        return self.datatype

    def get_resource_types(self) -> dict[str, Any]:
        return {}

    def get_extensions(self) -> list[str]:
        """
        Return the list of file name extensions that this plugin can process.
        """
        return self.extensions

    def get_extracted(self) -> TranslationSet:
        """
        Return the translation set containing all of the extracted resources
        for all instances of this type of file.
        """
        return self.extracted

    def add_set(self, translation_set: TranslationSet) -> None:
        """
        Add the contents of the given translation set to the extracted
        resources for this file type.

        Args:
            translation_set: set of resources to add to the current set
        """
        self.extracted.add_set(translation_set)

    def get_new(self) -> TranslationSet:
        """
        Return the translation set containing all of the new resources for
        all instances of this type of file.
        """
        return self.newres

    def get_pseudo(self) -> TranslationSet:
        """
        Return the translation set containing all of the pseudo localized
        resources for all instances of this type of file.
        """
        return self.pseudo

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(project={self.project.project_id})"
