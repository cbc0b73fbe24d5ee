"""
Aggregate xliff file type.

Claims a single, well-known xliff file, accumulates new, pseudo-localized
and extracted resources for the whole run, and on write() merges them into
that file, persists it and, when the file actually changed, imports it into
the Xcode project with xcodebuild.
"""

import os
from typing import Callable

from xliff_aggregator.core.config import PluginSettings
from xliff_aggregator.core.config.plugin_config import DEFAULT_CANONICAL_FILE
from xliff_aggregator.core.models import ImportResult, PersistResult, Project, WriteReport
from xliff_aggregator.core.resources import ResourceFile, TranslationSet
from xliff_aggregator.importers import BaseImporter, XcodeImporter
from xliff_aggregator.observability.logger import get_logger, log_operation
from xliff_aggregator.observability.metrics import (
    importer_runs_total,
    increment_counter,
    resource_file_writes_total,
    resources_merged_total,
    track_duration,
    write_duration_seconds,
)
from xliff_aggregator.xliff import XliffFile

from .file_type import FileType

logger = get_logger(__name__)

# Categories merged into the output file on write(). Extracted resources are
# assumed to be in the file already and are tracked for reporting only.
MERGED_CATEGORIES = ("new", "pseudo")

XLIFF_EXTENSION = ".xliff"


def is_import_required(persisted: PersistResult) -> bool:
    """Return True if the persisted file changed and must be re-imported."""
    return persisted.changed


class XliffFileType(FileType):
    """
    File type plugin for the aggregate xliff file of an iOS project.

    Only one resource file exists per plugin instance. It is created by the
    first new_file() call and kept for the rest of the run.
    """

    def __init__(
        self,
        project: Project,
        settings: PluginSettings | None = None,
        importer: BaseImporter | None = None,
        file_factory: Callable[..., ResourceFile] = XliffFile,
    ):
        """
        Initialize the xliff file type.

        Args:
            project: Project this plugin instance serves
            settings: Plugin settings; defaults apply when None
            importer: Importer to run after a changed write; built from
                settings on first use when None
            file_factory: Callable creating the resource file object
        """
        super().__init__(project)
        self.type = "xml"
        self.datatype = "xml"
        self.extensions = [XLIFF_EXTENSION]

        self.settings = settings
        self.canonical_file = os.path.normpath(
            settings.canonical_file if settings else DEFAULT_CANONICAL_FILE
        )
        self.importer = importer
        self.file_factory = file_factory
        self.file: ResourceFile | None = None

    def handles(self, path_name: str) -> bool:
        """
        Return True if the given path is the aggregate xliff file.

        Recognition is by exact normalized path, not by extension, so no
        other xliff file is ever claimed.

        Args:
            path_name: path to the file being questioned
        """
        logger.debug(f"XliffFileType handles {path_name}?")
        ret = os.path.normpath(path_name) == self.canonical_file
        logger.debug("Yes" if ret else "No")
        return ret

    def name(self) -> str:
        return "Xliff File Type"

    def new_file(self, path_name: str) -> ResourceFile:
        """
        Return the plugin's resource file, creating it on the first call.

        Later calls return the same object and ignore path_name.

        Args:
            path_name: Path the file is bound to if it is created now
        """
        if self.file is None:
            self.file = self.file_factory(
                project=self.project,
                path_name=path_name,
                source_locale=self.project.source_locale,
            )
        return self.file

    def get_resource_file(self) -> ResourceFile | None:
        """
        Return the xliff file that serves the current project, or None if
        new_file() has not been called yet.
        """
        return self.file

    def _category_set(self, category: str) -> TranslationSet:
        return {
            "new": self.newres,
            "pseudo": self.pseudo,
            "extracted": self.extracted,
        }[category]

    def write(self) -> WriteReport | None:
        """
        Write out the aggregated resources.

        New resources then pseudo resources are added to the resource file
        in set order, the file is persisted, and the importer runs once if
        the persist reported a change. A failing import is logged as a
        warning and does not fail the write.

        Returns:
            WriteReport, or None when no resource file exists yet

        Raises:
            OSError: If persisting the resource file fails
        """
        logger.debug("Writing xliff files")
        if self.file is None:
            logger.debug("No xliff file has been created. Nothing to write.")
            return None

        project_id = self.project.project_id
        with track_duration(write_duration_seconds, project_id=project_id):
            added = 0
            for category in MERGED_CATEGORIES:
                resources = self._category_set(category).get_all()
                logger.debug(f"There are {len(resources)} {category} resources to add.")
                for res in resources:
                    self.file.add_resource(res)
                    logger.debug(f"Added {res.reskey} to {self.file.path_name}")
                increment_counter(
                    resources_merged_total,
                    value=len(resources),
                    project_id=project_id,
                    category=category,
                )
                added += len(resources)

            with log_operation("Writing xliff file", logger=logger, path=self.file.path_name):
                persisted = self.file.write()

            increment_counter(
                resource_file_writes_total,
                project_id=project_id,
                outcome="changed" if persisted.changed else "unchanged",
            )

            import_result = None
            if is_import_required(persisted):
                import_result = self._run_import()

        return WriteReport(
            resources_added=added,
            persisted=persisted,
            import_result=import_result,
        )

    def _get_importer(self) -> BaseImporter | None:
        if self.importer is not None:
            return self.importer

        if self.settings is None:
            self.importer = XcodeImporter(
                localization_path=f"./{self.canonical_file}",
                project_container=f"{self.project.project_id}.xcodeproj",
                cwd=self.project.root_dir,
            )
        elif self.settings.importer.enabled:
            self.importer = XcodeImporter(
                localization_path=self.settings.localization_path,
                project_container=self.settings.project_container,
                executable=self.settings.importer.executable,
                cwd=self.project.root_dir,
            )
        return self.importer

    def _run_import(self) -> ImportResult | None:
        importer = self._get_importer()
        if importer is None:
            logger.info("Importer is disabled. Skipping import of the changed xliff file.")
            return None

        logger.info(
            f"executing {importer.command[0]} on the {self.project.project_id} project "
            "to import those translations. This may take a while..."
        )
        result = importer.run()

        if result.stdout:
            logger.info(result.stdout)
        if not result.succeeded:
            logger.warning(
                f"Execution failed: {' '.join(result.command)} exited with status {result.status}"
            )
        if result.stderr:
            logger.info(result.stderr)

        increment_counter(
            importer_runs_total,
            project_id=self.project.project_id,
            status="success" if result.succeeded else "failure",
        )
        logger.info(f"{importer.command[0]} done")
        return result
