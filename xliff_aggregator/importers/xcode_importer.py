"""
xcodebuild importer.

Runs `xcodebuild -importLocalizations` to pull an aggregated xliff file
into an Xcode project.
"""

import subprocess

from xliff_aggregator.core.models import ImportResult
from xliff_aggregator.observability.logger import get_logger

from .base_importer import BaseImporter

logger = get_logger(__name__)

# Exit statuses reported when the executable cannot be started at all
COMMAND_NOT_FOUND_STATUS = 127
COMMAND_NOT_EXECUTABLE_STATUS = 126


class XcodeImporter(BaseImporter):
    """
    Imports localizations into an Xcode project with xcodebuild.

    The call blocks until xcodebuild exits. There is no timeout.
    """

    def __init__(
        self,
        localization_path: str,
        project_container: str,
        executable: str = "xcodebuild",
        cwd: str | None = None,
    ):
        """
        Initialize xcodebuild importer.

        Args:
            localization_path: Path of the xliff file to import
            project_container: Xcode project, e.g. "feelgood.xcodeproj"
            executable: xcodebuild binary to run
            cwd: Working directory for the process (project root)
        """
        super().__init__(localization_path, project_container)
        self.executable = executable
        self.cwd = cwd

    @property
    def command(self) -> list[str]:
        return [
            self.executable,
            "-importLocalizations",
            "-localizationPath",
            self.localization_path,
            "-project",
            self.project_container,
        ]

    def run(self) -> ImportResult:
        command = self.command
        logger.debug(f"Running {' '.join(command)}")

        try:
            proc = subprocess.run(command, capture_output=True, cwd=self.cwd, check=False)
        except FileNotFoundError as e:
            return ImportResult(command=command, status=COMMAND_NOT_FOUND_STATUS, stderr=str(e))
        except OSError as e:
            return ImportResult(command=command, status=COMMAND_NOT_EXECUTABLE_STATUS, stderr=str(e))

        return ImportResult(
            command=command,
            status=proc.returncode,
            stdout=self._decode(proc.stdout),
            stderr=self._decode(proc.stderr),
        )

    @staticmethod
    def _decode(output: bytes | None) -> str:
        if not output:
            return ""
        return output.decode("utf-8", errors="replace")
