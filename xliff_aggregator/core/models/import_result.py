"""
ImportResult model representing the outcome of an external import run.
"""

from typing import List

from pydantic import BaseModel, Field


class ImportResult(BaseModel):
    """
    Outcome of running the external importer (ephemeral).

    Attributes:
        command: Argument list that was executed
        status: Process exit status
        stdout: Captured standard output (decoded)
        stderr: Captured standard error (decoded)
    """

    command: List[str] = Field(default_factory=list)
    status: int
    stdout: str = ""
    stderr: str = ""

    class Config:
        json_schema_extra = {
            "example": {
                "command": [
                    "xcodebuild",
                    "-importLocalizations",
                    "-localizationPath",
                    "./en-US.xliff",
                    "-project",
                    "feelgood.xcodeproj"
                ],
                "status": 0,
                "stdout": "** IMPORT SUCCEEDED **",
                "stderr": ""
            }
        }

    @property
    def succeeded(self) -> bool:
        return self.status == 0
