"""
Project model representing the host project a plugin instance serves.
"""

from pydantic import BaseModel, Field


class Project(BaseModel):
    """
    The localization project the plugin is working on.

    Attributes:
        project_id: Project identifier (used in logs and default import target)
        source_locale: Declared source locale of the project
        root_dir: Project root directory, used as the importer's working dir
    """

    project_id: str = Field(..., min_length=1)
    source_locale: str = "en-US"
    root_dir: str = "."

    class Config:
        json_schema_extra = {
            "example": {
                "project_id": "feelgood",
                "source_locale": "en-US",
                "root_dir": "/src/feelgood-ios"
            }
        }
