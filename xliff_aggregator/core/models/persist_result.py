"""
PersistResult model describing the outcome of writing a resource file.
"""

from pydantic import BaseModel, Field


class PersistResult(BaseModel):
    """
    Outcome of persisting a resource file (ephemeral).

    Attributes:
        path: File that was (or would have been) written
        changed: True only when new bytes were written to disk
        resource_count: Number of resources in the file's set at persist time
        checksum: MD5 of the serialized content, None if nothing was serialized
    """

    path: str
    changed: bool
    resource_count: int = Field(0, ge=0)
    checksum: str | None = None

    class Config:
        json_schema_extra = {
            "example": {
                "path": "en-US.xliff",
                "changed": True,
                "resource_count": 42,
                "checksum": "5d41402abc4b2a76b9719d911017c592"
            }
        }
