"""
Core data models for the XLIFF aggregation plugin.

All models use Pydantic for runtime validation and type safety.
"""

from .import_result import ImportResult
from .persist_result import PersistResult
from .project import Project
from .resource_record import ResourceRecord
from .write_report import WriteReport

__all__ = [
    "ResourceRecord",
    "Project",
    "PersistResult",
    "ImportResult",
    "WriteReport",
]
