"""
WriteReport model summarizing one write pass of the aggregation pipeline.
"""

from pydantic import BaseModel, Field

from .import_result import ImportResult
from .persist_result import PersistResult


class WriteReport(BaseModel):
    """
    Summary of a single write() call.

    Attributes:
        resources_added: Records handed to the resource file (new + pseudo)
        persisted: Outcome of persisting the resource file
        import_result: Importer outcome, None when no import was triggered
    """

    resources_added: int = Field(0, ge=0)
    persisted: PersistResult
    import_result: ImportResult | None = None

    @property
    def imported(self) -> bool:
        return self.import_result is not None
