"""
ResourceRecord model representing a single localizable string unit.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from xliff_aggregator.utils.validation import (
    ValidationError as InputValidationError,
    validate_resource_key,
    validate_xml_text,
)


class ResourceRecord(BaseModel):
    """
    A single localizable string unit.

    Records are immutable once created. The aggregation pipeline only ever
    adds records to a set, it never edits the fields of a stored one.

    Attributes:
        reskey: Stable resource identifier
        source: Source-language text
        target: Translated text (absent before translation)
        source_locale: Locale of the source text
        target_locale: Locale of the target text, if any
        project: Project the string belongs to
        path_name: Source file the string was extracted from
        context: Disambiguating context for identical keys
        datatype: Data type of the originating file (e.g. "x-swift")
        comment: Translator note
        state: Translation state ("new", "translated", ...)
        res_type: Resource type, always "string" for this plugin
    """

    reskey: str = Field(..., min_length=1)
    source: str
    target: str | None = None
    source_locale: str = "en-US"
    target_locale: str | None = None
    project: str = ""
    path_name: str = ""
    context: str | None = None
    datatype: str | None = None
    comment: str | None = None
    state: str | None = None
    res_type: Literal["string"] = "string"

    @field_validator("reskey")
    @classmethod
    def check_reskey(cls, v):
        try:
            return validate_resource_key(v, "reskey")
        except InputValidationError as e:
            raise ValueError(str(e)) from e

    @field_validator("source", "target", "context", "comment")
    @classmethod
    def check_text(cls, v, info):
        try:
            return validate_xml_text(v, info.field_name)
        except InputValidationError as e:
            raise ValueError(str(e)) from e

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "reskey": "welcome.title",
                "source": "Welcome!",
                "target": "[Ŵéļçömé!]",
                "source_locale": "en-US",
                "target_locale": "zxx-XX",
                "project": "feelgood",
                "path_name": "Feelgood/Base.lproj/Main.strings",
                "datatype": "x-strings",
                "state": "new"
            }
        }

    @property
    def locale(self) -> str:
        """Locale this record is stored under: target locale, else source locale."""
        return self.target_locale or self.source_locale

    def hash_key(self) -> str:
        """
        Key identifying the slot this record occupies in a TranslationSet.

        Returns:
            Key built from type, project, locale, context and reskey
        """
        return "_".join([
            self.res_type,
            self.project,
            self.locale,
            self.context or "",
            self.reskey,
        ])
