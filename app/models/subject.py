"""Pydantic models for documents in the subject index.

Field names are the JSON wire names and the Elasticsearch mapping names.
Missing or null fields decode to their zero value; wrong JSON types are
rejected.
``created_at`` is assigned by the server and never accepted from a client.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator


class SubjectPayload(BaseModel):
    """Request body for creating or replacing a subject."""
    model_config = ConfigDict(extra="ignore")

    ma_mh: StrictStr = Field(default="", description="Subject code, also the document id")
    ten_mon_hoc: StrictStr = Field(default="", description="Subject name")
    gvcn: StrictStr = Field(default="", description="Lecturer in charge")
    so_tin_chi: StrictInt = Field(default=0, description="Credit count")

    @field_validator("ma_mh", "ten_mon_hoc", "gvcn", mode="before")
    @classmethod
    def null_text_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("so_tin_chi", mode="before")
    @classmethod
    def null_count_is_zero(cls, value: Any) -> Any:
        return 0 if value is None else value


class Subject(SubjectPayload):
    """Full subject document as stored and returned by ``GET``."""

    created_at: datetime | None = None
