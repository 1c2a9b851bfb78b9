"""
Shared pydantic helpers for ClipStack request/response schemas.
"""

from datetime import datetime
from typing import Annotated, Any, ClassVar, Dict, Literal, Tuple

from pydantic import BaseModel, Field, model_validator


ProjectStatus = Literal["draft", "in_progress", "completed", "archived"]
MediaType = Literal["video", "image", "audio"]

# Integer and BigInteger column limits
MAX_INTEGER = 2**31 - 1
MAX_BIGINT = 2**63 - 1

EntityId = Annotated[int, Field(le=MAX_INTEGER, description="Primary key")]


class PartialUpdate(BaseModel):
    """
    Base for partial-update inputs.

    Field presence comes from ``model_fields_set``: a field missing from the
    payload is left unchanged, a field sent as ``null`` clears a nullable
    column. Columns listed in ``non_nullable_fields`` may be changed but
    never cleared.
    """

    non_nullable_fields: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="after")
    def reject_cleared_required_fields(self):
        cleared = sorted(
            name for name in self.non_nullable_fields
            if name in self.model_fields_set and getattr(self, name) is None
        )
        if cleared:
            raise ValueError(f"Field(s) cannot be null: {', '.join(cleared)}")
        return self

    def present_fields(self) -> Dict[str, Any]:
        """Fields explicitly provided by the caller, excluding ``id``."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name != "id"
        }


class DeleteResponse(BaseModel):
    """Result of a delete mutation."""

    success: bool


class HealthResponse(BaseModel):
    """Static health payload."""

    status: str
    timestamp: datetime
