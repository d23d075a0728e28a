"""Shared Schemas — base classes and the bulk-delete result."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class CreateInput(BaseModel):
    """Base for create payloads — every declared field is required."""
    model_config = ConfigDict(populate_by_name=True)

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class UpdateInput(BaseModel):
    """Base for partial update payloads.

    Only fields that were sent with a non-null value reach the merge, so a
    field can be overwritten but never cleared.
    """
    model_config = ConfigDict(populate_by_name=True)

    def changes(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


class RecordOutput(BaseModel):
    """Base for response shapes built from core records."""
    model_config = ConfigDict(populate_by_name=True)


class DeleteAllOutput(BaseModel):
    """Result of a bulk delete."""
    count: int
