"""Fields shared by every stored record."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field


class StoredFields(BaseModel):
    """Store-assigned identifier and timestamps."""

    id: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RecordRef(BaseModel):
    """Identifies a record in an update or delete body."""

    id: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("id", "_id"),
    )
