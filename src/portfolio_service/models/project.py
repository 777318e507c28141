"""Project record model."""

from typing import Optional

from pydantic import BaseModel, Field

from .document import RecordRef, StoredFields


class ProjectBase(BaseModel):
    """Base project attributes."""

    title: str = Field(..., min_length=1, max_length=200)
    subtitle: str = Field(..., min_length=1, max_length=300)
    description: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)


class ProjectCreate(ProjectBase):
    """Schema for creating a project."""

    pass


class ProjectUpdate(RecordRef):
    """Schema for updating a project."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    subtitle: Optional[str] = Field(None, min_length=1, max_length=300)
    description: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = Field(None, min_length=1)


class Project(ProjectBase, StoredFields):
    """Complete project model with metadata."""

    pass
