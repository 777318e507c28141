"""About record model."""

from typing import Optional

from pydantic import BaseModel, Field

from .document import RecordRef, StoredFields


class AboutBase(BaseModel):
    """Base about attributes."""

    title: str = Field(..., min_length=1, max_length=200)
    subtitle: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)  # URL or data URL


class AboutCreate(AboutBase):
    """Schema for creating an about record."""

    pass


class AboutUpdate(RecordRef):
    """Schema for updating an about record."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    subtitle: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = Field(None, min_length=1)


class About(AboutBase, StoredFields):
    """Complete about record with metadata."""

    pass


DEFAULT_ABOUT = AboutCreate(
    title="Your Name",
    subtitle="Your Profession",
    description="Your description here...",
    image="/default-about.jpg",
)
