"""Skill record model."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .document import RecordRef, StoredFields


def reject_bool_level(value: Any) -> Any:
    """JSON booleans would otherwise coerce to 0 or 1."""
    if isinstance(value, bool):
        raise ValueError("level must be an integer between 0 and 100")
    return value


class SkillBase(BaseModel):
    """Base skill attributes."""

    name: str = Field(..., min_length=1, max_length=100)
    level: int = Field(..., ge=0, le=100)  # percent
    category: str = Field(..., min_length=1, max_length=100)  # "Languages", "Frameworks", ...
    image: str = Field(..., min_length=1)

    check_level = field_validator("level", mode="before")(reject_bool_level)


class SkillCreate(SkillBase):
    """Schema for creating a skill."""

    pass


class SkillUpdate(RecordRef):
    """Schema for updating a skill."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    level: Optional[int] = Field(None, ge=0, le=100)
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    image: Optional[str] = Field(None, min_length=1)

    check_level = field_validator("level", mode="before")(reject_bool_level)


class Skill(SkillBase, StoredFields):
    """Complete skill model."""

    pass
