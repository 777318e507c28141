"""Skill repository."""

from ..models.skill import Skill
from .base import DocumentRepository


class SkillRepository(DocumentRepository):
    """Repository for Skill records."""

    collection_name = "skills"
    model = Skill
    label = "skill"
