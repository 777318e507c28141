"""Pydantic models for portfolio content."""

from .about import About, AboutCreate, AboutUpdate, DEFAULT_ABOUT
from .project import Project, ProjectCreate, ProjectUpdate
from .skill import Skill, SkillCreate, SkillUpdate
from .contact import ContactMessage, ContactReceipt
from .document import RecordRef, StoredFields

__all__ = [
    "About",
    "AboutCreate",
    "AboutUpdate",
    "DEFAULT_ABOUT",
    "Project",
    "ProjectCreate",
    "ProjectUpdate",
    "Skill",
    "SkillCreate",
    "SkillUpdate",
    "ContactMessage",
    "ContactReceipt",
    "RecordRef",
    "StoredFields",
]
