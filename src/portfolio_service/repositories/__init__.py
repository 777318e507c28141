"""Repository modules for MongoDB operations."""

from .about_repo import AboutRepository
from .project_repo import ProjectRepository
from .skill_repo import SkillRepository

__all__ = [
    "AboutRepository",
    "ProjectRepository",
    "SkillRepository",
]
