"""Project repository."""

from pymongo import DESCENDING

from ..models.project import Project
from .base import DocumentRepository


class ProjectRepository(DocumentRepository):
    """Repository for Project records, newest created first."""

    collection_name = "projects"
    model = Project
    label = "project"
    sort_order = [("created_at", DESCENDING), ("_id", DESCENDING)]
