"""Project API endpoints."""

from fastapi import APIRouter

from ..errors import NotFound
from ..models.document import RecordRef
from ..models.project import Project, ProjectCreate, ProjectUpdate
from ..repositories.project_repo import ProjectRepository

router = APIRouter(prefix="/projects", tags=["Projects"])


@router.get("", response_model=list[Project])
async def list_projects() -> list[Project]:
    """List all projects, newest first."""
    return await ProjectRepository.list_all()


@router.post("", response_model=Project)
async def create_project(data: ProjectCreate) -> Project:
    """Create a new project."""
    return await ProjectRepository.create(data)


@router.put("", response_model=Project)
async def update_project(data: ProjectUpdate) -> Project:
    """Update a project."""
    project = await ProjectRepository.update(data)
    if not project:
        raise NotFound("Project not found")
    return project


@router.delete("")
async def delete_project(data: RecordRef) -> dict:
    """Delete a project. Succeeds even if it was already gone."""
    await ProjectRepository.delete(data.id)
    return {"success": True}
