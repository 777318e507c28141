"""About API endpoints."""

from fastapi import APIRouter

from ..errors import NotFound
from ..models.about import About, AboutCreate, AboutUpdate
from ..models.document import RecordRef
from ..repositories.about_repo import AboutRepository

router = APIRouter(prefix="/about", tags=["About"])


@router.get("", response_model=About)
async def get_about() -> About:
    """Get the newest about record, creating the default one if none exist."""
    return await AboutRepository.get_current()


@router.post("", response_model=About)
async def create_about(data: AboutCreate) -> About:
    """Create an about record."""
    return await AboutRepository.create(data)


@router.put("", response_model=About)
async def update_about(data: AboutUpdate) -> About:
    """Update an about record."""
    about = await AboutRepository.update(data)
    if not about:
        raise NotFound("About entry not found")
    return about


@router.delete("")
async def delete_about(data: RecordRef) -> dict:
    """Delete an about record."""
    await AboutRepository.delete(data.id)
    return {"success": True}
