"""Skill API endpoints."""

from fastapi import APIRouter

from ..errors import NotFound
from ..models.document import RecordRef
from ..models.skill import Skill, SkillCreate, SkillUpdate
from ..repositories.skill_repo import SkillRepository

router = APIRouter(prefix="/skills", tags=["Skills"])


@router.get("", response_model=list[Skill])
async def list_skills() -> list[Skill]:
    """List all skills, newest first."""
    return await SkillRepository.list_all()


@router.post("", response_model=Skill)
async def create_skill(data: SkillCreate) -> Skill:
    """Create a new skill."""
    return await SkillRepository.create(data)


@router.put("", response_model=Skill)
async def update_skill(data: SkillUpdate) -> Skill:
    """Update a skill."""
    skill = await SkillRepository.update(data)
    if not skill:
        raise NotFound("Skill not found")
    return skill


@router.delete("")
async def delete_skill(data: RecordRef) -> dict:
    await SkillRepository.delete(data.id)
    return {"success": True}
