"""Admin dashboard for editing portfolio content."""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from starlette.datastructures import UploadFile

from ..errors import NotFound, PortfolioError, ValidationError
from ..media import MediaIngestor, get_media_ingestor
from ..models.about import AboutCreate, AboutUpdate
from ..models.project import ProjectCreate, ProjectUpdate
from ..models.skill import SkillCreate, SkillUpdate
from ..pages import templates
from ..repositories import AboutRepository, ProjectRepository, SkillRepository
from ..repositories.base import DocumentRepository

logger = logging.getLogger("admin_dashboard")

router = APIRouter(prefix="/admin", tags=["Admin"], include_in_schema=False)


@dataclass(frozen=True)
class AdminTab:
    """One entity kind editable from the dashboard."""

    title: str
    repository: type[DocumentRepository]
    create_model: type[BaseModel]
    update_model: type[BaseModel]
    fields: tuple[str, ...]  # text fields, image is handled separately


TABS: dict[str, AdminTab] = {
    "projects": AdminTab(
        "Projects", ProjectRepository, ProjectCreate, ProjectUpdate,
        ("title", "subtitle", "description"),
    ),
    "skills": AdminTab(
        "Skills", SkillRepository, SkillCreate, SkillUpdate,
        ("name", "level", "category"),
    ),
    "about": AdminTab(
        "About Me", AboutRepository, AboutCreate, AboutUpdate,
        ("title", "subtitle", "description"),
    ),
}


def get_tab(tab: str) -> AdminTab:
    if tab not in TABS:
        raise NotFound(f"Unknown admin tab: {tab}")
    return TABS[tab]


async def render_dashboard(
    request: Request,
    tab_key: str,
    form: dict,
    editing_id: Optional[str] = None,
    error: Optional[str] = None,
    status_code: int = 200,
) -> HTMLResponse:
    """Render a tab with a freshly fetched list and the given form state."""
    tab = get_tab(tab_key)
    try:
        items = await tab.repository.list_all()
    except PortfolioError as e:
        logger.warning(f"Could not load {tab_key} list: {e.message}")
        items = []
        error = error or e.message

    return templates.TemplateResponse(
        request,
        "admin.html",
        {
            "tabs": TABS,
            "active": tab_key,
            "tab": tab,
            "items": items,
            "form": form,
            "editing_id": editing_id,
            "error": error,
        },
        status_code=status_code,
    )


@router.get("", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    tab: str = Query("projects"),
    edit: Optional[str] = Query(None),
):
    """Show one tab. With ``edit`` the form is pre-filled from that record."""
    admin_tab = get_tab(tab)
    form: dict = {}
    editing_id = None

    if edit:
        record = await admin_tab.repository.get_by_id(edit)
        if record is not None:
            form = record.model_dump()
            editing_id = record.id

    return await render_dashboard(request, tab, form, editing_id)


@router.post("/{tab}", response_class=HTMLResponse)
async def save_entry(
    request: Request,
    tab: str,
    ingestor: MediaIngestor = Depends(get_media_ingestor),
):
    """Create a record, or update it when the form carries an id."""
    admin_tab = get_tab(tab)
    form = await request.form()
    values = {name: str(form.get(name, "")).strip() for name in admin_tab.fields}
    record_id = str(form.get("id") or "") or None
    upload = form.get("image")

    try:
        payload = {k: v for k, v in values.items() if v}
        image = await ingestor.ingest(upload if isinstance(upload, UploadFile) else None)
        if image:
            payload["image"] = image

        if record_id:
            data = admin_tab.update_model.model_validate({"id": record_id, **payload})
            if await admin_tab.repository.update(data) is None:
                raise NotFound(f"{admin_tab.title} entry not found")
        else:
            data = admin_tab.create_model.model_validate(payload)
            await admin_tab.repository.create(data)
    except PydanticValidationError as e:
        error = ValidationError.from_errors(e.errors())
    except PortfolioError as e:
        error = e
    else:
        return RedirectResponse(f"/admin?tab={tab}", status_code=303)

    return await render_dashboard(
        request, tab, values, record_id, error.message, error.status_code
    )


@router.post("/{tab}/{record_id}/delete", response_class=HTMLResponse)
async def delete_entry(request: Request, tab: str, record_id: str):
    admin_tab = get_tab(tab)
    try:
        await admin_tab.repository.delete(record_id)
    except PortfolioError as e:
        return await render_dashboard(
            request, tab, {}, error=e.message, status_code=e.status_code
        )
    return RedirectResponse(f"/admin?tab={tab}", status_code=303)
