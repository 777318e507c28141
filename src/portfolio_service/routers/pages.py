"""Public HTML pages."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from pydantic import ValidationError as PydanticValidationError

from ..errors import PortfolioError, ValidationError
from ..mailer import EmailClient, get_email_client
from ..models.contact import ContactMessage, ContactReceipt
from ..pages import load_page, templates
from ..repositories import AboutRepository, ProjectRepository, SkillRepository

router = APIRouter(tags=["Pages"], include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def home(request: Request):
    state = await load_page(
        "Failed to load data. Please try again later.",
        about=AboutRepository.get_current,
        projects=ProjectRepository.list_all,
        skills=SkillRepository.list_all,
    )
    return templates.TemplateResponse(request, "home.html", {"page": state})


@router.get("/about", response_class=HTMLResponse)
async def about(request: Request):
    state = await load_page(
        "Failed to load data. Please try again later.",
        about=AboutRepository.get_current,
    )
    return templates.TemplateResponse(request, "about.html", {"page": state})


@router.get("/projects", response_class=HTMLResponse)
async def projects(request: Request):
    state = await load_page(
        "Failed to load projects. Please try again later.",
        projects=ProjectRepository.list_all,
    )
    return templates.TemplateResponse(request, "projects.html", {"page": state})


@router.get("/contact", response_class=HTMLResponse)
async def contact_form(request: Request):
    return templates.TemplateResponse(
        request, "contact.html", {"form": {}, "status": None}
    )


@router.post("/contact", response_class=HTMLResponse)
async def submit_contact_form(
    request: Request,
    mailer: EmailClient = Depends(get_email_client),
):
    form = await request.form()
    values = {key: str(form.get(key, "")) for key in ("name", "email", "message")}

    try:
        message = ContactMessage.model_validate(values)
        await mailer.send(message)
    except PydanticValidationError as e:
        error = ValidationError.from_errors(e.errors())
    except PortfolioError as e:
        error = e
    else:
        status = {"submitted": True, "error": False, "message": ContactReceipt().message}
        return templates.TemplateResponse(
            request, "contact.html", {"form": {}, "status": status}
        )

    status = {"submitted": False, "error": True, "message": error.message}
    return templates.TemplateResponse(
        request,
        "contact.html",
        {"form": values, "status": status},
        status_code=error.status_code,
    )
