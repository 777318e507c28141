"""API and page routers."""

from .about import router as about_router
from .projects import router as projects_router
from .skills import router as skills_router
from .contact import router as contact_router
from .pages import router as pages_router
from .admin import router as admin_router

__all__ = [
    "about_router",
    "projects_router",
    "skills_router",
    "contact_router",
    "pages_router",
    "admin_router",
]
