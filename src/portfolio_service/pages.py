"""Page data loading and template rendering."""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

from fastapi.templating import Jinja2Templates

from .errors import PortfolioError

logger = logging.getLogger("portfolio_pages")

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


class PageStatus(str, Enum):
    """Lifecycle of a page's data."""

    LOADING = "loading"
    ERROR = "error"
    READY = "ready"


@dataclass
class PageState:
    """Data fetched for one page render."""

    status: PageStatus = PageStatus.LOADING
    data: dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def ready(self) -> bool:
        return self.status is PageStatus.READY


async def load_page(
    error_message: str,
    **loaders: Callable[[], Awaitable[Any]],
) -> PageState:
    """Run every loader concurrently.

    If any of them fails the page goes to the error state and every
    collection falls back to empty, so no partial data is shown.
    """
    state = PageState()
    names = list(loaders)

    try:
        results = await asyncio.gather(*(loader() for loader in loaders.values()))
    except PortfolioError as e:
        logger.warning(f"Page data failed to load: {e.message}")
        state.status = PageStatus.ERROR
        state.error = error_message
        state.data = {name: [] for name in names}
        return state

    state.status = PageStatus.READY
    state.data = dict(zip(names, results))
    return state
