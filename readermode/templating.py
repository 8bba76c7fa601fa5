"""Server-side rendering of Jinja2 pages into complete HTML responses."""
from __future__ import annotations

import functools
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping

from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"
TEMPLATES = Jinja2Templates(directory=str(TEMPLATE_DIR))

DOCTYPE = "<!doctype html>\n"


@dataclass(frozen=True)
class Page:
    """A template plus the values it is rendered with.

    ``headers`` are extra response headers sent alongside the rendered page.
    """

    template: str
    context: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)


def render_page(page: Page) -> str:
    """Render ``page`` to a full HTML document string."""
    body = TEMPLATES.get_template(page.template).render(**page.context)
    return DOCTYPE + body


def html_view(func: Callable[..., Page]) -> Callable[..., HTMLResponse]:
    """Turn a route function returning a ``Page`` into one returning HTML.

    Errors raised while producing or rendering the page are left to FastAPI.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        page = func(*args, **kwargs)
        return HTMLResponse(content=render_page(page), headers=dict(page.headers))

    return wrapper
