"""FastAPI application that previews rendered navbar menus."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from navwalker import (
    MenuLoadError,
    NavMenuOptions,
    PageContext,
    RenderConfig,
    parse_menu,
    render_nav_menu,
)

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

_LOGGER = logging.getLogger("navwalker.app")

app = FastAPI(title="Navbar Preview")


class PagePayload(BaseModel):
    """Active-page information sent along with a render request."""

    current_target_id: Optional[int] = None
    posts_page_id: Optional[int] = None
    home_id: int = 1
    is_archive_view: bool = False
    archive_post_type: Optional[str] = None

    def to_context(self) -> PageContext:
        return PageContext(**self.model_dump())


class RenderRequest(BaseModel):
    items: List[Dict[str, Any]] = Field(default_factory=list, description="Menu entries, flat or nested")
    config: RenderConfig = Field(default_factory=RenderConfig)
    options: NavMenuOptions = Field(default_factory=NavMenuOptions)
    page: PagePayload = Field(default_factory=PagePayload)
    brand: str = Field(default="Preview", description="Brand label shown by the preview page")


def _render(payload: RenderRequest) -> str:
    try:
        items = parse_menu(payload.items)
    except MenuLoadError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return render_nav_menu(
        items,
        config=payload.config,
        options=payload.options,
        page=payload.page.to_context(),
    )


@app.post("/render", response_class=HTMLResponse)
async def post_render(payload: RenderRequest) -> HTMLResponse:
    """Return the navbar menu fragment for ``payload``."""

    markup = _render(payload)
    _LOGGER.info("Rendered menu fragment with %d item(s)", len(payload.items))
    return HTMLResponse(markup)


@app.post("/preview", response_class=HTMLResponse)
async def post_preview(request: Request, payload: RenderRequest) -> HTMLResponse:
    """Return a complete Bulma page embedding the rendered navbar menu."""

    markup = _render(payload)
    return templates.TemplateResponse(
        request,
        "preview.html",
        {
            "brand": payload.brand,
            "menu": markup,
        },
    )
