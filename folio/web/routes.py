from __future__ import annotations

import mimetypes
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse, Response

from folio.core.config import Settings
from folio.core.models import Portfolio
from folio.core.scroll import SpringConfig
from folio.core.theme import ThemeController
from folio.web.page_contact import contact_html, footer_html
from folio.web.page_hero import about_html, hero_html
from folio.web.page_shell import (
    background_html,
    head_html,
    init_js,
    nav_html,
    page_config_js,
    scroll_progress_html,
    shared_js,
    theme_toggle_html,
)
from folio.web.page_work import projects_html, skills_html


def spring_config_from_settings(settings: Settings) -> SpringConfig:
    return SpringConfig(stiffness=settings.scroll_stiffness, damping=settings.scroll_damping)


def build_web_router(*, settings: Settings, portfolio: Portfolio) -> APIRouter:
    router = APIRouter()
    spring = spring_config_from_settings(settings)

    def _asset_path(name: str) -> Path:
        root = settings.assets_path.resolve()
        candidate = (root / name.strip().lstrip("/")).resolve()
        try:
            candidate.relative_to(root)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail="Asset path must stay inside assets directory") from exc
        if not candidate.exists() or not candidate.is_file():
            raise HTTPException(status_code=404, detail=f"Asset not found: {name}")
        return candidate

    @router.get("/", response_class=HTMLResponse)
    @router.get("/web", response_class=HTMLResponse)
    @router.get("/web/", response_class=HTMLResponse)
    def web_home() -> HTMLResponse:
        # Every page load starts a fresh session with the default theme.
        theme = ThemeController()
        theme.mount()
        year = datetime.now(UTC).year
        return HTMLResponse(render_page(portfolio, theme=theme, spring=spring, year=year))

    @router.get("/assets/{name:path}")
    def web_asset(name: str) -> Response:
        path = _asset_path(name)
        media_type = mimetypes.guess_type(path.name)[0] or "application/octet-stream"
        return Response(content=path.read_bytes(), media_type=media_type)

    @router.get("/api/portfolio")
    def web_portfolio() -> dict[str, Any]:
        return portfolio.model_dump(mode="json")

    return router


def render_page(portfolio: Portfolio, *, theme: ThemeController, spring: SpringConfig, year: int) -> str:
    root_class = theme.root.class_attr()
    class_attr = f' class="{root_class}"' if root_class else ""
    return (
        f'<!doctype html>\n<html lang="en"{class_attr}>\n  <head>\n'
        + head_html(f"{portfolio.profile.name} · Portfolio")
        + "\n  </head>\n"
        + '  <body class="min-h-[100svh] font-sans text-black dark:text-white bg-white dark:bg-neutral-950 '
        + 'selection:bg-amber-200 selection:text-black transition-colors duration-200">\n'
        + scroll_progress_html()
        + "\n"
        + background_html()
        + "\n"
        + theme_toggle_html(theme)
        + "\n"
        + nav_html(portfolio)
        + "\n    <main>\n"
        + hero_html(portfolio)
        + "\n"
        + about_html(portfolio)
        + "\n"
        + skills_html(portfolio)
        + "\n"
        + projects_html(portfolio)
        + "\n"
        + contact_html(portfolio)
        + "\n    </main>\n"
        + footer_html(portfolio, year)
        + "\n"
        + "    <script>\n"
        + page_config_js(spring)
        + "\n"
        + shared_js()
        + "\n"
        + init_js()
        + "\n"
        + "    </script>\n"
        + "  </body>\n</html>\n"
    )
