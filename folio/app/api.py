from __future__ import annotations

from fastapi import FastAPI

from folio.core.config import Settings, get_settings
from folio.core.content import load_portfolio
from folio.web.routes import build_web_router


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    portfolio = load_portfolio(settings)

    app = FastAPI(title="folio", version="0.1.0")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(build_web_router(settings=settings, portfolio=portfolio))
    return app
