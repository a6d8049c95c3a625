from __future__ import annotations

import re
from pathlib import Path

from fastapi import FastAPI
from fastapi.testclient import TestClient

from folio.app.api import create_app
from folio.core.config import Settings
from folio.core.content import default_portfolio
from folio.web.routes import build_web_router


def _build_settings(tmp_path: Path, **overrides: str) -> Settings:
    assets = tmp_path / "assets"
    assets.mkdir(parents=True, exist_ok=True)
    return Settings(_env_file=None, FOLIO_ASSETS_DIR=str(assets), **overrides)


def _build_client(tmp_path: Path) -> tuple[TestClient, Settings]:
    settings = _build_settings(tmp_path)
    app = FastAPI()
    app.include_router(build_web_router(settings=settings, portfolio=default_portfolio()))
    return TestClient(app), settings


def test_home_page_starts_dark_with_progress_bar(tmp_path: Path) -> None:
    client, _ = _build_client(tmp_path)

    for path in ("/", "/web", "/web/"):
        resp = client.get(path)
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        body = resp.text
        assert '<html lang="en" class="dark">' in body
        assert 'id="scroll-progress"' in body
        assert 'aria-label="Toggle theme"' in body
        assert "localStorage" not in body


def test_home_page_emits_configured_spring(tmp_path: Path) -> None:
    settings = _build_settings(tmp_path, FOLIO_SCROLL_STIFFNESS="400", FOLIO_SCROLL_DAMPING="30")
    app = FastAPI()
    app.include_router(build_web_router(settings=settings, portfolio=default_portfolio()))
    body = TestClient(app).get("/").text

    assert '"stiffness": 400.0' in body
    assert '"damping": 30.0' in body


def test_portfolio_json_matches_content(tmp_path: Path) -> None:
    client, _ = _build_client(tmp_path)

    resp = client.get("/api/portfolio")
    assert resp.status_code == 200
    payload = resp.json()
    assert [skill["name"] for skill in payload["skills"]][:2] == ["HTML / CSS", "JavaScript (ESNext)"]
    assert payload["projects"][0]["href"] is None
    assert payload["projects"][0]["repo"] == "#"


def test_assets_are_served_from_assets_dir(tmp_path: Path) -> None:
    client, settings = _build_client(tmp_path)
    (settings.assets_path / "resume.pdf").write_bytes(b"%PDF-fake")

    resp = client.get("/assets/resume.pdf")
    assert resp.status_code == 200
    assert resp.content == b"%PDF-fake"
    assert resp.headers["content-type"] == "application/pdf"

    missing = client.get("/assets/photo.jpg")
    assert missing.status_code == 404


def test_assets_cannot_escape_assets_dir(tmp_path: Path) -> None:
    client, _ = _build_client(tmp_path)
    (tmp_path / "secret.txt").write_text("nope", encoding="utf-8")

    resp = client.get("/assets/..%2Fsecret.txt")
    assert resp.status_code in {400, 404}
    assert resp.content != b"nope"


def test_create_app_exposes_health_and_home(tmp_path: Path) -> None:
    settings = _build_settings(tmp_path)
    client = TestClient(create_app(settings))

    assert client.get("/health").json() == {"status": "ok"}
    assert "Mahdi Hussain" in client.get("/").text


def _positioned_layers(body: str) -> dict[str, int]:
    layers: dict[str, int] = {}
    for index, match in enumerate(re.finditer(r"<[a-z]+\b([^>]*)>", body)):
        attrs = match.group(1)
        classes = re.search(r'class="([^"]*)"', attrs)
        if classes is None:
            continue
        tokens = classes.group(1).split()
        if "fixed" not in tokens and "sticky" not in tokens:
            continue
        z_values = [int(sign + digits) for sign, digits in re.findall(r"^(-?)z-(\d+)$", "\n".join(tokens), re.M)]
        assert len(z_values) == 1, tokens
        element_id = re.search(r'id="([^"]*)"', attrs)
        layers[element_id.group(1) if element_id else f"element-{index}"] = z_values[0]
    return layers


def test_scroll_progress_stacks_above_every_other_positioned_element(tmp_path: Path) -> None:
    client, _ = _build_client(tmp_path)
    layers = _positioned_layers(client.get("/").text)

    assert layers.pop("scroll-progress") == 50
    assert layers.pop("theme-toggle") == 40
    assert layers
    assert all(z < 50 for z in layers.values())
    assert sorted(layers.values()) == [-10, 40]
