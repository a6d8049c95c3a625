from __future__ import annotations

import threading
import time
import webbrowser

import uvicorn

from folio.app.api import create_app
from folio.core.config import get_settings


def _browser_url(host: str, port: int) -> str:
    if host in {"0.0.0.0", "::", "::0", "[::]"}:
        host = "127.0.0.1"
    return f"http://{host}:{port}/"


def _open_browser_delayed(url: str) -> None:
    time.sleep(0.7)
    try:
        webbrowser.open(url)
    except Exception:  # noqa: BLE001
        pass


def run_web_server(host: str, port: int, no_open: bool = False) -> None:
    settings = get_settings()
    app = create_app(settings)

    url = _browser_url(host, port)
    print(f"Starting folio web at {url}")
    if not no_open:
        threading.Thread(target=_open_browser_delayed, args=(url,), daemon=True).start()

    uvicorn.run(app, host=host, port=port, log_level=settings.log_level)
