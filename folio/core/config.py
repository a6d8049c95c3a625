from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


REPO_ROOT = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_ignore_empty=True,
    )

    web_host: str = Field(default="127.0.0.1", alias="FOLIO_WEB_HOST")
    web_port: int = Field(default=8790, alias="FOLIO_WEB_PORT")
    log_level: str = Field(default="info", alias="FOLIO_LOG_LEVEL")

    assets_dir: str = Field(default="assets", alias="FOLIO_ASSETS_DIR")
    content_file: str | None = Field(default=None, alias="FOLIO_CONTENT_FILE")

    scroll_stiffness: float = Field(default=100.0, gt=0.0, alias="FOLIO_SCROLL_STIFFNESS")
    scroll_damping: float | None = Field(default=None, ge=0.0, alias="FOLIO_SCROLL_DAMPING")

    def resolve_path(self, path_value: str) -> Path:
        candidate = Path(path_value).expanduser()
        if candidate.is_absolute():
            return candidate
        return REPO_ROOT / candidate

    @property
    def assets_path(self) -> Path:
        return self.resolve_path(self.assets_dir)

    @property
    def content_path(self) -> Path | None:
        if not self.content_file:
            return None
        return self.resolve_path(self.content_file)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
