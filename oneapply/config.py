from __future__ import annotations

import json
import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


# Load project-root .env early so both pydantic-settings and any direct os.getenv access
# see consistent values, even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=True)


def _parse_origins(raw: Any) -> list[str]:
    if raw is None:
        return []

    items: list[Any]
    if isinstance(raw, (list, tuple, set)):
        items = list(raw)
    elif isinstance(raw, str):
        s = raw.strip()
        if not s:
            return []

        # Support JSON array string or comma-separated string.
        if s.startswith("["):
            try:
                parsed = json.loads(s)
                items = parsed if isinstance(parsed, list) else [parsed]
            except ValueError:
                items = [p.strip() for p in s.split(",")]
        else:
            items = [p.strip() for p in s.split(",")]
    else:
        items = [raw]

    origins: list[str] = []
    for item in items:
        if item is None:
            continue
        origin = str(item).strip()
        if origin:
            origins.append(origin)
    return origins


class Settings(BaseSettings):
    app_name: str = Field(default="OneApply Backend")
    version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Profile store. DB_URL / ORM_DB_URL take precedence over the discrete DB_* settings.
    db_url: str | None = Field(default=None, validation_alias="DB_URL")
    orm_db_url: str | None = Field(default=None, validation_alias="ORM_DB_URL")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=3306, validation_alias="DB_PORT")
    db_name: str = Field(default="oneapply", validation_alias="DB_NAME")
    db_user: str = Field(default="root", validation_alias="DB_USER")
    db_password: str = Field(default="password", validation_alias="DB_PASSWORD")
    db_charset: str = Field(default="utf8mb4", validation_alias="DB_CHARSET")

    # NoDecode: the validator below accepts both JSON arrays and comma lists.
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"],
        validation_alias="CORS_ORIGINS",
    )

    # JSearch (RapidAPI). JSEARCH_API_KEY is accepted as a fallback name.
    rapidapi_key: str | None = Field(default=None, validation_alias="RAPIDAPI_KEY")
    jsearch_api_key: str | None = Field(default=None, validation_alias="JSEARCH_API_KEY")
    jsearch_base_url: str = Field(default="https://jsearch.p.rapidapi.com", validation_alias="JSEARCH_BASE_URL")
    jsearch_host: str = Field(default="jsearch.p.rapidapi.com", validation_alias="JSEARCH_HOST")
    jsearch_timeout_seconds: float = Field(default=15.0, validation_alias="JSEARCH_TIMEOUT_SECONDS")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> list[str]:
        return _parse_origins(v)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


def build_sqlalchemy_db_url(settings: Settings) -> str:
    # Prefer a dedicated ORM URL if provided.
    if settings.orm_db_url:
        return settings.orm_db_url
    if settings.db_url:
        return settings.db_url

    # Development and tests default to a local sqlite file.
    if settings.environment.lower() in ("development", "test"):
        return "sqlite:///./dev.db"

    return (
        f"mysql+pymysql://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
        f"?charset={settings.db_charset}"
    )


def get_rapidapi_key(settings: Settings) -> str | None:
    """Return the configured RapidAPI key, or None when neither variable is set."""

    for candidate in (settings.rapidapi_key, settings.jsearch_api_key):
        key = (candidate or "").strip()
        if key:
            return key
    return None
