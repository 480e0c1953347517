"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - catalog_backend selects exactly one CatalogStore implementation at startup

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: `python -m pizzeria` works next to pizza.sqlite
"""

from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


def async_database_url(url: str) -> str:
    """sqlite:///pizza.sqlite needs the aiosqlite driver for the async engine."""
    if isinstance(url, str) and url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Catalog store
    catalog_backend: Literal["sql", "json"] = "sql"
    database_url: str = "sqlite+aiosqlite:///./pizza.sqlite"
    data_dir: str = "./data"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_sqlite_driver(cls, v: str) -> str:
        return async_database_url(v)

    # Static assets
    public_dir: str = "public"
    image_base_url: str = "/public/pizzas"
    image_extension: str = "webp"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
