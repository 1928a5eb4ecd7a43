# rookies/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Literal, Optional
from pydantic import BaseModel, Field, AliasChoices, field_validator, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_ROOT = Path(__file__).resolve().parent.parent


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = ""

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:8000"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False


class DBConfig(BaseModel):
    driver: str = "sqlite"
    name: str = "rookies.db"
    host: str = ""
    port: Optional[int] = None
    user: str = ""
    password: str = ""
    echo: bool = False
    pool_size: int = 5
    max_overflow: int = 10
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    # Optional single URL (if set, it takes precedence)
    url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url", "url"),
    )

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        if self.url:
            return self.url
        if self.driver.startswith("sqlite"):
            return f"{self.driver}:///{self.name}"
        port = f":{self.port}" if self.port else ""
        return f"{self.driver}://{self.user}:{self.password}@{self.host}{port}/{self.name}"


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "rookies"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Storage --------
    # Optional absolute override (takes precedence over the db sub-config)
    database_url_override: Optional[str] = Field(default=None, alias="DATABASE_URL")
    person_store: Literal["memory", "database"] = "memory"
    # seeds the in-memory store, and the people table when it is empty at startup
    seed_sample_data: bool = True

    # -------- Rendering --------
    templates_dir: Path = _PACKAGE_ROOT / "templates"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("seed_sample_data", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v, default=True)

    # ===== Convenience: DB URL =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return self.db.effective_url


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from rookies.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
