# rookies/database/core/main.py
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Optional

from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from rookies.common.settings import get_settings

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def _engine_kwargs(url: str) -> Dict[str, Any]:
    cfg = get_settings().db
    kw: Dict[str, Any] = {"echo": cfg.echo, "future": True}
    if url.startswith("sqlite"):
        # FastAPI runs sync endpoints in a threadpool
        kw["connect_args"] = {"check_same_thread": False}
        return kw
    kw.update(
        pool_size=cfg.pool_size,
        max_overflow=cfg.max_overflow,
        pool_pre_ping=cfg.pool_pre_ping,
        pool_recycle=cfg.pool_recycle,
    )
    return kw


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    url = get_settings().database_url
    return create_engine(url, **_engine_kwargs(url))


@lru_cache(maxsize=1)
def get_sessionmaker() -> sessionmaker:
    return sessionmaker(bind=get_engine(), expire_on_commit=False, future=True, autoflush=False)


def init_db(engine: Optional[Engine] = None) -> None:
    """Create all tables known to Base.metadata (no-op for existing ones)."""
    # register models on the metadata
    import rookies.database.models  # noqa: F401

    Base.metadata.create_all(bind=engine or get_engine())
