from __future__ import annotations

from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rookies.common.logging import get_logger
from rookies.common.settings import get_settings
from rookies.database.core.main import get_sessionmaker, init_db
from rookies.domain.errors import DuplicatePersonError
from rookies.services.people.database import SqlAlchemyPersonService
from rookies.services.people.memory import sample_people
from rookies.services.api.routers import health, rookies as rookies_routes

log = get_logger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI):
    cfg = get_settings()
    if cfg.person_store == "database":
        log.info("Initialising database schema")
        init_db()
        if cfg.seed_sample_data:
            with get_sessionmaker()() as db, db.begin():
                added = SqlAlchemyPersonService(db).seed(sample_people())
            log.info("Seeded %d sample people", added)
    yield


async def _duplicate_person_handler(request: Request, exc: DuplicatePersonError) -> JSONResponse:
    log.warning("Duplicate person id %s", exc.person_id)
    return JSONResponse(status_code=HTTPStatus.CONFLICT, content={"detail": str(exc)})


def create_app() -> FastAPI:
    cfg = get_settings()
    dev = cfg.app_env.lower() == "development"

    app = FastAPI(
        title="Rookies",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
        lifespan=_lifespan,
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials,
    )

    app.add_exception_handler(DuplicatePersonError, _duplicate_person_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(rookies_routes.router)
    return app
