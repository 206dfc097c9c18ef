# app/main.py

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.core.logging import add_request_logging, setup_logging
from app.api.v1.api import api_router
from app.db.init_db import init_db, seed_categories
from app.db.session import SessionLocal

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.auto_create_tables:
        init_db()
        with SessionLocal() as db:
            seed_categories(db)
    logger.info("%s %s started", settings.PROJECT_NAME, settings.VERSION)
    yield


def create_application() -> FastAPI:
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.backend_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- LOGGING / ERRORS ----------
    add_request_logging(app)
    register_exception_handlers(app)

    # ---------- STATIC FILES ----------
    # Uploaded images are served from /static/uploads/*
    Path(settings.static_dir).mkdir(parents=True, exist_ok=True)
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

    # ---------- ROUTERS ----------
    @app.get("/healthcheck", response_class=PlainTextResponse, include_in_schema=False)
    def healthcheck():
        return "OK"

    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_application()
