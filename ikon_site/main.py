# ikon_site/main.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from ikon_site.api.errors import register_exception_handlers
from ikon_site.api.v1.api import api_router
from ikon_site.core.config import Settings, settings as default_settings
from ikon_site.core.log_config import configure_logging
from ikon_site.db.mixins import Base
from ikon_site.db.session import make_engine, make_session_factory
from ikon_site.services.inquiry_storage import DatabaseStorage, InquiryStorage
from ikon_site.web.routes import router as ui_router

# load DB models so Base.metadata is populated
import ikon_site.db.models  # noqa: F401

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "web" / "static"


def create_app(
    settings: Optional[Settings] = None,
    storage: Optional[InquiryStorage] = None,
) -> FastAPI:
    """
    Build the application.

    Without an explicit `storage`, inquiries go to the database at
    `settings.DATABASE_URL`.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings

    engine = None
    if storage is None:
        engine = make_engine(settings.DATABASE_URL)
        storage = DatabaseStorage(make_session_factory(engine))
    app.state.storage = storage

    @app.on_event("startup")
    def on_startup():
        if engine is not None and settings.CREATE_TABLES_ON_STARTUP:
            Base.metadata.create_all(bind=engine)
            logger.info("create_all done. Tables: %s", list(Base.metadata.tables.keys()))

    @app.on_event("shutdown")
    def on_shutdown():
        if engine is not None:
            engine.dispose()

    # Middleware
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.SECRET_KEY,
        same_site="lax",
        https_only=settings.ENV == "prod",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Static files
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # Routers
    app.include_router(api_router, prefix=settings.API_PREFIX)
    app.include_router(ui_router)

    @app.get("/health")
    def health():
        return {"status": "ok", "app": settings.APP_NAME}

    return app


app = create_app()
