from __future__ import annotations

import logging
import threading
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.router import api_router
from app.core.config import Settings, load_settings
from app.core.logging import configure_logging
from app.nlp.adapter import AnnotationSource

logger = logging.getLogger(__name__)


def _default_annotation_source_factory(settings: Settings) -> AnnotationSource:
    # Import lazily so a missing spaCy model degrades health instead of crashing import.
    from app.nlp.english import load_english_annotation_source

    return load_english_annotation_source(settings)


def create_app(
    settings: Settings | None = None,
    annotation_source_factory: Callable[[Settings], AnnotationSource] = _default_annotation_source_factory,
) -> FastAPI:
    app_settings = settings or load_settings()
    configure_logging(app_settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        source: AnnotationSource | None = None
        try:
            source = annotation_source_factory(app_settings)
            app.state.nlp_ready = True
            app.state.nlp_error = None
        except Exception as exc:
            app.state.nlp_ready = False
            app.state.nlp_error = str(exc)
            logger.exception(
                "backend_nlp_startup_failed",
                extra={"nlp_model": app_settings.nlp_model},
            )
        app.state.annotation_source = source

        logger.info(
            "backend_startup",
            extra={
                "status": "ok" if app.state.nlp_ready else "degraded",
                "environment": app_settings.environment,
                "host": app_settings.host,
                "port": app_settings.port,
                "nlp_error": app.state.nlp_error,
                "nlp": source.metadata() if source else None,
                "compress_proper_nouns": app_settings.compress_proper_nouns,
            },
        )
        yield
        app.state.annotation_source = None
        app.state.nlp_ready = False

    app = FastAPI(title="ClearPhrase Backend", version="0.1.0", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.nlp_ready = False
    app.state.nlp_error = None
    app.state.annotation_source = None
    app.state.message_id = 0
    app.state.message_id_lock = threading.Lock()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(app_settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
