"""
Main entrypoint for the Clean Slate API.

This module assembles the FastAPI application: logging, CORS, error
handling, the participant routes under ``/api`` and, when present, the
static front‑end.  ``create_app`` builds and configures the app and
is also used by the tests with their own ``ParticipantStore``; the
module level ``app`` makes it easy to serve with uvicorn, e.g.::

    uvicorn clean_slate_api.app.main:app --reload
"""

import logging
import time
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import ParticipantNotFound, catch_unhandled_errors, participant_not_found_handler
from .core.logging_config import setup_logging
from .core.store import ParticipantStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[ParticipantStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[ParticipantStore]
        Store holding the participants served by this app.  A new,
        empty store is created when omitted.
    settings : Optional[Settings]
        Settings to use instead of the ones read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = store if store is not None else ParticipantStore()
    app.state.started_at = time.monotonic()

    # CORS is outermost so 500 responses carry CORS headers as well.
    app.middleware("http")(catch_unhandled_errors)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ParticipantNotFound, participant_not_found_handler)

    app.include_router(api_router, prefix="/api")

    # Mounted last so ``/api`` routes take precedence over files.
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        logger.info("Serving front-end from %s", static_dir.resolve())

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
