"""
Main entrypoint for the Chukgo lessons API.

This module assembles the FastAPI application, sets up logging and
includes versioned routers.  ``create_app`` builds and configures the
app around an ``EntityStore``; the module‑level ``app`` is what ASGI
servers import::

    uvicorn chukgo_api.app.main:app --reload

When no store is passed in, a fresh one is created and filled by
``init_store`` at startup (sample catalogue and administrator
account).  A store passed in is used as is.
"""

import logging
import time
from typing import Optional

from fastapi import FastAPI, Request

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.logging_config import setup_logging
from .core.seed import init_store
from .core.store import EntityStore

logger = logging.getLogger(__name__)


def create_app(store: Optional[EntityStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[EntityStore]
        Store to serve.  When omitted, a new store is created and
        initialised on the startup event.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store if store is not None else EntityStore()

    app.include_router(v1_router, prefix="/api/v1")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        if request.url.path.startswith("/api"):
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s %s in %.0fms", request.method, request.url.path, response.status_code, elapsed_ms
            )
        return response

    if store is None:
        @app.on_event("startup")
        async def startup_event() -> None:
            await init_store(app.state.store)

    return app


app = create_app()
