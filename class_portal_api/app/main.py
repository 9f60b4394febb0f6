"""
Main entrypoint for the Class Portal API.

This module assembles the FastAPI application, sets up logging,
builds the in‑memory store and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn class_portal_api.app.main:app --reload

Each application owns exactly one ``Storage``.  It is created (and,
unless disabled, seeded) here, before any request is served, and is
reachable by handlers through ``api.deps.get_storage``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .core.config import settings
from .core.logging_config import setup_logging
from .core.seed import seed_storage
from .core.storage import Storage
from .api.errors import install_error_handlers
from .api.router import router as api_router


def create_app(storage: Optional[Storage] = None, seed: Optional[bool] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[Storage]
        Store to serve.  A new empty store is created when omitted.
    seed : Optional[bool]
        Whether to load the fixture records into the store.  Defaults
        to ``settings.seed_on_startup``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the seed loader
    # can log what it created.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # The single-page client may be served from a different origin.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if storage is None:
        storage = Storage()
    if seed is None:
        seed = settings.seed_on_startup
    if seed:
        seed_storage(storage)
    app.state.storage = storage

    install_error_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)

    logger.info("%s %s ready, API under %s", settings.project_name, settings.api_version, settings.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
