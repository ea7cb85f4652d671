"""
Main entrypoint for the User Directory API.

This module assembles the FastAPI application, sets up logging and
includes the API routers.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``.  Importing the app here makes it easy to run with uvicorn
or another ASGI server, e.g.::

    uvicorn user_api.app.main:app --reload

The application title, version and storage backend are provided via
``Settings`` from ``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.logging_config import setup_logging
from .repositories.user_repository import UserRepository, build_user_repository

logger = logging.getLogger(__name__)


def create_app(
    config: Optional[Settings] = None,
    repository: Optional[UserRepository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use instead of the module-level ``settings``.
    repository : Optional[UserRepository]
        Entity store to serve.  When omitted, the store selected by
        ``config.storage_backend`` is created on application start-up.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or settings
    # Initialise logging before anything else so that start-up can log.
    setup_logging(config.log_level, config.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.user_repository is None:
            app.state.user_repository = build_user_repository(config)
        logger.info("%s %s started", config.project_name, config.api_version)
        yield

    app = FastAPI(
        title=config.project_name,
        version=config.api_version,
        debug=config.debug,
        lifespan=lifespan,
    )
    app.state.user_repository = repository

    app.include_router(api_router)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
