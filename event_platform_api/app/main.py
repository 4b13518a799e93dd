"""
Main entrypoint for the Event Platform API.

This module assembles the FastAPI application: logging, exception
handlers, the origin gate and the routers.  MongoDB is connected and
every domain collection is registered in the lifespan handler, so a
storage or registration failure stops the server before it accepts
requests.  Run it with uvicorn, e.g.::

    uvicorn event_platform_api.app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from motor.motor_asyncio import AsyncIOMotorClient

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.cors import OriginGate
from .core.db import create_client, get_database, init_db
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: Optional[Settings] = None, mongo_client: Optional[AsyncIOMotorClient] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use instead of the environment-derived defaults.
    mongo_client : Optional[AsyncIOMotorClient]
        Client to use instead of connecting to ``config.mongodb_uri``.
        A client passed in is not closed on shutdown.
    """
    config = config or default_settings
    setup_logging(config.log_level, config.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        client = mongo_client if mongo_client is not None else create_client(config)
        try:
            app.state.models = await init_db(get_database(client, config))
            logger.info("%s %s started", config.project_name, config.api_version)
            yield
        finally:
            if mongo_client is None:
                client.close()

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug, lifespan=lifespan)
    app.state.origin_gate = OriginGate(config.origin_patterns)
    register_exception_handlers(app)
    app.include_router(api_router)
    return app


# Created at import time so that uvicorn can discover it.
app = create_app()
