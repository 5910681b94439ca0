"""
FastAPI application for the document store gateway.

Startup loads the config file named by DOCGATEWAY_CONFIG (default
config.json), configures logging and connects to MongoDB. A failed
connection or ping aborts startup.
"""

import contextlib
import logging
import os

from fastapi import FastAPI

from .config import Config
from .db import DEFAULT_DATABASE, GatewayFactory
from .routers import register_exception_handlers, router

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    Config.initialize(os.environ.get("DOCGATEWAY_CONFIG", "config.json"))
    logging.basicConfig(
        level=Config.log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    db_uri, db_name = Config.get_db_params()
    await GatewayFactory.initialize(db_uri, db_name or DEFAULT_DATABASE)
    try:
        yield
    finally:
        await GatewayFactory.close()


def create_app() -> FastAPI:
    app = FastAPI(title="Document Gateway", lifespan=lifespan)
    app.include_router(router)
    register_exception_handlers(app)
    return app


app = create_app()
