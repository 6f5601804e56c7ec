"""Contacts API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ContactsError → JSON body with an `error` string
    - CORS configured from settings (not hardcoded)
    - Store connected before serving (lifespan startup), released once on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - A store connection failure propagates out of lifespan: uvicorn aborts startup
    - uvicorn owns SIGINT/SIGTERM; shutdown runs the lifespan exit, which releases the store
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contacts_api.api.error_handlers import register_error_handlers
from contacts_api.api.routes import contacts, health
from contacts_api.config import get_settings
from contacts_api.infrastructure.database import init_store
from contacts_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_store(
        settings.mongodb_url,
        db_name=settings.db_name,
        timeout_ms=settings.store_timeout_ms,
    )
    await manager.initialize()
    logger.info("Contacts API started")
    try:
        yield
    finally:
        logger.info("Contacts API shutting down")
        await manager.release()


app = FastAPI(
    title="Contacts API",
    description="API for managing contacts",
    version="1.0.0",
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(contacts.router)

register_error_handlers(app)


def run():
    """Console entry point: serve the app on the configured host/port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
